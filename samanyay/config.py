"""Central configuration loaded from environment variables / .env file."""
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

ROOT = Path(__file__).resolve().parent.parent

# ── Product ────────────────────────────────────────────────────────────────
APP_TITLE: str = "Samanyay"
APP_TAGLINE: str = "Legal Case Management"
PRO_PLAN_NAME: str = "Samanyay Pro (Monthly)"
PRO_PRICE_DISPLAY: str = os.getenv("SAMANYAY_PRO_PRICE", "₹2,999")
MIN_PASSWORD_LENGTH: int = 6

# ── Backend ────────────────────────────────────────────────────────────────
BACKEND: str = os.getenv("SAMANYAY_BACKEND", "local").lower()
SUPABASE_URL: str = os.getenv("SUPABASE_URL", "")
SUPABASE_KEY: str = os.getenv("SUPABASE_KEY", "")

# ── Payment ────────────────────────────────────────────────────────────────
_delay_env = os.getenv("SAMANYAY_PAYMENT_DELAY", "").strip()
PAYMENT_DELAY_SECONDS: float = float(_delay_env) if _delay_env else 2.0

# ── Storage ────────────────────────────────────────────────────────────────
_storage_env = os.getenv("SAMANYAY_STORAGE_DIR", "")
STORAGE_DIR: Path = Path(_storage_env) if _storage_env else ROOT / "samanyay_app" / "storage"

_db_env = os.getenv("SAMANYAY_DB_PATH", "")
DB_PATH: Path = Path(_db_env) if _db_env else STORAGE_DIR / "samanyay.db"

SCHEMA_PATH: Path = ROOT / "samanyay" / "db" / "schema.sql"
ROW_SCHEMAS_DIR: Path = ROOT / "samanyay" / "db" / "schemas"

# ── Logging ────────────────────────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("SAMANYAY_LOG_LEVEL", "INFO").upper()
