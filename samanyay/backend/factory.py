"""Pick the backend named by SAMANYAY_BACKEND."""
import logging

from samanyay import config

logger = logging.getLogger(__name__)


def create_backend(kind: str = ""):
    kind = (kind or config.BACKEND).lower()
    if kind == "local":
        from samanyay.backend.local import LocalBackend
        logger.info("Using local backend at %s", config.DB_PATH)
        return LocalBackend(config.DB_PATH, config.SCHEMA_PATH)
    if kind == "supabase":
        from samanyay.backend.hosted import SupabaseBackend
        logger.info("Using hosted backend at %s", config.SUPABASE_URL)
        return SupabaseBackend(config.SUPABASE_URL, config.SUPABASE_KEY)
    raise ValueError(f"Unknown backend '{kind}' (expected 'local' or 'supabase')")
