from pathlib import Path
from typing import Optional

from samanyay import config
from samanyay.db.db import init_db


def ensure_storage(storage_dir: Path, db_path: Optional[Path] = None) -> None:
    """
    Create a writable storage area for the local backend's sqlite database.
    No-op beyond the directory when the hosted backend is configured.
    """
    storage_dir.mkdir(parents=True, exist_ok=True)
    if config.BACKEND != "local":
        return

    db_path = db_path or config.DB_PATH
    if not config.SCHEMA_PATH.exists():
        raise FileNotFoundError(f"{config.SCHEMA_PATH} not found")
    init_db(db_path, config.SCHEMA_PATH)


if __name__ == "__main__":
    ensure_storage(config.STORAGE_DIR, config.DB_PATH)
    print(f"Storage ready at {config.STORAGE_DIR}")
