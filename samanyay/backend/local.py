"""SQLite + bcrypt backend that mimics the hosted platform's auth and row API."""
import logging
import sqlite3
from pathlib import Path
from typing import Optional

from samanyay.backend.base import (
    AuthResult, BackendError, User,
    PROFILES, CASES, NOT_FOUND_CODE, CHECK_VIOLATION_CODE, LOCAL_ERROR_CODE,
)
from samanyay.db.db import get_conn, init_db
from samanyay.db import repo
from samanyay.util.validation import row_schema, validate

logger = logging.getLogger(__name__)

_INSERT_SCHEMAS = {CASES: "case_insert"}
_UPDATE_SCHEMAS = {PROFILES: "profile_update"}


class LocalBackend:
    def __init__(self, db_path: Path, schema_path: Path):
        self.db_path = db_path
        init_db(db_path, schema_path)

    def _conn(self) -> sqlite3.Connection:
        return get_conn(self.db_path)

    # ── Session provider ──────────────────────────────────────────────────

    def sign_up(self, email: str, password: str, first_name: str, last_name: str) -> AuthResult:
        email = email.strip().lower()
        conn = self._conn()
        if repo.email_exists(conn, email):
            return AuthResult(error="User already registered")
        try:
            user_id = repo.create_user(conn, email, password, first_name.strip(), last_name.strip())
        except sqlite3.Error as e:
            logger.exception("Local sign-up failed")
            return AuthResult(error=str(e))
        logger.info("Registered user %s", user_id)
        return AuthResult(user=User(id=user_id, email=email))

    def sign_in(self, email: str, password: str) -> AuthResult:
        email = email.strip().lower()
        uid = repo.authenticate_user(self._conn(), email, password)
        if not uid:
            return AuthResult(error="Invalid login credentials")
        return AuthResult(user=User(id=uid, email=email))

    def sign_out(self, token: Optional[str] = None) -> AuthResult:
        # Sessions live in the browser state; nothing to revoke locally.
        return AuthResult()

    # ── Row store ─────────────────────────────────────────────────────────

    def select_one(self, table: str, owner_id: str, token: Optional[str] = None) -> dict:
        rows = self._run(self._select, table, owner_id)
        if len(rows) != 1:
            raise BackendError(
                NOT_FOUND_CODE,
                f"JSON object requested, multiple (or no) rows returned ({len(rows)} rows)",
            )
        return rows[0]

    def select_all(self, table: str, owner_id: str, order_by: str = "created_at",
                   descending: bool = True, token: Optional[str] = None) -> list[dict]:
        return self._run(self._select, table, owner_id, order_by, descending)

    def insert(self, table: str, row: dict, token: Optional[str] = None) -> dict:
        if table != CASES:
            raise BackendError(LOCAL_ERROR_CODE, f"Inserts into '{table}' are not supported")
        self._check(row, _INSERT_SCHEMAS[table])
        return self._run(repo.create_case, self._conn(), **row)

    def update(self, table: str, owner_id: str, values: dict, token: Optional[str] = None) -> list[dict]:
        if table != PROFILES:
            raise BackendError(LOCAL_ERROR_CODE, f"Updates to '{table}' are not supported")
        self._check(values, _UPDATE_SCHEMAS[table])
        return self._run(repo.update_profile_for_user, self._conn(), owner_id, values)

    # ── Internals ─────────────────────────────────────────────────────────

    def _select(self, table: str, owner_id: str, order_by: str = "created_at",
                descending: bool = True) -> list[dict]:
        conn = self._conn()
        if table == PROFILES:
            return repo.get_profile_for_user(conn, owner_id)
        if table == CASES:
            return repo.list_cases_for_user(conn, owner_id, order_by, descending)
        raise BackendError(LOCAL_ERROR_CODE, f"Unknown table '{table}'")

    @staticmethod
    def _check(payload: dict, schema_name: str) -> None:
        errors = validate(payload, row_schema(schema_name))
        if errors:
            raise BackendError(CHECK_VIOLATION_CODE, errors[0])

    @staticmethod
    def _run(fn, *args, **kwargs):
        try:
            return fn(*args, **kwargs)
        except (sqlite3.Error, ValueError) as e:
            raise BackendError(LOCAL_ERROR_CODE, str(e)) from e
