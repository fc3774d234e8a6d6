"""
Shared contract for the data platform backends.

A backend is one object exposing two surfaces:

  Session provider
    sign_up(email, password, first_name, last_name) -> AuthResult
    sign_in(email, password) -> AuthResult
    sign_out(token=None) -> AuthResult

  Row store (owner-scoped, one table per entity)
    select_one(table, owner_id, token=None) -> dict
    select_all(table, owner_id, order_by="created_at", descending=True, token=None) -> list[dict]
    insert(table, row, token=None) -> dict
    update(table, owner_id, values, token=None) -> list[dict]

A backend instance is shared by every browser session, so it holds no
per-user sign-in. The signed-in user's access token travels on `User` and is
passed as `token` to each row store call and to `sign_out`. Backends without
tokens ignore it.

Row store failures raise BackendError. A `select_one` that matches no row
raises BackendError with NOT_FOUND_CODE, the same code PostgREST uses when
`.single()` finds zero rows.
"""
from dataclasses import dataclass, field
from typing import Optional

PROFILES = "profiles"
CASES = "cases"

NOT_FOUND_CODE = "PGRST116"
CHECK_VIOLATION_CODE = "23514"
LOCAL_ERROR_CODE = "local_error"


class BackendError(Exception):
    """A row store failure carrying the platform's machine-readable code."""

    def __init__(self, code: str, message: str):
        super().__init__(f"[{code}] {message}")
        self.code = code
        self.message = message

    @property
    def is_not_found(self) -> bool:
        return self.code == NOT_FOUND_CODE


@dataclass(frozen=True)
class User:
    id: str
    email: str
    access_token: Optional[str] = field(default=None, repr=False, compare=False)


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a session provider call: a user, or a human-readable error."""
    user: Optional[User] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
