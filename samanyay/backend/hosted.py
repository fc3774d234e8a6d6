"""Hosted backend: thin adapter over the Supabase Python client.

One client serves every browser session. The client's own stored sign-in is
never used for rows: each row store call sets the caller's access token on the
PostgREST session while holding a lock, so queries from concurrent sessions
cannot go out under another user's JWT.
"""
import logging
import threading
from contextlib import contextmanager
from typing import Optional

from postgrest.exceptions import APIError
from supabase import Client, create_client

from samanyay.backend.base import AuthResult, BackendError, User, LOCAL_ERROR_CODE

logger = logging.getLogger(__name__)


def _auth_message(exc: Exception) -> str:
    return getattr(exc, "message", None) or str(exc)


def _to_backend_error(exc: APIError) -> BackendError:
    return BackendError(exc.code or LOCAL_ERROR_CODE, exc.message or str(exc))


def _to_user(res, email: str) -> User:
    token = res.session.access_token if res.session is not None else None
    return User(id=res.user.id, email=res.user.email or email, access_token=token)


class SupabaseBackend:
    def __init__(self, url: str, key: str):
        if not url or not key:
            raise ValueError("SUPABASE_URL and SUPABASE_KEY must be set for the hosted backend")
        self.client: Client = create_client(url, key)
        self._key = key
        self._lock = threading.Lock()

    @contextmanager
    def _rest(self, token: Optional[str]):
        """Yield the PostgREST client authorised as `token` (anon key when signed out)."""
        with self._lock:
            rest = self.client.postgrest
            rest.auth(token or self._key)
            yield rest

    # ── Session provider ──────────────────────────────────────────────────

    def sign_up(self, email: str, password: str, first_name: str, last_name: str) -> AuthResult:
        try:
            with self._lock:
                res = self.client.auth.sign_up({
                    "email": email,
                    "password": password,
                    "options": {"data": {"first_name": first_name, "last_name": last_name}},
                })
        except Exception as e:
            logger.warning("Sign-up rejected: %s", _auth_message(e))
            return AuthResult(error=_auth_message(e))
        if res.user is None:
            return AuthResult(error="Sign-up did not return a user")
        return AuthResult(user=_to_user(res, email))

    def sign_in(self, email: str, password: str) -> AuthResult:
        try:
            with self._lock:
                res = self.client.auth.sign_in_with_password({"email": email, "password": password})
        except Exception as e:
            logger.warning("Sign-in rejected: %s", _auth_message(e))
            return AuthResult(error=_auth_message(e))
        if res.user is None:
            return AuthResult(error="Sign-in did not return a user")
        return AuthResult(user=_to_user(res, email))

    def sign_out(self, token: Optional[str] = None) -> AuthResult:
        """Revoke only the caller's session; other signed-in users are untouched."""
        if not token:
            return AuthResult()
        try:
            self.client.auth.admin.sign_out(token, "local")
        except Exception as e:
            return AuthResult(error=_auth_message(e))
        return AuthResult()

    # ── Row store ─────────────────────────────────────────────────────────

    def select_one(self, table: str, owner_id: str, token: Optional[str] = None) -> dict:
        try:
            with self._rest(token) as rest:
                res = rest.from_(table).select("*").eq("user_id", owner_id).single().execute()
        except APIError as e:
            raise _to_backend_error(e) from e
        return res.data

    def select_all(self, table: str, owner_id: str, order_by: str = "created_at",
                   descending: bool = True, token: Optional[str] = None) -> list[dict]:
        try:
            with self._rest(token) as rest:
                res = (
                    rest.from_(table)
                    .select("*")
                    .eq("user_id", owner_id)
                    .order(order_by, desc=descending)
                    .execute()
                )
        except APIError as e:
            raise _to_backend_error(e) from e
        return res.data or []

    def insert(self, table: str, row: dict, token: Optional[str] = None) -> dict:
        try:
            with self._rest(token) as rest:
                res = rest.from_(table).insert(row).execute()
        except APIError as e:
            raise _to_backend_error(e) from e
        if not res.data:
            raise BackendError(LOCAL_ERROR_CODE, "Insert returned no row")
        return res.data[0]

    def update(self, table: str, owner_id: str, values: dict, token: Optional[str] = None) -> list[dict]:
        try:
            with self._rest(token) as rest:
                res = rest.from_(table).update(values).eq("user_id", owner_id).execute()
        except APIError as e:
            raise _to_backend_error(e) from e
        return res.data or []
