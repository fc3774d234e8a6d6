"""CRUD operations for all tables: users, profiles, cases."""
import sqlite3
import bcrypt
from typing import Optional

from samanyay.util.ids import new_user_id, new_profile_id, new_case_id
from samanyay.util.time import utcnow_iso


# ─────────────────────────────── USERS ────────────────────────────────────

def create_user(
    conn: sqlite3.Connection,
    email: str,
    password: str,
    first_name: str = "",
    last_name: str = "",
) -> str:
    """Insert a user and its profile row in one transaction; return the user id."""
    user_id = new_user_id()
    now = utcnow_iso()
    pw_hash = bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()
    with conn:
        conn.execute(
            "INSERT INTO users (id, email, password_hash, created_at) VALUES (?,?,?,?)",
            (user_id, email, pw_hash, now),
        )
        conn.execute(
            "INSERT INTO profiles (id, user_id, first_name, last_name, is_pro, created_at) "
            "VALUES (?,?,?,?,0,?)",
            (new_profile_id(), user_id, first_name, last_name, now),
        )
    return user_id


def authenticate_user(conn: sqlite3.Connection, email: str, password: str) -> Optional[str]:
    row = conn.execute("SELECT id, password_hash FROM users WHERE email=?", (email,)).fetchone()
    if row is None:
        return None
    if bcrypt.checkpw(password.encode(), row["password_hash"].encode()):
        return row["id"]
    return None


def email_exists(conn: sqlite3.Connection, email: str) -> bool:
    return conn.execute("SELECT 1 FROM users WHERE email=?", (email,)).fetchone() is not None


# ─────────────────────────────── PROFILES ─────────────────────────────────

def _profile_dict(row: sqlite3.Row) -> dict:
    d = dict(row)
    d["is_pro"] = bool(d["is_pro"])
    return d


def get_profile_for_user(conn: sqlite3.Connection, user_id: str) -> list[dict]:
    rows = conn.execute("SELECT * FROM profiles WHERE user_id=?", (user_id,)).fetchall()
    return [_profile_dict(r) for r in rows]


def update_profile_for_user(conn: sqlite3.Connection, user_id: str, values: dict) -> list[dict]:
    """Apply `values` to the user's profile; return the updated rows."""
    assignments = ", ".join(f"{col}=?" for col in values)
    params = [int(v) if isinstance(v, bool) else v for v in values.values()]
    with conn:
        conn.execute(f"UPDATE profiles SET {assignments} WHERE user_id=?", (*params, user_id))
    return get_profile_for_user(conn, user_id)


# ─────────────────────────────── CASES ────────────────────────────────────

def create_case(
    conn: sqlite3.Connection,
    *,
    user_id: str,
    title: str,
    description: Optional[str] = None,
    status: str = "active",
    file_count: int = 0,
) -> dict:
    case_id = new_case_id()
    now = utcnow_iso()
    with conn:
        conn.execute(
            """INSERT INTO cases
            (id, user_id, title, description, status, file_count, created_at, updated_at)
            VALUES (?,?,?,?,?,?,?,?)""",
            (case_id, user_id, title, description, status, file_count, now, now),
        )
    return dict(conn.execute("SELECT * FROM cases WHERE id=?", (case_id,)).fetchone())


def list_cases_for_user(
    conn: sqlite3.Connection,
    user_id: str,
    order_by: str = "created_at",
    descending: bool = True,
) -> list[dict]:
    if order_by not in ("created_at", "updated_at", "title"):
        raise ValueError(f"Unsupported order column: {order_by}")
    direction = "DESC" if descending else "ASC"
    rows = conn.execute(
        f"SELECT * FROM cases WHERE user_id=? ORDER BY {order_by} {direction}", (user_id,)
    ).fetchall()
    return [dict(r) for r in rows]
