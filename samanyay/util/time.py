"""Timestamp helpers."""
from datetime import datetime, timezone


def utcnow_iso() -> str:
    """Return current UTC time as ISO-8601 string with microseconds.

    Microseconds keep `ORDER BY created_at DESC` stable for rows created
    within the same second.
    """
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def fmt_date(iso: str) -> str:
    """Convert an ISO timestamp to a short calendar date, e.g. 'Mar 04, 2025'."""
    try:
        dt = datetime.fromisoformat(iso.replace("Z", "+00:00"))
        return dt.strftime("%b %d, %Y")
    except (AttributeError, ValueError):
        return iso or ""
