"""Unique ID generation for users, profiles, and cases."""
import uuid


def new_id() -> str:
    """Return a random UUID4 string, the same shape the hosted platform assigns."""
    return str(uuid.uuid4())


def new_user_id() -> str:
    """Generate a unique user identifier."""
    return new_id()


def new_profile_id() -> str:
    """Generate a unique profile row identifier."""
    return new_id()


def new_case_id() -> str:
    """Generate a unique case row identifier."""
    return new_id()
