"""Sign-in, registration and sign-out flows with client-side validation."""
import logging
import re
from dataclasses import dataclass
from typing import Optional

from samanyay import config
from samanyay.notifications import Notifier
from samanyay.session import Route, SessionContext

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

MSG_REQUIRED = "Please fill in all fields"
MSG_PASSWORD_SHORT = f"Password must be at least {config.MIN_PASSWORD_LENGTH} characters long"
MSG_PASSWORD_MISMATCH = "Passwords do not match"
MSG_EMAIL_INVALID = "Please enter a valid email address"
MSG_UNEXPECTED = "An unexpected error occurred"


@dataclass(frozen=True)
class FormOutcome:
    """Inline error to show (if any) and where to navigate (if anywhere)."""
    error: Optional[str] = None
    route: Optional[Route] = None


def _check_password_and_email(email: str, password: str) -> Optional[str]:
    if len(password) < config.MIN_PASSWORD_LENGTH:
        return MSG_PASSWORD_SHORT
    return None if EMAIL_RE.match(email) else MSG_EMAIL_INVALID


def validate_registration(first_name: str, last_name: str, email: str,
                          password: str, confirm_password: str) -> Optional[str]:
    """Return the first failing rule's message, or None when the form is valid."""
    if not all([first_name, last_name, email, password, confirm_password]):
        return MSG_REQUIRED
    if len(password) < config.MIN_PASSWORD_LENGTH:
        return MSG_PASSWORD_SHORT
    if password != confirm_password:
        return MSG_PASSWORD_MISMATCH
    if not EMAIL_RE.match(email):
        return MSG_EMAIL_INVALID
    return None


def validate_login(email: str, password: str) -> Optional[str]:
    if not email or not password:
        return MSG_REQUIRED
    return _check_password_and_email(email, password)


def register(first_name: str, last_name: str, email: str, password: str, confirm_password: str,
             session: SessionContext, backend, notifier: Notifier) -> FormOutcome:
    error = validate_registration(first_name, last_name, email, password, confirm_password)
    if error:
        return FormOutcome(error=error)
    try:
        result = backend.sign_up(email, password, first_name, last_name)
    except Exception:
        logger.exception("Unexpected error during registration")
        notifier.error("Registration failed")
        return FormOutcome(error=MSG_UNEXPECTED)
    if not result.ok:
        notifier.error(f"Registration failed: {result.error}")
        return FormOutcome(error=result.error)
    session.start(result.user)
    notifier.success("Registration successful! Please check your email for verification.")
    return FormOutcome(route=Route.DASHBOARD)


def login(email: str, password: str, session: SessionContext, backend, notifier: Notifier) -> FormOutcome:
    error = validate_login(email, password)
    if error:
        return FormOutcome(error=error)
    try:
        result = backend.sign_in(email, password)
    except Exception:
        logger.exception("Unexpected error during login")
        notifier.error("Login failed")
        return FormOutcome(error=MSG_UNEXPECTED)
    if not result.ok:
        notifier.error(f"Login failed: {result.error}")
        return FormOutcome(error=result.error)
    session.start(result.user)
    logger.info("User %s signed in", result.user.id)
    notifier.success("Login successful!")
    return FormOutcome(route=Route.DASHBOARD)


def logout(session: SessionContext, backend, notifier: Notifier) -> FormOutcome:
    result = backend.sign_out(token=session.user.access_token if session.user else None)
    if not result.ok:
        logger.error("Sign-out failed: %s", result.error)
        notifier.error("Failed to logout")
        return FormOutcome(error=result.error)
    session.clear()
    notifier.success("Logged out successfully")
    return FormOutcome(route=Route.HOME)
