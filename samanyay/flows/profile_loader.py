"""Load the current user's single profile row."""
import logging
from dataclasses import dataclass
from typing import Optional

from samanyay.backend.base import BackendError, PROFILES
from samanyay.models import Profile
from samanyay.notifications import Notifier
from samanyay.session import SessionContext

logger = logging.getLogger(__name__)


@dataclass
class ProfileState:
    profile: Optional[Profile] = None
    in_progress: bool = False
    loaded: bool = False


def load_profile(state: ProfileState, session: SessionContext, backend, notifier: Notifier) -> None:
    """
    Replace `state.profile` with the user's profile row.

    "No row" leaves the profile unset without complaint: new accounts may not
    have one yet. Other failures are logged and toasted, and the previous
    profile is kept.
    """
    if state.in_progress or not session.signed_in:
        return
    state.in_progress = True
    try:
        row = backend.select_one(PROFILES, session.user.id, token=session.user.access_token)
        state.profile = Profile.from_row(row)
    except BackendError as e:
        if e.is_not_found:
            logger.warning("No profile row for user %s", session.user.id)
        else:
            logger.exception("Error fetching profile")
            notifier.error("Failed to load profile")
    finally:
        state.in_progress = False
        state.loaded = True
