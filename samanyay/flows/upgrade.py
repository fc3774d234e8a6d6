"""
Upgrade to Pro: a three-step flow with a simulated payment.

  OFFER      pricing and features; advance() moves to PAYING
  PAYING     order summary; complete_payment() waits, flips is_pro, moves to SUCCEEDED;
             back() returns to OFFER while no payment is running
  SUCCEEDED  terminal; unlocked features and a way back to the dashboard

A profile that is already Pro when the screen opens shows the ALREADY_PRO view
and never enters OFFER or PAYING.
"""
import dataclasses
import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from samanyay import config
from samanyay.backend.base import BackendError, PROFILES
from samanyay.flows.profile_loader import ProfileState, load_profile
from samanyay.notifications import Notifier
from samanyay.session import SessionContext

logger = logging.getLogger(__name__)


class UpgradeStep(str, Enum):
    OFFER = "offer"
    PAYING = "paying"
    SUCCEEDED = "succeeded"


class UpgradeView(str, Enum):
    LOADING = "loading"
    ALREADY_PRO = "already_pro"
    OFFER = "offer"
    PAYING = "paying"
    SUCCEEDED = "succeeded"


PRO_FEATURES: list[tuple[str, str]] = [
    ("Unlimited Cases", "Create and manage unlimited legal cases"),
    ("Advanced Document Management", "Upload, organize, and search through case documents"),
    ("Enhanced Security", "Bank-level encryption and secure cloud storage"),
    ("Team Collaboration", "Share cases and collaborate with team members"),
    ("Priority Support", "Get priority customer support and assistance"),
]


@dataclass
class UpgradeState:
    profile: ProfileState = field(default_factory=ProfileState)
    step: UpgradeStep = UpgradeStep.OFFER
    processing: bool = False

    def view(self) -> UpgradeView:
        if not self.profile.loaded or self.profile.profile is None:
            return UpgradeView.LOADING
        if self.step is UpgradeStep.SUCCEEDED:
            return UpgradeView.SUCCEEDED
        if self.profile.profile.is_pro:
            return UpgradeView.ALREADY_PRO
        return UpgradeView(self.step.value)

    def advance(self) -> None:
        if self.step is UpgradeStep.OFFER:
            self.step = UpgradeStep.PAYING

    def back(self) -> None:
        if self.step is UpgradeStep.PAYING and not self.processing:
            self.step = UpgradeStep.OFFER


def open_upgrade(state: UpgradeState, session: SessionContext, backend, notifier: Notifier) -> None:
    """Reset to the offer and reload the profile; already-Pro users see ALREADY_PRO.

    A payment still in flight keeps the screen on PAYING untouched.
    """
    if state.processing:
        return
    state.step = UpgradeStep.OFFER
    state.profile.loaded = False
    load_profile(state.profile, session, backend, notifier)


def complete_payment(
    state: UpgradeState,
    session: SessionContext,
    backend,
    notifier: Notifier,
    delay: Optional[float] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> bool:
    """Simulate the gateway round trip, then mark the profile Pro. Returns True on success."""
    profile = state.profile.profile
    if (state.processing or state.step is not UpgradeStep.PAYING
            or not session.signed_in or profile is None):
        return False

    state.processing = True
    try:
        sleep(config.PAYMENT_DELAY_SECONDS if delay is None else delay)
        backend.update(PROFILES, session.user.id, {"is_pro": True}, token=session.user.access_token)
    except BackendError:
        logger.exception("Error processing payment")
        notifier.error("Payment failed. Please try again.")
        return False
    finally:
        state.processing = False

    state.profile.profile = dataclasses.replace(profile, is_pro=True)
    state.step = UpgradeStep.SUCCEEDED
    notifier.success("Payment successful! Welcome to Pro!")
    logger.info("User %s upgraded to Pro", session.user.id)
    return True
