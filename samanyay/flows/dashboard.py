"""Dashboard screen state: profile, case list, search query, and the New Case draft."""
import logging
from dataclasses import dataclass, field

from samanyay.flows.cases import CaseDraft, CaseListState, filter_cases, load_cases
from samanyay.flows.profile_loader import ProfileState, load_profile
from samanyay.models import Case
from samanyay.notifications import Notifier
from samanyay.session import SessionContext

logger = logging.getLogger(__name__)


@dataclass
class DashboardState:
    profile: ProfileState = field(default_factory=ProfileState)
    case_list: CaseListState = field(default_factory=CaseListState)
    draft: CaseDraft = field(default_factory=CaseDraft)
    query: str = ""

    @property
    def filtered(self) -> list[Case]:
        return filter_cases(self.case_list.cases, self.query)

    @property
    def ready(self) -> bool:
        """True once loading is done and there is a profile to render the main view."""
        return not self.case_list.loading and self.profile.profile is not None

    @property
    def profile_missing(self) -> bool:
        return self.profile.loaded and not self.case_list.loading and self.profile.profile is None

    def empty_state(self) -> tuple[str, str]:
        """(heading, hint) shown when no case card is displayed."""
        if not self.case_list.cases:
            return "No cases yet", "Create your first legal case to get started"
        return "No cases found", "Try adjusting your search query"


def open_dashboard(state: DashboardState, session: SessionContext, backend, notifier: Notifier) -> None:
    """Load the profile and case list for the signed-in user."""
    load_profile(state.profile, session, backend, notifier)
    load_cases(state.case_list, session, backend, notifier)
    if state.profile_missing:
        # Without a profile the main view cannot render; the screen stays on its loading panel.
        logger.warning("Dashboard held on loading view: user %s has no profile row", session.user.id)
