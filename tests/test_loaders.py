"""Profile and case loaders, and how the dashboard reacts to their outcomes."""
from samanyay.backend.base import BackendError, User
from samanyay.flows.cases import CaseListState, load_cases
from samanyay.flows.dashboard import DashboardState, open_dashboard
from samanyay.flows.profile_loader import ProfileState, load_profile
from samanyay.models import Case, Profile
from samanyay.session import SessionContext

from fakes import FakeBackend, case_row, profile_row


class TestProfileLoader:

    def test_loads_profile_wholesale(self, fake_session, notifier):
        state = ProfileState()
        load_profile(state, fake_session, FakeBackend(profile=profile_row()), notifier)
        assert state.profile == Profile.from_row(profile_row())
        assert state.loaded and not state.in_progress

    def test_not_found_is_silent_empty_state(self, fake_session, notifier):
        state = ProfileState()
        load_profile(state, fake_session, FakeBackend(profile=None), notifier)
        assert state.profile is None
        assert state.loaded
        assert notifier.drain() == []

    def test_other_failure_is_reported_and_keeps_state(self, fake_session, notifier):
        previous = Profile.from_row(profile_row())
        state = ProfileState(profile=previous)
        backend = FakeBackend(profile=profile_row(), error=BackendError("PGRST301", "JWT expired"))
        load_profile(state, fake_session, backend, notifier)
        assert state.profile is previous
        assert notifier.drain() == [("error", "Failed to load profile")]

    def test_in_progress_guard(self, fake_session, notifier):
        backend = FakeBackend(profile=profile_row())
        load_profile(ProfileState(in_progress=True), fake_session, backend, notifier)
        assert backend.calls == []

    def test_reads_owner_row(self, fake_session, notifier):
        backend = FakeBackend(profile=profile_row())
        load_profile(ProfileState(), fake_session, backend, notifier)
        assert backend.calls == [("select_one", "profiles", "u-1")]

    def test_sends_the_session_token(self, notifier):
        session = SessionContext()
        session.start(User(id="u-1", email="asha@example.com", access_token="jwt-asha"))
        backend = FakeBackend(profile=profile_row(), cases=[case_row("c1", "One")])
        load_profile(ProfileState(), session, backend, notifier)
        load_cases(CaseListState(), session, backend, notifier)
        assert backend.tokens == ["jwt-asha", "jwt-asha"]


class TestCaseLoader:

    def test_requests_newest_first_and_replaces_list(self, fake_session, notifier):
        rows = [case_row("c2", "Newer"), case_row("c1", "Older")]
        state = CaseListState(cases=[Case.from_row(case_row("old", "Stale"))])
        backend = FakeBackend(cases=rows)

        load_cases(state, fake_session, backend, notifier)

        assert backend.calls == [("select_all", "cases", "u-1", "created_at", True)]
        assert [c.id for c in state.cases] == ["c2", "c1"]
        assert state.loading is False

    def test_failure_keeps_prior_list_and_clears_loading(self, fake_session, notifier):
        prior = [Case.from_row(case_row("c1", "Kept"))]
        state = CaseListState(cases=prior)
        load_cases(state, fake_session, FakeBackend(error=BackendError("500", "down")), notifier)
        assert state.cases == prior
        assert state.loading is False
        assert notifier.drain() == [("error", "Failed to load cases")]

    def test_in_progress_guard(self, fake_session, notifier):
        backend = FakeBackend()
        load_cases(CaseListState(in_progress=True), fake_session, backend, notifier)
        assert backend.calls == []

    def test_local_backend_orders_newest_first(self, backend, session, notifier):
        for title in ["First", "Second", "Third"]:
            backend.insert("cases", {
                "user_id": session.user.id, "title": title, "description": None,
                "status": "active", "file_count": 0,
            })
        state = CaseListState()
        load_cases(state, session, backend, notifier)
        assert [c.title for c in state.cases] == ["Third", "Second", "First"]


class TestDashboard:

    def test_ready_after_loading_profile_and_cases(self, backend, session, notifier):
        dash = DashboardState()
        assert not dash.ready
        open_dashboard(dash, session, backend, notifier)
        assert dash.ready
        assert dash.profile.profile.first_name == "Asha"
        assert dash.case_list.cases == []

    def test_missing_profile_holds_loading_view_without_crashing(self, fake_session, notifier):
        dash = DashboardState()
        open_dashboard(dash, fake_session, FakeBackend(profile=None, cases=[]), notifier)
        assert dash.case_list.loading is False
        assert dash.ready is False
        assert dash.profile_missing is True
        assert notifier.drain() == []
