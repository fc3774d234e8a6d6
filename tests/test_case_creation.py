"""New Case flow: validation, prepend on success, retryable failure, single-flight."""
from samanyay.backend.base import BackendError
from samanyay.flows.cases import CaseDraft, CaseListState, create_case
from samanyay.models import Case
from samanyay.session import SessionContext

from fakes import FakeBackend, case_row


def _existing():
    return [Case.from_row(case_row("c1", "Older matter"))]


def test_valid_input_prepends_trimmed_case(fake_session, notifier):
    backend = FakeBackend()
    state = CaseListState(cases=_existing(), loading=False)
    draft = CaseDraft(is_open=True, title="  Smith v. Jones ", description="  Contract breach  ")

    case = create_case(draft, state, fake_session, backend, notifier)

    assert case is not None
    assert case.title == "Smith v. Jones"
    assert case.description == "Contract breach"
    assert [c.id for c in state.cases] == ["c-new", "c1"]
    assert notifier.drain() == [("success", "Case created successfully!")]


def test_submitted_row_has_fixed_status_and_file_count(fake_session, notifier):
    backend = FakeBackend()
    draft = CaseDraft(is_open=True, title="Smith v. Jones", description="   ")

    create_case(draft, CaseListState(loading=False), fake_session, backend, notifier)

    (_, table, row), = [c for c in backend.calls if c[0] == "insert"]
    assert table == "cases"
    assert row == {
        "user_id": "u-1",
        "title": "Smith v. Jones",
        "description": None,
        "status": "active",
        "file_count": 0,
    }


def test_success_clears_inputs_and_closes_surface(fake_session, notifier):
    draft = CaseDraft(is_open=True, title="Smith v. Jones", description="notes")
    create_case(draft, CaseListState(loading=False), fake_session, FakeBackend(), notifier)
    assert draft.title == ""
    assert draft.description == ""
    assert draft.is_open is False
    assert draft.submitting is False


def test_whitespace_title_makes_no_network_call(fake_session, notifier):
    backend = FakeBackend()
    state = CaseListState(cases=_existing(), loading=False)
    draft = CaseDraft(is_open=True, title="   ", description="something")

    assert create_case(draft, state, fake_session, backend, notifier) is None
    assert backend.calls == []
    assert [c.id for c in state.cases] == ["c1"]
    assert draft.is_open is True
    assert notifier.drain() == []


def test_failure_keeps_surface_open_with_input(fake_session, notifier):
    backend = FakeBackend(error=BackendError("500", "boom"))
    state = CaseListState(cases=_existing(), loading=False)
    draft = CaseDraft(is_open=True, title="Smith v. Jones", description="notes")

    assert create_case(draft, state, fake_session, backend, notifier) is None
    assert draft.is_open is True
    assert draft.title == "Smith v. Jones"
    assert draft.description == "notes"
    assert draft.submitting is False
    assert [c.id for c in state.cases] == ["c1"]
    assert notifier.drain() == [("error", "Failed to create case")]


def test_submission_in_flight_is_not_repeated(fake_session, notifier):
    backend = FakeBackend()
    draft = CaseDraft(is_open=True, title="Smith v. Jones", submitting=True)

    assert create_case(draft, CaseListState(loading=False), fake_session, backend, notifier) is None
    assert backend.calls == []
    assert draft.close() is False
    assert draft.is_open is True


def test_signed_out_session_creates_nothing(notifier):
    backend = FakeBackend()
    session = SessionContext()
    session.clear()
    draft = CaseDraft(is_open=True, title="Smith v. Jones")
    assert create_case(draft, CaseListState(loading=False), session, backend, notifier) is None
    assert backend.calls == []


def test_first_case_scenario_against_local_backend(backend, session, notifier):
    state = CaseListState(loading=False)
    draft = CaseDraft(is_open=True, title="Smith v. Jones", description="")

    case = create_case(draft, state, session, backend, notifier)

    assert len(state.cases) == 1
    assert state.cases[0] == case
    assert case.status == "active"
    assert case.file_count == 0
    assert case.description is None
    assert case.user_id == session.user.id
    assert case.created_at and case.updated_at
