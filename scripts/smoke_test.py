"""
Smoke test: register, sign in, create a case, and upgrade against the local backend.
Validates that all components are wired up correctly.

Usage:
  python scripts/smoke_test.py
"""
import sys
import tempfile
from pathlib import Path

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))


def _backend(tmp: str):
    from samanyay import config
    from samanyay.backend.local import LocalBackend
    return LocalBackend(Path(tmp) / "smoke.db", config.SCHEMA_PATH)


def test_filter():
    from samanyay.flows.cases import filter_cases
    from samanyay.models import Case

    cases = [
        Case("1", "u", "Smith v. Jones", None, "active", 0, "", ""),
        Case("2", "u", "Estate of Doe", "Probate dispute", "pending", 2, "", ""),
    ]
    assert filter_cases(cases, "") == cases
    assert [c.id for c in filter_cases(cases, "JONES")] == ["1"]
    assert [c.id for c in filter_cases(cases, "probate")] == ["2"]
    assert filter_cases(cases, "tax") == []

    print("✅ Filter OK")


def test_forms():
    from samanyay.flows.auth_forms import validate_registration

    assert validate_registration("A", "B", "a@b.co", "12345", "12345") is not None
    assert validate_registration("A", "B", "a@b.co", "123456", "123456") is None
    assert validate_registration("A", "B", "not-an-email", "123456", "123456") is not None

    print("✅ Forms OK")


def test_end_to_end():
    from samanyay.flows.auth_forms import register, login
    from samanyay.flows.cases import create_case
    from samanyay.flows.dashboard import DashboardState, open_dashboard
    from samanyay.flows.upgrade import UpgradeState, UpgradeView, open_upgrade, complete_payment
    from samanyay.notifications import Notifier
    from samanyay.session import Route, SessionContext

    with tempfile.TemporaryDirectory() as tmp:
        backend = _backend(tmp)
        notifier = Notifier()

        session = SessionContext()
        outcome = register("Asha", "Rao", "asha@example.com", "secret1", "secret1", session, backend, notifier)
        assert outcome.route is Route.DASHBOARD, f"Registration failed: {outcome.error}"

        session = SessionContext()
        outcome = login("asha@example.com", "secret1", session, backend, notifier)
        assert outcome.route is Route.DASHBOARD, f"Login failed: {outcome.error}"

        dash = DashboardState()
        open_dashboard(dash, session, backend, notifier)
        assert dash.ready, "Dashboard not ready after load"
        assert dash.case_list.cases == []

        dash.draft.open()
        dash.draft.title = "  Smith v. Jones  "
        case = create_case(dash.draft, dash.case_list, session, backend, notifier)
        assert case is not None and case.title == "Smith v. Jones"
        assert case.status == "active" and case.file_count == 0

        up = UpgradeState()
        open_upgrade(up, session, backend, notifier)
        assert up.view() is UpgradeView.OFFER
        up.advance()
        assert complete_payment(up, session, backend, notifier, delay=0)
        assert up.view() is UpgradeView.SUCCEEDED

        open_upgrade(up, session, backend, notifier)
        assert up.view() is UpgradeView.ALREADY_PRO

    print("✅ End to end OK")


if __name__ == "__main__":
    print("=" * 50)
    print("Samanyay Smoke Test")
    print("=" * 50)

    try:
        test_filter()
        test_forms()
        test_end_to_end()
        print("\n🎉 All smoke tests passed!")
    except Exception as e:
        print(f"\n❌ Smoke test FAILED: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)
