"""Session gate: loading, protected screens, and auth-only screens."""
import pytest

from samanyay.backend.base import User
from samanyay.session import GateDecision, Route, SessionContext, gate, resolve


def _signed_in():
    ctx = SessionContext()
    ctx.start(User(id="u-1", email="a@b.co"))
    return ctx


def _signed_out():
    ctx = SessionContext()
    ctx.start(None)
    return ctx


@pytest.mark.parametrize("route", list(Route))
def test_loading_session_takes_no_action(route):
    assert gate(SessionContext(), route) is GateDecision.LOADING


@pytest.mark.parametrize("route", [Route.DASHBOARD, Route.UPGRADE])
def test_protected_routes_redirect_visitors_to_login(route):
    assert gate(_signed_out(), route) is Route.LOGIN
    assert gate(_signed_in(), route) is GateDecision.ALLOW


@pytest.mark.parametrize("route", [Route.LOGIN, Route.REGISTER])
def test_auth_only_routes_redirect_users_to_dashboard(route):
    assert gate(_signed_in(), route) is Route.DASHBOARD
    assert gate(_signed_out(), route) is GateDecision.ALLOW


def test_home_is_public():
    assert gate(_signed_in(), Route.HOME) is GateDecision.ALLOW
    assert gate(_signed_out(), Route.HOME) is GateDecision.ALLOW


def test_resolve_follows_redirects():
    assert resolve(_signed_out(), Route.UPGRADE) is Route.LOGIN
    assert resolve(_signed_in(), Route.REGISTER) is Route.DASHBOARD
    assert resolve(_signed_in(), Route.UPGRADE) is Route.UPGRADE


def test_context_lifecycle():
    ctx = SessionContext()
    assert ctx.loading and not ctx.signed_in
    ctx.start(User(id="u-1", email="a@b.co"))
    assert ctx.signed_in and not ctx.loading
    ctx.clear()
    assert not ctx.signed_in and not ctx.loading
