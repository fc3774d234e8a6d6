"""
Explicit session context and the gate that guards every screen.

The context is created when a browser session starts and is handed to each
flow; there is no module-level "current user".
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from samanyay.backend.base import User


class Route(str, Enum):
    HOME = "home"
    LOGIN = "login"
    REGISTER = "register"
    DASHBOARD = "dashboard"
    UPGRADE = "upgrade"


PROTECTED_ROUTES = frozenset({Route.DASHBOARD, Route.UPGRADE})
AUTH_ONLY_ROUTES = frozenset({Route.LOGIN, Route.REGISTER})


@dataclass
class SessionContext:
    user: Optional[User] = None
    loading: bool = True

    def start(self, user: Optional[User]) -> None:
        """Finish loading, with or without a signed-in user."""
        self.user = user
        self.loading = False

    def clear(self) -> None:
        self.user = None
        self.loading = False

    @property
    def signed_in(self) -> bool:
        return self.user is not None


class GateDecision(str, Enum):
    LOADING = "loading"
    ALLOW = "allow"


def gate(session: SessionContext, route: Route) -> Union[GateDecision, Route]:
    """Return LOADING, ALLOW, or the Route to redirect to."""
    if session.loading:
        return GateDecision.LOADING
    if route in PROTECTED_ROUTES and not session.signed_in:
        return Route.LOGIN
    if route in AUTH_ONLY_ROUTES and session.signed_in:
        return Route.DASHBOARD
    return GateDecision.ALLOW


def resolve(session: SessionContext, route: Route) -> Route:
    """Follow gate redirects and return the route that should actually render."""
    decision = gate(session, route)
    return decision if isinstance(decision, Route) else route
