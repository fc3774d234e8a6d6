"""
Shared fixtures: a temp-directory local backend and signed-in sessions.
"""
import pytest

from samanyay import config
from samanyay.backend.base import User
from samanyay.backend.local import LocalBackend
from samanyay.db.db import close_conn
from samanyay.notifications import Notifier
from samanyay.session import SessionContext


@pytest.fixture
def backend(tmp_path):
    db_path = tmp_path / "test.db"
    be = LocalBackend(db_path, config.SCHEMA_PATH)
    yield be
    close_conn(db_path)


@pytest.fixture
def notifier():
    return Notifier()


@pytest.fixture
def user(backend):
    result = backend.sign_up("asha@example.com", "secret1", "Asha", "Rao")
    assert result.ok
    return result.user


@pytest.fixture
def session(user):
    ctx = SessionContext()
    ctx.start(user)
    return ctx


@pytest.fixture
def fake_session():
    ctx = SessionContext()
    ctx.start(User(id="u-1", email="asha@example.com"))
    return ctx
