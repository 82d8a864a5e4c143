"""
Shared fixtures and fake collaborators.
"""

import pytest
from typing import Optional, List, Tuple

from jokes_auth.adapters import (
    CookieSessionIssuer,
    MemorySessionAdapter,
    MemoryUserStoreAdapter,
    PasswordAuthAdapter,
)
from jokes_auth.domain.action_result import Redirect
from jokes_auth.domain.user import User
from jokes_auth.ports.auth_port import AuthenticatorPort
from jokes_auth.ports.session_issuer_port import SessionIssuerPort

SECRET = "test-session-secret"


class FakeAuthenticator(AuthenticatorPort):
    """Authenticator returning canned users and recording calls."""

    def __init__(self, login_user: Optional[User] = None, register_user: Optional[User] = None):
        self.login_user = login_user
        self.register_user = register_user
        self.calls: List[Tuple[str, str]] = []

    def login(self, username: str, password: str) -> Optional[User]:
        self.calls.append(("login", username))
        return self.login_user

    def register(self, username: str, password: str) -> Optional[User]:
        self.calls.append(("register", username))
        return self.register_user


class FakeSessionIssuer(SessionIssuerPort):
    """Session issuer recording issued sessions."""

    def __init__(self):
        self.issued: List[Tuple[str, str]] = []

    def create_user_session(self, user_id: str, redirect_to: str) -> Redirect:
        self.issued.append((user_id, redirect_to))
        return Redirect(
            location=redirect_to,
            headers={"Set-Cookie": f"RJ_session=fake-{user_id}"},
            session_id=f"sess-{user_id}",
        )

    def get_user_id(self, cookie_header: Optional[str]) -> Optional[str]:
        return None


@pytest.fixture
def user_store():
    return MemoryUserStoreAdapter()


@pytest.fixture
def session_store():
    return MemorySessionAdapter()


@pytest.fixture
def password_auth(user_store):
    # Lowest bcrypt cost keeps tests fast
    return PasswordAuthAdapter(user_store, rounds=4)


@pytest.fixture
def cookie_issuer(session_store):
    return CookieSessionIssuer(sessions=session_store, secret=SECRET)


@pytest.fixture
def kody():
    return User.create(username="kody", password_hash="not-a-real-hash")


@pytest.fixture
def issuer():
    return FakeSessionIssuer()


@pytest.fixture
def fake_auth():
    """Factory for authenticators with canned results."""
    return FakeAuthenticator
