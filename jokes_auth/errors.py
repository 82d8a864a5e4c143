"""
Exceptions raised by jokes_auth.

Expected outcomes of the login form (bad input, wrong password, taken
username) are never raised; they are returned as FormResult values.
These exceptions cover adapter-level conditions and configuration.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jokes_auth.domain.action_result import Redirect


class AuthError(Exception):
    """Base class for jokes_auth errors."""


class ConfigurationError(AuthError):
    """Required configuration is missing or invalid."""


class UserAlreadyExistsError(AuthError):
    """The user store rejected a duplicate username."""

    def __init__(self, username: str):
        super().__init__(f"User with username {username} already exists")
        self.username = username


class RedirectRequired(AuthError):
    """
    The request needs an authenticated user.

    Carries the redirect to the login page; the web layer should return
    it as the response.
    """

    def __init__(self, redirect: "Redirect"):
        super().__init__(f"Authentication required, redirecting to {redirect.location}")
        self.redirect = redirect
