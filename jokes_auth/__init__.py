"""
Jokes Auth - Login, registration and session issuance

Hexagonal architecture for the jokes site's authentication flow.

Usage:
    from jokes_auth import AuthClient

    client = AuthClient.from_settings()

    # Handle the login/register form
    result = client.handle_login_form(form)
    if isinstance(result, Redirect):
        ...  # 302 with Set-Cookie
    else:
        ...  # re-render the form with result.to_dict()
"""

__version__ = "0.1.0"

from jokes_auth.sdk.client import AuthClient
from jokes_auth.domain.user import User
from jokes_auth.domain.session import Session
from jokes_auth.domain.action_result import FormResult, Redirect
from jokes_auth.handlers.login_action import LoginActionHandler

__all__ = [
    "AuthClient",
    "User",
    "Session",
    "FormResult",
    "Redirect",
    "LoginActionHandler",
]
