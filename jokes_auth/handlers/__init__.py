"""
Handlers - Request-level orchestration over the ports.
"""

from jokes_auth.handlers.login_action import (
    LoginActionHandler,
    parse_login_form,
    safe_redirect,
)

__all__ = [
    "LoginActionHandler",
    "parse_login_form",
    "safe_redirect",
]
