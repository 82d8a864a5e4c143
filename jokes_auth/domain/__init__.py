"""
Domain Models - Pure business entities.

No infrastructure dependencies. Domain logic only.
"""

from jokes_auth.domain.user import User
from jokes_auth.domain.session import Session, SessionStatus
from jokes_auth.domain.credentials import (
    Credentials,
    FieldErrors,
    FormFields,
    LoginType,
    ParseError,
)
from jokes_auth.domain.action_result import ActionResult, FormResult, Redirect
from jokes_auth.domain.result import Failure, Result, Success

__all__ = [
    "User",
    "Session",
    "SessionStatus",
    "Credentials",
    "FieldErrors",
    "FormFields",
    "LoginType",
    "ParseError",
    "ActionResult",
    "FormResult",
    "Redirect",
    "Result",
    "Success",
    "Failure",
]
