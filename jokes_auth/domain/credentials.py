"""
Credentials Domain Model - What a login/register form submits.

Credentials are transient: they exist only for one request and are
never persisted or logged.
"""

from dataclasses import dataclass
from typing import Dict, Optional
from enum import Enum


class LoginType(Enum):
    """Which branch of the login form was chosen."""
    LOGIN = "login"
    REGISTER = "register"

    @classmethod
    def parse(cls, value: str) -> Optional["LoginType"]:
        """Map a raw form value to a login type, None if unknown."""
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class Credentials:
    """
    A well-formed form submission.

    login_type keeps the raw submitted string so an unknown value can be
    echoed back to the form unchanged.
    """
    login_type: str
    username: str
    password: str
    redirect_to: str

    def __repr__(self) -> str:
        return (
            f"Credentials(login_type={self.login_type!r}, "
            f"username={self.username!r}, redirect_to={self.redirect_to!r})"
        )

    @property
    def kind(self) -> Optional[LoginType]:
        return LoginType.parse(self.login_type)

    def to_fields(self, include_password: bool = True) -> "FormFields":
        """Subset echoed back to repopulate the form."""
        return FormFields(
            login_type=self.login_type,
            username=self.username,
            password=self.password if include_password else "",
        )


@dataclass(frozen=True)
class FormFields:
    """Submitted values echoed back so the user does not retype them."""
    login_type: str
    username: str
    password: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "loginType": self.login_type,
            "username": self.username,
            "password": self.password,
        }


@dataclass(frozen=True)
class FieldErrors:
    """Per-field validation messages. None means the field is fine."""
    username: Optional[str] = None
    password: Optional[str] = None

    def any(self) -> bool:
        return bool(self.username or self.password)

    def to_dict(self) -> Dict[str, str]:
        errors = {}
        if self.username:
            errors["username"] = self.username
        if self.password:
            errors["password"] = self.password
        return errors


@dataclass(frozen=True)
class ParseError:
    """A malformed form submission (missing or non-string field)."""
    message: str
    field: Optional[str] = None
