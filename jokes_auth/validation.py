"""
Credential Validator - shape rules for usernames and passwords.

Pure functions: no I/O, deterministic for a given input.
"""

from typing import Optional
from jokes_auth.domain.credentials import FieldErrors

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 6


def validate_username(username: str) -> Optional[str]:
    """Return an error message if the username is too short."""
    if len(username) < MIN_USERNAME_LENGTH:
        return f"Username must be at least {MIN_USERNAME_LENGTH} characters long"
    return None


def validate_password(password: str) -> Optional[str]:
    """Return an error message if the password is too short."""
    if len(password) < MIN_PASSWORD_LENGTH:
        return f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
    return None


def validate_credentials(username: str, password: str) -> FieldErrors:
    return FieldErrors(
        username=validate_username(username),
        password=validate_password(password),
    )


def is_safe_redirect(target: str) -> bool:
    """True for site-relative paths; rejects //host, absolute URLs and backslashes."""
    return target.startswith("/") and not target.startswith("//") and "\\" not in target
