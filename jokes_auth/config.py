"""
Configuration management using Pydantic Settings.

Values come from environment variables with the ``JOKES_`` prefix; the
session secret is also accepted as plain ``SESSION_SECRET``. Invalid
values fail at startup with a ValidationError.

Usage:
    from jokes_auth.config import Settings

    settings = Settings()
    secret = settings.session_secret
"""

from typing import Optional

from pydantic import AliasChoices, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from jokes_auth.validation import is_safe_redirect

DEFAULT_REDIRECT = "/jokes"
SESSION_MAX_AGE = 60 * 60 * 24 * 30  # 30 days


class Settings(BaseSettings):
    """
    Runtime settings for the auth flow.

    cookie_secure left unset follows the environment: on in production,
    off elsewhere.
    """

    session_secret: str = Field(
        default="",
        validate_default=True,
        validation_alias=AliasChoices("JOKES_SESSION_SECRET", "SESSION_SECRET"),
        description="Cookie signing secret",
    )
    cookie_name: str = Field(default="RJ_session", description="Session cookie name")
    session_max_age: int = Field(
        default=SESSION_MAX_AGE,
        description="Cookie and session lifetime in seconds",
    )
    cookie_secure: Optional[bool] = Field(
        default=None,
        description="Add the Secure cookie attribute (default: production only)",
    )
    default_redirect: str = Field(
        default=DEFAULT_REDIRECT,
        description="Redirect target when the form gives none or an unsafe one",
    )
    login_path: str = Field(default="/login", description="Login page path")
    redis_url: Optional[str] = Field(
        default=None,
        description="Redis URL for session storage (in-memory when unset)",
    )
    bcrypt_rounds: int = Field(default=12, description="bcrypt cost factor")
    echo_password: bool = Field(
        default=True,
        description="Echo the password back into the re-rendered form",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    environment: str = Field(
        default="development",
        description="Application environment (development, testing, production)",
    )

    model_config = SettingsConfigDict(
        env_prefix="JOKES_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("session_secret")
    @classmethod
    def validate_session_secret(cls, v: str) -> str:
        """Require a non-empty signing secret."""
        if not v:
            raise ValueError("SESSION_SECRET must be set")
        return v

    @field_validator("session_max_age")
    @classmethod
    def validate_session_max_age(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("session_max_age must be positive")
        return v

    @field_validator("bcrypt_rounds")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        if not 4 <= v <= 31:
            raise ValueError("bcrypt_rounds must be between 4 and 31")
        return v

    @field_validator("default_redirect", "login_path")
    @classmethod
    def validate_site_path(cls, v: str) -> str:
        """Only site-relative paths; the fallback redirect must itself be safe."""
        if not is_safe_redirect(v):
            raise ValueError(f"{v!r} is not a site-relative path")
        return v

    @model_validator(mode="after")
    def default_cookie_secure(self) -> "Settings":
        if self.cookie_secure is None:
            self.cookie_secure = self.environment == "production"
        return self
