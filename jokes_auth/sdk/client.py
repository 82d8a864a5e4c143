"""
Auth Client - High-level SDK for the login flow.

Wires the default adapters from Settings so a web layer only has to
pass form data and Cookie headers through.
"""

from typing import Optional, Mapping, Any

from jokes_auth.config import Settings
from jokes_auth.errors import ConfigurationError
from jokes_auth.logging_config import configure_logging
from jokes_auth.ports.auth_port import AuthenticatorPort
from jokes_auth.ports.user_store_port import UserStorePort
from jokes_auth.ports.session_port import SessionPort
from jokes_auth.adapters.memory_user_store import MemoryUserStoreAdapter
from jokes_auth.adapters.memory_session import MemorySessionAdapter
from jokes_auth.adapters.redis_session import RedisSessionAdapter
from jokes_auth.adapters.password_auth import PasswordAuthAdapter
from jokes_auth.adapters.cookie_session import CookieSessionIssuer
from jokes_auth.handlers.login_action import LoginActionHandler
from jokes_auth.domain.action_result import ActionResult
from jokes_auth.domain.user import User


class AuthClient:
    """
    High-level auth client combining users, authentication and sessions.

    Example:
        from jokes_auth import AuthClient

        client = AuthClient.from_settings()

        # POST /login
        result = client.handle_login_form(form)

        # Any page that needs a user
        user_id = client.require_user_id(request.headers.get("Cookie"), "/jokes/new")
    """

    def __init__(
        self,
        settings: Settings,
        users: Optional[UserStorePort] = None,
        sessions: Optional[SessionPort] = None,
        authenticator: Optional[AuthenticatorPort] = None,
    ):
        """
        Initialize auth client with adapters.

        Args:
            settings: Runtime settings
            users: User store (default in-memory; required when redis_url is set,
                since Redis sessions outlive in-memory users)
            sessions: Session store (default Redis if configured, else in-memory)
            authenticator: Authenticator (default bcrypt over users)
        """
        if users is None and settings.redis_url:
            raise ConfigurationError(
                "A durable user store is required when redis_url is set"
            )

        self._settings = settings
        self._users = users or MemoryUserStoreAdapter()

        if sessions is None:
            if settings.redis_url:
                sessions = RedisSessionAdapter(redis_url=settings.redis_url)
            else:
                sessions = MemorySessionAdapter()
        self._sessions = sessions

        self._authenticator = authenticator or PasswordAuthAdapter(
            self._users, rounds=settings.bcrypt_rounds
        )
        self._issuer = CookieSessionIssuer(
            sessions=self._sessions,
            secret=settings.session_secret,
            cookie_name=settings.cookie_name,
            max_age=settings.session_max_age,
            secure=settings.cookie_secure,
            login_path=settings.login_path,
        )
        self._handler = LoginActionHandler(
            authenticator=self._authenticator,
            users=self._users,
            sessions=self._issuer,
            default_redirect=settings.default_redirect,
            echo_password=settings.echo_password,
        )

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "AuthClient":
        """
        Build a client with default adapters and configure logging.

        Args:
            settings: Runtime settings (read from the environment if None)

        Returns:
            Configured client
        """
        settings = settings or Settings()
        configure_logging(settings.log_level)
        return cls(settings)

    @property
    def issuer(self) -> CookieSessionIssuer:
        return self._issuer

    def handle_login_form(self, form: Mapping[str, Any]) -> ActionResult:
        """
        Process a login/register form submission.

        Args:
            form: Submitted form fields

        Returns:
            Redirect on success, FormResult on failure
        """
        return self._handler.handle(form)

    def get_user_id(self, cookie_header: Optional[str]) -> Optional[str]:
        """
        Get the logged-in user's ID.

        Args:
            cookie_header: Raw Cookie header value

        Returns:
            User ID or None
        """
        return self._issuer.get_user_id(cookie_header)

    def require_user_id(self, cookie_header: Optional[str], redirect_to: str) -> str:
        """
        Get the logged-in user's ID or raise RedirectRequired.

        Args:
            cookie_header: Raw Cookie header value
            redirect_to: Path to return to after logging in

        Returns:
            User ID
        """
        return self._issuer.require_user_id(cookie_header, redirect_to)

    def get_user(self, cookie_header: Optional[str]) -> Optional[User]:
        """
        Get the logged-in user.

        Args:
            cookie_header: Raw Cookie header value

        Returns:
            User or None
        """
        user_id = self.get_user_id(cookie_header)
        if user_id is None:
            return None
        return self._users.get_user(user_id)
