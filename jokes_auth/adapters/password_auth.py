"""
Password Authentication Adapter - bcrypt-hashed username/password auth.
"""

import secrets
from typing import Optional

import bcrypt
import structlog

from jokes_auth.ports.auth_port import AuthenticatorPort
from jokes_auth.ports.user_store_port import UserStorePort
from jokes_auth.domain.user import User
from jokes_auth.errors import UserAlreadyExistsError

logger = structlog.get_logger(__name__)


class PasswordAuthAdapter(AuthenticatorPort):
    """
    Username/password authenticator.

    Passwords are hashed with bcrypt before storage. Persistence is
    delegated to a UserStorePort.
    """

    def __init__(self, users: UserStorePort, rounds: int = 12):
        """
        Initialize password adapter.

        Args:
            users: User store holding the password hashes
            rounds: bcrypt cost factor (4-31, default 12)
        """
        if not 4 <= rounds <= 31:
            raise ValueError("bcrypt rounds must be between 4 and 31")

        self._users = users
        self._rounds = rounds
        # Same cost as real hashes, so unknown usernames take as long as wrong passwords
        self._dummy_hash = self.hash_password(secrets.token_urlsafe(16))

    def login(self, username: str, password: str) -> Optional[User]:
        """
        Verify a username/password pair.

        Args:
            username: Submitted username
            password: Submitted password

        Returns:
            User if valid, None if the user is unknown or the password is wrong
        """
        user = self._users.find_user_by_username(username)
        if not user:
            self._check_password(password, self._dummy_hash)
            return None

        if not self._check_password(password, user.password_hash):
            return None

        return user

    def register(self, username: str, password: str) -> Optional[User]:
        """
        Create a user with a hashed password.

        Args:
            username: Desired username
            password: Plain-text password

        Returns:
            Created user, None if the store rejected it
        """
        password_hash = self.hash_password(password)

        try:
            user = self._users.create_user(username=username, password_hash=password_hash)
        except UserAlreadyExistsError:
            # Lost a race with a concurrent registration
            logger.warning("user_create_conflict", username=username)
            return None

        logger.info("user_registered", user_id=user.user_id, username=username)
        return user

    def hash_password(self, password: str) -> str:
        """Hash a password with bcrypt."""
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    @staticmethod
    def _check_password(password: str, password_hash: str) -> bool:
        """Constant-time bcrypt comparison; False for malformed hashes."""
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            return False
