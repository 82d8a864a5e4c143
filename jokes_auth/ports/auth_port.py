"""
Authenticator Port - Interface for verifying and registering credentials.

Implementations:
- PasswordAuthAdapter: bcrypt-hashed passwords over a UserStorePort
"""

from abc import ABC, abstractmethod
from typing import Optional
from jokes_auth.domain.user import User


class AuthenticatorPort(ABC):
    """Port: Turn a username/password pair into a user."""

    @abstractmethod
    def login(self, username: str, password: str) -> Optional[User]:
        """
        Verify a username/password pair.

        Args:
            username: Submitted username
            password: Submitted plain-text password

        Returns:
            User if the pair matches, None otherwise. Callers cannot
            tell an unknown username from a wrong password.
        """
        pass

    @abstractmethod
    def register(self, username: str, password: str) -> Optional[User]:
        """
        Create a new user with a hashed password.

        Args:
            username: Desired username
            password: Plain-text password

        Returns:
            Created user, None if the user could not be created
        """
        pass
