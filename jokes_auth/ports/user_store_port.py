"""
User Store Port - Interface for looking up and creating user records.

Implementations:
- MemoryUserStoreAdapter: In-memory store (testing, local development)
"""

from abc import ABC, abstractmethod
from typing import Optional
from jokes_auth.domain.user import User


class UserStorePort(ABC):
    """Port: Persist users keyed by unique username."""

    @abstractmethod
    def find_user_by_username(self, username: str) -> Optional[User]:
        """
        Look up a user by username.

        Args:
            username: Exact username

        Returns:
            User if found, None otherwise
        """
        pass

    @abstractmethod
    def create_user(self, username: str, password_hash: str) -> User:
        """
        Create a user record.

        Args:
            username: Username (must be unique)
            password_hash: Already-hashed password

        Returns:
            Created user

        Raises:
            UserAlreadyExistsError: If the username is taken
        """
        pass

    @abstractmethod
    def get_user(self, user_id: str) -> Optional[User]:
        """
        Look up a user by ID.

        Args:
            user_id: User ID

        Returns:
            User if found, None otherwise
        """
        pass
