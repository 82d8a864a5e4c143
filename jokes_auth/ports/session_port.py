"""
Session Port - Interface for session storage.

Implementations:
- RedisSessionAdapter: Redis-backed sessions
- MemorySessionAdapter: In-memory sessions (testing only)
"""

from abc import ABC, abstractmethod
from typing import Optional
from jokes_auth.domain.session import Session


class SessionPort(ABC):
    """Port: Store user sessions."""

    @abstractmethod
    def create(self, user_id: str, ttl: int = 3600) -> Session:
        """
        Create a new session.

        Args:
            user_id: User ID for the session
            ttl: Time-to-live in seconds (default 1 hour)

        Returns:
            Created session
        """
        pass

    @abstractmethod
    def get(self, session_id: str) -> Optional[Session]:
        """
        Get a session by ID.

        Args:
            session_id: Session ID

        Returns:
            Session if found and valid, None otherwise
        """
        pass

    @abstractmethod
    def delete(self, session_id: str) -> bool:
        """
        Delete a session.

        Args:
            session_id: Session ID

        Returns:
            True if deleted, False if not found
        """
        pass
