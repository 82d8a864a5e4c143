"""
Memory User Store Adapter - In-memory user records (testing only).
"""

import threading
from typing import Optional, Dict
from jokes_auth.ports.user_store_port import UserStorePort
from jokes_auth.domain.user import User
from jokes_auth.errors import UserAlreadyExistsError


class MemoryUserStoreAdapter(UserStorePort):
    """
    In-memory user storage with a unique username index.

    WARNING: Only for testing. Users are lost on restart.
    The lock makes the uniqueness check and insert atomic, the same
    guarantee a unique index gives in a database.
    """

    def __init__(self):
        """Initialize in-memory storage."""
        self._users: Dict[str, User] = {}
        self._by_username: Dict[str, str] = {}
        self._lock = threading.Lock()

    def find_user_by_username(self, username: str) -> Optional[User]:
        """Look up a user by username."""
        user_id = self._by_username.get(username)
        if not user_id:
            return None
        return self._users.get(user_id)

    def create_user(self, username: str, password_hash: str) -> User:
        """Create a user, rejecting duplicate usernames."""
        with self._lock:
            if username in self._by_username:
                raise UserAlreadyExistsError(username)

            user = User.create(username=username, password_hash=password_hash)
            self._users[user.user_id] = user
            self._by_username[username] = user.user_id

        return user

    def get_user(self, user_id: str) -> Optional[User]:
        """Look up a user by ID."""
        return self._users.get(user_id)
