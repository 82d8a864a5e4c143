"""
User Domain Model - Pure business entity.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional
from datetime import datetime
import uuid


@dataclass
class User:
    """
    User entity - a registered account on the jokes site.

    Domain rules:
    - user_id is immutable
    - username must be unique (enforced by the user store)
    - password_hash is never serialized
    """
    user_id: str
    username: str
    password_hash: str
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    @classmethod
    def create(cls, username: str, password_hash: str) -> "User":
        """
        Create a new user with a generated ID.

        Args:
            username: Unique username
            password_hash: Hashed password (never plain text)

        Returns:
            New user instance
        """
        now = datetime.utcnow()
        return cls(
            user_id=str(uuid.uuid4()),
            username=username,
            password_hash=password_hash,
            created_at=now,
            updated_at=now,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict (without the password hash)."""
        return {
            "user_id": self.user_id,
            "username": self.username,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], password_hash: Optional[str] = None) -> "User":
        """Deserialize from dict."""
        return cls(
            user_id=data["user_id"],
            username=data["username"],
            password_hash=password_hash or data.get("password_hash", ""),
            created_at=datetime.fromisoformat(data["created_at"]) if data.get("created_at") else datetime.utcnow(),
            updated_at=datetime.fromisoformat(data["updated_at"]) if data.get("updated_at") else datetime.utcnow(),
        )
