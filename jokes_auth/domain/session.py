"""
Session Domain Model - Binds a browser to an authenticated user.
"""

from dataclasses import dataclass
from typing import Dict, Any
from datetime import datetime, timedelta
from enum import Enum
import secrets


class SessionStatus(Enum):
    """Session lifecycle states."""
    ACTIVE = "active"
    EXPIRED = "expired"
    REVOKED = "revoked"


@dataclass
class Session:
    """
    Session entity - a durable, cookie-carried credential.

    Domain rules:
    - session_id is cryptographically random
    - a session is bound to exactly one user_id for its whole life
    - expires_at must be in the future for active sessions
    """
    session_id: str
    user_id: str
    created_at: datetime
    expires_at: datetime
    status: SessionStatus = SessionStatus.ACTIVE

    @classmethod
    def create(
        cls,
        user_id: str,
        ttl: int = 3600,
    ) -> "Session":
        """
        Create a new session with generated ID.

        Args:
            user_id: User ID
            ttl: Time-to-live in seconds (default 1 hour)

        Returns:
            New session instance
        """
        now = datetime.utcnow()
        return cls(
            session_id=secrets.token_urlsafe(32),
            user_id=user_id,
            created_at=now,
            expires_at=now + timedelta(seconds=ttl),
            status=SessionStatus.ACTIVE,
        )

    def is_valid(self) -> bool:
        """Check if session is valid (active and not expired)."""
        if self.status != SessionStatus.ACTIVE:
            return False
        return datetime.utcnow() < self.expires_at

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dict."""
        return {
            "session_id": self.session_id,
            "user_id": self.user_id,
            "created_at": self.created_at.isoformat(),
            "expires_at": self.expires_at.isoformat(),
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Session":
        """Deserialize from dict."""
        return cls(
            session_id=data["session_id"],
            user_id=data["user_id"],
            created_at=datetime.fromisoformat(data["created_at"]),
            expires_at=datetime.fromisoformat(data["expires_at"]),
            status=SessionStatus(data.get("status", "active")),
        )
