"""
Memory Session Adapter - In-memory session storage (testing only).
"""

from typing import Optional, Dict
from jokes_auth.ports.session_port import SessionPort
from jokes_auth.domain.session import Session


class MemorySessionAdapter(SessionPort):
    """
    In-memory session storage.

    WARNING: Only for testing. Sessions are lost on restart.
    Not suitable for production or distributed deployments.
    """

    def __init__(self):
        """Initialize in-memory storage."""
        self._sessions: Dict[str, Session] = {}

    def create(self, user_id: str, ttl: int = 3600) -> Session:
        """Create a new session in memory."""
        session = Session.create(user_id=user_id, ttl=ttl)
        self._sessions[session.session_id] = session
        return session

    def get(self, session_id: str) -> Optional[Session]:
        """Get a session from memory."""
        session = self._sessions.get(session_id)

        if not session:
            return None

        if not session.is_valid():
            # Auto-cleanup expired session
            self.delete(session_id)
            return None

        return session

    def delete(self, session_id: str) -> bool:
        """Delete a session from memory."""
        return self._sessions.pop(session_id, None) is not None
