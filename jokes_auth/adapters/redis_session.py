"""
Redis Session Adapter - Redis-backed session storage.
"""

from typing import Optional
import json

import redis

from jokes_auth.ports.session_port import SessionPort
from jokes_auth.domain.session import Session


class RedisSessionAdapter(SessionPort):
    """
    Redis-backed session storage.

    Sessions are stored as JSON with automatic expiration (TTL).
    Supports distributed deployments.
    """

    def __init__(
        self,
        redis_client: Optional[redis.Redis] = None,
        redis_url: str = "redis://localhost:6379/0",
        prefix: str = "jokes:session:",
    ):
        """
        Initialize Redis session adapter.

        Args:
            redis_client: Redis client instance (created from redis_url if None)
            redis_url: Connection URL used when no client is given
            prefix: Key prefix for sessions
        """
        self._redis = redis_client
        self._redis_url = redis_url
        self._prefix = prefix

    def _get_redis(self) -> redis.Redis:
        """Lazy load Redis client."""
        if self._redis is None:
            self._redis = redis.Redis.from_url(self._redis_url, decode_responses=True)
        return self._redis

    def _key(self, session_id: str) -> str:
        """Generate Redis key for session."""
        return f"{self._prefix}{session_id}"

    def create(self, user_id: str, ttl: int = 3600) -> Session:
        """
        Create a new session in Redis.

        Args:
            user_id: User ID
            ttl: Time-to-live in seconds

        Returns:
            Created session
        """
        session = Session.create(user_id=user_id, ttl=ttl)
        self._get_redis().setex(self._key(session.session_id), ttl, json.dumps(session.to_dict()))
        return session

    def get(self, session_id: str) -> Optional[Session]:
        """
        Get a session from Redis.

        Args:
            session_id: Session ID

        Returns:
            Session if found and valid, None otherwise
        """
        data = self._get_redis().get(self._key(session_id))
        if not data:
            return None

        try:
            session = Session.from_dict(json.loads(data))
        except (json.JSONDecodeError, KeyError, ValueError):
            return None

        if session.is_valid():
            return session
        return None

    def delete(self, session_id: str) -> bool:
        """
        Delete a session from Redis.

        Args:
            session_id: Session ID

        Returns:
            True if deleted, False if not found
        """
        return self._get_redis().delete(self._key(session_id)) > 0
