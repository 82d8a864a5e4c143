"""
Integration tests for Redis session adapter.

Requires Redis running on localhost:6379
Skip tests if Redis is not available.
"""

import pytest
import redis

from jokes_auth.adapters import CookieSessionIssuer, RedisSessionAdapter


@pytest.fixture
def redis_adapter():
    """Create Redis session adapter (skip if Redis unavailable)."""
    client = redis.Redis(host="localhost", port=6379, decode_responses=True)
    try:
        client.ping()
    except redis.exceptions.ConnectionError:
        pytest.skip("Redis not available")

    yield RedisSessionAdapter(redis_client=client, prefix="test:session:")

    # Cleanup: delete all test sessions
    for key in client.scan_iter("test:session:*"):
        client.delete(key)


class TestRedisSessionAdapter:
    """Test Redis session storage."""

    def test_create_session(self, redis_adapter):
        session = redis_adapter.create(user_id="user123", ttl=3600)

        assert session.session_id is not None
        assert session.user_id == "user123"
        assert session.is_valid()

    def test_get_session(self, redis_adapter):
        created = redis_adapter.create(user_id="user123", ttl=3600)

        retrieved = redis_adapter.get(created.session_id)
        assert retrieved is not None
        assert retrieved.session_id == created.session_id
        assert retrieved.user_id == created.user_id

    def test_delete_session(self, redis_adapter):
        session = redis_adapter.create(user_id="user123", ttl=3600)

        assert redis_adapter.delete(session.session_id) is True
        assert redis_adapter.get(session.session_id) is None

    def test_delete_missing_session(self, redis_adapter):
        assert redis_adapter.delete("missing") is False

    def test_cookie_issuer_over_redis(self, redis_adapter):
        """Issued cookies resolve through sessions stored in Redis."""
        issuer = CookieSessionIssuer(redis_adapter, secret="redis-secret")
        redirect = issuer.create_user_session("user123", "/jokes")

        assert issuer.get_user_id(redirect.set_cookie.split(";")[0]) == "user123"

    def test_session_ttl_expiration(self, redis_adapter):
        """Test that Redis TTL works (session auto-expires)."""
        import time

        session = redis_adapter.create(user_id="user123", ttl=1)
        assert redis_adapter.get(session.session_id) is not None

        time.sleep(2)

        assert redis_adapter.get(session.session_id) is None
