"""
Adapters - Implementations of ports.

Users & Authentication:
- MemoryUserStoreAdapter: In-memory user records
- PasswordAuthAdapter: bcrypt username/password authentication

Sessions:
- RedisSessionAdapter: Redis-backed sessions
- MemorySessionAdapter: In-memory sessions (testing)
- CookieSessionIssuer: Signed session cookies
"""

# Users & Authentication
from jokes_auth.adapters.memory_user_store import MemoryUserStoreAdapter
from jokes_auth.adapters.password_auth import PasswordAuthAdapter

# Sessions
from jokes_auth.adapters.redis_session import RedisSessionAdapter
from jokes_auth.adapters.memory_session import MemorySessionAdapter
from jokes_auth.adapters.cookie_session import CookieSessionIssuer

__all__ = [
    # Users & Authentication
    "MemoryUserStoreAdapter",
    "PasswordAuthAdapter",
    # Sessions
    "RedisSessionAdapter",
    "MemorySessionAdapter",
    "CookieSessionIssuer",
]
