"""
Ports - Interfaces for user storage, authentication, and sessions.

Hexagonal architecture: These define WHAT we need, not HOW.
Adapters provide the HOW.
"""

from jokes_auth.ports.auth_port import AuthenticatorPort
from jokes_auth.ports.user_store_port import UserStorePort
from jokes_auth.ports.session_port import SessionPort
from jokes_auth.ports.session_issuer_port import SessionIssuerPort

__all__ = [
    "AuthenticatorPort",
    "UserStorePort",
    "SessionPort",
    "SessionIssuerPort",
]
