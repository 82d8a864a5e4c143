"""
Session Issuer Port - Interface for turning a user into a logged-in browser.

Implementations:
- CookieSessionIssuer: signed session cookie backed by a SessionPort
"""

from abc import ABC, abstractmethod
from typing import Optional
from jokes_auth.domain.action_result import Redirect


class SessionIssuerPort(ABC):
    """Port: Issue and read back session credentials."""

    @abstractmethod
    def create_user_session(self, user_id: str, redirect_to: str) -> Redirect:
        """
        Create a session for a user and redirect.

        Call once per successful authentication.

        Args:
            user_id: Authenticated user ID
            redirect_to: Where to send the browser

        Returns:
            Redirect carrying the session credential
        """
        pass

    @abstractmethod
    def get_user_id(self, cookie_header: Optional[str]) -> Optional[str]:
        """
        Read the user ID from a request's Cookie header.

        Args:
            cookie_header: Raw Cookie header value (may be None)

        Returns:
            User ID if the session is valid, None otherwise
        """
        pass
