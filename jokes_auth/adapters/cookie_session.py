"""
Cookie Session Issuer - Signed session cookies backed by a session store.
"""

from datetime import datetime, timedelta
from http.cookies import CookieError, SimpleCookie
from typing import Optional
from urllib.parse import urlencode

import jwt
import structlog

from jokes_auth.ports.session_issuer_port import SessionIssuerPort
from jokes_auth.ports.session_port import SessionPort
from jokes_auth.domain.action_result import Redirect
from jokes_auth.errors import ConfigurationError, RedirectRequired

logger = structlog.get_logger(__name__)


class CookieSessionIssuer(SessionIssuerPort):
    """
    Issue sessions as signed cookies.

    The session itself lives in a SessionPort; the cookie only carries a
    JWT (HS256) naming the session ID and user ID, so a cookie cannot be
    forged without the secret and stops working once the stored session
    is gone.
    """

    def __init__(
        self,
        sessions: SessionPort,
        secret: str,
        cookie_name: str = "RJ_session",
        max_age: int = 60 * 60 * 24 * 30,
        secure: bool = False,
        login_path: str = "/login",
        algorithm: str = "HS256",
        issuer: str = "jokes",
    ):
        """
        Initialize cookie issuer.

        Args:
            sessions: Session store
            secret: Cookie signing secret
            cookie_name: Session cookie name
            max_age: Cookie and session lifetime in seconds (default 30 days)
            secure: Add the Secure attribute (HTTPS only)
            login_path: Where unauthenticated requests are sent
            algorithm: JWT algorithm (default HS256)
            issuer: Token issuer claim
        """
        if not secret:
            raise ConfigurationError("SESSION_SECRET must be set")

        self._sessions = sessions
        self._secret = secret
        self._cookie_name = cookie_name
        self._max_age = max_age
        self._secure = secure
        self._login_path = login_path
        self._algorithm = algorithm
        self._issuer = issuer

    @property
    def cookie_name(self) -> str:
        return self._cookie_name

    def create_user_session(self, user_id: str, redirect_to: str) -> Redirect:
        """
        Persist a session for the user and redirect with its cookie.

        Args:
            user_id: Authenticated user ID
            redirect_to: Redirect target

        Returns:
            302 Redirect with Set-Cookie
        """
        session = self._sessions.create(user_id=user_id, ttl=self._max_age)
        token = self._encode(session.session_id, user_id)

        logger.info("session_created", user_id=user_id, redirect_to=redirect_to)

        return Redirect(
            location=redirect_to,
            headers={"Set-Cookie": self._serialize_cookie(token)},
            session_id=session.session_id,
        )

    def get_user_id(self, cookie_header: Optional[str]) -> Optional[str]:
        """
        Read the user ID from a Cookie header.

        Args:
            cookie_header: Raw Cookie header value

        Returns:
            User ID if the cookie and its stored session are valid, None otherwise
        """
        token = self._read_cookie(cookie_header)
        if not token:
            return None

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                issuer=self._issuer,
            )
        except jwt.InvalidTokenError:
            return None

        session_id = payload.get("sid")
        user_id = payload.get("sub")
        if not isinstance(session_id, str) or not isinstance(user_id, str):
            return None

        session = self._sessions.get(session_id)
        if not session or session.user_id != user_id:
            return None

        return user_id

    def require_user_id(self, cookie_header: Optional[str], redirect_to: str) -> str:
        """
        Read the user ID or send the browser to the login page.

        Args:
            cookie_header: Raw Cookie header value
            redirect_to: Path to come back to after logging in

        Returns:
            User ID

        Raises:
            RedirectRequired: If there is no valid session
        """
        user_id = self.get_user_id(cookie_header)
        if user_id is None:
            query = urlencode({"redirectTo": redirect_to})
            raise RedirectRequired(Redirect(location=f"{self._login_path}?{query}"))
        return user_id

    def _encode(self, session_id: str, user_id: str) -> str:
        now = datetime.utcnow()
        payload = {
            "sid": session_id,
            "sub": user_id,
            "iat": now,
            "exp": now + timedelta(seconds=self._max_age),
            "iss": self._issuer,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def _serialize_cookie(self, token: str) -> str:
        cookie = SimpleCookie()
        cookie[self._cookie_name] = token
        morsel = cookie[self._cookie_name]
        morsel["path"] = "/"
        morsel["max-age"] = str(self._max_age)
        morsel["httponly"] = True
        morsel["samesite"] = "Lax"
        if self._secure:
            morsel["secure"] = True
        return morsel.OutputString()

    def _read_cookie(self, cookie_header: Optional[str]) -> Optional[str]:
        if not cookie_header:
            return None

        cookie = SimpleCookie()
        try:
            cookie.load(cookie_header)
        except CookieError:
            return None

        morsel = cookie.get(self._cookie_name)
        return morsel.value if morsel else None
