"""
Unit tests for the cookie session issuer.
"""

from datetime import datetime, timedelta

import jwt
import pytest
from jokes_auth.adapters import CookieSessionIssuer
from jokes_auth.domain.action_result import Redirect
from jokes_auth.errors import ConfigurationError, RedirectRequired

SECRET = "test-session-secret"


def cookie_header(redirect: Redirect) -> str:
    """Turn a Set-Cookie value into the Cookie header a browser would send."""
    return redirect.set_cookie.split(";")[0]


def test_create_user_session_redirects(cookie_issuer, session_store):
    redirect = cookie_issuer.create_user_session("usr_1", "/jokes/new")

    assert isinstance(redirect, Redirect)
    assert redirect.status_code == 302
    assert redirect.location == "/jokes/new"
    assert redirect.response_headers()["Location"] == "/jokes/new"

    session = session_store.get(redirect.session_id)
    assert session is not None
    assert session.user_id == "usr_1"


def test_cookie_attributes(cookie_issuer):
    set_cookie = cookie_issuer.create_user_session("usr_1", "/jokes").set_cookie

    assert set_cookie.startswith("RJ_session=")
    assert "Path=/" in set_cookie
    assert "HttpOnly" in set_cookie
    assert "SameSite=Lax" in set_cookie
    assert "Max-Age=2592000" in set_cookie
    assert "Secure" not in set_cookie


def test_secure_cookie(session_store):
    issuer = CookieSessionIssuer(session_store, secret="s3cret", secure=True)

    assert "Secure" in issuer.create_user_session("usr_1", "/jokes").set_cookie


def test_session_ttl_matches_cookie(session_store):
    issuer = CookieSessionIssuer(session_store, secret="s3cret", max_age=120)
    redirect = issuer.create_user_session("usr_1", "/jokes")

    session = session_store.get(redirect.session_id)
    assert session.expires_at - session.created_at == timedelta(seconds=120)


def test_get_user_id_round_trip(cookie_issuer):
    redirect = cookie_issuer.create_user_session("usr_1", "/jokes")

    assert cookie_issuer.get_user_id(cookie_header(redirect)) == "usr_1"


def test_get_user_id_among_other_cookies(cookie_issuer):
    redirect = cookie_issuer.create_user_session("usr_1", "/jokes")
    header = f"theme=dark; {cookie_header(redirect)}; lang=en"

    assert cookie_issuer.get_user_id(header) == "usr_1"


@pytest.mark.parametrize("header", [None, "", "theme=dark", "RJ_session=garbage"])
def test_get_user_id_without_valid_cookie(cookie_issuer, header):
    assert cookie_issuer.get_user_id(header) is None


def test_cookie_signed_with_other_secret_rejected(cookie_issuer, session_store):
    other = CookieSessionIssuer(session_store, secret="another-secret")
    redirect = other.create_user_session("usr_1", "/jokes")

    assert cookie_issuer.get_user_id(cookie_header(redirect)) is None


def test_cookie_for_deleted_session_rejected(cookie_issuer, session_store):
    redirect = cookie_issuer.create_user_session("usr_1", "/jokes")
    session_store.delete(redirect.session_id)

    assert cookie_issuer.get_user_id(cookie_header(redirect)) is None


def test_expired_token_rejected(cookie_issuer, session_store):
    session = session_store.create(user_id="usr_1")
    past = datetime.utcnow() - timedelta(days=1)
    token = jwt.encode(
        {"sid": session.session_id, "sub": "usr_1", "iat": past, "exp": past, "iss": "jokes"},
        SECRET,
        algorithm="HS256",
    )

    assert cookie_issuer.get_user_id(f"RJ_session={token}") is None


def test_token_user_must_match_session(cookie_issuer, session_store):
    session = session_store.create(user_id="usr_1")
    now = datetime.utcnow()
    token = jwt.encode(
        {"sid": session.session_id, "sub": "usr_2", "iat": now,
         "exp": now + timedelta(hours=1), "iss": "jokes"},
        SECRET,
        algorithm="HS256",
    )

    assert cookie_issuer.get_user_id(f"RJ_session={token}") is None


def test_require_user_id(cookie_issuer):
    redirect = cookie_issuer.create_user_session("usr_1", "/jokes")

    assert cookie_issuer.require_user_id(cookie_header(redirect), "/jokes/new") == "usr_1"


def test_require_user_id_redirects_to_login(cookie_issuer):
    with pytest.raises(RedirectRequired) as exc_info:
        cookie_issuer.require_user_id(None, "/jokes/new")

    redirect = exc_info.value.redirect
    assert redirect.status_code == 302
    assert redirect.location == "/login?redirectTo=%2Fjokes%2Fnew"
    assert redirect.set_cookie is None


def test_secret_required(session_store):
    with pytest.raises(ConfigurationError):
        CookieSessionIssuer(session_store, secret="")
