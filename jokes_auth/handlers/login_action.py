"""
Login Action Handler - Processes the login/register form.

Every outcome is a return value: a Redirect when a session was issued,
a FormResult otherwise. Nothing here raises for bad input, wrong
passwords or taken usernames.
"""

from typing import Any, Mapping

import structlog

from jokes_auth.config import DEFAULT_REDIRECT
from jokes_auth.domain.action_result import ActionResult, FormResult
from jokes_auth.domain.credentials import Credentials, FormFields, LoginType, ParseError
from jokes_auth.domain.result import Failure, Result, Success
from jokes_auth.ports.auth_port import AuthenticatorPort
from jokes_auth.ports.session_issuer_port import SessionIssuerPort
from jokes_auth.ports.user_store_port import UserStorePort
from jokes_auth.validation import is_safe_redirect, validate_credentials

logger = structlog.get_logger(__name__)

MALFORMED_FORM = "Form not submitted correctly."
LOGIN_MISMATCH = "Username/Password combination is incorrect"
USER_EXISTS = "User with username {username} already exists"
REGISTER_FAILED = "Something went wrong trying to create a new user."
INVALID_LOGIN_TYPE = "Login type invalid"

_REQUIRED_FIELDS = ("loginType", "username", "password")


def parse_login_form(
    form: Mapping[str, Any],
    default_redirect: str = DEFAULT_REDIRECT,
) -> Result[Credentials, ParseError]:
    """
    Turn raw form data into Credentials.

    A missing or empty redirectTo falls back to default_redirect. Any
    required field that is missing or not a string is a ParseError.
    """
    values = {}
    for name in _REQUIRED_FIELDS:
        value = form.get(name)
        if not isinstance(value, str):
            return Failure(ParseError(message=MALFORMED_FORM, field=name))
        values[name] = value

    redirect_to = form.get("redirectTo") or default_redirect
    if not isinstance(redirect_to, str):
        return Failure(ParseError(message=MALFORMED_FORM, field="redirectTo"))

    return Success(Credentials(
        login_type=values["loginType"],
        username=values["username"],
        password=values["password"],
        redirect_to=redirect_to,
    ))


def safe_redirect(target: str, default: str = DEFAULT_REDIRECT) -> str:
    """Keep site-relative paths, replace anything else with default."""
    if not is_safe_redirect(target):
        return default
    return target


class LoginActionHandler:
    """
    Orchestrates validation, authentication and session issuance.

    Example:
        handler = LoginActionHandler(
            authenticator=PasswordAuthAdapter(users),
            users=users,
            sessions=CookieSessionIssuer(MemorySessionAdapter(), secret="s3cret"),
        )
        result = handler.handle({"loginType": "login", "username": "kody", ...})
    """

    def __init__(
        self,
        authenticator: AuthenticatorPort,
        users: UserStorePort,
        sessions: SessionIssuerPort,
        default_redirect: str = DEFAULT_REDIRECT,
        echo_password: bool = True,
    ):
        """
        Initialize handler with its collaborators.

        Args:
            authenticator: Verifies and registers credentials
            users: User store, used for the register existence check
            sessions: Issues the session on success
            default_redirect: Redirect target when the form gives none
            echo_password: Include the password in echoed fields
        """
        self._authenticator = authenticator
        self._users = users
        self._sessions = sessions
        self._default_redirect = default_redirect
        self._echo_password = echo_password

    def handle(self, form: Mapping[str, Any]) -> ActionResult:
        """
        Handle one form submission.

        Args:
            form: Submitted form fields

        Returns:
            Redirect on success, FormResult on any failure
        """
        parsed = parse_login_form(form, self._default_redirect)
        if isinstance(parsed, Failure):
            logger.info("malformed_login_form", field=parsed.error.field)
            return FormResult(form_error=parsed.error.message)

        credentials = parsed.value
        fields = credentials.to_fields(include_password=self._echo_password)

        field_errors = validate_credentials(credentials.username, credentials.password)
        if field_errors.any():
            logger.info(
                "login_form_invalid",
                login_type=credentials.login_type,
                fields=sorted(field_errors.to_dict()),
            )
            return FormResult(field_errors=field_errors, fields=fields)

        kind = credentials.kind
        if kind is LoginType.LOGIN:
            return self._login(credentials, fields)
        if kind is LoginType.REGISTER:
            return self._register(credentials, fields)

        logger.info("invalid_login_type", login_type=credentials.login_type)
        return FormResult(form_error=INVALID_LOGIN_TYPE, fields=fields)

    __call__ = handle

    def _login(self, credentials: Credentials, fields: FormFields) -> ActionResult:
        user = self._authenticator.login(credentials.username, credentials.password)
        if not user:
            logger.info("login_failed", username=credentials.username)
            return FormResult(form_error=LOGIN_MISMATCH, fields=fields)

        logger.info("login_succeeded", user_id=user.user_id)
        return self._issue(user.user_id, credentials.redirect_to)

    def _register(self, credentials: Credentials, fields: FormFields) -> ActionResult:
        username = credentials.username

        # Not atomic with register(); the store's unique constraint settles races
        if self._users.find_user_by_username(username):
            logger.info("registration_conflict", username=username)
            return FormResult(form_error=USER_EXISTS.format(username=username), fields=fields)

        user = self._authenticator.register(username, credentials.password)
        if not user:
            logger.warning("registration_failed", username=username)
            return FormResult(form_error=REGISTER_FAILED, fields=fields)

        return self._issue(user.user_id, credentials.redirect_to)

    def _issue(self, user_id: str, redirect_to: str) -> ActionResult:
        target = safe_redirect(redirect_to, self._default_redirect)
        return self._sessions.create_user_session(user_id, target)
