"""
Action Result - The two possible outcomes of handling the login form.

ActionResult is either a Redirect (a session was issued) or a FormResult
(the form must be shown again with errors). Exactly one is produced per
submission.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional, Union
from jokes_auth.domain.credentials import FieldErrors, FormFields


@dataclass(frozen=True)
class Redirect:
    """
    HTTP redirect response.

    headers carries Set-Cookie when a session was issued; session_id is
    the issued session, None for plain redirects.
    """
    location: str
    status_code: int = 302
    headers: Dict[str, str] = field(default_factory=dict)
    session_id: Optional[str] = None

    @property
    def set_cookie(self) -> Optional[str]:
        return self.headers.get("Set-Cookie")

    def response_headers(self) -> Dict[str, str]:
        """All headers for the transport layer, Location included."""
        headers = {"Location": self.location}
        headers.update(self.headers)
        return headers


@dataclass(frozen=True)
class FormResult:
    """Structured error payload consumed by the rendering layer."""
    form_error: Optional[str] = None
    field_errors: Optional[FieldErrors] = None
    fields: Optional[FormFields] = None

    def to_dict(self) -> Dict[str, Any]:
        """JSON payload; absent entries are omitted."""
        data: Dict[str, Any] = {}
        if self.form_error is not None:
            data["formError"] = self.form_error
        if self.field_errors is not None:
            data["fieldErrors"] = self.field_errors.to_dict()
        if self.fields is not None:
            data["fields"] = self.fields.to_dict()
        return data


ActionResult = Union[Redirect, FormResult]
