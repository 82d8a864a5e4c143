"""
Result types for the form parse step.

A parse either succeeds with a value or fails with an error; callers
must handle both variants instead of relying on exceptions.

Usage:
    result = parse_login_form(form)
    if isinstance(result, Failure):
        return FormResult(form_error=result.error.message)
    credentials = result.value
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful result carrying a value."""
    value: T


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Failed result carrying an error."""
    error: E


Result = Union[Success[T], Failure[E]]
