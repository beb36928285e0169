"""Error types raised by the OnApp client."""

from __future__ import annotations

from typing import Any


class OnAppError(Exception):
    """Base class for every error raised by this package."""


class ArgError(OnAppError, ValueError):
    """An argument failed validation before any request was sent."""

    def __init__(self, arg: str, reason: str) -> None:
        super().__init__(f"{arg} is invalid because {reason}")
        self.arg = arg
        self.reason = reason


class NotFoundError(OnAppError, LookupError):
    """A single-result lookup matched nothing."""


class UpstreamError(OnAppError):
    """Transport, HTTP or decoding failure talking to the API."""


class ApiError(UpstreamError):
    """The API answered with a non-success status code."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        method: str,
        url: str,
        errors: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.method = method
        self.url = url
        self.errors = errors


class FieldContractError(OnAppError, AttributeError):
    """A filter names a field the candidate record does not have.

    This is a programming error in the caller and is never handled inside
    the package.
    """

    def __init__(self, field: str, candidate_type: str) -> None:
        super().__init__(f"{candidate_type} has no field named '{field}'")
        self.field = field
        self.candidate_type = candidate_type
