"""Exception hierarchy for the Eden AI client.

WHY: Callers branch on failure type: prompt for a new key on an
authentication error, show field errors on a validation error, back off
further on a rate limit. A closed set of typed exceptions makes those
branches explicit instead of forcing callers to inspect status codes.

HOW: Every error the library raises derives from EdenAIError. Errors that
come from an API response (or from failing to get one) derive from
ApiError, which carries the HTTP status code, the parsed error body, and
an ErrorKind tag. ErrorHandlingMiddleware is the only place that creates
the ApiError subclasses from responses.

RULES:
- The ErrorKind set is closed: adding a variant means updating
  ErrorHandlingMiddleware and TRANSIENT_KINDS together
- NetworkError has status_code None (no HTTP response was received)
- ValidationError doubles as the client-side validation error for
  unsupported upload formats (status 422, no response body)
- FileUploadError is not an ApiError: it is raised before any request
"""

from __future__ import annotations

import enum
from typing import Any, Dict, List, Optional


class ErrorKind(str, enum.Enum):
    """Closed classification of API failures."""

    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    VALIDATION = "validation"
    RATE_LIMIT = "rate_limit"
    SERVER = "server"
    NETWORK = "network"


TRANSIENT_KINDS = frozenset({ErrorKind.RATE_LIMIT, ErrorKind.SERVER, ErrorKind.NETWORK})
"""Kinds that may succeed when the same request is sent again."""


class EdenAIError(Exception):
    """Base class for every error raised by this package."""


class FileUploadError(EdenAIError):
    """Raised when an upload path is missing, not a file, or unreadable.

    Raised during request construction, before anything is sent.
    """


class ApiError(EdenAIError):
    """Base exception for failed API calls.

    WHY: Gives every API failure the same diagnostic surface (status code,
    parsed error body, classification) regardless of subclass.

    RULES:
    - status_code is None only for NetworkError
    - response_body is the leniently parsed JSON error body ({} if unusable)
    - kind is a class attribute; subclasses must override it
    """

    kind: ErrorKind = ErrorKind.SERVER

    def __init__(
        self,
        message: str,
        status_code: Optional[int],
        response_body: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(message)

    @property
    def is_transient(self) -> bool:
        """True when retrying the same request might succeed."""
        return self.kind in TRANSIENT_KINDS


class AuthenticationError(ApiError):
    """HTTP 401: the API key is missing or invalid."""

    kind = ErrorKind.AUTHENTICATION

    def __init__(self, message: str, response_body: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, 401, response_body)


class AuthorizationError(ApiError):
    """HTTP 403: the API key lacks permission for this operation."""

    kind = ErrorKind.AUTHORIZATION

    def __init__(self, message: str, response_body: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, 403, response_body)


class ResourceNotFoundError(ApiError):
    """HTTP 404: the endpoint or job does not exist."""

    kind = ErrorKind.RESOURCE_NOT_FOUND

    def __init__(self, message: str, response_body: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, 404, response_body)


class ValidationError(ApiError):
    """HTTP 422, or an upload rejected before sending.

    WHY: The API reports field-level problems as a mapping of field name
    to a list of messages. Local file-format checks reuse the same shape
    so callers handle both with one except clause.

    RULES:
    - errors maps field name -> list of messages, {} when the body had none
    """

    kind = ErrorKind.VALIDATION

    def __init__(
        self,
        message: str,
        errors: Optional[Dict[str, List[str]]] = None,
        response_body: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.errors = errors or {}
        super().__init__(message, 422, response_body)


class RateLimitError(ApiError):
    """HTTP 429: too many requests.

    retry_after is whatever the API put in the body's retry_after field
    (usually a Unix timestamp), or None.
    """

    kind = ErrorKind.RATE_LIMIT

    def __init__(
        self,
        message: str,
        retry_after: Optional[int] = None,
        response_body: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.retry_after = retry_after
        super().__init__(message, 429, response_body)


class ServerError(ApiError):
    """HTTP 5xx, and the fallback for any other unexpected non-2xx status."""

    kind = ErrorKind.SERVER

    def __init__(
        self,
        message: str = "Server error occurred",
        status_code: int = 500,
        response_body: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, status_code, response_body)


class NetworkError(ApiError):
    """No HTTP response: timeout, DNS failure, refused connection, TLS error.

    The underlying httpx exception is kept as __cause__.
    """

    kind = ErrorKind.NETWORK

    def __init__(self, message: str = "Network error occurred") -> None:
        super().__init__(message, None, None)
