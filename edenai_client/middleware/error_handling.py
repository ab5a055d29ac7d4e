"""Maps HTTP failures onto the typed exception hierarchy.

WHY: Resources and callers should never have to inspect status codes.
Converting every non-2xx response (and every transport failure) into one
specific exception in one place keeps that policy consistent.

HOW: Calls the rest of the chain. Any httpx.RequestError (transport
failure, undecodable body, redirect loop) becomes a NetworkError chained
to the original. A 2xx response is returned as-is.
Anything else has its body parsed leniently as JSON and is classified by
status code into an ErrorKind, which selects the exception to raise.

RULES:
- 2xx responses pass through and their body is not read
- Classification priority: 401, 403, 404, 422, 429, >=500, then any other
  non-2xx status falls back to ServerError with the real status code
- The error message prefers the body's "message" field, else a fixed
  default per kind
- Body parsing never raises: empty, malformed or non-object JSON → {}
- The error body is read exactly once, here
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

import httpx

from edenai_client.exceptions import (
    ApiError,
    AuthenticationError,
    AuthorizationError,
    ErrorKind,
    NetworkError,
    RateLimitError,
    ResourceNotFoundError,
    ServerError,
    ValidationError,
)
from edenai_client.middleware.base import Middleware, NextHandler

logger = logging.getLogger(__name__)

_STATUS_KINDS: Dict[int, ErrorKind] = {
    401: ErrorKind.AUTHENTICATION,
    403: ErrorKind.AUTHORIZATION,
    404: ErrorKind.RESOURCE_NOT_FOUND,
    422: ErrorKind.VALIDATION,
    429: ErrorKind.RATE_LIMIT,
}

_DEFAULT_MESSAGES: Dict[ErrorKind, str] = {
    ErrorKind.AUTHENTICATION: "Invalid or missing API credentials",
    ErrorKind.AUTHORIZATION: "Insufficient permissions",
    ErrorKind.RESOURCE_NOT_FOUND: "Resource not found",
    ErrorKind.VALIDATION: "Validation failed",
    ErrorKind.RATE_LIMIT: "Rate limit exceeded",
    ErrorKind.SERVER: "Server error occurred",
}


def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def classify_status(status_code: int) -> ErrorKind:
    """Return the ErrorKind for a non-2xx status code.

    Every non-2xx code maps to exactly one kind; codes without a specific
    mapping (3xx, 400, 409, 1xx, ...) are SERVER.
    """
    return _STATUS_KINDS.get(status_code, ErrorKind.SERVER)


def parse_error_body(response: httpx.Response) -> Dict[str, Any]:
    """Read and decode the response body, returning {} for anything unusable."""
    content = response.read()
    if not content:
        return {}
    try:
        decoded = json.loads(content)
    except ValueError:
        return {}
    return decoded if isinstance(decoded, dict) else {}


def build_error(status_code: int, body: Dict[str, Any]) -> ApiError:
    """Create the exception for a classified non-2xx response."""
    kind = classify_status(status_code)
    message = body.get("message")
    if not isinstance(message, str) or not message:
        if kind is ErrorKind.SERVER and status_code < 500:
            message = "HTTP error {}".format(status_code)
        else:
            message = _DEFAULT_MESSAGES[kind]

    if kind is ErrorKind.AUTHENTICATION:
        return AuthenticationError(message, body)
    if kind is ErrorKind.AUTHORIZATION:
        return AuthorizationError(message, body)
    if kind is ErrorKind.RESOURCE_NOT_FOUND:
        return ResourceNotFoundError(message, body)
    if kind is ErrorKind.VALIDATION:
        return ValidationError(message, _field_errors(body), body)
    if kind is ErrorKind.RATE_LIMIT:
        return RateLimitError(message, _retry_after(body), body)
    if kind is ErrorKind.SERVER:
        return ServerError(message, status_code, body)
    # NETWORK is never produced from a status code.
    raise AssertionError("Unhandled error kind: {}".format(kind))


def _field_errors(body: Dict[str, Any]) -> Dict[str, List[str]]:
    errors = body.get("errors")
    return errors if isinstance(errors, dict) else {}


def _retry_after(body: Dict[str, Any]) -> Optional[int]:
    value = body.get("retry_after")
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class ErrorHandlingMiddleware(Middleware):
    """Turns transport failures and non-2xx responses into ApiError subclasses."""

    def handle(self, request: httpx.Request, next_handler: NextHandler) -> httpx.Response:
        try:
            response = next_handler(request)
        except httpx.RequestError as exc:
            logger.debug("Request failure for %s %s: %s", request.method, request.url, exc)
            raise NetworkError(str(exc) or type(exc).__name__) from exc

        if is_success(response.status_code):
            return response

        error = build_error(response.status_code, parse_error_body(response))
        logger.debug(
            "%s %s failed with %d (%s): %s",
            request.method,
            request.url,
            response.status_code,
            error.kind.value,
            error.message,
        )
        raise error
