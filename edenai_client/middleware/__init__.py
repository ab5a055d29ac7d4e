"""Request pipeline middleware — authentication, error mapping, retries.

WHY: Every API call goes through the same cross-cutting steps. Keeping
them as separate, composable stages means each can be tested alone and
callers can add their own (logging, custom headers) without touching the
client.

HOW: Each stage implements Middleware.handle(request, next_handler).
Pipeline folds an ordered list of stages around the transport call.

RULES:
- Default order (built by ApiClient): custom middleware, Authentication,
  ErrorHandling, Retry, transport
- Middleware objects are stateless apart from their configuration
"""

from edenai_client.middleware.authentication import AuthenticationMiddleware
from edenai_client.middleware.base import Middleware, NextHandler, with_header
from edenai_client.middleware.error_handling import ErrorHandlingMiddleware
from edenai_client.middleware.pipeline import Pipeline
from edenai_client.middleware.request_logging import RequestLoggingMiddleware
from edenai_client.middleware.retry import RETRYABLE_STATUS_CODES, RetryMiddleware

__all__ = [
    "AuthenticationMiddleware",
    "ErrorHandlingMiddleware",
    "Middleware",
    "NextHandler",
    "Pipeline",
    "RETRYABLE_STATUS_CODES",
    "RequestLoggingMiddleware",
    "RetryMiddleware",
    "with_header",
]
