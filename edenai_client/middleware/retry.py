"""Bounded retry with backoff for transient failures.

WHY: Rate limits, 5xx responses, and dropped connections are often
temporary. Retrying a small, fixed number of times hides most of them
from callers without hammering the API.

HOW: Loops up to max_attempts, calling the rest of the chain each time.
Two kinds of failure are retried:
  1. a returned response whose status is in RETRYABLE_STATUS_CODES, and
  2. a raised httpx.TransportError, or a raised ApiError whose kind is
     transient (NetworkError, ServerError, RateLimitError).
Between attempts it sleeps 2^(n-1) seconds (exponential) or n seconds
(linear), where n is the attempt that just failed.

RULES:
- max_attempts counts the first try; max_attempts=1 disables retries
- Non-transient errors (401, 403, 404, 422, anything unknown) are
  re-raised on first occurrence
- Of the httpx errors only TransportError is retried, never DecodingError
  or TooManyRedirects
- On the last attempt a retryable response is returned as-is and a
  retryable error is re-raised unchanged
- In the default stack this middleware sits inside ErrorHandlingMiddleware,
  so it sees raw responses and raw transport errors; the ApiError branch
  only matters for stacks that put error handling after it
"""

from __future__ import annotations

import logging
import time
from typing import FrozenSet

import httpx

from edenai_client.exceptions import ApiError
from edenai_client.middleware.base import Middleware, NextHandler

logger = logging.getLogger(__name__)

RETRYABLE_STATUS_CODES: FrozenSet[int] = frozenset({429, 500, 502, 503, 504})

BACKOFF_EXPONENTIAL = "exponential"
BACKOFF_LINEAR = "linear"
_BACKOFF_STRATEGIES = (BACKOFF_EXPONENTIAL, BACKOFF_LINEAR)


def backoff_delay(attempt: int, strategy: str = BACKOFF_EXPONENTIAL) -> int:
    """Seconds to wait after the given 1-indexed failed attempt."""
    if strategy == BACKOFF_EXPONENTIAL:
        return 2 ** (attempt - 1)
    return attempt


def _is_retryable_error(exc: BaseException) -> bool:
    if isinstance(exc, httpx.TransportError):
        return True
    return isinstance(exc, ApiError) and exc.is_transient


class RetryMiddleware(Middleware):
    """Retries the remainder of the chain on transient failures.

    Args:
        max_attempts: Total tries including the first. Must be >= 1.
        backoff: "exponential" (1s, 2s, 4s, ...) or "linear" (1s, 2s, 3s, ...).
        enable_sleep: Set False to skip the delay entirely (tests).
    """

    def __init__(
        self,
        max_attempts: int = 3,
        backoff: str = BACKOFF_EXPONENTIAL,
        enable_sleep: bool = True,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1, got {}".format(max_attempts))
        if backoff not in _BACKOFF_STRATEGIES:
            raise ValueError(
                "Unknown backoff strategy {!r}. Expected one of: {}".format(
                    backoff, ", ".join(_BACKOFF_STRATEGIES)
                )
            )
        self.max_attempts = max_attempts
        self.backoff = backoff
        self.enable_sleep = enable_sleep

    def handle(self, request: httpx.Request, next_handler: NextHandler) -> httpx.Response:
        attempt = 0
        while True:
            attempt += 1
            try:
                response = next_handler(request)
            except Exception as exc:
                if not _is_retryable_error(exc) or attempt >= self.max_attempts:
                    raise
                logger.warning(
                    "%s %s failed (%s), attempt %d of %d",
                    request.method,
                    request.url,
                    exc,
                    attempt,
                    self.max_attempts,
                )
                self._sleep(attempt)
                continue

            if response.status_code not in RETRYABLE_STATUS_CODES or attempt >= self.max_attempts:
                return response

            logger.warning(
                "%s %s returned %d, attempt %d of %d",
                request.method,
                request.url,
                response.status_code,
                attempt,
                self.max_attempts,
            )
            self._sleep(attempt)

    def _sleep(self, attempt: int) -> None:
        if not self.enable_sleep:
            return
        time.sleep(backoff_delay(attempt, self.backoff))
