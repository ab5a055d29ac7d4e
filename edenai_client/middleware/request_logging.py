"""Optional request/response logging."""

from __future__ import annotations

import logging
import time
from typing import Optional

import httpx

from edenai_client.middleware.base import Middleware, NextHandler


class RequestLoggingMiddleware(Middleware):
    """Logs each request line and the resulting status and latency.

    Pass it as custom middleware to ApiClient; it then runs before
    authentication, so the logged request never shows the bearer token.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    def handle(self, request: httpx.Request, next_handler: NextHandler) -> httpx.Response:
        self._logger.info("-> %s %s", request.method, request.url)
        start = time.monotonic()
        try:
            response = next_handler(request)
        except Exception as exc:
            elapsed_ms = int((time.monotonic() - start) * 1000)
            self._logger.info("<- %s (%dms)", type(exc).__name__, elapsed_ms)
            raise
        elapsed_ms = int((time.monotonic() - start) * 1000)
        self._logger.info("<- %d (%dms)", response.status_code, elapsed_ms)
        return response
