"""Middleware contract shared by every pipeline stage.

WHY: Authentication, error mapping, retries, and logging are cross-cutting
concerns around one HTTP call. Giving them a single signature lets the
Pipeline compose them in any order without knowing what each one does.

HOW: A middleware receives the request and a `next_handler` callable that
runs the rest of the chain. It may change the request before calling
next_handler, inspect or replace the response afterwards, return early
without calling it, or raise.

RULES:
- Middleware instances hold configuration only, never per-request state
- Never mutate the incoming request; derive a copy with with_header()
- The only channel between middleware is the request, response, or error
"""

from __future__ import annotations

import abc
from typing import Callable

import httpx

NextHandler = Callable[[httpx.Request], httpx.Response]
"""Runs the remainder of the chain and returns its response."""


class Middleware(abc.ABC):
    """One stage of the request pipeline."""

    @abc.abstractmethod
    def handle(self, request: httpx.Request, next_handler: NextHandler) -> httpx.Response:
        """Process request, usually by calling next_handler exactly once."""


def with_header(request: httpx.Request, name: str, value: str) -> httpx.Request:
    """Return a copy of request with one header set, replacing any prior value.

    WHY: httpx requests carry mutable headers, and the caller's request
    object must look the same after send() returns, including between
    retry attempts.

    HOW: Copies method, URL, headers and extensions into a new Request that
    shares the original body stream. Byte and multipart streams built by
    httpx can be iterated more than once, so retries resend the same body.

    RULES:
    - The original request is never modified
    - Content-Length/Content-Type survive because all headers are copied
    """
    headers = request.headers.copy()
    headers[name] = value
    return httpx.Request(
        request.method,
        request.url,
        headers=headers,
        stream=request.stream,
        extensions=dict(request.extensions),
    )
