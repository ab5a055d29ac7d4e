"""Composes middleware into one nested call chain.

WHY: Each middleware only knows about the handler immediately after it.
Something has to turn an ordered list of them, plus the transport call at
the end, into a single callable.

HOW: At construction the list is folded right-to-left: the last
middleware wraps the terminal step, the one before it wraps that, and so
on. process() feeds a request and the final handler into that chain, so
middleware run in list order on the way in and reverse order on the way
out.

RULES:
- The middleware sequence and its chain are fixed at construction
- No error handling here: anything raised propagates unchanged
- An empty pipeline calls the final handler exactly once, as-is
"""

from __future__ import annotations

from typing import Callable, Iterable, Tuple

import httpx

from edenai_client.middleware.base import Middleware, NextHandler

Chain = Callable[[httpx.Request, NextHandler], httpx.Response]


def _terminal(request: httpx.Request, final_handler: NextHandler) -> httpx.Response:
    return final_handler(request)


def _wrap(middleware: Middleware, inner: Chain) -> Chain:
    def chain(request: httpx.Request, final_handler: NextHandler) -> httpx.Response:
        return middleware.handle(request, lambda req: inner(req, final_handler))

    return chain


class Pipeline:
    """Ordered, immutable chain of middleware."""

    def __init__(self, middleware: Iterable[Middleware] = ()) -> None:
        self._middleware: Tuple[Middleware, ...] = tuple(middleware)
        chain: Chain = _terminal
        for stage in reversed(self._middleware):
            chain = _wrap(stage, chain)
        self._chain = chain

    @property
    def middleware(self) -> Tuple[Middleware, ...]:
        return self._middleware

    def __len__(self) -> int:
        return len(self._middleware)

    def process(self, request: httpx.Request, final_handler: NextHandler) -> httpx.Response:
        """Run request through every middleware, ending at final_handler."""
        return self._chain(request, final_handler)
