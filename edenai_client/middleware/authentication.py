"""Bearer token injection."""

from __future__ import annotations

from typing import Optional

import httpx

from edenai_client.middleware.base import Middleware, NextHandler, with_header


class AuthenticationMiddleware(Middleware):
    """Adds `Authorization: Bearer <api_key>` to every outgoing request.

    WHY: Eden AI authenticates with a bearer token. Injecting it in one
    place keeps resources and request builders free of credentials.

    RULES:
    - A None or empty api_key forwards the original request untouched
    - Any Authorization header already on the request is overwritten
    """

    def __init__(self, api_key: Optional[str]) -> None:
        self._api_key = api_key

    def handle(self, request: httpx.Request, next_handler: NextHandler) -> httpx.Response:
        if self._api_key:
            request = with_header(request, "Authorization", "Bearer {}".format(self._api_key))
        return next_handler(request)
