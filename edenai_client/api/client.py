"""HTTP client for the Eden AI API.

WHY: Resources (audio, OCR) need one place that knows the base URL, holds
the API key, and pushes every request through the same authentication,
error-mapping, and retry policy. This module owns that configuration so
resources only build requests and parse responses.

HOW: ApiClient resolves its base URL and API key once, at construction
(explicit argument → EDENAI_* environment variable → default), then
builds a single Pipeline: custom middleware, AuthenticationMiddleware,
ErrorHandlingMiddleware, RetryMiddleware. send() runs a request through
that pipeline, ending at the transport's send().

RULES:
- The pipeline is built once per client, never per call
- The transport is any object with send(httpx.Request) -> httpx.Response;
  an httpx.Client is created lazily when none is supplied
- send() returns a 2xx response or raises exactly one ApiError subclass
- close() only closes a transport this client created itself
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence

import httpx

from edenai_client.config import (
    API_KEY_ENV,
    BASE_URL_ENV,
    HTTP_CONNECT_TIMEOUT_S,
    HTTP_TIMEOUT_S,
    env_value,
)
from edenai_client.middleware import (
    AuthenticationMiddleware,
    ErrorHandlingMiddleware,
    Middleware,
    Pipeline,
    RetryMiddleware,
)


class Transport(Protocol):
    """Anything that can send a prepared httpx.Request."""

    def send(self, request: httpx.Request) -> httpx.Response: ...


class ApiClient:
    """Sends requests to Eden AI through the middleware pipeline.

    WHY: Gives resources a single, preconfigured entry point for HTTP.

    HOW: Holds the resolved configuration and a Pipeline. The transport
    is resolved on the first send() when not injected.

    RULES:
    - Use as: client = ApiClient(api_key="..."); client.send(request)
    - Or as a context manager to close the lazily created httpx.Client
    - api_key None (or unset env) means requests go out unauthenticated
    - base_url defaults to "" when neither argument nor env is set

    Args:
        http_client: Transport to use. Defaults to a new httpx.Client.
        base_url: API base URL. Defaults to $EDENAI_BASE_URL, then "".
        api_key: Bearer token. Defaults to $EDENAI_API_KEY, then None.
        middleware: Custom middleware run before the default stack.
    """

    def __init__(
        self,
        http_client: Optional[Transport] = None,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        middleware: Optional[Sequence[Middleware]] = None,
    ) -> None:
        self._http_client = http_client
        self._owns_http_client = False
        self._base_url = base_url if base_url is not None else (env_value(BASE_URL_ENV) or "")
        self._api_key = api_key if api_key is not None else env_value(API_KEY_ENV)

        self._pipeline = Pipeline(
            [
                *(middleware or ()),
                AuthenticationMiddleware(self._api_key),
                ErrorHandlingMiddleware(),
                RetryMiddleware(),
            ]
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def api_key(self) -> Optional[str]:
        return self._api_key

    @property
    def pipeline(self) -> Pipeline:
        return self._pipeline

    def __enter__(self) -> ApiClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        self.close()

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_http_client and isinstance(self._http_client, httpx.Client):
            self._http_client.close()
            self._http_client = None
            self._owns_http_client = False

    def _ensure_transport(self) -> Transport:
        if self._http_client is None:
            self._http_client = httpx.Client(
                timeout=httpx.Timeout(HTTP_TIMEOUT_S, connect=HTTP_CONNECT_TIMEOUT_S),
            )
            self._owns_http_client = True
        return self._http_client

    def send(self, request: httpx.Request) -> httpx.Response:
        """Send request through the pipeline and return the 2xx response.

        Raises:
            AuthenticationError, AuthorizationError, ResourceNotFoundError,
            ValidationError: immediately, never retried.
            RateLimitError, ServerError, NetworkError: after retries run out.
        """
        transport = self._ensure_transport()
        return self._pipeline.process(request, transport.send)

    def url(self, path: str) -> str:
        """Join path onto the base URL."""
        return self._base_url.rstrip("/") + path
