"""Base class for API resources.

WHY: Every resource builds requests the same way (base URL + resource
path + endpoint path, optional JSON body or multipart upload) and sends
them through the shared ApiClient. Keeping that here leaves concrete
resources with nothing but endpoint paths and model parsing.

HOW: Subclasses set base_path (e.g. "/v2/audio") and call the _get /
_post / _put / _patch / _delete / _post_multipart helpers, which build an
httpx.Request and hand it to ApiClient.send().

RULES:
- JSON bodies are only attached when the payload is non-empty
- Multipart uploads read the file into memory so retries resend it intact
- Success bodies are parsed strictly: invalid JSON raises ValueError
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import httpx

from edenai_client.api.client import ApiClient
from edenai_client.files import form_fields, guess_mime_type

Params = Optional[Mapping[str, str]]
Headers = Optional[Mapping[str, str]]


class Resource:
    """A group of endpoints under one path prefix."""

    base_path = ""

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    @property
    def client(self) -> ApiClient:
        return self._client

    def _url(self, path: str) -> str:
        return self._client.url(self.base_path + path)

    def _send(
        self,
        method: str,
        path: str,
        payload: Optional[Dict[str, Any]] = None,
        headers: Headers = None,
        params: Params = None,
    ) -> httpx.Response:
        request = httpx.Request(
            method,
            self._url(path),
            params=params,
            headers=headers,
            json=payload or None,
        )
        return self._client.send(request)

    def _get(self, path: str, headers: Headers = None, params: Params = None) -> httpx.Response:
        return self._send("GET", path, headers=headers, params=params)

    def _post(
        self, path: str, payload: Optional[Dict[str, Any]] = None, headers: Headers = None
    ) -> httpx.Response:
        return self._send("POST", path, payload, headers)

    def _put(
        self, path: str, payload: Optional[Dict[str, Any]] = None, headers: Headers = None
    ) -> httpx.Response:
        return self._send("PUT", path, payload, headers)

    def _patch(
        self, path: str, payload: Optional[Dict[str, Any]] = None, headers: Headers = None
    ) -> httpx.Response:
        return self._send("PATCH", path, payload, headers)

    def _delete(self, path: str, headers: Headers = None) -> httpx.Response:
        return self._send("DELETE", path, headers=headers)

    def _post_multipart(
        self,
        path: str,
        file_path: Union[str, Path],
        params: Mapping[str, Any],
    ) -> httpx.Response:
        """POST a file under the "file" field with params as form fields."""
        file_path = Path(file_path)
        request = httpx.Request(
            "POST",
            self._url(path),
            data=form_fields(params),
            files={"file": (file_path.name, file_path.read_bytes(), guess_mime_type(file_path))},
        )
        return self._client.send(request)


def flag(value: bool) -> str:
    """Query-string form of a boolean."""
    return "true" if value else "false"
