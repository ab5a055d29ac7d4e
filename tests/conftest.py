"""Shared test fixtures for the edenai_client test suite.

WHY: Almost every test needs a fake transport, a way to stop retries from
really sleeping, and an environment without stray EDENAI_* variables.
Centralizing these avoids duplication and keeps tests deterministic.

HOW: ScriptedTransport replays a fixed list of responses/exceptions and
records every request it receives. Autouse fixtures patch time.sleep in
the retry module and clear the EDENAI_* environment variables.

RULES:
- Tests never touch the network
- Retry backoff never really sleeps; inspect the `sleep` fixture instead
- ScriptedTransport repeats its last outcome once the script runs out
"""

from __future__ import annotations

from typing import Any, Dict, List, Union
from unittest.mock import patch

import httpx
import pytest

from edenai_client.config import API_KEY_ENV, BASE_URL_ENV

BASE_URL = "https://api.example.test"

Outcome = Union[httpx.Response, BaseException]


class ScriptedTransport:
    """Fake transport that returns (or raises) scripted outcomes in order."""

    def __init__(self, *outcomes: Outcome) -> None:
        if not outcomes:
            outcomes = (httpx.Response(200),)
        self._outcomes: List[Outcome] = list(outcomes)
        self.requests: List[httpx.Request] = []

    @property
    def calls(self) -> int:
        return len(self.requests)

    def send(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if len(self._outcomes) > 1:
            outcome = self._outcomes.pop(0)
        else:
            outcome = self._outcomes[0]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


def json_response(status_code: int, body: Dict[str, Any]) -> httpx.Response:
    return httpx.Response(status_code, json=body)


def make_request(method: str = "GET", path: str = "/v2/resource", **kwargs: Any) -> httpx.Request:
    return httpx.Request(method, BASE_URL + path, **kwargs)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Remove EDENAI_* variables so .env files or the shell don't leak in."""
    monkeypatch.delenv(API_KEY_ENV, raising=False)
    monkeypatch.delenv(BASE_URL_ENV, raising=False)


@pytest.fixture(autouse=True)
def sleep():
    """Patch the retry backoff sleep and expose the mock."""
    with patch("edenai_client.middleware.retry.time.sleep") as mock_sleep:
        yield mock_sleep


@pytest.fixture
def request_():
    """A plain GET request with no body."""
    return make_request()


@pytest.fixture
def audio_file(tmp_path):
    """A small fake mp3 on disk."""
    path = tmp_path / "speech.mp3"
    path.write_bytes(b"ID3fake-audio-bytes")
    return path


@pytest.fixture
def image_file(tmp_path):
    """A small fake png on disk."""
    path = tmp_path / "scan.png"
    path.write_bytes(b"\x89PNGfake-image-bytes")
    return path
