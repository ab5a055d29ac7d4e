"""Configuration constants, supported file formats, and .env loading.

WHY: The client, the upload validators and the CLI all need the same
env variable names, accepted extensions and timeouts. Keeping them here
means adding a format or changing a timeout is a one-line edit.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level tuples, dicts and strings. The env_value() helper reads a single
variable and normalizes "unset" and "blank" to None.

RULES:
- Env values are only read through env_value(), never cached here
- ApiClient resolves its settings once at construction, not per request
- Supported format tuples hold lowercase extensions without the dot
- The API key is never hardcoded or given a placeholder default
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Environment variable names
# ---------------------------------------------------------------------------

BASE_URL_ENV = "EDENAI_BASE_URL"
API_KEY_ENV = "EDENAI_API_KEY"

DEFAULT_BASE_URL = "https://api.edenai.run"
"""Public Eden AI endpoint. Used by the CLI only; the library default is ""."""

# ---------------------------------------------------------------------------
# Supported upload formats
# ---------------------------------------------------------------------------

SUPPORTED_AUDIO_FORMATS: tuple[str, ...] = ("mp3", "wav", "flac", "ogg")
"""Audio extensions accepted by speech-to-text uploads."""

SUPPORTED_IMAGE_FORMATS: tuple[str, ...] = (
    "png", "jpg", "jpeg", "gif", "tiff", "bmp", "pdf",
)
"""Image/document extensions accepted by OCR uploads."""

MIME_TYPES: dict[str, str] = {
    "mp3": "audio/mpeg",
    "wav": "audio/wav",
    "flac": "audio/flac",
    "ogg": "audio/ogg",
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "gif": "image/gif",
    "tiff": "image/tiff",
    "bmp": "image/bmp",
    "pdf": "application/pdf",
}

# ---------------------------------------------------------------------------
# HTTP defaults
# ---------------------------------------------------------------------------

HTTP_TIMEOUT_S = 300.0
HTTP_CONNECT_TIMEOUT_S = 30.0


def env_value(name: str) -> str | None:
    """Return a stripped environment value, or None when unset or blank.

    WHY: Both the base URL and the API key fall back to the environment,
    and an empty variable should behave exactly like a missing one.

    RULES:
    - Whitespace-only values count as unset
    - Never raises; a missing variable is a normal condition
    """
    value = os.getenv(name, "").strip()
    return value or None
