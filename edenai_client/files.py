"""Upload file sources, validation, and multipart form helpers.

WHY: Speech-to-text and OCR accept either an uploaded file or a URL. Bad
paths and unsupported formats should fail immediately with a clear error,
before a large upload is attempted and rejected by the API.

HOW: FileSource wraps exactly one of a local path or a URL.
validate_audio_file / validate_image_file check existence, type,
readability and extension. form_fields converts request parameters into
the string values a multipart form needs; httpx does the actual encoding.

RULES:
- Missing / non-file / unreadable path → FileUploadError
- Unsupported extension → ValidationError with {"file": [...]} details
- Extensions are compared case-insensitively
- Lists and dicts are JSON-encoded in form fields; bools become
  "true"/"false"; None values are dropped
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Union

from edenai_client.config import (
    MIME_TYPES,
    SUPPORTED_AUDIO_FORMATS,
    SUPPORTED_IMAGE_FORMATS,
)
from edenai_client.exceptions import FileUploadError, ValidationError

PathLike = Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class FileSource:
    """Either a local file path or a remote URL, never both.

    Build with FileSource.from_path() or FileSource.from_url().
    """

    path: Optional[Path] = None
    url: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.path is None) == (self.url is None):
            raise ValueError("FileSource needs exactly one of path or url")

    @classmethod
    def from_path(cls, file_path: PathLike) -> FileSource:
        return cls(path=Path(file_path))

    @classmethod
    def from_url(cls, file_url: str) -> FileSource:
        return cls(url=file_url)

    @property
    def is_path(self) -> bool:
        return self.path is not None

    @property
    def is_url(self) -> bool:
        return self.url is not None


def file_extension(file_path: PathLike) -> str:
    """Lowercase extension without the dot ("" when there is none)."""
    return Path(file_path).suffix.lower().lstrip(".")


def guess_mime_type(file_path: PathLike) -> str:
    return MIME_TYPES.get(file_extension(file_path), "application/octet-stream")


def _validate_file(file_path: PathLike, supported: Iterable[str], kind: str) -> Path:
    path = Path(file_path)
    if not path.exists():
        raise FileUploadError("File not found: {}".format(path))
    if not path.is_file():
        raise FileUploadError("Path is not a file: {}".format(path))
    if not os.access(path, os.R_OK):
        raise FileUploadError("File is not readable: {}".format(path))

    supported = tuple(supported)
    extension = file_extension(path)
    if extension not in supported:
        raise ValidationError(
            "Unsupported {} format: {}. Supported formats: {}".format(
                kind, extension, ", ".join(supported)
            ),
            {"file": ["Unsupported {} format: {}".format(kind, extension)]},
        )
    return path


def validate_audio_file(file_path: PathLike) -> Path:
    """Check that file_path is a readable mp3/wav/flac/ogg file."""
    return _validate_file(file_path, SUPPORTED_AUDIO_FORMATS, "audio")


def validate_image_file(file_path: PathLike) -> Path:
    """Check that file_path is a readable image or PDF the OCR API accepts."""
    return _validate_file(file_path, SUPPORTED_IMAGE_FORMATS, "image")


def form_fields(params: Mapping[str, Any]) -> Dict[str, str]:
    """Convert request parameters to multipart form field strings."""
    fields: Dict[str, str] = {}
    for name, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            fields[name] = "true" if value else "false"
        elif isinstance(value, (list, tuple, dict)):
            fields[name] = json.dumps(value)
        else:
            fields[name] = str(value)
    return fields
