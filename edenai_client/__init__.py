"""Eden AI client — typed access to multi-provider audio and OCR APIs.

WHY: Eden AI fronts many AI providers behind one HTTP API. This package
turns that API into typed request/response models and typed exceptions,
so callers never deal with raw status codes or JSON.

HOW: Three layers: ApiClient (middleware pipeline: auth, error mapping,
retries), resources (one method per endpoint), and models (dataclasses
with to_dict/from_dict). Each layer is independently testable.

RULES:
- Every request goes through ApiClient.send
- Every failure surfaces as an EdenAIError subclass
- Resources never talk to httpx transports directly
"""

from edenai_client.api.client import ApiClient
from edenai_client.enums import JobStatus, ServiceProvider, VoiceOption
from edenai_client.exceptions import (
    ApiError,
    AuthenticationError,
    AuthorizationError,
    EdenAIError,
    ErrorKind,
    FileUploadError,
    NetworkError,
    RateLimitError,
    ResourceNotFoundError,
    ServerError,
    ValidationError,
)
from edenai_client.files import FileSource
from edenai_client.resources import AudioResource, OcrResource

__version__ = "0.1.0"

__all__ = [
    "ApiClient",
    "ApiError",
    "AudioResource",
    "AuthenticationError",
    "AuthorizationError",
    "EdenAIError",
    "ErrorKind",
    "FileSource",
    "FileUploadError",
    "JobStatus",
    "NetworkError",
    "OcrResource",
    "RateLimitError",
    "ResourceNotFoundError",
    "ServerError",
    "ServiceProvider",
    "ValidationError",
    "VoiceOption",
]
