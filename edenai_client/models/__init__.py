"""Typed request and response models for the audio and OCR endpoints."""

from edenai_client.models.audio import (
    ProviderResult,
    SpeechToTextAsyncRequest,
    SpeechToTextAsyncResponse,
    TextToSpeechAsyncJobListResponse,
    TextToSpeechAsyncJobResultResponse,
    TextToSpeechAsyncRequest,
    TextToSpeechAsyncResponse,
    TextToSpeechRequest,
    TextToSpeechResponse,
)
from edenai_client.models.common import JobSummary
from edenai_client.models.ocr import (
    BoundingBox,
    OcrAsyncJobListResponse,
    OcrAsyncJobResultResponse,
    OcrAsyncRequest,
    OcrAsyncResponse,
    OcrProviderResult,
    OcrRequest,
    OcrResponse,
)

__all__ = [
    "BoundingBox",
    "JobSummary",
    "OcrAsyncJobListResponse",
    "OcrAsyncJobResultResponse",
    "OcrAsyncRequest",
    "OcrAsyncResponse",
    "OcrProviderResult",
    "OcrRequest",
    "OcrResponse",
    "ProviderResult",
    "SpeechToTextAsyncRequest",
    "SpeechToTextAsyncResponse",
    "TextToSpeechAsyncJobListResponse",
    "TextToSpeechAsyncJobResultResponse",
    "TextToSpeechAsyncRequest",
    "TextToSpeechAsyncResponse",
    "TextToSpeechRequest",
    "TextToSpeechResponse",
]
