"""OCR API request and response dataclasses.

WHY: OCR can be fed a local image (multipart upload) or a public URL
(JSON body). The request model hides that difference from callers and
validates local files up front; the response models turn provider-keyed
JSON into lists of typed results.

RULES:
- Providers are sent as one comma-separated string, not a JSON list
- Path sources are validated as images; URL sources add "file_url"
- Unknown async job statuses parse as JobStatus.PENDING
- Non-dict provider entries in responses are skipped
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from edenai_client.enums import JobStatus, ServiceProvider, provider_values
from edenai_client.files import FileSource, validate_image_file
from edenai_client.models.common import (
    JobSummary,
    optional_float,
    optional_str,
    parse_job_list,
    result_keys,
    utc_now,
)


def _join_providers(providers: Sequence[ServiceProvider]) -> str:
    return ",".join(provider_values(providers))


@dataclass
class OcrRequest:
    """Parameters for POST /v2/ocr/ocr."""

    file: FileSource
    providers: List[ServiceProvider]
    language: str = "en"
    fallback_providers: Optional[List[ServiceProvider]] = None

    def __post_init__(self) -> None:
        self.providers = [ServiceProvider(p) for p in self.providers]
        if self.fallback_providers is not None:
            self.fallback_providers = [ServiceProvider(p) for p in self.fallback_providers]
        if self.file.is_path:
            validate_image_file(self.file.path)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "providers": _join_providers(self.providers),
            "language": self.language,
        }
        if self.file.is_url:
            data["file_url"] = self.file.url
        if self.fallback_providers is not None:
            data["fallback_providers"] = _join_providers(self.fallback_providers)
        return data


@dataclass
class OcrAsyncRequest(OcrRequest):
    """Parameters for POST /v2/ocr/ocr_async. Same fields as OcrRequest."""


@dataclass
class BoundingBox:
    """A recognized text region, in the provider's coordinate units."""

    text: str
    left: float
    top: float
    width: float
    height: float

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> BoundingBox:
        return cls(
            text=str(data.get("text") or ""),
            left=float(data.get("left", 0.0)),
            top=float(data.get("top", 0.0)),
            width=float(data.get("width", 0.0)),
            height=float(data.get("height", 0.0)),
        )


@dataclass
class OcrProviderResult:
    """One provider's OCR output."""

    provider: str
    status: str
    text: str
    bounding_boxes: List[BoundingBox] = field(default_factory=list)
    error: Optional[str] = None
    cost: Optional[float] = None

    @classmethod
    def from_dict(cls, provider: str, data: Dict[str, Any]) -> OcrProviderResult:
        raw_boxes = data.get("bounding_boxes")
        boxes: List[BoundingBox] = []
        if isinstance(raw_boxes, list):
            boxes = [BoundingBox.from_dict(box) for box in raw_boxes if isinstance(box, dict)]
        return cls(
            provider=provider,
            status=str(data.get("status", "")),
            text=str(data.get("text", "")),
            bounding_boxes=boxes,
            error=optional_str(data, "error"),
            cost=optional_float(data, "cost"),
        )


def _provider_results(results: Any) -> List[OcrProviderResult]:
    if not isinstance(results, dict):
        return []
    return [
        OcrProviderResult.from_dict(str(provider), provider_data)
        for provider, provider_data in results.items()
        if isinstance(provider_data, dict)
    ]


@dataclass
class OcrResponse:
    """Synchronous OCR results, one entry per provider."""

    results: List[OcrProviderResult]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> OcrResponse:
        return cls(results=_provider_results(data))


@dataclass
class OcrAsyncResponse:
    """Job handle for a submitted async OCR request."""

    public_id: str
    providers: List[str]
    submitted_at: datetime = field(default_factory=utc_now)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> OcrAsyncResponse:
        return cls(
            public_id=str(data.get("public_id", "")),
            providers=result_keys(data),
            submitted_at=utc_now(),
        )


@dataclass
class OcrAsyncJobResultResponse:
    """Status and per-provider results of one async OCR job."""

    public_id: str
    status: JobStatus
    error: Optional[str]
    results: List[OcrProviderResult]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> OcrAsyncJobResultResponse:
        return cls(
            public_id=str(data.get("public_id", "")),
            status=JobStatus.parse(data.get("status", JobStatus.PENDING.value)),
            error=optional_str(data, "error"),
            results=_provider_results(data.get("results")),
        )


@dataclass
class OcrAsyncJobListResponse:
    """All async OCR jobs for the account.

    Accepts a bare list of jobs, an object with a "jobs" list, or an
    object whose values are the job entries.
    """

    jobs: List[JobSummary]

    @classmethod
    def from_dict(cls, data: Any) -> OcrAsyncJobListResponse:
        if isinstance(data, dict):
            items = data.get("jobs", list(data.values()))
        else:
            items = data
        return cls(jobs=parse_job_list(items))
