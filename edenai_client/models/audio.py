"""Audio API request and response dataclasses.

WHY: The audio endpoints take a handful of optional tuning parameters and
return provider-keyed JSON. Typed dataclasses make the accepted fields
explicit and validate input before anything is sent.

HOW: Request classes validate in __post_init__ and serialize with
to_dict(), which only includes optional fields that were set. Response
classes parse raw API dicts with from_dict(), ignoring unknown keys.

RULES:
- Text-to-speech requests reject empty text with ValueError
- SpeechToTextAsyncRequest validates the audio file on construction
- TextToSpeechRequest always sends rate/pitch/volume (0 when unset);
  the async variant only sends them when set
- Base64 audio that fails to decode becomes b""
"""

from __future__ import annotations

import base64
import binascii
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from edenai_client.enums import ServiceProvider, VoiceOption, provider_values
from edenai_client.files import validate_audio_file
from edenai_client.models.common import (
    JobSummary,
    optional_float,
    optional_str,
    parse_job_list,
    parse_timestamp,
    result_keys,
    utc_now,
)


def decode_audio(value: Any) -> bytes:
    """Decode a base64 audio payload, returning b"" when it is invalid."""
    if not value:
        return b""
    try:
        return base64.b64decode(str(value), validate=True)
    except (binascii.Error, ValueError):
        return b""


def _providers(providers: Sequence[Union[ServiceProvider, str]]) -> List[ServiceProvider]:
    return [ServiceProvider(p) for p in providers]


def _require_text(text: str) -> None:
    if text == "":
        raise ValueError("Text cannot be empty")


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


@dataclass
class SpeechToTextAsyncRequest:
    """Parameters for POST /v2/audio/speech_to_text_async.

    The file is sent as a multipart upload; everything in to_dict() goes
    alongside it as form fields.
    """

    file: Union[str, Path]
    providers: List[ServiceProvider]
    language: str = "en"
    speakers: Optional[int] = None
    profanity_filter: Optional[bool] = None

    def __post_init__(self) -> None:
        self.providers = _providers(self.providers)
        validate_audio_file(self.file)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "providers": provider_values(self.providers),
            "language": self.language,
        }
        if self.speakers is not None:
            data["speakers"] = self.speakers
        if self.profanity_filter is not None:
            data["profanity_filter"] = self.profanity_filter
        return data


@dataclass
class TextToSpeechRequest:
    """Parameters for the synchronous POST /v2/audio/text_to_speech."""

    text: str
    providers: List[ServiceProvider]
    language: str = "en"
    option: Optional[str] = None
    audio_format: Optional[str] = None
    rate: Optional[int] = None
    pitch: Optional[int] = None
    volume: Optional[int] = None
    settings: Optional[Dict[str, Any]] = None

    def __post_init__(self) -> None:
        _require_text(self.text)
        self.providers = _providers(self.providers)

    @classmethod
    def make(
        cls,
        text: str,
        providers: Sequence[Union[ServiceProvider, str]],
        option: VoiceOption = VoiceOption.FEMALE,
        language: str = "en",
        audio_format: Optional[str] = None,
        rate: Optional[int] = None,
        pitch: Optional[int] = None,
        volume: Optional[int] = None,
        settings: Optional[Dict[str, Any]] = None,
    ) -> TextToSpeechRequest:
        """Build a request with a VoiceOption instead of a raw option string."""
        return cls(
            text=text,
            providers=list(providers),
            language=language,
            option=VoiceOption(option).value,
            audio_format=audio_format,
            rate=rate,
            pitch=pitch,
            volume=volume,
            settings=settings,
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "text": self.text,
            "providers": provider_values(self.providers),
            "language": self.language,
            "rate": self.rate if self.rate is not None else 0,
            "pitch": self.pitch if self.pitch is not None else 0,
            "volume": self.volume if self.volume is not None else 0,
        }
        if self.option is not None:
            data["option"] = self.option
        if self.audio_format is not None:
            data["audio_format"] = self.audio_format
        if self.settings is not None:
            data["settings"] = self.settings
        return data


@dataclass
class TextToSpeechAsyncRequest:
    """Parameters for POST /v2/audio/text_to_speech_async."""

    text: str
    providers: List[ServiceProvider]
    language: str = "en"
    option: Optional[str] = None
    audio_format: Optional[str] = None
    rate: Optional[float] = None
    pitch: Optional[float] = None
    volume: Optional[float] = None
    voice_model: Optional[str] = None

    def __post_init__(self) -> None:
        _require_text(self.text)
        self.providers = _providers(self.providers)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "text": self.text,
            "providers": provider_values(self.providers),
            "language": self.language,
        }
        optional = (
            ("option", self.option),
            ("audio_format", self.audio_format),
            ("rate", self.rate),
            ("pitch", self.pitch),
            ("volume", self.volume),
            ("voice_model", self.voice_model),
        )
        for key, value in optional:
            if value is not None:
                data[key] = value
        return data


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


@dataclass
class SpeechToTextAsyncResponse:
    """Job handle returned when a transcription is submitted."""

    job_id: str
    providers: List[str]
    submitted_at: datetime

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> SpeechToTextAsyncResponse:
        """Parse the submit response.

        RULES:
        - job_id, providers and submitted_at are required (KeyError if absent)
        """
        return cls(
            job_id=str(data["job_id"]),
            providers=list(data["providers"]),
            submitted_at=parse_timestamp(data["submitted_at"]),
        )


@dataclass
class TextToSpeechResponse:
    """Generated audio from the synchronous text-to-speech endpoint.

    The API keys results by provider; only the first provider's result is
    used.
    """

    audio_data: bytes
    content_type: str = "audio/mpeg"
    duration: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> TextToSpeechResponse:
        result = next(iter(data.values()), None) if data else None
        if not isinstance(result, dict):
            result = {}
        return cls(
            audio_data=decode_audio(result.get("audio")),
            content_type="audio/mpeg",
            duration=optional_float(result, "duration"),
        )


@dataclass
class TextToSpeechAsyncResponse:
    """Job handle for an async text-to-speech request.

    The API does not echo a submission time, so submitted_at is the time
    the response was parsed.
    """

    job_id: str
    providers: List[str]
    submitted_at: datetime = field(default_factory=utc_now)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> TextToSpeechAsyncResponse:
        return cls(
            job_id=str(data.get("public_id", "")),
            providers=result_keys(data),
            submitted_at=utc_now(),
        )


@dataclass
class ProviderResult:
    """One provider's output within an async text-to-speech job."""

    provider: str
    final_status: str
    audio_data: bytes = b""
    error: Optional[str] = None
    id: Optional[str] = None
    voice_type: Optional[int] = None
    audio_resource_url: Optional[str] = None
    cost: Optional[float] = None

    @classmethod
    def from_dict(cls, provider: str, data: Dict[str, Any]) -> ProviderResult:
        voice_type = data.get("voice_type")
        return cls(
            provider=provider,
            final_status=str(data.get("final_status", "")),
            audio_data=decode_audio(data.get("audio")),
            error=optional_str(data, "error"),
            id=optional_str(data, "id"),
            voice_type=None if voice_type is None else int(voice_type),
            audio_resource_url=optional_str(data, "audio_resource_url"),
            cost=optional_float(data, "cost"),
        )


@dataclass
class TextToSpeechAsyncJobResultResponse:
    """Status and per-provider results of one async text-to-speech job."""

    public_id: str
    status: str
    error: Optional[str]
    results: List[ProviderResult]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> TextToSpeechAsyncJobResultResponse:
        raw_results = data.get("results")
        results: List[ProviderResult] = []
        if isinstance(raw_results, dict):
            for provider, provider_data in raw_results.items():
                if isinstance(provider_data, dict):
                    results.append(ProviderResult.from_dict(str(provider), provider_data))
        return cls(
            public_id=str(data.get("public_id", "")),
            status=str(data.get("status", "")),
            error=optional_str(data, "error"),
            results=results,
        )


@dataclass
class TextToSpeechAsyncJobListResponse:
    """All async text-to-speech jobs for the account."""

    jobs: List[JobSummary]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> TextToSpeechAsyncJobListResponse:
        return cls(jobs=parse_job_list(data.get("jobs")))
