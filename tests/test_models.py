"""Tests for request serialization and response parsing.

WHY: The models are the contract with the API's JSON. Field names,
which optional fields are sent, and how sloppy responses are tolerated
all need to be pinned down.

HOW: Request tests build a model and assert on to_dict(). Response tests
feed representative API payloads to from_dict() and check the typed
result, including missing and malformed fields.

RULES:
- Payloads are literal dicts; nothing here goes through HTTP
"""

from __future__ import annotations

import base64
from datetime import datetime, timezone

import pytest

from edenai_client.enums import JobStatus, ServiceProvider, VoiceOption
from edenai_client.exceptions import ValidationError
from edenai_client.files import FileSource
from edenai_client.models import (
    OcrAsyncJobListResponse,
    OcrAsyncJobResultResponse,
    OcrAsyncRequest,
    OcrAsyncResponse,
    OcrRequest,
    OcrResponse,
    SpeechToTextAsyncRequest,
    SpeechToTextAsyncResponse,
    TextToSpeechAsyncJobListResponse,
    TextToSpeechAsyncJobResultResponse,
    TextToSpeechAsyncRequest,
    TextToSpeechAsyncResponse,
    TextToSpeechRequest,
    TextToSpeechResponse,
)
from edenai_client.models.audio import decode_audio
from edenai_client.models.common import JobSummary, parse_timestamp

AUDIO = b"\xff\xfbfake-mp3"
AUDIO_B64 = base64.b64encode(AUDIO).decode("ascii")


# ---------------------------------------------------------------------------
# Enums and shared helpers
# ---------------------------------------------------------------------------


class TestEnums:
    def test_job_status_parse(self):
        assert JobStatus.parse("finished") is JobStatus.FINISHED
        assert JobStatus.parse("failed") is JobStatus.FAILED
        assert JobStatus.parse("weird") is JobStatus.PENDING
        assert JobStatus.parse(None) is JobStatus.PENDING

    def test_provider_values_are_wire_names(self):
        assert ServiceProvider.ASSEMBLY_AI.value == "assembly_ai"
        assert ServiceProvider("google") is ServiceProvider.GOOGLE

    def test_unknown_provider_rejected(self):
        with pytest.raises(ValueError):
            ServiceProvider("nobody")


class TestCommon:
    def test_parse_timestamp_zulu(self):
        assert parse_timestamp("2024-01-15T10:30:00Z") == datetime(
            2024, 1, 15, 10, 30, tzinfo=timezone.utc
        )

    @pytest.mark.parametrize(
        "value, microsecond",
        [
            ("2024-01-15T10:30:00.12345Z", 123450),
            ("2024-01-15T10:30:00.1Z", 100000),
            ("2024-01-15T10:30:00.123456789+00:00", 123456),
            ("2024-01-15T10:30:00.123Z", 123000),
        ],
    )
    def test_parse_timestamp_any_fraction_length(self, value, microsecond):
        parsed = parse_timestamp(value)

        assert parsed.microsecond == microsecond
        assert parsed.tzinfo is not None

    def test_job_list_with_five_digit_fraction(self):
        response = TextToSpeechAsyncJobListResponse.from_dict(
            {"jobs": [{"public_id": "a", "created_at": "2024-01-15T10:30:00.12345Z"}]}
        )

        assert response.jobs[0].created_at.second == 0
        assert response.jobs[0].created_at.microsecond == 123450

    def test_job_summary(self):
        job = JobSummary.from_dict(
            {
                "providers": "google,amazon",
                "nb": 2,
                "nb_ok": 1,
                "public_id": "job-1",
                "state": "finished",
                "created_at": "2024-01-15T10:30:00+00:00",
            }
        )

        assert job.providers == "google,amazon"
        assert (job.nb, job.nb_ok) == (2, 1)
        assert job.public_id == "job-1"
        assert job.created_at.year == 2024

    def test_job_summary_defaults(self):
        job = JobSummary.from_dict({})

        assert job.nb == 0
        assert job.public_id == ""
        assert job.created_at.tzinfo is not None

    def test_decode_audio(self):
        assert decode_audio(AUDIO_B64) == AUDIO
        assert decode_audio("not base64!!") == b""
        assert decode_audio(None) == b""


# ---------------------------------------------------------------------------
# Audio requests
# ---------------------------------------------------------------------------


class TestSpeechToTextAsyncRequest:
    def test_to_dict_minimal(self, audio_file):
        request = SpeechToTextAsyncRequest(audio_file, [ServiceProvider.GOOGLE])

        assert request.to_dict() == {"providers": ["google"], "language": "en"}

    def test_to_dict_optional_fields(self, audio_file):
        request = SpeechToTextAsyncRequest(
            audio_file, ["google", "deepgram"], language="fr", speakers=3, profanity_filter=True
        )

        assert request.to_dict() == {
            "providers": ["google", "deepgram"],
            "language": "fr",
            "speakers": 3,
            "profanity_filter": True,
        }

    def test_validates_file_on_construction(self, image_file):
        with pytest.raises(ValidationError):
            SpeechToTextAsyncRequest(image_file, [ServiceProvider.GOOGLE])


class TestTextToSpeechRequest:
    def test_to_dict_fills_tuning_defaults(self):
        request = TextToSpeechRequest("Hello", [ServiceProvider.GOOGLE])

        assert request.to_dict() == {
            "text": "Hello",
            "providers": ["google"],
            "language": "en",
            "rate": 0,
            "pitch": 0,
            "volume": 0,
        }

    def test_make_with_voice_option(self):
        request = TextToSpeechRequest.make(
            "Hi", ["amazon"], option=VoiceOption.MALE, audio_format="wav", rate=5
        )
        data = request.to_dict()

        assert data["option"] == "MALE"
        assert data["audio_format"] == "wav"
        assert data["rate"] == 5
        assert data["providers"] == ["amazon"]

    def test_settings_included(self):
        request = TextToSpeechRequest("Hi", ["google"], settings={"google": "en-US-Wavenet-A"})

        assert request.to_dict()["settings"] == {"google": "en-US-Wavenet-A"}

    def test_empty_text_rejected(self):
        with pytest.raises(ValueError, match="Text cannot be empty"):
            TextToSpeechRequest("", [ServiceProvider.GOOGLE])


class TestTextToSpeechAsyncRequest:
    def test_only_set_fields_sent(self):
        request = TextToSpeechAsyncRequest("Hello", ["google"], voice_model="en-US-Neural2-A", pitch=1.5)

        assert request.to_dict() == {
            "text": "Hello",
            "providers": ["google"],
            "language": "en",
            "pitch": 1.5,
            "voice_model": "en-US-Neural2-A",
        }

    def test_empty_text_rejected(self):
        with pytest.raises(ValueError):
            TextToSpeechAsyncRequest("", ["google"])


# ---------------------------------------------------------------------------
# Audio responses
# ---------------------------------------------------------------------------


class TestAudioResponses:
    def test_speech_to_text_async_response(self):
        response = SpeechToTextAsyncResponse.from_dict(
            {
                "job_id": "job-42",
                "providers": ["google"],
                "submitted_at": "2024-01-15T10:30:00Z",
                "extra": "ignored",
            }
        )

        assert response.job_id == "job-42"
        assert response.providers == ["google"]
        assert response.submitted_at.tzinfo is not None

    def test_speech_to_text_async_response_requires_job_id(self):
        with pytest.raises(KeyError):
            SpeechToTextAsyncResponse.from_dict({"providers": [], "submitted_at": "2024-01-15"})

    def test_text_to_speech_response_uses_first_provider(self):
        response = TextToSpeechResponse.from_dict(
            {
                "google": {"audio": AUDIO_B64, "duration": 1.25},
                "amazon": {"audio": base64.b64encode(b"other").decode()},
            }
        )

        assert response.audio_data == AUDIO
        assert response.content_type == "audio/mpeg"
        assert response.duration == 1.25

    @pytest.mark.parametrize("payload", [{}, {"google": "oops"}, {"google": {"audio": "%%%"}}])
    def test_text_to_speech_response_tolerates_bad_payloads(self, payload):
        response = TextToSpeechResponse.from_dict(payload)

        assert response.audio_data == b""
        assert response.duration is None

    def test_text_to_speech_async_response(self):
        response = TextToSpeechAsyncResponse.from_dict(
            {"public_id": "tts-1", "results": {"google": {}, "amazon": {}}}
        )

        assert response.job_id == "tts-1"
        assert response.providers == ["google", "amazon"]

    def test_text_to_speech_async_job_result(self):
        response = TextToSpeechAsyncJobResultResponse.from_dict(
            {
                "public_id": "tts-1",
                "status": "finished",
                "error": None,
                "results": {
                    "google": {
                        "final_status": "success",
                        "audio": AUDIO_B64,
                        "voice_type": 1,
                        "audio_resource_url": "https://cdn.example.test/a.mp3",
                        "cost": 0.016,
                    },
                    "amazon": {"final_status": "failed", "error": "quota"},
                    "broken": "not a dict",
                },
            }
        )

        assert response.status == "finished"
        assert response.error is None
        assert [r.provider for r in response.results] == ["google", "amazon"]
        google, amazon = response.results
        assert google.audio_data == AUDIO
        assert google.voice_type == 1
        assert google.cost == pytest.approx(0.016)
        assert amazon.error == "quota"
        assert amazon.audio_data == b""

    def test_text_to_speech_async_job_list(self):
        response = TextToSpeechAsyncJobListResponse.from_dict(
            {"jobs": [{"public_id": "a", "state": "finished"}, "junk", {"public_id": "b"}]}
        )

        assert [job.public_id for job in response.jobs] == ["a", "b"]

    def test_text_to_speech_async_job_list_missing(self):
        assert TextToSpeechAsyncJobListResponse.from_dict({}).jobs == []


# ---------------------------------------------------------------------------
# OCR
# ---------------------------------------------------------------------------


class TestOcrRequest:
    def test_path_source(self, image_file):
        request = OcrRequest(FileSource.from_path(image_file), ["google", "amazon"])

        assert request.to_dict() == {"providers": "google,amazon", "language": "en"}

    def test_url_source(self):
        request = OcrRequest(
            FileSource.from_url("https://example.test/scan.png"),
            [ServiceProvider.MICROSOFT],
            language="de",
            fallback_providers=["google"],
        )

        assert request.to_dict() == {
            "providers": "microsoft",
            "language": "de",
            "file_url": "https://example.test/scan.png",
            "fallback_providers": "google",
        }

    def test_path_source_validated(self, audio_file):
        with pytest.raises(ValidationError):
            OcrAsyncRequest(FileSource.from_path(audio_file), ["google"])

    def test_url_source_not_validated(self):
        OcrRequest(FileSource.from_url("https://example.test/readme.txt"), ["google"])


class TestOcrResponses:
    def test_ocr_response(self):
        response = OcrResponse.from_dict(
            {
                "google": {
                    "status": "success",
                    "text": "Hello world",
                    "bounding_boxes": [
                        {"text": "Hello", "left": 0.1, "top": 0.2, "width": 0.3, "height": 0.05},
                        "junk",
                    ],
                    "cost": 1.5,
                },
                "amazon": {"status": "fail", "error": "Unsupported language"},
            }
        )

        google, amazon = response.results
        assert google.text == "Hello world"
        assert len(google.bounding_boxes) == 1
        assert google.bounding_boxes[0].width == pytest.approx(0.3)
        assert google.cost == 1.5
        assert amazon.error == "Unsupported language"
        assert amazon.text == ""

    def test_ocr_async_response(self):
        response = OcrAsyncResponse.from_dict({"public_id": "ocr-1", "results": {"google": {}}})

        assert response.public_id == "ocr-1"
        assert response.providers == ["google"]

    def test_ocr_async_job_result(self):
        response = OcrAsyncJobResultResponse.from_dict(
            {
                "public_id": "ocr-1",
                "status": "processing",
                "results": {"google": {"status": "pending", "text": ""}},
            }
        )

        assert response.status is JobStatus.PROCESSING
        assert response.error is None
        assert response.results[0].provider == "google"

    def test_ocr_async_job_result_unknown_status(self):
        response = OcrAsyncJobResultResponse.from_dict({"public_id": "x", "status": "queued"})

        assert response.status is JobStatus.PENDING
        assert response.results == []

    @pytest.mark.parametrize(
        "payload",
        [
            [{"public_id": "a"}, {"public_id": "b"}],
            {"jobs": [{"public_id": "a"}, {"public_id": "b"}]},
            {"first": {"public_id": "a"}, "second": {"public_id": "b"}},
        ],
    )
    def test_ocr_async_job_list_shapes(self, payload):
        response = OcrAsyncJobListResponse.from_dict(payload)

        assert [job.public_id for job in response.jobs] == ["a", "b"]
