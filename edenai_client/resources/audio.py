"""Audio endpoints: speech-to-text and text-to-speech.

WHY: Transcription needs a multipart upload; synthesis takes a JSON body.
This resource hides both behind one method per endpoint that returns a
typed response model.

RULES:
- All endpoints live under /v2/audio
- speech_to_text_async uploads the request's file as multipart form data
- Every method raises the ApiError subclasses from ApiClient.send unchanged
"""

from __future__ import annotations

from edenai_client.models.audio import (
    SpeechToTextAsyncRequest,
    SpeechToTextAsyncResponse,
    TextToSpeechAsyncJobListResponse,
    TextToSpeechAsyncJobResultResponse,
    TextToSpeechAsyncRequest,
    TextToSpeechAsyncResponse,
    TextToSpeechRequest,
    TextToSpeechResponse,
)
from edenai_client.resources.base import Resource


class AudioResource(Resource):
    """Client for the Eden AI audio API."""

    base_path = "/v2/audio"

    def speech_to_text_async(self, request: SpeechToTextAsyncRequest) -> SpeechToTextAsyncResponse:
        """Upload an audio file for asynchronous transcription.

        Returns the job handle; poll the job ID for the transcript.
        """
        response = self._post_multipart("/speech_to_text_async", request.file, request.to_dict())
        return SpeechToTextAsyncResponse.from_dict(response.json())

    def text_to_speech(self, request: TextToSpeechRequest) -> TextToSpeechResponse:
        """Synthesize speech and return the decoded audio bytes."""
        response = self._post("/text_to_speech", request.to_dict())
        return TextToSpeechResponse.from_dict(response.json())

    def text_to_speech_async(self, request: TextToSpeechAsyncRequest) -> TextToSpeechAsyncResponse:
        response = self._post("/text_to_speech_async", request.to_dict())
        return TextToSpeechAsyncResponse.from_dict(response.json())

    def list_text_to_speech_async_jobs(self) -> TextToSpeechAsyncJobListResponse:
        response = self._get("/text_to_speech_async")
        return TextToSpeechAsyncJobListResponse.from_dict(response.json())

    def get_text_to_speech_async_job(self, public_id: str) -> TextToSpeechAsyncJobResultResponse:
        response = self._get("/text_to_speech_async/{}".format(public_id))
        return TextToSpeechAsyncJobResultResponse.from_dict(response.json())
