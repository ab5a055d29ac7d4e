"""OCR endpoints: synchronous and asynchronous text extraction.

WHY: OCR requests carry either a local image (multipart upload) or a
public URL (JSON body). Callers pass a single request model; this
resource picks the right encoding.

HOW: A request whose FileSource is a path is sent as multipart with the
image under "file"; a URL source is sent as JSON with "file_url". Job
listing and result lookups take the API's response_as_dict and
show_original_response query flags.

RULES:
- All endpoints live under /v2/ocr
- delete_ocr_async_jobs removes every async OCR job on the account
"""

from __future__ import annotations

from typing import Dict

import httpx

from edenai_client.models.ocr import (
    OcrAsyncJobListResponse,
    OcrAsyncJobResultResponse,
    OcrAsyncRequest,
    OcrAsyncResponse,
    OcrRequest,
    OcrResponse,
)
from edenai_client.resources.base import Resource, flag


def _query(response_as_dict: bool, show_original_response: bool) -> Dict[str, str]:
    return {
        "response_as_dict": flag(response_as_dict),
        "show_original_response": flag(show_original_response),
    }


class OcrResource(Resource):
    """Client for the Eden AI OCR API."""

    base_path = "/v2/ocr"

    def _submit(self, path: str, request: OcrRequest) -> httpx.Response:
        if request.file.is_path:
            return self._post_multipart(path, request.file.path, request.to_dict())
        return self._post(path, request.to_dict())

    def ocr(self, request: OcrRequest) -> OcrResponse:
        """Extract text from an image and wait for the results."""
        response = self._submit("/ocr", request)
        return OcrResponse.from_dict(response.json())

    def ocr_async(self, request: OcrAsyncRequest) -> OcrAsyncResponse:
        """Submit an image for asynchronous OCR and return the job handle."""
        response = self._submit("/ocr_async", request)
        return OcrAsyncResponse.from_dict(response.json())

    def list_ocr_async_jobs(
        self,
        response_as_dict: bool = True,
        show_original_response: bool = False,
    ) -> OcrAsyncJobListResponse:
        response = self._get("/ocr_async", params=_query(response_as_dict, show_original_response))
        return OcrAsyncJobListResponse.from_dict(response.json())

    def get_ocr_async_job_result(
        self,
        public_id: str,
        response_as_dict: bool = True,
        show_original_response: bool = False,
    ) -> OcrAsyncJobResultResponse:
        response = self._get(
            "/ocr_async/{}".format(public_id),
            params=_query(response_as_dict, show_original_response),
        )
        return OcrAsyncJobResultResponse.from_dict(response.json())

    def delete_ocr_async_jobs(self) -> None:
        self._delete("/ocr_async")
