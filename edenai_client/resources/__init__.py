"""Endpoint groups built on top of ApiClient."""

from edenai_client.resources.audio import AudioResource
from edenai_client.resources.base import Resource
from edenai_client.resources.ocr import OcrResource

__all__ = ["AudioResource", "OcrResource", "Resource"]
