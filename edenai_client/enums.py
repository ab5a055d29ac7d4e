"""Enumerations shared by request and response models."""

from __future__ import annotations

import enum
from typing import Iterable, List


class ServiceProvider(str, enum.Enum):
    """AI providers Eden AI can route a request to."""

    GOOGLE = "google"
    AMAZON = "amazon"
    MICROSOFT = "microsoft"
    OPENAI = "openai"
    DEEPGRAM = "deepgram"
    ASSEMBLY_AI = "assembly_ai"
    REV_AI = "rev_ai"
    SPEECHMATICS = "speechmatics"
    IBMWATSON = "ibmwatson"
    AZURE = "azure"
    API4AI = "api4ai"
    BASE64 = "base64"
    CLARIFAI = "clarifai"
    MINDEE = "mindee"
    SENTISIGHT = "sentisight"
    MISTRAL = "mistral"


class JobStatus(str, enum.Enum):
    """Lifecycle of an async job."""

    PENDING = "pending"
    PROCESSING = "processing"
    FINISHED = "finished"
    FAILED = "failed"

    @classmethod
    def parse(cls, value: object) -> JobStatus:
        """Map an API status string to a member, PENDING when unknown."""
        try:
            return cls(str(value))
        except ValueError:
            return cls.PENDING


class VoiceOption(str, enum.Enum):
    """Voice gender for text-to-speech."""

    FEMALE = "FEMALE"
    MALE = "MALE"


def provider_values(providers: Iterable[ServiceProvider]) -> List[str]:
    return [provider.value for provider in providers]
