"""Response pieces shared by the audio and OCR models."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

_FRACTION = re.compile(r"\.(\d+)")


def _six_digit_fraction(match: re.Match) -> str:
    return "." + match.group(1)[:6].ljust(6, "0")


def parse_timestamp(value: Any) -> datetime:
    """Parse an ISO 8601 timestamp, accepting a trailing "Z" for UTC.

    Fractional seconds of any length are padded or cut to microseconds,
    since datetime.fromisoformat before 3.11 only takes 3 or 6 digits.
    """
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(_FRACTION.sub(_six_digit_fraction, text, count=1))


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def optional_str(data: Dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    return None if value is None else str(value)


def optional_float(data: Dict[str, Any], key: str) -> Optional[float]:
    value = data.get(key)
    return None if value is None else float(value)


def result_keys(data: Dict[str, Any]) -> List[str]:
    """Provider names from a "results" mapping, [] when absent."""
    results = data.get("results")
    return list(results.keys()) if isinstance(results, dict) else []


@dataclass
class JobSummary:
    """One row of an async job listing.

    RULES:
    - providers is the API's comma-separated provider string, unparsed
    - created_at falls back to the parse time when the API omits it
    """

    providers: str
    nb: int
    nb_ok: int
    public_id: str
    state: str
    created_at: datetime

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> JobSummary:
        created_at = data.get("created_at")
        return cls(
            providers=str(data.get("providers", "")),
            nb=int(data.get("nb", 0)),
            nb_ok=int(data.get("nb_ok", 0)),
            public_id=str(data.get("public_id", "")),
            state=str(data.get("state", "")),
            created_at=parse_timestamp(created_at) if created_at else utc_now(),
        )


def parse_job_list(items: Any) -> List[JobSummary]:
    """Parse a list of job dicts, skipping anything that is not a dict."""
    if not isinstance(items, list):
        return []
    return [JobSummary.from_dict(item) for item in items if isinstance(item, dict)]
