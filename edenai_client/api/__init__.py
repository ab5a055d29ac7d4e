"""Eden AI HTTP client package.

WHY: All network traffic goes through a single ApiClient so that auth,
error mapping and retries are applied uniformly.

RULES:
- All HTTP calls go through ApiClient.send (no direct httpx sends elsewhere)
- Authentication is via Bearer token from the constructor or environment
"""

from edenai_client.api.client import ApiClient, Transport

__all__ = ["ApiClient", "Transport"]
