"""Thin async client for the Clockify REST API."""
import json
import logging
from typing import Any

import httpx

from .config import Settings
from .errors import ConfigurationError, RemoteAPIError, TransportError

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = "Clockify API key not configured. Set CLOCKIFY_API_KEY environment variable."


class ClockifyClient:
    """Issues exactly one authenticated request per call, with no retries."""

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self.settings = settings
        self.transport = transport

    @property
    def reports_url(self) -> str:
        return self.settings.reports_url

    def headers(self) -> dict[str, str]:
        return {
            "X-Api-Key": self.settings.api_key or "",
            "Content-Type": "application/json",
        }

    async def request(
        self,
        path: str,
        method: str = "GET",
        body: Any = None,
        base_url: str | None = None,
    ) -> Any:
        """Send one request and return the decoded JSON body (None when empty)."""
        if not self.settings.api_key:
            raise ConfigurationError(MISSING_KEY_MESSAGE)

        url = f"{base_url or self.settings.base_url}{path}"
        content = json.dumps(body) if body is not None else None
        logger.debug("Clockify %s %s", method, url)

        try:
            async with httpx.AsyncClient(headers=self.headers(), transport=self.transport) as client:
                r = await client.request(method, url, content=content)
        except httpx.HTTPError as e:
            logger.warning("Clockify %s %s failed: %s", method, url, e)
            raise TransportError(str(e) or type(e).__name__) from e

        if not r.is_success:
            logger.warning("Clockify %s %s returned %s", method, url, r.status_code)
            raise RemoteAPIError(r.status_code, r.text)

        if not r.content.strip():
            return None
        try:
            return r.json()
        except ValueError as e:
            raise TransportError(f"invalid JSON in response from {url}: {e}") from e
