"""Pytest configuration and shared fixtures."""
import json

import httpx
import pytest

from clockify_mcp.clockify import ClockifyClient
from clockify_mcp.config import Settings
from clockify_mcp.dispatcher import Dispatcher


class FakeClockify:
    """Stands in for the Clockify API and records every request it receives."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.replies: list[tuple[int, dict]] = []
        self.default_json = {}

    def reply(self, status_code: int = 200, json=None, text: str | None = None) -> None:
        if text is not None:
            self.replies.append((status_code, {"text": text}))
        else:
            self.replies.append((status_code, {"json": json}))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.replies:
            status_code, kwargs = self.replies.pop(0)
            return httpx.Response(status_code, **kwargs)
        return httpx.Response(200, json=self.default_json)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_body(self):
        return json.loads(self.last.content)


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="test-key")


@pytest.fixture
def fake() -> FakeClockify:
    return FakeClockify()


@pytest.fixture
def api(settings: Settings, fake: FakeClockify) -> ClockifyClient:
    return ClockifyClient(settings, transport=fake.transport)


@pytest.fixture
def dispatcher(api: ClockifyClient) -> Dispatcher:
    return Dispatcher(api)
