"""Shared pytest fixtures for gitdown tests.

Fixtures are organized by category:
- HTTP fixtures: a fake Markdown API built on httpx.MockTransport
- Cache fixtures: an in-memory cache store driven by a controllable clock
"""

import json
from typing import Any, Callable

import httpx
import pytest

from gitdown import GitDown

# =============================================================================
# HTTP Fixtures
# =============================================================================


class FakeMarkdownAPI:
    """Records requests and answers with a configurable response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body: str | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.body is not None:
            return httpx.Response(self.status_code, text=self.body)
        # Echo the submitted text, wrapped like a rendered paragraph
        text = json.loads(request.content)["text"]
        return httpx.Response(self.status_code, text=f"<p>{text}</p>\n")

    @property
    def last_text(self) -> str:
        return json.loads(self.requests[-1].content)["text"]

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def api() -> FakeMarkdownAPI:
    """Return a fake Markdown API."""
    return FakeMarkdownAPI()


@pytest.fixture
def make_gitdown(api: FakeMarkdownAPI) -> Callable[..., GitDown]:
    """Return a factory for GitDown instances wired to the fake API."""

    def factory(**kwargs: Any) -> GitDown:
        return GitDown(client=api.client(), **kwargs)

    return factory


# =============================================================================
# Cache Fixtures
# =============================================================================


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self) -> None:
        self.now = 0.0

    def advance(self, minutes: float) -> None:
        self.now += minutes * 60

    def __call__(self) -> float:
        return self.now


class FakeCacheStore:
    """In-memory CacheStore with expiry checked against a FakeClock."""

    def __init__(self, clock: FakeClock) -> None:
        self.clock = clock
        self.entries: dict[str, tuple[Any, float | None]] = {}

    def remember_forever(self, key: str, producer: Callable[[], Any]) -> Any:
        return self._remember(key, None, producer)

    def remember(self, key: str, minutes: float, producer: Callable[[], Any]) -> Any:
        return self._remember(key, self.clock() + minutes * 60, producer)

    def _remember(
        self, key: str, expires_at: float | None, producer: Callable[[], Any]
    ) -> Any:
        if key in self.entries:
            value, entry_expiry = self.entries[key]
            if entry_expiry is None or self.clock() < entry_expiry:
                return value
        value = producer()
        self.entries[key] = (value, expires_at)
        return value


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache_store(clock: FakeClock) -> FakeCacheStore:
    """Return an empty fake cache store."""
    return FakeCacheStore(clock)
