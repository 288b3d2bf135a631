"""Pytest configuration providing shared fixtures for the scraper tests."""

from __future__ import annotations

import asyncio
import re
from typing import Any, Awaitable, Callable

import httpx
import pytest

from snippet_scraper.config import ScrapeSettings
from snippet_scraper.engine import Extractor, Fetcher, TargetWorker
from snippet_scraper.ui import Reporter

Handler = Callable[[httpx.Request], Awaitable[httpx.Response] | httpx.Response]


class RecordingReporter(Reporter):
    """Reporter double remembering every call in order."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, ...]] = []
        self.finished = 0

    def success(self, target: str, text: str) -> None:
        self.calls.append(("success", target, text))

    def error(self, target: str, message: str) -> None:
        self.calls.append(("error", target, message))

    def finish(self) -> None:
        self.finished += 1
        self.calls.append(("finish",))

    @property
    def rows(self) -> dict[str, tuple[str, str]]:
        return {call[1]: (call[0], call[2]) for call in self.calls if call[0] != "finish"}


def _html_site(pages: dict[str, tuple[int, str]]) -> Handler:
    """Build a transport handler serving ``{url: (status, body)}``."""

    def handler(request: httpx.Request) -> httpx.Response:
        status, body = pages.get(str(request.url), (404, "not found"))
        return httpx.Response(status, text=body)

    return handler


def _slow_site(delay: float, body: str = "<title>late</title>") -> Handler:
    async def handler(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(delay)
        return httpx.Response(200, text=body)

    return handler


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def sample_settings() -> Callable[..., ScrapeSettings]:
    def _builder(**overrides: Any) -> ScrapeSettings:
        base: dict[str, Any] = {"pattern": r"<title>(.*)</title>", "timeout": 5}
        base.update(overrides)
        return ScrapeSettings(**base)

    return _builder


@pytest.fixture
def mock_client() -> Callable[[Handler], httpx.AsyncClient]:
    def _factory(handler: Handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _factory


@pytest.fixture
def make_worker() -> Callable[..., TargetWorker]:
    def _builder(
        client: httpx.AsyncClient, pattern: str = r"<title>(.*)</title>", timeout: float = 5.0
    ) -> TargetWorker:
        return TargetWorker(Fetcher(client, timeout), Extractor(re.compile(pattern)))

    return _builder


@pytest.fixture
def html_site() -> Callable[[dict[str, tuple[int, str]]], Handler]:
    return _html_site


@pytest.fixture
def slow_site() -> Callable[..., Handler]:
    return _slow_site
