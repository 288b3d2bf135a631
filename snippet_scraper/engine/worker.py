"""Per-target unit of work: parse, fetch, extract, hand off."""

from __future__ import annotations

import time

import httpx
import structlog

from ..errors import ErrorKind, ScrapeError
from .channel import ChannelClosed, Sender
from .extractor import Extractor
from .fetcher import Fetcher
from .outcome import Outcome

_ALLOWED_SCHEMES = {"http", "https"}


def parse_target(target: str) -> httpx.URL:
    """Parse one input line into an absolute http(s) URL."""

    try:
        url = httpx.URL(target)
    except (httpx.InvalidURL, TypeError, ValueError) as exc:
        raise ScrapeError(ErrorKind.INVALID_URI) from exc
    if url.scheme not in _ALLOWED_SCHEMES or not url.host:
        raise ScrapeError(ErrorKind.INVALID_URI)
    return url


class TargetWorker:
    """Turn one target into exactly one Outcome.

    Shared by every task of a run; holds only immutable collaborators.
    """

    def __init__(
        self,
        fetcher: Fetcher,
        extractor: Extractor,
        logger: structlog.BoundLogger | None = None,
    ) -> None:
        self.fetcher = fetcher
        self.extractor = extractor
        self.logger = logger or structlog.get_logger("snippet_scraper.worker")

    async def process(self, target: str) -> Outcome:
        started = time.perf_counter()
        try:
            url = parse_target(target)
            response = await self.fetcher.fetch(url)
            text = self.extractor.extract(response.text)
        except ScrapeError as exc:
            outcome = Outcome.failure(target, exc.kind, time.perf_counter() - started)
        except Exception as exc:  # noqa: BLE001
            self.logger.exception("scrape_crashed", target=target, error=str(exc))
            outcome = Outcome.failure(
                target, ErrorKind.REQUEST_FAILED, time.perf_counter() - started
            )
        else:
            elapsed = time.perf_counter() - started
            if text is None:
                outcome = Outcome.no_match(target, elapsed)
            else:
                outcome = Outcome.extracted(target, text, elapsed)
        self.logger.info(
            "scrape_completed",
            target=target,
            outcome=outcome.kind.value,
            result=outcome.message if not outcome.ok else None,
            elapsed=round(outcome.elapsed, 4),
        )
        return outcome

    async def run(self, target: str, sender: Sender[Outcome]) -> bool:
        """Process ``target`` and send its Outcome; returns whether it was delivered."""

        async with sender:
            outcome = await self.process(target)
            try:
                await sender.send(outcome)
            except ChannelClosed:
                self.logger.warning(
                    "send_failed",
                    target=target,
                    outcome=outcome.kind.value,
                    error=ErrorKind.SEND_FAILURE.message,
                )
                return False
        return True


__all__ = ["TargetWorker", "parse_target"]
