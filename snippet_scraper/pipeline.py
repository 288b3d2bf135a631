"""Pipeline wiring input lines to concurrent workers and a single result sink."""

from __future__ import annotations

import asyncio
import time
from dataclasses import asdict, dataclass
from typing import Iterable, Iterator

import structlog

from .config import DEFAULT_CHANNEL_CAPACITY
from .engine import BoundedChannel, Outcome, OutcomeKind, Sender, TargetWorker
from .errors import NO_MATCH_MESSAGE
from .ui import Reporter

_EXHAUSTED = object()


@dataclass(slots=True)
class PipelineSummary:
    """Counters describing one finished run."""

    targets: int = 0
    extracted: int = 0
    no_match: int = 0
    failed: int = 0
    undelivered: int = 0
    elapsed: float = 0.0

    @property
    def delivered(self) -> int:
        return self.extracted + self.no_match + self.failed

    def as_dict(self) -> dict:
        return asdict(self)


class ResultSink:
    """Drain the channel and dispatch every Outcome to the reporter."""

    def __init__(self, reporter: Reporter) -> None:
        self.reporter = reporter

    def dispatch(self, outcome: Outcome, summary: PipelineSummary) -> None:
        if outcome.kind is OutcomeKind.EXTRACTED:
            summary.extracted += 1
            self.reporter.success(outcome.target, outcome.text or "")
        elif outcome.kind is OutcomeKind.NO_MATCH:
            summary.no_match += 1
            self.reporter.error(outcome.target, NO_MATCH_MESSAGE)
        else:
            summary.failed += 1
            self.reporter.error(outcome.target, outcome.message)

    async def drain(self, channel: BoundedChannel[Outcome], summary: PipelineSummary) -> None:
        # Channel closure is the only stop signal.
        async for outcome in channel:
            self.dispatch(outcome, summary)


class Pipeline:
    """Spawn one worker per target and hand results to the sink.

    Workers are not capped; only completed results are bounded by the
    channel capacity.
    """

    def __init__(
        self,
        worker: TargetWorker,
        capacity: int = DEFAULT_CHANNEL_CAPACITY,
        logger: structlog.BoundLogger | None = None,
    ) -> None:
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self.worker = worker
        self.capacity = capacity
        self.logger = logger or structlog.get_logger("snippet_scraper.pipeline")

    async def run(self, lines: Iterable[str], reporter: Reporter) -> PipelineSummary:
        started = time.perf_counter()
        summary = PipelineSummary()
        channel: BoundedChannel[Outcome] = BoundedChannel(self.capacity)
        sink = ResultSink(reporter)
        self.logger.info("pipeline_started", capacity=self.capacity)

        async with asyncio.TaskGroup() as group:
            group.create_task(self._produce(lines, channel.sender(), group, summary))
            await sink.drain(channel, summary)

        summary.elapsed = time.perf_counter() - started
        reporter.finish()
        self.logger.info("pipeline_finished", **summary.as_dict())
        return summary

    # ------------------------------------------------------------------
    async def _produce(
        self,
        lines: Iterable[str],
        sender: Sender[Outcome],
        group: asyncio.TaskGroup,
        summary: PipelineSummary,
    ) -> None:
        async with sender:
            iterator = iter(lines)
            while True:
                line = await self._next_line(iterator)
                if line is _EXHAUSTED:
                    break
                summary.targets += 1
                group.create_task(self._work(line, sender.clone(), summary))
        self.logger.debug("input_exhausted", targets=summary.targets)

    async def _work(self, target: str, sender: Sender[Outcome], summary: PipelineSummary) -> None:
        delivered = await self.worker.run(target, sender)
        if not delivered:
            summary.undelivered += 1

    @staticmethod
    async def _next_line(iterator: Iterator[str]):
        # Reading may block on a pipe; keep it off the event loop.
        return await asyncio.to_thread(next, iterator, _EXHAUSTED)


__all__ = ["Pipeline", "PipelineSummary", "ResultSink"]
