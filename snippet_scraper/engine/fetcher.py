"""HTTP fetching bounded by a wall-clock deadline."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Dict

import httpx
import structlog

from ..errors import ErrorKind, ScrapeError


@dataclass(slots=True)
class FetchResponse:
    """Standardised response wrapper."""

    url: str
    status_code: int
    text: str
    headers: Dict[str, str] = field(default_factory=dict)


KEEPALIVE_CONNECTIONS = 100


def build_client(
    timeout: float, user_agent: str | None = None, **kwargs
) -> httpx.AsyncClient:
    """Create the shared client used by every fetch of a run.

    The client-side timeout mirrors the fetch deadline; both surface as
    ``REQUEST_TIMEOUT``. The pool places no cap on open connections, so
    every worker fetches at once instead of queueing for a slot against
    its own deadline.
    """

    headers = {"User-Agent": user_agent} if user_agent else None
    kwargs.setdefault(
        "limits",
        httpx.Limits(max_connections=None, max_keepalive_connections=KEEPALIVE_CONNECTIONS),
    )
    return httpx.AsyncClient(timeout=timeout, headers=headers, **kwargs)


class Fetcher:
    """Perform one GET per target and classify every failure."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        timeout: float,
        logger: structlog.BoundLogger | None = None,
    ) -> None:
        if timeout <= 0:
            raise ValueError("timeout must be positive")
        self.client = client
        self.timeout = timeout
        self.logger = logger or structlog.get_logger("snippet_scraper.fetcher")

    async def fetch(self, url: httpx.URL) -> FetchResponse:
        try:
            async with asyncio.timeout(self.timeout):
                return await self._request(url)
        except (TimeoutError, httpx.TimeoutException) as exc:
            self.logger.debug("fetch_timeout", url=str(url), timeout=self.timeout)
            raise ScrapeError(ErrorKind.REQUEST_TIMEOUT) from exc

    # ------------------------------------------------------------------
    async def _request(self, url: httpx.URL) -> FetchResponse:
        request = self.client.build_request("GET", url)
        try:
            response = await self.client.send(request, stream=True)
        except httpx.TimeoutException:
            raise
        except httpx.HTTPError as exc:
            self.logger.debug("fetch_failed", url=str(url), error=str(exc))
            raise ScrapeError(ErrorKind.REQUEST_FAILED) from exc

        try:
            if not response.is_success:
                self.logger.debug("fetch_bad_status", url=str(url), status=response.status_code)
                raise ScrapeError(ErrorKind.REQUEST_FAILED)
            try:
                body = await response.aread()
            except httpx.TimeoutException:
                raise
            except httpx.HTTPError as exc:
                self.logger.debug("fetch_body_failed", url=str(url), error=str(exc))
                raise ScrapeError(ErrorKind.INVALID_RESPONSE) from exc
        finally:
            await response.aclose()

        return FetchResponse(
            url=str(response.url),
            status_code=response.status_code,
            text=self._decode(body, response.charset_encoding),
            headers=dict(response.headers),
        )

    @staticmethod
    def _decode(body: bytes, charset: str | None) -> str:
        try:
            return body.decode(charset or "utf-8")
        except (UnicodeDecodeError, LookupError) as exc:
            raise ScrapeError(ErrorKind.INVALID_RESPONSE) from exc


__all__ = ["Fetcher", "FetchResponse", "build_client"]
