"""Per-target failure taxonomy."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of per-target failures."""

    INVALID_URI = "invalid_uri"
    REQUEST_TIMEOUT = "request_timeout"
    REQUEST_FAILED = "request_failed"
    INVALID_RESPONSE = "invalid_response"
    SEND_FAILURE = "send_failure"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    ErrorKind.INVALID_URI: "INVALID URI",
    ErrorKind.REQUEST_TIMEOUT: "REQUEST TIMEOUT",
    ErrorKind.REQUEST_FAILED: "REQUEST FAILED",
    ErrorKind.INVALID_RESPONSE: "INVALID RESPONSE",
    ErrorKind.SEND_FAILURE: "SEND FAILURE",
}

NO_MATCH_MESSAGE = "NO MATCH"


class ScrapeError(Exception):
    """Raised by the engine when a single target cannot be scraped."""

    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(kind.message)
        self.kind = kind


__all__ = ["ErrorKind", "NO_MATCH_MESSAGE", "ScrapeError"]
