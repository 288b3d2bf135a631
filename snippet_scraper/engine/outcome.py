"""Result record produced once per target."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..errors import NO_MATCH_MESSAGE, ErrorKind


class OutcomeKind(str, Enum):
    EXTRACTED = "extracted"
    NO_MATCH = "no_match"
    FAILURE = "failure"


@dataclass(slots=True, frozen=True)
class Outcome:
    """Final result for one target.

    ``target`` is always the line exactly as it was read, so reporting can
    echo what the user supplied.
    """

    target: str
    kind: OutcomeKind
    text: str | None = None
    error: ErrorKind | None = None
    elapsed: float = 0.0

    def __post_init__(self) -> None:
        if self.kind is OutcomeKind.FAILURE and self.error is None:
            raise ValueError("failure outcome requires an error kind")
        if self.kind is not OutcomeKind.FAILURE and self.error is not None:
            raise ValueError(f"{self.kind.value} outcome cannot carry an error kind")

    @classmethod
    def extracted(cls, target: str, text: str, elapsed: float = 0.0) -> "Outcome":
        return cls(target=target, kind=OutcomeKind.EXTRACTED, text=text, elapsed=elapsed)

    @classmethod
    def no_match(cls, target: str, elapsed: float = 0.0) -> "Outcome":
        return cls(target=target, kind=OutcomeKind.NO_MATCH, elapsed=elapsed)

    @classmethod
    def failure(cls, target: str, error: ErrorKind, elapsed: float = 0.0) -> "Outcome":
        return cls(target=target, kind=OutcomeKind.FAILURE, error=error, elapsed=elapsed)

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.EXTRACTED

    @property
    def message(self) -> str:
        """Human readable result: extracted text or a fixed diagnostic."""

        if self.kind is OutcomeKind.EXTRACTED:
            return self.text or ""
        if self.kind is OutcomeKind.NO_MATCH:
            return NO_MATCH_MESSAGE
        if self.error is None:
            raise ValueError("failure outcome requires an error kind")
        return self.error.message


__all__ = ["Outcome", "OutcomeKind"]
