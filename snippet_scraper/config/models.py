"""Pydantic models for run configuration."""

from __future__ import annotations

import re
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_TIMEOUT_SECONDS = 5
DEFAULT_CHANNEL_CAPACITY = 500


class ScrapeSettings(BaseModel):
    """Immutable settings shared by every target of a run."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    pattern: str = Field(description="Regular expression with a capture group to extract.")
    timeout: int = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0, description="Fetch timeout in seconds.")
    channel_capacity: int = Field(default=DEFAULT_CHANNEL_CAPACITY, ge=1)
    user_agent: str | None = None
    verbose: bool = False

    @field_validator("pattern")
    @classmethod
    def _validate_pattern(cls, value: str) -> str:
        try:
            compiled = re.compile(value)
        except re.error as exc:
            raise ValueError(f"pattern must be a valid regular expression: {exc}") from exc
        if compiled.groups < 1:
            raise ValueError("pattern must contain at least one capture group")
        return value

    @field_validator("user_agent", mode="before")
    @classmethod
    def _blank_user_agent(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def compiled_pattern(self) -> re.Pattern[str]:
        return re.compile(self.pattern)


__all__ = ["DEFAULT_CHANNEL_CAPACITY", "DEFAULT_TIMEOUT_SECONDS", "ScrapeSettings"]
