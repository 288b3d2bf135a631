"""Regex extraction helpers."""

from __future__ import annotations

import re


class Extractor:
    """Pull the first capture group of a compiled pattern out of a body.

    Only the first occurrence is considered. A match whose first group did
    not participate, or captured nothing, counts as no match.
    """

    def __init__(self, pattern: re.Pattern[str]) -> None:
        if pattern.groups < 1:
            raise ValueError("Pattern must contain at least one capture group")
        self.pattern = pattern

    def extract(self, body: str) -> str | None:
        match = self.pattern.search(body)
        if match is None:
            return None
        return match.group(1) or None


__all__ = ["Extractor"]
