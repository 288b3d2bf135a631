from __future__ import annotations

import re

import pytest

from snippet_scraper.engine import Extractor


def test_extracts_first_capture_group() -> None:
    extractor = Extractor(re.compile(r"<title>(.*)</title>"))
    assert extractor.extract("<html><title>Hello</title></html>") == "Hello"


def test_only_first_occurrence_is_used() -> None:
    extractor = Extractor(re.compile(r"id=(\d+)"))
    assert extractor.extract("id=1 id=2 id=3") == "1"


def test_returns_none_without_match() -> None:
    extractor = Extractor(re.compile(r"(\d+)"))
    assert extractor.extract("no digits here") is None


@pytest.mark.parametrize(
    ("pattern", "body"),
    [
        (r"(foo)|bar", "only bar here"),
        (r"name=(\w*);", "name=;"),
    ],
)
def test_absent_or_empty_group_counts_as_no_match(pattern: str, body: str) -> None:
    extractor = Extractor(re.compile(pattern))
    assert extractor.extract(body) is None


def test_only_group_one_is_returned() -> None:
    extractor = Extractor(re.compile(r"(\w+)@(\w+)"))
    assert extractor.extract("mail me: alice@example") == "alice"


def test_pattern_without_group_is_rejected() -> None:
    with pytest.raises(ValueError):
        Extractor(re.compile(r"\d+"))
