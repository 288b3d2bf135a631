from __future__ import annotations

import pytest

from snippet_scraper.engine import Outcome, OutcomeKind
from snippet_scraper.errors import ErrorKind


def test_constructors_produce_matching_messages() -> None:
    assert Outcome.extracted("a", "Hello").message == "Hello"
    assert Outcome.no_match("b").message == "NO MATCH"
    assert Outcome.failure("c", ErrorKind.REQUEST_TIMEOUT).message == "REQUEST TIMEOUT"


def test_failure_without_error_kind_is_rejected() -> None:
    with pytest.raises(ValueError):
        Outcome(target="x", kind=OutcomeKind.FAILURE)


def test_success_kinds_cannot_carry_error_kind() -> None:
    with pytest.raises(ValueError):
        Outcome(target="x", kind=OutcomeKind.NO_MATCH, error=ErrorKind.REQUEST_FAILED)
