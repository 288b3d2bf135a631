"""Input stream helpers."""

from __future__ import annotations

from typing import IO, Iterator

INPUT_ENCODING = "utf-8"


def iter_targets(stream: IO[str]) -> Iterator[str]:
    """Yield one target per line, lazily, with the line terminator removed.

    Text streams backed by a binary buffer are read as bytes and decoded line
    by line; undecodable bytes are kept as ``\\xNN`` escapes so a bad line
    still becomes its own target.
    """

    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        for line in stream:
            yield line.rstrip("\r\n")
        return
    for raw in buffer:
        yield raw.decode(INPUT_ENCODING, errors="backslashreplace").rstrip("\r\n")


def is_interactive(stream: IO[str]) -> bool:
    try:
        return bool(stream.isatty())
    except (AttributeError, ValueError):
        return False


__all__ = ["INPUT_ENCODING", "iter_targets", "is_interactive"]
