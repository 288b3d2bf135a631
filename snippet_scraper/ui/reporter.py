"""Result reporting: a rich table for terminals, plain lines for pipes."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import IO

import typer
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..infra import is_interactive


class Reporter(ABC):
    """Uniform reporting contract used by the result sink."""

    @abstractmethod
    def success(self, target: str, text: str) -> None:
        """Record an extracted snippet."""

    @abstractmethod
    def error(self, target: str, message: str) -> None:
        """Record a failure or a no-match diagnostic."""

    @abstractmethod
    def finish(self) -> None:
        """Render whatever was buffered."""


class TableReporter(Reporter):
    """Collect rows and print a single table on finish."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()
        self.table = Table(box=box.SIMPLE_HEAD, show_lines=False)
        self.table.add_column("Target", style="cyan", overflow="fold")
        self.table.add_column("Result", overflow="fold")

    def success(self, target: str, text: str) -> None:
        self.table.add_row(target, Text(text))

    def error(self, target: str, message: str) -> None:
        self.table.add_row(target, Text(message, style="bold white on red"))

    def finish(self) -> None:
        self.console.print(self.table)


class TextReporter(Reporter):
    """Print ``target, result`` as soon as each result arrives."""

    def __init__(self, stream: IO[str] | None = None) -> None:
        self.stream = stream

    def success(self, target: str, text: str) -> None:
        typer.echo(f"{target}, {text}", file=self.stream)

    def error(self, target: str, message: str) -> None:
        typer.echo(f"{target}, {message}", file=self.stream)

    def finish(self) -> None:
        return


def select_reporter(stream: IO[str] | None = None) -> Reporter:
    """Choose the table for interactive terminals, plain text otherwise."""

    stream = stream or sys.stdout
    if is_interactive(stream):
        return TableReporter(Console(file=stream))
    return TextReporter(stream)


__all__ = ["Reporter", "TableReporter", "TextReporter", "select_reporter"]
