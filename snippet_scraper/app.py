"""Typer CLI entrypoint for snippet-scraper."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Iterable, Optional

import structlog
import typer
import yaml
from rich.console import Console

from . import __version__
from .config import ScrapeSettings, resolve_settings
from .engine import Extractor, Fetcher, TargetWorker, build_client
from .infra import is_interactive, iter_targets
from .logging_conf import configure_logging
from .pipeline import Pipeline, PipelineSummary
from .ui import Reporter, select_reporter

EXIT_DATAERR = 65
EXIT_IOERR = 74

app = typer.Typer(
    help="Quickly scrape short snippets of text from many HTTP sources.",
    add_completion=False,
    rich_markup_mode=None,
)

err_console = Console(stderr=True)


async def run_scrape(
    settings: ScrapeSettings,
    lines: Iterable[str],
    reporter: Reporter,
    logger: structlog.BoundLogger | None = None,
) -> PipelineSummary:
    """Build the shared client and run one pipeline over ``lines``."""

    logger = logger or structlog.get_logger("snippet_scraper")
    async with build_client(settings.timeout, settings.user_agent) as client:
        fetcher = Fetcher(client, settings.timeout, logger=logger.bind(component="fetcher"))
        worker = TargetWorker(
            fetcher,
            Extractor(settings.compiled_pattern),
            logger=logger.bind(component="worker"),
        )
        pipeline = Pipeline(
            worker,
            capacity=settings.channel_capacity,
            logger=logger.bind(component="pipeline"),
        )
        return await pipeline.run(lines, reporter)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"snippet-scraper {__version__}")
        raise typer.Exit()


@app.command()
def scrape(
    pattern: Optional[str] = typer.Option(
        None,
        "--pattern",
        "-p",
        help=(
            "Regex pattern including a target group to extract, "
            "for example '<title>(.*)</title>'."
        ),
    ),
    timeout: Optional[int] = typer.Option(
        None, "--timeout", "-t", help="Timeout in seconds (default 5).", min=1
    ),
    capacity: Optional[int] = typer.Option(
        None, "--capacity", help="Maximum completed results waiting for output.", min=1
    ),
    user_agent: Optional[str] = typer.Option(None, "--user-agent", help="User-Agent header to send."),
    config: Optional[Path] = typer.Option(
        None, "--config", help="YAML or JSON file providing default options."
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging on stderr."),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Also write JSON logs here."),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit."
    ),
) -> None:
    """Read targets from stdin, one per line, and print what PATTERN captures."""

    try:
        settings = resolve_settings(
            config,
            {
                "pattern": pattern,
                "timeout": timeout,
                "channel_capacity": capacity,
                "user_agent": user_agent,
                "verbose": verbose or None,
            },
        )
    except (OSError, ValueError, yaml.YAMLError) as exc:
        err_console.print(f"Error: {exc}", style="red", markup=False)
        raise typer.Exit(code=EXIT_DATAERR)

    logger = configure_logging(verbose=settings.verbose, log_file=log_file)

    stdin = sys.stdin
    if is_interactive(stdin):
        err_console.print("Error: stdin not redirected", style="red")
        raise typer.Exit(code=EXIT_IOERR)

    reporter = select_reporter(sys.stdout)
    asyncio.run(run_scrape(settings, iter_targets(stdin), reporter, logger))


def cli() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover
    cli()
