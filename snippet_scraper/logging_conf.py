"""Logging configuration built around structlog JSON logging."""

from __future__ import annotations

import logging
import logging.config
import os
from pathlib import Path

import structlog

LOG_LEVEL_ENV_VAR = "SNIPPET_SCRAPER_LOG_LEVEL"

_LOGGING_INITIALISED = False


def _resolve_level(verbose: bool) -> str:
    env_level = os.environ.get(LOG_LEVEL_ENV_VAR)
    if env_level:
        return env_level.upper()
    return "DEBUG" if verbose else "WARNING"


def configure_logging(verbose: bool = False, log_file: Path | None = None) -> structlog.BoundLogger:
    """Configure structlog + stdlib handlers and return application logger.

    Console output goes to stderr so stdout only carries results.
    """

    global _LOGGING_INITIALISED
    if not _LOGGING_INITIALISED:
        level = _resolve_level(verbose)
        handlers: dict[str, dict] = {
            "console": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
                "level": level,
                "formatter": "json",
            },
        }
        if log_file is not None:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handlers["file"] = {
                "class": "logging.FileHandler",
                "level": "INFO",
                "filename": str(log_file),
                "encoding": "utf-8",
                "formatter": "json",
            }
        logging.config.dictConfig(
            {
                "version": 1,
                "disable_existing_loggers": False,
                "formatters": {
                    "json": {
                        "()": "pythonjsonlogger.jsonlogger.JsonFormatter",
                        "fmt": "%(asctime)s %(levelname)s %(name)s %(message)s",
                    }
                },
                "handlers": handlers,
                "loggers": {
                    "snippet_scraper": {
                        "handlers": list(handlers),
                        "level": "DEBUG" if log_file is not None else level,
                        "propagate": False,
                    },
                },
            }
        )

        # Forward structlog events to stdlib logging
        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.stdlib.add_log_level,
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )
        _LOGGING_INITIALISED = True
    return structlog.get_logger("snippet_scraper")


__all__ = ["LOG_LEVEL_ENV_VAR", "configure_logging"]
