"""User facing output helpers."""

from .reporter import Reporter, TableReporter, TextReporter, select_reporter

__all__ = ["Reporter", "TableReporter", "TextReporter", "select_reporter"]
