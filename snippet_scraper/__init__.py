"""Concurrent regex snippet scraper."""

__version__ = "0.3.0"
