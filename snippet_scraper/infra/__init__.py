"""Infra layer utilities (input streams)."""

from .input import iter_targets, is_interactive

__all__ = ["iter_targets", "is_interactive"]
