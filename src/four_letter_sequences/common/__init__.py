"""Shared infrastructure for the four-letter sequence tooling."""

from __future__ import annotations

from .types import ReportEntry, Sequence, Word

__all__ = [
    "ReportEntry",
    "Sequence",
    "Word",
]
