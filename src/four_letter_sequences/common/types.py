"""Shared type definitions for the four-letter sequence tooling.

A ``Sequence`` is always four lowercase ASCII letters; a ``Word`` is an input
line with its terminator trimmed and its original casing kept.
"""
from __future__ import annotations

from typing import TypeAlias

Sequence: TypeAlias = str
Word: TypeAlias = str

# One line of the report: the sequence and the word it was first seen in.
ReportEntry: TypeAlias = tuple[Sequence, Word]


__all__ = [
    "ReportEntry",
    "Sequence",
    "Word",
]
