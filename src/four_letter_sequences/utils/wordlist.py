"""Line-oriented word source for the sequence indexer."""
from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from tqdm import tqdm

logger = logging.getLogger(__name__)


class MissingInputSourceError(FileNotFoundError):
    """The word list could not be found."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Word list '{path}' does not exist or is not a file")
        self.path = path


def _read_lines(path: Path, progress: bool) -> Iterator[str]:
    # newline="\n": split on LF only and keep terminators for the indexer to trim
    with path.open("r", encoding="utf-8", newline="\n") as handle:
        if progress:
            yield from tqdm(handle, desc=f"Reading {path.name}", unit="word")
        else:
            yield from handle


def iter_words(path: str | Path, *, progress: bool = False) -> Iterator[str]:
    """Lazily yield the raw lines of *path*.

    The file's existence is checked immediately, so a missing source raises
    :class:`MissingInputSourceError` at call time rather than on first
    iteration.
    """
    path = Path(path)
    if not path.is_file():
        raise MissingInputSourceError(path)
    logger.info(f"Reading words from {path}")
    return _read_lines(path, progress)
