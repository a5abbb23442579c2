"""
Index the four-letter sequences of a word list.

Every word is scanned with a four-character sliding window. Windows made of
ASCII letters only are lowercased and recorded together with the word they
came from (original casing kept). Once the input is consumed, the sequences
seen in exactly one distinct word can be reported, each paired with the first
word that produced it.

Example
-------
>>> indexer = SequenceIndexer()
>>> indexer.process_all(["arrows", "18th", "carrots", "give", "me", "Isn't", "2time"])
>>> indexer.sorted_report()[:2]
[('carr', 'carrots'), ('give', 'give')]
"""
from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator

from four_letter_sequences.common.types import ReportEntry, Sequence, Word

SEQUENCE_LENGTH = 4
# ASCII only: accented letters are rejected the same way digits are.
SEQUENCE_RE = re.compile(r"[A-Za-z]{%d}" % SEQUENCE_LENGTH)

logger = logging.getLogger(__name__)


def trim_line(raw_line: str) -> Word:
    """Remove a single trailing line terminator (``\\r\\n``, ``\\n`` or ``\\r``)."""
    if raw_line.endswith("\r\n"):
        return raw_line[:-2]
    if raw_line.endswith(("\n", "\r")):
        return raw_line[:-1]
    return raw_line


def extract_sequences(word: Word) -> Iterator[Sequence]:
    """Yield the lowercased all-letter windows of *word*, in offset order.

    A sequence that recurs at several offsets is yielded once per offset.
    """
    for start in range(len(word) - SEQUENCE_LENGTH + 1):
        window = word[start : start + SEQUENCE_LENGTH]
        if SEQUENCE_RE.fullmatch(window):
            yield window.lower()


class SequenceIndexer:
    """
    Aggregates, for each four-letter sequence, the distinct words containing
    it and the first word that produced it.
    """

    def __init__(self) -> None:
        self._occurrences: dict[Sequence, set[Word]] = {}
        self._first_word: dict[Sequence, Word] = {}
        self.stats = {"words": 0, "short_words": 0}

    def process_word(self, raw_line: str) -> None:
        word = trim_line(raw_line)
        self.stats["words"] += 1
        if len(word) < SEQUENCE_LENGTH:
            self.stats["short_words"] += 1
            return

        for seq in extract_sequences(word):
            words = self._occurrences.get(seq)
            if words is None:
                words = self._occurrences[seq] = set()
                self._first_word[seq] = word
            words.add(word)

    def process_all(self, words: Iterable[str]) -> None:
        """Process *words* in order without materializing the iterable."""
        for raw_line in words:
            self.process_word(raw_line)
        logger.debug(
            f"Indexed {self.stats['words']} words into {len(self._occurrences)} sequences"
        )

    def merge(self, other: SequenceIndexer) -> None:
        """Fold in an indexer built over a later shard of the same input.

        Word sets are unioned; first-word records already held here win.
        Shards must be merged left to right in input order.
        """
        if other is self:
            raise ValueError("Cannot merge an indexer into itself")
        for seq, words in other._occurrences.items():
            existing = self._occurrences.get(seq)
            if existing is None:
                self._occurrences[seq] = set(words)
                self._first_word[seq] = other._first_word[seq]
            else:
                existing.update(words)
        for key, count in other.stats.items():
            self.stats[key] = self.stats.get(key, 0) + count

    @property
    def occurrences(self) -> dict[Sequence, frozenset[Word]]:
        """Snapshot of sequence -> distinct words containing it."""
        return {seq: frozenset(words) for seq, words in self._occurrences.items()}

    def first_word(self, sequence: Sequence) -> Word | None:
        return self._first_word.get(sequence)

    def __len__(self) -> int:
        return len(self._occurrences)

    def unique_pairs(self) -> dict[Sequence, Word]:
        """Return sequences found in exactly one word, mapped to that word."""
        return {
            seq: self._first_word[seq]
            for seq, words in self._occurrences.items()
            if len(words) == 1
        }

    def sorted_report(self) -> list[ReportEntry]:
        """Return the unique pairs ordered by sequence."""
        pairs = self.unique_pairs()
        return [(seq, pairs[seq]) for seq in sorted(pairs)]
