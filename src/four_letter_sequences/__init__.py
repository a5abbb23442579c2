"""Find four-letter sequences that occur in exactly one word of a word list."""

from .indexing.sequence_indexer import SequenceIndexer

__all__ = ["SequenceIndexer"]
