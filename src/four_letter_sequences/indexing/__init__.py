from .sequence_indexer import SEQUENCE_LENGTH, SequenceIndexer, extract_sequences

__all__ = ["SEQUENCE_LENGTH", "SequenceIndexer", "extract_sequences"]
