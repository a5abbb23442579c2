"""Command line interface for the four-letter sequence report.

Run with no arguments to read ``dictionary.txt`` from the working directory
and write ``sequences.txt`` and ``words.txt`` next to it::

    four-letter-sequences
    four-letter-sequences --dictionary words/en.txt --progress

Defaults can also be set in a ``.env`` file (see ``common.config``).
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from four_letter_sequences.common.config import get_config_paths
from four_letter_sequences.indexing.sequence_indexer import SequenceIndexer
from four_letter_sequences.utils.report import write_report
from four_letter_sequences.utils.wordlist import MissingInputSourceError, iter_words

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="List four-letter sequences that occur in exactly one word of a word list."
    )
    parser.add_argument("--dictionary", type=Path, default=None, help="Word list, one word per line")
    parser.add_argument("--sequences-out", type=Path, default=None, help="Output file for the sequences")
    parser.add_argument("--words-out", type=Path, default=None, help="Output file for the paired words")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar while reading words")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def run(dictionary: Path, sequences_out: Path, words_out: Path, *, progress: bool = False) -> int:
    """Index *dictionary* and write the report. Returns the number of unique sequences."""
    indexer = SequenceIndexer()
    indexer.process_all(iter_words(dictionary, progress=progress))
    logger.info(
        f"Processed {indexer.stats['words']} words "
        f"({indexer.stats['short_words']} too short), {len(indexer)} distinct sequences"
    )

    report = indexer.sorted_report()
    return write_report(report, sequences_out, words_out)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)

    paths = get_config_paths()
    dictionary = args.dictionary or paths["dictionary"]
    sequences_out = args.sequences_out or paths["sequences"]
    words_out = args.words_out or paths["words"]
    if sequences_out.resolve() == words_out.resolve():
        parser.error(f"sequences and words outputs must be different files (both are {sequences_out})")

    try:
        run(dictionary, sequences_out, words_out, progress=args.progress)
    except MissingInputSourceError:
        print(
            f"Error: {dictionary} not found. "
            f"Please download and save {dictionary} in the same directory."
        )
        return 1
    except (OSError, ValueError) as error:
        logger.error(f"Command failed. Reason: {str(error)}", exc_info=False)
        return 2

    print(f"Output written to {sequences_out} and {words_out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
