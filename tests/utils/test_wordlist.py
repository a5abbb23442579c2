import pathlib
import sys

import pytest

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[2]
SRC_ROOT = PROJECT_ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from four_letter_sequences.indexing.sequence_indexer import SequenceIndexer  # noqa: E402
from four_letter_sequences.utils.wordlist import MissingInputSourceError, iter_words  # noqa: E402


def test_iter_words_yields_raw_lines(tmp_path):
    path = tmp_path / "dictionary.txt"
    path.write_bytes(b"arrows\n18th\r\ncarrots")

    assert list(iter_words(path)) == ["arrows\n", "18th\r\n", "carrots"]


def test_iter_words_splits_on_line_feed_only(tmp_path):
    path = tmp_path / "dictionary.txt"
    path.write_bytes(b"ab\rcd\n")

    assert list(iter_words(path)) == ["ab\rcd\n"]


def test_missing_source_raises_at_call_time(tmp_path):
    missing = tmp_path / "nope.txt"

    with pytest.raises(MissingInputSourceError) as excinfo:
        iter_words(missing)

    assert isinstance(excinfo.value, FileNotFoundError)
    assert excinfo.value.path == missing


def test_directory_is_not_a_word_source(tmp_path):
    with pytest.raises(MissingInputSourceError):
        iter_words(tmp_path)


def test_progress_bar_passes_lines_through(tmp_path):
    path = tmp_path / "dictionary.txt"
    path.write_text("give\nme\n", encoding="utf-8")

    assert list(iter_words(path, progress=True)) == ["give\n", "me\n"]


def test_indexer_reads_from_file(tmp_path):
    path = tmp_path / "dictionary.txt"
    path.write_text("arrows\r\n18th\r\ncarrots\r\ngive\r\nme\r\nIsn't\r\n2time\r\n", encoding="utf-8")

    indexer = SequenceIndexer()
    indexer.process_all(iter_words(path))

    assert indexer.unique_pairs()["time"] == "2time"
    assert [seq for seq, _ in indexer.sorted_report()] == [
        "carr", "give", "rots", "rows", "rrot", "rrow", "time",
    ]
