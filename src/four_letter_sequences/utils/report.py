"""Write the sorted report as two line-aligned text files."""
from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Sequence
from pathlib import Path
from tempfile import NamedTemporaryFile, mkstemp

from four_letter_sequences.common.types import ReportEntry

logger = logging.getLogger(__name__)


def _default_file_mode() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def _stage_lines(path: Path, lines: Iterable[str], mode: int) -> str:
    """Write *lines* to a synced temp file beside *path* and return its name."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with NamedTemporaryFile(mode="w", delete=False, dir=str(path.parent), encoding="utf-8", newline="\n") as tmp:
        try:
            for line in lines:
                tmp.write(line)
                tmp.write("\n")
            tmp.flush()
            os.fsync(tmp.fileno())
        except BaseException:
            tmp.close()
            os.unlink(tmp.name)
            raise
    os.chmod(tmp.name, mode)
    return tmp.name


def _set_aside(path: Path) -> str | None:
    """Move an existing regular file at *path* out of the way; return where."""
    if not path.is_file():
        return None
    fd, backup = mkstemp(dir=str(path.parent), prefix=f".{path.name}.")
    os.close(fd)
    os.replace(path, backup)
    return backup


def _discard(*names: str | None) -> None:
    for name in names:
        if name is not None and os.path.exists(name):
            os.unlink(name)


def write_report(
    entries: Sequence[ReportEntry],
    sequence_path: str | Path,
    word_path: str | Path,
) -> int:
    """Write one sequence per line to *sequence_path* and the paired word per
    line to *word_path*, in the order given.

    Line N of both files describes the same entry. Both files are staged
    first and replaced together: if either step fails, the previous contents
    of both targets are restored and no temp files are left behind. Returns
    the number of entries written.
    """
    sequence_path = Path(sequence_path)
    word_path = Path(word_path)
    if sequence_path.resolve() == word_path.resolve():
        raise ValueError(f"Sequence and word outputs must differ, both are '{sequence_path}'")

    mode = _default_file_mode()
    seq_tmp = word_tmp = seq_backup = None
    replaced_seq = False
    try:
        seq_tmp = _stage_lines(sequence_path, (seq for seq, _ in entries), mode)
        word_tmp = _stage_lines(word_path, (word for _, word in entries), mode)

        seq_backup = _set_aside(sequence_path)
        os.replace(seq_tmp, sequence_path)
        replaced_seq = True
        os.replace(word_tmp, word_path)
    except BaseException:
        if seq_backup is not None:
            os.replace(seq_backup, sequence_path)
        elif replaced_seq:
            os.unlink(sequence_path)
        _discard(seq_tmp, word_tmp)
        raise
    _discard(seq_backup)

    logger.info(f"Wrote {len(entries)} entries to {sequence_path} and {word_path}")
    return len(entries)
