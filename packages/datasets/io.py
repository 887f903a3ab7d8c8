from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

from packages.engine import Attempt, KeySet

COMMENT_PREFIX = "#"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    lines = list(lines)
    p.write_text("\n".join(lines) + "\n" if lines else "", encoding="utf-8")
    return str(p)


def is_record_line(line: str) -> bool:
    s = line.strip()
    return bool(s) and not s.startswith(COMMENT_PREFIX)


def load_attempts(p: Path | str) -> List[Attempt]:
    """
    Load one `ANSWERS,SCORE` record per line (e.g. "ABDCA,3"), file order kept.
    Blank lines and '#' comments are skipped.

    Raises MalformedRecord / InvalidSymbol / ImpossibleScore on the first bad
    line; nothing is returned for a partially valid file.
    """
    out: List[Attempt] = []
    for no, line in enumerate(read_lines(p), start=1):
        if not is_record_line(line):
            continue
        out.append(Attempt.from_record(line.split(","), line_no=no))
    return out


def write_keys(keys: KeySet | Iterable[str], p: Path | str) -> str:
    """Write one answer key per line; returns the path written."""
    lines = keys.as_strings() if isinstance(keys, KeySet) else list(keys)
    return write_lines(lines, p)
