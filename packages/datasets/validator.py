"""
Attempts-file validator.

What this module does:
- Validate an attempts file (one `ANSWERS,SCORE` record per line).
- Enforce formatting rules (two fields, A-D/X symbols, integer score within
  0..length) and a single quiz length across all records.
- Detect duplicate records; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_attempts_file, pretty_summary
    rep = validate_attempts_file("attempts.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Optional
import hashlib

from packages.engine import Attempt, InferenceError
from .io import is_record_line


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class AttemptsReport:
    """Diagnostics and metadata for one attempts file."""
    path: str                      # file path (as given)
    exists: bool                   # did the file exist on disk?
    count: int = 0                 # number of VALID records
    unique_count: int = 0          # unique valid records
    invalid_lines: int = 0         # number of records that failed to parse
    sha256: str = ""               # SHA-256 of raw file bytes (empty if missing)
    length: Optional[int] = None   # quiz length (most common, if mixed)
    lengths: List[int] = field(default_factory=list)   # every distinct length seen
    best_score: Optional[int] = None
    passed: bool = False
    issues: List[str] = field(default_factory=list)    # human-friendly list of problems


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


# -----------------------------
# Public API
# -----------------------------

def validate_attempts_file(path: str) -> Dict:
    """
    Validate an attempts file without raising on bad content.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see AttemptsReport) whose `passed`
        flag is strict: requires at least one record, no invalid lines and a
        single quiz length. `issues` lists the first problem per bad line.
    """
    p = Path(path)
    rep = AttemptsReport(path=str(path), exists=p.exists())
    if not rep.exists:
        rep.issues.append(f"attempts file not found: {path}")
        return asdict(rep)

    attempts: List[Attempt] = []
    with p.open("r", encoding="utf-8") as f:
        for no, raw in enumerate(f, start=1):
            if not is_record_line(raw):
                continue
            try:
                attempts.append(Attempt.from_record(raw.split(","), line_no=no))
            except InferenceError as e:
                rep.invalid_lines += 1
                msg = str(e)
                rep.issues.append(msg if msg.startswith("line ") else f"line {no}: {msg}")

    rep.sha256 = _sha256_file(p)
    rep.count = len(attempts)
    rep.unique_count = len(set(attempts))

    lens = Counter(len(a) for a in attempts)
    rep.lengths = sorted(lens)
    if lens:
        rep.length = lens.most_common(1)[0][0]
        rep.best_score = max(a.score for a in attempts)

    if rep.count == 0:
        rep.issues.append("attempts file contains 0 valid records")
    if len(lens) > 1:
        rep.issues.append(f"mixed answer lengths: {rep.lengths}")
    if rep.count != rep.unique_count:
        rep.issues.append("attempts contains duplicate records")

    # Duplicates are harmless for inference; they only show up as an issue.
    rep.passed = rep.count > 0 and rep.invalid_lines == 0 and len(lens) == 1
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        attempts=12 (uniq=12, invalid=0, sha=abc123...) | length=20 | best=17 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"attempts={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) "
        f"| length={report['length']} | best={report['best_score']} | {status}"
    )
