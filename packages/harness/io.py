"""
I/O utilities for inference runs.

Responsibilities:
- write_steps_csv: one row per reduction step (attempt applied, candidates left).
- write_manifest:  dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:    stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict
import csv
import json
import subprocess
import datetime as dt


def write_steps_csv(result: Dict, path: str) -> str:
    """
    Serialize the reduction trace of one run to CSV.

    Schema (columns):
      step, answers, score, remaining

    Step 0 is the seed attempt; its `remaining` is the generator's output size.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["step", "answers", "score", "remaining"]
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()
        w.writerow({
            "step": 0,
            "answers": result["seed"],
            "score": result["seed_score"],
            "remaining": result["initial"],
        })
        for i, (answers, score, remaining) in enumerate(result["steps"], start=1):
            w.writerow({"step": i, "answers": answers, "score": score, "remaining": remaining})

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and attempts validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (attempts, out, outdir, progress)
      - attempts: output of datasets.validate_attempts_file(...)
      - seed, mistakes, initial, remaining, time_ms
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
