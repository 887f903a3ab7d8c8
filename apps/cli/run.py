# apps/cli/run.py
"""
CLI entry point for inferring a quiz answer key from graded attempts.

This script:
  1) Validates the attempts file (prints counts + SHA, checks one quiz length).
  2) Loads the attempts and generates candidates from the best-scoring one.
  3) Narrows the candidates with every other attempt, with a live progress
     indicator, and writes:
       - TXT:  surviving answer keys, one per line
       - CSV:  per-step reduction trace            (with --outdir)
       - JSON: manifest with config, file hash, etc. (with --outdir)
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from packages.datasets import load_attempts, pretty_summary, validate_attempts_file, write_keys
from packages.engine import InferenceError, KeySet, candidate_space_size, order_attempts
from packages.harness import run_inference
from packages.harness.io import write_steps_csv, write_manifest, timestamp_id, git_commit_or_unknown

DEFAULT_ATTEMPTS = "attempts.txt"
DEFAULT_OUT = "possible_answers.txt"


class _PlainProgress:
    """Throttled single-line progress on stderr (used when no tqdm bar)."""

    def __init__(self, total: int):
        self.total = total
        self.start = time.time()
        self.last_print = 0.0

    def __call__(self, idx: int, att, key_set: KeySet) -> None:
        now = time.time()
        if (now - self.last_print >= 1.0) or (idx == self.total):
            elapsed = now - self.start
            pct = 100.0 * idx / max(1, self.total)
            sys.stderr.write(
                f"\r[{idx}/{self.total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | left {len(key_set)}"
            )
            sys.stderr.flush()
            self.last_print = now

    def close(self) -> None:
        sys.stderr.write("\n")
        sys.stderr.flush()


class _BarProgress:
    def __init__(self, total: int):
        self.bar = tqdm(total=total, ncols=80, desc="Reducing", unit="attempt")

    def __call__(self, idx: int, att, key_set: KeySet) -> None:
        self.bar.update(1)
        self.bar.set_postfix(left=len(key_set))

    def close(self) -> None:
        self.bar.close()


def _progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="quizkey — infer a quiz answer key from graded attempts")
    ap.add_argument("--attempts", default=DEFAULT_ATTEMPTS,
                    help="path to attempts file (one 'ANSWERS,SCORE' per line)")
    ap.add_argument("--out", default=DEFAULT_OUT,
                    help="where to write the possible answer keys")
    ap.add_argument("--outdir",
                    help="also write a per-step CSV and a JSON manifest here")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show reduction progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("--pause", action="store_true",
                    help="wait for Enter before exiting")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse CLI args, validate attempts, run inference with progress, and write outputs.
    """
    args = build_parser().parse_args(argv)

    try:
        # 1) Validate attempts and print a one-liner summary (counts, SHA, length)
        print(f"Reading attempts from file: {args.attempts}...")
        rep = validate_attempts_file(args.attempts)
        print(pretty_summary(rep))
        if not rep["exists"]:
            print(f"error: attempts file not found: {args.attempts}", file=sys.stderr)
            return 2

        # 2) Load (raises on the first malformed record)
        attempts = order_attempts(load_attempts(args.attempts))
        if attempts:
            print(f"Loaded {len(attempts)} answers of length {len(attempts[0])}")
            print(f"Searching for possible answers among "
                  f"{candidate_space_size(attempts[0])} candidates (This could take a while)...")

        # 3) Progress mode
        mode = _progress_mode(args.progress)
        total = max(0, len(attempts) - 1)
        progress = None
        if mode == "bar":
            progress = _BarProgress(total)
        elif mode == "plain":
            progress = _PlainProgress(total)

        # 4) Run
        try:
            result = run_inference(attempts, on_step=progress)
        finally:
            if progress is not None:
                progress.close()
    except InferenceError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    keys: KeySet = result["keys"]
    print(f"Found {len(keys)} possible solutions! Writing to {args.out}...")
    write_keys(keys, args.out)

    # 5) Optional trace + manifest
    if args.outdir:
        run_id = timestamp_id()
        outdir = Path(args.outdir)
        outdir.mkdir(parents=True, exist_ok=True)

        csv_path = outdir / f"run_{run_id}.csv"
        manifest_path = outdir / f"run_{run_id}_manifest.json"

        write_steps_csv(result, str(csv_path))
        manifest = {
            "run_id": run_id,
            "git_commit": git_commit_or_unknown(),
            "config": vars(args),
            "attempts": rep,
            **{k: v for k, v in result.items() if k not in ("keys", "steps")},
        }
        write_manifest(manifest, str(manifest_path))
        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")

    if args.pause:
        input("Press Enter to end...")
    return 0


if __name__ == "__main__":
    sys.exit(main())
