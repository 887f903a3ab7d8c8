# apps/cli/simulate.py
"""
Write a synthetic attempts file graded against a known answer key.

Usage:
    python -m apps.cli.simulate --key ABCDABCDAB --count 8 --seed 1 --out attempts.txt
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from packages.datasets import write_lines
from packages.harness import simulate_attempts


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Generate graded quiz attempts for a hidden key.")
    ap.add_argument("--key", required=True, help="hidden answer key, e.g. ABCDABCDAB")
    ap.add_argument("--count", type=int, default=8, help="number of attempts")
    ap.add_argument("--accuracy", type=float, default=0.7, help="chance each answer is right")
    ap.add_argument("--blank-rate", type=float, default=0.0, help="chance each answer is left blank (X)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed (for reproducibility)")
    ap.add_argument("--out", default="attempts.txt", help="attempts file to write")
    args = ap.parse_args(argv)

    try:
        attempts = simulate_attempts(
            args.key, args.count, seed=args.seed,
            accuracy=args.accuracy, blank_rate=args.blank_rate,
        )
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    path = write_lines((f"{a.as_string()},{a.score}" for a in attempts), args.out)
    print(f"Wrote {len(attempts)} attempts to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
