"""
Inference pipeline: attempts -> surviving answer keys.

  1) sort attempts by descending score (stable)
  2) the head is the seed; generate its candidate set
  3) fold KeySet.reduce over the remaining attempts
  4) whatever is left is consistent with every attempt

The fold order does not change the result (each step is an intersection),
only how fast the set shrinks.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Tuple, Union

from .attempt import Attempt
from .errors import EmptyInput, LengthMismatch
from .generator import generate_valid_set
from .keys import KeySet

# An input record is either an Attempt or an (answer-string, score) pair.
Record = Union[Attempt, Tuple[str, int]]


def to_attempts(records: Iterable[Record]) -> List[Attempt]:
    out: List[Attempt] = []
    for r in records:
        if isinstance(r, Attempt):
            out.append(r)
        else:
            text, score = r
            out.append(Attempt.from_string(text, score))
    return out


def order_attempts(attempts: Iterable[Attempt]) -> List[Attempt]:
    """Highest score first; ties keep their input order."""
    return sorted(attempts, key=lambda a: a.score, reverse=True)


def ensure_uniform_length(attempts: Sequence[Attempt]) -> int:
    """
    Return the shared quiz length.

    Raises EmptyInput for no attempts and LengthMismatch when the answer
    sequences are not all the same length.
    """
    if not attempts:
        raise EmptyInput("No attempts supplied")
    lens = {len(a) for a in attempts}
    if len(lens) != 1:
        raise LengthMismatch(f"The lengths of the answers are not all the same: {sorted(lens)}")
    return lens.pop()


def iter_reductions(key_set: KeySet, attempts: Iterable[Attempt]) -> Iterator[Tuple[Attempt, KeySet]]:
    """Yield (attempt, reduced set) after each step of the fold."""
    for att in attempts:
        key_set = key_set.reduce(att)
        yield att, key_set


def infer_key_set(attempts: Iterable[Attempt]) -> KeySet:
    ordered = order_attempts(attempts)
    ensure_uniform_length(ordered)

    key_set = generate_valid_set(ordered[0])
    for _, key_set in iter_reductions(key_set, ordered[1:]):
        pass
    return key_set


def infer(records: Iterable[Record]) -> List[str]:
    """
    Core entry point.

    Args:
      records : (answer-string, score) pairs and/or Attempt objects, any order

    Returns:
      Sorted list of answer-key strings consistent with every record.
    """
    return infer_key_set(to_attempts(records)).as_strings()
