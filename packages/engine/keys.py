"""
Answer keys and key sets.

A KeySet is the current hypothesis space: every key still consistent with
the evidence seen so far. It is an immutable snapshot; `reduce()` returns a
new KeySet and never touches the one it was called on.

Reduction is vectorised: the keys are encoded once into an (K, n) integer
matrix, and each attempt is compared against all rows in one numpy pass.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .answers import CODES, SENTINEL, Answer, answers_to_str, parse_answers
from .attempt import Attempt
from .errors import InvalidSymbol, LengthMismatch


@dataclass(frozen=True)
class AnswerKey:
    answers: Tuple[Answer, ...]

    def __post_init__(self):
        if SENTINEL in self.answers:
            raise InvalidSymbol(f"Answer key cannot contain {SENTINEL.value!r}")

    @classmethod
    def from_string(cls, text: str) -> "AnswerKey":
        return cls(parse_answers(text))

    def __len__(self) -> int:
        return len(self.answers)

    def as_string(self) -> str:
        return answers_to_str(self.answers)


def _encode(keys: Tuple[AnswerKey, ...], n: int) -> np.ndarray:
    mat = np.array(
        [[CODES[a] for a in k.answers] for k in keys], dtype=np.int8
    ).reshape(len(keys), n)
    mat.setflags(write=False)
    return mat


class KeySet:
    """Unique, deterministically ordered collection of candidate keys."""

    def __init__(self, keys: Iterable[AnswerKey] = ()):
        uniq = {k.as_string(): k for k in keys}
        self._keys: Tuple[AnswerKey, ...] = tuple(uniq[s] for s in sorted(uniq))

        lengths = {len(k) for k in self._keys}
        if len(lengths) > 1:
            raise LengthMismatch(f"Keys of different lengths in one set: {sorted(lengths)}")
        self._length: Optional[int] = lengths.pop() if lengths else None
        self._matrix: Optional[np.ndarray] = None

    @classmethod
    def from_strings(cls, texts: Iterable[str]) -> "KeySet":
        return cls(AnswerKey.from_string(t) for t in texts)

    @property
    def length(self) -> Optional[int]:
        """Quiz length shared by all keys (None for an empty set)."""
        return self._length

    def _as_matrix(self) -> np.ndarray:
        # Lazily built; safe to cache because the set never changes.
        if self._matrix is None:
            self._matrix = _encode(self._keys, self._length or 0)
        return self._matrix

    def reduce(self, attempt: Attempt) -> "KeySet":
        """
        Keep only the keys for which `attempt.check(key)` is true.

        Returns a new KeySet; `self` is left untouched.
        """
        if not self._keys:
            return KeySet()
        if len(attempt) != self._length:
            raise LengthMismatch(
                f"Unmatched lengths: attempt has {len(attempt)}, keys have {self._length}"
            )

        row = np.array([CODES[a] for a in attempt.answers], dtype=np.int8)
        hits = (self._as_matrix() == row).sum(axis=1)
        keep = np.flatnonzero(hits == attempt.score)
        return KeySet(self._keys[i] for i in keep)

    def as_strings(self) -> List[str]:
        return [k.as_string() for k in self._keys]

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[AnswerKey]:
        return iter(self._keys)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, str):
            return key.upper() in set(self.as_strings())
        return key in self._keys

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeySet):
            return NotImplemented
        return self._keys == other._keys

    def __hash__(self) -> int:
        return hash(self._keys)

    def __repr__(self) -> str:
        preview = ", ".join(self.as_strings()[:5])
        more = ", ..." if len(self) > 5 else ""
        return f"KeySet({len(self)}: [{preview}{more}])"
