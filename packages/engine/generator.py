"""
Initial hypothesis generation from one seed attempt.

Given a seed attempt of length n with score s, the true key differs from the
seed in exactly k = n - s positions. Rather than scanning all m^n keys we:

  1) pick which k positions are wrong  (C(n, k) subsets)
  2) for each wrong position, pick a replacement that is NOT the seed's own
     answer there                       ((m-1)^k sequences per subset)

so every candidate has exactly k mismatches with the seed and therefore
passes `seed.check()` by construction. Candidates that keep a sentinel from
the seed (an 'X' left in an unchanged position) are dropped, since a real
key never contains one.

The seed should be the highest-scoring attempt: small k keeps this tiny.
"""

from __future__ import annotations

from itertools import combinations, product
from math import comb
from typing import Iterator, Sequence

from .answers import ALPHABET, SENTINEL, Answer
from .attempt import Attempt
from .errors import InvalidSymbol
from .keys import AnswerKey, KeySet


def _check_alphabet(alphabet: Sequence[Answer]) -> None:
    if SENTINEL in alphabet:
        raise InvalidSymbol(f"Replacement alphabet cannot contain {SENTINEL.value!r}")


def candidate_space_size(seed: Attempt, alphabet: Sequence[Answer] = ALPHABET) -> int:
    """
    Exact number of keys `iter_candidates` yields for a seed whose answers
    come from `alphabet` (or are the sentinel).

    Every sentinel position must be among the overwritten ones and can take
    any of the m options; the remaining k - x mistakes fall on the other
    positions with m - 1 options each.
    """
    n, k, m = len(seed), seed.mistakes, len(alphabet)
    x = seed.answers.count(SENTINEL)
    if x > k:
        return 0
    return comb(n - x, k - x) * (m - 1) ** (k - x) * m ** x


def iter_candidates(seed: Attempt, alphabet: Sequence[Answer] = ALPHABET) -> Iterator[AnswerKey]:
    """Lazily yield every key with exactly `seed.mistakes` differences from the seed."""
    _check_alphabet(alphabet)
    n, k = len(seed), seed.mistakes

    for positions in combinations(range(n), k):
        # Per-position choices exclude the seed's own answer (which would be a match).
        choices = [[a for a in alphabet if a != seed.answers[i]] for i in positions]

        for replacement in product(*choices):
            answers = list(seed.answers)
            for i, a in zip(positions, replacement):
                answers[i] = a
            if SENTINEL in answers:
                continue
            yield AnswerKey(tuple(answers))


def generate_valid_set(seed: Attempt, alphabet: Sequence[Answer] = ALPHABET) -> KeySet:
    """Every key consistent with the seed attempt's score (deduplicated)."""
    return KeySet(iter_candidates(seed, alphabet))
