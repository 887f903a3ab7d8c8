"""
Answer alphabet.

Conventions:
  - 'A'..'D' : the selectable options of a question
  - 'X'      : sentinel, "no valid answer" (blank/spoiled). Allowed inside an
               attempt, never inside a generated answer key.

Parsing is case-insensitive; rendering is always uppercase.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Tuple

from .errors import InvalidSymbol


class Answer(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    X = "X"

    def __str__(self) -> str:
        return self.value


# Options a key may contain, in canonical order.
ALPHABET: Tuple[Answer, ...] = (Answer.A, Answer.B, Answer.C, Answer.D)
SENTINEL = Answer.X

# Stable integer codes (used for numpy encoding of key sets).
CODES = {a: i for i, a in enumerate(Answer)}


def parse_answer(symbol: str) -> Answer:
    """
    Map one character to its Answer.

    Raises InvalidSymbol for anything outside A-D / X (case-insensitive).
    """
    try:
        return Answer(symbol.upper())
    except ValueError as e:
        raise InvalidSymbol(f"Invalid letter: {symbol!r}") from e


def parse_answers(text: str) -> Tuple[Answer, ...]:
    """Parse a whole answer string, e.g. "abcx" -> (A, B, C, X)."""
    return tuple(parse_answer(ch) for ch in text.strip())


def answers_to_str(answers: Iterable[Answer]) -> str:
    return "".join(a.value for a in answers)
