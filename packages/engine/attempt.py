"""
Graded quiz attempt: the unit of evidence.

An attempt says "this answer sequence got `score` questions right". A
candidate key is consistent with the attempt iff it agrees with the
attempt's answers in exactly `score` positions.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral
from typing import Sequence, Tuple, TYPE_CHECKING

from .answers import Answer, answers_to_str, parse_answers
from .errors import ImpossibleScore, LengthMismatch, MalformedRecord

if TYPE_CHECKING:
    from .keys import AnswerKey


@dataclass(frozen=True)
class Attempt:
    answers: Tuple[Answer, ...]
    score: int

    def __post_init__(self):
        if isinstance(self.score, bool) or not isinstance(self.score, Integral):
            raise ImpossibleScore(f"Score must be a whole number, got {self.score!r}")
        if self.score < 0 or self.score > len(self.answers):
            raise ImpossibleScore(
                f"Impossible score: {self.score} with test length {len(self.answers)}"
            )

    @classmethod
    def from_string(cls, text: str, score: int) -> "Attempt":
        return cls(parse_answers(text), score)

    @classmethod
    def from_record(cls, fields: Sequence[str], line_no: int | None = None) -> "Attempt":
        """
        Build from a split `answers,score` record, e.g. ["ABCD", "3"].

        Raises MalformedRecord when the shape is wrong or the score is not an
        integer; symbol/score errors from parsing propagate unchanged.
        """
        if len(fields) != 2:
            raise MalformedRecord(f"expected 'answers,score', got {len(fields)} field(s)", line_no)
        text, raw_score = fields[0].strip(), fields[1].strip()
        try:
            score = int(raw_score)
        except ValueError as e:
            raise MalformedRecord(f"Score is not a number! {raw_score!r}", line_no) from e
        return cls.from_string(text, score)

    def __len__(self) -> int:
        return len(self.answers)

    @property
    def mistakes(self) -> int:
        """Number of positions assumed wrong (quiz length - score)."""
        return len(self.answers) - self.score

    def as_string(self) -> str:
        return answers_to_str(self.answers)

    def matches(self, answers: Sequence[Answer]) -> int:
        """Count positions where `answers` agrees with this attempt."""
        if len(answers) != len(self.answers):
            raise LengthMismatch(
                f"Unmatched lengths: attempt has {len(self.answers)}, key has {len(answers)}"
            )
        return sum(1 for x, y in zip(self.answers, answers) if x == y)

    def check(self, key: "AnswerKey") -> bool:
        """True iff `key` would have given this attempt exactly its score."""
        return self.matches(key.answers) == self.score
