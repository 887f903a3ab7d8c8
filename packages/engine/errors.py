"""
Error kinds raised by the inference engine.

All of them are fatal for a run: the engine validates eagerly (at Answer /
Attempt / AnswerKey construction) so a malformed record never reaches the
combinatorial search. Callers catch `InferenceError` to report and stop.
"""

from __future__ import annotations


class InferenceError(ValueError):
    """Base class for every engine/input error."""


class InvalidSymbol(InferenceError):
    """A character is not part of the answer alphabet (or a sentinel where a real answer is required)."""


class ImpossibleScore(InferenceError):
    """Score is negative or larger than the number of questions."""


class LengthMismatch(InferenceError):
    """Two sequences that must share the quiz length do not."""


class EmptyInput(InferenceError):
    """No attempts were supplied."""


class MalformedRecord(InferenceError):
    """An `answers,score` record could not be split or its score parsed."""

    def __init__(self, message: str, line_no: int | None = None):
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)
        self.line_no = line_no
