from .answers import ALPHABET, SENTINEL, Answer, parse_answer, parse_answers
from .attempt import Attempt
from .errors import (
    EmptyInput,
    ImpossibleScore,
    InferenceError,
    InvalidSymbol,
    LengthMismatch,
    MalformedRecord,
)
from .generator import candidate_space_size, generate_valid_set, iter_candidates
from .keys import AnswerKey, KeySet
from .pipeline import infer, infer_key_set, iter_reductions, order_attempts

__all__ = [
    "ALPHABET", "SENTINEL", "Answer", "parse_answer", "parse_answers",
    "Attempt", "AnswerKey", "KeySet",
    "generate_valid_set", "iter_candidates", "candidate_space_size",
    "infer", "infer_key_set", "iter_reductions", "order_attempts",
    "InferenceError", "InvalidSymbol", "ImpossibleScore", "LengthMismatch",
    "EmptyInput", "MalformedRecord",
]
