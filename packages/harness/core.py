"""
Experiment harness core primitives.

- run_inference:     run the full pipeline on one batch of attempts, with
                     timing and per-step candidate counts.
- simulate_attempts: grade random attempts against a hidden key, to build
                     synthetic inputs for experiments and tests.

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or future services without changes.
"""

from __future__ import annotations
import random
import time
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from packages.engine import (
    ALPHABET,
    Answer,
    AnswerKey,
    Attempt,
    KeySet,
    candidate_space_size,
    generate_valid_set,
    iter_reductions,
    order_attempts,
)
from packages.engine.pipeline import ensure_uniform_length

# Called after each reduction step with (step_index, attempt, reduced_set).
StepCallback = Callable[[int, Attempt, KeySet], None]


def run_inference(
        attempts: Sequence[Attempt],
        *,
        on_step: Optional[StepCallback] = None,
) -> Dict:
    """
    Execute one inference run.

    Args:
        attempts: graded attempts in any order (sorted here, highest score first)
        on_step:  optional progress hook, called once per non-seed attempt

    Returns:
        dict with keys:
            keys (KeySet), length (int), num_attempts (int),
            seed (str), seed_score (int), mistakes (int), space (int),
            initial (int), remaining (int), time_ms (float),
            steps (list[(answers, score, remaining)])
    """
    ordered = order_attempts(attempts)
    n = ensure_uniform_length(ordered)
    seed = ordered[0]

    t0 = time.perf_counter()
    key_set = generate_valid_set(seed)
    initial = len(key_set)

    steps: List[Tuple[str, int, int]] = []
    for idx, (att, key_set) in enumerate(iter_reductions(key_set, ordered[1:]), start=1):
        steps.append((att.as_string(), att.score, len(key_set)))
        if on_step is not None:
            on_step(idx, att, key_set)

    dt = (time.perf_counter() - t0) * 1000.0
    return {
        "keys": key_set,
        "length": n,
        "num_attempts": len(ordered),
        "seed": seed.as_string(),
        "seed_score": seed.score,
        "mistakes": seed.mistakes,
        "space": candidate_space_size(seed),
        "initial": initial,
        "remaining": len(key_set),
        "time_ms": dt,
        "steps": steps,
    }


def grade(answers: Sequence[Answer], key: AnswerKey) -> int:
    """Score an answer sequence against a known key."""
    return sum(1 for a, k in zip(answers, key.answers) if a == k)


def simulate_attempts(
        key: AnswerKey | str,
        count: int,
        *,
        seed: int | None = None,
        accuracy: float = 0.7,
        blank_rate: float = 0.0,
) -> List[Attempt]:
    """
    Produce `count` attempts graded against a hidden `key`.

    Each question is answered correctly with probability `accuracy`, left
    blank ('X') with probability `blank_rate`, otherwise answered with a
    random wrong option. Reproducible for a given `seed`.
    """
    if isinstance(key, str):
        key = AnswerKey.from_string(key)
    if not 0.0 <= accuracy <= 1.0 or not 0.0 <= blank_rate <= 1.0 - accuracy:
        raise ValueError(f"bad rates: accuracy={accuracy}, blank_rate={blank_rate}")

    rng = random.Random(seed)
    out: List[Attempt] = []
    for _ in range(count):
        answers: List[Answer] = []
        for k in key.answers:
            r = rng.random()
            if r < accuracy:
                answers.append(k)
            elif r < accuracy + blank_rate:
                answers.append(Answer.X)
            else:
                answers.append(rng.choice([a for a in ALPHABET if a != k]))
        out.append(Attempt(tuple(answers), grade(answers, key)))
    return out
