from itertools import permutations

import pytest
from packages.engine import (
    Attempt, infer, infer_key_set, iter_reductions, order_attempts, generate_valid_set,
    EmptyInput, LengthMismatch, ImpossibleScore, InvalidSymbol,
)

ATTEMPTS = [("ABCA", 2), ("ABDD", 3), ("CBDA", 2), ("DBDD", 2)]


def test_infer_two_attempt_scenario():
    assert infer([("AB", 1), ("AA", 2)]) == ["AA"]

def test_infer_accepts_any_input_order():
    assert infer([("AA", 2), ("AB", 1)]) == ["AA"]

def test_order_attempts_descending_and_stable():
    atts = [Attempt.from_string(s, n) for s, n in [("AA", 1), ("BB", 2), ("CC", 1), ("DD", 0)]]
    assert [a.as_string() for a in order_attempts(atts)] == ["BB", "AA", "CC", "DD"]

def test_every_survivor_satisfies_every_attempt():
    result = infer(ATTEMPTS)
    assert result
    atts = [Attempt.from_string(s, n) for s, n in ATTEMPTS]
    for key in infer_key_set(atts):
        assert all(a.check(key) for a in atts)

def test_fold_order_does_not_change_result():
    atts = order_attempts(Attempt.from_string(s, n) for s, n in ATTEMPTS)
    seed, rest = atts[0], atts[1:]
    start = generate_valid_set(seed)
    finals = set()
    for perm in permutations(rest):
        ks = start
        for _, ks in iter_reductions(ks, perm):
            pass
        finals.add(tuple(ks.as_strings()))
    assert len(finals) == 1

def test_iter_reductions_shrinks_monotonically():
    atts = order_attempts(Attempt.from_string(s, n) for s, n in ATTEMPTS)
    prev = generate_valid_set(atts[0])
    for _, ks in iter_reductions(prev, atts[1:]):
        assert len(ks) <= len(prev)
        prev = ks

def test_single_attempt_returns_generator_output():
    assert infer([("AB", 1)]) == ["AA", "AC", "AD", "BB", "CB", "DB"]

def test_contradictory_attempts_leave_nothing():
    assert infer([("AB", 2), ("AB", 1)]) == []

def test_empty_input():
    with pytest.raises(EmptyInput):
        infer([])

def test_mixed_lengths():
    with pytest.raises(LengthMismatch):
        infer([("AB", 1), ("ABC", 1)])

def test_invalid_records_fail_before_search():
    with pytest.raises(InvalidSymbol):
        infer([("AB", 1), ("AQ", 1)])
    with pytest.raises(ImpossibleScore):
        infer([("AB", 3)])

@pytest.mark.parametrize("score", [1.9, "x", "1", True, None])
def test_non_integer_scores_are_rejected(score):
    with pytest.raises(ImpossibleScore):
        infer([("AB", score)])
