import pytest
from packages.engine import (
    Answer, AnswerKey, Attempt, KeySet, generate_valid_set, iter_candidates,
    candidate_space_size, InvalidSymbol, LengthMismatch,
)


def test_generate_one_mistake_two_questions():
    seed = Attempt.from_string("AB", 1)
    keys = generate_valid_set(seed)
    assert keys.as_strings() == ["AA", "AC", "AD", "BB", "CB", "DB"]

def test_generate_then_reduce_to_single_key():
    keys = generate_valid_set(Attempt.from_string("AB", 1))
    reduced = keys.reduce(Attempt.from_string("AA", 2))
    assert reduced.as_strings() == ["AA"]

def test_zero_mistakes_yields_seed_only():
    seed = Attempt.from_string("ABCDDCBA", 8)
    keys = generate_valid_set(seed)
    assert keys.as_strings() == ["ABCDDCBA"]
    assert "ABCDDCBA" in keys

def test_all_wrong_differs_everywhere():
    seed = Attempt.from_string("ABC", 0)
    keys = generate_valid_set(seed)
    assert len(keys) == 3 ** 3
    for k in keys:
        assert all(a != b for a, b in zip(k.answers, seed.answers))

@pytest.mark.parametrize("text,score", [("ABCD", 2), ("AABBCC", 4), ("DCBAD", 1)])
def test_every_candidate_passes_seed_check(text, score):
    seed = Attempt.from_string(text, score)
    keys = generate_valid_set(seed)
    assert len(keys) == candidate_space_size(seed)
    assert all(seed.check(k) for k in keys)

def test_sentinel_positions_must_be_overwritten():
    seed = Attempt.from_string("AX", 1)
    assert generate_valid_set(seed).as_strings() == ["AA", "AB", "AC", "AD"]

def test_sentinel_seed_with_no_room_gives_nothing():
    seed = Attempt.from_string("XXA", 2)  # one mistake, two blanks
    assert len(generate_valid_set(seed)) == 0

def test_iter_candidates_is_lazy_and_restartable():
    seed = Attempt.from_string("ABCD", 3)
    it = iter_candidates(seed)
    first = next(it)
    assert isinstance(first, AnswerKey)
    assert len(list(iter_candidates(seed))) == 4 * 3

def test_alphabet_cannot_include_sentinel():
    with pytest.raises(InvalidSymbol):
        generate_valid_set(Attempt.from_string("AB", 1), alphabet=(Answer.A, Answer.X))

def test_restricted_alphabet():
    seed = Attempt.from_string("AB", 1)
    keys = generate_valid_set(seed, alphabet=(Answer.A, Answer.B))
    assert keys.as_strings() == ["AA", "BB"]


# --- KeySet ---
def test_keyset_dedupes_and_sorts():
    ks = KeySet.from_strings(["CA", "AB", "CA", "ab"])
    assert ks.as_strings() == ["AB", "CA"]
    assert len(ks) == 2 and ks.length == 2

def test_keyset_rejects_mixed_lengths():
    with pytest.raises(LengthMismatch):
        KeySet.from_strings(["AB", "ABC"])

def test_reduce_is_pure_and_shrinks():
    ks = KeySet.from_strings(["AA", "AB", "BA", "BB"])
    out = ks.reduce(Attempt.from_string("AB", 2))
    assert out.as_strings() == ["AB"]
    assert ks.as_strings() == ["AA", "AB", "BA", "BB"]
    assert len(out) <= len(ks)

def test_reduce_matches_check():
    ks = generate_valid_set(Attempt.from_string("ABCD", 2))
    att = Attempt.from_string("AACC", 2)
    expected = [k.as_string() for k in ks if att.check(k)]
    assert ks.reduce(att).as_strings() == expected

def test_reduce_length_mismatch():
    ks = KeySet.from_strings(["AB"])
    with pytest.raises(LengthMismatch):
        ks.reduce(Attempt.from_string("ABC", 1))

def test_reduce_empty_set_stays_empty():
    assert len(KeySet().reduce(Attempt.from_string("AB", 1))) == 0

def test_keyset_equality():
    assert KeySet.from_strings(["AB", "CD"]) == KeySet.from_strings(["CD", "AB"])

@pytest.mark.parametrize("text,score,expected", [
    ("AX", 1, 4),      # the blank must be the mistake: 4 options
    ("XXA", 2, 0),     # two blanks, one mistake
    ("XXA", 1, 16),    # both blanks overwritten, A kept
    ("XBCD", 2, 36),   # blank plus one more: 3 positions x 3 options x 4
])
def test_candidate_space_size_counts_blanks(text, score, expected):
    seed = Attempt.from_string(text, score)
    keys = generate_valid_set(seed)
    assert candidate_space_size(seed) == expected == len(keys)
