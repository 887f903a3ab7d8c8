import csv
import json

import pytest
from packages.engine import AnswerKey, Attempt, EmptyInput
from packages.harness import run_inference, simulate_attempts, grade, write_steps_csv, write_manifest

HIDDEN = "ABCDDCBAAB"


def test_simulated_attempts_are_graded_against_key():
    key = AnswerKey.from_string(HIDDEN)
    atts = simulate_attempts(key, 5, seed=3, accuracy=0.6, blank_rate=0.1)
    assert len(atts) == 5
    for a in atts:
        assert len(a) == len(HIDDEN)
        assert a.score == grade(a.answers, key)
        assert a.check(key)

def test_simulate_is_reproducible():
    a = simulate_attempts(HIDDEN, 4, seed=11)
    b = simulate_attempts(HIDDEN, 4, seed=11)
    assert a == b

def test_simulate_rejects_bad_rates():
    with pytest.raises(ValueError):
        simulate_attempts(HIDDEN, 1, accuracy=0.9, blank_rate=0.2)

def test_run_inference_recovers_hidden_key():
    atts = simulate_attempts(HIDDEN, 12, seed=42, accuracy=0.8)
    seen = []
    r = run_inference(atts, on_step=lambda i, att, ks: seen.append((i, len(ks))))

    assert HIDDEN in r["keys"]
    assert r["remaining"] == len(r["keys"]) >= 1
    assert r["num_attempts"] == 12 and r["length"] == len(HIDDEN)
    assert r["seed_score"] == max(a.score for a in atts)
    assert r["initial"] <= r["space"]
    assert [i for i, _ in seen] == list(range(1, 12))
    assert [n for _, n in seen] == [s[2] for s in r["steps"]]

def test_run_inference_empty():
    with pytest.raises(EmptyInput):
        run_inference([])

def test_write_steps_csv_and_manifest(tmp_path):
    atts = [Attempt.from_string("AB", 1), Attempt.from_string("AA", 2)]
    r = run_inference(atts)

    p = write_steps_csv(r, str(tmp_path / "run.csv"))
    with open(p, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [(row["step"], row["answers"], row["remaining"]) for row in rows] == [
        ("0", "AA", "1"), ("1", "AB", "1"),
    ]

    m = write_manifest({"run_id": "x", "remaining": r["remaining"]}, str(tmp_path / "m.json"))
    assert json.loads(open(m, encoding="utf-8").read())["remaining"] == 1
