import math

from ministry_fit.services.answers import Binary, Choice, Likert
from ministry_fit.services.normalization import (
    absolute_percentage,
    answer_multiplier,
    relative_scores,
    round_half_up,
    round_int,
)


def test_round_half_up_rounds_halves_upward():
    assert round_int(12.5) == 13
    assert round_int(2.5) == 3
    assert round_int(2.4) == 2
    assert round_half_up(0.25, 1) == 0.3
    assert round_half_up(3.14159, 1) == 3.1


def test_relative_scores_scale_to_top_value():
    scores = relative_scores({"a": 2.0, "b": 1.0, "c": 0.0})
    assert scores == {"a": 100, "b": 50, "c": 0}


def test_relative_scores_round_fractions():
    assert relative_scores({"a": 3.0, "b": 1.0}) == {"a": 100, "b": 33}
    assert relative_scores({"a": 8.0, "b": 1.0}) == {"a": 100, "b": 13}  # 12.5 rounds up


def test_relative_scores_all_zero_is_all_zero():
    assert relative_scores({"x": 0.0, "y": 0.0}) == {"x": 0, "y": 0}
    assert relative_scores({}) == {}


def test_relative_scores_preserve_key_order():
    keys = ["D", "I", "S", "C"]
    scores = relative_scores({k: 1.0 for k in keys})
    assert list(scores) == keys


def test_absolute_percentage_guards_zero_denominator():
    assert absolute_percentage(3, 4) == 75.0
    assert absolute_percentage(5, 0) == 0.0
    result = absolute_percentage(0, 0)
    assert result == 0.0 and not math.isnan(result)


def test_answer_multiplier_by_variant():
    assert answer_multiplier(Likert(1)) == 0.0
    assert answer_multiplier(Likert(3)) == 0.5
    assert answer_multiplier(Likert(5)) == 1.0
    assert answer_multiplier(Binary(True)) == 1.0
    assert answer_multiplier(Binary(False)) == 0.0
    assert answer_multiplier(Choice("a")) == 0.0
    assert answer_multiplier(None) == 0.0
