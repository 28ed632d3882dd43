from ministry_fit.core.question_bank import LIKERT, YES_NO, QuestionDefinition, Section
from ministry_fit.services.answers import Binary, Likert, ingest_answers
from ministry_fit.services.style_profile import build_style_profile


def _disc(qid, weights, kind=LIKERT):
    return QuestionDefinition(id=qid, section=Section.DISC, kind=kind, text="?", style_weights=weights)


def test_empty_answers_default_to_first_axis():
    profile = build_style_profile({})
    assert profile.primary == "D"
    assert profile.secondary is None
    assert profile.scores == {"D": 0, "I": 0, "S": 0, "C": 0}
    assert profile.name == "Dominance"


def test_single_influence_answer():
    profile = build_style_profile(ingest_answers({"disc5": 5}))
    assert profile.primary == "I"
    assert profile.scores["I"] == 100
    assert profile.secondary is None
    assert profile.name == "Influence"
    assert profile.strengths


def test_secondary_reported_only_above_forty():
    bank = [_disc("a", {"I": 100.0}), _disc("b", {"S": 41.0})]
    answers = {"a": Likert(5), "b": Likert(5)}
    assert build_style_profile(answers, bank).secondary == "S"

    bank = [_disc("a", {"I": 100.0}), _disc("b", {"S": 40.0})]
    profile = build_style_profile(answers, bank)
    assert profile.scores["S"] == 40
    assert profile.secondary is None


def test_ties_follow_fixed_axis_priority():
    bank = [_disc("a", {"C": 1.0, "S": 1.0})]
    profile = build_style_profile({"a": Likert(4)}, bank)
    assert profile.primary == "S"
    assert profile.secondary == "C"


def test_only_likert_answers_contribute():
    bank = [_disc("a", {"C": 1.0}, kind=YES_NO)]
    profile = build_style_profile({"a": Binary(True)}, bank)
    assert profile.scores["C"] == 0
    assert profile.primary == "D"


def test_scores_bounded(full_answers):
    profile = build_style_profile(ingest_answers(full_answers))
    assert max(profile.scores.values()) == 100
    assert all(0 <= v <= 100 for v in profile.scores.values())
