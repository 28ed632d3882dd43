from ministry_fit.core.gifts import GIFT_IDS
from ministry_fit.core.question_bank import YES_NO, QuestionDefinition, Section
from ministry_fit.services.answers import Binary, ingest_answers
from ministry_fit.services.gift_scoring import gift_totals, score_gifts


def _score(raw):
    return score_gifts(ingest_answers(raw))


def test_empty_answers_return_full_gift_set_at_zero():
    scores = _score({})
    assert [s.gift for s in scores] == list(GIFT_IDS)
    assert all(s.score == 0 for s in scores)


def test_single_answer_normalizes_relative_to_top_gift():
    scores = _score({"sg1": 5})
    by_gift = {s.gift: s.score for s in scores}
    assert by_gift["word-of-knowledge"] == 100
    assert by_gift["discernment"] == 33  # 0.5 / 1.5
    assert scores[0].gift == "word-of-knowledge"
    assert scores[1].gift == "discernment"
    # remaining zeros keep catalog order
    assert scores[2].gift == "word-of-wisdom"


def test_lowest_likert_contributes_nothing():
    assert all(s.score == 0 for s in _score({"sg1": 1, "sg27": 1}))


def test_scores_bounded_and_sorted(full_answers):
    scores = _score(full_answers)
    assert scores[0].score == 100
    assert all(0 <= s.score <= 100 for s in scores)
    assert [s.score for s in scores] == sorted((s.score for s in scores), reverse=True)


def test_metadata_attached():
    top = _score({"sg27": 5})[0]
    assert top.gift == "hospitality"
    assert top.name == "Hospitality"
    assert top.biblical_reference
    assert isinstance(top.ministry_fit, list)


def test_unknown_gift_weights_are_ignored_and_yes_counts_fully():
    bank = [
        QuestionDefinition(id="q1", section=Section.SPIRITUAL_GIFTS, kind=YES_NO, text="?",
                           gift_weights={"faith": 2.0, "juggling": 5.0}),
    ]
    totals = gift_totals({"q1": Binary(True)}, bank)
    assert "juggling" not in totals
    assert totals["faith"] == 2.0
    scores = score_gifts({"q1": Binary(True)}, bank)
    assert scores[0].gift == "faith" and scores[0].score == 100


def test_scoring_is_deterministic(full_answers):
    first = [s.model_dump() for s in _score(full_answers)]
    second = [s.model_dump() for s in _score(full_answers)]
    assert first == second
