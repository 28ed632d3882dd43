import pytest

from ministry_fit.core.ministries import MINISTRY_CATALOG, MINISTRY_IDS, MatchRules
from ministry_fit.core.question_bank import YES_NO, QuestionDefinition, Section
from ministry_fit.schemas.results import RespondentAttributes
from ministry_fit.services.answers import Binary, ingest_answers
from ministry_fit.services.gift_scoring import score_gifts
from ministry_fit.services.ministry_matching import (
    GENERIC_WHY_MATCHED,
    find_exclusions,
    match_ministries,
)
from ministry_fit.services.style_profile import build_style_profile


def _match(raw, attributes=None):
    answers = ingest_answers(raw)
    gifts = score_gifts(answers)
    style = build_style_profile(answers)
    return match_ministries(answers, gifts, style, attributes)


def _by_id(matches):
    return {m.ministry_id: m for m in matches}


def test_empty_answers_rank_only_style_bonuses():
    matches = _match({})
    assert len(matches) == len(MINISTRY_IDS)
    assert matches[0].ministry_id == "security"
    assert matches[0].score == pytest.approx(0.3)
    assert matches[1].ministry_id == "ushers"
    # zeros keep catalog order
    assert [m.ministry_id for m in matches[2:4]] == ["greeters", "welcome-table"]
    # 0.3 is not above the primary threshold
    assert not any(m.is_primary for m in matches)


def test_gift_bonus_and_direct_weights():
    matches = _match({"sg27": 5})
    by_id = _by_id(matches)
    assert by_id["greeters"].score == pytest.approx(2.0)  # 1.5 direct + 0.5 hospitality bonus
    assert by_id["welcome-table"].score == pytest.approx(2.0)
    assert by_id["cafe"].score == pytest.approx(1.7)
    assert by_id["landing-team"].score == pytest.approx(0.5)
    assert [m.ministry_id for m in matches[:4]] == ["greeters", "welcome-table", "cafe", "landing-team"]
    assert by_id["greeters"].matched_gift_names == ["Hospitality"]
    assert by_id["greeters"].why_matched == "Your gifts of Hospitality align well with this ministry."
    assert [m.is_primary for m in matches[:5]] == [True, True, True, True, False]


def test_style_bonus_and_style_phrasing():
    by_id = _by_id(_match({"disc5": 5}))
    assert by_id["greeters"].score == pytest.approx(0.9)  # 0.5 direct + 0.4 influence bonus
    assert by_id["landing-team"].score == pytest.approx(0.4)
    assert by_id["outreach"].score == pytest.approx(0.3)
    assert by_id["celebrate-recovery"].score == pytest.approx(0.2)
    assert by_id["greeters"].why_matched == "Your outgoing, people-oriented personality makes you a natural fit."
    assert by_id["landing-team"].why_matched == GENERIC_WHY_MATCHED


def test_technical_ministry_flags_and_growth_pathway():
    by_id = _by_id(_match({"disc13": 5}))
    sound = by_id["sound"]
    assert sound.score == pytest.approx(0.8)
    assert sound.why_matched == "Your detail-oriented nature is perfect for technical ministry."
    assert sound.requires_skill_verification is True
    assert sound.growth_pathway.startswith("You show interest in Sound,")
    lyrics = by_id["lyrics"]
    assert lyrics.requires_skill_verification is False
    assert lyrics.growth_pathway is None
    assert by_id["worship"].growth_pathway is None  # needs verification but scored 0


def test_male_respondent_never_sees_nursery():
    matches = _match({"ms8": 5, "ms6": 5}, RespondentAttributes(sex="male"))
    assert "nursery" not in {m.ministry_id for m in matches}
    assert len(matches) == len(MINISTRY_IDS) - 1


def test_female_and_undeclared_respondents_keep_nursery():
    for attributes in (RespondentAttributes(sex="female"), RespondentAttributes(), None):
        assert "nursery" in {m.ministry_id for m in _match({}, attributes)}


def test_find_exclusions_reports_reason():
    exclusions = find_exclusions(RespondentAttributes(sex="male"))
    assert [e.ministry_id for e in exclusions] == ["nursery"]
    assert "female" in exclusions[0].reason
    assert find_exclusions(RespondentAttributes(sex="female")) == []
    assert find_exclusions(None) == []


def test_primary_flag_needs_top_five_and_threshold():
    targets = ["greeters", "ushers", "security", "cafe", "sound"]
    weights = [5.0, 2.0, 1.0, 0.35, 0.2]
    bank = [
        QuestionDefinition(id=f"q{i}", section=Section.MINISTRY_SKILLS, kind=YES_NO, text="?",
                           ministry_weights={mid: w})
        for i, (mid, w) in enumerate(zip(targets, weights))
    ]
    answers = {q.id: Binary(True) for q in bank}
    style = build_style_profile({})
    rules = MatchRules(gift_to_ministries={}, style_bonuses={})
    matches = match_ministries(answers, [], style, None, bank, MINISTRY_CATALOG, rules)
    assert [m.ministry_id for m in matches[:5]] == targets
    assert [m.is_primary for m in matches[:5]] == [True, True, True, True, False]
    assert sum(m.is_primary for m in matches) == 4


def test_decorations(full_answers):
    answers = ingest_answers(full_answers)
    style = build_style_profile(answers)
    matches = match_ministries(answers, score_gifts(answers), style)
    for m in matches:
        assert len(m.strengths_you_bring) <= 3
        assert m.strengths_you_bring == m.matched_gift_names[:3]
        assert m.team_culture_fit == style.description
        assert m.next_steps == "Complete onboarding and attend orientation."
    scores = [m.score for m in matches]
    assert scores == sorted(scores, reverse=True)
    assert sum(m.is_primary for m in matches) == 5


def test_matching_is_deterministic(full_answers):
    first = [m.model_dump() for m in _match(full_answers)]
    second = [m.model_dump() for m in _match(full_answers)]
    assert first == second
