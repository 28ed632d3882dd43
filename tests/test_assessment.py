import logging
from dataclasses import replace

from ministry_fit import score_assessment
from ministry_fit.core.literacy import LITERACY_CONTENT
from ministry_fit.core.ministries import MINISTRY_IDS, MatchRules
from ministry_fit.schemas.results import RespondentAttributes


def test_empty_submission_scores_without_error():
    result = score_assessment({})
    assert len(result.gifts) == 26
    assert all(g.score == 0 for g in result.gifts)
    assert result.style.primary == "D"
    assert result.literacy.level == "low"
    assert all(s.level == "beginner" for s in result.skills.categories)
    assert len(result.ministries) == len(MINISTRY_IDS)
    assert result.excluded_ministries == []
    assert result.warnings == []


def test_perfect_submission_end_to_end(full_answers):
    result = score_assessment(full_answers)
    assert result.warnings == []
    assert result.gifts[0].score == 100
    assert result.literacy.level == "strong"
    assert result.literacy.percentage == 100
    assert all(s.level == "skilled" and s.score == 100 for s in result.skills.categories)
    primaries = [m for m in result.ministries if m.is_primary]
    assert len(primaries) == 5
    assert primaries == result.ministries[:5]
    # declared female, nothing excluded
    assert result.excluded_ministries == []


def test_sex_answer_drives_eligibility():
    result = score_assessment({"sex": "male", "ms6": 5})
    assert [e.ministry_id for e in result.excluded_ministries] == ["nursery"]
    assert "nursery" not in {m.ministry_id for m in result.ministries}


def test_explicit_attributes_override_answer_map():
    result = score_assessment({"sex": "male"}, attributes=RespondentAttributes(sex="female"))
    assert result.excluded_ministries == []
    assert "nursery" in {m.ministry_id for m in result.ministries}


def test_malformed_answers_become_warnings():
    result = score_assessment({"sg27": 5, "sg1": 11, "nope": 3})
    assert result.gifts[0].gift == "hospitality"
    assert len(result.warnings) == 2


def test_result_is_deterministic(full_answers):
    assert score_assessment(full_answers).model_dump() == score_assessment(full_answers).model_dump()


def test_logs_one_summary_line(caplog):
    with caplog.at_level(logging.INFO, logger="app.assessment"):
        score_assessment({"sg27": 5, "disc5": 5})
    summary = [r for r in caplog.records if r.name == "app.assessment"]
    assert len(summary) == 1
    assert "top_gift=hospitality" in summary[0].getMessage()
    assert "style=I" in summary[0].getMessage()


def test_children_youth_answers_are_accepted_without_effect():
    base = score_assessment({"sg27": 5})
    with_cy = score_assessment({"sg27": 5, "cy1": "yes", "cy2": 5, "cy6": "no"})
    assert with_cy.warnings == []
    assert with_cy.model_dump() == base.model_dump()


def test_gifts_scale_relative_while_literacy_scales_absolute():
    low = score_assessment({"sg27": 5, "bl16": 2, "bl17": 2})
    high = score_assessment({"sg27": 5, "bl16": 5, "bl17": 5})
    # one answered gift question is always the 100 reference point
    assert low.gifts[0].gift == high.gifts[0].gift == "hospitality"
    assert low.gifts[0].score == high.gifts[0].score == 100
    assert high.literacy.percentage > low.literacy.percentage


def test_injected_match_rules_are_used(full_answers):
    rules = MatchRules(primary_limit=2)
    result = score_assessment(full_answers, rules=rules)
    assert sum(1 for m in result.ministries if m.is_primary) == 2


def test_injected_literacy_content_is_used():
    content = replace(LITERACY_CONTENT, levels={
        level: replace(info, level_name=f"Custom {level}") for level, info in LITERACY_CONTENT.levels.items()
    })
    result = score_assessment({}, literacy_content=content)
    assert result.literacy.level_name == "Custom low"
