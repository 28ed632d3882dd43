"""Ministry-fit assessment orchestration.

Ingests the raw answers once and runs the scorers in dependency order:
gifts, style, literacy and skills are independent; matching runs last on the
gift and style outputs. Pure: no I/O beyond a single summary log line.

Every lookup table is a keyword parameter defaulting to the built-in content,
so a deployment can swap in its own question bank, catalogs or match rules
without touching the scorers.
"""
import logging
from typing import Any, Iterable, Mapping, Optional

from ministry_fit.core.gifts import GIFT_CATALOG, GiftInfo
from ministry_fit.core.literacy import LITERACY_CONTENT, LiteracyContent
from ministry_fit.core.ministries import DEFAULT_MATCH_RULES, MINISTRY_CATALOG, MatchRules, MinistryInfo
from ministry_fit.core.question_bank import QUESTION_BANK, QuestionDefinition
from ministry_fit.core.skills import SKILL_CONTENT, SkillContent
from ministry_fit.core.styles import STYLE_CATALOG, StyleInfo
from ministry_fit.schemas.results import AssessmentResult, RespondentAttributes
from ministry_fit.services.answers import parse_answers, respondent_attributes
from ministry_fit.services.gift_scoring import score_gifts
from ministry_fit.services.literacy_scoring import score_literacy
from ministry_fit.services.ministry_matching import find_exclusions, match_ministries
from ministry_fit.services.skill_readiness import score_skills
from ministry_fit.services.style_profile import build_style_profile

logger = logging.getLogger("app.assessment")


def score_assessment(
    raw_answers: Mapping[str, Any],
    attributes: Optional[RespondentAttributes] = None,
    question_bank: Iterable[QuestionDefinition] = QUESTION_BANK,
    catalog: Iterable[MinistryInfo] = MINISTRY_CATALOG,
    *,
    gift_catalog: Iterable[GiftInfo] = GIFT_CATALOG,
    style_catalog: Iterable[StyleInfo] = STYLE_CATALOG,
    literacy_content: LiteracyContent = LITERACY_CONTENT,
    skill_content: SkillContent = SKILL_CONTENT,
    rules: MatchRules = DEFAULT_MATCH_RULES,
) -> AssessmentResult:
    """Score one respondent.

    ``attributes`` defaults to what the ``sex`` answer declares. Malformed
    answers never raise; they are dropped and listed in ``warnings``.
    """
    bank = list(question_bank)
    catalog = list(catalog)
    if attributes is None:
        attributes = respondent_attributes(raw_answers)

    answers, warnings = parse_answers(raw_answers, bank)
    gifts = score_gifts(answers, bank, gift_catalog)
    style = build_style_profile(answers, bank, style_catalog)
    literacy = score_literacy(answers, bank, literacy_content)
    skills = score_skills(answers, bank, skill_content)
    ministries = match_ministries(answers, gifts, style, attributes, bank, catalog, rules)
    exclusions = find_exclusions(attributes, catalog)

    primary_count = sum(1 for m in ministries if m.is_primary)
    logger.info(
        f"Scored assessment: top_gift={gifts[0].gift if gifts else None} "
        f"style={style.primary} literacy={literacy.level} "
        f"primary_ministries={primary_count} warnings={len(warnings)}"
    )
    return AssessmentResult(
        gifts=gifts,
        style=style,
        literacy=literacy,
        skills=skills,
        ministries=ministries,
        excluded_ministries=exclusions,
        warnings=warnings,
    )


__all__ = ["score_assessment"]
