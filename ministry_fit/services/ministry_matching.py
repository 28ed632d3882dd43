"""Ministry matching.

Combines three sources of evidence into one raw affinity per ministry:

1. direct question weights (same multiplier as gift scoring),
2. a bonus from each of the respondent's top gifts for the ministries that
   gift reinforces, scaled by the gift's 0..100 score,
3. a flat bonus keyed by the primary DISC axis.

Ministries the respondent is not eligible for are removed before ranking.
Scores are unbounded and comparable only within one respondent. The
ranking is stable, so ties keep catalog order.
"""
import logging
from typing import Dict, Iterable, List, Optional, Sequence

from ministry_fit.core.ministries import DEFAULT_MATCH_RULES, MINISTRY_CATALOG, MatchRules, MinistryInfo
from ministry_fit.core.question_bank import QUESTION_BANK, QuestionDefinition
from ministry_fit.schemas.results import (
    GiftScore,
    MinistryExclusion,
    MinistryMatch,
    RespondentAttributes,
    StyleProfile,
)
from ministry_fit.services.answers import Answers
from ministry_fit.services.normalization import answer_multiplier

logger = logging.getLogger("app.ministry_matching")

GENERIC_WHY_MATCHED = "Based on your responses, you may thrive in this serving role."


def find_exclusions(
    attributes: Optional[RespondentAttributes],
    catalog: Iterable[MinistryInfo] = MINISTRY_CATALOG,
) -> List[MinistryExclusion]:
    """Ministries removed by the eligibility filter, in catalog order.

    A respondent who declared no sex is never excluded.
    """
    if attributes is None or attributes.sex is None:
        return []
    exclusions: List[MinistryExclusion] = []
    for ministry in catalog:
        restricted = ministry.restricted_to_sex
        if restricted and attributes.sex != restricted:
            exclusions.append(
                MinistryExclusion(
                    ministry_id=ministry.ministry_id,
                    name=ministry.name,
                    reason=f"{ministry.name} is limited to {restricted} volunteers.",
                )
            )
    return exclusions


def ministry_scores(
    answers: Answers,
    gift_scores: Sequence[GiftScore],
    style_profile: StyleProfile,
    question_bank: Iterable[QuestionDefinition] = QUESTION_BANK,
    catalog: Iterable[MinistryInfo] = MINISTRY_CATALOG,
    rules: MatchRules = DEFAULT_MATCH_RULES,
) -> Dict[str, float]:
    """Raw affinity per catalog ministry before eligibility and ranking."""
    scores: Dict[str, float] = {m.ministry_id: 0.0 for m in catalog}

    for question in question_bank:
        if not question.ministry_weights or question.id not in answers:
            continue
        multiplier = answer_multiplier(answers[question.id])
        for ministry_id, weight in question.ministry_weights.items():
            if ministry_id in scores:
                scores[ministry_id] += weight * multiplier

    for gift in gift_scores[: rules.top_gift_count]:
        for ministry_id in rules.gift_to_ministries.get(gift.gift, ()):
            if ministry_id in scores:
                scores[ministry_id] += gift.score / 100 * rules.gift_bonus_weight

    for ministry_id, bonus in rules.style_bonuses.get(style_profile.primary, {}).items():
        if ministry_id in scores:
            scores[ministry_id] += bonus

    return scores


def _why_matched(ministry_id: str, gift_names: List[str], primary: str, rules: MatchRules) -> str:
    if gift_names:
        return f"Your gifts of {' and '.join(gift_names[:2])} align well with this ministry."
    style_phrase = rules.style_why_matched.get(primary)
    if style_phrase and ministry_id in style_phrase[0]:
        return style_phrase[1]
    return GENERIC_WHY_MATCHED


def _growth_pathway(ministry: MinistryInfo) -> str:
    return (
        f"You show interest in {ministry.name}, but may need additional training or experience. "
        "Consider shadowing current team members or taking relevant classes to develop your skills."
    )


def match_ministries(
    answers: Answers,
    gift_scores: Sequence[GiftScore],
    style_profile: StyleProfile,
    attributes: Optional[RespondentAttributes] = None,
    question_bank: Iterable[QuestionDefinition] = QUESTION_BANK,
    catalog: Iterable[MinistryInfo] = MINISTRY_CATALOG,
    rules: MatchRules = DEFAULT_MATCH_RULES,
) -> List[MinistryMatch]:
    """Rank eligible ministries for one respondent.

    ``gift_scores`` must already be in rank order (as returned by
    ``score_gifts``); only the first ``rules.top_gift_count`` contribute
    bonuses. The first ``rules.primary_limit`` entries scoring above
    ``rules.primary_threshold`` are flagged primary.
    """
    catalog = list(catalog)
    scores = ministry_scores(answers, gift_scores, style_profile, question_bank, catalog, rules)

    excluded = {e.ministry_id for e in find_exclusions(attributes, catalog)}
    if excluded:
        logger.debug(f"Excluded ministries: {sorted(excluded)}")
    eligible = [m for m in catalog if m.ministry_id not in excluded]
    ranked = sorted(eligible, key=lambda m: -scores[m.ministry_id])

    top_gifts = list(gift_scores[: rules.top_gift_count])
    matches: List[MinistryMatch] = []
    for rank, ministry in enumerate(ranked):
        score = scores[ministry.ministry_id]
        gift_names = [
            g.name for g in top_gifts
            if ministry.ministry_id in rules.gift_to_ministries.get(g.gift, ())
        ]
        needs_verification = ministry.ministry_id in rules.skill_verification_ministries
        growth = None
        if needs_verification and score > rules.growth_pathway_threshold:
            growth = _growth_pathway(ministry)
        matches.append(
            MinistryMatch(
                ministry_id=ministry.ministry_id,
                name=ministry.name,
                category=ministry.category,
                score=score,
                description=ministry.description,
                why_matched=_why_matched(ministry.ministry_id, gift_names, style_profile.primary, rules),
                matched_gift_names=gift_names,
                strengths_you_bring=gift_names[:3],
                team_culture_fit=style_profile.description,
                next_steps=rules.next_steps,
                is_primary=rank < rules.primary_limit and score > rules.primary_threshold,
                requires_skill_verification=needs_verification,
                growth_pathway=growth,
            )
        )
    return matches


__all__ = ["GENERIC_WHY_MATCHED", "find_exclusions", "ministry_scores", "match_ministries"]
