"""Spiritual gift scoring.

Each answered question with gift weights adds ``weight * multiplier`` to the
gifts it names. Totals are normalized relative to the respondent's strongest
gift, so the top gift reads 100 unless nothing was answered. The full gift
set is always returned, sorted by score with ties kept in catalog order.
"""
import logging
from typing import Dict, Iterable, List

from ministry_fit.core.gifts import GIFT_CATALOG, GiftInfo
from ministry_fit.core.question_bank import QUESTION_BANK, QuestionDefinition
from ministry_fit.schemas.results import GiftScore
from ministry_fit.services.answers import Answers
from ministry_fit.services.normalization import answer_multiplier, relative_scores

logger = logging.getLogger("app.gift_scoring")


def gift_totals(
    answers: Answers,
    question_bank: Iterable[QuestionDefinition] = QUESTION_BANK,
    gift_catalog: Iterable[GiftInfo] = GIFT_CATALOG,
) -> Dict[str, float]:
    """Raw weighted totals per gift, in catalog order."""
    totals: Dict[str, float] = {g.gift_id: 0.0 for g in gift_catalog}
    for question in question_bank:
        if not question.gift_weights or question.id not in answers:
            continue
        multiplier = answer_multiplier(answers[question.id])
        for gift, weight in question.gift_weights.items():
            if gift in totals:
                totals[gift] += weight * multiplier
    return totals


def score_gifts(
    answers: Answers,
    question_bank: Iterable[QuestionDefinition] = QUESTION_BANK,
    gift_catalog: Iterable[GiftInfo] = GIFT_CATALOG,
) -> List[GiftScore]:
    catalog = list(gift_catalog)
    scores = relative_scores(gift_totals(answers, question_bank, catalog))
    results = [
        GiftScore(
            gift=g.gift_id,
            name=g.name,
            score=scores[g.gift_id],
            description=g.description,
            biblical_reference=g.biblical_reference,
            biblical_example=g.biblical_example,
            how_you_operate=g.how_you_operate,
            ministry_fit=list(g.ministry_fit),
            team_culture=g.team_culture,
        )
        for g in catalog
    ]
    # sort is stable: equal scores keep catalog order
    results.sort(key=lambda r: -r.score)
    if results:
        logger.debug(f"Top gift {results[0].gift} ({results[0].score})")
    return results


__all__ = ["gift_totals", "score_gifts"]
