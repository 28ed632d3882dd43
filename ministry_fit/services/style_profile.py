"""DISC behavioral-style profile."""
import logging
from typing import Dict, Iterable

from ministry_fit.core.question_bank import QUESTION_BANK, QuestionDefinition
from ministry_fit.core.styles import SECONDARY_STYLE_THRESHOLD, STYLE_CATALOG, StyleInfo
from ministry_fit.schemas.results import StyleProfile
from ministry_fit.services.answers import Answers, Likert
from ministry_fit.services.normalization import answer_multiplier, relative_scores

logger = logging.getLogger("app.style_profile")


def build_style_profile(
    answers: Answers,
    question_bank: Iterable[QuestionDefinition] = QUESTION_BANK,
    style_catalog: Iterable[StyleInfo] = STYLE_CATALOG,
) -> StyleProfile:
    """Score the four axes and pick primary / secondary.

    Only Likert answers count. Ties between axes resolve in catalog order
    (D, I, S, C), so an empty submission yields primary D and no secondary.
    The secondary axis is reported only when it scores above 40.
    """
    catalog = list(style_catalog)
    totals: Dict[str, float] = {s.axis: 0.0 for s in catalog}
    for question in question_bank:
        answer = answers.get(question.id)
        if not question.style_weights or not isinstance(answer, Likert):
            continue
        multiplier = answer_multiplier(answer)
        for axis, weight in question.style_weights.items():
            if axis in totals:
                totals[axis] += weight * multiplier

    scores = relative_scores(totals)
    ranked = sorted(scores, key=lambda axis: -scores[axis])
    primary = ranked[0]
    secondary = None
    if len(ranked) > 1 and scores[ranked[1]] > SECONDARY_STYLE_THRESHOLD:
        secondary = ranked[1]
    info = next(s for s in catalog if s.axis == primary)
    logger.debug(f"Style scores {scores}; primary={primary} secondary={secondary}")

    return StyleProfile(
        primary=primary,
        secondary=secondary,
        scores=scores,
        name=info.name,
        description=info.description,
        strengths=list(info.strengths),
        weaknesses=list(info.weaknesses),
        best_team_environments=list(info.best_environments),
        worst_team_environments=list(info.worst_environments),
        communication_style=info.communication_style,
        decision_making=info.decision_making,
    )


__all__ = ["build_style_profile"]
