"""Technical skill readiness.

Each technical question belongs to one category and carries points. The
category maximum accrues for every question whether or not it was answered.
Earned points: exact match on a graded option earns full points, Likert earns
``value / 5`` of the points, a "yes" earns full points.
"""
import logging
from typing import Dict, Iterable

from ministry_fit.core.question_bank import QUESTION_BANK, QuestionDefinition
from ministry_fit.core.skills import SKILL_CONTENT, SkillBand, SkillContent
from ministry_fit.schemas.results import SkillProfile, SkillResult
from ministry_fit.services.answers import Answers, Binary, Choice, Likert
from ministry_fit.services.normalization import absolute_percentage, round_int

logger = logging.getLogger("app.skill_readiness")


def _earned(question: QuestionDefinition, answers: Answers) -> float:
    answer = answers.get(question.id)
    points = question.skill_points or 0
    if question.literacy_correct_answer is not None:
        if isinstance(answer, Choice) and answer.value == question.literacy_correct_answer:
            return points
        return 0.0
    if isinstance(answer, Likert):
        return answer.value / 5 * points
    if isinstance(answer, Binary) and answer.value:
        return points
    return 0.0


def skill_band(percentage: float, content: SkillContent = SKILL_CONTENT) -> SkillBand:
    """First band (highest first) whose inclusive minimum is met."""
    for band in content.bands:
        if percentage >= band.minimum:
            return band
    return content.bands[-1]


def readiness_narrative(average: float, content: SkillContent = SKILL_CONTENT) -> str:
    for minimum, narrative in content.readiness:
        if average >= minimum:
            return narrative
    return content.readiness[-1][1]


def score_skills(
    answers: Answers,
    question_bank: Iterable[QuestionDefinition] = QUESTION_BANK,
    content: SkillContent = SKILL_CONTENT,
) -> SkillProfile:
    totals: Dict[str, Dict[str, float]] = {c: {"total": 0.0, "max": 0.0} for c in content.categories}
    for question in question_bank:
        if not question.is_skill or question.skill_category not in totals:
            continue
        data = totals[question.skill_category]
        data["max"] += question.skill_points or 0
        data["total"] += _earned(question, answers)

    results: Dict[str, SkillResult] = {}
    for category, data in totals.items():
        percentage = absolute_percentage(data["total"], data["max"])
        band = skill_band(percentage, content)
        score = round_int(percentage)
        name = content.category_names.get(category, category)
        results[category] = SkillResult(
            category=category,
            name=name,
            level=band.level,
            score=score,
            description=f"Your proficiency in {name}: {score}%",
            can_serve=band.can_serve,
            needs_training=band.needs_training,
            encouragement=band.encouragement,
        )

    # readiness averages the reported (rounded) category scores
    average = sum(r.score for r in results.values()) / len(results) if results else 0
    logger.debug(f"Skill scores {[(c, r.score) for c, r in results.items()]}; average {average}")
    return SkillProfile(**results, overall_readiness=readiness_narrative(average, content))


__all__ = ["skill_band", "readiness_narrative", "score_skills"]
