"""Biblical literacy scoring.

Absolute scale: earned points over available points. Every literacy
question's points count toward the maximum whether or not it was answered,
so skipping questions lowers the percentage. Graded multiple-choice items
earn full points only on an exact match; self-assessment Likert items earn
``value / 5`` of their points.
"""
import logging
from typing import Dict, Iterable, List, Tuple

from ministry_fit.core.literacy import LITERACY_CONTENT, LiteracyContent, literacy_level
from ministry_fit.core.question_bank import QUESTION_BANK, QuestionDefinition
from ministry_fit.schemas.results import LiteracyBucketScore, LiteracyResult
from ministry_fit.services.answers import Answers, Choice, Likert
from ministry_fit.services.normalization import absolute_percentage, round_half_up, round_int

logger = logging.getLogger("app.literacy_scoring")


def _earned(question: QuestionDefinition, answers: Answers) -> Tuple[float, bool]:
    """Return (points earned, answered a graded item correctly)."""
    answer = answers.get(question.id)
    points = question.literacy_points or 0
    if question.literacy_correct_answer is not None:
        if isinstance(answer, Choice) and answer.value == question.literacy_correct_answer:
            return points, True
        return 0.0, False
    if isinstance(answer, Likert):
        return answer.value / 5 * points, False
    return 0.0, False


def score_literacy(
    answers: Answers,
    question_bank: Iterable[QuestionDefinition] = QUESTION_BANK,
    content: LiteracyContent = LITERACY_CONTENT,
) -> LiteracyResult:
    buckets: Dict[str, Dict[str, float]] = {b: {"score": 0.0, "max": 0.0} for b in content.buckets}
    default_bucket = content.buckets[0]
    total = 0.0
    maximum = 0.0
    correct = 0
    question_count = 0

    for question in question_bank:
        if not question.is_literacy:
            continue
        question_count += 1
        points = question.literacy_points or 0
        earned, is_correct = _earned(question, answers)
        if is_correct:
            correct += 1
        maximum += points
        total += earned
        bucket = buckets.get(question.literacy_bucket or default_bucket)
        if bucket is None:
            logger.debug(f"{question.id}: bucket {question.literacy_bucket} has no row; counted in totals only")
            continue
        bucket["max"] += points
        bucket["score"] += earned

    percentage = absolute_percentage(total, maximum)
    # level comes from the unrounded percentage so 39.6 stays low
    level = literacy_level(percentage)
    level_content = content.levels[level]

    bucket_scores: List[LiteracyBucketScore] = [
        LiteracyBucketScore(
            bucket=bucket,
            bucket_name=content.bucket_names.get(bucket, bucket),
            score=round_half_up(data["score"], 1),
            max_score=data["max"],
            percentage=round_int(absolute_percentage(data["score"], data["max"])),
        )
        for bucket, data in buckets.items()
    ]
    logger.debug(f"Literacy {total:.2f}/{maximum:.2f} -> {level}")

    return LiteracyResult(
        level=level,
        level_name=level_content.level_name,
        score=round_half_up(total, 1),
        max_score=maximum,
        percentage=round_int(percentage),
        total_questions=question_count,
        correct_answers=correct,
        bucket_scores=bucket_scores,
        description=level_content.description,
        encouragement=level_content.encouragement,
        recommendations=list(level_content.recommendations),
        next_steps=list(level_content.next_steps),
        discipleship_focus=level_content.discipleship_focus,
    )


__all__ = ["score_literacy"]
