"""Answer ingestion.

Raw answers arrive as a loose ``{question_id: value}`` dict. They are
converted once, using each question's declared kind, into a tagged value
(Likert / Binary / Choice). Scorers dispatch on the tag and never inspect raw
values. Anything that cannot be converted is dropped and reported as a
warning; dropped answers carry no evidence and count toward no denominator.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from ministry_fit.core.question_bank import (
    LIKERT,
    MULTIPLE_CHOICE,
    QUESTION_BANK,
    SEX_QUESTION_ID,
    YES_NO,
    QuestionDefinition,
)
from ministry_fit.schemas.results import RespondentAttributes

logger = logging.getLogger("app.answers")

LIKERT_MIN = 1
LIKERT_MAX = 5
# Offered on some technical Likert items; means no evidence rather than a low score
DONT_KNOW = 0


@dataclass(frozen=True)
class Likert:
    value: int


@dataclass(frozen=True)
class Binary:
    value: bool


@dataclass(frozen=True)
class Choice:
    value: str


AnswerValue = Union[Likert, Binary, Choice]
Answers = Dict[str, AnswerValue]


def _coerce(question: QuestionDefinition, raw: Any) -> Tuple[Optional[AnswerValue], Optional[str]]:
    """Convert one raw value; returns (value, warning) with at most one set."""
    if question.kind == LIKERT:
        # bool is an int subclass; True must not read as a Likert 1
        if isinstance(raw, bool) or not isinstance(raw, int):
            return None, f"{question.id}: expected an integer {LIKERT_MIN}-{LIKERT_MAX}, got {raw!r}"
        if raw == DONT_KNOW:
            return None, None
        if raw < LIKERT_MIN or raw > LIKERT_MAX:
            return None, f"{question.id}: Likert value {raw} outside {LIKERT_MIN}-{LIKERT_MAX}"
        return Likert(raw), None
    if question.kind == YES_NO:
        if isinstance(raw, bool):
            return Binary(raw), None
        if isinstance(raw, str) and raw.strip().lower() in ("yes", "no"):
            return Binary(raw.strip().lower() == "yes"), None
        return None, f"{question.id}: expected 'yes' or 'no', got {raw!r}"
    if question.kind == MULTIPLE_CHOICE:
        if isinstance(raw, str) and raw:
            return Choice(raw), None
        return None, f"{question.id}: expected an option value, got {raw!r}"
    return None, f"{question.id}: unsupported question kind {question.kind!r}"


def parse_answers(
    raw_answers: Mapping[str, Any],
    question_bank: Iterable[QuestionDefinition] = QUESTION_BANK,
) -> Tuple[Answers, List[str]]:
    """Return (tagged answers in bank order, warnings)."""
    bank = {q.id: q for q in question_bank}
    answers: Answers = {}
    warnings: List[str] = []
    unknown = [k for k in raw_answers if k not in bank]
    if unknown:
        warnings.append(f"Unknown question ids: {', '.join(sorted(unknown))}")
    for qid, question in bank.items():
        if qid not in raw_answers or raw_answers[qid] is None:
            continue
        value, warning = _coerce(question, raw_answers[qid])
        if warning:
            warnings.append(warning)
        if value is not None:
            answers[qid] = value
    if warnings:
        logger.debug(f"Dropped answers during ingestion: {warnings}")
    return answers, warnings


def ingest_answers(
    raw_answers: Mapping[str, Any],
    question_bank: Iterable[QuestionDefinition] = QUESTION_BANK,
) -> Answers:
    return parse_answers(raw_answers, question_bank)[0]


def validate_answers(
    raw_answers: Mapping[str, Any],
    question_bank: Iterable[QuestionDefinition] = QUESTION_BANK,
) -> List[str]:
    """Return list of warning messages (empty if every answer is usable).

    Never raises: partial and malformed submissions still score, the
    offending answers simply carry no evidence.
    """
    return parse_answers(raw_answers, question_bank)[1]


def respondent_attributes(raw_answers: Mapping[str, Any]) -> RespondentAttributes:
    """Read the demographic filter key kept alongside the answers."""
    sex = raw_answers.get(SEX_QUESTION_ID)
    if isinstance(sex, str) and sex.strip().lower() in ("male", "female"):
        return RespondentAttributes(sex=sex.strip().lower())
    return RespondentAttributes()


__all__ = [
    "Likert",
    "Binary",
    "Choice",
    "AnswerValue",
    "Answers",
    "parse_answers",
    "ingest_answers",
    "validate_answers",
    "respondent_attributes",
]
