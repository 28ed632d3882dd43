"""Score normalization helpers shared by every scorer.

Two conventions coexist and must not be mixed:

* relative: each value is scaled against the respondent's own maximum
  (gifts, DISC axes). The top entry is 100 unless every total is zero.
* absolute: earned points over the maximum available points
  (literacy, technical skills).

Both guard a zero denominator by returning zero, never NaN.
"""
import math
from typing import Dict, Mapping, Optional, TypeVar

from ministry_fit.services.answers import AnswerValue, Binary, Likert

K = TypeVar("K")


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round halves away from the floor (12.5 -> 13), unlike banker's ``round``."""
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def round_int(value: float) -> int:
    return int(round_half_up(value))


def relative_scores(totals: Mapping[K, float]) -> Dict[K, int]:
    """Scale totals to 0..100 against the largest total, preserving key order."""
    top = max(totals.values(), default=0)
    if top <= 0:
        return {key: 0 for key in totals}
    return {key: round_int(value / top * 100) for key, value in totals.items()}


def absolute_percentage(earned: float, maximum: float) -> float:
    if maximum <= 0:
        return 0.0
    return earned / maximum * 100


def answer_multiplier(answer: Optional[AnswerValue]) -> float:
    """Likert a -> (a-1)/4, yes -> 1, anything else contributes nothing."""
    if isinstance(answer, Likert):
        return (answer.value - 1) / 4
    if isinstance(answer, Binary) and answer.value:
        return 1.0
    return 0.0


__all__ = [
    "round_half_up",
    "round_int",
    "relative_scores",
    "absolute_percentage",
    "answer_multiplier",
]
