"""Technical skill categories, readiness bands and encouragement text."""
from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

SKILL_CATEGORIES: Tuple[str, ...] = ("sound", "media", "propresenter", "photography")

CATEGORY_NAMES: Mapping[str, str] = MappingProxyType({
    "sound": "Sound Tech",
    "media": "Media/Livestream",
    "propresenter": "ProPresenter/Lyrics",
    "photography": "Photography",
})


@dataclass(frozen=True)
class SkillBand:
    minimum: float  # inclusive lower bound on the category percentage
    level: str
    can_serve: bool
    needs_training: bool
    encouragement: str


# Highest band first; the first band whose minimum is met wins
SKILL_BANDS: Tuple[SkillBand, ...] = (
    SkillBand(80, "skilled", True, False,
              "You have strong skills in this area and can help train others!"),
    SkillBand(60, "competent", True, False,
              "You are ready to serve in this role with confidence."),
    SkillBand(40, "growing-learner", True, True,
              "You show potential! We'd love to mentor you as you develop these skills."),
    SkillBand(0, "beginner", False, True,
              "Worship and production roles require patience and a teachable spirit. "
              "We will gladly train you, your desire is valuable!"),
)

# (minimum average score, narrative), highest first
READINESS_NARRATIVES: Tuple[Tuple[float, str], ...] = (
    (70, "You have strong technical skills and are ready to serve in media/production roles."),
    (40, "You have foundational skills and can serve with training and mentorship."),
    (0, "Technical ministry requires training, but your heart to serve is the most important starting point!"),
)


@dataclass(frozen=True)
class SkillContent:
    categories: Tuple[str, ...]
    category_names: Mapping[str, str]
    bands: Tuple[SkillBand, ...]
    readiness: Tuple[Tuple[float, str], ...]


SKILL_CONTENT = SkillContent(
    categories=SKILL_CATEGORIES,
    category_names=CATEGORY_NAMES,
    bands=SKILL_BANDS,
    readiness=READINESS_NARRATIVES,
)

__all__ = [
    "SKILL_CATEGORIES",
    "CATEGORY_NAMES",
    "SkillBand",
    "SKILL_BANDS",
    "READINESS_NARRATIVES",
    "SkillContent",
    "SKILL_CONTENT",
]
