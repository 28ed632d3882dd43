"""Biblical literacy buckets, level bands and pastoral level content."""
from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

LITERACY_BUCKETS: Tuple[str, ...] = ("bible-basics", "story-timeline", "jesus-salvation", "how-to-read")

BUCKET_NAMES: Mapping[str, str] = MappingProxyType({
    "bible-basics": "Bible Basics",
    "story-timeline": "Story & Timeline",
    "jesus-salvation": "Jesus & Salvation",
    "how-to-read": "How to Read the Bible",
})

# Lower bounds are inclusive: 40 is developing, 70 is strong
DEVELOPING_THRESHOLD = 40
STRONG_THRESHOLD = 70


@dataclass(frozen=True)
class LiteracyLevelContent:
    level_name: str
    description: str
    encouragement: str
    recommendations: Tuple[str, ...]
    next_steps: Tuple[str, ...]
    discipleship_focus: str


@dataclass(frozen=True)
class LiteracyContent:
    buckets: Tuple[str, ...]
    bucket_names: Mapping[str, str]
    levels: Mapping[str, LiteracyLevelContent]


LEVEL_CONTENT: Mapping[str, LiteracyLevelContent] = MappingProxyType({
    "low": LiteracyLevelContent(
        level_name="Building Foundation",
        description=(
            "You're at the beginning of an exciting journey of discovering God's Word. "
            "Everyone starts somewhere, and we're here to walk with you."
        ),
        encouragement=(
            "The Bible is a treasure waiting to be explored! We have great resources and "
            "caring mentors ready to help you grow."
        ),
        recommendations=(
            "Start with the Gospel of John, a wonderful introduction to Jesus",
            "Join our Following Jesus class for new believers",
            "Consider the Bible Basics study group",
        ),
        next_steps=("Following Jesus Class", "Bible Basics Group", "One-on-One Discipleship"),
        discipleship_focus="Foundation building through guided study and mentorship",
    ),
    "developing": LiteracyLevelContent(
        level_name="Growing Strong",
        description=(
            "You have a solid foundation and are actively growing in your understanding of "
            "Scripture. Keep pressing in, you're on a great path!"
        ),
        encouragement="You're making wonderful progress! Continue building on what you've learned.",
        recommendations=(
            "Join Discipleship Hour for deeper teaching",
            "Start a 365-day Bible reading plan",
            "Consider joining a small group Bible study",
        ),
        next_steps=("Discipleship Hour", "365 Bible Reading Plan", "Small Group Study"),
        discipleship_focus="Deepening understanding through consistent study habits",
    ),
    "strong": LiteracyLevelContent(
        level_name="Spiritually Mature",
        description=(
            "You demonstrate strong biblical knowledge and are ready to help others grow in "
            "their faith journey. Your understanding can be a blessing to others."
        ),
        encouragement="Your knowledge of Scripture positions you well to serve and mentor others!",
        recommendations=(
            "Consider leading a Bible study or small group",
            "Mentor newer believers one-on-one",
            "Explore leadership training for teaching",
        ),
        next_steps=("Leadership Training", "Small Group Leader", "Mentorship Ministry"),
        discipleship_focus="Investing in others through teaching and mentorship",
    ),
})

LITERACY_CONTENT = LiteracyContent(
    buckets=LITERACY_BUCKETS,
    bucket_names=BUCKET_NAMES,
    levels=LEVEL_CONTENT,
)


def literacy_level(percentage: float) -> str:
    """Map an absolute percentage to low / developing / strong."""
    if percentage >= STRONG_THRESHOLD:
        return "strong"
    if percentage >= DEVELOPING_THRESHOLD:
        return "developing"
    return "low"


__all__ = [
    "LITERACY_BUCKETS",
    "BUCKET_NAMES",
    "LiteracyLevelContent",
    "LiteracyContent",
    "LEVEL_CONTENT",
    "LITERACY_CONTENT",
    "literacy_level",
]
