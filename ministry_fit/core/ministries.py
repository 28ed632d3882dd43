"""Ministry catalog and the hand-authored matching rules.

MINISTRY_CATALOG order is the declared enumeration order: ties in ministry
ranking keep it. ``restricted_to_sex`` marks a demographic restriction that
removes the ministry from a respondent's matches when violated.

MatchRules bundles the bonus tables. The style bonus magnitudes are tuning
constants carried over unchanged; do not re-derive them.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple


@dataclass(frozen=True)
class MinistryInfo:
    ministry_id: str
    name: str
    category: str
    description: str
    requirements: Tuple[str, ...] = ()
    restricted_to_sex: Optional[str] = None


MINISTRY_CATALOG: Tuple[MinistryInfo, ...] = (
    MinistryInfo("greeters", "Greeters", "First Impressions",
                 "Welcome guests with a warm smile and help them feel at home.",
                 ("Friendly demeanor", "Reliable attendance")),
    MinistryInfo("welcome-table", "Welcome / Guest Table", "First Impressions",
                 "Staff the guest table and connect newcomers to our church.",
                 ("Relational skills", "Knowledge of church ministries")),
    MinistryInfo("landing-team", "The Landing Team", "First Impressions",
                 "Welcome visitors and help them connect with our church family through greeters, "
                 "first impressions, and community care.",
                 ("Warm demeanor", "Follow-up consistency", "Phone/text comfort")),
    MinistryInfo("ushers", "Ushers", "Service Support",
                 "Guide guests, manage seating, and assist during services.",
                 ("Attentive", "Helpful attitude")),
    MinistryInfo("security", "Security", "Service Support",
                 "Ensure the safety of our congregation and facilities.",
                 ("Observant", "Calm under pressure")),
    MinistryInfo("transportation", "Transportation", "Outreach",
                 "Provide rides for those who need them.",
                 ("Valid license", "Reliable vehicle")),
    MinistryInfo("cafe", "Café / Hospitality", "Hospitality",
                 "Serve refreshments and create a welcoming atmosphere.",
                 ("Food handling awareness", "Hospitable")),
    MinistryInfo("facilities", "Facilities / Setup / Cleaning", "Operations",
                 "Maintain and prepare our facilities for worship.",
                 ("Practical skills", "Attention to detail")),
    MinistryInfo("worship", "Worship Team", "Worship Arts",
                 "Lead the congregation in musical worship.",
                 ("Musical ability", "Consistent practice attendance")),
    MinistryInfo("sound", "Sound", "Media / Production",
                 "Operate audio equipment for services and events.",
                 ("Technical aptitude", "Training required")),
    MinistryInfo("lyrics", "Lyrics / ProPresenter", "Media / Production",
                 "Run ProPresenter for worship and announcements.",
                 ("Computer skills", "Attention to timing")),
    MinistryInfo("livestream", "Live Stream / Video", "Media / Production",
                 "Broadcast services online and operate cameras.",
                 ("Technical skills", "Camera experience helpful")),
    MinistryInfo("visual-art", "Visual Art", "Creative Arts",
                 "Create visual expressions of worship.",
                 ("Artistic ability", "Spirit-led creativity")),
    MinistryInfo("graphic-design", "Graphic Design", "Creative Arts",
                 "Design materials for communication and promotion.",
                 ("Design software skills", "Creative eye")),
    MinistryInfo("dance", "Dance", "Creative Arts",
                 "Express worship through movement.",
                 ("Dance training", "Choreography experience")),
    MinistryInfo("drama", "Drama / Spoken Word", "Creative Arts",
                 "Communicate through theatrical performance.",
                 ("Acting ability", "Memorization skills")),
    MinistryInfo("photography", "Photography / Videography", "Creative Arts",
                 "Capture moments and tell stories visually.",
                 ("Camera equipment", "Photography skills")),
    MinistryInfo("teaching", "Teaching / Discipleship", "Discipleship",
                 "Lead Bible studies and discipleship groups.",
                 ("Biblical knowledge", "Communication skills")),
    MinistryInfo("youth", "Youth Ministry", "Next Gen",
                 "Mentor and disciple teenagers.",
                 ("Background check", "Relational skills", "Emotional maturity")),
    MinistryInfo("children", "Children's Ministry", "Next Gen",
                 "Teach and care for children.",
                 ("Background check", "Patience", "Safety awareness")),
    MinistryInfo("nursery", "Nursery", "Next Gen",
                 "Provide loving care for infants and toddlers.",
                 ("Background check", "Nurturing spirit", "Female only"),
                 restricted_to_sex="female"),
    MinistryInfo("young-adults", "Young Adults", "Life Stage",
                 "Connect with and disciple young adults.",
                 ("Relational skills", "Life experience")),
    MinistryInfo("outreach", "Outreach / Evangelism", "Outreach",
                 "Share the Gospel in our community.",
                 ("Evangelistic heart", "Servant attitude")),
    MinistryInfo("prayer-team", "Prayer Team / Intercession", "Prayer",
                 "Pray for the church and individuals.",
                 ("Prayer life", "Sensitivity to the Spirit")),
    MinistryInfo("altar-ministry", "Altar Ministry", "Prayer",
                 "Minister to people at the altar during services.",
                 ("Spiritual maturity", "Discernment")),
    MinistryInfo("griefshare", "GriefShare", "Support Groups",
                 "Support those walking through grief with compassion and presence.",
                 ("Emotional stability", "Confidentiality", "Training completion")),
    MinistryInfo("celebrate-recovery", "Celebrate Recovery", "Support Groups",
                 "Help people find freedom from hurts, habits, and hang-ups through Christ-centered recovery.",
                 ("Vulnerability", "Accountability mindset", "Training completion")),
)

MINISTRY_IDS: Tuple[str, ...] = tuple(m.ministry_id for m in MINISTRY_CATALOG)
MINISTRIES_BY_ID: Dict[str, MinistryInfo] = {m.ministry_id: m for m in MINISTRY_CATALOG}

if len(MINISTRIES_BY_ID) != len(MINISTRY_CATALOG):
    raise ValueError("Duplicate ministry ids in MINISTRY_CATALOG")


# Gift -> ministries it reinforces (gift bonus pass)
GIFT_TO_MINISTRIES: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "hospitality": ("greeters", "welcome-table", "landing-team", "cafe"),
    "service": ("facilities", "cafe", "ushers"),
    "helps": ("facilities", "ushers", "nursery"),
    "leadership": ("security", "ushers", "youth"),
    "teaching": ("teaching", "youth", "children"),
    "pastor-shepherd": ("youth", "young-adults", "children", "griefshare", "celebrate-recovery"),
    "mercy": ("nursery", "children", "outreach", "prayer-team", "griefshare"),
    "compassion": ("outreach", "prayer-team", "altar-ministry", "griefshare", "celebrate-recovery"),
    "evangelist": ("outreach", "greeters", "landing-team"),
    "administration": ("facilities", "sound", "lyrics"),
    "discernment": ("security", "prayer-team", "altar-ministry"),
    "intercession": ("prayer-team", "altar-ministry"),
    "prophecy": ("prayer-team", "altar-ministry"),
    "exhortation": ("celebrate-recovery", "youth", "teaching"),
})

# Primary DISC axis -> flat additive bonuses
STYLE_BONUSES: Mapping[str, Mapping[str, float]] = MappingProxyType({
    "I": MappingProxyType({
        "greeters": 0.4,
        "welcome-table": 0.4,
        "landing-team": 0.4,
        "outreach": 0.3,
        "celebrate-recovery": 0.2,
    }),
    "S": MappingProxyType({
        "nursery": 0.3,
        "children": 0.3,
        "facilities": 0.2,
        "griefshare": 0.3,
    }),
    "C": MappingProxyType({
        "sound": 0.3,
        "lyrics": 0.3,
        "graphic-design": 0.2,
    }),
    "D": MappingProxyType({
        "security": 0.3,
        "ushers": 0.2,
    }),
})

# Fallback "why matched" phrasing when no top gift reinforces the ministry
STYLE_WHY_MATCHED: Mapping[str, Tuple[Tuple[str, ...], str]] = MappingProxyType({
    "I": (("greeters", "welcome-table"),
          "Your outgoing, people-oriented personality makes you a natural fit."),
    "C": (("sound", "lyrics"),
          "Your detail-oriented nature is perfect for technical ministry."),
})


@dataclass(frozen=True)
class MatchRules:
    gift_to_ministries: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: GIFT_TO_MINISTRIES)
    style_bonuses: Mapping[str, Mapping[str, float]] = field(default_factory=lambda: STYLE_BONUSES)
    style_why_matched: Mapping[str, Tuple[Tuple[str, ...], str]] = field(
        default_factory=lambda: STYLE_WHY_MATCHED
    )
    top_gift_count: int = 7
    gift_bonus_weight: float = 0.5
    primary_limit: int = 5
    primary_threshold: float = 0.3
    growth_pathway_threshold: float = 0.5
    skill_verification_ministries: Tuple[str, ...] = ("sound", "worship", "livestream", "dance", "drama")
    next_steps: str = "Complete onboarding and attend orientation."


DEFAULT_MATCH_RULES = MatchRules()


def _validate_rules(rules: MatchRules) -> None:
    known = set(MINISTRY_IDS)
    for gift, ministries in rules.gift_to_ministries.items():
        unknown = set(ministries) - known
        if unknown:
            raise ValueError(f"Gift bonus for {gift} references unknown ministries: {sorted(unknown)}")
    for axis, bonuses in rules.style_bonuses.items():
        unknown = set(bonuses) - known
        if unknown:
            raise ValueError(f"Style bonus for {axis} references unknown ministries: {sorted(unknown)}")


_validate_rules(DEFAULT_MATCH_RULES)

__all__ = [
    "MinistryInfo",
    "MINISTRY_CATALOG",
    "MINISTRY_IDS",
    "MINISTRIES_BY_ID",
    "GIFT_TO_MINISTRIES",
    "STYLE_BONUSES",
    "STYLE_WHY_MATCHED",
    "MatchRules",
    "DEFAULT_MATCH_RULES",
]
