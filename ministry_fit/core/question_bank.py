"""Canonical survey question bank.

Centralizes every question definition with the weight maps the scorers read,
so ingestion, scoring and the question listing endpoint share a single
authoritative source. Weight maps are frozen (MappingProxyType) and the bank
is a tuple; nothing mutates it after import.

``validate_question_bank`` checks integrity (unique ids, weights pointing at
known gifts / axes / ministries, literacy and skill questions well formed).
Importing this module raises if the default bank breaks those invariants.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import IntEnum
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from ministry_fit.core.gifts import GIFT_IDS
from ministry_fit.core.literacy import LITERACY_BUCKETS
from ministry_fit.core.ministries import MINISTRY_IDS
from ministry_fit.core.skills import SKILL_CATEGORIES
from ministry_fit.core.styles import STYLE_AXES


class Section(IntEnum):
    ABOUT_YOU = 0
    SPIRITUAL_GIFTS = 1
    BIBLICAL_LITERACY = 2
    DISC = 3
    MINISTRY_SKILLS = 4
    TECH_SKILLS = 5
    TEAM_FIT = 6
    CHILDREN_YOUTH = 7
    SUPPORT_GROUPS = 8
    AVAILABILITY = 9


LIKERT = "likert"
YES_NO = "yes-no"
MULTIPLE_CHOICE = "multiple-choice"
QUESTION_KINDS = (LIKERT, YES_NO, MULTIPLE_CHOICE)

SEX_QUESTION_ID = "sex"

_EMPTY: Mapping[str, float] = MappingProxyType({})


@dataclass(frozen=True)
class QuestionDefinition:
    id: str
    section: Section
    kind: str
    text: str
    gift_weights: Mapping[str, float] = field(default_factory=lambda: _EMPTY)
    style_weights: Mapping[str, float] = field(default_factory=lambda: _EMPTY)
    ministry_weights: Mapping[str, float] = field(default_factory=lambda: _EMPTY)
    literacy_bucket: Optional[str] = None
    literacy_points: Optional[float] = None
    literacy_correct_answer: Optional[str] = None
    skill_category: Optional[str] = None
    skill_points: Optional[float] = None

    @property
    def is_literacy(self) -> bool:
        return self.section == Section.BIBLICAL_LITERACY and self.literacy_points is not None

    @property
    def is_skill(self) -> bool:
        return (
            self.section == Section.TECH_SKILLS
            and self.skill_category is not None
            and self.skill_points is not None
        )


def _q(qid: str, section: Section, kind: str, text: str,
       gifts: Optional[Dict[str, float]] = None,
       disc: Optional[Dict[str, float]] = None,
       ministries: Optional[Dict[str, float]] = None,
       **extra) -> QuestionDefinition:
    return QuestionDefinition(
        id=qid,
        section=section,
        kind=kind,
        text=text,
        gift_weights=MappingProxyType(dict(gifts or {})),
        style_weights=MappingProxyType(dict(disc or {})),
        ministry_weights=MappingProxyType(dict(ministries or {})),
        **extra,
    )


def _lit(qid: str, bucket: str, text: str, correct: Optional[str] = None, points: float = 1) -> QuestionDefinition:
    kind = MULTIPLE_CHOICE if correct is not None else LIKERT
    return _q(qid, Section.BIBLICAL_LITERACY, kind, text,
              literacy_bucket=bucket, literacy_points=points, literacy_correct_answer=correct)


S = Section

QUESTION_BANK: Tuple[QuestionDefinition, ...] = (
    # About you: demographic filter key, carries no weights
    _q("sex", S.ABOUT_YOU, MULTIPLE_CHOICE, "Please select your sex."),

    # Spiritual gifts
    _q("sg1", S.SPIRITUAL_GIFTS, LIKERT,
       "When praying for others, I often sense specific insight or direction for their situation.",
       gifts={"word-of-knowledge": 1.5, "discernment": 0.5}),
    _q("sg2", S.SPIRITUAL_GIFTS, LIKERT,
       "People regularly seek me out when they need wisdom for difficult decisions.",
       gifts={"word-of-wisdom": 1.5, "exhortation": 0.5}),
    _q("sg3", S.SPIRITUAL_GIFTS, LIKERT,
       "I receive supernatural understanding about situations that I couldn't have known naturally.",
       gifts={"word-of-knowledge": 1.5, "prophecy": 0.5}),
    _q("sg4", S.SPIRITUAL_GIFTS, LIKERT,
       "I believe God can do the impossible even when circumstances seem hopeless.",
       gifts={"faith": 1.5, "miracles": 0.5}),
    _q("sg5", S.SPIRITUAL_GIFTS, LIKERT,
       "I have witnessed God working through me to accomplish things beyond natural explanation.",
       gifts={"miracles": 1.5, "faith": 0.5}),
    _q("sg6", S.SPIRITUAL_GIFTS, LIKERT,
       "I have prayed for people and witnessed noticeable physical or emotional healing.",
       gifts={"healing": 1.5, "faith": 0.3, "compassion": 0.3}),
    _q("sg7", S.SPIRITUAL_GIFTS, LIKERT,
       "I feel a strong burden to pray for the sick and believe God wants to heal.",
       gifts={"healing": 1.2, "intercession": 0.5, "faith": 0.5}),
    _q("sg8", S.SPIRITUAL_GIFTS, LIKERT,
       "I feel prompted to speak or declare things God is showing me to others.",
       gifts={"prophecy": 1.5, "exhortation": 0.5}),
    _q("sg9", S.SPIRITUAL_GIFTS, LIKERT,
       "I often sense spiritual activity or hidden motives behind situations.",
       gifts={"discernment": 1.5, "word-of-knowledge": 0.3}),
    _q("sg10", S.SPIRITUAL_GIFTS, LIKERT,
       "I can usually tell when something is spiritually \"off\" even if I can't explain why.",
       gifts={"discernment": 1.5, "prophecy": 0.3}),
    _q("sg11", S.SPIRITUAL_GIFTS, LIKERT,
       "I regularly pray in tongues as part of my personal prayer life.",
       gifts={"tongues": 1.5, "intercession": 0.5}),
    _q("sg12", S.SPIRITUAL_GIFTS, LIKERT,
       "I have sensed the interpretation when someone speaks in tongues publicly.",
       gifts={"interpretation-of-tongues": 1.5, "prophecy": 0.3}),
    _q("sg13", S.SPIRITUAL_GIFTS, LIKERT,
       "I enjoy explaining Scripture clearly and helping others understand God's Word.",
       gifts={"teaching": 1.5, "teacher": 0.5},
       ministries={"teaching": 1.2}),
    _q("sg14", S.SPIRITUAL_GIFTS, LIKERT,
       "I feel called to encourage, challenge, and build up other believers.",
       gifts={"exhortation": 1.5, "pastor-shepherd": 0.5}),
    _q("sg15", S.SPIRITUAL_GIFTS, LIKERT,
       "When I teach, people say they understand things more clearly.",
       gifts={"teaching": 1.2, "teacher": 1.0, "word-of-wisdom": 0.3},
       ministries={"teaching": 1.0, "youth": 0.5, "children": 0.5}),
    _q("sg16", S.SPIRITUAL_GIFTS, LIKERT,
       "I find great joy in serving behind the scenes without recognition.",
       gifts={"service": 1.5, "helps": 1.0},
       ministries={"facilities": 1.2, "cafe": 0.8}),
    _q("sg17", S.SPIRITUAL_GIFTS, LIKERT,
       "I naturally notice practical needs and want to meet them.",
       gifts={"helps": 1.5, "service": 1.0},
       ministries={"facilities": 1.0, "ushers": 0.8}),
    _q("sg18", S.SPIRITUAL_GIFTS, LIKERT,
       "I feel called to give generously, financially and with my resources, to support Kingdom work.",
       gifts={"giving": 1.5}),
    _q("sg19", S.SPIRITUAL_GIFTS, LIKERT,
       "My heart breaks for those who are hurting, and I'm drawn to comfort them.",
       gifts={"mercy": 1.5, "compassion": 1.0},
       ministries={"prayer-team": 0.8, "altar-ministry": 0.8}),
    _q("sg20", S.SPIRITUAL_GIFTS, LIKERT,
       "I feel deep compassion when I see people suffering or in difficult situations.",
       gifts={"compassion": 1.5, "mercy": 1.0},
       ministries={"outreach": 0.8}),
    _q("sg21", S.SPIRITUAL_GIFTS, LIKERT,
       "I naturally take initiative and guide others toward goals.",
       gifts={"leadership": 1.5, "administration": 0.5}),
    _q("sg22", S.SPIRITUAL_GIFTS, LIKERT,
       "I excel at organizing resources, people, and systems to accomplish goals effectively.",
       gifts={"administration": 1.5, "leadership": 0.5},
       ministries={"facilities": 0.8}),
    _q("sg23", S.SPIRITUAL_GIFTS, LIKERT,
       "I feel bold and passionate about sharing the Gospel with those who don't know Jesus.",
       gifts={"evangelist": 1.5},
       ministries={"outreach": 1.5}),
    _q("sg24", S.SPIRITUAL_GIFTS, LIKERT,
       "I naturally look for opportunities to introduce people to Christ in everyday situations.",
       gifts={"evangelist": 1.2},
       ministries={"outreach": 1.2, "greeters": 0.5}),
    _q("sg25", S.SPIRITUAL_GIFTS, LIKERT,
       "I am drawn to nurturing people over time, walking with them through life's seasons.",
       gifts={"pastor-shepherd": 1.5},
       ministries={"youth": 0.8, "young-adults": 0.8}),
    _q("sg26", S.SPIRITUAL_GIFTS, LIKERT,
       "I care deeply about the spiritual growth and wellbeing of others.",
       gifts={"pastor-shepherd": 1.2, "exhortation": 0.5}),
    _q("sg27", S.SPIRITUAL_GIFTS, LIKERT,
       "I love making people feel welcome and at home.",
       gifts={"hospitality": 1.5},
       ministries={"greeters": 1.5, "welcome-table": 1.5, "cafe": 1.2}),
    _q("sg28", S.SPIRITUAL_GIFTS, LIKERT,
       "I carry a burden to pray for extended periods and intercede for others.",
       gifts={"intercession": 1.5},
       ministries={"prayer-team": 1.5, "altar-ministry": 1.0}),
    _q("sg29", S.SPIRITUAL_GIFTS, LIKERT,
       "Prayer is not just a discipline for me, it feels like a calling.",
       gifts={"intercession": 1.2, "faith": 0.5},
       ministries={"prayer-team": 1.2}),
    _q("sg30", S.SPIRITUAL_GIFTS, LIKERT,
       "I feel called to pioneer new ministries or bring unity among believers.",
       gifts={"apostleship": 1.5, "reconciliation": 0.8, "leadership": 0.5}),

    # Biblical literacy: bible basics
    _lit("bl1", "bible-basics", "How many books are in the Bible?", correct="c"),
    _lit("bl2", "bible-basics", "What are the two main divisions of the Bible?", correct="b"),
    _lit("bl3", "bible-basics", "Who wrote the majority of the New Testament letters (epistles)?", correct="b"),
    _lit("bl4", "bible-basics", "The fruit of the Spirit is described in which book?", correct="b"),
    _lit("bl5", "bible-basics", "Where in Scripture are spiritual gifts primarily listed?", correct="b"),
    # Story & timeline
    _lit("bl6", "story-timeline", "Who led the Israelites out of Egypt?", correct="b"),
    _lit("bl7", "story-timeline", "What event does Acts 2 describe?", correct="c"),
    _lit("bl8", "story-timeline", "Put these in order: David, Abraham, Moses, Jesus", correct="b"),
    _lit("bl9", "story-timeline", "The baptism of the Holy Spirit is described in:", correct="a"),
    _lit("bl10", "story-timeline", "What distinguishes the New Covenant from the Old Covenant?", correct="b"),
    # Jesus & salvation
    _lit("bl11", "jesus-salvation", "How would you best explain salvation through grace?", correct="b"),
    _lit("bl12", "jesus-salvation", "What is the Great Commission?", correct="b"),
    _lit("bl13", "jesus-salvation", "Why did Jesus die on the cross?", correct="b"),
    _lit("bl14", "jesus-salvation", "What does it mean that Jesus is both fully God and fully man?", correct="b"),
    _lit("bl15", "jesus-salvation",
         "According to Scripture, what happens when someone receives the Holy Spirit?", correct="b"),
    # How to read the Bible (Likert graded unless a correct answer is declared)
    _lit("bl16", "how-to-read", "I can navigate the Bible and find specific passages."),
    _lit("bl17", "how-to-read",
         "I regularly read or study the Bible on my own, not just during church services."),
    _lit("bl18", "how-to-read",
         "When reading the Bible, why is it important to consider the context?", correct="b"),
    _lit("bl19", "how-to-read", "I feel confident explaining basic biblical truths to a new believer."),
    _lit("bl20", "how-to-read",
         "What is the difference between reading poetry (like Psalms) and reading narrative (like Acts)?",
         correct="b"),

    # DISC
    _q("disc1", S.DISC, LIKERT, "I prefer to take charge and make decisions quickly.", disc={"D": 1.5}),
    _q("disc2", S.DISC, LIKERT, "I am direct and straightforward in my communication.", disc={"D": 1.2}),
    _q("disc3", S.DISC, LIKERT, "I am results-oriented and focused on achieving goals.", disc={"D": 1.3}),
    _q("disc4", S.DISC, LIKERT, "I prefer to work independently rather than in a team.",
       disc={"D": 0.8, "C": 0.5}),
    _q("disc5", S.DISC, LIKERT, "I enjoy meeting new people and am energized by social interactions.",
       disc={"I": 1.5}, ministries={"greeters": 0.5, "welcome-table": 0.5}),
    _q("disc6", S.DISC, LIKERT, "I am enthusiastic and optimistic, even in challenging situations.",
       disc={"I": 1.3}),
    _q("disc7", S.DISC, LIKERT, "I am good at motivating and inspiring others.", disc={"I": 1.2, "D": 0.3}),
    _q("disc8", S.DISC, LIKERT, "I prefer a fast-paced, exciting environment over a quiet, steady one.",
       disc={"I": 1.0, "D": 0.5}),
    _q("disc9", S.DISC, LIKERT, "I prefer a stable, predictable environment over constant change.",
       disc={"S": 1.5}),
    _q("disc10", S.DISC, LIKERT, "I am patient and willing to listen before responding.",
       disc={"S": 1.3, "C": 0.3}),
    _q("disc11", S.DISC, LIKERT, "I value harmony and avoid conflict when possible.", disc={"S": 1.2}),
    _q("disc12", S.DISC, LIKERT, "I am loyal and dependable; people can count on me.",
       disc={"S": 1.0}, ministries={"nursery": 0.5, "children": 0.5}),
    _q("disc13", S.DISC, LIKERT, "I am detail-oriented and thorough in my work.",
       disc={"C": 1.5}, ministries={"sound": 0.5, "lyrics": 0.5}),
    _q("disc14", S.DISC, LIKERT, "I prefer to analyze information carefully before making decisions.",
       disc={"C": 1.3}),
    _q("disc15", S.DISC, LIKERT, "I value accuracy and quality over speed.", disc={"C": 1.2, "S": 0.3}),
    _q("disc16", S.DISC, LIKERT, "I follow rules and procedures carefully.", disc={"C": 1.0}),

    # Ministry skills
    _q("ms1", S.MINISTRY_SKILLS, LIKERT, "I am comfortable approaching and greeting people I don't know.",
       ministries={"greeters": 1.5, "welcome-table": 1.2, "cafe": 0.8}),
    _q("ms2", S.MINISTRY_SKILLS, LIKERT,
       "I can stay positive and friendly even when I'm having a difficult day.",
       ministries={"greeters": 1.0, "welcome-table": 1.0, "ushers": 0.8}),
    _q("ms3", S.MINISTRY_SKILLS, LIKERT,
       "I am reliable and punctual; people can count on me to show up on time.",
       ministries={"ushers": 1.0, "security": 1.0, "sound": 1.2, "worship": 1.2}),
    _q("ms4", S.MINISTRY_SKILLS, LIKERT, "I can organize my thoughts and create a simple lesson outline.",
       ministries={"teaching": 1.5, "youth": 0.8, "children": 0.8}),
    _q("ms5", S.MINISTRY_SKILLS, LIKERT, "I communicate clearly and others understand my explanations.",
       ministries={"teaching": 1.2, "youth": 0.5, "young-adults": 0.5}),
    _q("ms6", S.MINISTRY_SKILLS, LIKERT, "I have patience when working with children and enjoy their energy.",
       ministries={"children": 1.5, "nursery": 1.2}),
    _q("ms7", S.MINISTRY_SKILLS, LIKERT,
       "I can maintain emotional regulation even in stressful situations with kids.",
       ministries={"children": 1.0, "nursery": 1.2, "youth": 0.8}),
    _q("ms8", S.MINISTRY_SKILLS, LIKERT,
       "I have experience working with children or youth (babysitting, teaching, coaching, etc.).",
       ministries={"children": 1.5, "nursery": 1.5, "youth": 1.2}),
    _q("ms9", S.MINISTRY_SKILLS, YES_NO,
       "Do you have training or experience in any performing arts (dance, drama, spoken word)?",
       ministries={"dance": 2.0, "drama": 2.0}),
    _q("ms10", S.MINISTRY_SKILLS, YES_NO, "Do you have experience with graphic design or visual art?",
       ministries={"graphic-design": 2.0, "visual-art": 2.0}),
    _q("ms11", S.MINISTRY_SKILLS, YES_NO, "Can you sing or play an instrument?",
       ministries={"worship": 2.0}),
    _q("ms12", S.MINISTRY_SKILLS, LIKERT, "I am comfortable performing in front of an audience.",
       ministries={"worship": 0.8, "drama": 0.8, "dance": 0.8, "teaching": 0.5}),

    # Sound & media tech
    _q("st0", S.TECH_SKILLS, YES_NO, "Are you able to run sound?",
       skill_category="sound", skill_points=0),
    _q("st1", S.TECH_SKILLS, MULTIPLE_CHOICE, "What is the difference between gain and volume?",
       skill_category="sound", skill_points=1, literacy_correct_answer="b"),
    _q("st2", S.TECH_SKILLS, MULTIPLE_CHOICE, "What does a high-pass filter do?",
       skill_category="sound", skill_points=1, literacy_correct_answer="b"),
    _q("st3", S.TECH_SKILLS, MULTIPLE_CHOICE, "What is gain staging?",
       skill_category="sound", skill_points=1, literacy_correct_answer="b"),
    _q("st4", S.TECH_SKILLS, MULTIPLE_CHOICE, "What type of microphone is typically used for live vocals?",
       skill_category="sound", skill_points=1, literacy_correct_answer="b"),
    _q("st5", S.TECH_SKILLS, MULTIPLE_CHOICE,
       "If there is feedback during a service, what is the FIRST thing you should do?",
       skill_category="sound", skill_points=1, literacy_correct_answer="b"),
    _q("st6", S.TECH_SKILLS, LIKERT, "I have experience running a soundboard (analog or digital).",
       skill_category="sound", skill_points=1),
    _q("st7", S.TECH_SKILLS, LIKERT,
       "I am comfortable troubleshooting when there is no sound coming from a microphone.",
       skill_category="sound", skill_points=0.5),
    _q("st8", S.TECH_SKILLS, YES_NO, "Have you used ProPresenter or similar presentation software?",
       ministries={"lyrics": 2.0}, skill_category="propresenter", skill_points=1),
    _q("st9", S.TECH_SKILLS, LIKERT, "I am comfortable operating a computer during a live service.",
       ministries={"lyrics": 1.0, "livestream": 0.8}, skill_category="propresenter", skill_points=0.5),
    _q("st10", S.TECH_SKILLS, YES_NO, "Do you have experience with photography or videography?",
       ministries={"photography": 2.0, "livestream": 1.0}, skill_category="photography", skill_points=1),
    _q("st11", S.TECH_SKILLS, LIKERT, "I understand concepts like framing, exposure, and white balance.",
       skill_category="photography", skill_points=0.5),
    _q("st12", S.TECH_SKILLS, LIKERT, "I have experience operating cameras or live switching equipment.",
       ministries={"livestream": 1.5}, skill_category="media", skill_points=1),

    # Team fit & preferences (descriptive only)
    _q("tf1", S.TEAM_FIT, MULTIPLE_CHOICE, "What pace of environment do you prefer?"),
    _q("tf2", S.TEAM_FIT, MULTIPLE_CHOICE, "How do you prefer to receive direction?"),
    _q("tf3", S.TEAM_FIT, MULTIPLE_CHOICE, "What type of team dynamic suits you best?"),
    _q("tf4", S.TEAM_FIT, LIKERT, "I prefer working with people more than working on tasks alone."),
    _q("tf5", S.TEAM_FIT, LIKERT, "I am comfortable with last-minute changes and adapting on the fly."),
    _q("tf6", S.TEAM_FIT, LIKERT, "I prefer behind-the-scenes roles rather than being in front of people."),
    _q("tf7", S.TEAM_FIT, LIKERT, "I am comfortable receiving feedback and correction."),
    _q("tf8", S.TEAM_FIT, LIKERT, "I enjoy learning new skills and growing in my abilities."),

    # Children & youth screening (descriptive only; cy2-cy15 follow a "yes" on cy1)
    _q("cy1", S.CHILDREN_YOUTH, YES_NO,
       "Are you interested in serving with children (ages 0-12) or youth (ages 13-18)?"),
    _q("cy2", S.CHILDREN_YOUTH, LIKERT, "I feel comfortable and at ease when working with children."),
    _q("cy3", S.CHILDREN_YOUTH, LIKERT, "I have patience when children are energetic, loud, or challenging."),
    _q("cy4", S.CHILDREN_YOUTH, LIKERT,
       "I can maintain calm and emotional regulation even in stressful situations."),
    _q("cy5", S.CHILDREN_YOUTH, YES_NO,
       "I am comfortable following safety protocols and procedures for child protection."),
    _q("cy6", S.CHILDREN_YOUTH, YES_NO, "I can pass a background check (CORI/DSS) without any concerns."),
    _q("cy7", S.CHILDREN_YOUTH, LIKERT,
       "I have experience caring for children (babysitting, teaching, parenting, etc.)."),
    _q("cy8", S.CHILDREN_YOUTH, YES_NO, "I am physically able to lift, carry, or assist children when needed."),
    _q("cy9", S.CHILDREN_YOUTH, LIKERT, "I am comfortable working under the direction of a ministry leader."),
    _q("cy10", S.CHILDREN_YOUTH, LIKERT, "I feel comfortable relating to and mentoring teenagers."),
    _q("cy11", S.CHILDREN_YOUTH, LIKERT, "I can handle sensitive conversations with appropriate boundaries."),
    _q("cy12", S.CHILDREN_YOUTH, LIKERT, "I am emotionally mature and can model healthy Christian behavior."),
    _q("cy13", S.CHILDREN_YOUTH, LIKERT,
       "I understand the importance of appropriate digital boundaries with minors."),
    _q("cy14", S.CHILDREN_YOUTH, LIKERT, "I am reliable and can be counted on to show up consistently."),
    _q("cy15", S.CHILDREN_YOUTH, LIKERT,
       "I can remain calm and level-headed rather than reacting impulsively."),

    # Support group ministry
    _q("sg_intro", S.SUPPORT_GROUPS, YES_NO,
       "Are you interested in support group ministries (GriefShare, Celebrate Recovery, or The Landing Team)?"),
    _q("gs1", S.SUPPORT_GROUPS, LIKERT,
       "I am comfortable being present with people who are grieving or in pain.",
       ministries={"griefshare": 1.5}),
    _q("gs2", S.SUPPORT_GROUPS, LIKERT, "I can listen without trying to fix or offer unsolicited advice.",
       ministries={"griefshare": 1.2}),
    _q("gs3", S.SUPPORT_GROUPS, LIKERT, "I maintain strict confidentiality about what others share.",
       ministries={"griefshare": 1.5, "celebrate-recovery": 1.5}),
    _q("cr1", S.SUPPORT_GROUPS, LIKERT,
       "I am comfortable with vulnerability and transparency about my own struggles.",
       ministries={"celebrate-recovery": 1.5}),
    _q("cr2", S.SUPPORT_GROUPS, LIKERT, "I understand the importance of accountability in recovery.",
       ministries={"celebrate-recovery": 1.2}),
    _q("cr3", S.SUPPORT_GROUPS, LIKERT, "I can support others without trying to control their journey.",
       ministries={"celebrate-recovery": 1.0}),
    _q("lt1", S.SUPPORT_GROUPS, LIKERT, "I enjoy welcoming new people and making them feel at home.",
       ministries={"landing-team": 1.5, "greeters": 1.0, "welcome-table": 1.0}),
    _q("lt2", S.SUPPORT_GROUPS, LIKERT, "I am comfortable reaching out to people via phone, text, or email.",
       ministries={"landing-team": 1.2}),
    _q("lt3", S.SUPPORT_GROUPS, LIKERT, "I am detail-oriented and can follow up consistently with people.",
       ministries={"landing-team": 1.0}),
    _q("lt4", S.SUPPORT_GROUPS, LIKERT, "I maintain a warm and joyful demeanor even when busy.",
       ministries={"landing-team": 0.8, "greeters": 0.8}),
    _q("sg_maturity", S.SUPPORT_GROUPS, LIKERT,
       "I consider myself spiritually mature and able to handle difficult conversations.",
       ministries={"griefshare": 0.8, "celebrate-recovery": 0.8}),

    # Availability (descriptive only)
    _q("av1", S.AVAILABILITY, MULTIPLE_CHOICE, "How often are you able to serve?"),
    _q("av2", S.AVAILABILITY, MULTIPLE_CHOICE, "Which service time(s) can you serve?"),
    _q("av3", S.AVAILABILITY, YES_NO, "Are you willing to attend training sessions to develop your skills?"),
    _q("av4", S.AVAILABILITY, YES_NO, "Are you currently serving in any ministry?"),
    _q("av5", S.AVAILABILITY, LIKERT,
       "I have the time and capacity to commit to regular ministry involvement."),
)

del S


def validate_question_bank(
    bank: Iterable[QuestionDefinition],
    gift_ids: Iterable[str] = GIFT_IDS,
    style_axes: Iterable[str] = STYLE_AXES,
    ministry_ids: Iterable[str] = MINISTRY_IDS,
    literacy_buckets: Iterable[str] = LITERACY_BUCKETS,
    skill_categories: Iterable[str] = SKILL_CATEGORIES,
) -> List[str]:
    """Return list of integrity error messages (empty if valid)."""
    gifts, axes, ministries = set(gift_ids), set(style_axes), set(ministry_ids)
    buckets, categories = set(literacy_buckets), set(skill_categories)
    errors: List[str] = []
    seen: set = set()
    for q in bank:
        if q.id in seen:
            errors.append(f"Duplicate question id: {q.id}")
        seen.add(q.id)
        if q.kind not in QUESTION_KINDS:
            errors.append(f"{q.id}: unknown kind {q.kind!r}")
        for label, weights, known in (
            ("gift", q.gift_weights, gifts),
            ("style", q.style_weights, axes),
            ("ministry", q.ministry_weights, ministries),
        ):
            unknown = sorted(set(weights) - known)
            if unknown:
                errors.append(f"{q.id}: unknown {label} keys {', '.join(unknown)}")
        if q.literacy_bucket is not None and q.literacy_bucket not in buckets:
            errors.append(f"{q.id}: literacy bucket {q.literacy_bucket!r} not in {sorted(buckets)}")
        if q.skill_category is not None and q.skill_category not in categories:
            errors.append(f"{q.id}: skill category {q.skill_category!r} not in {sorted(categories)}")
        if q.literacy_correct_answer is not None and q.kind != MULTIPLE_CHOICE:
            errors.append(f"{q.id}: graded answer declared on a {q.kind} question")
    return errors


_errors = validate_question_bank(QUESTION_BANK)
if _errors:
    raise ValueError("; ".join(_errors))
del _errors

QUESTIONS_BY_ID: Dict[str, QuestionDefinition] = {q.id: q for q in QUESTION_BANK}

__all__ = [
    "Section",
    "LIKERT",
    "YES_NO",
    "MULTIPLE_CHOICE",
    "QUESTION_KINDS",
    "SEX_QUESTION_ID",
    "QuestionDefinition",
    "QUESTION_BANK",
    "QUESTIONS_BY_ID",
    "validate_question_bank",
]
