"""Spiritual gift catalog.

GIFT_CATALOG is the declared enumeration order for gifts: scoring output ties
keep this order. Descriptive fields are static content attached to GiftScore
records and never influence scoring.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class GiftInfo:
    gift_id: str
    name: str
    description: str
    biblical_reference: str
    biblical_example: str
    how_you_operate: str
    ministry_fit: Tuple[str, ...]
    team_culture: str


GIFT_CATALOG: Tuple[GiftInfo, ...] = (
    # 1 Corinthians 12 manifestation gifts
    GiftInfo(
        "word-of-wisdom", "Word of Wisdom",
        "You receive supernatural insight for applying knowledge to specific situations.",
        "1 Corinthians 12:8",
        "Solomon judging between two mothers (1 Kings 3:16-28)",
        "You often sense the right course of action in complex situations.",
        ("Teaching", "Counseling", "Leadership"),
        "Strategic thinkers, decision-makers",
    ),
    GiftInfo(
        "word-of-knowledge", "Word of Knowledge",
        "You receive supernatural revelation about facts or circumstances unknown naturally.",
        "1 Corinthians 12:8",
        "Jesus knowing the Samaritan woman's past (John 4:17-18)",
        "You sense specific details about people or situations during prayer.",
        ("Prayer Team", "Altar Ministry", "Prophetic Ministry"),
        "Spirit-led, prayer-focused teams",
    ),
    GiftInfo(
        "faith", "Faith",
        "You have extraordinary confidence in God's power and promises beyond ordinary belief.",
        "1 Corinthians 12:9",
        "Abraham believing God for a son in old age (Romans 4:18-21)",
        "You trust God for the impossible and inspire others to believe.",
        ("Prayer Team", "Outreach", "Leadership"),
        "Vision-driven, faith-filled teams",
    ),
    GiftInfo(
        "healing", "Gifts of Healing",
        "You are used by God to restore health to the sick and afflicted.",
        "1 Corinthians 12:9",
        "Peter healing the lame man (Acts 3:1-10)",
        "You feel compelled to pray for the sick and see God heal.",
        ("Prayer Team", "Altar Ministry", "Hospital Visitation"),
        "Compassionate, Spirit-led teams",
    ),
    GiftInfo(
        "miracles", "Working of Miracles",
        "You are used by God to perform supernatural acts that alter the natural order.",
        "1 Corinthians 12:10",
        "Elijah calling down fire from heaven (1 Kings 18:38)",
        "You see God work through you in extraordinary ways.",
        ("Prayer Team", "Evangelism", "Missions"),
        "Bold, faith-filled teams",
    ),
    GiftInfo(
        "prophecy", "Prophecy",
        "You receive and communicate divine messages for edification, exhortation, and comfort.",
        "1 Corinthians 12:10; 14:3",
        "Agabus prophesying famine (Acts 11:28)",
        "You sense what God is saying and feel compelled to speak it.",
        ("Prayer Team", "Altar Ministry", "Worship"),
        "Spirit-sensitive, encouraging teams",
    ),
    GiftInfo(
        "discernment", "Discerning of Spirits",
        "You can distinguish between divine, human, and demonic influences.",
        "1 Corinthians 12:10",
        "Paul discerning the spirit in the slave girl (Acts 16:16-18)",
        "You sense spiritual dynamics that others miss.",
        ("Prayer Team", "Leadership", "Security"),
        "Protective, watchful teams",
    ),
    GiftInfo(
        "tongues", "Speaking in Tongues",
        "You speak in languages you have not learned, for prayer or public edification.",
        "1 Corinthians 12:10",
        "The disciples at Pentecost (Acts 2:4)",
        "You pray in the Spirit and sometimes speak publicly with interpretation.",
        ("Prayer Team", "Intercessory Prayer"),
        "Spirit-filled, prayer-focused teams",
    ),
    GiftInfo(
        "interpretation-of-tongues", "Interpretation of Tongues",
        "You understand and communicate the meaning of messages spoken in tongues.",
        "1 Corinthians 12:10",
        "The gift operating in Corinthian churches (1 Corinthians 14:27-28)",
        "You sense the meaning when someone speaks in tongues publicly.",
        ("Prayer Team", "Worship"),
        "Spirit-sensitive teams",
    ),
    # Romans 12 motivational gifts
    GiftInfo(
        "service", "Service",
        "You identify and meet practical needs with joy and faithfulness.",
        "Romans 12:7",
        "The seven deacons serving tables (Acts 6:1-6)",
        "You find fulfillment in helping others succeed.",
        ("Facilities", "Hospitality", "Setup/Cleanup"),
        "Hands-on, behind-the-scenes teams",
    ),
    GiftInfo(
        "teaching", "Teaching",
        "You explain God's Word with clarity, making truth understandable and applicable.",
        "Romans 12:7",
        "Apollos explaining the Scriptures (Acts 18:24-28)",
        "You communicate complex truths in accessible ways.",
        ("Teaching", "Discipleship", "Small Groups"),
        "Learning-focused, systematic teams",
    ),
    GiftInfo(
        "exhortation", "Exhortation",
        "You encourage, challenge, and motivate others toward godly living.",
        "Romans 12:8",
        "Barnabas encouraging the early church (Acts 11:23)",
        "You inspire people to take action and grow spiritually.",
        ("Discipleship", "Youth", "Counseling"),
        "Encouraging, growth-oriented teams",
    ),
    GiftInfo(
        "giving", "Giving",
        "You joyfully contribute resources to advance God's Kingdom.",
        "Romans 12:8",
        "The Macedonian churches giving generously (2 Corinthians 8:1-5)",
        "You find joy in funding ministry and meeting financial needs.",
        ("Benevolence", "Missions Support"),
        "Generous, resourceful teams",
    ),
    GiftInfo(
        "leadership", "Leadership",
        "You cast vision, set direction, and guide others toward goals.",
        "Romans 12:8",
        "Nehemiah leading the wall rebuilding (Nehemiah 2-6)",
        "You take initiative and others follow your direction.",
        ("Leadership", "Team Leadership"),
        "Vision-driven, goal-oriented teams",
    ),
    GiftInfo(
        "mercy", "Mercy",
        "You feel deep compassion and actively comfort those who suffer.",
        "Romans 12:8",
        "The Good Samaritan (Luke 10:33-35)",
        "You are drawn to hurting people and bring comfort.",
        ("Prayer Team", "Hospital Visitation", "Outreach"),
        "Compassionate, caring teams",
    ),
    # Ephesians 4:11 ministry offices
    GiftInfo(
        "apostleship", "Apostleship",
        "You pioneer new works, plant churches, and provide oversight to multiple ministries.",
        "Ephesians 4:11; 1 Corinthians 12:28",
        "Paul planting churches throughout the Roman Empire",
        "You start new initiatives and establish foundational work.",
        ("Church Planting", "Missions", "Leadership"),
        "Pioneering, entrepreneurial teams",
    ),
    GiftInfo(
        "prophet", "Prophet",
        "You speak forth God's message to the church and world with authority.",
        "Ephesians 4:11",
        "John the Baptist calling people to repentance (Matthew 3:1-12)",
        "You proclaim truth boldly and call people to righteousness.",
        ("Prayer Team", "Teaching", "Leadership"),
        "Truth-focused, courageous teams",
    ),
    GiftInfo(
        "evangelist", "Evangelist",
        "You effectively communicate the Gospel and lead people to Christ.",
        "Ephesians 4:11",
        "Philip preaching in Samaria (Acts 8:4-8)",
        "You naturally share your faith and see people saved.",
        ("Outreach", "First Impressions", "Evangelism"),
        "Outward-focused, missional teams",
    ),
    GiftInfo(
        "pastor-shepherd", "Pastor/Shepherd",
        "You nurture, protect, and guide people in their spiritual growth.",
        "Ephesians 4:11",
        "Jesus as the Good Shepherd (John 10:11-14)",
        "You care for people long-term and help them grow.",
        ("Discipleship", "Small Groups", "Youth", "Young Adults"),
        "Nurturing, relational teams",
    ),
    GiftInfo(
        "teacher", "Teacher (Office)",
        "You systematically explain Scripture and doctrine with authority.",
        "Ephesians 4:11",
        "Apollos teaching accurately about Jesus (Acts 18:25)",
        "You build curriculum and teach with depth and clarity.",
        ("Teaching", "Discipleship", "Leadership Development"),
        "Academic, systematic teams",
    ),
    # Additional New Testament gifts
    GiftInfo(
        "administration", "Administration",
        "You organize resources and coordinate people to accomplish ministry goals.",
        "1 Corinthians 12:28",
        "The organizing of food distribution (Acts 6:1-4)",
        "You bring order, systems, and efficiency to ministry.",
        ("Operations", "Event Planning", "Team Coordination"),
        "Organized, detail-oriented teams",
    ),
    GiftInfo(
        "helps", "Helps",
        "You assist others and free them to focus on their primary ministry.",
        "1 Corinthians 12:28",
        "Phoebe serving the church (Romans 16:1-2)",
        "You support leaders and meet practical needs.",
        ("Facilities", "Ushers", "Setup"),
        "Supportive, behind-the-scenes teams",
    ),
    GiftInfo(
        "hospitality", "Hospitality",
        "You create welcoming environments where people feel valued and at home.",
        "Romans 12:13; 1 Peter 4:9",
        "Lydia welcoming Paul (Acts 16:14-15)",
        "You make strangers feel like family.",
        ("First Impressions", "Hospitality", "Small Groups"),
        "Warm, welcoming teams",
    ),
    GiftInfo(
        "intercession", "Intercession",
        "You pray intensely and persistently for others and the church.",
        "Romans 8:26-27; James 5:16",
        "Epaphras wrestling in prayer (Colossians 4:12)",
        "You carry burdens in prayer for extended periods.",
        ("Prayer Team", "Altar Ministry"),
        "Prayer-focused, persistent teams",
    ),
    GiftInfo(
        "reconciliation", "Reconciliation",
        "You bring unity and resolve conflicts between people.",
        "2 Corinthians 5:18-19",
        "Paul reconciling Onesimus and Philemon (Philemon)",
        "You bridge divides and restore relationships.",
        ("Mediation", "Counseling", "Leadership"),
        "Peace-making, unified teams",
    ),
    GiftInfo(
        "compassion", "Compassion",
        "You feel deeply for the suffering and take action to help.",
        "Matthew 9:36; Colossians 3:12",
        "Jesus moved with compassion healing the sick (Matthew 14:14)",
        "You are moved to action when you see need.",
        ("Outreach", "Benevolence", "Hospital Visitation"),
        "Action-oriented, caring teams",
    ),
)

GIFT_IDS: Tuple[str, ...] = tuple(g.gift_id for g in GIFT_CATALOG)
GIFTS_BY_ID: Dict[str, GiftInfo] = {g.gift_id: g for g in GIFT_CATALOG}

if len(GIFTS_BY_ID) != len(GIFT_CATALOG):
    raise ValueError("Duplicate gift ids in GIFT_CATALOG")

__all__ = ["GiftInfo", "GIFT_CATALOG", "GIFT_IDS", "GIFTS_BY_ID"]
