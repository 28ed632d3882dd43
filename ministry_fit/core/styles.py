"""DISC behavioral-style axes and their descriptive content.

STYLE_CATALOG order (D, I, S, C) is the fixed priority used to break ties
between axes with equal normalized scores.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class StyleInfo:
    axis: str
    name: str
    description: str
    strengths: Tuple[str, ...]
    weaknesses: Tuple[str, ...]
    best_environments: Tuple[str, ...]
    worst_environments: Tuple[str, ...]
    communication_style: str
    decision_making: str


STYLE_CATALOG: Tuple[StyleInfo, ...] = (
    StyleInfo(
        axis="D",
        name="Dominance",
        description="You are results-driven, direct, and confident. You take charge and get things done.",
        strengths=("Decisive", "Goal-oriented", "Direct communication", "Problem solver", "Takes initiative"),
        weaknesses=("Can be impatient", "May overlook details", "Can seem insensitive", "May not listen well"),
        best_environments=("Fast-paced", "Challenging", "Results-oriented", "Freedom to lead"),
        worst_environments=("Micromanaged", "Slow-paced", "Highly structured with no autonomy"),
        communication_style="Direct, brief, focused on results",
        decision_making="Quick, decisive, risk-taking",
    ),
    StyleInfo(
        axis="I",
        name="Influence",
        description="You are enthusiastic, optimistic, and people-oriented. You inspire and motivate others.",
        strengths=("Enthusiastic", "Persuasive", "Collaborative", "Creative", "Optimistic"),
        weaknesses=("Can be disorganized", "May over-commit", "Can lack follow-through", "May talk too much"),
        best_environments=("Social", "Collaborative", "Creative freedom", "Recognition"),
        worst_environments=("Isolated", "Highly detailed work", "Rigid structure"),
        communication_style="Enthusiastic, expressive, story-telling",
        decision_making="Collaborative, intuitive, influenced by relationships",
    ),
    StyleInfo(
        axis="S",
        name="Steadiness",
        description="You are patient, reliable, and team-oriented. You bring stability and consistency.",
        strengths=("Patient", "Reliable", "Team player", "Good listener", "Supportive"),
        weaknesses=("Resistant to change", "May avoid conflict", "Can be indecisive", "May not speak up"),
        best_environments=("Stable", "Supportive team", "Clear expectations", "Time to adapt"),
        worst_environments=("Constant change", "Conflict-heavy", "High-pressure deadlines"),
        communication_style="Calm, patient, sincere, supportive",
        decision_making="Deliberate, consensus-seeking, considers others",
    ),
    StyleInfo(
        axis="C",
        name="Conscientiousness",
        description="You are analytical, detail-oriented, and quality-focused. You value accuracy and excellence.",
        strengths=("Accurate", "Analytical", "Quality-focused", "Systematic", "Thorough"),
        weaknesses=("Can be overly critical", "May over-analyze", "Can seem cold", "Perfectionism"),
        best_environments=("Quality-focused", "Clear standards", "Time for analysis", "Expertise valued"),
        worst_environments=("Chaotic", "Constantly changing rules", "Low standards"),
        communication_style="Precise, detailed, data-driven",
        decision_making="Careful analysis, research-based, cautious",
    ),
)

STYLE_AXES: Tuple[str, ...] = tuple(s.axis for s in STYLE_CATALOG)
STYLES_BY_AXIS: Dict[str, StyleInfo] = {s.axis: s for s in STYLE_CATALOG}

# Second-place axis must score strictly above this to be reported as secondary
SECONDARY_STYLE_THRESHOLD = 40

__all__ = ["StyleInfo", "STYLE_CATALOG", "STYLE_AXES", "STYLES_BY_AXIS", "SECONDARY_STYLE_THRESHOLD"]
