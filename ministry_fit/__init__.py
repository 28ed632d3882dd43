"""
Ministry Fit scoring engine.

Turns one respondent's survey answers into a spiritual-gift profile, a DISC
behavioral-style profile, a biblical-literacy score, technical-skill
readiness and a ranked list of ministry recommendations.

Usage:
    from ministry_fit import score_assessment

    result = score_assessment({"sg27": 5, "disc5": 4, "bl1": "c", "sex": "female"})
    result.gifts[0].name        # strongest gift
    result.style.primary        # "D", "I", "S" or "C"
    result.ministries[0].name   # best-fitting ministry

The individual scorers live in ``ministry_fit.services`` and accept their
lookup tables as parameters, so alternative question banks or catalogs can be
scored without touching module state.
"""
from ministry_fit.services.answers import ingest_answers, validate_answers
from ministry_fit.services.assessment import score_assessment
from ministry_fit.services.assessment_report import compose_report, render_report_pdf

__version__ = "1.0.0"

__all__ = [
    "score_assessment",
    "compose_report",
    "render_report_pdf",
    "ingest_answers",
    "validate_answers",
]
