"""Ministry assessment report rendering.

Renders an ``AssessmentResult`` as a readable summary, either plain text
(email body, API response) or a letter-size PDF download. Section order:
gifts, DISC, literacy, technical skills, ministry recommendations.
"""
from __future__ import annotations
from datetime import datetime, timezone
from typing import List, Optional
import io
import logging
import textwrap

from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas  # type: ignore

from ministry_fit.schemas.results import AssessmentResult

logger = logging.getLogger("app.assessment_report")

REPORT_TITLE = "Ministry Assessment Results"
TOP_GIFT_COUNT = 5
ALSO_CONSIDER_LIMIT = 6
ALSO_CONSIDER_MIN_SCORE = 0.5

PDF_FONT = "Helvetica"
PDF_FONT_BOLD = "Helvetica-Bold"
PDF_LEADING = 14
PDF_BOTTOM_MARGIN = 60
PDF_WRAP_WIDTH = 95


def _gift_lines(result: AssessmentResult) -> List[str]:
    lines = ["Your Spiritual Gifts:"]
    for idx, gift in enumerate(result.gifts[:TOP_GIFT_COUNT]):
        label = " (Primary Gift)" if idx == 0 else ""
        lines.append(f"  {idx + 1}. {gift.name}{label} - {gift.score}%")
        lines.append(f"     {gift.description}")
        lines.append(f"     Scripture: {gift.biblical_reference}")
    return lines


def _style_lines(result: AssessmentResult) -> List[str]:
    style = result.style
    lines = ["DISC Personality Profile:", f"  Primary Type: {style.primary} ({style.name})"]
    if style.secondary:
        lines.append(f"  Secondary Type: {style.secondary}")
    lines.append("  Scores: " + " | ".join(f"{axis}-{score}%" for axis, score in style.scores.items()))
    lines.append(f"  {style.description}")
    if style.strengths:
        lines.append(f"  Strengths: {', '.join(style.strengths)}")
    return lines


def _literacy_lines(result: AssessmentResult) -> List[str]:
    lit = result.literacy
    lines = [
        "Biblical Literacy:",
        f"  Level: {lit.level_name} ({lit.level})",
        f"  Score: {lit.correct_answers} / {lit.total_questions} correct ({lit.percentage}%)",
    ]
    for bucket in lit.bucket_scores:
        lines.append(f"  - {bucket.bucket_name}: {bucket.percentage}%")
    lines.append(f"  {lit.description}")
    if lit.recommendations:
        lines.append("  Recommendations:")
        lines.extend(f"    * {rec}" for rec in lit.recommendations)
    return lines


def _skill_lines(result: AssessmentResult) -> List[str]:
    lines = ["Technical Skills Assessment:"]
    for skill in result.skills.categories:
        if skill.can_serve:
            status = "Ready to Serve"
        elif skill.needs_training:
            status = "Training Available"
        else:
            status = "Developing"
        lines.append(f"  {skill.name}: {skill.level} ({status})")
    lines.append(f"  {result.skills.overall_readiness}")
    return lines


def _ministry_lines(result: AssessmentResult) -> List[str]:
    primary = [m for m in result.ministries if m.is_primary]
    others = [
        m for m in result.ministries
        if not m.is_primary and m.score > ALSO_CONSIDER_MIN_SCORE
    ][:ALSO_CONSIDER_LIMIT]
    lines: List[str] = []
    if primary:
        lines.append("Top Matches:")
        for idx, match in enumerate(primary):
            best = " * Best Match" if idx == 0 else ""
            lines.append(f"  {match.name} ({match.category}){best}")
            lines.append(f"     Why matched: {match.why_matched}")
            if match.growth_pathway:
                lines.append(f"     Growth pathway: {match.growth_pathway}")
    if others:
        if lines:
            lines.append("")
        lines.append("You May Also Consider:")
        lines.extend(f"  - {m.name} ({m.category})" for m in others)
    if not lines:
        lines.append("Ministry Recommendations: none yet, answer more questions to receive matches.")
    return lines


def _report_lines(
    result: AssessmentResult,
    respondent_name: Optional[str],
    generated_at: Optional[datetime],
) -> List[str]:
    stamp = (generated_at or datetime.now(timezone.utc)).isoformat()
    lines = [
        REPORT_TITLE,
        f"Participant: {respondent_name or 'Participant'}",
        f"Generated: {stamp}",
        "",
    ]
    for section in (_gift_lines, _style_lines, _literacy_lines, _skill_lines, _ministry_lines):
        lines.extend(section(result))
        lines.append("")
    if result.excluded_ministries:
        lines.append("Not eligible:")
        lines.extend(f"  - {e.name}: {e.reason}" for e in result.excluded_ministries)
        lines.append("")
    return lines


def compose_report(
    result: AssessmentResult,
    respondent_name: Optional[str] = None,
    generated_at: Optional[datetime] = None,
) -> str:
    lines = _report_lines(result, respondent_name, generated_at)
    logger.debug(f"Composed report with {len(lines)} lines")
    return "\n".join(lines).rstrip() + "\n"


def render_report_pdf(
    result: AssessmentResult,
    respondent_name: Optional[str] = None,
    generated_at: Optional[datetime] = None,
) -> bytes:
    """Render the same sections as ``compose_report`` onto letter pages.

    Section headers (unindented lines ending in a colon) are drawn bold;
    long lines wrap and pages break at the bottom margin.
    """
    lines = _report_lines(result, respondent_name, generated_at)
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    width, height = letter
    wrapper = textwrap.TextWrapper(width=PDF_WRAP_WIDTH, subsequent_indent="     ")
    page_num = 1
    y = height - 50

    def draw_footer():
        c.setFont(PDF_FONT, 8)
        c.drawString(40, 30, f"{REPORT_TITLE} - page {page_num}")

    def new_page():
        nonlocal page_num, y
        draw_footer()
        c.showPage()
        page_num += 1
        y = height - 50

    c.setFont(PDF_FONT_BOLD, 16)
    c.drawString(40, y, lines[0])
    y -= 26
    for line in lines[1:]:
        if not line.strip():
            y -= PDF_LEADING // 2
            continue
        is_header = not line.startswith(" ") and line.endswith(":")
        font, size = (PDF_FONT_BOLD, 12) if is_header else (PDF_FONT, 10)
        # leading indentation of the first wrapped segment is kept
        for part in wrapper.wrap(line):
            if y < PDF_BOTTOM_MARGIN:
                new_page()
            c.setFont(font, size)
            c.drawString(40, y, part)
            y -= PDF_LEADING
    draw_footer()
    c.showPage()
    c.save()
    buf.seek(0)
    pdf = buf.read()
    logger.debug(f"Rendered report PDF: {page_num} page(s), {len(pdf)} bytes")
    return pdf


__all__ = ["compose_report", "render_report_pdf"]
