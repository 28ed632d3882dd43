from fastapi import APIRouter, HTTPException, Query, Response
from typing import List, Optional
import logging

from ministry_fit.core.question_bank import QUESTION_BANK, Section
from ministry_fit.schemas.results import (
    AssessmentReportRequest,
    AssessmentReportResponse,
    AssessmentResult,
    AssessmentSubmission,
    QuestionSummary,
    RespondentAttributes,
)
from ministry_fit.services.answers import respondent_attributes
from ministry_fit.services.assessment import score_assessment
from ministry_fit.services.assessment_report import compose_report, render_report_pdf

logger = logging.getLogger("app.routes.assessment")

router = APIRouter(prefix="/assessments/ministry-fit", tags=["ministry-fit"])


def _attributes(payload: AssessmentSubmission) -> RespondentAttributes:
    # explicit field wins over the answer kept in the answer map
    if payload.sex is not None:
        return RespondentAttributes(sex=payload.sex)
    return respondent_attributes(payload.answers)


@router.get("/questions", response_model=List[QuestionSummary])
async def list_questions(section: Optional[int] = Query(None, description="Restrict to one survey section")):
    """List the question bank (ids, sections, kinds, texts)."""
    if section is not None and section not in {s.value for s in Section}:
        raise HTTPException(status_code=400, detail=f"Unknown section {section}")
    return [
        QuestionSummary(id=q.id, section=int(q.section), kind=q.kind, text=q.text)
        for q in QUESTION_BANK
        if section is None or q.section == section
    ]


@router.post("/score", response_model=AssessmentResult)
async def score(payload: AssessmentSubmission):
    """Score a submission. Malformed answers are skipped and listed in ``warnings``."""
    result = score_assessment(payload.answers, attributes=_attributes(payload))
    if result.warnings:
        logger.info(f"Scored submission with {len(result.warnings)} warning(s)")
    return result


@router.post("/report", response_model=AssessmentReportResponse)
async def report(payload: AssessmentReportRequest):
    """Score a submission and render the plain-text report."""
    result = score_assessment(payload.answers, attributes=_attributes(payload))
    return AssessmentReportResponse(report=compose_report(result, payload.respondent_name))


@router.post("/report/pdf")
async def report_pdf(payload: AssessmentReportRequest):
    """Score a submission and return the report as a PDF download."""
    result = score_assessment(payload.answers, attributes=_attributes(payload))
    pdf_bytes = render_report_pdf(result, payload.respondent_name)
    # header values must stay ASCII
    safe_name = "".join(
        ch if ch.isascii() and ch.isalnum() else "_"
        for ch in (payload.respondent_name or "participant").strip().lower()
    )
    filename = f"ministry_assessment_{safe_name}.pdf"
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename={filename}",
            "Content-Length": str(len(pdf_bytes)),
        },
    )
