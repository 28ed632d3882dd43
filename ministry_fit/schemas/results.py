from pydantic import BaseModel, Field
from typing import Any, Dict, List, Literal, Optional


class GiftScore(BaseModel):
    gift: str
    name: str
    score: int = Field(..., ge=0, le=100)
    description: str
    biblical_reference: str
    biblical_example: str
    how_you_operate: str
    ministry_fit: List[str]
    team_culture: str


class StyleProfile(BaseModel):
    primary: str
    secondary: Optional[str] = None
    scores: Dict[str, int]
    name: str
    description: str
    strengths: List[str]
    weaknesses: List[str]
    best_team_environments: List[str]
    worst_team_environments: List[str]
    communication_style: str
    decision_making: str


class LiteracyBucketScore(BaseModel):
    bucket: str
    bucket_name: str
    score: float
    max_score: float
    percentage: int = Field(..., ge=0, le=100)


class LiteracyResult(BaseModel):
    level: Literal["low", "developing", "strong"]
    level_name: str
    score: float
    max_score: float
    percentage: int = Field(..., ge=0, le=100)
    total_questions: int
    correct_answers: int
    bucket_scores: List[LiteracyBucketScore]
    description: str
    encouragement: str
    recommendations: List[str]
    next_steps: List[str]
    discipleship_focus: str


class SkillResult(BaseModel):
    category: str
    name: str
    level: Literal["beginner", "growing-learner", "competent", "skilled"]
    score: int = Field(..., ge=0, le=100)
    description: str
    can_serve: bool
    needs_training: bool
    encouragement: str


class SkillProfile(BaseModel):
    sound: SkillResult
    media: SkillResult
    propresenter: SkillResult
    photography: SkillResult
    overall_readiness: str

    @property
    def categories(self) -> List[SkillResult]:
        return [self.sound, self.media, self.propresenter, self.photography]


class MinistryMatch(BaseModel):
    ministry_id: str
    name: str
    category: str
    score: float = Field(..., description="Unbounded raw affinity; comparable only within one respondent")
    description: str
    why_matched: str
    matched_gift_names: List[str]
    strengths_you_bring: List[str]
    team_culture_fit: str
    next_steps: str
    is_primary: bool = False
    requires_skill_verification: bool = False
    growth_pathway: Optional[str] = None


class MinistryExclusion(BaseModel):
    ministry_id: str
    name: str
    reason: str


class RespondentAttributes(BaseModel):
    sex: Optional[Literal["male", "female"]] = None


class AssessmentResult(BaseModel):
    gifts: List[GiftScore]
    style: StyleProfile
    literacy: LiteracyResult
    skills: SkillProfile
    ministries: List[MinistryMatch]
    excluded_ministries: List[MinistryExclusion] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)


class AssessmentSubmission(BaseModel):
    # values stay loose; ingestion turns malformed ones into warnings
    answers: Dict[str, Any]
    sex: Optional[Literal["male", "female"]] = None


class AssessmentReportResponse(BaseModel):
    report: str


class QuestionSummary(BaseModel):
    id: str
    section: int
    kind: str
    text: str


class AssessmentReportRequest(AssessmentSubmission):
    respondent_name: Optional[str] = Field(None, max_length=200)
