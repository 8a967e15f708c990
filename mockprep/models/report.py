"""
Report models for MockPrep

Defines the end-of-interview summary, the persisted interview record,
and the analytics dashboard payload.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from mockprep.models.evaluation import AnswerAnalysis


class ScoreBadge(str, Enum):
    """Result badge shown next to an overall score."""

    EXCELLENT = "Excellent"
    GOOD = "Good"
    NEEDS_IMPROVEMENT = "Needs Improvement"

    @classmethod
    def for_score(cls, score: float) -> "ScoreBadge":
        if score >= 80:
            return cls.EXCELLENT
        elif score >= 60:
            return cls.GOOD
        return cls.NEEDS_IMPROVEMENT


class InterviewSummary(BaseModel):
    """Aggregate feedback computed once at interview completion."""

    overall_feedback: str
    key_strengths: list[str] = Field(default_factory=list)
    critical_improvements: list[str] = Field(default_factory=list)
    readiness_score: int = Field(..., ge=0, le=100)
    next_steps: list[str] = Field(default_factory=list)

    # Present on both the AI and the fallback path
    reality_check: str | None = None
    industry_comparison: str | None = None


class RecordedQuestion(BaseModel):
    """A question as stored in an interview record."""

    question: str
    category: str = "General"
    difficulty: str | None = None
    question_type: str = "main"


class InterviewRecord(BaseModel):
    """
    Persisted record of a finished interview.

    Only the role, difficulty and completion time are required so that
    simplified and older records still load.
    """

    session_id: str | None = None
    job_role: str
    difficulty: str
    questions: list[RecordedQuestion] = Field(default_factory=list)
    answers: list[str] = Field(default_factory=list)
    analyses: list[AnswerAnalysis] = Field(default_factory=list)
    time_elapsed: int = Field(default=0, ge=0, description="Seconds")
    completed_at: datetime
    overall_score: int | None = None
    interview_summary: InterviewSummary | None = None

    def completion_score(self) -> int:
        """
        Score derived only from answer length and completion.

        Used for records that carry no overall score.
        """
        if not self.answers:
            return 0
        avg_answer_length = sum(len(a) for a in self.answers) / len(self.answers)
        completion_bonus = 20 if len(self.answers) == len(self.questions) else 0
        length_score = min(avg_answer_length / 10, 60)
        return int(length_score + completion_bonus + 0.5)

    @property
    def effective_score(self) -> int:
        if self.overall_score is not None:
            return self.overall_score
        return self.completion_score()


class PerformancePoint(BaseModel):
    """One interview on the performance chart."""

    interview: int
    date: str
    score: int


class CategoryPerformance(BaseModel):
    """Average score for a question category across interviews."""

    category: str
    score: int
    count: int


class RoleCount(BaseModel):
    """How many interviews were taken for a role."""

    role: str
    count: int


class AnalyticsOverview(BaseModel):
    """Dashboard aggregates over a user's interview history."""

    total_interviews: int = 0
    average_score: int = 0
    latest_score: int = 0
    score_change: int = 0
    total_practice_hours: float = 0.0

    performance: list[PerformancePoint] = Field(default_factory=list)
    categories: list[CategoryPerformance] = Field(default_factory=list)
    job_roles: list[RoleCount] = Field(default_factory=list)

    top_strengths: list[str] = Field(default_factory=list)
    top_improvements: list[str] = Field(default_factory=list)
