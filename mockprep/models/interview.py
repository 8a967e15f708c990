"""
Interview session and state models for MockPrep
"""

from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, Field

from mockprep.models.evaluation import AnswerAnalysis
from mockprep.models.question import FollowUpType, GeneratedQuestion
from mockprep.models.report import InterviewSummary
from mockprep.models.roles import DifficultyLevel, InterviewStyle, JobRole, QuestionCategory


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InterviewState(str, Enum):
    """Interview state machine states."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class InterviewSetup(BaseModel):
    """User's interview configuration."""

    user_id: str = Field(
        default="anonymous",
        description="Opaque caller identity, namespaces stored history"
    )
    job_role: str = Field(
        default=JobRole.SOFTWARE_ENGINEER.value,
        description="Target job role"
    )
    difficulty_level: str = Field(
        default=DifficultyLevel.ENTRY.value,
        description="Difficulty selected by the candidate"
    )
    question_category: str = Field(
        default=QuestionCategory.MIXED.value,
        description="Category filter; Mixed draws from every category"
    )
    company_type: str | None = Field(
        default=None,
        description="Kind of company the candidate targets"
    )
    interview_style: InterviewStyle = InterviewStyle.MIXED


class InterviewContext(BaseModel):
    """
    Running context for one interview.

    Created at interview start, appended to after every answered question,
    and discarded when the interview completes. Owns the per-session
    memory of served bank questions and follow-up types.
    """

    job_role: str
    difficulty_level: str
    current_question_number: int = 1
    previous_questions: list[str] = Field(default_factory=list)
    previous_answers: list[str] = Field(default_factory=list)
    previous_scores: list[int] = Field(default_factory=list)
    interview_style: InterviewStyle = InterviewStyle.MIXED
    company_type: str | None = None
    question_category: str | None = None

    # Session memory
    used_question_ids: set[str] = Field(default_factory=set)
    follow_up_history: list[FollowUpType] = Field(default_factory=list)

    # Turned off after the first failed AI question generation
    ai_enabled: bool = True

    @classmethod
    def from_setup(cls, setup: InterviewSetup) -> "InterviewContext":
        return cls(
            job_role=setup.job_role,
            difficulty_level=setup.difficulty_level,
            interview_style=setup.interview_style,
            company_type=setup.company_type,
            question_category=setup.question_category,
        )

    def record_answer(self, question: str, answer: str, score: int) -> None:
        """Append an answered question and advance the question counter."""
        self.previous_answers.append(answer)
        self.previous_scores.append(score)
        self.previous_questions.append(question)
        self.current_question_number += 1

    @property
    def average_score(self) -> float | None:
        if not self.previous_scores:
            return None
        return sum(self.previous_scores) / len(self.previous_scores)


class InterviewTurn(BaseModel):
    """A question and, once answered, the answer and its analysis."""

    number: int
    question: GeneratedQuestion
    asked_at: datetime = Field(default_factory=utcnow)

    answer: str | None = None
    answered_at: datetime | None = None
    analysis: AnswerAnalysis | None = None
    interviewer_comment: str | None = None

    @property
    def is_answered(self) -> bool:
        return self.answer is not None


class InterviewSession(BaseModel):
    """Complete interview session state."""

    # Identification
    session_id: str = Field(default_factory=lambda: str(uuid4()))

    # Setup
    setup: InterviewSetup
    max_turns: int = Field(default=5, ge=1)

    # State
    state: InterviewState = InterviewState.NOT_STARTED
    context: InterviewContext | None = None

    # Timing
    created_at: datetime = Field(default_factory=utcnow)
    started_at: datetime | None = None
    completed_at: datetime | None = None

    # Questions & answers
    turns: list[InterviewTurn] = Field(default_factory=list)

    # Completion
    summary: InterviewSummary | None = None
    overall_score: int | None = None

    def get_current_turn(self) -> InterviewTurn | None:
        """Get the latest turn if it is still awaiting an answer."""
        if self.turns and not self.turns[-1].is_answered:
            return self.turns[-1]
        return None

    def add_turn(self, question: GeneratedQuestion) -> InterviewTurn:
        turn = InterviewTurn(number=len(self.turns) + 1, question=question)
        self.turns.append(turn)
        return turn

    @property
    def answered_turns(self) -> list[InterviewTurn]:
        return [t for t in self.turns if t.is_answered]

    @property
    def analyses(self) -> list[AnswerAnalysis]:
        return [t.analysis for t in self.turns if t.analysis is not None]

    def should_end_interview(self) -> bool:
        """The interview ends once the fixed number of turns has been answered."""
        return len(self.answered_turns) >= self.max_turns

    def get_duration_seconds(self) -> float:
        """Get interview duration in seconds."""
        if not self.started_at:
            return 0.0
        end = self.completed_at or utcnow()
        return (end - self.started_at).total_seconds()
