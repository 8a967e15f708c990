"""
Interview API endpoints

Handles interview session lifecycle:
- Creating sessions
- Starting interviews
- Submitting answers
- Ending interviews
"""

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field, field_validator

from mockprep.api.dependencies import get_orchestrator
from mockprep.core.interview_orchestrator import SessionNotFoundError, StateTransitionError
from mockprep.models.interview import InterviewSetup
from mockprep.models.roles import DifficultyLevel, InterviewStyle, JobRole, QuestionCategory

router = APIRouter()


# ============================================================================
# REQUEST/RESPONSE MODELS
# ============================================================================

class SetupRequest(BaseModel):
    """Request model for interview setup."""
    user_id: str = "anonymous"
    job_role: str = JobRole.SOFTWARE_ENGINEER.value
    difficulty_level: str = DifficultyLevel.ENTRY.value
    question_category: str = QuestionCategory.MIXED.value
    company_type: str | None = None
    interview_style: InterviewStyle = InterviewStyle.MIXED


class SetupResponse(BaseModel):
    """Response model for interview setup."""
    session_id: str
    status: str
    message: str


class QuestionResponse(BaseModel):
    """A question delivered to the candidate."""
    session_id: str
    action: str  # "question", "followup"
    question: dict[str, Any]
    question_number: int
    total_questions: int


class SubmitAnswerRequest(BaseModel):
    """Request model for submitting an answer."""
    answer: str = Field(..., min_length=1)

    @field_validator("answer")
    @classmethod
    def answer_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Answer must not be blank")
        return value


class SubmitAnswerResponse(BaseModel):
    """Response after submitting an answer."""
    session_id: str
    action: str  # "question", "followup", "complete"
    analysis: dict[str, Any]
    interviewer_comment: str
    question: dict[str, Any] | None = None
    question_number: int | None = None
    total_questions: int | None = None
    # Present when the interview is complete
    overall_score: int | None = None
    badge: str | None = None
    summary: dict[str, Any] | None = None


class CompletionResponse(BaseModel):
    """Response after ending an interview."""
    session_id: str
    action: str
    overall_score: int
    badge: str
    summary: dict[str, Any] | None = None
    questions_completed: int
    duration_seconds: float


class SessionStatusResponse(BaseModel):
    """Response for session status."""
    session_id: str
    state: str
    job_role: str
    difficulty_level: str
    turns_answered: int
    max_turns: int
    current_question: dict[str, Any] | None = None
    average_score: float | None = None
    overall_score: int | None = None
    duration_seconds: float


def _to_http_error(e: Exception) -> HTTPException:
    if isinstance(e, SessionNotFoundError):
        return HTTPException(status_code=404, detail="Session not found")
    return HTTPException(status_code=409, detail=str(e))


# ============================================================================
# REST ENDPOINTS
# ============================================================================

@router.post("/setup", response_model=SetupResponse)
async def setup_interview(request: SetupRequest) -> SetupResponse:
    """
    Create a new interview session.

    This records the candidate's choices but does not start the interview yet.
    """
    orchestrator = get_orchestrator()
    session = await orchestrator.create_session(InterviewSetup(**request.model_dump()))

    return SetupResponse(
        session_id=session.session_id,
        status="created",
        message="Interview session created. Call /start to begin.",
    )


@router.post("/{session_id}/start", response_model=QuestionResponse)
async def start_interview(session_id: str) -> QuestionResponse:
    """Start the interview and deliver the first question."""
    orchestrator = get_orchestrator()
    try:
        result = await orchestrator.start_interview(session_id)
    except (SessionNotFoundError, StateTransitionError) as e:
        raise _to_http_error(e)

    return QuestionResponse(session_id=session_id, **result)


@router.post("/{session_id}/answer", response_model=SubmitAnswerResponse)
async def submit_answer(session_id: str, request: SubmitAnswerRequest) -> SubmitAnswerResponse:
    """
    Submit an answer to the current question.

    The answer is analysed and the next question, a follow-up, or the
    completion result is returned.
    """
    orchestrator = get_orchestrator()
    try:
        result = await orchestrator.submit_answer(session_id, request.answer)
    except (SessionNotFoundError, StateTransitionError) as e:
        raise _to_http_error(e)

    return SubmitAnswerResponse(
        session_id=session_id,
        action=result["action"],
        analysis=result["analysis"],
        interviewer_comment=result["interviewer_comment"],
        question=result.get("question"),
        question_number=result.get("question_number"),
        total_questions=result.get("total_questions"),
        overall_score=result.get("overall_score"),
        badge=result.get("badge"),
        summary=result.get("summary"),
    )


@router.get("/{session_id}/status", response_model=SessionStatusResponse)
async def get_session_status(session_id: str) -> SessionStatusResponse:
    """Get current session status."""
    orchestrator = get_orchestrator()
    try:
        status = orchestrator.get_status(session_id)
    except SessionNotFoundError as e:
        raise _to_http_error(e)

    return SessionStatusResponse(**status)


@router.post("/{session_id}/end", response_model=CompletionResponse)
async def end_interview(session_id: str) -> CompletionResponse:
    """End the interview early, keeping the answers given so far."""
    orchestrator = get_orchestrator()
    try:
        result = await orchestrator.end_interview(session_id)
    except (SessionNotFoundError, StateTransitionError) as e:
        raise _to_http_error(e)

    return CompletionResponse(
        session_id=session_id,
        action=result["action"],
        overall_score=result["overall_score"],
        badge=result["badge"],
        summary=result["summary"],
        questions_completed=result["questions_completed"],
        duration_seconds=result["duration_seconds"],
    )
