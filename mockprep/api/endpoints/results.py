"""
Results API endpoints

Handles retrieval of completed interviews:
- Latest result with its score badge
- Full interview history
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from mockprep.api.dependencies import get_record_store
from mockprep.models.report import InterviewRecord, ScoreBadge

router = APIRouter()


# ============================================================================
# RESPONSE MODELS
# ============================================================================

class LatestResultResponse(BaseModel):
    """Most recent interview with its headline score."""
    score: int
    badge: str
    record: InterviewRecord


class HistoryResponse(BaseModel):
    """All stored interviews, oldest first."""
    total: int
    records: list[InterviewRecord]


# ============================================================================
# ENDPOINTS
# ============================================================================

@router.get("/{user_id}/latest", response_model=LatestResultResponse)
async def get_latest_result(user_id: str) -> LatestResultResponse:
    """
    Get the most recently completed interview.

    Records saved without an overall score are scored on answer length
    and completion.
    """
    record = get_record_store().get_last(user_id)
    if not record:
        raise HTTPException(status_code=404, detail="No completed interview found")

    score = record.effective_score
    return LatestResultResponse(
        score=score,
        badge=ScoreBadge.for_score(score).value,
        record=record,
    )


@router.get("/{user_id}/history", response_model=HistoryResponse)
async def get_history(user_id: str) -> HistoryResponse:
    """Get every completed interview for a user."""
    records = get_record_store().get_history(user_id)
    return HistoryResponse(total=len(records), records=records)
