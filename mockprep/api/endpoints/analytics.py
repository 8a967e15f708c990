"""
Analytics API endpoints
"""

from fastapi import APIRouter

from mockprep.api.dependencies import get_analytics_engine, get_record_store
from mockprep.models.report import AnalyticsOverview

router = APIRouter()


@router.get("/{user_id}", response_model=AnalyticsOverview)
async def get_analytics(user_id: str) -> AnalyticsOverview:
    """Dashboard aggregates over a user's interview history."""
    records = get_record_store().get_history(user_id)
    return get_analytics_engine().compute(records)
