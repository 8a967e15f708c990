"""
API Dependencies

Provides dependency injection for API endpoints.
Manages singleton instances of core components.
"""

from mockprep.config.settings import get_settings
from mockprep.core.ai_interviewer import AIInterviewer
from mockprep.core.analytics import AnalyticsEngine
from mockprep.core.interview_orchestrator import InterviewOrchestrator
from mockprep.core.llm_client import LLMClient
from mockprep.core.session_store import SessionRecordStore, create_store


# ============================================================================
# SINGLETON INSTANCES
# ============================================================================

_orchestrator: InterviewOrchestrator | None = None
_record_store: SessionRecordStore | None = None
_analytics_engine: AnalyticsEngine | None = None


def get_record_store() -> SessionRecordStore:
    """Get the interview record store singleton."""
    global _record_store

    if _record_store is None:
        settings = get_settings()
        _record_store = SessionRecordStore(create_store(settings.storage_backend, settings.data_dir))

    return _record_store


def get_orchestrator() -> InterviewOrchestrator:
    """
    Get the interview orchestrator singleton.

    Lazily initializes all required components.
    """
    global _orchestrator

    if _orchestrator is None:
        settings = get_settings()
        ai_interviewer = AIInterviewer(llm=LLMClient(settings), settings=settings)
        _orchestrator = InterviewOrchestrator(
            ai_interviewer=ai_interviewer,
            record_store=get_record_store(),
            settings=settings,
        )

    return _orchestrator


def get_analytics_engine() -> AnalyticsEngine:
    global _analytics_engine

    if _analytics_engine is None:
        _analytics_engine = AnalyticsEngine()

    return _analytics_engine


async def cleanup():
    """Cleanup resources on shutdown."""
    global _orchestrator, _record_store, _analytics_engine

    if _orchestrator:
        await _orchestrator.ai_interviewer.close()

    _orchestrator = None
    _record_store = None
    _analytics_engine = None
