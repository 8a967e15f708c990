"""
Interview Orchestrator - State machine for managing interview lifecycle.

This is the central coordinator for the mock interview. It owns the
in-memory sessions, drives the turn loop and persists the record of
every completed interview.
"""

import logging
import random
from typing import Any

from mockprep.config.settings import Settings, get_settings
from mockprep.core.ai_interviewer import AIInterviewer
from mockprep.core.report_generator import ReportGenerator
from mockprep.core.session_store import SessionRecordStore
from mockprep.models.interview import (
    InterviewContext,
    InterviewSession,
    InterviewSetup,
    InterviewState,
    InterviewTurn,
    utcnow,
)
from mockprep.models.report import ScoreBadge

logger = logging.getLogger(__name__)


class StateTransitionError(Exception):
    """Raised when an invalid state transition is attempted."""
    pass


class SessionNotFoundError(ValueError):
    """Raised when a session id is unknown."""

    def __init__(self, session_id: str):
        super().__init__(f"Session not found: {session_id}")
        self.session_id = session_id


class InterviewOrchestrator:
    """
    Manages the interview lifecycle using a state machine pattern.

    States:
        NOT_STARTED → IN_PROGRESS → COMPLETED

    Each answered question, main or follow-up, is one turn. After the
    last turn the interview completes, a summary is generated and the
    record is saved for the user.
    """

    VALID_TRANSITIONS: dict[InterviewState, list[InterviewState]] = {
        InterviewState.NOT_STARTED: [InterviewState.IN_PROGRESS],
        InterviewState.IN_PROGRESS: [InterviewState.COMPLETED],
        InterviewState.COMPLETED: [],  # Terminal state
    }

    def __init__(
        self,
        ai_interviewer: AIInterviewer,
        record_store: SessionRecordStore,
        settings: Settings | None = None,
        rng: random.Random | None = None,
    ):
        """
        Initialize the orchestrator with component dependencies.

        Args:
            ai_interviewer: Question generation, analysis and summaries
            record_store: Storage for completed interview records
            settings: Application settings
            rng: Random source for the follow-up decision
        """
        self.ai_interviewer = ai_interviewer
        self.record_store = record_store
        self.settings = settings or get_settings()
        self.rng = rng or random.Random()
        self.report_generator = ReportGenerator()

        self._sessions: dict[str, InterviewSession] = {}

    # =========================================================================
    # SESSION MANAGEMENT
    # =========================================================================

    async def create_session(self, setup: InterviewSetup) -> InterviewSession:
        """
        Create a new interview session from setup configuration.

        Args:
            setup: User's interview configuration

        Returns:
            New InterviewSession instance
        """
        session = InterviewSession(setup=setup, max_turns=self.settings.max_turns)
        self._sessions[session.session_id] = session

        logger.info(
            f"Created interview session: {session.session_id} "
            f"({setup.job_role}, {setup.difficulty_level}, {setup.question_category})"
        )
        return session

    def get_session(self, session_id: str) -> InterviewSession | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def _require_session(self, session_id: str) -> InterviewSession:
        session = self.get_session(session_id)
        if not session:
            raise SessionNotFoundError(session_id)
        return session

    # =========================================================================
    # STATE MACHINE
    # =========================================================================

    def transition_state(self, session: InterviewSession, new_state: InterviewState) -> None:
        """
        Transition a session to a new state.

        Raises:
            StateTransitionError: If transition is invalid
        """
        old_state = session.state
        valid_next_states = self.VALID_TRANSITIONS.get(old_state, [])
        if new_state not in valid_next_states:
            raise StateTransitionError(
                f"Invalid transition from {old_state.value} to {new_state.value}"
            )

        session.state = new_state
        if new_state == InterviewState.IN_PROGRESS:
            session.started_at = utcnow()
        elif new_state == InterviewState.COMPLETED:
            session.completed_at = utcnow()

        logger.info(f"Session {session.session_id}: {old_state.value} → {new_state.value}")

    # =========================================================================
    # INTERVIEW FLOW
    # =========================================================================

    async def start_interview(self, session_id: str) -> dict[str, Any]:
        """
        Start the interview and ask the first question.

        Returns:
            First question data
        """
        session = self._require_session(session_id)
        self.transition_state(session, InterviewState.IN_PROGRESS)

        session.context = InterviewContext.from_setup(session.setup)
        question = await self.ai_interviewer.generate_question(session.context)
        turn = session.add_turn(question)

        return self._question_payload(session, turn)

    async def submit_answer(self, session_id: str, answer: str) -> dict[str, Any]:
        """
        Process the candidate's answer to the current question.

        Args:
            session_id: Session ID
            answer: Candidate's answer text

        Returns:
            Analysis plus the next action (follow-up, question, or complete)
        """
        session = self._require_session(session_id)
        if session.state != InterviewState.IN_PROGRESS or session.context is None:
            raise StateTransitionError(f"Cannot submit answer in state: {session.state.value}")

        turn = session.get_current_turn()
        if not turn:
            raise StateTransitionError("No active question")

        context = session.context
        analysis = await self.ai_interviewer.analyze_answer(context, turn.question.question, answer)

        turn.answer = answer
        turn.answered_at = utcnow()
        turn.analysis = analysis
        turn.interviewer_comment = self.ai_interviewer.interviewer_comment(analysis)
        context.record_answer(turn.question.question, answer, analysis.score)

        logger.info(
            f"Session {session_id}: turn {turn.number}/{session.max_turns} scored {analysis.score}"
        )

        result: dict[str, Any] = {
            "analysis": analysis.model_dump(mode="json"),
            "interviewer_comment": turn.interviewer_comment,
        }

        if session.should_end_interview():
            result.update(await self._complete(session))
            return result

        if self._should_follow_up(analysis.follow_up_needed):
            question = self.ai_interviewer.generate_follow_up(
                context, turn.question.question, analysis
            )
        else:
            question = await self.ai_interviewer.generate_question(context)

        result.update(self._question_payload(session, session.add_turn(question)))
        return result

    def _should_follow_up(self, follow_up_needed: bool) -> bool:
        return follow_up_needed and self.rng.random() < self.settings.follow_up_probability

    async def end_interview(self, session_id: str) -> dict[str, Any]:
        """
        End the interview early with the turns answered so far.

        Returns:
            Completion result
        """
        session = self._require_session(session_id)
        if session.state != InterviewState.IN_PROGRESS:
            raise StateTransitionError(f"Cannot end interview in state: {session.state.value}")

        # Drop the unanswered question
        if session.get_current_turn():
            session.turns.pop()

        logger.info(f"Session {session_id} ended early after {len(session.answered_turns)} turns")
        return await self._complete(session)

    async def _complete(self, session: InterviewSession) -> dict[str, Any]:
        self.transition_state(session, InterviewState.COMPLETED)

        analyses = session.analyses
        session.overall_score = self.report_generator.overall_score(analyses)
        if analyses:
            session.summary = await self.ai_interviewer.generate_summary(
                session.setup.job_role,
                [turn.question.question for turn in session.answered_turns],
                analyses,
            )

        record = self.report_generator.build_record(session)
        self.record_store.save_completed(session.setup.user_id, record)

        # Context lives only as long as the interview
        session.context = None

        return {
            "action": "complete",
            "message": "Interview complete",
            "overall_score": session.overall_score,
            "badge": ScoreBadge.for_score(session.overall_score).value,
            "summary": session.summary.model_dump(mode="json") if session.summary else None,
            "questions_completed": len(session.answered_turns),
            "duration_seconds": session.get_duration_seconds(),
        }

    # =========================================================================
    # STATUS
    # =========================================================================

    def get_status(self, session_id: str) -> dict[str, Any]:
        session = self._require_session(session_id)
        current = session.get_current_turn()
        return {
            "session_id": session.session_id,
            "state": session.state.value,
            "job_role": session.setup.job_role,
            "difficulty_level": session.setup.difficulty_level,
            "turns_answered": len(session.answered_turns),
            "max_turns": session.max_turns,
            "current_question": current.question.model_dump(mode="json") if current else None,
            "average_score": session.context.average_score if session.context else None,
            "overall_score": session.overall_score,
            "duration_seconds": session.get_duration_seconds(),
        }

    def _question_payload(self, session: InterviewSession, turn: InterviewTurn) -> dict[str, Any]:
        return {
            "action": "followup" if turn.question.is_followup else "question",
            "question": turn.question.model_dump(mode="json"),
            "question_number": turn.number,
            "total_questions": session.max_turns,
        }
