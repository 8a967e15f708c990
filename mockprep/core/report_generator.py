"""
Report Generator for MockPrep

Builds the end-of-interview artifacts:
- Canned summary used when the model summary is unavailable
- Overall score
- Persisted interview record
"""

import logging
import math

from mockprep.models.evaluation import AnswerAnalysis
from mockprep.models.interview import InterviewSession
from mockprep.models.report import InterviewRecord, InterviewSummary, RecordedQuestion

logger = logging.getLogger(__name__)

# Overall score for an interview that ended before any answer was analysed
NO_ANSWER_SCORE = 75


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def average_score(analyses: list[AnswerAnalysis]) -> float | None:
    if not analyses:
        return None
    return sum(a.score for a in analyses) / len(analyses)


class ReportGenerator:
    """
    Generates interview summaries and records.

    The fallback summary depends only on the average score, so the
    readiness score always equals the rounded mean of the analyses.
    """

    def overall_score(self, analyses: list[AnswerAnalysis]) -> int:
        average = average_score(analyses)
        if average is None:
            return NO_ANSWER_SCORE
        return round_half_up(average)

    def fallback_summary(self, job_role: str, analyses: list[AnswerAnalysis]) -> InterviewSummary:
        """
        Canned summary keyed only on the average score.

        Args:
            job_role: Role the interview was for
            analyses: Every analysis of the interview, non-empty

        Returns:
            InterviewSummary with readiness equal to the rounded average
        """
        average = average_score(analyses)
        if average is None:
            raise ValueError("Cannot summarise an interview without analyses")

        strong = average >= 80
        return InterviewSummary(
            overall_feedback=(
                f"Your {job_role} interview performance averaged {round_half_up(average)}%. "
                "While you demonstrated some relevant knowledge, there are significant areas "
                "that need improvement before you'll be competitive for top-tier positions."
            ),
            key_strengths=[
                "Basic understanding of concepts",
                "Willingness to attempt difficult questions",
            ],
            critical_improvements=[
                "Add specific examples with metrics",
                "Demonstrate deeper technical knowledge",
                "Practice structured problem-solving",
            ],
            readiness_score=round_half_up(average),
            next_steps=[
                "Spend 2-3 months practicing with real interview questions",
                "Build portfolio of concrete examples with measurable outcomes",
                "Study advanced concepts specific to your target role",
                "Practice mock interviews with experienced professionals",
            ],
            reality_check=(
                "You're on the right track but need more practice"
                if strong
                else "Significant preparation needed before interviewing at competitive companies"
            ),
            industry_comparison=(
                "Above average but room for improvement"
                if strong
                else "Below industry standards for competitive roles"
            ),
        )

    def build_record(self, session: InterviewSession) -> InterviewRecord:
        """Build the persisted record of a completed session."""
        answered = session.answered_turns
        record = InterviewRecord(
            session_id=session.session_id,
            job_role=session.setup.job_role,
            difficulty=session.setup.difficulty_level,
            questions=[
                RecordedQuestion(
                    question=turn.question.question,
                    category=turn.question.category,
                    difficulty=turn.question.actual_difficulty,
                    question_type=turn.question.question_type.value,
                )
                for turn in answered
            ],
            answers=[turn.answer or "" for turn in answered],
            analyses=session.analyses,
            time_elapsed=int(session.get_duration_seconds()),
            completed_at=session.completed_at,
            overall_score=session.overall_score,
            interview_summary=session.summary,
        )
        logger.info(
            f"Built record for session {session.session_id}: "
            f"{len(answered)} answers, score {record.overall_score}"
        )
        return record
