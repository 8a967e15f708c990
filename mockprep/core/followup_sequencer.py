"""
Follow-up Sequencer for MockPrep

Chooses the next follow-up probe from the previous answer's score and the
topic of the question it answered. The session's follow-up history is the
position counter, so a type is never served twice in one session until
the chosen sequence runs out.
"""

import logging
import random

from mockprep.models.evaluation import AnswerAnalysis
from mockprep.models.interview import InterviewContext
from mockprep.models.question import (
    FollowUpType,
    GeneratedQuestion,
    QuestionKind,
    QuestionSource,
)

logger = logging.getLogger(__name__)


FOLLOW_UP_QUESTIONS: dict[FollowUpType, tuple[str, ...]] = {
    FollowUpType.EXAMPLE: (
        "Can you walk me through a specific example where you implemented this approach?",
        "Tell me about a real situation where you used this solution.",
        "Give me a concrete example from your experience with this.",
    ),
    FollowUpType.METRICS: (
        "What metrics would you use to measure success in this scenario?",
        "How would you quantify the impact of this solution?",
        "What KPIs would you track to ensure this approach is working?",
    ),
    FollowUpType.CONSTRAINTS: (
        "How would you handle this situation if you had half the resources?",
        "What if you had a much tighter deadline for this?",
        "How would this change if you had budget constraints?",
    ),
    FollowUpType.ALTERNATIVES: (
        "What alternative approaches did you consider and why did you choose this one?",
        "What are the trade-offs of your chosen approach?",
        "How would you modify this solution for a different context?",
    ),
    FollowUpType.SCALE: (
        "How does this scale when dealing with 10x the volume/complexity?",
        "What challenges would arise if this system grew significantly?",
        "How would you architect this for global scale?",
    ),
    FollowUpType.RISKS: (
        "What are the potential risks or downsides of this approach?",
        "What could go wrong with this solution?",
        "How would you mitigate the main risks?",
    ),
    FollowUpType.CLARIFICATION: (
        "Can you clarify what you meant by that specific point?",
        "I'd like to understand your thinking process better on this.",
        "Could you elaborate on that particular aspect?",
    ),
}

DESIGN_KEYWORDS = ("design", "system")
BEHAVIORAL_KEYWORDS = ("time", "challenge")


def get_follow_up_sequence(score: int, original_question: str) -> list[FollowUpType]:
    """
    Ordered follow-up types for an answer.

    Weak answers get clarification first, middling answers get asked for
    evidence, and strong answers are probed by topic.
    """
    if score < 60:
        return [FollowUpType.CLARIFICATION, FollowUpType.EXAMPLE]
    elif score < 75:
        return [FollowUpType.EXAMPLE, FollowUpType.METRICS]

    question = original_question.lower()
    if any(kw in question for kw in DESIGN_KEYWORDS):
        return [FollowUpType.SCALE, FollowUpType.RISKS, FollowUpType.ALTERNATIVES]
    elif any(kw in question for kw in BEHAVIORAL_KEYWORDS):
        return [FollowUpType.METRICS, FollowUpType.ALTERNATIVES, FollowUpType.CONSTRAINTS]
    return [FollowUpType.EXAMPLE, FollowUpType.SCALE, FollowUpType.RISKS]


class FollowUpSequencer:
    """Serves structured follow-up questions for an interview context."""

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    def next_type(
        self,
        analysis: AnswerAnalysis,
        original_question: str,
        history: list[FollowUpType],
    ) -> FollowUpType:
        """Pick the next type without recording it."""
        sequence = get_follow_up_sequence(analysis.score, original_question)
        served = set(history)
        for follow_up_type in sequence[len(history):]:
            if follow_up_type not in served:
                return follow_up_type
        return FollowUpType.CLARIFICATION

    def generate_follow_up(
        self,
        context: InterviewContext,
        original_question: str,
        analysis: AnswerAnalysis,
    ) -> GeneratedQuestion:
        """
        Build the next follow-up question.

        Appends the chosen type to ``context.follow_up_history``.

        Args:
            context: Current interview context
            original_question: Question the analysed answer responded to
            analysis: Analysis of that answer

        Returns:
            Follow-up GeneratedQuestion
        """
        follow_up_type = self.next_type(analysis, original_question, context.follow_up_history)
        context.follow_up_history.append(follow_up_type)

        logger.info(
            f"Follow-up #{len(context.follow_up_history)}: {follow_up_type.value} "
            f"(score {analysis.score})"
        )

        return GeneratedQuestion(
            question=self.rng.choice(FOLLOW_UP_QUESTIONS[follow_up_type]),
            question_type=QuestionKind.FOLLOWUP,
            category="Deep-dive",
            expected_duration=2,
            difficulty=context.difficulty_level,
            actual_difficulty=f"Follow-up: {follow_up_type.value}",
            context=f"Structured follow-up to assess {follow_up_type.value} understanding",
            source=QuestionSource.FOLLOWUP,
            follow_up_type=follow_up_type,
        )
