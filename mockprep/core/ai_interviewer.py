"""
AI Interviewer for MockPrep

Handles every interviewer decision:
- Question generation
- Answer analysis
- Follow-up questions
- Interviewer comments
- Interview summary

Each operation tries the language model first when it is available and
falls back to the deterministic heuristics on any failure.
"""

import logging
import random
from typing import Any
from uuid import uuid4

from pydantic import ValidationError

from mockprep.config.settings import Settings, get_settings
from mockprep.core.difficulty import escalate_difficulty
from mockprep.core.evaluation_engine import EvaluationEngine
from mockprep.core.followup_sequencer import FollowUpSequencer
from mockprep.core.llm_client import LLMClient, LLMResult
from mockprep.core.question_selector import QuestionSelector
from mockprep.core.report_generator import ReportGenerator
from mockprep.models.evaluation import AnswerAnalysis
from mockprep.models.interview import InterviewContext
from mockprep.models.question import GeneratedQuestion, QuestionKind, QuestionSource
from mockprep.models.report import InterviewSummary
from mockprep.prompts.evaluator import EvaluatorPrompts
from mockprep.prompts.interviewer import InterviewerPrompts
from mockprep.prompts.report import ReportPrompts

logger = logging.getLogger(__name__)

INTERVIEWER_COMMENTS = (
    "I see. Let me dig deeper into that.",
    "Interesting approach. Tell me more about the implementation.",
    "That's one way to handle it. Let's explore this further.",
    "I'd like to understand your thinking process better.",
    "Good start. Can you be more specific about the details?",
    "Let's dive deeper into the technical aspects.",
    "I want to understand how you'd handle the edge cases.",
)

# Model JSON keys -> model fields
ANALYSIS_FIELDS = {
    "score": "score",
    "detailedFeedback": "detailed_feedback",
    "strengths": "strengths",
    "weaknesses": "weaknesses",
    "improvementSuggestions": "improvement_suggestions",
    "idealAnswer": "ideal_answer",
    "nextQuestionDirection": "next_question_direction",
    "followUpNeeded": "follow_up_needed",
    "followUpReason": "follow_up_reason",
    "realityCheck": "reality_check",
    "industryStandard": "industry_standard",
}

SUMMARY_FIELDS = {
    "overallFeedback": "overall_feedback",
    "keyStrengths": "key_strengths",
    "criticalImprovements": "critical_improvements",
    "readinessScore": "readiness_score",
    "nextSteps": "next_steps",
    "realityCheck": "reality_check",
    "industryComparison": "industry_comparison",
}


def _remap(data: dict[str, Any], fields: dict[str, str]) -> dict[str, Any]:
    """Rename known keys and drop nulls so model defaults apply."""
    return {
        field: data[key]
        for key, field in fields.items()
        if data.get(key) is not None
    }


class AIInterviewer:
    """
    Central interviewer component.

    The language model path is optional: with no API key configured, or
    after the first failed question generation in a session, every
    decision is made by the heuristics.
    """

    def __init__(
        self,
        llm: LLMClient | None = None,
        settings: Settings | None = None,
        rng: random.Random | None = None,
    ):
        self.settings = settings or get_settings()
        self.llm = llm or LLMClient(self.settings)
        self.rng = rng or random.Random()

        self.selector = QuestionSelector(self.rng)
        self.sequencer = FollowUpSequencer(self.rng)
        self.evaluation_engine = EvaluationEngine()
        self.report_generator = ReportGenerator()

        # Prompt templates
        self.interviewer_prompts = InterviewerPrompts()
        self.evaluator_prompts = EvaluatorPrompts()
        self.report_prompts = ReportPrompts()

    async def close(self):
        await self.llm.close()

    def _use_ai(self, context: InterviewContext) -> bool:
        return context.ai_enabled and self.llm.configured

    # =========================================================================
    # QUESTION GENERATION
    # =========================================================================

    async def generate_question(self, context: InterviewContext) -> GeneratedQuestion:
        """
        Generate the next main question.

        A failed model call turns the AI path off for the rest of the
        session; the question then comes from the bank.

        Args:
            context: Current interview context

        Returns:
            GeneratedQuestion from the model or the bank
        """
        logger.info(
            f"Generating question #{context.current_question_number} for "
            f"{context.job_role} ({context.difficulty_level})"
        )

        if self._use_ai(context):
            result = await self._generate_ai_question(context)
            if result.ok and result.value:
                logger.info("AI question generated successfully")
                return result.value
            logger.warning(f"AI question generation failed, using question bank: {result.error}")
            context.ai_enabled = False

        return self.selector.generate_question(context)

    async def _generate_ai_question(self, context: InterviewContext) -> LLMResult[GeneratedQuestion]:
        actual_difficulty = escalate_difficulty(context.difficulty_level)
        result = await self.llm.generate_json(
            self.interviewer_prompts.system_prompt(context, actual_difficulty),
            self.interviewer_prompts.generate_question_prompt(context, actual_difficulty),
            required=("question", "category"),
            temperature=self.settings.question_temperature,
            max_tokens=self.settings.question_max_tokens,
            trace_name="question_generation",
        )
        if not result.ok:
            return LLMResult.failure(result.error or "Question generation failed")
        return self._parse_question(result.value or {}, context, actual_difficulty)

    def _parse_question(
        self,
        data: dict[str, Any],
        context: InterviewContext,
        actual_difficulty: str,
    ) -> LLMResult[GeneratedQuestion]:
        """Validate a model question payload, filling in defaults."""
        try:
            question_type = QuestionKind(data.get("questionType") or QuestionKind.MAIN.value)
        except ValueError:
            question_type = QuestionKind.MAIN

        try:
            question = GeneratedQuestion(
                question=str(data["question"]).strip(),
                question_type=question_type,
                category=str(data["category"]),
                expected_duration=data.get("expectedDuration") or 3,
                difficulty=context.difficulty_level,
                actual_difficulty=data.get("actualDifficulty") or actual_difficulty,
                context=data.get("context") or f"Generated question for {context.job_role}",
                question_id=f"ai_{uuid4().hex[:8]}",
                source=QuestionSource.AI,
            )
        except ValidationError as e:
            return LLMResult.failure(f"Invalid question payload: {e.error_count()} errors")
        return LLMResult.success(question)

    # =========================================================================
    # ANSWER ANALYSIS
    # =========================================================================

    async def analyze_answer(
        self,
        context: InterviewContext,
        question: str,
        answer: str,
    ) -> AnswerAnalysis:
        """
        Analyse an answer.

        Args:
            context: Current interview context
            question: Question that was asked
            answer: Candidate's answer

        Returns:
            AnswerAnalysis from the model or the heuristic scorer
        """
        if self._use_ai(context):
            result = await self._generate_ai_analysis(context, question, answer)
            if result.ok and result.value:
                return result.value
            logger.warning(f"AI analysis failed, using heuristic analysis: {result.error}")

        return self.evaluation_engine.evaluate_answer(
            question=question,
            answer=answer,
            job_role=context.job_role,
            difficulty=context.difficulty_level,
        )

    async def _generate_ai_analysis(
        self,
        context: InterviewContext,
        question: str,
        answer: str,
    ) -> LLMResult[AnswerAnalysis]:
        result = await self.llm.generate_json(
            self.evaluator_prompts.SYSTEM_CONTEXT,
            self.evaluator_prompts.analyze_answer_prompt(
                question, answer, context.job_role, context.difficulty_level
            ),
            required=("score",),
            temperature=self.settings.analysis_temperature,
            max_tokens=self.settings.analysis_max_tokens,
            trace_name="answer_analysis",
        )
        if not result.ok:
            return LLMResult.failure(result.error or "Analysis failed")

        try:
            analysis = AnswerAnalysis.model_validate(_remap(result.value or {}, ANALYSIS_FIELDS))
        except ValidationError as e:
            return LLMResult.failure(f"Invalid analysis payload: {e.error_count()} errors")
        return LLMResult.success(analysis)

    # =========================================================================
    # FOLLOW-UPS & COMMENTS
    # =========================================================================

    def generate_follow_up(
        self,
        context: InterviewContext,
        original_question: str,
        analysis: AnswerAnalysis,
    ) -> GeneratedQuestion:
        return self.sequencer.generate_follow_up(context, original_question, analysis)

    def interviewer_comment(self, analysis: AnswerAnalysis) -> str:
        """Short interviewer reaction shown after an answer."""
        return self.rng.choice(INTERVIEWER_COMMENTS)

    # =========================================================================
    # SUMMARY
    # =========================================================================

    async def generate_summary(
        self,
        job_role: str,
        questions: list[str],
        analyses: list[AnswerAnalysis],
    ) -> InterviewSummary:
        """
        Summarise a completed interview.

        Falls back to the canned summary, whose readiness score is the
        rounded average of the analysis scores.
        """
        if self.llm.configured:
            result = await self.llm.generate_json(
                self.report_prompts.SYSTEM_CONTEXT,
                self.report_prompts.generate_summary_prompt(job_role, questions, analyses),
                required=("readinessScore",),
                temperature=self.settings.summary_temperature,
                max_tokens=self.settings.summary_max_tokens,
                trace_name="interview_summary",
            )
            if result.ok:
                payload = _remap(result.value or {}, SUMMARY_FIELDS)
                payload.setdefault("overall_feedback", "")
                try:
                    return InterviewSummary.model_validate(payload)
                except ValidationError as e:
                    logger.warning(f"Invalid summary payload: {e.error_count()} errors")
            else:
                logger.warning(f"AI summary failed, using fallback summary: {result.error}")

        return self.report_generator.fallback_summary(job_role, analyses)
