import json
import random

import pytest

from mockprep.core.ai_interviewer import INTERVIEWER_COMMENTS, AIInterviewer
from mockprep.models.evaluation import AnswerAnalysis, NextQuestionDirection
from mockprep.models.interview import InterviewContext
from mockprep.models.question import QuestionKind, QuestionSource


def interviewer_for(make_llm, settings, handler) -> AIInterviewer:
    return AIInterviewer(llm=make_llm(handler), settings=settings, rng=random.Random(5))


def system_prompt(payload) -> str:
    return payload["messages"][0]["content"]


# ============================================================================
# QUESTION GENERATION
# ============================================================================

@pytest.mark.asyncio
async def test_ai_question_is_validated_and_defaulted(make_llm, settings, se_context):
    content = "```json\n" + json.dumps({
        "question": "How would you shard a user table?",
        "category": "System Design",
    }) + "\n```"
    interviewer = interviewer_for(make_llm, settings, lambda payload: content)

    question = await interviewer.generate_question(se_context)

    assert question.question == "How would you shard a user table?"
    assert question.category == "System Design"
    assert question.source == QuestionSource.AI
    assert question.question_type == QuestionKind.MAIN
    assert question.expected_duration == 3
    assert question.difficulty == "Entry Level"
    assert question.actual_difficulty == "Mid Level"
    assert se_context.ai_enabled


@pytest.mark.asyncio
async def test_question_prompt_targets_escalated_level(make_llm, settings, se_context):
    prompts = []

    def handler(payload):
        prompts.append(payload["messages"][1]["content"])
        return json.dumps({"question": "Q", "category": "Technical"})

    interviewer = interviewer_for(make_llm, settings, handler)
    se_context.record_answer("Earlier question", "answer", 90)

    await interviewer.generate_question(se_context)

    assert "Mid Level interview question for Software Engineer" in prompts[0]
    assert "significantly harder" in prompts[0]
    assert "system design" in prompts[0]


@pytest.mark.asyncio
async def test_failed_ai_question_falls_back_and_disables_ai(make_llm, settings, se_context):
    calls = []

    def handler(payload):
        calls.append(payload)
        return json.dumps({"question": "Missing category"})

    interviewer = interviewer_for(make_llm, settings, handler)

    first = await interviewer.generate_question(se_context)
    second = await interviewer.generate_question(se_context)

    assert first.source == QuestionSource.BANK
    assert second.source == QuestionSource.BANK
    assert first.question_id != second.question_id
    assert not se_context.ai_enabled
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_no_api_key_uses_bank(heuristic_interviewer, se_context):
    question = await heuristic_interviewer.generate_question(se_context)
    assert question.source == QuestionSource.BANK
    assert question.question_id in se_context.used_question_ids


# ============================================================================
# ANSWER ANALYSIS
# ============================================================================

@pytest.mark.asyncio
async def test_ai_analysis_applies_defaults(make_llm, settings, se_context):
    interviewer = interviewer_for(
        make_llm, settings, lambda payload: json.dumps({"score": 82, "strengths": ["Clear"]})
    )

    analysis = await interviewer.analyze_answer(se_context, "Q?", "An answer")

    assert analysis.score == 82
    assert analysis.strengths == ["Clear"]
    assert analysis.weaknesses == ["Could provide more detail"]
    assert analysis.detailed_feedback == "Analysis completed"
    assert analysis.next_question_direction == NextQuestionDirection.SAME
    assert analysis.reality_check == "Continue practicing to improve"
    assert not analysis.follow_up_needed


@pytest.mark.asyncio
async def test_ai_analysis_maps_camel_case(make_llm, settings, se_context):
    interviewer = interviewer_for(make_llm, settings, lambda payload: json.dumps({
        "score": 64,
        "detailedFeedback": "Needs numbers",
        "improvementSuggestions": ["Quantify impact"],
        "nextQuestionDirection": "easier",
        "followUpNeeded": True,
        "followUpReason": "Vague",
    }))

    analysis = await interviewer.analyze_answer(se_context, "Q?", "An answer")

    assert analysis.detailed_feedback == "Needs numbers"
    assert analysis.improvement_suggestions == ["Quantify impact"]
    assert analysis.next_question_direction == NextQuestionDirection.EASIER
    assert analysis.follow_up_needed
    assert analysis.follow_up_reason == "Vague"


@pytest.mark.parametrize(
    "content",
    [
        "no json here",
        json.dumps({"detailedFeedback": "no score"}),
        json.dumps({"score": 150}),
        json.dumps({"score": 70, "nextQuestionDirection": "sideways"}),
    ],
)
@pytest.mark.asyncio
async def test_bad_ai_analysis_uses_heuristic(make_llm, settings, se_context, content):
    interviewer = interviewer_for(make_llm, settings, lambda payload: content)

    analysis = await interviewer.analyze_answer(se_context, "Q?", "yes")

    assert analysis.score == 30


@pytest.mark.asyncio
async def test_analysis_skips_ai_once_disabled(make_llm, settings, se_context):
    interviewer = interviewer_for(
        make_llm, settings, lambda payload: pytest.fail("AI should be off for this session")
    )
    se_context.ai_enabled = False

    analysis = await interviewer.analyze_answer(se_context, "Q?", "yes")

    assert analysis.score == 30


# ============================================================================
# COMMENTS & SUMMARY
# ============================================================================

def test_interviewer_comment_from_fixed_list(heuristic_interviewer):
    comment = heuristic_interviewer.interviewer_comment(AnswerAnalysis(score=70))
    assert comment in INTERVIEWER_COMMENTS


@pytest.mark.asyncio
async def test_ai_summary(make_llm, settings):
    interviewer = interviewer_for(make_llm, settings, lambda payload: json.dumps({
        "overallFeedback": "Solid",
        "keyStrengths": ["Structure"],
        "criticalImprovements": ["Depth"],
        "readinessScore": 77,
        "nextSteps": ["Practice"],
        "realityCheck": "Close",
        "industryComparison": "Average",
    }))

    summary = await interviewer.generate_summary(
        "Software Engineer", ["Q1"], [AnswerAnalysis(score=70)]
    )

    assert summary.readiness_score == 77
    assert summary.overall_feedback == "Solid"
    assert summary.industry_comparison == "Average"


@pytest.mark.asyncio
async def test_summary_prompt_includes_average(make_llm, settings):
    prompts = []

    def handler(payload):
        prompts.append(payload["messages"][1]["content"])
        return "not json"

    interviewer = interviewer_for(make_llm, settings, handler)
    analyses = [AnswerAnalysis(score=60), AnswerAnalysis(score=81)]

    summary = await interviewer.generate_summary("Data Scientist", ["Q1", "Q2"], analyses)

    assert "Average Score: 70.5" in prompts[0]
    assert "Questions: 2" in prompts[0]
    # Fallback after the unparseable response
    assert summary.readiness_score == 71


@pytest.mark.asyncio
async def test_fallback_summary_bands(heuristic_interviewer):
    strong = await heuristic_interviewer.generate_summary(
        "Product Manager", ["Q"], [AnswerAnalysis(score=85), AnswerAnalysis(score=80)]
    )
    weak = await heuristic_interviewer.generate_summary(
        "Product Manager", ["Q"], [AnswerAnalysis(score=50)]
    )

    assert strong.readiness_score == 83
    assert strong.reality_check == "You're on the right track but need more practice"
    assert strong.industry_comparison == "Above average but room for improvement"
    assert "Product Manager interview performance averaged 83%" in strong.overall_feedback
    assert weak.readiness_score == 50
    assert weak.industry_comparison == "Below industry standards for competitive roles"
