import pytest

from mockprep.config.settings import Settings
from mockprep.core.interview_orchestrator import (
    InterviewOrchestrator,
    SessionNotFoundError,
    StateTransitionError,
)
from mockprep.core.question_selector import QuestionSelector
from mockprep.core.report_generator import round_half_up
from mockprep.models.interview import InterviewSetup, InterviewState

ANSWERS = [
    "yes",
    "The service handled 200 requests per second after we added caching to the slowest endpoints",
    "For example, my approach was to measure first. We reduced latency by 30%. It took two weeks. "
    "Then we shipped it.",
    "I think it depends",
    "In my experience the process starts with a clear problem statement and a plan for scalability.",
]


def se_setup(**overrides) -> InterviewSetup:
    values = {"user_id": "user-1", "job_role": "Software Engineer", "difficulty_level": "Entry Level"}
    values.update(overrides)
    return InterviewSetup(**values)


def orchestrator_with(heuristic_interviewer, record_store, rng, **settings) -> InterviewOrchestrator:
    return InterviewOrchestrator(
        ai_interviewer=heuristic_interviewer,
        record_store=record_store,
        settings=Settings(_env_file=None, **settings),
        rng=rng,
    )


@pytest.mark.asyncio
async def test_full_interview_with_failing_llm(orchestrator, record_store):
    session = await orchestrator.create_session(se_setup())
    mid_ids = {e.id for e in QuestionSelector().build_pool("Software Engineer", "Mid Level")}

    result = await orchestrator.start_interview(session.session_id)
    assert result["action"] == "question"
    assert result["question_number"] == 1
    assert result["total_questions"] == 5

    scores = []
    for answer in ANSWERS:
        question = session.get_current_turn().question
        if not question.is_followup:
            # Questions are asked one level above the selected difficulty
            assert question.question_id in mid_ids
            assert question.actual_difficulty.startswith("Mid Level")
        result = await orchestrator.submit_answer(session.session_id, answer)
        scores.append(result["analysis"]["score"])

    assert result["action"] == "complete"
    assert session.state == InterviewState.COMPLETED
    assert len(session.answered_turns) == 5
    assert scores[0] == 30

    expected = round_half_up(sum(scores) / len(scores))
    assert session.summary.readiness_score == expected
    assert result["summary"]["readiness_score"] == expected
    assert session.overall_score == expected
    assert result["overall_score"] == expected

    # Context is discarded at completion
    assert session.context is None

    record = record_store.get_last("user-1")
    assert record.session_id == session.session_id
    assert record.answers == ANSWERS
    assert [a.score for a in record.analyses] == scores
    assert record.interview_summary.readiness_score == expected
    assert len(record_store.get_history("user-1")) == 1


@pytest.mark.asyncio
async def test_main_questions_never_repeat(orchestrator):
    session = await orchestrator.create_session(se_setup())
    await orchestrator.start_interview(session.session_id)

    for answer in ANSWERS:
        await orchestrator.submit_answer(session.session_id, answer)

    bank_ids = [t.question.question_id for t in session.turns if t.question.question_id]
    assert len(bank_ids) == len(set(bank_ids))


@pytest.mark.asyncio
async def test_weak_answers_get_follow_ups_when_certain(heuristic_interviewer, record_store, rng):
    orchestrator = orchestrator_with(heuristic_interviewer, record_store, rng, follow_up_probability=1.0)
    session = await orchestrator.create_session(se_setup())
    await orchestrator.start_interview(session.session_id)

    result = await orchestrator.submit_answer(session.session_id, "yes")
    assert result["action"] == "followup"
    assert result["question"]["actual_difficulty"] == "Follow-up: clarification"

    result = await orchestrator.submit_answer(session.session_id, "no")
    assert result["action"] == "followup"
    assert result["question"]["actual_difficulty"] == "Follow-up: example"


@pytest.mark.asyncio
async def test_no_follow_ups_when_probability_zero(heuristic_interviewer, record_store, rng):
    orchestrator = orchestrator_with(heuristic_interviewer, record_store, rng, follow_up_probability=0.0)
    session = await orchestrator.create_session(se_setup())
    await orchestrator.start_interview(session.session_id)

    for _ in range(4):
        result = await orchestrator.submit_answer(session.session_id, "yes")
        assert result["action"] == "question"


@pytest.mark.asyncio
async def test_turn_cap_comes_from_settings(heuristic_interviewer, record_store, rng):
    orchestrator = orchestrator_with(heuristic_interviewer, record_store, rng, max_turns=2)
    session = await orchestrator.create_session(se_setup())
    await orchestrator.start_interview(session.session_id)

    await orchestrator.submit_answer(session.session_id, "yes")
    result = await orchestrator.submit_answer(session.session_id, "yes")

    assert result["action"] == "complete"
    assert result["questions_completed"] == 2


@pytest.mark.asyncio
async def test_end_early_keeps_answered_turns(orchestrator, record_store):
    session = await orchestrator.create_session(se_setup())
    await orchestrator.start_interview(session.session_id)
    await orchestrator.submit_answer(session.session_id, "yes")

    result = await orchestrator.end_interview(session.session_id)

    assert result["action"] == "complete"
    assert result["questions_completed"] == 1
    assert result["overall_score"] == 30
    assert result["badge"] == "Needs Improvement"
    # The unanswered question is not recorded
    assert all(turn.is_answered for turn in session.turns)
    assert record_store.get_last("user-1").answers == ["yes"]


@pytest.mark.asyncio
async def test_end_before_any_answer_scores_default(orchestrator, record_store):
    session = await orchestrator.create_session(se_setup())
    await orchestrator.start_interview(session.session_id)

    result = await orchestrator.end_interview(session.session_id)

    assert result["overall_score"] == 75
    assert result["summary"] is None
    assert record_store.get_last("user-1").overall_score == 75


@pytest.mark.asyncio
async def test_invalid_transitions(orchestrator):
    session = await orchestrator.create_session(se_setup())

    with pytest.raises(StateTransitionError):
        await orchestrator.submit_answer(session.session_id, "too early")
    with pytest.raises(StateTransitionError):
        await orchestrator.end_interview(session.session_id)

    await orchestrator.start_interview(session.session_id)
    with pytest.raises(StateTransitionError):
        await orchestrator.start_interview(session.session_id)

    await orchestrator.end_interview(session.session_id)
    with pytest.raises(StateTransitionError):
        await orchestrator.submit_answer(session.session_id, "too late")
    with pytest.raises(StateTransitionError):
        await orchestrator.end_interview(session.session_id)


@pytest.mark.asyncio
async def test_unknown_session(orchestrator):
    assert orchestrator.get_session("missing") is None
    with pytest.raises(SessionNotFoundError):
        await orchestrator.start_interview("missing")
    with pytest.raises(SessionNotFoundError):
        orchestrator.get_status("missing")


@pytest.mark.asyncio
async def test_status_tracks_progress(orchestrator):
    session = await orchestrator.create_session(se_setup())

    status = orchestrator.get_status(session.session_id)
    assert status["state"] == "not_started"
    assert status["current_question"] is None

    await orchestrator.start_interview(session.session_id)
    await orchestrator.submit_answer(session.session_id, "yes")

    status = orchestrator.get_status(session.session_id)
    assert status["state"] == "in_progress"
    assert status["turns_answered"] == 1
    assert status["average_score"] == 30
    assert status["current_question"] is not None
