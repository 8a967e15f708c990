from datetime import datetime, timedelta, timezone

from mockprep.core.analytics import AnalyticsEngine
from mockprep.models.evaluation import AnswerAnalysis
from mockprep.models.report import InterviewRecord, RecordedQuestion

START = datetime(2024, 3, 1, tzinfo=timezone.utc)


def record(day: int, score: int | None, role: str = "Software Engineer", **kwargs) -> InterviewRecord:
    return InterviewRecord(
        job_role=role,
        difficulty="Entry Level",
        completed_at=START + timedelta(days=day),
        overall_score=score,
        **kwargs,
    )


def test_empty_history():
    overview = AnalyticsEngine().compute([])
    assert overview.total_interviews == 0
    assert overview.performance == []
    assert overview.average_score == 0


def test_scores_and_practice_time():
    records = [
        record(0, 60, time_elapsed=1800),
        record(1, 71, time_elapsed=1800),
        record(2, 90, role="Data Scientist", time_elapsed=660),
    ]

    overview = AnalyticsEngine().compute(records)

    assert overview.total_interviews == 3
    assert overview.average_score == 74
    assert overview.latest_score == 90
    assert overview.score_change == 19
    assert overview.total_practice_hours == 1.2
    assert [p.interview for p in overview.performance] == [1, 2, 3]
    assert overview.performance[0].date == "2024-03-01"
    assert {(r.role, r.count) for r in overview.job_roles} == {
        ("Software Engineer", 2),
        ("Data Scientist", 1),
    }


def test_single_interview_has_no_change():
    overview = AnalyticsEngine().compute([record(0, 80)])
    assert overview.score_change == 0


def test_records_without_score_use_completion_score():
    # 200-char answers, all questions answered: min(20, 60) + 20
    unscored = record(
        0,
        None,
        questions=[RecordedQuestion(question="Q1"), RecordedQuestion(question="Q2")],
        answers=["a" * 200, "b" * 200],
    )
    assert AnalyticsEngine().compute([unscored]).latest_score == 40


def test_category_performance():
    records = [
        record(
            0,
            70,
            questions=[
                RecordedQuestion(question="Q1", category="Technical"),
                RecordedQuestion(question="Q2", category="Behavioral"),
            ],
            analyses=[AnswerAnalysis(score=80), AnswerAnalysis(score=55)],
        ),
        record(
            1,
            70,
            questions=[
                RecordedQuestion(question="Q3", category="Technical"),
                RecordedQuestion(question="Q4", category="Technical"),
            ],
            analyses=[AnswerAnalysis(score=65)],
        ),
    ]

    categories = {c.category: c for c in AnalyticsEngine().compute(records).categories}

    # Q4 has no analysis and counts as zero
    assert categories["Technical"].count == 3
    assert categories["Technical"].score == 48
    assert categories["Behavioral"].score == 55


def test_top_strengths_and_improvements():
    analyses = [
        AnswerAnalysis(score=70, strengths=["Clear", "Structured"], weaknesses=["Vague"]),
        AnswerAnalysis(score=70, strengths=["Clear"], weaknesses=["Vague", "Short"]),
        AnswerAnalysis(score=70, strengths=["A", "B", "C", "D"], weaknesses=["Short", "Vague"]),
    ]

    overview = AnalyticsEngine().compute([record(0, 70, analyses=analyses)])

    assert overview.top_strengths[0] == "Clear"
    assert len(overview.top_strengths) == 5
    assert overview.top_improvements == ["Vague", "Short"]
