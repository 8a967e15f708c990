"""
Data models and schemas for MockPrep

Contains Pydantic models for:
- Interview sessions and context
- Questions and the question bank
- Answer analyses
- Summaries, records and analytics
- Role and difficulty taxonomy
"""

from mockprep.models.interview import (
    InterviewContext,
    InterviewSession,
    InterviewSetup,
    InterviewState,
    InterviewTurn,
)
from mockprep.models.question import (
    FollowUpType,
    GeneratedQuestion,
    QuestionBankEntry,
    QuestionKind,
    QuestionSource,
)
from mockprep.models.evaluation import AnswerAnalysis, NextQuestionDirection, ScoreBand
from mockprep.models.report import (
    AnalyticsOverview,
    InterviewRecord,
    InterviewSummary,
    ScoreBadge,
)
from mockprep.models.roles import (
    CompanyType,
    DifficultyLevel,
    InterviewStyle,
    JobRole,
    QuestionCategory,
)

__all__ = [
    # Interview
    "InterviewContext",
    "InterviewSession",
    "InterviewSetup",
    "InterviewState",
    "InterviewTurn",
    # Question
    "FollowUpType",
    "GeneratedQuestion",
    "QuestionBankEntry",
    "QuestionKind",
    "QuestionSource",
    # Evaluation
    "AnswerAnalysis",
    "NextQuestionDirection",
    "ScoreBand",
    # Report
    "AnalyticsOverview",
    "InterviewRecord",
    "InterviewSummary",
    "ScoreBadge",
    # Roles
    "CompanyType",
    "DifficultyLevel",
    "InterviewStyle",
    "JobRole",
    "QuestionCategory",
]
