"""
Evaluation models for MockPrep

Defines the per-answer analysis contract shared by the language-model
path and the heuristic scorer.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class NextQuestionDirection(str, Enum):
    """Where the interview should go after an answer."""

    EASIER = "easier"
    HARDER = "harder"
    SAME = "same"
    DIFFERENT_TOPIC = "different-topic"


class ScoreBand(str, Enum):
    """Qualitative score bands used by the feedback rules."""

    STRONG = "strong"        # 85+
    ADEQUATE = "adequate"    # 75-84
    WEAK = "weak"            # 65-74
    POOR = "poor"            # 50-64
    UNREADY = "unready"      # below 50

    @classmethod
    def for_score(cls, score: int) -> "ScoreBand":
        if score >= 85:
            return cls.STRONG
        elif score >= 75:
            return cls.ADEQUATE
        elif score >= 65:
            return cls.WEAK
        elif score >= 50:
            return cls.POOR
        return cls.UNREADY


class AnswerAnalysis(BaseModel):
    """Complete analysis of a single answer. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(..., ge=0, le=100)
    detailed_feedback: str = "Analysis completed"
    strengths: list[str] = Field(default_factory=lambda: ["Attempted to answer"])
    weaknesses: list[str] = Field(default_factory=lambda: ["Could provide more detail"])
    improvement_suggestions: list[str] = Field(
        default_factory=lambda: ["Practice more examples"]
    )
    ideal_answer: str = "A stronger answer would include specific examples"
    next_question_direction: NextQuestionDirection = NextQuestionDirection.SAME
    follow_up_needed: bool = False
    follow_up_reason: str | None = None

    # Honest assessment against industry expectations
    reality_check: str = "Continue practicing to improve"
    industry_standard: str = "Industry expects clear, detailed responses"

    @property
    def band(self) -> ScoreBand:
        return ScoreBand.for_score(self.score)
