"""
Question models for MockPrep
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class QuestionKind(str, Enum):
    """Role a question plays in the interview flow."""

    MAIN = "main"
    FOLLOWUP = "followup"
    CLARIFICATION = "clarification"
    DEEP_DIVE = "deep-dive"


class QuestionSource(str, Enum):
    """Where a question came from."""

    AI = "ai"              # Language model
    BANK = "bank"          # Static question bank
    FOLLOWUP = "followup"  # Follow-up sequencer


class FollowUpType(str, Enum):
    """Follow-up probes, in catalog order."""

    CLARIFICATION = "clarification"
    EXAMPLE = "example"
    METRICS = "metrics"
    CONSTRAINTS = "constraints"
    ALTERNATIVES = "alternatives"
    SCALE = "scale"
    RISKS = "risks"


class QuestionBankEntry(BaseModel):
    """A single entry in the static question bank."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique ID within the bank")
    text: str = Field(..., description="The question text")
    category: str = Field(..., description="Bank category")
    variant_type: str = Field(..., description="Question variant, e.g. concept or system-design")
    company: str | None = Field(
        default=None,
        description="Company known to ask this question (frequently-asked entries)"
    )


class GeneratedQuestion(BaseModel):
    """A question ready to be asked, from any source."""

    question: str
    question_type: QuestionKind = QuestionKind.MAIN
    category: str
    expected_duration: int = Field(
        default=3, ge=1,
        description="Expected answer time in minutes"
    )
    difficulty: str = Field(..., description="Difficulty the candidate selected")
    actual_difficulty: str = Field(..., description="Difficulty actually served")
    context: str = ""

    # Bookkeeping
    question_id: str | None = None
    source: QuestionSource = QuestionSource.BANK
    follow_up_type: FollowUpType | None = None

    @property
    def is_followup(self) -> bool:
        return self.question_type != QuestionKind.MAIN
