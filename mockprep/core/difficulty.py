"""
Difficulty escalation for MockPrep

Questions are intentionally served one level above what the candidate
selected, capped at Senior Level.
"""

from mockprep.models.roles import DifficultyLevel

ESCALATION: dict[str, str] = {
    DifficultyLevel.ENTRY.value: DifficultyLevel.MID.value,
    DifficultyLevel.MID.value: DifficultyLevel.SENIOR.value,
    DifficultyLevel.SENIOR.value: DifficultyLevel.SENIOR.value,
}

DEFAULT_ESCALATED = DifficultyLevel.MID.value


def escalate_difficulty(selected_difficulty: str) -> str:
    """Map a selected difficulty to the level actually served."""
    return ESCALATION.get(selected_difficulty, DEFAULT_ESCALATED)


def describe_escalation(selected_difficulty: str) -> str:
    """Human-readable description of the served level."""
    return f"{escalate_difficulty(selected_difficulty)} (One level above {selected_difficulty})"
