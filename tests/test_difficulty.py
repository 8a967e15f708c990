import pytest

from mockprep.core.difficulty import describe_escalation, escalate_difficulty


@pytest.mark.parametrize(
    "selected, served",
    [
        ("Entry Level", "Mid Level"),
        ("Mid Level", "Senior Level"),
        ("Senior Level", "Senior Level"),
        ("Principal", "Mid Level"),
        ("", "Mid Level"),
    ],
)
def test_escalate_difficulty(selected, served):
    assert escalate_difficulty(selected) == served


def test_describe_escalation_mentions_both_levels():
    assert describe_escalation("Entry Level") == "Mid Level (One level above Entry Level)"
