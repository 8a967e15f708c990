import json
from datetime import datetime, timezone

import pytest

from mockprep.core.session_store import (
    InMemoryStore,
    JsonFileStore,
    SessionRecordStore,
    create_store,
)
from mockprep.models.evaluation import AnswerAnalysis
from mockprep.models.report import InterviewRecord, RecordedQuestion


def make_record(score: int = 70, **overrides) -> InterviewRecord:
    values = {
        "job_role": "Software Engineer",
        "difficulty": "Entry Level",
        "questions": [RecordedQuestion(question="Q1", category="Technical")],
        "answers": ["An answer"],
        "analyses": [AnswerAnalysis(score=score)],
        "time_elapsed": 600,
        "completed_at": datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
        "overall_score": score,
    }
    values.update(overrides)
    return InterviewRecord(**values)


@pytest.fixture(params=["memory", "file"])
def store(request, tmp_path) -> SessionRecordStore:
    return SessionRecordStore(create_store(request.param, tmp_path / "records"))


def test_save_and_read_back(store):
    assert store.get_last("u1") is None
    assert store.get_history("u1") == []

    assert store.save_completed("u1", make_record(60))
    assert store.save_completed("u1", make_record(80))

    assert store.get_last("u1").overall_score == 80
    assert [r.overall_score for r in store.get_history("u1")] == [60, 80]


def test_users_are_isolated(store):
    store.save_completed("u1", make_record(60))
    assert store.get_last("u2") is None
    assert store.get_history("u2") == []


def test_readers_tolerate_missing_optional_fields():
    backend = InMemoryStore()
    store = SessionRecordStore(backend)
    minimal = {"job_role": "Data Scientist", "difficulty": "Mid Level", "completed_at": "2024-05-01T00:00:00Z"}
    backend.set(store.last_key("u1"), json.dumps(minimal))
    backend.set(store.history_key("u1"), json.dumps([minimal, {"garbage": True}]))

    last = store.get_last("u1")
    assert last.job_role == "Data Scientist"
    assert last.analyses == []
    assert last.interview_summary is None
    # The invalid entry is skipped
    assert len(store.get_history("u1")) == 1


def test_corrupt_history_starts_over():
    backend = InMemoryStore()
    store = SessionRecordStore(backend)
    backend.set(store.history_key("u1"), "{not json")

    assert store.get_history("u1") == []
    store.save_completed("u1", make_record())
    assert len(store.get_history("u1")) == 1


class FlakyStore(InMemoryStore):
    """Rejects values larger than a limit, like a full browser quota."""

    def __init__(self, limit: int):
        super().__init__()
        self.limit = limit

    def set(self, key: str, value: str) -> None:
        if len(value) > self.limit:
            raise OSError("quota exceeded")
        super().set(key, value)


def test_falls_back_to_simplified_record():
    full = make_record()
    full_size = len(json.dumps([full.model_dump(mode="json")]))
    store = SessionRecordStore(FlakyStore(limit=full_size - 1))

    assert store.save_completed("u1", full)

    saved = store.get_last("u1")
    assert saved.answers == ["An answer"]
    assert saved.analyses == []
    assert saved.overall_score == 70


def test_total_failure_is_swallowed(caplog):
    store = SessionRecordStore(FlakyStore(limit=10))

    assert store.save_completed("u1", make_record()) is False
    assert "Failed to save interview record" in caplog.text
    assert store.get_last("u1") is None


def test_file_store_keeps_keys_inside_data_dir(tmp_path):
    backend = JsonFileStore(tmp_path)
    backend.set("user/../x:last_interview", "{}")

    assert backend.get("user/../x:last_interview") == "{}"
    assert all(path.parent == tmp_path for path in tmp_path.iterdir())


def test_file_store_does_not_mix_similar_user_ids(tmp_path):
    store = SessionRecordStore(JsonFileStore(tmp_path))
    store.save_completed("alice/x", make_record(40))

    for other in ("alice_x", "alice:x", "alice.x"):
        assert store.get_last(other) is None
        assert store.get_history(other) == []
    assert store.get_last("alice/x").overall_score == 40


def test_unknown_backend():
    with pytest.raises(ValueError):
        create_store("redis", "data")
