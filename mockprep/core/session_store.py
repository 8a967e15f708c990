"""
Session record storage for MockPrep

Finished interviews are kept in an opaque key-value store, two keys per
user: the most recent record and the full history list. Values are JSON
text with no schema version, so readers skip anything that no longer
validates instead of failing.
"""

import hashlib
import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path

from pydantic import ValidationError

from mockprep.models.report import InterviewRecord

logger = logging.getLogger(__name__)

# Fields kept when the full record cannot be stored
SIMPLIFIED_FIELDS = {
    "session_id",
    "job_role",
    "difficulty",
    "questions",
    "answers",
    "time_elapsed",
    "completed_at",
    "overall_score",
}


class KeyValueStore(ABC):
    """String key-value backend."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        ...


class InMemoryStore(KeyValueStore):
    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore(KeyValueStore):
    """One JSON file per key under a data directory."""

    def __init__(self, data_dir: str | Path) -> None:
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        # Keys hold client-supplied user ids
        return self.data_dir / f"{hashlib.sha256(key.encode('utf-8')).hexdigest()}.json"

    def get(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        tmp = path.with_suffix(".tmp")
        tmp.write_text(value, encoding="utf-8")
        tmp.replace(path)


def create_store(backend: str, data_dir: str | Path) -> KeyValueStore:
    if backend == "memory":
        return InMemoryStore()
    elif backend == "file":
        return JsonFileStore(data_dir)
    raise ValueError(f"Unknown storage backend: {backend}")


class SessionRecordStore:
    """
    Per-user interview history on top of a key-value backend.

    Saving never raises: if the full record cannot be serialized or
    written, a simplified record is attempted, and total failure is
    only logged.
    """

    def __init__(self, store: KeyValueStore):
        self.store = store

    @staticmethod
    def last_key(user_id: str) -> str:
        return f"{user_id}:last_interview"

    @staticmethod
    def history_key(user_id: str) -> str:
        return f"{user_id}:interview_history"

    # =========================================================================
    # WRITING
    # =========================================================================

    def save_completed(self, user_id: str, record: InterviewRecord) -> bool:
        """
        Store a completed interview as the user's latest and append it to history.

        Returns:
            True if either the full or the simplified record was stored
        """
        try:
            self._write(user_id, record.model_dump(mode="json"))
            logger.info(f"Saved interview record for user {user_id}")
            return True
        except (TypeError, ValueError, OSError) as e:
            logger.warning(f"Failed to save full interview record, trying simplified record: {e}")

        try:
            self._write(user_id, record.model_dump(mode="json", include=SIMPLIFIED_FIELDS))
            logger.info(f"Saved simplified interview record for user {user_id}")
            return True
        except (TypeError, ValueError, OSError) as e:
            logger.error(f"Failed to save interview record for user {user_id}: {e}")
            return False

    def _write(self, user_id: str, payload: dict) -> None:
        history = self._read_raw_history(user_id)
        history.append(payload)
        self.store.set(self.last_key(user_id), json.dumps(payload))
        self.store.set(self.history_key(user_id), json.dumps(history))

    # =========================================================================
    # READING
    # =========================================================================

    def get_last(self, user_id: str) -> InterviewRecord | None:
        raw = self.store.get(self.last_key(user_id))
        if raw is None:
            return None
        try:
            return InterviewRecord.model_validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Ignoring unreadable last interview for user {user_id}: {e.error_count()} errors")
            return None

    def get_history(self, user_id: str) -> list[InterviewRecord]:
        """All readable records, oldest first."""
        records = []
        for entry in self._read_raw_history(user_id):
            try:
                records.append(InterviewRecord.model_validate(entry))
            except ValidationError as e:
                logger.warning(f"Skipping unreadable history entry for user {user_id}: {e.error_count()} errors")
        return records

    def _read_raw_history(self, user_id: str) -> list:
        raw = self.store.get(self.history_key(user_id))
        if raw is None:
            return []
        try:
            history = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning(f"Interview history for user {user_id} is corrupt, starting over")
            return []
        return history if isinstance(history, list) else []
