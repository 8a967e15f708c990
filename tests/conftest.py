import json
import random
from typing import Callable

import httpx
import pytest

from mockprep.config.settings import Settings, get_settings
from mockprep.core.ai_interviewer import AIInterviewer
from mockprep.core.interview_orchestrator import InterviewOrchestrator
from mockprep.core.llm_client import LLMClient
from mockprep.core.session_store import InMemoryStore, SessionRecordStore
from mockprep.models.interview import InterviewContext


@pytest.fixture(autouse=True)
def _test_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    monkeypatch.delenv("LLM_API_KEY", raising=False)
    monkeypatch.setenv("STORAGE_BACKEND", "memory")
    monkeypatch.setenv("DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("LANGFUSE_ENABLED", "false")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def record_store() -> SessionRecordStore:
    return SessionRecordStore(InMemoryStore())


@pytest.fixture
def se_context() -> InterviewContext:
    return InterviewContext(job_role="Software Engineer", difficulty_level="Entry Level")


def chat_completion(content: str) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


@pytest.fixture
def make_llm() -> Callable[..., LLMClient]:
    """
    Build a configured LLMClient whose HTTP calls go to ``handler``.

    ``handler`` takes the parsed request payload and returns either a
    completion string or an httpx.Response.
    """
    def _make(handler, api_key: str = "test-key") -> LLMClient:
        calls = []

        def _transport(request: httpx.Request) -> httpx.Response:
            payload = json.loads(request.content)
            calls.append(payload)
            result = handler(payload)
            if isinstance(result, httpx.Response):
                return result
            return httpx.Response(200, json=chat_completion(result))

        client = LLMClient(
            Settings(_env_file=None, llm_api_key=api_key),
            http_client=httpx.AsyncClient(
                base_url="https://llm.test",
                transport=httpx.MockTransport(_transport),
            ),
        )
        client.calls = calls
        return client

    return _make


@pytest.fixture
def offline_llm(make_llm) -> LLMClient:
    """Client with no API key, so every call fails without a request."""
    return make_llm(lambda payload: pytest.fail("unexpected LLM request"), api_key="")


@pytest.fixture
def heuristic_interviewer(offline_llm, settings, rng) -> AIInterviewer:
    return AIInterviewer(llm=offline_llm, settings=settings, rng=rng)


@pytest.fixture
def orchestrator(heuristic_interviewer, record_store, settings, rng) -> InterviewOrchestrator:
    return InterviewOrchestrator(
        ai_interviewer=heuristic_interviewer,
        record_store=record_store,
        settings=settings,
        rng=rng,
    )
