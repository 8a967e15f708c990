"""
Language model client for MockPrep

Thin wrapper over an OpenAI-compatible chat completions endpoint.
Nothing here raises for transport or parsing problems: every call returns
an LLMResult, and callers pick their deterministic fallback on failure.

Integrated with Langfuse for optional tracing of every call.
"""

import json
import logging
import re
from typing import Any, Generic, TypeVar

import httpx
from langfuse import Langfuse
from pydantic import BaseModel

from mockprep.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

_OPEN_FENCE = re.compile(r"^```[A-Za-z0-9_-]*\s*")
_CLOSE_FENCE = re.compile(r"\s*```$")


class LLMResult(BaseModel, Generic[T]):
    """Success or failure of a language model call."""

    ok: bool
    value: T | None = None
    error: str | None = None

    @classmethod
    def success(cls, value: T) -> "LLMResult[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str) -> "LLMResult[T]":
        return cls(ok=False, error=error)


def strip_code_fences(text: str) -> str:
    """Remove surrounding ``` or ```json fences if present."""
    t = text.strip()
    if t.startswith("```"):
        t = _OPEN_FENCE.sub("", t)
        t = _CLOSE_FENCE.sub("", t)
    return t.strip()


def parse_json_object(text: str, required: tuple[str, ...] = ()) -> LLMResult[dict[str, Any]]:
    """
    Parse a JSON object out of a model response.

    Args:
        text: Raw response text, optionally wrapped in code fences
        required: Keys that must be present with a non-null value

    Returns:
        LLMResult holding the parsed dict, or a failure describing why not
    """
    cleaned = strip_code_fences(text)
    if not cleaned:
        return LLMResult.failure("Empty response")

    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError:
        # Tolerate prose around the object
        start = cleaned.find("{")
        end = cleaned.rfind("}") + 1
        if start < 0 or end <= start:
            return LLMResult.failure("No JSON object in response")
        try:
            data = json.loads(cleaned[start:end])
        except json.JSONDecodeError as e:
            return LLMResult.failure(f"Malformed JSON: {e}")

    if not isinstance(data, dict):
        return LLMResult.failure(f"Expected a JSON object, got {type(data).__name__}")

    missing = [key for key in required if data.get(key) in (None, "")]
    if missing:
        return LLMResult.failure(f"Missing required fields: {', '.join(missing)}")

    return LLMResult.success(data)


class LLMClient:
    """
    Async client for the hosted language model.

    A client without an API key is valid: every call then fails fast and
    the caller falls back to the heuristics.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.settings = settings or get_settings()
        self.client = http_client or httpx.AsyncClient(
            base_url=self.settings.llm_base_url.rstrip("/"),
            headers={
                "Authorization": f"Bearer {self.settings.llm_api_key}",
                "Content-Type": "application/json",
            },
            timeout=self.settings.llm_timeout_seconds,
        )

        self.langfuse = None
        if self.settings.langfuse_enabled:
            if self.settings.langfuse_secret_key and self.settings.langfuse_public_key:
                try:
                    self.langfuse = Langfuse(
                        secret_key=self.settings.langfuse_secret_key,
                        public_key=self.settings.langfuse_public_key,
                        host=self.settings.langfuse_base_url,
                    )
                    logger.info("Langfuse initialized for LLM observability")
                except Exception as e:
                    logger.warning(f"Failed to initialize Langfuse: {e}")
            else:
                logger.info("Langfuse keys not configured, tracing disabled")

    @property
    def configured(self) -> bool:
        return self.settings.llm_configured

    async def close(self):
        """Close the HTTP client and flush Langfuse."""
        await self.client.aclose()
        if self.langfuse:
            try:
                self.langfuse.flush()
            except Exception as e:
                logger.warning(f"Failed to flush Langfuse: {e}")

    def _extract_content(self, result: Any) -> str:
        """Extract text content from API response, handling list/dict formats."""
        if not isinstance(result, dict):
            return ""
        choices = result.get("choices")
        if not isinstance(choices, list) or not choices or not isinstance(choices[0], dict):
            return ""
        message = choices[0].get("message")
        if not isinstance(message, dict):
            return ""
        content = message.get("content") or ""

        # Multi-part responses
        if isinstance(content, list):
            text_parts = []
            for part in content:
                if isinstance(part, str):
                    text_parts.append(part)
                elif isinstance(part, dict) and "text" in part:
                    text_parts.append(str(part["text"]))
            content = "".join(text_parts)

        return content if isinstance(content, str) else str(content)

    async def generate(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float = 0.7,
        max_tokens: int = 512,
        trace_name: str = "llm_call",
    ) -> LLMResult[str]:
        """
        Generate text for a system prompt and a user prompt.

        Args:
            system_prompt: Interviewer persona and output contract
            user_prompt: Task-specific prompt
            temperature: Sampling temperature
            max_tokens: Maximum tokens in response
            trace_name: Name for the Langfuse generation

        Returns:
            LLMResult holding the response text
        """
        if not self.configured:
            return LLMResult.failure("Language model API key not configured")

        payload = {
            "model": self.settings.llm_model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "max_tokens": max_tokens,
            "temperature": temperature,
        }

        generation = None
        if self.langfuse:
            try:
                generation = self.langfuse.start_generation(
                    name=trace_name,
                    model=self.settings.llm_model,
                    input=payload["messages"],
                    model_parameters={"temperature": temperature, "max_tokens": max_tokens},
                )
            except Exception as lf_err:
                logger.warning(f"Langfuse generation start failed: {lf_err}")

        try:
            response = await self.client.post(self.settings.llm_chat_endpoint, json=payload)
            response.raise_for_status()
            content = self._extract_content(response.json())
        except httpx.HTTPError as e:
            logger.error(f"LLM API error ({trace_name}): {e}")
            self._end_generation(generation, error=str(e))
            return LLMResult.failure(f"LLM API error: {e}")
        except ValueError as e:
            logger.error(f"LLM API returned invalid JSON ({trace_name}): {e}")
            self._end_generation(generation, error=str(e))
            return LLMResult.failure(f"Invalid API response: {e}")

        self._end_generation(generation, output=content)
        if not content.strip():
            return LLMResult.failure("Empty completion")
        return LLMResult.success(content)

    async def generate_json(
        self,
        system_prompt: str,
        user_prompt: str,
        required: tuple[str, ...] = (),
        temperature: float = 0.3,
        max_tokens: int = 512,
        trace_name: str = "llm_json_call",
    ) -> LLMResult[dict[str, Any]]:
        """Generate and parse a JSON object response."""
        result = await self.generate(
            system_prompt,
            user_prompt,
            temperature=temperature,
            max_tokens=max_tokens,
            trace_name=trace_name,
        )
        if not result.ok:
            return LLMResult.failure(result.error or "LLM call failed")
        return parse_json_object(result.value or "", required=required)

    def _end_generation(self, generation, output: str | None = None, error: str | None = None):
        if not generation:
            return
        try:
            if error:
                generation.update(level="ERROR", status_message=error)
            else:
                generation.update(output=output)
            generation.end()
        except Exception as lf_err:
            logger.warning(f"Langfuse generation end failed: {lf_err}")
