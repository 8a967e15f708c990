"""
Application settings and configuration management.

Uses pydantic-settings for environment variable loading.
"""

from functools import lru_cache

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "MockPrep"
    app_version: str = "0.1.0"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000

    # Language model (OpenAI-compatible chat completions API)
    llm_base_url: str = "https://generativelanguage.googleapis.com/v1beta/openai"
    llm_api_key: str = ""
    llm_chat_endpoint: str = "/chat/completions"
    llm_model: str = "gemini-1.5-flash-latest"
    llm_timeout_seconds: float = 30.0

    # Per-task sampling
    question_temperature: float = 0.7
    question_max_tokens: int = 400
    analysis_temperature: float = 0.3
    analysis_max_tokens: int = 600
    summary_temperature: float = 0.3
    summary_max_tokens: int = 600

    # Langfuse (optional LLM tracing)
    langfuse_enabled: bool = False
    langfuse_secret_key: str = ""
    langfuse_public_key: str = ""
    langfuse_base_url: str = "https://cloud.langfuse.com"

    # Interview settings
    max_turns: int = 5
    follow_up_probability: float = Field(default=0.7, ge=0.0, le=1.0)

    # Session record storage: "file" or "memory"
    storage_backend: str = "file"
    data_dir: str = "data"

    # CORS - stored as comma-separated string in env
    cors_origins_str: str = Field(
        default="http://localhost:3000,http://localhost:8000",
        validation_alias="cors_origins"
    )

    @computed_field
    @property
    def cors_origins(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_origins_str.split(",") if origin.strip()]

    @property
    def llm_configured(self) -> bool:
        """Whether an API key is available for the language model."""
        return bool(self.llm_api_key)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
