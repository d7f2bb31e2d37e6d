"""MeetingNotes configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Environment
    environment: str = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Groq (OpenAI-compatible chat completions)
    groq_api_key: str = ""
    groq_base_url: str = "https://api.groq.com/openai/v1"

    # Summarization
    summarization_model: str = "llama-3.3-70b-versatile"
    summarization_max_tokens: int = 2000
    summarization_temperature: float = 0.3

    # Uploads. Lists are read from the environment as JSON arrays.
    max_upload_bytes: int = 10 * 1024 * 1024
    # Allowance for multipart boundaries and form fields on top of the file
    upload_overhead_bytes: int = 64 * 1024
    # Types the upload filter lets through (what the client widget advertises)
    upload_accepted_types: list[str] = [
        "text/plain",
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        "application/pdf",
    ]
    # Types we can actually extract text from
    upload_text_types: list[str] = ["text/plain"]

    # Prebuilt client bundle
    static_dir: str = "dist/public"

    # Generation timing metrics, disabled when empty
    metrics_csv_path: str = ""

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        """Accept level names in any case."""
        return value.strip().upper() if isinstance(value, str) else value

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def max_request_bytes(self) -> int:
        """Largest request body accepted before the upload is parsed."""
        return self.max_upload_bytes + self.upload_overhead_bytes


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
