"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    openai_api_key: str | None = None
    openai_model: str = "gpt-5.2"
    openai_reasoning_effort: str = "high"
    openai_store: bool = False
    suggestion_latency_enabled: bool = False
    text_latency_seconds: float = 0.8
    image_latency_seconds: float = 1.5
    smart_latency_seconds: float = 0.3
    search_latency_seconds: float = 0.2
    placeholder_image_labels: str = "chicken breast,rice,broccoli"
    image_fetch_timeout_seconds: float = 20.0
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_labels(raw: str | None) -> list[str]:
    """Parse a comma separated list of food labels from env."""
    if raw is None:
        return []
    labels: list[str] = []
    for chunk in raw.split(","):
        value = chunk.strip()
        if value:
            labels.append(value)
    return labels
