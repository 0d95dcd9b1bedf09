"""Application configuration using environment variables."""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve the project root once so that `.env` is discovered regardless of CWD
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

SUPPORTED_CHAT_PROVIDERS = ("openai", "anthropic", "google")
DEFAULT_CHAT_MODELS = {
    "openai": "gpt-4o-mini",
    "anthropic": "claude-3-5-sonnet-latest",
    "google": "gemini-1.5-flash",
}


@dataclass(frozen=True, slots=True)
class ChatProviderConfig:
    """Provider and model used by the conversational layer."""

    provider: str
    model: str


class Settings(BaseSettings):
    """Load configuration from environment variables and `.env`."""

    model_config = SettingsConfigDict(
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Agents whose chat messages may trigger deadline triage
    deadline_agents: list[str] = Field(
        default_factory=lambda: ["dumbo"],
        validation_alias=AliasChoices("DEADLINE_AGENTS", "deadline_agents"),
    )
    tactical_kinds: list[str] = Field(
        default_factory=lambda: ["tactical"],
        validation_alias=AliasChoices("TACTICAL_KINDS", "tactical_kinds"),
    )
    server_timezone: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("SERVER_TIMEZONE", "server_timezone"),
        description="IANA zone used when a client omits its local time.",
    )
    highlight_duration_ms: int = Field(
        default=10_000,
        ge=0,
        validation_alias=AliasChoices(
            "HIGHLIGHT_DURATION_MS", "highlight_duration_ms"
        ),
    )

    chat_provider: str = Field(
        default="openai",
        validation_alias=AliasChoices(
            "CHAT_PROVIDER",
            "DUMBO_CHAT_PROVIDER",
            "chat_provider",
        ),
    )
    chat_model: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices(
            "CHAT_MODEL",
            "DUMBO_CHAT_MODEL",
            "chat_model",
        ),
    )

    api_host: str = Field(
        default="0.0.0.0",
        validation_alias=AliasChoices("API_HOST", "api_host"),
    )
    api_port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("API_PORT", "api_port"),
    )

    logging_settings_path: Path = Field(
        default_factory=lambda: Path("logging_settings.conf"),
        validation_alias=AliasChoices(
            "LOGGING_SETTINGS_PATH", "logging_settings_path"
        ),
    )

    def chat_provider_config(self) -> ChatProviderConfig:
        """Resolve the provider/model pair, defaulting unknown providers to OpenAI."""

        provider = (self.chat_provider or "").strip().lower()
        if provider not in SUPPORTED_CHAT_PROVIDERS:
            provider = "openai"
        model = (self.chat_model or "").strip() or DEFAULT_CHAT_MODELS[provider]
        return ChatProviderConfig(provider=provider, model=model)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached `Settings` instance."""

    return Settings()  # pyright: ignore[reportCallIssue]


__all__ = ["ChatProviderConfig", "Settings", "get_settings"]
