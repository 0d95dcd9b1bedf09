"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest

from deadline_triage.config import Settings, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "CHAT_PROVIDER",
        "DUMBO_CHAT_PROVIDER",
        "CHAT_MODEL",
        "DUMBO_CHAT_MODEL",
        "DEADLINE_AGENTS",
        "TACTICAL_KINDS",
        "HIGHLIGHT_DURATION_MS",
        "SERVER_TIMEZONE",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.deadline_agents == ["dumbo"]
    assert settings.tactical_kinds == ["tactical"]
    assert settings.highlight_duration_ms == 10_000
    assert settings.server_timezone is None
    provider = settings.chat_provider_config()
    assert (provider.provider, provider.model) == ("openai", "gpt-4o-mini")


def test_list_fields_from_env(monkeypatch):
    monkeypatch.setenv("DEADLINE_AGENTS", '["dumbo", "grimpy"]')
    monkeypatch.setenv("TACTICAL_KINDS", '["tactical", "todo"]')

    settings = Settings(_env_file=None)

    assert settings.deadline_agents == ["dumbo", "grimpy"]
    assert settings.tactical_kinds == ["tactical", "todo"]


@pytest.mark.parametrize(
    ("provider", "expected"),
    [
        ("anthropic", ("anthropic", "claude-3-5-sonnet-latest")),
        (" Google ", ("google", "gemini-1.5-flash")),
        ("mystery", ("openai", "gpt-4o-mini")),
    ],
)
def test_legacy_provider_alias(monkeypatch, provider, expected):
    monkeypatch.setenv("DUMBO_CHAT_PROVIDER", provider)

    config = Settings(_env_file=None).chat_provider_config()

    assert (config.provider, config.model) == expected


def test_explicit_model_overrides_default(monkeypatch):
    monkeypatch.setenv("CHAT_PROVIDER", "anthropic")
    monkeypatch.setenv("CHAT_MODEL", "claude-custom")

    config = Settings(_env_file=None).chat_provider_config()

    assert config.model == "claude-custom"


def test_negative_highlight_duration_rejected(monkeypatch):
    from pydantic import ValidationError

    monkeypatch.setenv("HIGHLIGHT_DURATION_MS", "-1")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
