"""Tests for settings and configuration models."""

import pytest

from commitcast.models import GitHubConfig, Settings
from commitcast.models.config import GROQ_BASE_URL, max_length_for


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove settings variables inherited from the environment."""
    for name in (
        "ENVIRONMENT",
        "GITHUB_TOKEN",
        "LLM_API_KEY",
        "GROQ_API_KEY",
        "LLM_MODEL",
        "REWRITE_CACHE_SIZE",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    """Defaults without any environment."""
    settings = Settings(_env_file=None)

    assert settings.environment == "development"
    assert not settings.is_production
    assert settings.llm_api_key is None
    assert settings.llm_base_url == GROQ_BASE_URL
    assert settings.rewrite_cache_size == 100
    assert settings.default_tone == "pro"


def test_groq_key_alias(monkeypatch):
    """GROQ_API_KEY is accepted for the rewrite key."""
    monkeypatch.setenv("GROQ_API_KEY", "gsk-test")

    assert Settings(_env_file=None).llm_api_key == "gsk-test"


def test_env_overrides(monkeypatch):
    """Environment variables override defaults."""
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("GITHUB_TOKEN", "ghp-test")
    monkeypatch.setenv("REWRITE_CACHE_SIZE", "5")

    settings = Settings(_env_file=None)

    assert settings.is_production
    assert settings.github_config().token == "ghp-test"
    assert settings.rewrite_cache_size == 5


def test_sub_configs():
    """Sub-configs mirror the flat settings."""
    settings = Settings(_env_file=None, llm_model="llama3-70b-8192", github_timeout=5)

    assert settings.llm_config().model == "llama3-70b-8192"
    assert settings.github_config().timeout == 5
    assert settings.github_config().api_base == "https://api.github.com"


def test_github_config_limits():
    """Page size is capped by the API maximum."""
    with pytest.raises(ValueError):
        GitHubConfig(per_page=500)


def test_max_length_for():
    """Length presets with standard as fallback."""
    assert max_length_for("quick") == 600
    assert max_length_for("detailed") == 2500
    assert max_length_for("epic") == 1200
