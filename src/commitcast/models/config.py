"""Configuration models."""

from functools import lru_cache
from typing import Dict, Optional

from pydantic import AliasChoices, BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

GROQ_BASE_URL = "https://api.groq.com/openai/v1"

POST_LENGTH_LIMITS: Dict[str, Dict[str, int]] = {
    "quick": {"min": 300, "max": 600},
    "standard": {"min": 800, "max": 1200},
    "detailed": {"min": 1500, "max": 2500},
}


def max_length_for(post_length: str) -> int:
    """Character limit for a post-length preset (standard when unknown)."""
    return POST_LENGTH_LIMITS.get(post_length, POST_LENGTH_LIMITS["standard"])["max"]


class GitHubConfig(BaseModel):
    """Configuration for the GitHub REST client."""

    token: Optional[str] = Field(None, description="Personal access token (optional for public repos)")
    api_base: str = Field("https://api.github.com", description="REST API base URL")
    timeout: float = Field(30.0, description="Request timeout in seconds")
    max_concurrent_requests: int = Field(5, ge=1, description="Parallel detail fetches")
    per_page: int = Field(100, ge=1, le=100, description="Page size for list endpoints")


class LLMConfig(BaseModel):
    """Configuration for the rewrite model."""

    api_key: Optional[str] = Field(None, description="API key")
    base_url: str = Field(GROQ_BASE_URL, description="OpenAI-compatible endpoint")
    model: str = Field("llama3-8b-8192", description="Model name")
    max_tokens: int = Field(150, description="Maximum tokens for completion")
    temperature: float = Field(0.6, description="Temperature for generation")


class RewriteConstraints(BaseModel):
    """Constraints passed to the rewrite service."""

    platform: str = "linkedin"
    max_length: int = 1200
    emoji: bool = True


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    environment: str = "development"

    # GitHub
    github_token: Optional[str] = None
    github_api_base: str = "https://api.github.com"
    github_timeout: float = 30.0
    github_max_concurrent_requests: int = 5

    # LLM Settings
    llm_api_key: Optional[str] = Field(
        None, validation_alias=AliasChoices("llm_api_key", "groq_api_key")
    )
    llm_base_url: str = GROQ_BASE_URL
    llm_model: str = "llama3-8b-8192"
    llm_max_tokens: int = 150
    llm_temperature: float = 0.6

    # Rewrite
    rewrite_cache_size: int = 100
    default_tone: str = "pro"

    # Logging
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    def github_config(self) -> GitHubConfig:
        return GitHubConfig(
            token=self.github_token,
            api_base=self.github_api_base,
            timeout=self.github_timeout,
            max_concurrent_requests=self.github_max_concurrent_requests,
        )

    def llm_config(self) -> LLMConfig:
        return LLMConfig(
            api_key=self.llm_api_key,
            base_url=self.llm_base_url,
            model=self.llm_model,
            max_tokens=self.llm_max_tokens,
            temperature=self.llm_temperature,
        )


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings, read once."""
    return Settings()
