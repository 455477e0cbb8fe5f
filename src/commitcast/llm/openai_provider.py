"""OpenAI-compatible chat provider (Groq by default)."""

from typing import Any, Optional

import structlog
from openai import AsyncOpenAI

from commitcast.exceptions import LLMError
from commitcast.llm.base import BaseLLMProvider
from commitcast.models.config import GROQ_BASE_URL, LLMConfig

logger = structlog.get_logger(__name__)


class OpenAIProvider(BaseLLMProvider):
    """Chat completions over any OpenAI-compatible endpoint."""

    # Pricing per 1M tokens
    PRICING = {
        "llama3-8b-8192": {"input": 0.05, "output": 0.08},
        "llama3-70b-8192": {"input": 0.59, "output": 0.79},
        "llama-3.3-70b-versatile": {"input": 0.59, "output": 0.79},
        "mixtral-8x7b-32768": {"input": 0.24, "output": 0.24},
        "gemma-7b-it": {"input": 0.07, "output": 0.07},
        "gpt-4o-mini": {"input": 0.15, "output": 0.60},
    }

    def __init__(
        self,
        api_key: str,
        model: str = "llama3-8b-8192",
        base_url: Optional[str] = GROQ_BASE_URL,
        **kwargs: Any,
    ) -> None:
        """Initialize the provider.

        Args:
            api_key: API key for the endpoint
            model: Model for completions
            base_url: OpenAI-compatible API base URL
            **kwargs: Additional parameters
        """
        super().__init__(api_key, model, **kwargs)
        self.base_url = base_url
        self.client = AsyncOpenAI(api_key=api_key, base_url=base_url)
        self.total_cost = 0.0
        self.total_tokens = {"input": 0, "output": 0}

    @classmethod
    def from_config(cls, config: LLMConfig) -> "OpenAIProvider":
        """Build a provider from an LLMConfig.

        Raises:
            LLMError: If no API key is configured
        """
        if not config.api_key:
            raise LLMError("missing API key; set LLM_API_KEY or GROQ_API_KEY")
        return cls(api_key=config.api_key, model=config.model, base_url=config.base_url)

    async def complete(
        self,
        prompt: str,
        system: Optional[str] = None,
        max_tokens: int = 150,
        temperature: float = 0.6,
        **kwargs: Any,
    ) -> str:
        """Generate a chat completion.

        Args:
            prompt: The user prompt
            system: Optional system message
            max_tokens: Maximum tokens in response
            temperature: Sampling temperature
            **kwargs: Additional API parameters

        Returns:
            Generated text, stripped

        Raises:
            LLMError: If the API call fails
        """
        messages = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                max_tokens=max_tokens,
                temperature=temperature,
                **kwargs,
            )
        except Exception as e:
            raise LLMError(str(e)) from e

        usage = getattr(response, "usage", None)
        if usage is not None:
            self.total_tokens["input"] += usage.prompt_tokens
            self.total_tokens["output"] += usage.completion_tokens
            self.total_cost += self.estimate_cost(usage.prompt_tokens, usage.completion_tokens)
            logger.debug(
                "llm_usage",
                model=self.model,
                prompt_tokens=usage.prompt_tokens,
                completion_tokens=usage.completion_tokens,
            )

        return (response.choices[0].message.content or "").strip()

    def estimate_cost(
        self,
        input_tokens: int,
        output_tokens: int = 0,
    ) -> float:
        """Estimate API call cost in USD (zero for unknown models)."""
        pricing = self.PRICING.get(self.model)
        if pricing is None:
            return 0.0

        cost = (input_tokens / 1_000_000) * pricing["input"]
        cost += (output_tokens / 1_000_000) * pricing["output"]
        return cost

    def get_usage_stats(self) -> dict:
        """Get current usage statistics."""
        return {
            "total_tokens": self.total_tokens,
            "total_cost": self.total_cost,
            "model": self.model,
        }

    def reset_usage_stats(self) -> None:
        """Reset usage statistics."""
        self.total_cost = 0.0
        self.total_tokens = {"input": 0, "output": 0}
