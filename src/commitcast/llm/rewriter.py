"""LLM polishing of draft posts."""

from typing import Any, Dict, Optional

import structlog

from commitcast.llm.base import BaseLLMProvider
from commitcast.llm.cache import RewriteCache
from commitcast.llm.prompts import SYSTEM_MESSAGE, PromptTemplates
from commitcast.llm.tones import DEFAULT_TONE, TONES, resolve_tone
from commitcast.models import Idea, RewriteConstraints

logger = structlog.get_logger(__name__)


class PostRewriter:
    """Polishes draft posts with an LLM, falling back to the draft on failure."""

    def __init__(
        self,
        provider: BaseLLMProvider,
        cache: Optional[RewriteCache] = None,
        use_cache: bool = True,
        default_tone: str = DEFAULT_TONE,
        max_tokens: int = 150,
        temperature: float = 0.6,
    ) -> None:
        """Initialize rewriter.

        Args:
            provider: LLM provider for completions
            cache: Cache instance (a 100-entry cache is created when omitted)
            use_cache: Whether to use caching
            default_tone: Tone used for unknown tone names
            max_tokens: Completion budget per rewrite
            temperature: Sampling temperature
        """
        self.provider = provider
        self.prompts = PromptTemplates()
        if default_tone not in TONES:
            logger.warning("unknown_default_tone", tone=default_tone, fallback=DEFAULT_TONE)
            default_tone = DEFAULT_TONE
        self.default_tone = default_tone
        self.max_tokens = max_tokens
        self.temperature = temperature

        self.use_cache = use_cache
        if use_cache:
            self.cache = cache if cache is not None else RewriteCache()
        else:
            self.cache = None

    async def rewrite(
        self,
        draft: str,
        idea: Idea,
        facts: Dict[str, Any],
        tone: str,
        constraints: RewriteConstraints,
    ) -> str:
        """Rewrite a draft in the requested tone.

        Provider errors and empty responses are logged and the draft is
        returned unchanged.

        Args:
            draft: Draft post text
            idea: Idea the draft was composed from
            facts: Numbers the rewrite must keep
            tone: Tone name
            constraints: Platform, length and emoji constraints

        Returns:
            Polished text, or the draft
        """
        if self.cache is not None:
            cached = self.cache.get(draft, tone)
            if cached:
                return cached

        prompt = self.prompts.rewrite_post(
            draft,
            intent=idea.type,
            angle=idea.angle,
            facts=facts,
            tone_instructions=resolve_tone(tone, self.default_tone),
            constraints=constraints,
        )

        try:
            polished = await self.provider.complete(
                prompt,
                system=SYSTEM_MESSAGE,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            )
        except Exception as e:
            logger.warning("rewrite_failed", tone=tone, idea=idea.type, error=str(e))
            return draft

        if not polished or not polished.strip():
            logger.warning("rewrite_empty", tone=tone, idea=idea.type)
            return draft

        polished = polished.strip()
        if self.cache is not None:
            self.cache.set(draft, tone, polished)
        return polished

    def get_stats(self) -> dict:
        """Get cache and provider usage statistics."""
        stats = {}

        if self.cache is not None:
            stats["cache"] = self.cache.get_stats()

        if hasattr(self.provider, "get_usage_stats"):
            stats["provider"] = self.provider.get_usage_stats()

        return stats
