"""LLM rewrite of draft posts."""

from commitcast.llm.base import BaseLLMProvider
from commitcast.llm.cache import RewriteCache
from commitcast.llm.openai_provider import OpenAIProvider
from commitcast.llm.rewriter import PostRewriter
from commitcast.llm.tones import DEFAULT_TONE, TONES, resolve_tone

__all__ = [
    "BaseLLMProvider",
    "OpenAIProvider",
    "RewriteCache",
    "PostRewriter",
    "TONES",
    "DEFAULT_TONE",
    "resolve_tone",
]
