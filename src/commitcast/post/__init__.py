"""Post ideas, drafts and decorations."""

from commitcast.post.composer import compose_post
from commitcast.post.emoji import enrich_post_with_emojis, generate_emoji_context
from commitcast.post.ideas import find_dominant_signal, generate_post_ideas
from commitcast.post.intents import TEMPLATES, map_intent, render_template
from commitcast.post.stats import (
    generate_complete_stats_section,
    generate_inline_stats,
    generate_stats_widget,
)

__all__ = [
    "compose_post",
    "enrich_post_with_emojis",
    "generate_emoji_context",
    "find_dominant_signal",
    "generate_post_ideas",
    "TEMPLATES",
    "map_intent",
    "render_template",
    "generate_complete_stats_section",
    "generate_inline_stats",
    "generate_stats_widget",
]
