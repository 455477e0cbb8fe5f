"""Prompt templates for post rewriting."""

import json
from typing import Any, Dict

from commitcast.models.config import RewriteConstraints

SYSTEM_MESSAGE = (
    "You polish LinkedIn posts for developers. Keep them authentic, conversational, "
    "and concise. Never add new information."
)


class PromptTemplates:
    """Collection of prompt templates for post rewriting."""

    @staticmethod
    def rewrite_post(
        draft: str,
        intent: str,
        angle: str,
        facts: Dict[str, Any],
        tone_instructions: str,
        constraints: RewriteConstraints,
    ) -> str:
        """Generate prompt for polishing a draft post.

        Args:
            draft: Draft post text
            intent: Idea type
            angle: Idea angle
            facts: Numbers the rewrite must preserve
            tone_instructions: Tone guidance
            constraints: Platform, length and emoji constraints

        Returns:
            Formatted prompt
        """
        return f"""You are rewriting a developer social media post.

Rules:
- Do NOT add new facts
- Do NOT change the meaning or any numbers
- Keep it authentic and concise
- Avoid buzzwords

Tone:
{tone_instructions}

Intent: {intent}
Angle: {angle}

Known facts:
{json.dumps(facts, indent=2, default=str)}

Base post:
\"\"\"
{draft}
\"\"\"

Platform: {constraints.platform}
Max length: {constraints.max_length}
Emoji allowed: {constraints.emoji}

Rewrite the post:"""
