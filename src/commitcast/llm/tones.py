"""Tone instructions for the rewrite model."""

from typing import Dict

DEFAULT_TONE = "pro"

TONES: Dict[str, str] = {
    "pro": (
        "Write in a professional, clear, industry-standard tone.\n"
        "Concise, factual, and suitable for senior engineers."
    ),
    "devlife": (
        "Write like an experienced developer explaining changes to teammates.\n"
        "Friendly, casual, but still clear and technical."
    ),
    "fun": "Write in a light, playful developer tone.\nStill accurate, but slightly witty.",
    "concise": "Write extremely concise.\nNo fluff. No emojis. Just the essentials.",
    "detailed": (
        "Write in a detailed, explanatory tone.\n"
        "Provide context and reasoning behind changes."
    ),
    "optimistic": (
        "Write in an optimistic, positive tone.\n"
        "Focus on progress and learning, even from challenges."
    ),
}


def resolve_tone(tone: str, default: str = DEFAULT_TONE) -> str:
    """Instructions for a tone.

    Unknown names fall back to ``default``, and an unknown ``default`` falls
    back to ``DEFAULT_TONE``.
    """
    if tone in TONES:
        return TONES[tone]
    return TONES.get(default, TONES[DEFAULT_TONE])
