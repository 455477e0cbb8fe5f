"""Contextual emoji for features, signals and impact levels."""

import re
from typing import Optional

from commitcast.models import RiskLevel

FEATURE_EMOJIS = {
    "Authentication System": "🔐",
    "Payment Processing": "💳",
    "Real-time Chat": "💬",
    "File Management": "📁",
    "Search Functionality": "🔍",
    "Analytics Dashboard": "📊",
    "UI Components": "🎨",
    "Performance Optimization": "⚡",
    "API Development": "🔌",
    "Testing Infrastructure": "✅",
    "Notification System": "🔔",
    "Database Architecture": "🗄️",
    "DevOps Pipeline": "🚀",
    "Security Hardening": "🛡️",
    "Accessibility": "♿",
    "State Management": "🔄",
    "Responsive Design": "📱",
    "Internationalization": "🌍",
    "Background Jobs": "⚙️",
    "Data Export": "📤",
    "Data Import": "📥",
    "Rate Limiting": "🚦",
    "Resilience Patterns": "🔁",
    "Feature Development": "✨",
}

SIGNAL_EMOJIS = {
    "async_change": "⏳",
    "promise_change": "🤝",
    "networking_change": "🌐",
    "error_handling_change": "🛟",
    "test_change": "🧪",
    "function_change": "🔧",
    "class_change": "🏗️",
    "import_change": "📦",
    "logging_change": "📝",
    "doc_image_change": "📸",
    "doc_heading_change": "📚",
    "doc_link_change": "🔗",
    "jsx_change": "⚛️",
    "vue_change": "💚",
    "env_variable_change": "⚙️",
    "todo_fixme_change": "📌",
}

IMPACT_EMOJIS = {
    RiskLevel.HIGH_RISK: "🔴",
    RiskLevel.MEDIUM_RISK: "🟡",
    RiskLevel.LOW_RISK: "🟢",
}


def get_feature_emoji(feature: str) -> str:
    return FEATURE_EMOJIS.get(feature, "💻")


def get_signal_emoji(signal: Optional[str]) -> str:
    return SIGNAL_EMOJIS.get(signal or "", "🔨")


def get_impact_emoji(impact: Optional[RiskLevel]) -> str:
    return IMPACT_EMOJIS.get(impact, "⚪")


def generate_emoji_context(feature: str, dominant_signal: Optional[str], impact: Optional[RiskLevel]) -> str:
    return " ".join(
        [get_feature_emoji(feature), get_signal_emoji(dominant_signal), get_impact_emoji(impact)]
    )


def enrich_post_with_emojis(post: str, feature: str, impact: Optional[RiskLevel] = None) -> str:
    """Prefix the first mention of the feature and any ``Impact:`` label with emoji."""
    pattern = re.compile(rf"\b{re.escape(feature)}\b", re.IGNORECASE)
    enriched = pattern.sub(f"{get_feature_emoji(feature)} {feature.lower()}", post, count=1)

    if "Impact:" in enriched:
        enriched = enriched.replace("Impact:", f"{get_impact_emoji(impact)} Impact:", 1)
    return enriched


def get_celebration_emoji(commits: int, files_changed: int) -> str:
    if commits > 20:
        return "🎉"
    if commits > 10:
        return "👏"
    if files_changed > 50:
        return "💪"
    return "✨"
