"""Feature label detection from commit messages."""

import re
from collections import Counter
from typing import Iterable, Pattern, Tuple

from commitcast.models import CommitRecord

FALLBACK_FEATURE = "Feature Development"

# Ordered, first match wins.
FEATURE_PATTERNS: Tuple[Tuple[Pattern[str], str], ...] = tuple(
    (re.compile(pattern), label)
    for pattern, label in (
        (r"auth|login|signup|password|token|jwt|session|oauth", "Authentication System"),
        (r"payment|stripe|checkout|billing|subscription|invoice", "Payment Processing"),
        (r"chat|websocket|socket\.io|real-?time|messaging", "Real-time Chat"),
        (r"upload|download|attachment|file storage|file manager", "File Management"),
        (r"search|autocomplete|full-text", "Search Functionality"),
        (r"analytics|dashboard|chart|metrics|report", "Analytics Dashboard"),
        (r"notification|notify|alert|reminder|email", "Notification System"),
        (r"database|schema|migration|postgres|mysql|mongo|prisma|\bsql\b", "Database Architecture"),
        (r"rate.?limit|throttl", "Rate Limiting"),
        (r"retry|backoff|circuit.?breaker|fallback|resilien", "Resilience Patterns"),
        (r"\bapi\b|endpoint|route|graphql|\brest\b|webhook", "API Development"),
        (r"\btests?\b|testing|jest|vitest|cypress|coverage", "Testing Infrastructure"),
        (r"docker|kubernetes|k8s|ci/cd|deploy|github actions|terraform|pipeline", "DevOps Pipeline"),
        (r"security|vulnerab|xss|csrf|sanitiz|encrypt|\bcors\b", "Security Hardening"),
        (r"perf|optimi[sz]|cach|lazy|speed|memoi", "Performance Optimization"),
        (r"a11y|accessib|aria-|screen reader", "Accessibility"),
        (r"redux|zustand|recoil|state management|\bstore\b", "State Management"),
        (r"responsive|mobile|breakpoint|media quer", "Responsive Design"),
        (r"i18n|l10n|translat|locale|internationali", "Internationalization"),
        (r"\bcron\b|queue|worker|background job|scheduler", "Background Jobs"),
        (r"\bexport|\bcsv\b", "Data Export"),
        (r"data import|bulk import|\bimporter\b", "Data Import"),
        (r"component|button|modal|navbar|layout|\bui\b|\bcss\b|tailwind", "UI Components"),
    )
)

STOP_WORDS = frozenset(
    {
        "added", "adding", "update", "updated", "updates", "fixed", "fixes",
        "remove", "removed", "change", "changes", "changed", "commit", "merge",
        "branch", "minor", "small", "stuff", "cleanup", "initial", "working",
        "about", "after", "before", "while", "where", "there", "their", "these",
        "those", "should", "would", "could", "which", "other", "still", "into",
        "more", "some", "first", "final", "again",
    }
)

MIN_TOKEN_LENGTH = 5
MIN_TOKEN_FREQUENCY = 2


def _message_blob(messages: Iterable[str]) -> str:
    return " ".join(m for m in messages if m).lower()


def extract_feature(commits: Iterable[CommitRecord]) -> str:
    """Guess a short label for what was built.

    Tries the ordered pattern table first, then falls back to the most
    frequent non-trivial word. Always returns a non-empty label.

    Args:
        commits: Commits (only messages are read)

    Returns:
        Feature label
    """
    return extract_feature_from_messages(c.message for c in commits)


def extract_feature_from_messages(messages: Iterable[str]) -> str:
    """Same as :func:`extract_feature` over raw message strings."""
    text = _message_blob(messages)

    for pattern, label in FEATURE_PATTERNS:
        if pattern.search(text):
            return label

    tokens = [
        token
        for token in re.split(r"[^a-z0-9]+", text)
        if len(token) >= MIN_TOKEN_LENGTH and token not in STOP_WORDS
    ]
    if tokens:
        token, count = Counter(tokens).most_common(1)[0]
        if count >= MIN_TOKEN_FREQUENCY:
            return f"{token[0].upper()}{token[1:]} Feature"

    return FALLBACK_FEATURE
