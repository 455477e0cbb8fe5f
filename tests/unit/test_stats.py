"""Tests for stats widgets."""

import pytest

from commitcast.models import AggregateAnalysis, RiskLevel
from commitcast.post import generate_complete_stats_section, generate_inline_stats, generate_stats_widget
from commitcast.post.stats import generate_impact_summary, generate_progress_bar, generate_signal_breakdown


@pytest.fixture
def aggregate():
    """Three commits, five files, two signal types."""
    return AggregateAnalysis(
        total_commits=3,
        total_files_changed=5,
        total_weight=120,
        signals={"test_change": 2, "async_change": 5},
        impacts={RiskLevel.HIGH_RISK: 1, RiskLevel.MEDIUM_RISK: 0, RiskLevel.LOW_RISK: 2},
    )


def test_compact_widget(aggregate):
    """Compact style, with and without emoji."""
    assert generate_stats_widget(aggregate) == "📊 3 commits • 5 files • 2 focus areas"
    assert generate_stats_widget(aggregate, use_emojis=False) == "3 commits | 5 files | 2 focus areas"


def test_minimal_and_none(aggregate):
    """Minimal is one short line; none is empty."""
    assert generate_stats_widget(aggregate, "minimal", use_emojis=False) == "3 commits, 5 files"
    assert generate_stats_widget(aggregate, "minimal") == "✨ 3 commits, 5 files"
    assert generate_stats_widget(aggregate, "none") == ""


def test_detailed_widget(aggregate):
    """Detailed style lists focus areas by frequency."""
    widget = generate_stats_widget(aggregate, "detailed")

    assert widget.splitlines() == [
        "📊 Today's Work Summary:",
        "   • 3 commits pushed",
        "   • 5 files modified",
        "   • 120 lines changed",
        "   • Focus: async patterns, testing",
        "   🔴 1 high-impact changes",
    ]


def test_inline_stats():
    """Singular and plural forms."""
    assert generate_inline_stats(1, 1) == "1 commit, 1 file"
    assert generate_inline_stats(4, 9) == "4 commits across 9 files"


def test_progress_bar():
    """Bar is filled in proportion."""
    assert generate_progress_bar(50) == "[█████░░░░░] 50%"
    assert generate_progress_bar(0, width=4) == "[░░░░] 0%"


def test_impact_summary(aggregate):
    """Only non-empty buckets are listed."""
    assert generate_impact_summary(aggregate.impacts, use_emojis=False) == "1 high-impact, 2 low-impact"
    assert generate_impact_summary(aggregate.impacts) == "🔴 1 critical, 🟢 2 minor"


def test_signal_breakdown():
    """Percentages of all signal occurrences."""
    assert generate_signal_breakdown({"async_change": 3, "test_change": 1}) == (
        "async patterns (75%), testing (25%)"
    )
    assert generate_signal_breakdown({}) == ""


def test_complete_stats_section(aggregate):
    """Widget, breakdown and impact summary separated by blank lines."""
    section = generate_complete_stats_section(aggregate, use_emojis=False, include_breakdown=True)

    assert section == "\n".join(
        [
            "3 commits | 5 files | 2 focus areas",
            "",
            "async patterns (71%), testing (29%)",
            "",
            "1 high-impact, 2 low-impact",
        ]
    )
