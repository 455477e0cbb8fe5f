"""Tests for single-commit intent mapping."""

import pytest

from commitcast.models import CommitAnalysis, RiskLevel
from commitcast.post import TEMPLATES, map_intent, render_template


@pytest.mark.parametrize(
    "signals,impact,weight,expected",
    [
        ({"doc_heading_change": 1}, RiskLevel.HIGH_RISK, 0, ("build_in_public", "documentation_progress")),
        ({"doc_tech_stack_change": 1}, RiskLevel.LOW_RISK, 0, ("build_in_public", "tech_stack_update")),
        ({"networking_change": 1}, RiskLevel.HIGH_RISK, 0, ("technical_decision", "engineering_tradeoff")),
        ({"promise_change": 1}, RiskLevel.MEDIUM_RISK, 0, ("learning", "async_patterns")),
        ({"error_handling_change": 1}, RiskLevel.MEDIUM_RISK, 0, ("technical_decision", "error_handling")),
        ({"networking_change": 1}, RiskLevel.LOW_RISK, 0, ("technical_decision", "networking")),
        ({}, RiskLevel.MEDIUM_RISK, 600, ("technical_decision", "large_change")),
        ({}, RiskLevel.LOW_RISK, 10, ("daily_update", "small_win")),
    ],
)
def test_map_intent(signals, impact, weight, expected):
    """First matching rule picks the intent."""
    analysis = CommitAnalysis(signals=signals, impact=impact, total_weight=weight)

    assert map_intent(analysis) == expected


def test_render_template():
    """Every intent has a template."""
    assert render_template(CommitAnalysis()) == TEMPLATES["daily_update"]["small_win"]
    assert "#DevLife" in render_template(CommitAnalysis())
