"""Tests for post idea generation and ranking."""

from datetime import datetime, timedelta, timezone

from commitcast.models import AggregateAnalysis, AnalyzedCommit, RiskLevel
from commitcast.post import find_dominant_signal, generate_post_ideas
from commitcast.post.ideas import analyze_commit_patterns, calculate_time_span, detect_work_pattern


def _types(ideas):
    return [idea.type for idea in ideas]


def test_daily_summary_always_present():
    """Even an empty aggregate gets an idea."""
    ideas = generate_post_ideas(AggregateAnalysis())

    assert _types(ideas) == ["daily_summary"]
    assert ideas[0].relevance_score == 50


def test_dominant_signal():
    """Share and rounded percentage of the top signal."""
    dominant = find_dominant_signal({"async_change": 3, "test_change": 1, "function_change": 1})

    assert dominant.signal == "async_change"
    assert dominant.share == 0.6
    assert dominant.percentage == 60


def test_dominant_signal_without_occurrences():
    """Nothing to divide by, no dominant signal."""
    assert find_dominant_signal({}) is None
    assert find_dominant_signal({"async_change": 0}) is None


def test_dominant_share_tie_does_not_fire():
    """Exactly 40% is not dominant."""
    aggregate = AggregateAnalysis(
        total_commits=2,
        signals={"async_change": 2, "test_change": 2, "function_change": 1},
    )

    assert "focused_technical" not in _types(generate_post_ideas(aggregate))


def test_dominant_share_fires_above_threshold():
    """Focused idea scores the rounded percentage."""
    aggregate = AggregateAnalysis(
        total_commits=2,
        signals={"async_change": 3, "test_change": 1, "function_change": 1},
    )

    focused = [i for i in generate_post_ideas(aggregate) if i.type == "focused_technical"]

    assert len(focused) == 1
    assert focused[0].relevance_score == 60
    assert focused[0].metadata["signal"] == "async_change"


def test_refactor_and_focused_ranking():
    """A large single-signal batch ranks focused work above the refactor."""
    aggregate = AggregateAnalysis(total_weight=600, total_commits=8, signals={"function_change": 10})

    ideas = generate_post_ideas(aggregate)

    assert _types(ideas) == ["focused_technical", "engineering_practice", "daily_summary"]
    assert [i.relevance_score for i in ideas] == [100, 85, 50]
    assert ideas[1].metadata["reasons"] == ["function organization"]


def test_ties_keep_generation_order():
    """Equal scores stay in the order the heuristics ran."""
    aggregate = AggregateAnalysis(
        total_commits=3,
        signals={"async_change": 4, "networking_change": 4},
    )

    ideas = generate_post_ideas(aggregate)

    assert [(i.type, i.angle) for i in ideas] == [
        ("learning", "async_complexity"),
        ("technical_decision", "infrastructure"),
        ("focused_technical", "async_change"),
        ("daily_summary", "productivity"),
    ]


def test_documentation_risk_testing_variety():
    """Independent heuristics all fire when their conditions hold."""
    aggregate = AggregateAnalysis(
        total_commits=4,
        signals={
            "doc_heading_change": 1,
            "test_change": 3,
            "class_change": 2,
            "import_change": 2,
            "logging_change": 1,
        },
        impacts={RiskLevel.HIGH_RISK: 1, RiskLevel.MEDIUM_RISK: 0, RiskLevel.LOW_RISK: 3},
    )

    ideas = generate_post_ideas(aggregate)

    assert _types(ideas) == [
        "technical_decision",
        "quality",
        "build_in_public",
        "variety",
        "daily_summary",
    ]
    assert ideas[0].metadata["high_risk_commits"] == 1
    assert ideas[0].metadata["safeguards"] == ["tests"]
    assert ideas[2].metadata["doc_changes"] == 1
    assert ideas[3].metadata["signal_types"] == 5


def test_thematic_idea_from_commit_messages():
    """A repeated word across summaries becomes a theme."""
    commits = [
        AnalyzedCommit(sha="a", message="Add checkout form"),
        AnalyzedCommit(sha="b", message="Style checkout button"),
    ]
    aggregate = AggregateAnalysis(total_commits=2, commits=commits)

    ideas = generate_post_ideas(aggregate)

    assert _types(ideas) == ["focused_effort", "daily_summary"]
    assert ideas[0].metadata["theme"] == "checkout"
    assert ideas[1].metadata["theme"] == "checkout"


def test_commit_patterns_counts_iterations():
    """Summaries mentioning fixes or updates count as iterations."""
    commits = [
        AnalyzedCommit(sha="a", message="fix login redirect\n\ndetails"),
        AnalyzedCommit(sha="b", message="update deps"),
        AnalyzedCommit(sha="c", message="new login page"),
    ]

    patterns = analyze_commit_patterns(commits)

    assert patterns.theme == "login"
    assert patterns.iterations == 2


def test_time_span():
    """Spread between first and last commit."""
    start = datetime(2024, 1, 15, 9, tzinfo=timezone.utc)

    def at(hours):
        return AnalyzedCommit(sha=str(hours), date=start + timedelta(hours=hours))

    assert calculate_time_span([]) == "unknown"
    assert calculate_time_span([at(0), at(1)]) == "concentrated burst"
    assert calculate_time_span([at(0), at(3)]) == "morning/afternoon"
    assert calculate_time_span([at(0), at(8)]) == "full day"


def test_work_pattern():
    """Commit count and weight describe the working style."""
    assert detect_work_pattern(100, 20) == "iterative"
    assert detect_work_pattern(900, 2) == "big changes"
    assert detect_work_pattern(300, 8) == "steady progress"
