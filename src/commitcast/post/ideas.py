"""Post idea generation and ranking."""

from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence

from commitcast.models import AggregateAnalysis, AnalyzedCommit, Idea, RiskLevel, SignalTag
from commitcast.models.signals import DOC_SIGNALS, readable_signal

DOMINANT_SHARE = 0.40
LEARNING_THRESHOLD = 3
REFACTOR_WEIGHT = 500
REFACTOR_COMMITS = 5
TESTING_THRESHOLD = 2
VARIETY_THRESHOLD = 5

THEME_STOP_WORDS = frozenset({"the", "and", "for", "add", "update", "fix", "with", "from", "this", "that"})

LEARNING_SIGNALS = (SignalTag.ASYNC, SignalTag.ERROR_HANDLING, SignalTag.PROMISE)


@dataclass
class DominantSignal:
    signal: str
    count: int
    share: float

    @property
    def percentage(self) -> int:
        return int(self.share * 100 + 0.5)


@dataclass
class CommitPatterns:
    theme: Optional[str]
    consistency: float
    iterations: int


def _count(signals: Mapping[str, int], tag: SignalTag) -> int:
    return signals.get(tag.value, 0)


def find_dominant_signal(signals: Mapping[str, int]) -> Optional[DominantSignal]:
    """Most frequent signal and its share of all occurrences.

    Returns None when there are no signal occurrences.
    """
    total = sum(signals.values())
    if not signals or total == 0:
        return None

    signal, count = max(signals.items(), key=lambda item: item[1])
    return DominantSignal(signal=signal, count=count, share=count / total)


def analyze_commit_patterns(commits: Sequence[AnalyzedCommit]) -> CommitPatterns:
    """Find the most repeated word across commit summaries."""
    summaries = [c.message.split("\n", 1)[0].lower() for c in commits]
    words = Counter(
        word
        for summary in summaries
        for word in summary.split()
        if len(word) > 3 and word not in THEME_STOP_WORDS
    )

    theme: Optional[str] = None
    consistency = 0.0
    if words:
        theme, freq = words.most_common(1)[0]
        consistency = freq / len(commits)

    return CommitPatterns(
        theme=theme,
        consistency=consistency,
        iterations=sum(1 for s in summaries if "fix" in s or "update" in s),
    )


def calculate_time_span(commits: Sequence[AnalyzedCommit]) -> str:
    """Rough label for how spread out the commits were."""
    times = [c.date.timestamp() for c in commits if c.date is not None]
    if not times:
        return "unknown"

    hours = (max(times) - min(times)) / 3600
    if hours < 2:
        return "concentrated burst"
    if hours < 6:
        return "morning/afternoon"
    return "full day"


def detect_work_pattern(total_weight: int, total_commits: int) -> str:
    if total_commits > 15 and total_weight < 300:
        return "iterative"
    if total_commits < 5 and total_weight > 500:
        return "big changes"
    return "steady progress"


def _learning_indicators(commits: Sequence[AnalyzedCommit]) -> List[str]:
    messages = [c.message.lower() for c in commits]
    indicators = []
    if any("fix" in m or "correct" in m for m in messages):
        indicators.append("iterative fixes")
    if any("refactor" in m or "improve" in m for m in messages):
        indicators.append("improvements")
    return indicators


def _doc_files_updated(commits: Sequence[AnalyzedCommit]) -> List[str]:
    files: List[str] = []
    for commit in commits:
        for f in commit.files:
            if f.filename.endswith(".md") and f.filename not in files:
                files.append(f.filename)
    return files


def _refactor_reasons(signals: Mapping[str, int]) -> List[str]:
    reasons = []
    if _count(signals, SignalTag.FUNCTION) > 5:
        reasons.append("function organization")
    if _count(signals, SignalTag.IMPORT) > 3:
        reasons.append("dependency cleanup")
    if _count(signals, SignalTag.CLASS) > 2:
        reasons.append("class structure")
    return reasons


def _refactor_scope(signals: Mapping[str, int]) -> str:
    if len(signals) > 6:
        return "wide-ranging"
    if len(signals) > 3:
        return "targeted"
    return "focused"


def _day_areas(signals: Mapping[str, int]) -> List[str]:
    areas = []
    if _count(signals, SignalTag.JSX) or _count(signals, SignalTag.VUE):
        areas.append("frontend")
    if _count(signals, SignalTag.NETWORKING):
        areas.append("API layer")
    if _count(signals, SignalTag.TEST):
        areas.append("testing")
    if _count(signals, SignalTag.DOC_IMAGE) or _count(signals, SignalTag.DOC_HEADING):
        areas.append("documentation")
    return areas


def focused_work_idea(dominant: DominantSignal, commits: Sequence[AnalyzedCommit], pattern: str) -> Idea:
    name = readable_signal(dominant.signal)
    return Idea(
        type="focused_technical",
        angle=dominant.signal,
        title=f"Deep Work: {name}",
        description="A day spent focusing on one specific technical area",
        relevance_score=dominant.percentage,
        metadata={
            "signal": dominant.signal,
            "count": dominant.count,
            "percentage": dominant.percentage,
            "affected_commits": sum(1 for c in commits if c.signals.get(dominant.signal)),
            "pattern": pattern,
        },
        hooks=[
            f"{dominant.count} instances of {name} today",
            f"Spent the day deep in {name}",
            f"{name} everywhere I looked today",
        ],
    )


def learning_journey_idea(
    signals: Mapping[str, int], commits: Sequence[AnalyzedCommit], patterns: CommitPatterns
) -> Idea:
    return Idea(
        type="learning",
        angle="async_complexity",
        title="Learning in Public: Async Challenges",
        description="Share the real learning experience with async patterns",
        relevance_score=80,
        metadata={
            "async_changes": _count(signals, SignalTag.ASYNC),
            "error_handling": _count(signals, SignalTag.ERROR_HANDLING),
            "promise_changes": _count(signals, SignalTag.PROMISE),
            "iterations": patterns.iterations,
            "learning_indicators": _learning_indicators(commits),
        },
        hooks=[
            "Hit some async complexity today that made me think",
            "Async JavaScript still has surprises for me",
            "Learning curve day with promises and async/await",
        ],
    )


def documentation_idea(signals: Mapping[str, int], commits: Sequence[AnalyzedCommit], doc_count: int) -> Idea:
    doc_types = []
    if _count(signals, SignalTag.DOC_IMAGE):
        doc_types.append("images")
    if _count(signals, SignalTag.DOC_HEADING):
        doc_types.append("structure")
    if _count(signals, SignalTag.DOC_LINK):
        doc_types.append("links")

    return Idea(
        type="build_in_public",
        angle="documentation",
        title="Documentation Day: Making it Better",
        description="The often overlooked but crucial work of good docs",
        relevance_score=70,
        metadata={
            "doc_changes": doc_count,
            "types": doc_types,
            "files_updated": _doc_files_updated(commits),
        },
        hooks=[
            "Took a break from features to focus on docs",
            "Documentation day - not glamorous, but necessary",
            "Making sure the docs actually reflect reality",
        ],
    )


def risk_management_idea(signals: Mapping[str, int], impacts: Mapping[RiskLevel, int]) -> Idea:
    risk_factors = []
    if _count(signals, SignalTag.NETWORKING):
        risk_factors.append("API changes")
    if _count(signals, SignalTag.ENV_VARIABLE):
        risk_factors.append("env config")
    if _count(signals, SignalTag.ASYNC):
        risk_factors.append("async flow")

    safeguards = []
    if _count(signals, SignalTag.ERROR_HANDLING):
        safeguards.append("error handling")
    if _count(signals, SignalTag.TEST):
        safeguards.append("tests")

    return Idea(
        type="technical_decision",
        angle="risk_management",
        title="Careful Engineering: Managing Risk",
        description="Decisions that required extra thought and testing",
        relevance_score=90,
        metadata={
            "high_risk_commits": impacts.get(RiskLevel.HIGH_RISK, 0),
            "risk_factors": risk_factors,
            "safeguards": safeguards,
        },
        hooks=[
            "Made some changes today that needed extra care",
            "Not the kind of commits you make without thinking twice",
            "Engineering decisions that matter in production",
        ],
    )


def refactor_idea(total_weight: int, total_commits: int, signals: Mapping[str, int]) -> Idea:
    return Idea(
        type="engineering_practice",
        angle="refactoring",
        title=f"Big Refactor: {total_weight} Lines Changed",
        description="The story of cleaning up technical debt",
        relevance_score=85,
        metadata={
            "lines_changed": total_weight,
            "commits": total_commits,
            "reasons": _refactor_reasons(signals),
            "scope": _refactor_scope(signals),
        },
        hooks=[
            f"{total_weight} lines changed. Started small, ended up refactoring everything",
            "One of those refactors that keeps growing",
            "Sometimes you need to tear things down to build them better",
        ],
    )


def testing_idea(test_count: int) -> Idea:
    return Idea(
        type="quality",
        angle="testing",
        title="Testing Day: Building Confidence",
        description="The unglamorous work that prevents future headaches",
        relevance_score=75,
        metadata={"test_changes": test_count},
        hooks=[
            "Testing day. Not exciting, but necessary",
            "Adding the safety net before changing things",
            "Future me will thank present me for writing these tests",
        ],
    )


def full_stack_idea(signals: Mapping[str, int]) -> Idea:
    signal_types = len(signals)
    return Idea(
        type="variety",
        angle="full_stack",
        title=f"Full-Stack Day: {signal_types} Different Areas",
        description="Working across the entire stack in one day",
        relevance_score=65,
        metadata={"signal_types": signal_types, "areas": _day_areas(signals), "breadth": "high"},
        hooks=[
            "Full-stack day. Touched everything from UI to infrastructure",
            "One of those days where you context-switch constantly",
            "From frontend to backend and everything between",
        ],
    )


def infrastructure_idea(signals: Mapping[str, int]) -> Idea:
    challenges = []
    if _count(signals, SignalTag.NETWORKING):
        challenges.append("API integration")
    if _count(signals, SignalTag.ENV_VARIABLE):
        challenges.append("configuration")

    return Idea(
        type="technical_decision",
        angle="infrastructure",
        title=f"Infrastructure Work: {' & '.join(challenges)}",
        description="The behind-the-scenes technical work",
        relevance_score=80,
        metadata={"challenges": challenges, "complexity": "high"},
        hooks=[
            "Working on the stuff that doesn't show up in the UI",
            "Infrastructure changes - invisible but critical",
            "Making sure the foundation is solid",
        ],
    )


def daily_summary_idea(aggregate: AggregateAnalysis, patterns: CommitPatterns, time_span: str) -> Idea:
    commits = aggregate.total_commits
    files = aggregate.total_files_changed
    return Idea(
        type="daily_summary",
        angle="productivity",
        title=f"Daily Wrap: {commits} Commits",
        description="High-level overview of the day's work",
        relevance_score=50,
        metadata={
            "commits": commits,
            "files_changed": files,
            "total_weight": aggregate.total_weight,
            "time_span": time_span,
            "theme": patterns.theme or "mixed work",
        },
        hooks=[
            f"{commits} commits today. Productive day.",
            f"Wrapped up with {commits} commits across {files} files",
            "One of those days where you look up and it's already evening",
        ],
    )


def thematic_idea(patterns: CommitPatterns, commits: Sequence[AnalyzedCommit]) -> Idea:
    theme = patterns.theme
    return Idea(
        type="focused_effort",
        angle="thematic",
        title=f"Theme: {theme}",
        description="Work centered around a specific theme or feature",
        relevance_score=75,
        metadata={"theme": theme, "commits": len(commits), "consistency": patterns.consistency},
        hooks=[
            f"All commits today pointed in the same direction: {theme}",
            f"Focused session on {theme}",
            "When the commits tell a coherent story",
        ],
    )


def generate_post_ideas(aggregate: AggregateAnalysis) -> List[Idea]:
    """Evaluate every idea heuristic and rank the ideas that fire.

    A daily summary is always included, so the result is never empty.

    Args:
        aggregate: Batch-level analysis

    Returns:
        Ideas sorted by relevance score, highest first; ties keep
        generation order
    """
    signals: Dict[str, int] = aggregate.signals
    commits = aggregate.commits
    ideas: List[Idea] = []

    patterns = analyze_commit_patterns(commits)
    time_span = calculate_time_span(commits)
    work_pattern = detect_work_pattern(aggregate.total_weight, aggregate.total_commits)

    dominant = find_dominant_signal(signals)
    if dominant is not None and dominant.share > DOMINANT_SHARE:
        ideas.append(focused_work_idea(dominant, commits, work_pattern))

    if any(_count(signals, tag) > LEARNING_THRESHOLD for tag in LEARNING_SIGNALS):
        ideas.append(learning_journey_idea(signals, commits, patterns))

    doc_count = sum(_count(signals, tag) for tag in DOC_SIGNALS)
    if doc_count > 0:
        ideas.append(documentation_idea(signals, commits, doc_count))

    if aggregate.impacts.get(RiskLevel.HIGH_RISK, 0) > 0:
        ideas.append(risk_management_idea(signals, aggregate.impacts))

    if aggregate.total_weight > REFACTOR_WEIGHT and aggregate.total_commits > REFACTOR_COMMITS:
        ideas.append(refactor_idea(aggregate.total_weight, aggregate.total_commits, signals))

    if _count(signals, SignalTag.TEST) > TESTING_THRESHOLD:
        ideas.append(testing_idea(_count(signals, SignalTag.TEST)))

    if len(signals) >= VARIETY_THRESHOLD:
        ideas.append(full_stack_idea(signals))

    if _count(signals, SignalTag.NETWORKING) > 0 or _count(signals, SignalTag.ENV_VARIABLE) > 0:
        ideas.append(infrastructure_idea(signals))

    ideas.append(daily_summary_idea(aggregate, patterns, time_span))

    if patterns.theme:
        ideas.append(thematic_idea(patterns, commits))

    return sorted(ideas, key=lambda idea: idea.relevance_score, reverse=True)
