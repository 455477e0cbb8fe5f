"""Commit-level and batch-level analysis."""

from typing import Dict, List, Mapping, Sequence, Tuple

from commitcast.extraction import extract_commit_signals
from commitcast.models import (
    AggregateAnalysis,
    AnalyzedCommit,
    CommitAnalysis,
    CommitRecord,
    FileChangeSummary,
    RiskLevel,
    SignalTag,
)

# First matching rule wins. doc_text_change, code_formatting_change and
# comment_change are never emitted by the current classifiers.
IMPACT_RULES: Tuple[Tuple[Tuple[SignalTag, ...], RiskLevel], ...] = (
    ((SignalTag.NETWORKING, SignalTag.ENV_VARIABLE), RiskLevel.HIGH_RISK),
    ((SignalTag.ASYNC, SignalTag.ERROR_HANDLING, SignalTag.PROMISE), RiskLevel.MEDIUM_RISK),
    (
        (SignalTag.DOC_IMAGE, SignalTag.DOC_TEXT, SignalTag.CODE_FORMATTING, SignalTag.COMMENT),
        RiskLevel.LOW_RISK,
    ),
)

HIGH_WEIGHT_THRESHOLD = 500
MEDIUM_WEIGHT_THRESHOLD = 150


def classify_impact(signals: Mapping[str, int], weight: int) -> RiskLevel:
    """Resolve a commit's risk bucket.

    Signal rules are checked in order before the weight fallback.

    Args:
        signals: Files per signal tag
        weight: Total lines added and removed

    Returns:
        RiskLevel
    """
    for tags, level in IMPACT_RULES:
        if any(signals.get(tag.value, 0) > 0 for tag in tags):
            return level

    if weight > HIGH_WEIGHT_THRESHOLD:
        return RiskLevel.HIGH_RISK
    if weight > MEDIUM_WEIGHT_THRESHOLD:
        return RiskLevel.MEDIUM_RISK
    return RiskLevel.LOW_RISK


def analyze_commit(summaries: Sequence[FileChangeSummary]) -> CommitAnalysis:
    """Fold a commit's file summaries into totals and an impact level."""
    signal_count: Dict[str, int] = {}
    total_weight = 0

    for summary in summaries:
        total_weight += summary.weight
        for signal in summary.signals:
            signal_count[signal.value] = signal_count.get(signal.value, 0) + 1

    return CommitAnalysis(
        total_files_changed=len(summaries),
        total_weight=total_weight,
        signals=signal_count,
        impact=classify_impact(signal_count, total_weight),
    )


def analyze_commit_record(commit: CommitRecord) -> AnalyzedCommit:
    """Extract, analyze and attach the commit's metadata."""
    analysis = analyze_commit(extract_commit_signals(commit))
    return AnalyzedCommit(
        **analysis.model_dump(),
        sha=commit.sha,
        message=commit.message,
        author=commit.author,
        date=commit.date,
        files=commit.files,
        repo=commit.repo,
    )


def analyze_multiple_commits(analyses: Sequence[AnalyzedCommit]) -> AggregateAnalysis:
    """Aggregate per-commit analyses.

    Numeric fields are order independent; ``commits`` keeps input order.

    Args:
        analyses: Analyzed commits

    Returns:
        AggregateAnalysis
    """
    signals: Dict[str, int] = {}
    impacts: Dict[RiskLevel, int] = {level: 0 for level in RiskLevel}
    repos: List[str] = []
    total_files = 0
    total_weight = 0

    for analysis in analyses:
        total_files += analysis.total_files_changed
        total_weight += analysis.total_weight
        impacts[analysis.impact] += 1

        for signal, count in analysis.signals.items():
            signals[signal] = signals.get(signal, 0) + count

        if analysis.repo and analysis.repo not in repos:
            repos.append(analysis.repo)

    return AggregateAnalysis(
        total_commits=len(analyses),
        total_files_changed=total_files,
        total_weight=total_weight,
        signals=signals,
        impacts=impacts,
        commits=list(analyses),
        repos=repos,
    )
