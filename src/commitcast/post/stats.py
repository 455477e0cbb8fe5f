"""Stats summaries embedded in posts."""

from typing import Mapping

from commitcast.models import AggregateAnalysis, RiskLevel
from commitcast.post.emoji import get_celebration_emoji, get_impact_emoji

STATS_STYLES = ("compact", "detailed", "minimal", "none")

SIGNAL_SHORT_NAMES = {
    "async_change": "async patterns",
    "networking_change": "API work",
    "error_handling_change": "error handling",
    "test_change": "testing",
    "promise_change": "promises",
    "function_change": "refactoring",
    "import_change": "dependencies",
    "class_change": "architecture",
    "logging_change": "logging",
    "jsx_change": "React",
    "vue_change": "Vue",
    "doc_image_change": "documentation",
    "doc_heading_change": "docs structure",
    "env_variable_change": "configuration",
}


def short_signal_name(signal: str) -> str:
    return SIGNAL_SHORT_NAMES.get(signal, signal.replace("_", " "))


def _top_signals(signals: Mapping[str, int], limit: int):
    return sorted(signals.items(), key=lambda item: item[1], reverse=True)[:limit]


def generate_stats_widget(
    aggregate: AggregateAnalysis, style: str = "compact", use_emojis: bool = True
) -> str:
    """Stats block in one of the ``compact``, ``detailed`` or ``minimal`` styles."""
    commits = aggregate.total_commits
    files = aggregate.total_files_changed

    if style == "none":
        return ""

    if style == "minimal":
        if use_emojis:
            return f"{get_celebration_emoji(commits, files)} {commits} commits, {files} files"
        return f"{commits} commits, {files} files"

    if style == "detailed":
        top = [short_signal_name(s) for s, _ in _top_signals(aggregate.signals, 3)]
        high_risk = aggregate.impacts.get(RiskLevel.HIGH_RISK, 0)
        if use_emojis:
            lines = [
                "📊 Today's Work Summary:",
                f"   • {commits} commits pushed",
                f"   • {files} files modified",
                f"   • {aggregate.total_weight} lines changed",
            ]
            if top:
                lines.append(f"   • Focus: {', '.join(top)}")
            if high_risk > 0:
                lines.append(f"   🔴 {high_risk} high-impact changes")
        else:
            lines = [
                "Today's Work Summary:",
                f"- {commits} commits",
                f"- {files} files",
                f"- {aggregate.total_weight} lines changed",
            ]
            if top:
                lines.append(f"- Focus areas: {', '.join(top)}")
        return "\n".join(lines)

    areas = len(aggregate.signals)
    if use_emojis:
        return f"📊 {commits} commits • {files} files • {areas} focus areas"
    return f"{commits} commits | {files} files | {areas} focus areas"


def generate_inline_stats(commits: int, files: int) -> str:
    noun = "file" if files == 1 else "files"
    if commits == 1:
        return f"1 commit, {files} {noun}"
    return f"{commits} commits across {files} {noun}"


def generate_progress_bar(percentage: int, width: int = 10) -> str:
    filled = int(percentage / 100 * width + 0.5)
    return f"[{'█' * filled}{'░' * (width - filled)}] {percentage}%"


def generate_impact_summary(impacts: Mapping[RiskLevel, int], use_emojis: bool = True) -> str:
    labels = (
        (RiskLevel.HIGH_RISK, "critical", "high-impact"),
        (RiskLevel.MEDIUM_RISK, "moderate", "medium-impact"),
        (RiskLevel.LOW_RISK, "minor", "low-impact"),
    )
    parts = []
    for level, emoji_label, plain_label in labels:
        count = impacts.get(level, 0)
        if count > 0:
            if use_emojis:
                parts.append(f"{get_impact_emoji(level)} {count} {emoji_label}")
            else:
                parts.append(f"{count} {plain_label}")
    return ", ".join(parts)


def generate_signal_breakdown(signals: Mapping[str, int], max_signals: int = 5) -> str:
    total = sum(signals.values())
    if total == 0:
        return ""
    return ", ".join(
        f"{short_signal_name(signal)} ({int(count / total * 100 + 0.5)}%)"
        for signal, count in _top_signals(signals, max_signals)
    )


def generate_complete_stats_section(
    aggregate: AggregateAnalysis,
    style: str = "compact",
    use_emojis: bool = True,
    include_breakdown: bool = False,
) -> str:
    """Widget plus optional signal breakdown and impact summary."""
    sections = [generate_stats_widget(aggregate, style, use_emojis)]

    if include_breakdown and aggregate.signals:
        sections.extend(["", generate_signal_breakdown(aggregate.signals, 3)])

    if (
        aggregate.impacts.get(RiskLevel.HIGH_RISK, 0) > 0
        or aggregate.impacts.get(RiskLevel.MEDIUM_RISK, 0) > 0
    ):
        sections.extend(["", generate_impact_summary(aggregate.impacts, use_emojis)])

    return "\n".join(sections)
