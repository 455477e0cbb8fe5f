"""Template-based draft composition."""

from typing import List, Optional

from commitcast.extraction import file_extension
from commitcast.models import AggregateAnalysis, Idea, RiskLevel, SignalTag
from commitcast.models.signals import readable_signal

EXTENSION_LABELS = {
    "js": "JavaScript",
    "ts": "TypeScript",
    "jsx": "React",
    "tsx": "React/TS",
    "md": "docs",
    "json": "config",
    "css": "styles",
    "scss": "styles",
}

KEY_CHANGE_PRIORITY = (
    SignalTag.ASYNC,
    SignalTag.NETWORKING,
    SignalTag.ERROR_HANDLING,
    SignalTag.TEST,
    SignalTag.PROMISE,
    SignalTag.FUNCTION,
    SignalTag.IMPORT,
)

CONTEXTS = {
    "focused_technical": (
        "The codebase was inconsistent - some files using one pattern, others using another. "
        "Better to fix it all at once than let it drift further apart."
    ),
    "learning": (
        "Async JavaScript still catches me sometimes. You think you understand it, then you hit "
        "a race condition or an unhandled rejection that reminds you there's always more to learn."
    ),
    "build_in_public": (
        "Good documentation is the difference between someone understanding your project in "
        "5 minutes versus giving up and moving on. Worth the investment."
    ),
    "technical_decision": (
        "These changes needed testing, double-checking, and a clear rollback plan. Engineering "
        "isn't just about making things work - it's about making sure they keep working."
    ),
    "engineering_practice": (
        "The refactor was overdue. Code had accumulated enough cruft that adding new features "
        "was getting harder. Sometimes you need to stop and clean house."
    ),
    "quality": (
        "Tests are insurance. They don't prevent bugs, but they catch them before users do. "
        "And they let you refactor with confidence."
    ),
}

REFLECTIONS = {
    "daily_summary": (
        "Not every day needs to be about shipping features. "
        "Sometimes it's about making the foundation stronger."
    ),
    "focused_technical": "Consistency compounds. Fix patterns once, benefit every time you touch that code.",
    "learning": "Still learning. Always will be. That's why this work stays interesting.",
    "build_in_public": "Documentation is code. Treat it with the same care.",
    "technical_decision": (
        "Good engineering is mostly boring. It's careful, measured, and defensive. "
        "That's what makes it reliable."
    ),
    "engineering_practice": (
        "Refactoring feels indulgent until you try to add a feature to messy code. "
        "Then it feels essential."
    ),
    "quality": "The best code is the code that works when you're not watching.",
    "variety": (
        "Full-stack work keeps you sharp. You can't hide behind specialization "
        "when you're responsible for everything."
    ),
}
DEFAULT_REFLECTION = "Progress over perfection. Ship it, learn from it, improve it."


def extract_file_types(aggregate: AggregateAnalysis) -> List[str]:
    """Display names of the file types touched, first-seen order."""
    labels: List[str] = []
    for commit in aggregate.commits:
        for f in commit.files:
            ext = file_extension(f.filename)
            if not ext or len(ext) >= 5:
                continue
            label = EXTENSION_LABELS.get(ext, ext)
            if label not in labels:
                labels.append(label)
    return labels


def extract_key_changes(aggregate: AggregateAnalysis) -> List[str]:
    return [
        readable_signal(tag)
        for tag in KEY_CHANGE_PRIORITY
        if aggregate.signals.get(tag.value)
    ]


def build_hook(idea: Idea, aggregate: AggregateAnalysis) -> str:
    commits = aggregate.total_commits

    if idea.type == "daily_summary":
        if commits > 10:
            return (
                f"{commits} commits today. One of those days where you look up "
                "and realize you've been in the zone for hours."
            )
        return f"Wrapped up today with {commits} commits."
    if idea.type == "focused_technical":
        return f"Spent most of today deep in {readable_signal(idea.metadata['signal'])}."
    if idea.type == "learning":
        return "Hit a learning curve today with async patterns."
    if idea.type == "build_in_public":
        return "Took a step back from features today to focus on documentation."
    if idea.type == "technical_decision":
        return "Made some decisions today that needed more thought than usual."
    if idea.type == "engineering_practice":
        return f"{aggregate.total_weight} lines changed across {commits} commits. Big refactor day."
    if idea.type == "quality":
        return "Testing day. Not the most glamorous work, but necessary."
    if idea.type == "variety":
        return "Full-stack kind of day."
    if idea.type == "focused_effort":
        return f"Today's commits all pointed at one thing: {idea.metadata.get('theme')}."
    return "Made progress today."


def build_narrative(idea: Idea, aggregate: AggregateAnalysis) -> str:
    meta = idea.metadata

    if idea.type == "daily_summary":
        file_types = ", ".join(extract_file_types(aggregate)[:3]) or "code"
        key_changes = extract_key_changes(aggregate)
        main_theme = key_changes[0] if key_changes else "Various improvements"
        return (
            f"Touched {aggregate.total_files_changed} files - mostly {file_types}. "
            f"{main_theme} was the main theme."
        )
    if idea.type == "focused_technical":
        return (
            f"{meta['count']} separate instances of {readable_signal(meta['signal'])} across the "
            "codebase. Started with one file, realized the pattern was everywhere, ended up "
            "doing a systematic pass."
        )
    if idea.type == "learning":
        return (
            f"Working with {meta.get('async_changes', 0)} async changes and "
            f"{meta.get('promise_changes', 0)} promise updates. The tricky part isn't writing "
            "async code - it's handling all the edge cases when things don't resolve as expected."
        )
    if idea.type == "build_in_public":
        return (
            f"{meta['doc_changes']} documentation updates. Added examples, fixed outdated "
            "sections, made sure the README actually reflects what the project does now."
        )
    if idea.type == "technical_decision":
        high_risk = meta.get("high_risk_commits", aggregate.impacts.get(RiskLevel.HIGH_RISK, 0))
        return (
            f"{high_risk} commits that touched networking or environment config. These aren't "
            "the kind of changes you make lightly - one wrong env variable and things break "
            "in production."
        )
    if idea.type == "engineering_practice":
        return (
            f'What started as "let me just clean this up" turned into {aggregate.total_commits} '
            f"commits and {aggregate.total_weight} lines of changes. Sometimes you pull one "
            "thread and the whole sweater unravels - in a good way."
        )
    if idea.type == "quality":
        return (
            f"Added and updated {meta['test_changes']} tests. The kind of work that doesn't show "
            "up in demos but saves hours of debugging later."
        )
    if idea.type == "variety":
        areas = ", ".join(readable_signal(s) for s in list(aggregate.signals)[:4])
        return (
            f"Jumped between {areas}. One of those days where you're touching everything "
            "from frontend to infrastructure."
        )
    return "Working through the backlog, one commit at a time."


def build_context(idea: Idea) -> Optional[str]:
    return CONTEXTS.get(idea.type)


def build_reflection(idea: Idea) -> str:
    return REFLECTIONS.get(idea.type, DEFAULT_REFLECTION)


def build_focus(feature: Optional[str]) -> Optional[str]:
    return f"Main focus: {feature}." if feature else None


def compose_post(idea: Idea, aggregate: AggregateAnalysis, feature: Optional[str] = None) -> str:
    """Render a draft post for an idea.

    Args:
        idea: The chosen idea
        aggregate: Batch-level analysis the idea was derived from
        feature: Feature label for the batch, named after the narrative

    Returns:
        Hook, narrative, focus, optional context and reflection separated
        by blank lines
    """
    parts = [
        build_hook(idea, aggregate),
        build_narrative(idea, aggregate),
        build_focus(feature),
        build_context(idea),
        build_reflection(idea),
    ]
    return "\n\n".join(p for p in parts if p)
