"""Single-commit intent mapping and static post templates."""

from typing import Dict, Tuple

from commitcast.models import CommitAnalysis, RiskLevel, SignalTag

TEMPLATES: Dict[str, Dict[str, str]] = {
    "build_in_public": {
        "documentation_progress": (
            "Added documentation updates today 📘\n\n"
            "Sometimes small changes like better docs and visuals make a project 10x easier "
            "to understand.\nKeeping docs in sync with code is underrated but essential.\n\n"
            "What's one thing you document every time?"
        ),
        "tech_stack_update": (
            "Updated the tech stack mentions in the project 🛠️\n\n"
            "Being transparent about what powers your project helps others learn and "
            "contribute.\nEvery line of documentation matters.\n\n"
            "Building in public, one commit at a time."
        ),
    },
    "learning": {
        "async_patterns": (
            "Worked on async handling today.\n\n"
            "Promises and async/await look simple until edge cases show up.\n"
            "Refactoring with clearer async flows improved readability and error handling.\n\n"
            "Still learning, always improving."
        ),
    },
    "technical_decision": {
        "engineering_tradeoff": (
            "Made a technical change that required careful consideration today.\n\n"
            "Not all changes are about features. Some are about making future work safer "
            "and faster.\nThese decisions rarely show up in demos, but they matter most.\n\n"
            "Engineering is about trade-offs."
        ),
        "error_handling": (
            "Improved error handling today.\n\n"
            "Good error handling is invisible when it works, but saves hours when things "
            "break.\nEvery try-catch block is a future debugging session prevented.\n\n"
            "Defense in depth."
        ),
        "networking": (
            "Worked on network calls today.\n\n"
            "APIs are great until they're not. Proper error handling, retries, and timeouts "
            "matter.\nThe difference between a flaky app and a reliable one is how you "
            "handle failures.\n\nResilience by design."
        ),
        "large_change": (
            "Big refactor today. 500+ lines changed.\n\n"
            "Large changes are risky but sometimes necessary for long-term maintainability.\n"
            "Careful testing and incremental commits make big changes manageable.\n\n"
            "Progress over perfection."
        ),
    },
    "daily_update": {
        "small_win": (
            "Made progress today. Every change, big or small, is a step forward.\n\n"
            "Celebrating the wins and learning from the challenges.\n\n#DevLife"
        ),
    },
}


def map_intent(analysis: CommitAnalysis) -> Tuple[str, str]:
    """Pick ``(type, angle)`` for a single commit, first match wins."""
    signals = analysis.signals

    def has(*tags: SignalTag) -> bool:
        return any(signals.get(tag.value) for tag in tags)

    if has(SignalTag.DOC_IMAGE, SignalTag.DOC_LINK, SignalTag.DOC_HEADING):
        return "build_in_public", "documentation_progress"
    if has(SignalTag.DOC_TECH_STACK):
        return "build_in_public", "tech_stack_update"
    if analysis.impact == RiskLevel.HIGH_RISK:
        return "technical_decision", "engineering_tradeoff"
    if has(SignalTag.ASYNC, SignalTag.PROMISE):
        return "learning", "async_patterns"
    if has(SignalTag.ERROR_HANDLING):
        return "technical_decision", "error_handling"
    if has(SignalTag.NETWORKING):
        return "technical_decision", "networking"
    if analysis.total_weight > 500:
        return "technical_decision", "large_change"
    return "daily_update", "small_win"


def render_template(analysis: CommitAnalysis) -> str:
    """Static template post for a single commit's intent."""
    intent, angle = map_intent(analysis)
    return TEMPLATES[intent][angle]
