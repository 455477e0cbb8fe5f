"""Signal tag vocabulary and risk levels."""

from enum import Enum
from typing import Dict, Tuple


class SignalTag(str, Enum):
    """Kinds of change recognised in diff lines."""

    # Code signals
    ASYNC = "async_change"
    ERROR_HANDLING = "error_handling_change"
    NETWORKING = "networking_change"
    ENV_VARIABLE = "env_variable_change"
    TEST = "test_change"
    FUNCTION = "function_change"
    CLASS = "class_change"
    IMPORT = "import_change"
    LOGGING = "logging_change"
    TODO_FIXME = "todo_fixme_change"
    PROMISE = "promise_change"

    # Documentation signals
    DOC_HEADING = "doc_heading_change"
    DOC_IMAGE = "doc_image_change"
    DOC_TECH_STACK = "doc_tech_stack_change"
    DOC_LINK = "doc_link_change"
    DOC_FORMATTING = "doc_formatting_change"

    # Referenced by the impact rules but not emitted by any classifier
    DOC_TEXT = "doc_text_change"
    CODE_FORMATTING = "code_formatting_change"
    COMMENT = "comment_change"

    # Referenced by idea/area helpers only
    JSX = "jsx_change"
    VUE = "vue_change"


class RiskLevel(str, Enum):
    """Impact bucket for a single commit."""

    HIGH_RISK = "HIGH_RISK"
    MEDIUM_RISK = "MEDIUM_RISK"
    LOW_RISK = "LOW_RISK"


DOC_SIGNALS: Tuple[SignalTag, ...] = (
    SignalTag.DOC_IMAGE,
    SignalTag.DOC_HEADING,
    SignalTag.DOC_LINK,
    SignalTag.DOC_TECH_STACK,
)

READABLE_SIGNALS: Dict[str, str] = {
    SignalTag.ASYNC.value: "async/await patterns",
    SignalTag.NETWORKING.value: "API calls",
    SignalTag.ERROR_HANDLING.value: "error handling",
    SignalTag.TEST.value: "testing",
    SignalTag.PROMISE.value: "promise handling",
    SignalTag.FUNCTION.value: "function refactoring",
    SignalTag.IMPORT.value: "dependency updates",
    SignalTag.CLASS.value: "class structures",
    SignalTag.LOGGING.value: "logging",
    SignalTag.JSX.value: "React components",
    SignalTag.VUE.value: "Vue components",
    SignalTag.DOC_IMAGE.value: "documentation images",
    SignalTag.DOC_HEADING.value: "documentation structure",
    SignalTag.DOC_LINK.value: "documentation links",
    SignalTag.ENV_VARIABLE.value: "environment config",
}


def readable_signal(signal: str) -> str:
    """Human-readable name for a signal tag."""
    key = signal.value if isinstance(signal, SignalTag) else signal
    return READABLE_SIGNALS.get(key, key.replace("_", " "))
