"""Pattern rules that map diff lines to signal tags."""

import re
from typing import Callable, Iterable, List, Optional, Pattern, Sequence, Tuple

from commitcast.models import DiffLine, SignalTag

Rule = Tuple[SignalTag, Sequence[Pattern[str]]]
Classifier = Callable[[Iterable[DiffLine]], List[SignalTag]]

CODE_RULES: Tuple[Rule, ...] = (
    (SignalTag.ASYNC, [re.compile(r"async|await")]),
    (
        SignalTag.ERROR_HANDLING,
        [
            re.compile(r"try\s*{"),
            re.compile(r"catch\s*\(.*\)\s*{"),
            re.compile(r"finally\s*{"),
        ],
    ),
    (SignalTag.NETWORKING, [re.compile(r"fetch\(|axios\.|http\.get\(|http\.post\(")]),
    (SignalTag.ENV_VARIABLE, [re.compile(r"process\.env")]),
    (SignalTag.TEST, [re.compile(r"describe\(|it\(|test\(")]),
    (
        SignalTag.FUNCTION,
        [
            re.compile(r"function\s+\w+\s*\(.*\)\s*{"),
            re.compile(r"\(.*\)\s*=>\s*{"),
        ],
    ),
    (SignalTag.CLASS, [re.compile(r"class\s+\w+\s*{")]),
    (
        SignalTag.IMPORT,
        [
            re.compile(r"import\s+.*\s+from\s+['\"].*['\"]"),
            re.compile(r"require\(['\"].*['\"]\)"),
        ],
    ),
    (SignalTag.LOGGING, [re.compile(r"console\.(?:log|error|warn)\(")]),
    (SignalTag.TODO_FIXME, [re.compile(r"//\s*(?:TODO|FIXME)")]),
    (SignalTag.PROMISE, [re.compile(r"new\s+Promise\(|\.then\(|\.catch\(")]),
)

# Doc rules run against the lower-cased line.
DOC_RULES: Tuple[Rule, ...] = (
    (SignalTag.DOC_HEADING, [re.compile(r"^#+\s")]),
    (
        SignalTag.DOC_IMAGE,
        [
            re.compile(r"github\.com/user-attachments"),
            re.compile(r"\.(?:png|jpg|jpeg|gif|svg)\b"),
        ],
    ),
    (SignalTag.DOC_TECH_STACK, [re.compile(r"built with|powered by")]),
    (SignalTag.DOC_LINK, [re.compile(r"^http")]),
    (SignalTag.DOC_FORMATTING, [re.compile(r"^\s*$")]),
)

CODE_EXTENSIONS = frozenset({"js", "jsx", "ts", "tsx", "mjs", "cjs"})
DOC_EXTENSIONS = frozenset({"md", "markdown", "mdx"})


def _apply_rules(texts: Iterable[str], rules: Sequence[Rule]) -> List[SignalTag]:
    found: List[SignalTag] = []
    for text in texts:
        for tag, patterns in rules:
            if tag in found:
                continue
            if any(pattern.search(text) for pattern in patterns):
                found.append(tag)
    return found


def classify_change(lines: Iterable[DiffLine]) -> List[SignalTag]:
    """Detect code signals in diff lines.

    Rules are independent; one line can yield several tags. Each tag
    appears once, in the order it was first seen.
    """
    return _apply_rules((line.text for line in lines), CODE_RULES)


def classify_doc_change(lines: Iterable[DiffLine]) -> List[SignalTag]:
    """Detect documentation signals in diff lines."""
    return _apply_rules((line.text.lower() for line in lines), DOC_RULES)


def file_extension(filename: str) -> str:
    """Lower-cased text after the last dot of the file name."""
    name = filename.rsplit("/", 1)[-1]
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[-1].lower()


def classifier_for(filename: str) -> Optional[Classifier]:
    """Pick the classifier for a file, or None for unsupported types."""
    ext = file_extension(filename)
    if ext in CODE_EXTENSIONS:
        return classify_change
    if ext in DOC_EXTENSIONS:
        return classify_doc_change
    return None
