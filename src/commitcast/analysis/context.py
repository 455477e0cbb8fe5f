"""Specific context: libraries, functions, modules and keywords."""

import re
from typing import Iterable, List, Optional

from commitcast.extraction import added_lines
from commitcast.models import CommitRecord, SpecificContext

MAX_LIBRARIES = 5
MAX_FUNCTIONS = 5
MAX_MODULES = 5
MAX_KEYWORDS = 8

TECH_PATTERNS = [
    re.compile(p)
    for p in (
        # auth and security
        r"\b(auth|authentication|authorization|oauth|jwt|token|session|cookie|passport|bcrypt|argon2)\b",
        # payments
        r"\b(stripe|payment|checkout|billing|subscription|invoice|paypal|square)\b",
        # databases
        r"\b(postgres|mysql|mongodb|redis|prisma|sequelize|typeorm|mongoose|database|sql)\b",
        # apis and networking
        r"\b(api|endpoint|route|rest|graphql|webhook|http|axios|fetch|request)\b",
        # frontend
        r"\b(react|vue|angular|next|nuxt|component|hook|state|redux|zustand)\b",
        # backend
        r"\b(express|fastify|nest|koa|middleware|server|node|deno)\b",
        # testing
        r"\b(jest|mocha|vitest|cypress|playwright|test|testing|unit|integration)\b",
        # devops
        r"\b(docker|kubernetes|ci/cd|github\s+actions|deployment|terraform)\b",
        # other
        r"\b(websocket|socket\.io|real-?time|async|promise|cache|queue)\b",
    )
]
QUOTED_PATTERN = re.compile(r"[\"']([^\"']+)[\"']")

ES_IMPORT = re.compile(r"import\s+.*\s+from\s+['\"]([^'\"]+)['\"]")
BARE_IMPORT = re.compile(r"^import\s+['\"]([^'\"]+)['\"]")
REQUIRE = re.compile(r"require\s*\(\s*['\"]([^'\"]+)['\"]\s*\)")
PY_FROM_IMPORT = re.compile(r"^from\s+([A-Za-z_][\w.]*)\s+import\b")
PY_IMPORT = re.compile(r"^import\s+([A-Za-z_][\w.]*)")

NAME = r"[A-Za-z_$][\w$]*"
FUNCTION_PATTERNS = [
    re.compile(rf"function\s+({NAME})\s*\("),
    re.compile(rf"const\s+({NAME})\s*=\s*(?:async\s*)?\("),
    re.compile(rf"class\s+({NAME})"),
    re.compile(r"def\s+([A-Za-z_]\w*)\s*\("),
    re.compile(rf"(?:async\s+)?({NAME})\s*\([^)]*\)\s*{{"),
]
CONTROL_KEYWORDS = frozenset({"if", "for", "while", "switch", "catch", "function", "return"})
EXCLUDED_NAME_PARTS = ("test", "mock", "example")
MIN_NAME_LENGTH = 4

GENERIC_PACKAGES = frozenset({"src", "lib", "utils", "components", "helpers", "types", "constants"})
ROOT_DIRECTORIES = frozenset({"src", "lib", "dist", "build", "app", "pages"})

KNOWN_LIBRARIES = (
    "next-auth", "nextauth", "prisma", "stripe", "react", "next", "express",
    "fastify", "postgresql", "mongodb", "redis", "jwt", "bcrypt",
)


def _add_unique(target: List[str], items: Iterable[str]) -> None:
    for item in items:
        if item not in target:
            target.append(item)


def clean_library_name(raw: str) -> Optional[str]:
    """Normalise an import specifier to its package name.

    Relative specifiers and generic directory names give None.
    ``@scope/pkg/sub`` keeps the scope; ``pkg/sub`` collapses to ``pkg``.
    """
    if raw.startswith((".", "/")):
        return None

    if raw.startswith("@"):
        return "/".join(raw.split("/")[:2])

    package = raw.split("/")[0]
    if package in GENERIC_PACKAGES:
        return None
    return package


def extract_libraries(lines: Iterable[str]) -> List[str]:
    """Package names imported or required by the given source lines."""
    libraries: List[str] = []

    for line in lines:
        match = ES_IMPORT.search(line) or BARE_IMPORT.search(line) or REQUIRE.search(line)
        if match:
            name = clean_library_name(match.group(1))
        else:
            match = PY_FROM_IMPORT.search(line) or PY_IMPORT.search(line)
            if not match:
                continue
            name = match.group(1).split(".")[0]
            if name in GENERIC_PACKAGES:
                name = None

        if name:
            _add_unique(libraries, [name])

    return libraries


def extract_function_names(lines: Iterable[str]) -> List[str]:
    """Function, method and class names declared in the given lines.

    Names containing test/mock/example and names shorter than four
    characters are skipped.
    """
    names: List[str] = []

    for line in lines:
        for pattern in FUNCTION_PATTERNS:
            match = pattern.search(line)
            if match and match.group(1) not in CONTROL_KEYWORDS:
                _add_unique(names, [match.group(1)])
                break

    return [
        name
        for name in names
        if len(name) >= MIN_NAME_LENGTH
        and not any(part in name.lower() for part in EXCLUDED_NAME_PARTS)
    ]


def extract_module_path(filepath: str) -> Optional[str]:
    """Last one or two meaningful segments of a file path, without extension."""
    if not filepath:
        return None

    without_ext = re.sub(r"\.[^/.]+$", "", filepath)
    segments = [s for s in without_ext.split("/") if s and s not in ROOT_DIRECTORIES]
    if not segments:
        return None
    return "/".join(segments[-2:])


def extract_keywords_from_message(message: str) -> List[str]:
    """Technical terms and quoted phrases from a commit message."""
    if not message:
        return []

    keywords: List[str] = []
    normalized = message.lower()

    for pattern in TECH_PATTERNS:
        _add_unique(keywords, (m.strip() for m in pattern.findall(normalized)))

    _add_unique(
        keywords,
        (q.strip() for q in QUOTED_PATTERN.findall(message) if len(q.strip()) > 3),
    )
    return keywords


def extract_specific_context(commits: Iterable[CommitRecord]) -> SpecificContext:
    """Collect concrete names from commit messages and added diff lines.

    Args:
        commits: Commits with their files

    Returns:
        SpecificContext, each list truncated in first-seen order
    """
    libraries: List[str] = []
    functions: List[str] = []
    modules: List[str] = []
    keywords: List[str] = []

    for commit in commits:
        _add_unique(keywords, extract_keywords_from_message(commit.message))

        for file in commit.files:
            module = extract_module_path(file.filename)
            if module:
                _add_unique(modules, [module])

            if file.patch:
                lines = added_lines(file.patch)
                _add_unique(libraries, extract_libraries(lines))
                _add_unique(functions, extract_function_names(lines))

    return SpecificContext(
        libraries=libraries[:MAX_LIBRARIES],
        functions=functions[:MAX_FUNCTIONS],
        modules=modules[:MAX_MODULES],
        keywords=keywords[:MAX_KEYWORDS],
    )


def format_specific_context(context: SpecificContext) -> str:
    """Short phrase such as ``using react, built loginUser, in api/auth``."""
    parts = []

    if context.libraries:
        parts.append(f"using {', '.join(context.libraries[:3])}")
    if context.functions:
        parts.append(f"built {' and '.join(context.functions[:2])}")
    if context.modules:
        parts.append(f"in {' and '.join(context.modules[:2])}")

    return ", ".join(parts)


def get_primary_tech(context: SpecificContext) -> Optional[str]:
    """Most recognisable library, else the first library or keyword."""
    for lib in context.libraries:
        if any(known in lib.lower() for known in KNOWN_LIBRARIES):
            return lib

    if context.libraries:
        return context.libraries[0]
    if context.keywords:
        return context.keywords[0]
    return None
