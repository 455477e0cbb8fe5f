"""Unified diff parsing."""

from typing import List, Optional

from commitcast.models import DiffLine

FILE_HEADER_PREFIXES = ("+++", "---")


def parse_patch(patch: Optional[str]) -> List[DiffLine]:
    """Split a unified diff into added and removed lines.

    Context lines, hunk headers and the ``+++``/``---`` file headers are
    dropped. The marker character and surrounding whitespace are stripped
    from each kept line.

    Args:
        patch: Unified diff text, or None for files without a patch

    Returns:
        DiffLine records in patch order
    """
    if not patch:
        return []

    lines = []
    for raw in patch.split("\n"):
        if raw.startswith(FILE_HEADER_PREFIXES):
            continue
        if raw.startswith("+"):
            lines.append(DiffLine(kind="addition", text=raw[1:].strip()))
        elif raw.startswith("-"):
            lines.append(DiffLine(kind="deletion", text=raw[1:].strip()))
    return lines


def added_lines(patch: Optional[str]) -> List[str]:
    """Text of the added lines in a patch."""
    return [line.text for line in parse_patch(patch) if line.kind == "addition"]
