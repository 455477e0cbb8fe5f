"""Per-commit signal extraction."""

from typing import List, Sequence

import structlog

from commitcast.extraction.classifiers import classifier_for
from commitcast.extraction.diff_parser import parse_patch
from commitcast.models import CommitFile, CommitRecord, FileChangeSummary, SignalTag

logger = structlog.get_logger(__name__)


def summarize_file(file: CommitFile, signals: Sequence[SignalTag]) -> FileChangeSummary:
    """Package a file's detected signals with its change weight."""
    return FileChangeSummary(
        path=file.filename,
        status=file.status,
        signals=list(signals),
        weight=file.additions + file.deletions,
    )


def extract_commit_signals(commit: CommitRecord) -> List[FileChangeSummary]:
    """Classify every file of a commit.

    Files without a patch, with an unsupported extension, or whose diff
    matches no rule are left out of the result.

    Args:
        commit: Commit with its changed files

    Returns:
        One summary per file that produced at least one signal, in file order
    """
    summaries = []

    for file in commit.files:
        if not file.patch:
            continue

        classify = classifier_for(file.filename)
        if classify is None:
            continue

        signals = classify(parse_patch(file.patch))
        logger.debug(
            "file_classified",
            sha=commit.sha[:7],
            file=file.filename,
            signals=[s.value for s in signals],
        )
        if not signals:
            continue

        summaries.append(summarize_file(file, signals))

    return summaries
