"""Diff parsing and change classification."""

from commitcast.extraction.classifiers import (
    classifier_for,
    classify_change,
    classify_doc_change,
    file_extension,
)
from commitcast.extraction.diff_parser import added_lines, parse_patch
from commitcast.extraction.signal_extractor import extract_commit_signals, summarize_file

__all__ = [
    "parse_patch",
    "added_lines",
    "classify_change",
    "classify_doc_change",
    "classifier_for",
    "file_extension",
    "summarize_file",
    "extract_commit_signals",
]
