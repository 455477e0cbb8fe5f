"""Commit analysis, aggregation and context extraction."""

from commitcast.analysis.commit_analyzer import (
    analyze_commit,
    analyze_commit_record,
    analyze_multiple_commits,
    classify_impact,
)
from commitcast.analysis.context import (
    extract_specific_context,
    format_specific_context,
    get_primary_tech,
)
from commitcast.analysis.features import (
    FALLBACK_FEATURE,
    extract_feature,
    extract_feature_from_messages,
)

__all__ = [
    "analyze_commit",
    "analyze_commit_record",
    "analyze_multiple_commits",
    "classify_impact",
    "extract_specific_context",
    "format_specific_context",
    "get_primary_tech",
    "extract_feature",
    "extract_feature_from_messages",
    "FALLBACK_FEATURE",
]
