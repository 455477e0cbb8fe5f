"""Data models for commit analysis and post generation."""

from commitcast.models.commit import (
    AggregateAnalysis,
    AnalyzedCommit,
    CommitAnalysis,
    CommitFile,
    CommitRecord,
    DiffLine,
    FileChangeSummary,
    Idea,
    SpecificContext,
)
from commitcast.models.config import (
    GitHubConfig,
    LLMConfig,
    RewriteConstraints,
    Settings,
    get_settings,
)
from commitcast.models.signals import RiskLevel, SignalTag

__all__ = [
    "CommitFile",
    "CommitRecord",
    "DiffLine",
    "FileChangeSummary",
    "CommitAnalysis",
    "AnalyzedCommit",
    "AggregateAnalysis",
    "SpecificContext",
    "Idea",
    "SignalTag",
    "RiskLevel",
    "GitHubConfig",
    "LLMConfig",
    "RewriteConstraints",
    "Settings",
    "get_settings",
]
