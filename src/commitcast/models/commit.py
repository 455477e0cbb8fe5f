"""Data models for commit records and their analysis."""

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from commitcast.models.signals import RiskLevel, SignalTag


class CommitFile(BaseModel):
    """A single file touched by a commit, as reported by the data source."""

    filename: str = Field(..., description="Path of the file in the repository")
    status: str = Field("modified", description="added, modified, removed, renamed, ...")
    additions: int = Field(0, ge=0, description="Number of lines added")
    deletions: int = Field(0, ge=0, description="Number of lines deleted")
    patch: Optional[str] = Field(None, description="Unified diff text, absent for binary files")


class CommitRecord(BaseModel):
    """A commit with its changed files."""

    sha: str = Field(..., description="Full commit SHA")
    message: str = Field("", description="Full commit message")
    author: str = Field("", description="Author name")
    date: Optional[datetime] = Field(None, description="Author timestamp")
    files: List[CommitFile] = Field(default_factory=list, description="Changed files")
    repo: Optional[str] = Field(None, description="owner/name of the source repository")

    class Config:
        """Pydantic config."""
        json_schema_extra = {
            "example": {
                "sha": "abc123def456",
                "message": "Add login flow\n\nUses the new session endpoint",
                "author": "Jane Doe",
                "date": "2024-01-15T10:30:00Z",
                "files": [
                    {
                        "filename": "src/auth.js",
                        "status": "modified",
                        "additions": 10,
                        "deletions": 2,
                        "patch": "@@ -1,2 +1,10 @@\n+async function login() {",
                    }
                ],
                "repo": "jane/app",
            }
        }

    @property
    def summary(self) -> str:
        """First line of the commit message."""
        return self.message.split("\n", 1)[0]

    @classmethod
    def from_github(cls, payload: Dict[str, Any], repo: Optional[str] = None) -> "CommitRecord":
        """Build a record from a GitHub "get a commit" response.

        Args:
            payload: Decoded JSON of ``GET /repos/{owner}/{repo}/commits/{sha}``
            repo: owner/name the commit was fetched from

        Returns:
            CommitRecord
        """
        commit = payload.get("commit") or {}
        author = commit.get("author") or {}
        return cls.model_validate(
            {
                "sha": payload.get("sha"),
                "message": commit.get("message") or "",
                "author": author.get("name") or "",
                "date": author.get("date"),
                "files": payload.get("files") or [],
                "repo": repo,
            }
        )


class DiffLine(BaseModel):
    """An added or removed line from a unified diff."""

    kind: Literal["addition", "deletion"]
    text: str


class FileChangeSummary(BaseModel):
    """Signals detected in one file of a commit."""

    path: str = Field(..., description="Path of the file")
    status: str = Field("modified", description="Change status reported for the file")
    signals: List[SignalTag] = Field(default_factory=list, description="Distinct signal tags")
    weight: int = Field(0, ge=0, description="additions + deletions")


class CommitAnalysis(BaseModel):
    """Totals and impact for a single commit."""

    total_files_changed: int = 0
    total_weight: int = 0
    signals: Dict[str, int] = Field(default_factory=dict, description="Files per signal tag")
    impact: RiskLevel = RiskLevel.LOW_RISK


class AnalyzedCommit(CommitAnalysis):
    """Commit analysis carrying the original commit metadata."""

    sha: str = ""
    message: str = ""
    author: str = ""
    date: Optional[datetime] = None
    files: List[CommitFile] = Field(default_factory=list)
    repo: Optional[str] = None


def _empty_impacts() -> Dict[RiskLevel, int]:
    return {level: 0 for level in RiskLevel}


class AggregateAnalysis(BaseModel):
    """Batch-level totals across many commits."""

    total_commits: int = 0
    total_files_changed: int = 0
    total_weight: int = 0
    signals: Dict[str, int] = Field(default_factory=dict)
    impacts: Dict[RiskLevel, int] = Field(default_factory=_empty_impacts)
    commits: List[AnalyzedCommit] = Field(default_factory=list)
    repos: List[str] = Field(default_factory=list, description="Distinct repositories, input order")

    @property
    def repo_count(self) -> int:
        return len(self.repos)


class SpecificContext(BaseModel):
    """Concrete names pulled out of commit messages and diffs."""

    libraries: List[str] = Field(default_factory=list, max_length=5)
    functions: List[str] = Field(default_factory=list, max_length=5)
    modules: List[str] = Field(default_factory=list, max_length=5)
    keywords: List[str] = Field(default_factory=list, max_length=8)


class Idea(BaseModel):
    """A candidate narrative angle for a post."""

    type: str = Field(..., description="Narrative category, e.g. learning or quality")
    angle: str = Field(..., description="Specific angle within the category")
    title: str
    description: str
    relevance_score: float = Field(..., description="Higher ranks first")
    metadata: Dict[str, Any] = Field(default_factory=dict)
    hooks: List[str] = Field(default_factory=list, description="Candidate opening lines")
