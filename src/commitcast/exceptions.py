"""Errors raised by the collaborators around the analysis core."""

from typing import Optional


class CommitCastError(Exception):
    """Base class for all CommitCast errors."""

    def __init__(self, message: str, detail: Optional[str] = None) -> None:
        self.message = message
        self.detail = detail
        super().__init__(message if detail is None else f"{message}: {detail}")


class GitHubAPIError(CommitCastError):
    """A GitHub REST call failed."""

    def __init__(self, status_code: int, detail: Optional[str] = None) -> None:
        self.status_code = status_code
        super().__init__(f"GitHub API error ({status_code})", detail)


class GitHubNotFoundError(GitHubAPIError):
    """The requested user, repository or commit does not exist."""

    def __init__(self, detail: Optional[str] = None) -> None:
        super().__init__(404, detail)


class LLMError(CommitCastError):
    """The rewrite model call failed."""

    def __init__(self, detail: Optional[str] = None) -> None:
        super().__init__("LLM call failed", detail)


class ValidationError(CommitCastError):
    """Invalid caller input."""

    def __init__(self, detail: Optional[str] = None) -> None:
        super().__init__("Invalid input", detail)


class NoActivityError(CommitCastError):
    """No commits were found for the requested window."""

    def __init__(self, detail: Optional[str] = None) -> None:
        super().__init__("No recent activity", detail)
