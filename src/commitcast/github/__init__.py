"""GitHub data source."""

from commitcast.github.client import GitHubClient, validate_repo

__all__ = ["GitHubClient", "validate_repo"]
