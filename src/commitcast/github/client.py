"""Async GitHub REST client used as the commit data source."""

import asyncio
import re
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import httpx
import structlog

from commitcast.exceptions import GitHubAPIError, GitHubNotFoundError, ValidationError
from commitcast.models import CommitRecord, GitHubConfig

logger = structlog.get_logger(__name__)

REPO_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+/[A-Za-z0-9_.-]+$")


def validate_repo(repo: str) -> str:
    """Check an ``owner/name`` repository slug.

    Raises:
        ValidationError: If the slug is malformed
    """
    repo = repo.strip().removesuffix(".git")
    if not REPO_PATTERN.match(repo):
        raise ValidationError(f"expected owner/name, got {repo!r}")
    return repo


def _iso(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class GitHubClient:
    """Fetches commits, repositories and push activity from GitHub."""

    def __init__(
        self,
        config: Optional[GitHubConfig] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: GitHub configuration (defaults to anonymous access)
            client: Pre-built httpx client, mainly for tests
        """
        self.config = config or GitHubConfig()
        self._client = client or httpx.AsyncClient(
            base_url=self.config.api_base,
            timeout=self.config.timeout,
        )
        self._semaphore = asyncio.Semaphore(self.config.max_concurrent_requests)

    async def __aenter__(self) -> "GitHubClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/vnd.github.v3+json"}
        if self.config.token:
            headers["Authorization"] = f"Bearer {self.config.token}"
        return headers

    async def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """GET a REST path and decode the JSON body.

        Raises:
            GitHubNotFoundError: On 404
            GitHubAPIError: On any other failure
        """
        try:
            async with self._semaphore:
                response = await self._client.get(path, headers=self._headers(), params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning("github_request_failed", path=path, status=status)
            if status == 404:
                raise GitHubNotFoundError(path) from e
            raise GitHubAPIError(status, e.response.text[:200]) from e
        except httpx.HTTPError as e:
            logger.warning("github_request_failed", path=path, error=str(e))
            raise GitHubAPIError(502, str(e)) from e

        return response.json()

    async def get_commit(self, repo: str, sha: str) -> CommitRecord:
        """Fetch one commit with its files and patches.

        Args:
            repo: owner/name
            sha: Commit SHA

        Returns:
            CommitRecord
        """
        repo = validate_repo(repo)
        data = await self._get(f"/repos/{repo}/commits/{sha}")
        return CommitRecord.from_github(data, repo=repo)

    async def list_commits_since(
        self,
        repo: str,
        since: datetime,
        author: Optional[str] = None,
    ) -> List[CommitRecord]:
        """Fetch detailed commits made after ``since``, merge commits excluded.

        Args:
            repo: owner/name
            since: Lower bound for the commit date
            author: GitHub login to filter by

        Returns:
            Commits in the order the API lists them (newest first)
        """
        repo = validate_repo(repo)
        params: Dict[str, Any] = {"since": _iso(since), "per_page": self.config.per_page}
        if author:
            params["author"] = author

        listing = await self._get(f"/repos/{repo}/commits", params=params)
        shas = [c["sha"] for c in listing if len(c.get("parents", [])) < 2]

        commits = await asyncio.gather(*(self.get_commit(repo, sha) for sha in shas))
        logger.info("commits_fetched", repo=repo, count=len(commits), since=_iso(since))
        return list(commits)

    async def list_user_repos(self, username: str) -> List[str]:
        """Full names of repositories owned by a user, most recently updated first."""
        data = await self._get(
            f"/users/{username}/repos",
            params={"type": "owner", "sort": "updated", "per_page": self.config.per_page},
        )
        repos = [r["full_name"] for r in data]
        logger.info("repos_fetched", username=username, count=len(repos))
        return repos

    async def list_recent_push_repos(self, username: str, since: datetime) -> List[str]:
        """Repositories the user pushed to after ``since``, from public events.

        Args:
            username: GitHub login
            since: Lower bound for the event time

        Returns:
            Distinct owner/name slugs, first-seen order
        """
        events = await self._get(
            f"/users/{username}/events/public", params={"per_page": self.config.per_page}
        )
        cutoff = since if since.tzinfo else since.replace(tzinfo=timezone.utc)

        repos: List[str] = []
        for event in events:
            if event.get("type") != "PushEvent":
                continue
            created = datetime.fromisoformat(event["created_at"].replace("Z", "+00:00"))
            if created < cutoff:
                continue
            name = event.get("repo", {}).get("name")
            if name and name not in repos:
                repos.append(name)
        return repos
