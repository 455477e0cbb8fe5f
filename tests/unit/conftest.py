"""Shared fixtures for unit tests."""

from datetime import datetime, timezone

import pytest

from commitcast.models import CommitFile, CommitRecord

LOGIN_PATCH = (
    "@@ -0,0 +1,2 @@\n"
    "+async function login() {\n"
    "+  try { await fetch('/api/login') } catch (e) {}"
)

README_PATCH = "@@ -1,1 +1,2 @@\n # Project\n+ ![screenshot](./img/shot.png)"


@pytest.fixture
def make_commit():
    """Factory for commit records."""

    def _make(sha="abc1234", message="Update code", files=None, repo="jane/app", date=None):
        return CommitRecord(
            sha=sha,
            message=message,
            author="Jane Doe",
            date=date or datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc),
            files=files or [],
            repo=repo,
        )

    return _make


@pytest.fixture
def login_file():
    """JavaScript file with async, error handling, networking and function changes."""
    return CommitFile(filename="src/auth.js", additions=10, deletions=2, patch=LOGIN_PATCH)


@pytest.fixture
def readme_file():
    """README with a single added screenshot."""
    return CommitFile(filename="README.md", additions=1, deletions=0, patch=README_PATCH)


@pytest.fixture
def login_commit(make_commit, login_file):
    """Commit touching only the login module."""
    return make_commit(sha="a1b2c3d4", message="Add login flow", files=[login_file])
