"""Tests for commit models."""

import pytest
from pydantic import ValidationError

from commitcast.models import AggregateAnalysis, CommitFile, CommitRecord, RiskLevel, SignalTag
from commitcast.models.signals import readable_signal


def test_from_github_payload():
    """GitHub payload fields map onto the record."""
    payload = {
        "sha": "abc",
        "commit": {"message": "Fix bug\n\nLonger body", "author": {"name": "Jane"}},
        "files": [{"filename": "a.js"}],
    }

    commit = CommitRecord.from_github(payload, repo="jane/app")

    assert commit.summary == "Fix bug"
    assert commit.author == "Jane"
    assert commit.date is None
    assert commit.files[0].status == "modified"
    assert commit.files[0].additions == 0
    assert commit.repo == "jane/app"


def test_from_github_payload_missing_fields():
    """Payloads without a sha or file names raise a validation error."""
    with pytest.raises(ValidationError):
        CommitRecord.from_github({"commit": {"message": "x"}, "files": []})
    with pytest.raises(ValidationError):
        CommitRecord.from_github({"sha": "abc", "files": [{"status": "added"}]})


def test_negative_counts_rejected():
    """Line counts cannot be negative."""
    with pytest.raises(ValidationError):
        CommitFile(filename="a.js", additions=-1)


def test_aggregate_defaults():
    """Every impact bucket starts at zero."""
    aggregate = AggregateAnalysis()

    assert aggregate.impacts == {level: 0 for level in RiskLevel}
    assert aggregate.repo_count == 0


def test_readable_signal():
    """Known tags get friendly names, others are de-underscored."""
    assert readable_signal(SignalTag.NETWORKING) == "API calls"
    assert readable_signal("async_change") == "async/await patterns"
    assert readable_signal("todo_fixme_change") == "todo fixme change"
