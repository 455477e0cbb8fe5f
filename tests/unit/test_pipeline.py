"""Tests for the end-to-end pipeline."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from commitcast.exceptions import GitHubAPIError, NoActivityError, ValidationError
from commitcast.models import RiskLevel
from commitcast.pipeline import PostGenerator, analyze_commits

SINCE = datetime(2024, 1, 15, tzinfo=timezone.utc)


@pytest.fixture
def github(login_commit):
    """Mock commit data source with one pushed repository."""
    github = MagicMock()
    github.list_recent_push_repos = AsyncMock(return_value=["jane/app"])
    github.list_commits_since = AsyncMock(return_value=[login_commit])
    return github


@pytest.fixture
def rewriter():
    """Mock rewriter that tags the draft with the tone."""
    rewriter = MagicMock()

    async def rewrite(draft, idea, facts, tone, constraints):
        return f"[{tone}] {draft} #BuildInPublic"

    rewriter.rewrite = AsyncMock(side_effect=rewrite)
    return rewriter


def test_analyze_commits(login_commit, make_commit, readme_file):
    """Report combines aggregate, context, feature and ideas."""
    report = analyze_commits([login_commit, make_commit(sha="d0c5", message="Docs", files=[readme_file])])

    assert report.aggregate.total_commits == 2
    assert report.aggregate.impacts[RiskLevel.HIGH_RISK] == 1
    assert report.aggregate.impacts[RiskLevel.LOW_RISK] == 1
    assert report.feature == "Authentication System"
    assert report.context.modules == ["auth", "README"]
    assert report.ideas[0].type == "technical_decision"
    assert report.ideas[-1].type == "daily_summary"


def test_analyze_no_commits():
    """An empty batch still produces a report."""
    report = analyze_commits([])

    assert report.aggregate.total_commits == 0
    assert report.feature == "Feature Development"
    assert [i.type for i in report.ideas] == ["daily_summary"]


@pytest.mark.asyncio
async def test_generate_one_post_per_tone(github, rewriter):
    """Each tone gets its own post from the top ideas."""
    generator = PostGenerator(github, rewriter)

    result = await generator.generate("jane", tones=["pro", "fun"], since=SINCE)

    assert [p.id for p in result.posts] == [1, 2]
    assert [p.tone for p in result.posts] == ["pro", "fun"]
    assert result.posts[0].content.startswith("[pro] ")
    assert result.posts[0].hashtags == ["#BuildInPublic"]
    assert result.posts[0].length == len(result.posts[0].content)
    assert rewriter.rewrite.call_count == 2

    facts = rewriter.rewrite.call_args.args[2]
    constraints = rewriter.rewrite.call_args.args[4]
    assert facts == {"commits": 1, "files_changed": 1}
    assert constraints.max_length == 1200
    github.list_commits_since.assert_awaited_once_with("jane/app", SINCE, author="jane")


@pytest.mark.asyncio
async def test_generate_without_rewriter(github):
    """Drafts are used as-is when no rewriter is configured."""
    generator = PostGenerator(github)

    result = await generator.generate("jane", tones=["pro"], post_length="quick", since=SINCE)

    post = result.posts[0]
    assert post.idea == "technical_decision"
    assert post.content.startswith("Made some decisions today")


@pytest.mark.asyncio
async def test_emoji_enrichment_marks_feature(github):
    """Emoji-enabled drafts decorate the feature label."""
    generator = PostGenerator(github)

    with_emoji = await generator.generate("jane", tones=["pro"], since=SINCE)
    without_emoji = await generator.generate("jane", tones=["pro"], use_emojis=False, since=SINCE)

    assert "Main focus: 🔐 authentication system." in with_emoji.posts[0].content
    assert "Main focus: Authentication System." in without_emoji.posts[0].content
    assert with_emoji.posts[0].content != without_emoji.posts[0].content


@pytest.mark.asyncio
async def test_ideas_cycle_when_tones_outnumber_ideas(github, rewriter, make_commit):
    """Ideas are reused round-robin."""
    github.list_commits_since = AsyncMock(return_value=[make_commit(message="wip")])
    generator = PostGenerator(github, rewriter)

    result = await generator.generate("jane", tones=["pro", "fun", "concise"], since=SINCE)

    assert [p.idea for p in result.posts] == ["daily_summary"] * 3


@pytest.mark.asyncio
async def test_multi_repo_inline_stats(github, make_commit, login_file, readme_file):
    """Posts covering several repositories mention the project count."""
    github.list_recent_push_repos = AsyncMock(return_value=["jane/app", "jane/docs"])
    github.list_commits_since = AsyncMock(
        side_effect=[
            [make_commit(sha="a", files=[login_file], repo="jane/app")],
            [make_commit(sha="b", files=[readme_file], repo="jane/docs")],
        ]
    )
    generator = PostGenerator(github)

    result = await generator.generate("jane", tones=["pro"], since=SINCE)

    assert "2 commits across 2 files across 2 projects" in result.posts[0].content


@pytest.mark.asyncio
async def test_failing_repo_is_skipped(github, login_commit):
    """One broken repository does not stop the run."""
    github.list_recent_push_repos = AsyncMock(return_value=["jane/broken", "jane/app"])
    github.list_commits_since = AsyncMock(side_effect=[GitHubAPIError(500), [login_commit]])
    generator = PostGenerator(github)

    commits = await generator.fetch_commits("jane", None, SINCE)

    assert commits == [login_commit]


@pytest.mark.asyncio
async def test_explicit_repo_skips_event_lookup(github):
    """A named repository is used directly."""
    generator = PostGenerator(github)

    await generator.fetch_commits("jane", "jane/app", SINCE)

    github.list_recent_push_repos.assert_not_called()


@pytest.mark.asyncio
async def test_no_push_activity(github):
    """No pushed repositories is reported as no activity."""
    github.list_recent_push_repos = AsyncMock(return_value=[])

    with pytest.raises(NoActivityError):
        await PostGenerator(github).generate("jane", since=SINCE)


@pytest.mark.asyncio
async def test_no_commits(github):
    """Repositories without commits are reported as no activity."""
    github.list_commits_since = AsyncMock(return_value=[])

    with pytest.raises(NoActivityError):
        await PostGenerator(github).generate("jane", since=SINCE)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "kwargs",
    [
        {"username": ""},
        {"username": "jane", "tones": []},
        {"username": "jane", "tones": ["pro"] * 11},
        {"username": "jane", "repo": "not-a-slug"},
    ],
)
async def test_generate_validation(github, kwargs):
    """Bad input is rejected before any fetch."""
    with pytest.raises(ValidationError):
        await PostGenerator(github).generate(**kwargs)

    github.list_commits_since.assert_not_called()
