"""End-to-end analysis and post generation."""

import re
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterable, List, Optional, Sequence

import structlog
from pydantic import BaseModel, Field

from commitcast.analysis import (
    analyze_commit_record,
    analyze_multiple_commits,
    extract_feature,
    extract_specific_context,
)
from commitcast.exceptions import CommitCastError, NoActivityError, ValidationError
from commitcast.github import GitHubClient, validate_repo
from commitcast.llm import DEFAULT_TONE, PostRewriter
from commitcast.models import (
    AggregateAnalysis,
    CommitRecord,
    Idea,
    RewriteConstraints,
    RiskLevel,
    SpecificContext,
)
from commitcast.models.config import max_length_for
from commitcast.post import compose_post, enrich_post_with_emojis, generate_inline_stats, generate_post_ideas

logger = structlog.get_logger(__name__)

MAX_TONES = 10
ACTIVITY_WINDOW = timedelta(hours=24)


class AnalysisReport(BaseModel):
    """Everything the analysis core produces for a batch of commits."""

    aggregate: AggregateAnalysis
    context: SpecificContext
    feature: str
    ideas: List[Idea]


class GeneratedPost(BaseModel):
    """One finished post."""

    id: int
    tone: str
    idea: str = Field(..., description="Idea type the post was built from")
    content: str
    length: int
    hashtags: List[str] = Field(default_factory=list)


class GenerationResult(BaseModel):
    username: str
    repo: Optional[str] = None
    tones: List[str]
    posts: List[GeneratedPost]
    report: AnalysisReport


def analyze_commits(commits: Iterable[CommitRecord]) -> AnalysisReport:
    """Run the analysis core over a batch of commits.

    Args:
        commits: Commit records with files and patches

    Returns:
        AnalysisReport with aggregate, specific context, feature label and
        ranked ideas
    """
    commits = list(commits)
    analyses = [analyze_commit_record(commit) for commit in commits]
    aggregate = analyze_multiple_commits(analyses)

    report = AnalysisReport(
        aggregate=aggregate,
        context=extract_specific_context(commits),
        feature=extract_feature(commits),
        ideas=generate_post_ideas(aggregate),
    )
    logger.info(
        "commits_analyzed",
        commits=aggregate.total_commits,
        files=aggregate.total_files_changed,
        weight=aggregate.total_weight,
        ideas=len(report.ideas),
    )
    return report


def _hashtags(text: str) -> List[str]:
    return re.findall(r"#\w+", text)


class PostGenerator:
    """Fetches recent commits and turns them into posts, one per tone."""

    def __init__(
        self,
        github: GitHubClient,
        rewriter: Optional[PostRewriter] = None,
        platform: str = "linkedin",
    ) -> None:
        """Initialize generator.

        Args:
            github: Commit data source
            rewriter: LLM rewriter; drafts are returned as-is when omitted
            platform: Target platform passed to the rewriter
        """
        self.github = github
        self.rewriter = rewriter
        self.platform = platform

    async def fetch_commits(
        self, username: str, repo: Optional[str], since: datetime
    ) -> List[CommitRecord]:
        """Collect the user's commits across the requested repositories.

        A repository that fails to load is logged and skipped.

        Raises:
            NoActivityError: If no repository or no commit is found
        """
        if repo:
            repos = [repo]
        else:
            repos = await self.github.list_recent_push_repos(username, since)
            if not repos:
                raise NoActivityError(f"no push activity for {username} since {since.isoformat()}")

        commits: List[CommitRecord] = []
        for current in repos:
            try:
                commits.extend(await self.github.list_commits_since(current, since, author=username))
            except CommitCastError as e:
                logger.warning("repo_skipped", repo=current, error=str(e))

        if not commits:
            raise NoActivityError(f"no commits for {username} since {since.isoformat()}")
        return commits

    async def generate(
        self,
        username: str,
        repo: Optional[str] = None,
        tones: Sequence[str] = ("pro", "fun", "concise"),
        use_emojis: bool = True,
        stats_style: str = "compact",
        post_length: str = "standard",
        since: Optional[datetime] = None,
    ) -> GenerationResult:
        """Build one post per tone from the user's recent commits.

        Args:
            username: GitHub login
            repo: Restrict to one owner/name repository
            tones: Tone names, 1 to 10 entries
            use_emojis: Decorate the feature mention with emoji
            stats_style: ``none`` suppresses the inline stats line
            post_length: quick, standard or detailed
            since: Start of the activity window (default: last 24 hours)

        Returns:
            GenerationResult

        Raises:
            ValidationError: On missing username or bad tone list
            NoActivityError: If there is nothing to write about
        """
        if not username:
            raise ValidationError("GitHub username is required")
        tones = list(tones)
        if not tones or len(tones) > MAX_TONES:
            raise ValidationError(f"between 1 and {MAX_TONES} tones required")
        if repo:
            repo = validate_repo(repo)

        if since is None:
            since = datetime.now(timezone.utc) - ACTIVITY_WINDOW

        commits = await self.fetch_commits(username, repo, since)
        report = analyze_commits(commits)
        posts = await self.write_posts(report, tones, use_emojis, stats_style, post_length)

        return GenerationResult(username=username, repo=repo, tones=tones, posts=posts, report=report)

    async def write_posts(
        self,
        report: AnalysisReport,
        tones: Sequence[str],
        use_emojis: bool = True,
        stats_style: str = "compact",
        post_length: str = "standard",
    ) -> List[GeneratedPost]:
        """Compose, decorate and polish one post per tone.

        Ideas are assigned to tones round-robin from the top of the ranking.
        """
        aggregate = report.aggregate
        top_ideas = report.ideas[: len(tones)]
        constraints = RewriteConstraints(
            platform=self.platform, max_length=max_length_for(post_length), emoji=use_emojis
        )
        facts: Dict[str, Any] = {
            "commits": aggregate.total_commits,
            "files_changed": aggregate.total_files_changed,
        }

        posts = []
        for i, tone in enumerate(tones):
            idea = top_ideas[i % len(top_ideas)]
            draft = compose_post(idea, aggregate, report.feature)

            if stats_style != "none" and aggregate.repo_count > 1:
                inline = generate_inline_stats(aggregate.total_commits, aggregate.total_files_changed)
                hook, _, rest = draft.partition("\n")
                draft = f"{hook}\n\n{inline} across {aggregate.repo_count} projects\n{rest}"

            if use_emojis:
                impact = (
                    RiskLevel.HIGH_RISK
                    if aggregate.impacts.get(RiskLevel.HIGH_RISK, 0) > 0
                    else RiskLevel.MEDIUM_RISK
                )
                draft = enrich_post_with_emojis(draft, report.feature, impact)

            content = draft
            if self.rewriter is not None:
                content = await self.rewriter.rewrite(draft, idea, facts, tone or DEFAULT_TONE, constraints)

            posts.append(
                GeneratedPost(
                    id=i + 1,
                    tone=tone,
                    idea=idea.type,
                    content=content,
                    length=len(content),
                    hashtags=_hashtags(content),
                )
            )

        return posts
