"""Command-line interface for CommitCast."""

import asyncio
import json
from pathlib import Path
from typing import List, Optional

import structlog
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from commitcast.analysis import format_specific_context, get_primary_tech
from commitcast.exceptions import CommitCastError, LLMError
from commitcast.github import GitHubClient
from commitcast.llm import OpenAIProvider, PostRewriter, RewriteCache
from commitcast.logging import setup_logging
from commitcast.models import CommitRecord, RiskLevel, get_settings
from commitcast.models.config import POST_LENGTH_LIMITS
from commitcast.models.signals import readable_signal
from commitcast.pipeline import AnalysisReport, PostGenerator, analyze_commits
from commitcast.post import generate_complete_stats_section, generate_emoji_context, map_intent
from commitcast.post.stats import STATS_STYLES

app = typer.Typer(
    name="commitcast",
    help="Turn recent commit activity into ready-to-post developer updates",
    add_completion=False,
)
console = Console()
logger = structlog.get_logger(__name__)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Log level (defaults to LOG_LEVEL)"),
) -> None:
    """Configure logging before any command runs."""
    setup_logging(log_level or get_settings().log_level)


def load_commits(path: Path) -> List[CommitRecord]:
    """Read commits from a JSON file.

    Accepts a list of commit records or raw GitHub "get a commit" payloads.
    """
    with open(path, "r") as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise ValueError(f"{path}: expected a JSON object or a list of objects")

    return [
        CommitRecord.from_github(item, repo=item.get("repo"))
        if "commit" in item
        else CommitRecord.model_validate(item)
        for item in data
    ]


def _print_report(report: AnalysisReport) -> None:
    aggregate = report.aggregate

    console.print("\n[bold]Activity[/bold]")
    console.print(
        generate_complete_stats_section(aggregate, style="detailed", include_breakdown=True),
        markup=False,
    )
    dominant = max(aggregate.signals, key=aggregate.signals.get) if aggregate.signals else None
    top_impact = next((level for level in RiskLevel if aggregate.impacts.get(level)), None)
    console.print(
        f"[cyan]Feature:[/cyan] {generate_emoji_context(report.feature, dominant, top_impact)} {report.feature}"
    )

    if aggregate.signals:
        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Signal", style="cyan")
        table.add_column("Files", justify="right", style="yellow")
        for signal, count in sorted(aggregate.signals.items(), key=lambda item: item[1], reverse=True):
            table.add_row(readable_signal(signal), str(count))
        console.print(table)

    if aggregate.commits:
        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Commit", style="cyan")
        table.add_column("Impact", style="yellow")
        table.add_column("Intent", style="white")
        table.add_column("Message", style="white")
        for commit in aggregate.commits:
            intent, angle = map_intent(commit)
            table.add_row(commit.sha[:7], commit.impact.value, f"{intent}/{angle}", commit.message.split("\n", 1)[0])
        console.print(table)

    context = report.context
    if context.libraries or context.functions or context.modules or context.keywords:
        console.print("\n[bold]Context[/bold]")
        summary = format_specific_context(context)
        if summary:
            console.print(f"  {escape(summary)}")
        console.print(f"  Primary tech: {get_primary_tech(context) or '-'}")
        console.print(f"  Libraries: {', '.join(context.libraries) or '-'}")
        console.print(f"  Functions: {', '.join(context.functions) or '-'}")
        console.print(f"  Modules: {', '.join(context.modules) or '-'}")
        console.print(f"  Keywords: {', '.join(context.keywords) or '-'}")


def _print_ideas(report: AnalysisReport) -> None:
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Score", justify="right", style="yellow")
    table.add_column("Type", style="cyan")
    table.add_column("Title", style="white")
    for idea in report.ideas:
        table.add_row(f"{idea.relevance_score:g}", idea.type, idea.title)
    console.print(table)


@app.command()
def analyze(
    commits_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON file of commits"),
    as_json: bool = typer.Option(False, "--json", help="Print the full report as JSON"),
) -> None:
    """Analyze commits from a JSON file."""
    try:
        report = analyze_commits(load_commits(commits_file))
    except (CommitCastError, ValueError, OSError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    if as_json:
        typer.echo(report.model_dump_json(indent=2))
        return

    _print_report(report)
    console.print("\n[bold]Ideas[/bold]")
    _print_ideas(report)


@app.command()
def ideas(
    commits_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON file of commits"),
) -> None:
    """Rank post ideas for commits from a JSON file."""
    try:
        report = analyze_commits(load_commits(commits_file))
    except (CommitCastError, ValueError, OSError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    _print_ideas(report)


@app.command()
def generate(
    username: str = typer.Argument(..., help="GitHub username"),
    repo: Optional[str] = typer.Option(None, "--repo", "-r", help="Only this owner/name repository"),
    tones: List[str] = typer.Option(["pro", "fun", "concise"], "--tone", "-t", help="Tone (repeatable)"),
    no_emoji: bool = typer.Option(False, "--no-emoji", help="Disable emoji"),
    stats_style: str = typer.Option("compact", "--stats-style", help=f"One of {', '.join(STATS_STYLES)}"),
    length: str = typer.Option("standard", "--length", "-l", help=f"One of {', '.join(POST_LENGTH_LIMITS)}"),
    no_rewrite: bool = typer.Option(False, "--no-rewrite", help="Skip LLM polishing"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show analysis details"),
) -> None:
    """Generate posts from a user's commits in the last 24 hours."""
    settings = get_settings()

    async def run():
        rewriter = None
        if not no_rewrite:
            try:
                provider = OpenAIProvider.from_config(settings.llm_config())
            except LLMError as e:
                logger.warning("rewrite_disabled", error=str(e))
                console.print(f"[yellow]Rewrite disabled:[/yellow] {escape(str(e))}")
            else:
                rewriter = PostRewriter(
                    provider,
                    cache=RewriteCache(settings.rewrite_cache_size),
                    default_tone=settings.default_tone,
                    max_tokens=settings.llm_max_tokens,
                    temperature=settings.llm_temperature,
                )

        async with GitHubClient(settings.github_config()) as github:
            generator = PostGenerator(github, rewriter)
            return await generator.generate(
                username,
                repo=repo,
                tones=tones,
                use_emojis=not no_emoji,
                stats_style=stats_style,
                post_length=length,
            )

    try:
        result = asyncio.run(run())
    except CommitCastError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    if verbose:
        _print_report(result.report)

    for post in result.posts:
        console.print(f"\n[bold green]#{post.id} {post.tone}[/bold green] [dim]({post.idea}, {post.length} chars)[/dim]")
        console.print(post.content, markup=False, highlight=False)


if __name__ == "__main__":
    app()
