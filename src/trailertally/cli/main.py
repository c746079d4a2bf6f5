"""trailertally CLI entry point.

Walks a repository's history and reports how many commits the target
identities authored and how often they appear in commit trailers.
"""

from datetime import UTC, datetime
from pathlib import Path

import click
import structlog

from trailertally import __version__
from trailertally.audit import (
    Aggregator,
    AuditError,
    CommitClassifier,
    CommitStream,
    MatchMode,
    ReportMode,
    TargetIdentitySet,
)
from trailertally.audit.report import (
    chart_subtitle,
    chart_table,
    chart_title,
    format_commit_line,
    format_header,
    format_summary,
)
from trailertally.chart import ChartRenderError, MatplotlibPieRenderer
from trailertally.config import settings
from trailertally.git import GitPythonReader, GitReaderError
from trailertally.logging import bind_run_context, configure_logging

logger = structlog.get_logger(__name__)


@click.command()
@click.version_option(version=__version__, prog_name="trailertally")
@click.option(
    "-p",
    "--path",
    type=click.Path(path_type=Path),
    default=".",
    show_default=True,
    help="Repository location",
)
@click.option(
    "-e",
    "--email",
    "emails",
    multiple=True,
    required=True,
    help="Target identity (repeatable, case-insensitive)",
)
@click.option(
    "-s",
    "--since",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    help="Only include commits on or after this date (YYYY-MM-DD)",
)
@click.option("--partial", is_flag=True, help="Match author emails by substring")
@click.option("--verbose", is_flag=True, help="List each authored commit")
@click.option(
    "--report-mode",
    type=click.Choice(["single", "multi"]),
    help="Counting policy (default: single for one email, multi for several)",
)
@click.option("--log-level", help="Logging level (overrides TRAILERTALLY_LOG_LEVEL)")
@click.option(
    "--log-format",
    type=click.Choice(["console", "json"]),
    help="Log output format",
)
def cli(
    path: Path,
    emails: tuple[str, ...],
    since: datetime | None,
    partial: bool,
    verbose: bool,
    report_mode: str | None,
    log_level: str | None,
    log_format: str | None,
) -> None:
    """Audit commit authorship and trailer endorsements for an identity."""
    configure_logging(
        log_level=log_level or settings.log_level,
        log_format=log_format or settings.log_format,
    )

    since_date = since.date() if since else None
    cutoff = since.replace(tzinfo=UTC) if since else None

    try:
        targets = TargetIdentitySet(emails)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--email")

    if report_mode is None:
        mode = ReportMode.SINGLE if len(targets) == 1 else ReportMode.MULTI
    else:
        mode = ReportMode(report_mode)
    match_mode = MatchMode.SUBSTRING if partial else MatchMode.EXACT

    try:
        reader = GitPythonReader(str(path))
        bind_run_context(repo=reader.get_repo_root(), report_mode=mode.value)

        for line in format_header(reader.get_repo_root(), emails, since_date):
            click.echo(line)

        stream = CommitStream(reader, since=cutoff)
        aggregator = Aggregator(CommitClassifier(targets, match_mode), mode)

        for commit in stream:
            result = aggregator.consume(commit)
            if verbose and result.is_authored_by_target:
                click.echo(format_commit_line(commit))
    except (GitReaderError, AuditError) as e:
        raise click.ClickException(str(e))

    totals = aggregator.totals
    logger.info(
        "scan_complete",
        total_scanned=totals.total_scanned,
    )

    click.echo(
        format_summary(
            totals,
            mode,
            ignored_label=settings.ignored_label,
            no_interaction_label=settings.no_interaction_label,
        )
    )

    click.echo("Generating Pie Charts...")
    rows = chart_table(
        totals,
        mode,
        ignored_label=settings.ignored_label,
        no_interaction_label=settings.no_interaction_label,
    )
    if rows is None:
        logger.info("chart_skipped", reason="no_commits_scanned")
        return

    title = chart_title(reader.get_repo_root())
    output_dir = settings.output_dir or Path.cwd()
    renderer = MatplotlibPieRenderer(
        width=settings.chart_width,
        height=settings.chart_height,
        dpi=settings.chart_dpi,
    )
    try:
        renderer.render_to_file(
            output_dir / f"{title}.png",
            title,
            chart_subtitle(since_date),
            rows,
        )
    except ChartRenderError as e:
        raise click.ClickException(str(e))
