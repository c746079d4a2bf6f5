"""Textual summary and chart table for a finished run."""

from collections.abc import Sequence
from datetime import date
from pathlib import Path

from trailertally.git.base import CommitRecord

from .aggregator import ReportMode, RunTotals

RULE = "-" * 48

# (label, counter attribute) in the order they are printed under "Details:"
DETAIL_ROWS: tuple[tuple[str, str], ...] = (
    ("Signed-off-by", "signed_off"),
    ("Reviewed", "reviewed"),
    ("Acked", "acked"),
    ("Tested", "tested"),
    ("Reported", "reported"),
)

MULTI_CHART_ROWS: tuple[tuple[str, str], ...] = (
    ("Authored", "authored"),
    ("Reviewed", "reviewed"),
    ("Acked", "acked"),
    ("Tested", "tested"),
    ("Reported", "reported"),
)


def _row(label: str, value: object) -> str:
    return f"{label + ':':<14} {value}"


def chart_title(repo_path: str | Path) -> str:
    """Title for the chart: the repository directory name."""
    return Path(repo_path).resolve().name


def chart_subtitle(since: date | None) -> str:
    """Subtitle describing the scanned time window."""
    if since is None:
        return "Overall"
    return f"{since:%Y-%m-%d} -- Today"


def format_header(
    repo_root: str, emails: Sequence[str], since: date | None
) -> list[str]:
    """Lines printed before the history walk starts."""
    label = "Target Email:" if len(emails) == 1 else "Target Emails:"
    lines = [
        f"{'Scanning repository:':<21}{repo_root}",
        f"{label:<21}{', '.join(emails)}",
    ]
    if since is not None:
        lines.append(f"{'Timeframe:':<21}Since {since:%Y-%m-%d}")
    lines.append(RULE)
    return lines


def format_commit_line(commit: CommitRecord) -> str:
    """One verbose line for an authored commit: hash | date | summary."""
    summary = commit.summary or "No message"
    return f"{commit.short_sha} | {commit.committed_at:%Y-%m-%d} | {summary}"


def format_summary(
    totals: RunTotals,
    report_mode: ReportMode,
    ignored_label: str = "Ignored",
    no_interaction_label: str = "No interaction",
) -> str:
    """Render totals, then categories, then trailer kinds."""
    lines = [
        "",
        "Summary:",
        _row("Total Scanned", totals.total_scanned),
        _row("Authored", totals.authored),
    ]
    if report_mode is ReportMode.SINGLE:
        lines.append(_row("Touched", totals.touched))
        lines.append(_row(ignored_label, totals.ignored))
    else:
        lines.append(_row(no_interaction_label, totals.no_interaction))

    lines.extend(["", "Details:"])
    for label, attr in DETAIL_ROWS:
        lines.append(_row(label, getattr(totals, attr)))

    return "\n".join(lines)


def chart_table(
    totals: RunTotals,
    report_mode: ReportMode,
    ignored_label: str = "Ignored",
    no_interaction_label: str = "No interaction",
) -> list[tuple[str, int]] | None:
    """Label/value rows for the pie chart.

    Returns None when nothing was scanned, in which case no chart is drawn.
    In multi mode the residual slice covers whatever the charted rows do
    not, so the rows never all come out zero once a commit was scanned.
    """
    if totals.total_scanned == 0:
        return None

    if report_mode is ReportMode.SINGLE:
        return [
            ("Authored", totals.authored),
            ("Touched", totals.touched),
            (ignored_label, totals.ignored),
        ]

    rows = [(label, getattr(totals, attr)) for label, attr in MULTI_CHART_ROWS]
    charted = sum(value for _, value in rows)
    rows.append((no_interaction_label, max(0, totals.total_scanned - charted)))
    return rows
