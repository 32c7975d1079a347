"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from doccompare.config import Settings, load_config
from doccompare.core.ingest import load_document
from doccompare.core.models import Change, DiffResult, DiffSummary, DocumentFile
from doccompare.core.pipeline import compare_documents
from doccompare.core.utils.sizes import format_file_size
from doccompare.errors import DocCompareError


logger = logging.getLogger(__name__)

MARKERS = {"added": "+", "removed": "-", "modified": "~", "unchanged": " "}

OriginalArg = Annotated[Path, typer.Argument(exists=True, dir_okay=False, readable=True, help="Original document")]
ModifiedArg = Annotated[Path, typer.Argument(exists=True, dir_okay=False, readable=True, help="Modified document")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(ctx: typer.Context, overrides: dict = None) -> Settings:
    """Load config and configure logging with standard CLI error handling."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    level = ((ctx.obj or {}).get("log_level") or settings.log_level).upper()
    if not isinstance(logging.getLevelName(level), int):
        _fail(f"Invalid log level '{level}'")
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def _load(path: Path, settings: Settings) -> DocumentFile:
    try:
        return load_document(path, settings)
    except DocCompareError as e:
        _fail(str(e))


def _compare(original: Path, modified: Path, settings: Settings) -> DiffResult:
    """Load both documents and run the comparison, exiting 1 on any domain error."""
    docs = (_load(original, settings), _load(modified, settings))
    try:
        return compare_documents(*docs, settings=settings)
    except DocCompareError as e:
        logger.debug("Comparison of %s and %s failed", original, modified, exc_info=True)
        _fail("Comparison failed", e)


def _format_change(change: Change) -> str:
    """Render one change as '<marker> <orig#> <mod#>  <text>'."""
    if change.kind == "modified":
        text = f"{change.original_text} -> {change.modified_text}"
    elif change.kind == "removed":
        text = change.original_text
    else:
        text = change.modified_text
    orig = change.original_line or ""
    mod = change.modified_line or ""
    return f"{MARKERS[change.kind]} {orig:>5} {mod:>5}  {text}"


def _echo_summary(summary: DiffSummary) -> None:
    typer.echo(
        f"{summary.total_changes} change(s) - "
        f"{summary.additions} added, "
        f"{summary.removals} removed, "
        f"{summary.modifications} modified"
    )


def compare_cmd(
    ctx: typer.Context,
    original: OriginalArg,
    modified: ModifiedArg,
    policy: Annotated[Optional[str], typer.Option("--policy", help="Pairing policy: block or window")] = None,
    window: Annotated[Optional[int], typer.Option("--window", help="Lookahead for the window policy")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the full result as JSON")] = False,
    show_all: Annotated[bool, typer.Option("--all", help="Include unchanged lines")] = False,
    ):
    """Compare two documents and print per-line change markers."""
    settings = _settings(ctx, overrides={"pairing_policy": policy, "pairing_window": window})
    result = _compare(original, modified, settings)

    if as_json:
        typer.echo(result.model_dump_json(indent=2))
        return

    typer.echo(f"--- {result.original.name} ({result.original.line_count} lines)")
    typer.echo(f"+++ {result.modified.name} ({result.modified.line_count} lines)")
    for change in result.changes:
        if show_all or change.kind != "unchanged":
            typer.echo(_format_change(change))
    _echo_summary(result.summary)


def summary_cmd(
    ctx: typer.Context,
    original: OriginalArg,
    modified: ModifiedArg,
    policy: Annotated[Optional[str], typer.Option("--policy", help="Pairing policy: block or window")] = None,
    ):
    """Print only the aggregate change counts."""
    settings = _settings(ctx, overrides={"pairing_policy": policy})
    summary = _compare(original, modified, settings).summary
    typer.echo(f"total_changes: {summary.total_changes}")
    typer.echo(f"additions:     {summary.additions}")
    typer.echo(f"removals:      {summary.removals}")
    typer.echo(f"modifications: {summary.modifications}")


def parse_cmd(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(exists=True, dir_okay=False, readable=True, help="Document to parse")],
    header_only: Annotated[bool, typer.Option("--header-only", help="Skip printing the extracted text")] = False,
    ):
    """Print the normalized text extracted from a document."""
    settings = _settings(ctx)
    doc = _load(path, settings)
    typer.echo(f"{doc.name}: {doc.file_type.value}, {format_file_size(doc.size)}, {doc.line_count} lines")
    if not header_only and doc.content:
        typer.echo(doc.content)
