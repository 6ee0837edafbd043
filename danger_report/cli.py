"""Typer CLI for rendering review results into comment bodies."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer

from danger_report.config import get_render_settings
from danger_report.loader import ResultsFormatError, ResultsLoadError, load_results
from danger_report.schema import DangerResults
from danger_report.templates import render_inline_body, render_issue_body

app = typer.Typer(help="Render review results into GitHub comment bodies.")


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


def _load_or_exit(results_path: Path) -> DangerResults:
    try:
        return load_results(results_path)
    except (ResultsLoadError, ResultsFormatError) as error:
        typer.echo(f"Failed to load results: {error}", err=True)
        raise typer.Exit(code=1) from error


@app.command("issue")
def issue_command(
    results_path: Annotated[Path, typer.Argument(help="Path to a results JSON document.")],
    danger_id: Annotated[
        str | None, typer.Option(help="Identifier used to find and update the comment.")
    ] = None,
    commit_ref: Annotated[
        str | None, typer.Option(help="Commit reference appended to the signature.")
    ] = None,
    verbose: Annotated[bool, typer.Option(help="Print debug logging to stderr.")] = False,
) -> None:
    """Print the issue comment body for a results document."""
    _configure_logging(verbose)
    settings = get_render_settings()
    results = _load_or_exit(results_path)
    body = render_issue_body(
        danger_id or settings.danger_id,
        results,
        commit_ref if commit_ref is not None else settings.commit_ref,
    )
    typer.echo(body)


@app.command("inline")
def inline_command(
    results_path: Annotated[Path, typer.Argument(help="Path to a results JSON document.")],
    file: Annotated[str, typer.Option(help="File the inline comment is attached to.")],
    line: Annotated[int, typer.Option(min=1, help="1-based line number in the file.")],
    danger_id: Annotated[
        str | None, typer.Option(help="Identifier used to find and update the comment.")
    ] = None,
    verbose: Annotated[bool, typer.Option(help="Print debug logging to stderr.")] = False,
) -> None:
    """Print the inline comment body for a single file and line."""
    _configure_logging(verbose)
    settings = get_render_settings()
    results = _load_or_exit(results_path)
    typer.echo(render_inline_body(danger_id or settings.danger_id, results, file, line))
