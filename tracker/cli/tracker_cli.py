"""
Dot Point Tracker CLI

Track self-rated mastery of syllabus dot points per subject and get a short
list of weak dot points to revise today.

Usage:
    dotpoints show                          # Subjects, progress and dot points
    dotpoints add Biology "Describe DNA"    # Add a dot point (name or number)
    dotpoints rate 1 2 Memorised            # Re-rate dot point 2 of subject 1
    dotpoints remove Biology 2              # Remove a dot point
    dotpoints rename 1 "Chemistry"          # Rename a subject
    dotpoints highlight                     # Toggle weak dot point highlighting
    dotpoints suggest                       # Today's focus
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from config import get_settings
from tracker.core.confidence import Confidence
from tracker.core.models import DotPoint, Subject
from tracker.persistence.json_store import JsonFileGateway
from tracker.study.mastery_store import MasteryStore, MutationResult
from tracker.study.progress_calculator import calculate_progress, format_progress_bar
from tracker.study.recommender import RecommendationEngine

# =============================================================================
# CLI Setup
# =============================================================================

app = typer.Typer(
    name="dotpoints",
    help="Syllabus dot point tracker",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)

console = Console()


def _store(ctx: typer.Context) -> MasteryStore:
    return ctx.obj


def _resolve_subject(store: MasteryStore, ref: str) -> Subject:
    """Find a subject by 1-based position or by name."""
    if ref.isdigit():
        index = int(ref) - 1
        if 0 <= index < len(store.subjects):
            return store.subjects[index]
    subject = store.find_subject_by_name(ref)
    if subject is None:
        console.print(f"[red]✗ No subject matching '{escape(ref)}'[/]")
        raise typer.Exit(1)
    return subject


def _resolve_dot_point_id(subject: Subject, ref: str) -> str:
    """Map a 1-based position to a dot point id; anything else is taken as an id."""
    if ref.isdigit():
        index = int(ref) - 1
        if 0 <= index < len(subject.dot_points):
            return subject.dot_points[index].id
    return ref


def _report(result: MutationResult, success: str, unchanged: str) -> None:
    if not result.changed:
        console.print(f"[yellow]{unchanged}[/]")
        return
    console.print(f"[green]✓ {success}[/]")
    if not result.saved:
        error = escape(result.error or "unknown error")
        console.print(f"[yellow]⚠ Changes kept for this session but not saved: {error}[/]")


def _dot_point_style(dot_point: DotPoint, highlight_mode: bool) -> str:
    if not highlight_mode:
        return ""
    return "bold" if dot_point.confidence.highlight == "weak" else "dim"


# =============================================================================
# Commands
# =============================================================================


@app.command()
def show(ctx: typer.Context) -> None:
    """Show every subject with its progress and dot points."""
    store = _store(ctx)

    for number, subject in enumerate(store.subjects, start=1):
        progress = calculate_progress(subject)
        console.print(
            f"\n[bold cyan]{number}. {escape(subject.name)}[/]  "
            f"{format_progress_bar(progress)} {progress}%"
        )
        table = Table(show_header=bool(subject.dot_points))
        table.add_column("#", style="dim", justify="right")
        table.add_column("Dot point")
        table.add_column("Confidence")
        table.add_column("ID", style="dim")

        if not subject.dot_points:
            table.add_row("", "[dim]No dot points yet[/]", "", "")
        for idx, dot_point in enumerate(subject.dot_points, start=1):
            style = _dot_point_style(dot_point, store.highlight_mode)
            text = escape(dot_point.text)
            table.add_row(
                str(idx),
                f"[{style}]{text}[/]" if style else text,
                f"[{dot_point.confidence.color}]{dot_point.confidence.value}[/]",
                dot_point.id,
            )
        console.print(table)


@app.command()
def add(
    ctx: typer.Context,
    subject: Annotated[str, typer.Argument(help="Subject name or number")],
    text: Annotated[str, typer.Argument(help="Dot point text")],
) -> None:
    """Add a dot point to a subject."""
    store = _store(ctx)
    target = _resolve_subject(store, subject)
    result = store.add_dot_point(target.id, text.strip())
    _report(result, f"Added to {escape(target.name)}", "Nothing added: dot point text is empty")


@app.command()
def remove(
    ctx: typer.Context,
    subject: Annotated[str, typer.Argument(help="Subject name or number")],
    dot_point: Annotated[str, typer.Argument(help="Dot point number or ID")],
) -> None:
    """Remove a dot point."""
    store = _store(ctx)
    target = _resolve_subject(store, subject)
    result = store.remove_dot_point(target.id, _resolve_dot_point_id(target, dot_point))
    name = escape(target.name)
    _report(result, f"Removed from {name}", f"No dot point '{escape(dot_point)}' in {name}")


@app.command()
def rate(
    ctx: typer.Context,
    subject: Annotated[str, typer.Argument(help="Subject name or number")],
    dot_point: Annotated[str, typer.Argument(help="Dot point number or ID")],
    level: Annotated[Confidence, typer.Argument(help="New confidence level", case_sensitive=False)],
) -> None:
    """Set the confidence level of a dot point."""
    store = _store(ctx)
    target = _resolve_subject(store, subject)
    result = store.set_confidence(target.id, _resolve_dot_point_id(target, dot_point), level)
    name = escape(target.name)
    _report(result, f"Rated {level.value}", f"No dot point '{escape(dot_point)}' in {name}")


@app.command()
def rename(
    ctx: typer.Context,
    subject: Annotated[str, typer.Argument(help="Subject name or number")],
    name: Annotated[str, typer.Argument(help="New subject name")],
) -> None:
    """Rename a subject."""
    store = _store(ctx)
    target = _resolve_subject(store, subject)
    result = store.rename_subject(target.id, name.strip())
    _report(result, f"Renamed to {escape(target.name)}", "Subject not renamed")


@app.command()
def highlight(ctx: typer.Context) -> None:
    """Toggle highlighting of weak dot points in `show`."""
    store = _store(ctx)
    result = store.toggle_highlight_mode()
    state = "on" if store.highlight_mode else "off"
    _report(result, f"Weak dot point highlighting {state}", "Highlighting unchanged")


@app.command()
def suggest(
    ctx: typer.Context,
    count: Annotated[
        int | None, typer.Option("--count", "-n", min=0, help="Number of dot points to suggest")
    ] = None,
) -> None:
    """Suggest weak dot points for today's focus."""
    store = _store(ctx)
    k = count if count is not None else get_settings().suggestion_count
    suggestions = RecommendationEngine(k=k).suggest(store.state)

    if not suggestions:
        console.print(
            Panel(
                "🎉 Great work! You have no weak dot points to revise!",
                title="Today's focus",
                border_style="green",
            )
        )
        return

    lines = [
        f"[bold cyan]{escape(item.subject_name)}[/]\n  {escape(item.dot_point.text)} "
        f"[{item.dot_point.confidence.color}]({item.dot_point.confidence.value})[/]"
        for item in suggestions
    ]
    console.print(Panel("\n".join(lines), title="Today's focus", border_style="cyan"))


# =============================================================================
# Global Options
# =============================================================================


@app.callback()
def main(
    ctx: typer.Context,
    data_file: Annotated[
        Path | None, typer.Option("--data-file", "-f", help="Snapshot file to use")
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Verbose output")
    ] = False,
) -> None:
    """
    Syllabus dot point tracker

    Rate each dot point Unseen, Learning, Memorised or Exam-ready and let
    `suggest` pick what to revise next.
    """
    settings = get_settings()

    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else settings.log_level,
        format="<level>{message}</level>",
    )
    if settings.log_file:
        logger.add(settings.log_file, level="DEBUG", rotation="1 MB")

    gateway = JsonFileGateway(data_file or settings.data_file)
    ctx.obj = MasteryStore.open(
        gateway,
        default_subject_count=settings.default_subject_count,
        default_name=settings.default_subject_name,
    )


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
