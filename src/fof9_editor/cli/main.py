"""Typer CLI application for the FOF9 league editor."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TypeVar

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fof9_editor.project import PROJECT_FILE_SUFFIX, ProjectError, new_project, save_project
from fof9_editor.records import RecordError
from fof9_editor.state import AppState
from fof9_editor.storage import CsvRepository, StorageError
from fof9_editor.utils.logger import ENV_VAR, configure_logging, level_names
from fof9_editor.validation import ValidationResult, validate_coach, validate_player, validate_team
from fof9_editor.version import get_version_info

app = typer.Typer(help="FOF9 league file editor CLI")
console = Console()

RecordT = TypeVar("RecordT")


def _version_callback(value: bool) -> None:
    if value:
        console.print(get_version_info(), highlight=False)
        raise typer.Exit


@app.callback()
def _callback(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version information and exit",
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help=f"{', '.join(level_names())} (default: ${ENV_VAR} or NORMAL)",
    ),
) -> None:
    """FOF9 Editor: inspect, validate and create custom league projects."""
    try:
        configure_logging(log_level)
    except ValueError as exc:
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc


def _open(project_path: Path) -> AppState:
    state = AppState()
    try:
        state.load_project(project_path)
    except (ProjectError, StorageError, RecordError) as exc:
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc
    return state


def _collect(
    table: Table,
    kind: str,
    records: Sequence[RecordT],
    validator: Callable[[RecordT], ValidationResult],
    label: Callable[[RecordT], str],
) -> int:
    """Add one table row per violation and return how many were added."""
    count = 0
    for idx, record in enumerate(records):
        for violation in validator(record).errors:
            table.add_row(kind, f"#{idx + 1} {label(record)}", violation.field, violation.message)
            count += 1
    return count


@app.command()
def validate(
    project: Path = typer.Argument(..., help="Path to a .fof9proj file"),
) -> None:
    """Validate every player, coach and team in a project."""
    state = _open(project)

    table = Table(title=f"Violations in {project.name}")
    table.add_column("Kind")
    table.add_column("Record")
    table.add_column("Field")
    table.add_column("Message")

    total = _collect(table, "player", state.get_players(), validate_player, lambda p: p.display_name)
    total += _collect(table, "coach", state.get_coaches(), validate_coach, lambda c: c.display_name)
    total += _collect(table, "team", state.get_teams(), validate_team, lambda t: t.display_name)

    if total:
        console.print(table)
        console.print(f"[red]{total} violation(s) found[/red]")
        raise typer.Exit(code=1)
    console.print("[green]All records are valid[/green]")


@app.command()
def info(
    project: Path = typer.Argument(..., help="Path to a .fof9proj file"),
) -> None:
    """Show project metadata and record counts."""
    state = _open(project)
    descriptor = state.get_project()
    if descriptor is None:
        console.print(f"[red]Error: no project loaded from {escape(str(project))}[/red]")
        raise typer.Exit(code=1)

    table = Table(title=descriptor.league_name, show_header=False)
    table.add_column("Key", style="bold")
    table.add_column("Value")
    table.add_row("Identifier", descriptor.identifier)
    table.add_row("Format version", descriptor.version)
    table.add_row("Base year", str(descriptor.base_year))
    table.add_row("Created", str(descriptor.created or "-"))
    table.add_row("Last modified", str(descriptor.last_modified or "-"))
    for role, relative in sorted(descriptor.csv_files.items()):
        table.add_row(f"File: {role}", relative)
    table.add_row("Players", str(len(state.get_players())))
    table.add_row("Coaches", str(len(state.get_coaches())))
    table.add_row("Teams", str(len(state.get_teams())))
    console.print(table)


@app.command()
def new(
    name: str = typer.Argument(..., help="League name"),
    identifier: str = typer.Option(..., "--id", help="Short identifier used in file names"),
    base_year: int = typer.Option(2025, "--base-year", help="First season of the league"),
    directory: Path = typer.Option(Path(), "--dir", help="Directory to create the project in"),
) -> None:
    """Create a new project with empty record files."""
    if not identifier.strip():
        console.print("[red]Error: --id must not be empty[/red]")
        raise typer.Exit(code=1)

    descriptor = new_project(name, identifier, base_year)
    project_path = directory / f"{identifier}{PROJECT_FILE_SUFFIX}"
    if project_path.exists():
        console.print(f"[red]Error: project already exists: {escape(str(project_path))}[/red]")
        raise typer.Exit(code=1)

    repo = CsvRepository(directory, descriptor.csv_files)
    try:
        save_project(descriptor, project_path)
        repo.save_players([])
        repo.save_coaches([])
        repo.save_teams([])
    except (ProjectError, StorageError) as exc:
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc
    console.print(f"Created project [bold]{escape(name)}[/bold] at {escape(str(project_path))}")
