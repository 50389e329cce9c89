# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer

from stepstracker.terminal.custom_typer import AliasedTyperGroup
from stepstracker.terminal.parse import parse_date, resolve_entry_id
from stepstracker.terminal.session import (
    PasswordOption,
    err_console,
    get_tracker,
    report,
    require_admin,
)
from stepstracker.time import date_to_str
from stepstracker.view.views import entry as entry_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("add, a", no_args_is_help=True)
def add(
    ctx: typer.Context,
    participant: str,
    steps: int,
    date: Annotated[
        Optional[str],
        typer.Option(
            "--date",
            "-d",
            help="YYYY-MM-DD, today (t), yesterday (y) or a day offset like -2",
        ),
    ] = "today",
    proof: Annotated[
        Optional[Path],
        typer.Option(
            "--proof",
            "-p",
            help="Screenshot backing the step count, stored by name only",
        ),
    ] = None,
) -> None:
    """Log a participant's steps for one day."""
    tracker = get_tracker(ctx)

    proof_name = None
    proof_data = None
    if proof is not None:
        proof_name = proof.name
        proof_data = proof.resolve().as_uri()

    result = tracker.add_entry(
        participant, parse_date(date), steps, proof_name, proof_data
    )
    report(result)

    if result["value"] is not None:
        entry_report.single_entry_view(tracker, result["value"])


@app.command("edit, ed", no_args_is_help=True)
def edit(
    ctx: typer.Context,
    id: str,
    steps: int,
    password: PasswordOption,
) -> None:
    """Change the step count of an existing entry (admin)."""
    tracker = get_tracker(ctx)
    require_admin(tracker, password)

    result = tracker.edit_entry(resolve_entry_id(id), steps)
    report(result)

    if result["value"] is not None:
        entry_report.single_entry_view(tracker, result["value"])


@app.command("delete, del", no_args_is_help=True)
def delete(
    ctx: typer.Context,
    id: str,
    password: PasswordOption,
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Skip the confirmation prompt")
    ] = False,
) -> None:
    """Delete an entry (admin)."""
    tracker = get_tracker(ctx)
    require_admin(tracker, password)

    entry_id = resolve_entry_id(id)
    entry = tracker.get_entry(entry_id)
    if entry is None:
        err_console.print(f"[red]No entry with id {id}[/red]")
        raise typer.Exit(1)

    if not yes and not typer.confirm(
        f"Are you sure you want to delete the entry for {entry['participant']} "
        f"on {date_to_str(entry['date'])}?"
    ):
        raise typer.Exit(0)

    report(tracker.delete_entry(entry_id))


@app.command("list, ls")
def list_entries(
    ctx: typer.Context,
    name: Annotated[
        Optional[str],
        typer.Option("--name", "-n", help="Case-insensitive part of a name"),
    ] = None,
    date_from: Annotated[
        Optional[str], typer.Option("--from", "-f", help="First day to include")
    ] = None,
    date_to: Annotated[
        Optional[str], typer.Option("--to", "-t", help="Last day to include")
    ] = None,
) -> None:
    """Show the daily tracker, newest day first."""
    tracker = get_tracker(ctx)

    entries = tracker.tracker_view(name, parse_date(date_from), parse_date(date_to))
    entry_report.entries_view(tracker, entries, tracker.tracker_totals(entries))


@app.command("show, s", no_args_is_help=True)
def show(ctx: typer.Context, id: str) -> None:
    """Show a single entry."""
    tracker = get_tracker(ctx)

    entry = tracker.get_entry(resolve_entry_id(id))
    if entry is None:
        err_console.print(f"[red]No entry with id {id}[/red]")
        raise typer.Exit(1)
    entry_report.single_entry_view(tracker, entry)


@app.command("recent, r")
def recent(
    ctx: typer.Context,
    limit: Annotated[
        Optional[int], typer.Option("--limit", "-l", help="Number of entries")
    ] = None,
) -> None:
    """Show the most recently logged entries."""
    if limit is not None and limit <= 0:
        err_console.print("[red]Recent entries limit must be positive.[/red]")
        raise typer.Exit(1)

    tracker = get_tracker(ctx)
    entry_report.recent_entries_view(tracker, tracker.recent_entries(limit))
