# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer

from stepstracker.repository.id_map import ID_MAP_REPO
from stepstracker.service.confirmation import ClearAllConfirmation
from stepstracker.service.export import (
    SUMMARY_CSV_FILENAME,
    TRACKER_CSV_FILENAME,
    backup_filename,
)
from stepstracker.terminal.custom_typer import AliasedTyperGroup
from stepstracker.terminal.session import (
    PasswordOption,
    console,
    err_console,
    get_tracker,
    report,
    require_admin,
)
from stepstracker.time import today_local

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

OutputOption = Annotated[
    Optional[Path],
    typer.Option("--output", "-o", help="File to write, '-' for stdout"),
]


def __write_output(content: str, output: Path) -> None:
    if str(output) == "-":
        typer.echo(content, nl=False)
        return
    try:
        output.write_text(content, encoding="utf-8")
    except OSError as e:
        err_console.print(f"[red]Could not write {output}: {e}[/red]")
        raise typer.Exit(1)
    err_console.print(f"[green]Wrote {output}[/green]")


@app.command("export-tracker, et")
def export_tracker(
    ctx: typer.Context, password: PasswordOption, output: OutputOption = None
) -> None:
    """Export every entry as CSV (admin)."""
    tracker = get_tracker(ctx)
    require_admin(tracker, password)
    __write_output(
        tracker.export_tracker_csv(), output or Path(TRACKER_CSV_FILENAME)
    )


@app.command("export-summary, es")
def export_summary(
    ctx: typer.Context, password: PasswordOption, output: OutputOption = None
) -> None:
    """Export the payment summary as CSV (admin)."""
    tracker = get_tracker(ctx)
    require_admin(tracker, password)
    __write_output(
        tracker.export_summary_csv(), output or Path(SUMMARY_CSV_FILENAME)
    )


@app.command("backup, b")
def backup(
    ctx: typer.Context, password: PasswordOption, output: OutputOption = None
) -> None:
    """Write a JSON backup of all entries and payments (admin)."""
    tracker = get_tracker(ctx)
    require_admin(tracker, password)
    __write_output(
        tracker.export_backup().decode("utf-8"),
        output or Path(backup_filename(today_local())),
    )


@app.command("restore, rs", no_args_is_help=True)
def restore(ctx: typer.Context, path: Path, password: PasswordOption) -> None:
    """Replace all data with the contents of a JSON backup (admin)."""
    tracker = get_tracker(ctx)
    require_admin(tracker, password)

    try:
        data = path.read_bytes()
    except OSError as e:
        err_console.print(f"[red]Error reading backup file: {e}[/red]")
        raise typer.Exit(1)

    report(tracker.restore_backup(data))
    ID_MAP_REPO.clear_ids()


@app.command("clear")
def clear(
    ctx: typer.Context,
    password: PasswordOption,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Answer yes to both confirmations"),
    ] = False,
) -> None:
    """Delete every entry and payment record (admin)."""
    tracker = get_tracker(ctx)
    require_admin(tracker, password)

    confirmation = ClearAllConfirmation()
    while confirmation.is_pending:
        if yes or typer.confirm(confirmation.prompt):
            confirmation.accept()
        else:
            confirmation.decline()

    if not confirmation.is_confirmed:
        console.print("Nothing was cleared.")
        raise typer.Exit(0)

    report(tracker.clear_all(confirmation))
    ID_MAP_REPO.clear_ids()
