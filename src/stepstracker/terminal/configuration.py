# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from stepstracker import configuration
from stepstracker.repository.configuration import CONFIGURATION_REPO
from stepstracker.terminal.custom_typer import AliasedTyperGroup
from stepstracker.terminal.session import (
    PasswordOption,
    err_console,
    get_tracker,
    require_admin,
)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("participants", ", ".join(config["participants"]))
    table.add_row("target_steps", f"{config['target_steps']:,}")
    table.add_row("penalty_amount", str(config["penalty_amount"]))
    table.add_row("currency", config["currency"])
    table.add_row("recent_entries_limit", str(config["recent_entries_limit"]))
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))

    console.print(table)


@app.command("set, s")
def set(
    ctx: typer.Context,
    password: PasswordOption,
    add_participants: Annotated[
        Optional[list[str]],
        typer.Option("--add-participant", "-ap", help="repeatable"),
    ] = None,
    remove_participants: Annotated[
        Optional[list[str]],
        typer.Option("--remove-participant", "-rp", help="repeatable"),
    ] = None,
    target_steps: Annotated[
        Optional[int],
        typer.Option(
            "--target-steps", "-t", help="Daily steps needed to avoid a penalty"
        ),
    ] = None,
    penalty_amount: Annotated[
        Optional[int],
        typer.Option("--penalty", "-p", help="Penalty per missed day, whole units"),
    ] = None,
    currency: Annotated[Optional[str], typer.Option("--currency", "-c")] = None,
    admin_password: Annotated[
        Optional[str], typer.Option("--admin-password", help="New admin password")
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="Custom path for data storage"),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option("--remove-data-path", help="Revert to default data path"),
    ] = False,
    recent_entries_limit: Annotated[
        Optional[int], typer.Option("--recent-limit", help="Entries in recent view")
    ] = None,
) -> None:
    """Change configuration settings (admin)."""
    require_admin(get_tracker(ctx), password)

    if target_steps is not None and target_steps <= 0:
        err_console.print("[red]Target steps must be a positive number.[/red]")
        raise typer.Exit(1)
    if penalty_amount is not None and penalty_amount < 0:
        err_console.print("[red]Penalty must not be negative.[/red]")
        raise typer.Exit(1)
    if recent_entries_limit is not None and recent_entries_limit <= 0:
        err_console.print("[red]Recent entries limit must be positive.[/red]")
        raise typer.Exit(1)
    if admin_password is not None and admin_password == "":
        err_console.print("[red]Admin password must not be empty.[/red]")
        raise typer.Exit(1)

    CONFIGURATION_REPO.update_config(
        add_participants=add_participants,
        remove_participants=remove_participants,
        target_steps=target_steps,
        penalty_amount=penalty_amount,
        currency=currency,
        admin_password=admin_password,
        data_path=data_path,
        remove_data_path=remove_data_path,
        recent_entries_limit=recent_entries_limit,
    )
    CONFIGURATION_REPO.flush()
    view()
