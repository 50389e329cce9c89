# SPDX-License-Identifier: MIT

from typing import Annotated, Any, Optional

import typer
from rich.console import Console

from stepstracker import configuration
from stepstracker.model.result import MutationResult
from stepstracker.repository.configuration import CONFIGURATION_REPO
from stepstracker.repository.gateway import PersistenceGateway
from stepstracker.repository.store import FileKeyValueStore
from stepstracker.service.tracker import StepsTracker

console = Console()
err_console = Console(stderr=True)

PasswordOption = Annotated[
    str,
    typer.Option(
        "--password",
        "-pw",
        prompt="Admin password",
        hide_input=True,
        help="Admin password (prompted when omitted)",
    ),
]


def build_tracker() -> StepsTracker:
    gateway = PersistenceGateway(FileKeyValueStore(configuration.DATA_STORE_PATH))
    tracker = StepsTracker(CONFIGURATION_REPO.get_config(), gateway)
    if tracker.startup_warning is not None:
        err_console.print(f"[yellow]{tracker.startup_warning}[/yellow]")
    return tracker


def get_tracker(ctx: typer.Context) -> StepsTracker:
    """Fetch the tracker attached to the root click context, building it once."""
    root = ctx.find_root()
    if not isinstance(root.obj, StepsTracker):
        root.obj = build_tracker()
    return root.obj


def require_admin(tracker: StepsTracker, password: Optional[str]) -> None:
    if not tracker.validate_admin_password(password):
        err_console.print("[red]Invalid password. Access denied.[/red]")
        raise typer.Exit(1)


def report(result: MutationResult[Any]) -> None:
    """
    Print a mutation's outcome. Rejected mutations and mutations that could
    not be saved exit non-zero, since an unsaved change does not outlive this
    process.
    """
    if not result["ok"]:
        err_console.print(f"[red]{result['reason']}[/red]")
        raise typer.Exit(1)
    if result["storage_error"] is not None:
        err_console.print(f"[yellow]{result['reason']}[/yellow]")
        raise typer.Exit(1)
    console.print(f"[green]{result['reason']}[/green]")
