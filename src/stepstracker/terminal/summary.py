# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from stepstracker.terminal.custom_typer import AliasedTyperGroup
from stepstracker.terminal.session import (
    PasswordOption,
    get_tracker,
    report,
    require_admin,
)
from stepstracker.view.views.summary import summary_view

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view(
    ctx: typer.Context,
    password: Annotated[
        Optional[str],
        typer.Option(
            "--password", "-pw", help="Admin password, shows payment status"
        ),
    ] = None,
) -> None:
    """Show what each participant owes and the grand totals."""
    tracker = get_tracker(ctx)
    if password is not None:
        require_admin(tracker, password)

    summary_view(
        tracker.participant_summaries(),
        tracker.grand_totals(),
        tracker.config["currency"],
        show_payment=password is not None,
    )


@app.command("pay, p", no_args_is_help=True)
def pay(ctx: typer.Context, participant: str, password: PasswordOption) -> None:
    """Flip a participant between Paid and Unpaid (admin)."""
    tracker = get_tracker(ctx)
    require_admin(tracker, password)

    report(tracker.toggle_payment(participant))
    summary_view(
        tracker.participant_summaries(),
        tracker.grand_totals(),
        tracker.config["currency"],
        show_payment=True,
    )
