# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from stepstracker.logger import configure_logging
from stepstracker.terminal import configuration, data, entry, summary
from stepstracker.terminal.custom_typer import OrderedAliasedTyperGroup
from stepstracker.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="Steps Tracker - Daily step targets and penalties in the CLI",
    no_args_is_help=True,
)
app.add_typer(entry.app, name="entry, e", help="Log and review daily entries")
app.add_typer(summary.app, name="summary, s", help="Amounts owed and payments")
app.add_typer(data.app, name="data, d", help="Export, backup, restore and clear")
app.add_typer(configuration.app, name="config, c", help="Settings")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-vb", help="Show debug logging on stderr"),
    ] = False,
) -> None:
    """
    Steps Tracker - Daily step targets and penalties in the CLI

    Global options that apply to all commands.
    """
    configure_logging(verbose)
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
