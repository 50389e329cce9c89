# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.padding import Padding
from rich.table import Table

from stepstracker.model.summary import GrandTotals, ParticipantSummary
from stepstracker.service.export import format_completion_rate
from stepstracker.view.util import format_amount, format_paid
from stepstracker.view.views.header import header


def summary_view(
    summaries: list[ParticipantSummary],
    totals: GrandTotals,
    currency: str,
    show_payment: bool = False,
) -> None:
    """Display per-participant summaries followed by the grand totals."""
    header("payment summary")

    console = Console()
    if len(summaries) == 0:
        console.print(Padding("No data available yet.", (1, 1)))
    else:
        summary_table = Table(box=box.SIMPLE)
        summary_table.add_column("name")
        summary_table.add_column("total days", justify="right")
        summary_table.add_column("days missed", justify="right")
        summary_table.add_column("owed", justify="right")
        summary_table.add_column("completion", justify="right")
        if show_payment:
            summary_table.add_column("payment")

        for summary in summaries:
            row = [
                summary["participant"],
                str(summary["total_days"]),
                str(summary["days_missed"]),
                format_amount(summary["amount_owed"], currency),
                format_completion_rate(summary["completion_rate"]),
            ]
            if show_payment:
                row.append(format_paid(summary["is_paid"]))
            summary_table.add_row(*row)

        console.print(summary_table)

    console.print(
        Padding(
            f"grand total owed: {format_amount(totals['total_owed'], currency)}    "
            f"total collected: {format_amount(totals['total_collected'], currency)}",
            (0, 1),
        )
    )
