# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.padding import Padding
from rich.table import Table

from stepstracker.model.entry import Entry
from stepstracker.model.summary import EntryTotals
from stepstracker.repository.id_map import ID_MAP_REPO
from stepstracker.service.tracker import StepsTracker
from stepstracker.time import (
    date_to_display_str,
    datetime_to_display_local_datetime_str,
)
from stepstracker.view.util import format_amount, format_status, format_steps
from stepstracker.view.views.header import header


def entries_view(
    tracker: StepsTracker,
    entries: list[Entry],
    totals: EntryTotals,
) -> None:
    """Display the daily tracker table with the totals for the shown rows."""
    header("daily tracker")

    console = Console()
    if len(entries) == 0:
        console.print(Padding("No entries found.", (1, 1)))
        return

    currency = tracker.config["currency"]
    entries_table = Table(box=box.SIMPLE)
    entries_table.add_column("id")
    entries_table.add_column("date")
    entries_table.add_column("name")
    entries_table.add_column("steps", justify="right")
    entries_table.add_column("status")
    entries_table.add_column("proof")
    entries_table.add_column("owed", justify="right")

    for entry in entries:
        entries_table.add_row(
            str(ID_MAP_REPO.associate_id(entry["id"])),
            date_to_display_str(entry["date"]),
            entry["participant"],
            format_steps(entry["steps"]),
            format_status(tracker.status(entry["steps"])),
            entry["proof"] or "No proof",
            format_amount(tracker.amount_owed(entry["steps"]), currency),
        )

    console.print(entries_table)
    console.print(
        Padding(
            f"entries: {totals['total_entries']}    "
            f"owed: {format_amount(totals['total_owed'], currency)}",
            (0, 1),
        )
    )


def single_entry_view(tracker: StepsTracker, entry: Entry) -> None:
    header("entry")

    entry_table = Table(box=box.SIMPLE)
    entry_table.add_column("property")
    entry_table.add_column("value")

    entry_table.add_row("id", str(ID_MAP_REPO.associate_id(entry["id"])))
    entry_table.add_row("name", entry["participant"])
    entry_table.add_row("date", date_to_display_str(entry["date"]))
    entry_table.add_row("steps", format_steps(entry["steps"]))
    entry_table.add_row("status", format_status(tracker.status(entry["steps"])))
    entry_table.add_row(
        "owed",
        format_amount(tracker.amount_owed(entry["steps"]), tracker.config["currency"]),
    )
    entry_table.add_row("proof", entry["proof"] or "")
    entry_table.add_row(
        "recorded", datetime_to_display_local_datetime_str(entry["timestamp"])
    )

    console = Console()
    console.print(entry_table)


def recent_entries_view(tracker: StepsTracker, entries: list[Entry]) -> None:
    header("recent entries")

    console = Console()
    if len(entries) == 0:
        console.print(Padding("No recent entries", (1, 1)))
        return

    for entry in entries:
        console.print(
            Padding(
                f"[bold]{entry['participant']}[/bold] - "
                f"{format_steps(entry['steps'])} steps on "
                f"{date_to_display_str(entry['date'])} "
                f"{format_status(tracker.status(entry['steps']))}",
                (0, 1),
            )
        )
