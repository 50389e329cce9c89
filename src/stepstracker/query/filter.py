# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from stepstracker.model.entry import Entry


def filter_entries(
    entries: list[Entry],
    name: Optional[str] = None,
    date_from: Optional[pendulum.Date] = None,
    date_to: Optional[pendulum.Date] = None,
) -> list[Entry]:
    """
    Keep entries whose participant contains `name` (case-insensitive) and
    whose date falls inside the inclusive range. Unset filters match all.
    """
    filtered_entries = list(entries)

    if name:
        needle = name.lower()
        filtered_entries = [
            entry
            for entry in filtered_entries
            if needle in entry["participant"].lower()
        ]
    if date_from is not None:
        filtered_entries = [
            entry for entry in filtered_entries if entry["date"] >= date_from
        ]
    if date_to is not None:
        filtered_entries = [
            entry for entry in filtered_entries if entry["date"] <= date_to
        ]

    return filtered_entries
