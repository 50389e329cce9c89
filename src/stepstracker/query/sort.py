# SPDX-License-Identifier: MIT

from stepstracker.model.entry import Entry


def sort_entries_by_date(entries: list[Entry], descending: bool = True) -> list[Entry]:
    # sorted() is stable, so entries on the same day keep insertion order
    return sorted(entries, key=lambda entry: entry["date"], reverse=descending)


def recent_entries(entries: list[Entry], limit: int) -> list[Entry]:
    return sorted(entries, key=lambda entry: entry["timestamp"], reverse=True)[
        :limit
    ]
