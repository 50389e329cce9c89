# SPDX-License-Identifier: MIT

from typing import TypedDict


class ParticipantSummary(TypedDict):
    participant: str
    total_days: int
    days_missed: int
    amount_owed: int
    completion_rate: float  # Percentage, 0 when there are no entries
    is_paid: bool


class GrandTotals(TypedDict):
    total_owed: int
    total_collected: int


class EntryTotals(TypedDict):
    total_entries: int
    total_owed: int
