# SPDX-License-Identifier: MIT

import csv
import io

import pendulum

from stepstracker import configuration
from stepstracker.model.entry import Entry
from stepstracker.model.summary import ParticipantSummary
from stepstracker.service.calculation import amount_owed, status
from stepstracker.time import date_to_str

TRACKER_CSV_FILENAME = "daily-tracker.csv"
SUMMARY_CSV_FILENAME = "payment-summary.csv"

TRACKER_CSV_HEADER = ["Date", "Name", "Steps", "Status", "Amount Owed"]
SUMMARY_CSV_HEADER = [
    "Name",
    "Total Days",
    "Days Missed",
    "Amount Owed",
    "Completion Rate",
    "Payment Status",
]


def backup_filename(date: pendulum.Date) -> str:
    return f"steps-tracker-backup-{date_to_str(date)}.json"


def format_completion_rate(completion_rate: float) -> str:
    return f"{completion_rate:.1f}%"


def __write_rows(rows: list[list[object]]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerows(rows)
    return buffer.getvalue()


def export_tracker_csv(
    entries: list[Entry],
    target_steps: int = configuration.DEFAULT_TARGET_STEPS,
    penalty_amount: int = configuration.DEFAULT_PENALTY_AMOUNT,
) -> str:
    """
    One row per entry in collection order. Amounts are bare integers; the
    currency is a display concern and never written to the file.
    """
    rows: list[list[object]] = [TRACKER_CSV_HEADER]
    for entry in entries:
        rows.append(
            [
                date_to_str(entry["date"]),
                entry["participant"],
                entry["steps"],
                status(entry["steps"], target_steps),
                amount_owed(entry["steps"], target_steps, penalty_amount),
            ]
        )
    return __write_rows(rows)


def export_summary_csv(summaries: list[ParticipantSummary]) -> str:
    rows: list[list[object]] = [SUMMARY_CSV_HEADER]
    for summary in summaries:
        if summary["total_days"] == 0:
            continue
        rows.append(
            [
                summary["participant"],
                summary["total_days"],
                summary["days_missed"],
                summary["amount_owed"],
                format_completion_rate(summary["completion_rate"]),
                "Paid" if summary["is_paid"] else "Unpaid",
            ]
        )
    return __write_rows(rows)
