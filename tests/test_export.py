# SPDX-License-Identifier: MIT

from stepstracker.service.calculation import participant_summaries
from stepstracker.service.export import (
    backup_filename,
    export_summary_csv,
    export_tracker_csv,
    format_completion_rate,
)
from tests.helpers import day, make_entry


def test_tracker_csv_keeps_collection_order():
    entries = [
        make_entry("Sam", "2025-01-03", 10000),
        make_entry("Joy", "2025-01-01", 9999),
    ]

    assert export_tracker_csv(entries) == (
        "Date,Name,Steps,Status,Amount Owed\n"
        "2025-01-03,Sam,10000,OK,0\n"
        "2025-01-01,Joy,9999,Missed,50\n"
    )


def test_tracker_csv_with_no_entries_is_just_the_header():
    assert export_tracker_csv([]) == "Date,Name,Steps,Status,Amount Owed\n"


def test_summary_csv_lists_only_participants_with_entries():
    entries = [
        make_entry("Sam", "2025-01-01", 12000),
        make_entry("Sam", "2025-01-02", 100),
        make_entry("Sam", "2025-01-03", 100),
    ]
    summaries = participant_summaries(
        ["Joy", "Sam"], entries, {"Sam": True}, include_empty=True
    )

    assert export_summary_csv(summaries).splitlines() == [
        "Name,Total Days,Days Missed,Amount Owed,Completion Rate,Payment Status",
        "Sam,3,2,100,33.3%,Paid",
    ]


def test_completion_rate_format():
    assert format_completion_rate(0) == "0.0%"
    assert format_completion_rate(100) == "100.0%"
    assert format_completion_rate(200 / 3) == "66.7%"


def test_backup_filename():
    assert backup_filename(day("2025-03-09")) == "steps-tracker-backup-2025-03-09.json"
