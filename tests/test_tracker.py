# SPDX-License-Identifier: MIT

import json

import pytest

from stepstracker.errors import (
    DuplicateError,
    FormatError,
    NotFoundError,
    ValidationError,
)
from stepstracker.repository.gateway import PersistenceGateway
from stepstracker.repository.store import MemoryKeyValueStore
from stepstracker.service.confirmation import ClearAllConfirmation
from stepstracker.service.tracker import StepsTracker
from tests.helpers import day


def confirmed() -> ClearAllConfirmation:
    confirmation = ClearAllConfirmation()
    confirmation.accept()
    confirmation.accept()
    return confirmation


def test_end_to_end_scenario(tracker):
    added = tracker.add_entry("Sam", "2025-01-01", 12000)
    assert added["ok"]
    entry_id = added["value"]["id"]
    assert tracker.status(added["value"]["steps"]) == "OK"

    duplicate = tracker.add_entry("Sam", "2025-01-01", 500)
    assert not duplicate["ok"]
    assert isinstance(duplicate["error"], DuplicateError)
    assert len(tracker.get_entries()) == 1

    edited = tracker.edit_entry(entry_id, 500)
    assert edited["ok"]
    assert tracker.status(edited["value"]["steps"]) == "Missed"
    assert tracker.amount_owed(edited["value"]["steps"]) == 50
    assert tracker.participant_summary("Sam")["amount_owed"] == 50

    deleted = tracker.delete_entry(entry_id)
    assert deleted["ok"]
    assert tracker.participant_summary("Sam")["total_days"] == 0


def test_add_entry_reports_reason_on_success(tracker):
    result = tracker.add_entry("Sam", day("2025-01-01"), "12000")

    assert result["reason"] == "Entry added successfully for Sam!"
    assert result["value"]["steps"] == 12000
    assert result["error"] is None


@pytest.mark.parametrize(
    "participant, date, steps",
    [
        (None, "2025-01-01", 100),
        ("", "2025-01-01", 100),
        ("Nobody", "2025-01-01", 100),
        ("Sam", None, 100),
        ("Sam", "2025-13-40", 100),
        ("Sam", "2025-01-01", None),
        ("Sam", "2025-01-01", ""),
        ("Sam", "2025-01-01", -1),
        ("Sam", "2025-01-01", "-5"),
        ("Sam", "2025-01-01", "lots"),
    ],
)
def test_add_entry_validation_failures(tracker, participant, date, steps):
    result = tracker.add_entry(participant, date, steps)

    assert not result["ok"]
    assert isinstance(result["error"], ValidationError)
    assert tracker.get_entries() == []


def test_add_entry_rejects_future_dates(tracker):
    result = tracker.add_entry("Sam", "2025-01-02", 100, today=day("2025-01-01"))

    assert not result["ok"]
    assert "future" in result["reason"]


def test_add_entry_accepts_today(tracker):
    assert tracker.add_entry("Sam", "2025-01-01", 100, today=day("2025-01-01"))["ok"]


def test_edit_and_delete_unknown_ids(tracker):
    edited = tracker.edit_entry("missing", 100)
    deleted = tracker.delete_entry("missing")

    assert isinstance(edited["error"], NotFoundError)
    assert isinstance(deleted["error"], NotFoundError)


def test_edit_rejects_negative_steps(tracker):
    entry_id = tracker.add_entry("Sam", "2025-01-01", 12000)["value"]["id"]

    result = tracker.edit_entry(entry_id, -3)

    assert isinstance(result["error"], ValidationError)
    assert tracker.get_entry(entry_id)["steps"] == 12000


def test_toggle_payment_changes_collected_but_not_owed(tracker):
    tracker.add_entry("Sam", "2025-01-01", 100)
    tracker.add_entry("Joy", "2025-01-01", 100)
    owed_before = tracker.participant_summary("Sam")["amount_owed"]

    result = tracker.toggle_payment("Sam")

    assert result["ok"]
    assert result["value"] is True
    assert result["reason"] == "Sam marked as Paid."
    assert tracker.participant_summary("Sam")["amount_owed"] == owed_before
    assert tracker.grand_totals() == {"total_owed": 100, "total_collected": 50}

    tracker.toggle_payment("Sam")
    assert tracker.grand_totals() == {"total_owed": 100, "total_collected": 0}


def test_toggle_payment_for_unknown_participant(tracker):
    result = tracker.toggle_payment("Nobody")

    assert isinstance(result["error"], ValidationError)


def test_storage_failure_keeps_in_memory_change(tracker, store):
    store.fail_writes = True

    result = tracker.add_entry("Sam", "2025-01-01", 12000)

    assert result["ok"]
    assert result["storage_error"] is not None
    assert "could not be saved" in result["reason"]
    assert result["value"]["participant"] == "Sam"
    assert len(tracker.get_entries()) == 1

    toggled = tracker.toggle_payment("Sam")
    assert toggled["value"] is True
    assert toggled["storage_error"] is not None


def test_mutations_are_persisted(config, gateway, tracker):
    tracker.add_entry("Sam", "2025-01-01", 12000)
    tracker.toggle_payment("Sam")

    reloaded = StepsTracker(config, PersistenceGateway(gateway.store))

    assert reloaded.state == tracker.state


def test_startup_warning_for_corrupt_store(config, store):
    store.write("stepsTrackerData", "entries: [broken")

    tracker = StepsTracker(config, PersistenceGateway(store))

    assert tracker.startup_warning is not None
    assert tracker.get_entries() == []


def test_startup_survives_impossible_saved_date(config, store):
    store.write(
        "stepsTrackerData",
        "entries:\n- id: a\n  participant: Sam\n  date: 2025-02-30\n"
        "  steps: 10\n  timestamp: 2025-02-01T00:00:00Z\npayments: {}\n",
    )

    tracker = StepsTracker(config, PersistenceGateway(store))

    assert tracker.startup_warning is not None
    assert tracker.add_entry("Sam", "2025-01-01", 12000)["ok"]


def test_clear_all_requires_confirmation(tracker):
    tracker.add_entry("Sam", "2025-01-01", 100)
    tracker.toggle_payment("Sam")

    half = ClearAllConfirmation()
    half.accept()
    assert not tracker.clear_all(half)["ok"]
    assert len(tracker.get_entries()) == 1

    result = tracker.clear_all(confirmed())
    assert result["ok"]
    assert tracker.state == {"entries": [], "payments": {}}
    assert tracker.gateway.load() == {"entries": [], "payments": {}}


def test_cleared_state_still_accepts_entries(tracker):
    tracker.add_entry("Sam", "2025-01-01", 100)
    tracker.clear_all(confirmed())

    assert tracker.add_entry("Sam", "2025-01-01", 100)["ok"]


def test_restore_replaces_state(tracker):
    tracker.add_entry("Joy", "2025-01-05", 100)
    other = StepsTracker(tracker.config, PersistenceGateway(MemoryKeyValueStore()))
    other.add_entry("Sam", "2025-01-01", 12000)
    other.toggle_payment("Sam")

    result = tracker.restore_backup(other.export_backup())

    assert result["ok"]
    assert tracker.state == other.state
    assert tracker.gateway.load() == other.state
    # repositories keep working against the restored state
    assert not tracker.add_entry("Sam", "2025-01-01", 1)["ok"]


def test_malformed_restore_leaves_state_untouched(tracker):
    tracker.add_entry("Sam", "2025-01-01", 12000)
    before = tracker.get_entries()

    result = tracker.restore_backup(b"{}")

    assert not result["ok"]
    assert isinstance(result["error"], FormatError)
    assert result["reason"] == "Invalid backup file format."
    assert tracker.get_entries() == before


def test_views_and_exports(tracker):
    tracker.add_entry("Sam", "2025-01-01", 12000)
    tracker.add_entry("Joy", "2025-01-03", 500)
    tracker.add_entry("Sam", "2025-01-02", 9000)

    view = tracker.tracker_view(name="sam")
    assert [entry["date"].isoformat() for entry in view] == ["2025-01-02", "2025-01-01"]
    assert tracker.tracker_totals(view) == {"total_entries": 2, "total_owed": 50}

    assert tracker.export_tracker_csv().splitlines() == [
        "Date,Name,Steps,Status,Amount Owed",
        "2025-01-01,Sam,12000,OK,0",
        "2025-01-03,Joy,500,Missed,50",
        "2025-01-02,Sam,9000,Missed,50",
    ]
    assert json.loads(tracker.export_backup())["version"] == "1.0"


def test_configured_rules_drive_calculations(config, gateway):
    config["target_steps"] = 5000
    config["penalty_amount"] = 20
    tracker = StepsTracker(config, gateway)

    tracker.add_entry("Sam", "2025-01-01", 5000)
    tracker.add_entry("Sam", "2025-01-02", 4999)

    summary = tracker.participant_summary("Sam")
    assert summary["days_missed"] == 1
    assert summary["amount_owed"] == 20


def test_admin_password(tracker):
    assert tracker.validate_admin_password("steps2025")
    assert not tracker.validate_admin_password("wrong")
    assert not tracker.validate_admin_password(None)


def test_restore_result_is_a_copy(tracker):
    other = StepsTracker(tracker.config, PersistenceGateway(MemoryKeyValueStore()))
    other.add_entry("Sam", "2025-01-01", 12000)

    result = tracker.restore_backup(other.export_backup())
    result["value"]["entries"][0]["steps"] = 1
    result["value"]["payments"]["Sam"] = True

    assert tracker.get_entries()[0]["steps"] == 12000
    assert tracker.state["payments"] == {}


def test_deeply_nested_restore_is_reported_not_raised(tracker):
    tracker.add_entry("Sam", "2025-01-01", 12000)

    result = tracker.restore_backup(b"[" * 100000 + b"]" * 100000)

    assert not result["ok"]
    assert isinstance(result["error"], FormatError)
    assert result["reason"].startswith("Error reading backup file")
    assert len(tracker.get_entries()) == 1


@pytest.mark.parametrize("limit", [0, -1])
def test_recent_entries_rejects_non_positive_limit(tracker, limit):
    tracker.add_entry("Sam", "2025-01-01", 12000)
    tracker.add_entry("Joy", "2025-01-01", 12000)

    with pytest.raises(ValidationError):
        tracker.recent_entries(limit)


def test_recent_entries_uses_configured_limit(config, gateway):
    config["recent_entries_limit"] = 1
    tracker = StepsTracker(config, gateway)
    tracker.add_entry("Sam", "2025-01-01", 12000)
    tracker.add_entry("Joy", "2025-01-02", 12000)

    assert len(tracker.recent_entries()) == 1
    assert len(tracker.recent_entries(5)) == 2
