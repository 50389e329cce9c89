# SPDX-License-Identifier: MIT

import json
from typing import Any, Optional, Union

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from stepstracker import configuration, time
from stepstracker.errors import FormatError, StorageError
from stepstracker.logger import get_logger
from stepstracker.model.app_state import AppState, PaymentLedger
from stepstracker.model.entry import Entry
from stepstracker.repository.store import KeyValueStore
from stepstracker.template.app_state import get_app_state_template

log = get_logger(__name__)


class PersistenceGateway:
    """
    Durable round-trip of the whole AppState.

    The state lives under a single key of a key-value store as YAML. Backups
    are the same document rendered as JSON with a format version tag.
    """

    def __init__(
        self, store: KeyValueStore, key: str = configuration.STATE_KEY
    ) -> None:
        self.store = store
        self.key = key
        self.last_warning: Optional[str] = None

    def load(self) -> AppState:
        self.last_warning = None
        try:
            raw_text = self.store.read(self.key)
        except StorageError as e:
            return self.__fallback(f"Error loading saved data. Starting fresh. ({e})")

        if raw_text is None:
            log.debug("no saved state", key=self.key)
            return get_app_state_template()

        try:
            raw_state = load(raw_text, Loader=Loader)
            state = convert_state_for_deserialization(raw_state)
        except (YAMLError, FormatError, ValueError) as e:
            # PyYAML raises a bare ValueError for impossible dates like 2025-02-30
            return self.__fallback(f"Error loading saved data. Starting fresh. ({e})")

        log.debug("loaded state", key=self.key, entries=len(state["entries"]))
        return state

    def save(self, state: AppState) -> None:
        serializable_state = convert_state_for_serialization(state)
        serializable_state["timestamp"] = time.datetime_to_iso_str(time.now_utc())
        try:
            self.store.write(
                self.key, dump(serializable_state, Dumper=Dumper, sort_keys=False)
            )
        except StorageError:
            log.error("failed to save state", key=self.key)
            raise

    def export_backup(self, state: AppState) -> bytes:
        backup = convert_state_for_serialization(state)
        backup["timestamp"] = time.datetime_to_iso_str(time.now_utc())
        backup["version"] = configuration.BACKUP_FORMAT_VERSION
        return json.dumps(backup, indent=2, ensure_ascii=False).encode("utf-8")

    def import_backup(self, data: Union[bytes, str]) -> AppState:
        try:
            text = data.decode("utf-8") if isinstance(data, bytes) else data
            raw_state = json.loads(text)
        except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as e:
            raise FormatError(f"Error reading backup file: {e}") from e
        return convert_state_for_deserialization(raw_state)

    def __fallback(self, message: str) -> AppState:
        self.last_warning = message
        log.warning("falling back to empty state", key=self.key, reason=message)
        return get_app_state_template()


def convert_entry_for_serialization(entry: Entry) -> dict[str, Any]:
    return {
        "id": entry["id"],
        "participant": entry["participant"],
        "date": time.date_to_str(entry["date"]),
        "steps": entry["steps"],
        "proof": entry["proof"],
        "proofData": entry["proof_data"],
        "timestamp": time.datetime_to_iso_str(entry["timestamp"]),
    }


def convert_state_for_serialization(state: AppState) -> dict[str, Any]:
    return {
        "entries": [
            convert_entry_for_serialization(entry) for entry in state["entries"]
        ],
        "payments": dict(state["payments"]),
    }


def convert_entry_for_deserialization(raw_entry: Any) -> Entry:
    if not isinstance(raw_entry, dict):
        raise FormatError(f"Invalid entry: {raw_entry!r}")

    for field in ("id", "participant", "date", "steps", "timestamp"):
        if field not in raw_entry:
            raise FormatError(f"Entry is missing '{field}': {raw_entry!r}")

    entry_id = raw_entry["id"]
    participant = raw_entry["participant"]
    steps = raw_entry["steps"]
    proof = raw_entry.get("proof")
    proof_data = raw_entry.get("proofData")

    if not isinstance(entry_id, str) or entry_id == "":
        raise FormatError(f"Entry id must be a non-empty string: {entry_id!r}")
    if not isinstance(participant, str) or participant == "":
        raise FormatError(f"Entry participant must be a name: {participant!r}")
    if isinstance(steps, bool) or not isinstance(steps, int) or steps < 0:
        raise FormatError(f"Entry steps must be a non-negative integer: {steps!r}")
    if proof is not None and not isinstance(proof, str):
        raise FormatError(f"Entry proof must be a string: {proof!r}")
    if proof_data is not None and not isinstance(proof_data, str):
        raise FormatError(f"Entry proofData must be a string: {proof_data!r}")

    try:
        date = time.date_from_str(str(raw_entry["date"]))
        timestamp = time.datetime_from_str(str(raw_entry["timestamp"]))
    except ValueError as e:
        raise FormatError(f"Invalid entry date or timestamp: {e}") from e

    return {
        "id": entry_id,
        "participant": participant,
        "date": date,
        "steps": steps,
        "proof": proof,
        "proof_data": proof_data,
        "timestamp": timestamp,
    }


def convert_payments_for_deserialization(raw_payments: Any) -> PaymentLedger:
    if not isinstance(raw_payments, dict):
        raise FormatError("'payments' must be a mapping of names to flags")
    payments: PaymentLedger = {}
    for participant, is_paid in raw_payments.items():
        if not isinstance(participant, str) or not isinstance(is_paid, bool):
            raise FormatError(f"Invalid payment flag: {participant!r}: {is_paid!r}")
        payments[participant] = is_paid
    return payments


def convert_state_for_deserialization(raw_state: Any) -> AppState:
    """
    Rebuild an AppState from a decoded document. Both an `entries` list and a
    `payments` mapping must be present; anything malformed rejects the whole
    document.
    """
    if not isinstance(raw_state, dict):
        raise FormatError("Invalid backup file format.")
    if "entries" not in raw_state or "payments" not in raw_state:
        raise FormatError("Invalid backup file format.")
    if not isinstance(raw_state["entries"], list):
        raise FormatError("'entries' must be a list")

    entries = [
        convert_entry_for_deserialization(raw_entry)
        for raw_entry in raw_state["entries"]
    ]

    seen_ids: set[str] = set()
    seen_days: set[tuple[str, str]] = set()
    for entry in entries:
        day = (entry["participant"], time.date_to_str(entry["date"]))
        if entry["id"] in seen_ids:
            raise FormatError(f"Duplicate entry id: {entry['id']}")
        if day in seen_days:
            raise FormatError(f"Duplicate entry for {day[0]} on {day[1]}")
        seen_ids.add(entry["id"])
        seen_days.add(day)

    return {
        "entries": entries,
        "payments": convert_payments_for_deserialization(raw_state["payments"]),
    }
