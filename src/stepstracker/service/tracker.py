# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional, TypeVar, Union

import pendulum

from stepstracker import configuration
from stepstracker.errors import (
    DuplicateError,
    FormatError,
    NotFoundError,
    StorageError,
    TrackerError,
    ValidationError,
)
from stepstracker.logger import get_logger
from stepstracker.model.app_state import AppState
from stepstracker.model.entity_id import EntityId
from stepstracker.model.entry import Entry, Status
from stepstracker.model.result import MutationResult
from stepstracker.model.summary import EntryTotals, GrandTotals, ParticipantSummary
from stepstracker.query.filter import filter_entries
from stepstracker.query.sort import recent_entries, sort_entries_by_date
from stepstracker.repository.entry import EntryRepository
from stepstracker.repository.gateway import PersistenceGateway
from stepstracker.repository.payment import PaymentRepository
from stepstracker.service import calculation, export
from stepstracker.service.confirmation import ClearAllConfirmation
from stepstracker.service.entry import (
    validate_date,
    validate_participant,
    validate_steps,
)
from stepstracker.time import date_to_str

log = get_logger(__name__)

T = TypeVar("T")


def succeeded(
    reason: str, value: Optional[T] = None, storage_error: Optional[StorageError] = None
) -> MutationResult[T]:
    if storage_error is not None:
        reason = f"{reason} Warning: the change could not be saved ({storage_error})."
    return {
        "ok": True,
        "reason": reason,
        "value": value,
        "error": None,
        "storage_error": storage_error,
    }


def failed(error: TrackerError) -> MutationResult[T]:
    return {
        "ok": False,
        "reason": str(error),
        "value": None,
        "error": error,
        "storage_error": None,
    }


class StepsTracker:
    """
    Owns the single AppState and is the only entry point the terminal layer
    uses. Reads return plain data, mutations return a MutationResult instead
    of raising.
    """

    def __init__(
        self, config: configuration.Configuration, gateway: PersistenceGateway
    ) -> None:
        self.config = config
        self.gateway = gateway
        self.state: AppState = gateway.load()
        self.startup_warning = gateway.last_warning
        self.entry_repo = EntryRepository(self.state, gateway)
        self.payment_repo = PaymentRepository(self.state, gateway)

    @property
    def participants(self) -> list[str]:
        return self.config["participants"]

    @property
    def target_steps(self) -> int:
        return self.config["target_steps"]

    @property
    def penalty_amount(self) -> int:
        return self.config["penalty_amount"]

    def validate_admin_password(self, password: Optional[str]) -> bool:
        return password == self.config["admin_password"]

    # ─────────────────────────────────────────────────────────────
    # Reads
    # ─────────────────────────────────────────────────────────────

    def status(self, steps: int) -> Status:
        return calculation.status(steps, self.target_steps)

    def amount_owed(self, steps: int) -> int:
        return calculation.amount_owed(steps, self.target_steps, self.penalty_amount)

    def get_entries(self) -> list[Entry]:
        return self.entry_repo.get_all_entries()

    def get_entry(self, id: EntityId) -> Optional[Entry]:
        return self.entry_repo.find_by_id(id)

    def tracker_view(
        self,
        name: Optional[str] = None,
        date_from: Optional[pendulum.Date] = None,
        date_to: Optional[pendulum.Date] = None,
    ) -> list[Entry]:
        return sort_entries_by_date(
            filter_entries(self.get_entries(), name, date_from, date_to)
        )

    def tracker_totals(self, entries: list[Entry]) -> EntryTotals:
        return calculation.entry_totals(entries, self.target_steps, self.penalty_amount)

    def recent_entries(self, limit: Optional[int] = None) -> list[Entry]:
        if limit is None:
            limit = self.config["recent_entries_limit"]
        if limit <= 0:
            raise ValidationError("Recent entries limit must be positive.")
        return recent_entries(self.get_entries(), limit)

    def participant_summary(self, participant: str) -> ParticipantSummary:
        return calculation.participant_summary(
            participant,
            self.state["entries"],
            self.state["payments"],
            self.target_steps,
            self.penalty_amount,
        )

    def participant_summaries(
        self, include_empty: bool = False
    ) -> list[ParticipantSummary]:
        return calculation.participant_summaries(
            self.participants,
            self.state["entries"],
            self.state["payments"],
            self.target_steps,
            self.penalty_amount,
            include_empty=include_empty,
        )

    def grand_totals(self) -> GrandTotals:
        return calculation.grand_totals(
            self.participants,
            self.state["entries"],
            self.state["payments"],
            self.target_steps,
            self.penalty_amount,
        )

    def export_tracker_csv(self) -> str:
        return export.export_tracker_csv(
            self.state["entries"], self.target_steps, self.penalty_amount
        )

    def export_summary_csv(self) -> str:
        return export.export_summary_csv(self.participant_summaries())

    def export_backup(self) -> bytes:
        return self.gateway.export_backup(self.state)

    # ─────────────────────────────────────────────────────────────
    # Mutations
    # ─────────────────────────────────────────────────────────────

    def add_entry(
        self,
        participant: Optional[str],
        date: Optional[Union[pendulum.Date, str]],
        steps: Optional[Union[int, str]],
        proof: Optional[str] = None,
        proof_data: Optional[str] = None,
        today: Optional[pendulum.Date] = None,
    ) -> MutationResult[Entry]:
        try:
            valid_participant = validate_participant(participant, self.participants)
            valid_date = validate_date(date, today)
            valid_steps = validate_steps(steps)
        except ValidationError as e:
            return failed(e)

        try:
            entry = self.entry_repo.add(
                valid_participant, valid_date, valid_steps, proof, proof_data
            )
        except DuplicateError as e:
            log.info(
                "duplicate entry rejected",
                participant=valid_participant,
                date=date_to_str(valid_date),
            )
            return failed(e)
        except StorageError as e:
            return succeeded(
                f"Entry added successfully for {valid_participant}!",
                self.entry_repo.find_by_participant_and_date(
                    valid_participant, valid_date
                ),
                e,
            )

        log.info(
            "entry added",
            id=entry["id"],
            participant=valid_participant,
            date=date_to_str(valid_date),
            steps=valid_steps,
        )
        return succeeded(f"Entry added successfully for {valid_participant}!", entry)

    def edit_entry(
        self, id: EntityId, steps: Optional[Union[int, str]]
    ) -> MutationResult[Entry]:
        try:
            valid_steps = validate_steps(steps)
        except ValidationError as e:
            return failed(e)

        try:
            entry = self.entry_repo.edit(id, valid_steps)
        except NotFoundError as e:
            return failed(e)
        except StorageError as e:
            return succeeded(
                "Entry updated successfully!", self.entry_repo.find_by_id(id), e
            )

        log.info("entry edited", id=id, steps=valid_steps)
        return succeeded("Entry updated successfully!", entry)

    def delete_entry(self, id: EntityId) -> MutationResult[Entry]:
        entry = self.entry_repo.find_by_id(id)
        try:
            deleted = self.entry_repo.delete(id)
        except StorageError as e:
            return succeeded("Entry deleted successfully!", entry, e)

        if not deleted:
            return failed(NotFoundError(f"No entry with id {id}"))

        log.info("entry deleted", id=id)
        return succeeded("Entry deleted successfully!", entry)

    def toggle_payment(self, participant: Optional[str]) -> MutationResult[bool]:
        try:
            valid_participant = validate_participant(participant, self.participants)
        except ValidationError as e:
            return failed(e)

        try:
            is_paid = self.payment_repo.toggle(valid_participant)
        except StorageError as e:
            is_paid = self.payment_repo.is_paid(valid_participant)
            return succeeded(
                self.__payment_reason(valid_participant, is_paid), is_paid, e
            )

        log.info("payment toggled", participant=valid_participant, is_paid=is_paid)
        return succeeded(self.__payment_reason(valid_participant, is_paid), is_paid)

    def clear_all(self, confirmation: ClearAllConfirmation) -> MutationResult[None]:
        if not confirmation.is_confirmed:
            return failed(ValidationError("Clearing all data was not confirmed."))

        self.state["entries"].clear()
        self.state["payments"].clear()
        try:
            self.gateway.save(self.state)
        except StorageError as e:
            return succeeded("All data cleared successfully!", None, e)

        log.info("all data cleared")
        return succeeded("All data cleared successfully!")

    def restore_backup(self, data: Union[bytes, str]) -> MutationResult[AppState]:
        try:
            restored = self.gateway.import_backup(data)
        except FormatError as e:
            log.warning("backup rejected", reason=str(e))
            return failed(e)

        # Replace in place so the repositories keep sharing this state
        self.state["entries"][:] = restored["entries"]
        self.state["payments"].clear()
        self.state["payments"].update(restored["payments"])
        try:
            self.gateway.save(self.state)
        except StorageError as e:
            return succeeded("Data restored successfully!", deepcopy(self.state), e)

        log.info("backup restored", entries=len(restored["entries"]))
        return succeeded("Data restored successfully!", deepcopy(self.state))

    def __payment_reason(self, participant: str, is_paid: bool) -> str:
        return f"{participant} marked as {'Paid' if is_paid else 'Unpaid'}."
