# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

import pendulum

from stepstracker.errors import DuplicateError, NotFoundError
from stepstracker.model.app_state import AppState
from stepstracker.model.entity_id import EntityId
from stepstracker.model.entry import Entry
from stepstracker.repository.gateway import PersistenceGateway
from stepstracker.template.entry import get_entry_template
from stepstracker.time import date_to_str


class EntryRepository:
    def __init__(self, state: AppState, gateway: PersistenceGateway) -> None:
        self.state = state
        self.gateway = gateway

    @property
    def entries(self) -> list[Entry]:
        return self.state["entries"]

    def add(
        self,
        participant: str,
        date: pendulum.Date,
        steps: int,
        proof: Optional[str] = None,
        proof_data: Optional[str] = None,
    ) -> Entry:
        if self.__find_by_participant_and_date(participant, date) is not None:
            raise DuplicateError(
                f"Entry already exists for {participant} on {date_to_str(date)}. "
                "Use edit to modify."
            )

        entry = get_entry_template(participant, date, steps)
        entry["proof"] = proof
        entry["proof_data"] = proof_data
        self.entries.append(entry)

        self.gateway.save(self.state)
        return deepcopy(entry)

    def edit(self, id: EntityId, steps: int) -> Entry:
        entry = self.__find_by_id(id)
        if entry is None:
            raise NotFoundError(f"No entry with id {id}")

        entry["steps"] = steps

        self.gateway.save(self.state)
        return deepcopy(entry)

    def delete(self, id: EntityId) -> bool:
        entry = self.__find_by_id(id)
        if entry is None:
            return False

        self.entries.remove(entry)

        self.gateway.save(self.state)
        return True

    def find_by_id(self, id: EntityId) -> Optional[Entry]:
        return deepcopy(self.__find_by_id(id))

    def find_by_participant_and_date(
        self, participant: str, date: pendulum.Date
    ) -> Optional[Entry]:
        return deepcopy(self.__find_by_participant_and_date(participant, date))

    def get_all_entries(self) -> list[Entry]:
        return deepcopy(self.entries)

    def __find_by_id(self, id: EntityId) -> Optional[Entry]:
        for entry in self.entries:
            if entry["id"] == id:
                return entry
        return None

    def __find_by_participant_and_date(
        self, participant: str, date: pendulum.Date
    ) -> Optional[Entry]:
        for entry in self.entries:
            if entry["participant"] == participant and entry["date"] == date:
                return entry
        return None
