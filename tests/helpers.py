# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from stepstracker.errors import StorageError
from stepstracker.model.entry import Entry
from stepstracker.repository.store import MemoryKeyValueStore


class FailingStore(MemoryKeyValueStore):
    """Memory store whose writes can be switched off to simulate a full disk."""

    def __init__(self) -> None:
        super().__init__()
        self.fail_writes = False

    def write(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise StorageError("disk full")
        super().write(key, value)


def day(value: str) -> pendulum.Date:
    return pendulum.from_format(value, "YYYY-MM-DD").date()


def make_entry(
    participant: str,
    date: str,
    steps: int,
    id: Optional[str] = None,
    proof: Optional[str] = None,
    timestamp: Optional[pendulum.DateTime] = None,
) -> Entry:
    return {
        "id": id or f"{participant}-{date}",
        "participant": participant,
        "date": day(date),
        "steps": steps,
        "proof": proof,
        "proof_data": None,
        "timestamp": timestamp or pendulum.datetime(2025, 1, 1, 12, tz="UTC"),
    }
