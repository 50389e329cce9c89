# SPDX-License-Identifier: MIT

from typing import Literal

ConfirmationState = Literal["idle", "armed", "confirmed", "cancelled"]

FIRST_PROMPT = "Are you sure you want to clear ALL data? This action cannot be undone."
SECOND_PROMPT = (
    "This will permanently delete all entries and payment records. "
    "Are you absolutely sure?"
)


class ClearAllConfirmation:
    """
    Two-step confirmation for wiping every entry and payment flag.

    idle --accept--> armed --accept--> confirmed
    idle/armed --decline--> cancelled

    Only a confirmed instance may be passed to the controller's clear_all.
    """

    def __init__(self) -> None:
        self.state: ConfirmationState = "idle"

    @property
    def prompt(self) -> str:
        if self.state == "idle":
            return FIRST_PROMPT
        if self.state == "armed":
            return SECOND_PROMPT
        raise ValueError(f"No prompt once the confirmation is {self.state}")

    @property
    def is_confirmed(self) -> bool:
        return self.state == "confirmed"

    @property
    def is_pending(self) -> bool:
        return self.state in ("idle", "armed")

    def accept(self) -> ConfirmationState:
        if self.state == "idle":
            self.state = "armed"
        elif self.state == "armed":
            self.state = "confirmed"
        else:
            raise ValueError(f"Cannot accept a confirmation that is {self.state}")
        return self.state

    def decline(self) -> ConfirmationState:
        if not self.is_pending:
            raise ValueError(f"Cannot decline a confirmation that is {self.state}")
        self.state = "cancelled"
        return self.state
