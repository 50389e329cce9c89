# SPDX-License-Identifier: MIT

from stepstracker.model.app_state import AppState, PaymentLedger
from stepstracker.repository.gateway import PersistenceGateway


class PaymentRepository:
    def __init__(self, state: AppState, gateway: PersistenceGateway) -> None:
        self.state = state
        self.gateway = gateway

    @property
    def payments(self) -> PaymentLedger:
        return self.state["payments"]

    def is_paid(self, participant: str) -> bool:
        return self.payments.get(participant, False)

    def toggle(self, participant: str) -> bool:
        self.payments[participant] = not self.is_paid(participant)

        self.gateway.save(self.state)
        return self.payments[participant]
