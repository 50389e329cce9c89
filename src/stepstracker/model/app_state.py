# SPDX-License-Identifier: MIT

from typing import TypeAlias, TypedDict

from stepstracker.model.entry import Entry

PaymentLedger: TypeAlias = dict[str, bool]


class AppState(TypedDict):
    entries: list[Entry]  # Insertion order, unique by id
    payments: PaymentLedger  # Missing participant means unpaid
