# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

import pendulum

from stepstracker.model.entity_id import EntityId

Status = Literal["OK", "Missed"]


class Entry(TypedDict):
    id: EntityId
    participant: str
    date: pendulum.Date  # Calendar day the steps were walked
    steps: int
    proof: Optional[str]  # Name of the attached image, never decoded
    proof_data: Optional[str]  # Opaque locator for the attached image
    timestamp: pendulum.DateTime  # When this entry was recorded
