# SPDX-License-Identifier: MIT

import pendulum

from stepstracker.model.entity_id import generate_entity_id
from stepstracker.model.entry import Entry
from stepstracker.time import now_utc


def get_entry_template(participant: str, date: pendulum.Date, steps: int) -> Entry:
    return {
        "id": generate_entity_id(),
        "participant": participant,
        "date": date,
        "steps": steps,
        "proof": None,
        "proof_data": None,
        "timestamp": now_utc(),
    }
