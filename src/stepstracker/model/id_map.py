# SPDX-License-Identifier: MIT

from typing import TypedDict

from stepstracker.model.entity_id import EntityId


class IdMap(TypedDict):
    """
    Synthetic id : real entry id, plus the reverse lookup.

    Entries keep opaque string ids. The terminal shows small integers instead,
    so if entry "5b1c..." was the third one listed then

    real_id = id_map["synthetic_to_real"][3]  # returns "5b1c..."
    """

    synthetic_to_real: dict[int, EntityId]
    real_to_synthetic: dict[EntityId, int]
