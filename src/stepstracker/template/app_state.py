# SPDX-License-Identifier: MIT

from stepstracker.model.app_state import AppState


def get_app_state_template() -> AppState:
    return {
        "entries": [],
        "payments": {},
    }
