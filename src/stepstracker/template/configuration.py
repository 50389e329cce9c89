# SPDX-License-Identifier: MIT

from stepstracker import configuration


def get_configuration_template() -> configuration.Configuration:
    return {
        "participants": list(configuration.DEFAULT_PARTICIPANTS),
        "target_steps": configuration.DEFAULT_TARGET_STEPS,
        "penalty_amount": configuration.DEFAULT_PENALTY_AMOUNT,
        "currency": configuration.DEFAULT_CURRENCY,
        "admin_password": configuration.DEFAULT_ADMIN_PASSWORD,
        "data_path": None,
        "recent_entries_limit": configuration.DEFAULT_RECENT_ENTRIES_LIMIT,
    }
