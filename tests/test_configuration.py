# SPDX-License-Identifier: MIT

import pytest

from stepstracker import configuration
from stepstracker.repository.configuration import (
    CONFIGURATION_REPO,
    convert_setting_for_deserialization,
)


def write_config(text: str) -> None:
    configuration.APP_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    configuration.APP_CONFIG_PATH.write_text(text)
    CONFIGURATION_REPO.reset()


def test_missing_file_gives_defaults():
    config = CONFIGURATION_REPO.get_config()

    assert config["target_steps"] == 10000
    assert config["penalty_amount"] == 50
    assert config["admin_password"] == "steps2025"
    assert "Sam" in config["participants"]


def test_missing_settings_are_back_filled():
    write_config("target_steps: 8000\n")

    config = CONFIGURATION_REPO.get_config()

    assert config["target_steps"] == 8000
    assert config["penalty_amount"] == 50
    assert config["recent_entries_limit"] == 10


def test_numeric_password_is_read_as_text():
    write_config("admin_password: 1234\ncurrency: 978\n")

    config = CONFIGURATION_REPO.get_config()

    assert config["admin_password"] == "1234"
    assert config["currency"] == "978"


def test_mistyped_settings_keep_their_defaults():
    write_config(
        "target_steps: abc\n"
        "penalty_amount: -5\n"
        "recent_entries_limit: true\n"
        "participants: Sam\n"
        "data_path: 12\n"
    )

    config = CONFIGURATION_REPO.get_config()

    assert config["target_steps"] == 10000
    assert config["penalty_amount"] == 50
    assert config["recent_entries_limit"] == 10
    assert config["participants"] == configuration.DEFAULT_PARTICIPANTS
    assert config["data_path"] is None


@pytest.mark.parametrize(
    "key, value, expected",
    [
        ("participants", ["Sam", " Joy "], ["Sam", "Joy"]),
        ("participants", ["Sam", ""], None),
        ("target_steps", 0, None),
        ("target_steps", 12000, 12000),
        ("penalty_amount", 0, 0),
        ("penalty_amount", "50", None),
        ("admin_password", "", None),
        ("admin_password", False, None),
        ("data_path", "/srv/steps", "/srv/steps"),
        ("unknown", "value", None),
    ],
)
def test_convert_setting_for_deserialization(key, value, expected):
    assert convert_setting_for_deserialization(key, value) == expected


def test_update_then_flush_round_trips():
    CONFIGURATION_REPO.update_config(add_participants=["Alex"], penalty_amount=20)
    assert CONFIGURATION_REPO.flush()

    CONFIGURATION_REPO.reset()
    config = CONFIGURATION_REPO.get_config()

    assert "Alex" in config["participants"]
    assert config["penalty_amount"] == 20
