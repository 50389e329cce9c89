# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "steps-tracker"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_STORE_PATH: Path = DATA_PATH / "store"
DATA_ID_MAP_PATH: Path = DATA_PATH / "id_map.yaml"

STATE_KEY = "stepsTrackerData"
BACKUP_FORMAT_VERSION = "1.0"

DEFAULT_PARTICIPANTS = [
    "Del",
    "Giem",
    "Glaiz",
    "Jeun",
    "Joy",
    "Kokoy",
    "Leanne",
    "Lui",
    "Ramon",
    "Robert",
    "Sarah",
    "Sheila",
    "Shin",
    "Yohan",
    "Zephanny",
    "Sam",
]
DEFAULT_TARGET_STEPS = 10000
DEFAULT_PENALTY_AMOUNT = 50
DEFAULT_CURRENCY = "PHP"
DEFAULT_ADMIN_PASSWORD = "steps2025"
DEFAULT_RECENT_ENTRIES_LIMIT = 10


class Configuration(TypedDict):
    participants: list[str]
    target_steps: int
    penalty_amount: int
    currency: str
    admin_password: str
    data_path: Optional[str]
    recent_entries_limit: int


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before the
    persistence gateway is constructed.
    """
    global DATA_PATH, DATA_STORE_PATH, DATA_ID_MAP_PATH

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return
    data_path_setting = config.get("data_path")

    if data_path_setting is not None:
        DATA_PATH = Path(data_path_setting)
        DATA_STORE_PATH = DATA_PATH / "store"
        DATA_ID_MAP_PATH = DATA_PATH / "id_map.yaml"
