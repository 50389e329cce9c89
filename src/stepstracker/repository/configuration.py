# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from stepstracker import configuration
from stepstracker.logger import get_logger
from stepstracker.template.configuration import get_configuration_template

log = get_logger(__name__)


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        loaded = None
        if configuration.APP_CONFIG_PATH.is_file():
            loaded = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        # Back-fill any setting missing from an older or hand-written file
        defaults = get_configuration_template()
        if isinstance(loaded, dict):
            for key, value in loaded.items():
                if key not in defaults:
                    continue
                checked = convert_setting_for_deserialization(key, value)
                if checked is None:
                    if value is not None:
                        log.warning(
                            "ignoring invalid setting", setting=key, value=value
                        )
                    continue
                defaults[key] = checked  # type: ignore[literal-required]
        self._config = defaults

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(
            dump(config, Dumper=Dumper, sort_keys=False)
        )

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def reset(self) -> None:
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        add_participants: Optional[list[str]] = None,
        remove_participants: Optional[list[str]] = None,
        target_steps: Optional[int] = None,
        penalty_amount: Optional[int] = None,
        currency: Optional[str] = None,
        admin_password: Optional[str] = None,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        recent_entries_limit: Optional[int] = None,
    ) -> None:
        self.is_dirty = True

        if add_participants is not None:
            for participant in add_participants:
                if participant not in self.config["participants"]:
                    self.config["participants"].append(participant)
        if remove_participants is not None:
            self.config["participants"] = [
                participant
                for participant in self.config["participants"]
                if participant not in remove_participants
            ]
        if target_steps is not None:
            self.config["target_steps"] = target_steps
        if penalty_amount is not None:
            self.config["penalty_amount"] = penalty_amount
        if currency is not None:
            self.config["currency"] = currency
        if admin_password is not None:
            self.config["admin_password"] = admin_password
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if recent_entries_limit is not None:
            self.config["recent_entries_limit"] = recent_entries_limit


CONFIGURATION_REPO = ConfigurationRepository()


def convert_setting_for_deserialization(key: str, value: Any) -> Any:
    """
    Check a setting read from the config file, returning None when it has the
    wrong shape. Scalar passwords and currencies are taken as text.
    """
    match key:
        case "participants":
            if not isinstance(value, list):
                return None
            names = [str(name).strip() for name in value if name is not None]
            if any(name == "" for name in names):
                return None
            return names
        case "target_steps" | "recent_entries_limit":
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                return None
            return value
        case "penalty_amount":
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                return None
            return value
        case "currency" | "admin_password":
            if isinstance(value, bool) or not isinstance(value, (str, int, float)):
                return None
            text = str(value)
            return text if text != "" else None
        case "data_path":
            return value if isinstance(value, str) and value != "" else None
    return None
