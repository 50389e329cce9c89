# SPDX-License-Identifier: MIT

import atexit

from stepstracker.repository.configuration import CONFIGURATION_REPO
from stepstracker.repository.id_map import ID_MAP_REPO


def flush() -> None:
    # Entries and payments are saved as each mutation happens
    CONFIGURATION_REPO.flush()
    ID_MAP_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush)
