# SPDX-License-Identifier: MIT

from typing import Iterator

import pytest
import structlog

from stepstracker import configuration
from stepstracker.repository.configuration import CONFIGURATION_REPO
from stepstracker.repository.gateway import PersistenceGateway
from stepstracker.repository.id_map import ID_MAP_REPO
from stepstracker.service.tracker import StepsTracker
from stepstracker.template.configuration import get_configuration_template
from tests.helpers import FailingStore


@pytest.fixture(autouse=True)
def isolated_paths(tmp_path, monkeypatch) -> Iterator[None]:
    monkeypatch.setattr(configuration, "CONFIG_PATH", tmp_path / "config")
    monkeypatch.setattr(
        configuration, "APP_CONFIG_PATH", tmp_path / "config" / "config.yaml"
    )
    monkeypatch.setattr(configuration, "DATA_PATH", tmp_path / "data")
    monkeypatch.setattr(configuration, "DATA_STORE_PATH", tmp_path / "data" / "store")
    monkeypatch.setattr(
        configuration, "DATA_ID_MAP_PATH", tmp_path / "data" / "id_map.yaml"
    )
    CONFIGURATION_REPO.reset()
    ID_MAP_REPO.reset()
    yield
    CONFIGURATION_REPO.reset()
    ID_MAP_REPO.reset()
    structlog.reset_defaults()


@pytest.fixture
def config() -> configuration.Configuration:
    return get_configuration_template()


@pytest.fixture
def store() -> FailingStore:
    return FailingStore()


@pytest.fixture
def gateway(store) -> PersistenceGateway:
    return PersistenceGateway(store)


@pytest.fixture
def tracker(config, gateway) -> StepsTracker:
    return StepsTracker(config, gateway)
