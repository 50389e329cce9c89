# SPDX-License-Identifier: MIT

from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from stepstracker import configuration
from stepstracker.model.entity_id import EntityId
from stepstracker.model.id_map import IdMap
from stepstracker.template.id_map import get_id_map_template


class IdMapRepository:
    def __init__(self) -> None:
        self._id_map: Optional[IdMap] = None
        self.is_dirty = False

    @property
    def id_map(self) -> IdMap:
        if self._id_map is None:
            self.__load_data()
        if self._id_map is None:
            raise ValueError()
        return self._id_map

    def __load_data(self) -> None:
        if configuration.DATA_ID_MAP_PATH.is_file():
            self._id_map = load(
                configuration.DATA_ID_MAP_PATH.read_text(), Loader=Loader
            )
        if self._id_map is None:
            self._id_map = get_id_map_template()

    def __save_data(self, id_map: IdMap) -> None:
        configuration.DATA_ID_MAP_PATH.parent.mkdir(parents=True, exist_ok=True)
        configuration.DATA_ID_MAP_PATH.write_text(dump(id_map, Dumper=Dumper))

    def flush(self) -> None:
        if self._id_map is not None and self.is_dirty:
            self.__save_data(self._id_map)
            self.is_dirty = False

    def reset(self) -> None:
        self._id_map = None
        self.is_dirty = False

    def clear_ids(self) -> None:
        self.is_dirty = True
        self._id_map = get_id_map_template()

    def associate_id(self, entity_id: EntityId) -> int:
        """
        Create a new synthetic id to associate with an entry id
        """
        if entity_id in self.id_map["real_to_synthetic"]:
            return self.id_map["real_to_synthetic"][entity_id]

        self.is_dirty = True
        next_id = len(self.id_map["real_to_synthetic"]) + 1
        self.id_map["real_to_synthetic"][entity_id] = next_id
        self.id_map["synthetic_to_real"][next_id] = entity_id
        return next_id

    def get_real_id(self, synthetic_id: int) -> Optional[EntityId]:
        """
        Get the entry id associated with a synthetic id
        """
        return self.id_map["synthetic_to_real"].get(synthetic_id)


ID_MAP_REPO = IdMapRepository()
