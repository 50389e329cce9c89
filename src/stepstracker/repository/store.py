# SPDX-License-Identifier: MIT

import os
import tempfile
from pathlib import Path
from typing import Optional, Protocol

from stepstracker.errors import StorageError


class KeyValueStore(Protocol):
    def read(self, key: str) -> Optional[str]: ...

    def write(self, key: str, value: str) -> None: ...


class FileKeyValueStore:
    """
    One file per key inside a directory. Writes go to a temporary file that
    replaces the old one, so a failed write leaves the previous value intact.
    """

    def __init__(self, directory: Path, suffix: str = ".yaml") -> None:
        self.directory = directory
        self.suffix = suffix

    def path_for(self, key: str) -> Path:
        return self.directory / f"{key}{self.suffix}"

    def read(self, key: str) -> Optional[str]:
        file_path = self.path_for(key)
        if not file_path.is_file():
            return None
        try:
            return file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Could not read {file_path}: {e}") from e

    def write(self, key: str, value: str) -> None:
        file_path = self.path_for(key)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            fd, temp_name = tempfile.mkstemp(
                dir=self.directory, prefix=f".{key}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as temp_file:
                    temp_file.write(value)
                os.replace(temp_name, file_path)
            except BaseException:
                Path(temp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise StorageError(f"Could not write {file_path}: {e}") from e


class MemoryKeyValueStore:
    def __init__(self) -> None:
        self.values: dict[str, str] = {}

    def read(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def write(self, key: str, value: str) -> None:
        self.values[key] = value
