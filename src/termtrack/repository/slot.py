# SPDX-License-Identifier: MIT

import json
import os
import tempfile
from pathlib import Path
from typing import Any, Optional, Protocol

from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from termtrack import configuration
from termtrack.repository.configuration import CONFIGURATION_REPO

ENTRIES_SLOT = "entries"
ACTIVE_COUNTER_SLOT = "active_counter"


class StorageReadError(Exception):
    """Raised when a persisted slot exists but cannot be read or decoded."""

    pass


class StorageWriteError(Exception):
    """Raised when a slot cannot be written or removed."""

    pass


class SlotCodec(Protocol):
    suffix: str

    def dumps(self, document: Any) -> str: ...

    def loads(self, text: str) -> Any: ...


class JsonCodec:
    suffix = ".json"

    def dumps(self, document: Any) -> str:
        return json.dumps(document, indent=2, ensure_ascii=False)

    def loads(self, text: str) -> Any:
        try:
            return json.loads(text)
        except ValueError as e:
            raise StorageReadError(f"invalid JSON: {e}") from e


class YamlCodec:
    suffix = ".yaml"

    def dumps(self, document: Any) -> str:
        return dump(document, Dumper=Dumper, allow_unicode=True, sort_keys=False)

    def loads(self, text: str) -> Any:
        try:
            return load(text, Loader=Loader)
        except YAMLError as e:
            raise StorageReadError(f"invalid YAML: {e}") from e


class SlotStore(Protocol):
    """
    Named documents that can be read, rewritten as a whole, and removed.

    `read` returns None for a slot that was never written (or was removed) and
    raises StorageReadError for one that exists but cannot be decoded.
    """

    def read(self, slot: str) -> Optional[Any]: ...

    def write(self, slot: str, document: Any) -> None: ...

    def remove(self, slot: str) -> None: ...


class FileSlotStore:
    """One file per slot inside a data directory."""

    def __init__(self, directory: Path, codec: SlotCodec) -> None:
        self.directory = directory
        self.codec = codec

    def path_for(self, slot: str) -> Path:
        return self.directory / f"{slot}{self.codec.suffix}"

    def read(self, slot: str) -> Optional[Any]:
        file_path = self.path_for(slot)
        if not file_path.is_file():
            return None
        try:
            text = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageReadError(f"cannot read {file_path}: {e}") from e
        return self.codec.loads(text)

    def write(self, slot: str, document: Any) -> None:
        file_path = self.path_for(slot)
        text = self.codec.dumps(document)
        temp_path: Optional[str] = None
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            # Write next to the target and swap it in, so readers never see a
            # partially written document
            fd, temp_path = tempfile.mkstemp(
                dir=self.directory, prefix=f".{slot}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as temp_file:
                temp_file.write(text)
                temp_file.flush()
                os.fsync(temp_file.fileno())
            os.replace(temp_path, file_path)
            temp_path = None
        except OSError as e:
            raise StorageWriteError(f"cannot write {file_path}: {e}") from e
        finally:
            if temp_path is not None and os.path.exists(temp_path):
                os.unlink(temp_path)

    def remove(self, slot: str) -> None:
        file_path = self.path_for(slot)
        try:
            file_path.unlink(missing_ok=True)
        except OSError as e:
            raise StorageWriteError(f"cannot remove {file_path}: {e}") from e


class MemorySlotStore:
    """Slots held as serialized strings in a dict, like browser local storage."""

    def __init__(self, codec: Optional[SlotCodec] = None) -> None:
        self.codec: SlotCodec = codec if codec is not None else JsonCodec()
        self.slots: dict[str, str] = {}

    def read(self, slot: str) -> Optional[Any]:
        text = self.slots.get(slot)
        if text is None:
            return None
        return self.codec.loads(text)

    def write(self, slot: str, document: Any) -> None:
        self.slots[slot] = self.codec.dumps(document)

    def remove(self, slot: str) -> None:
        self.slots.pop(slot, None)


def open_slot_store(storage: str, directory: Path) -> SlotStore:
    if storage == "json":
        return FileSlotStore(directory, JsonCodec())
    if storage == "yaml":
        return FileSlotStore(directory, YamlCodec())
    if storage == "memory":
        return MemorySlotStore()
    raise ValueError(f"Unknown storage backend: {storage}")


def open_configured_slot_store() -> SlotStore:
    config = CONFIGURATION_REPO.get_config()
    return open_slot_store(config["storage"], configuration.DATA_PATH)
