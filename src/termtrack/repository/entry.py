# SPDX-License-Identifier: MIT

import logging
from typing import Any, Optional

from termtrack.model.entry import TimeEntry, generate_entry_id
from termtrack.repository.slot import (
    ENTRIES_SLOT,
    SlotStore,
    StorageReadError,
    open_configured_slot_store,
)
from termtrack.template.entry import get_entry_template
from termtrack.validate import (
    validate_date,
    validate_description,
    validate_duration_minutes,
    validate_project,
)

logger = logging.getLogger(__name__)


class EntryRepository:
    def __init__(self, store: Optional[SlotStore] = None) -> None:
        self._store = store

    @property
    def store(self) -> SlotStore:
        if self._store is None:
            self._store = open_configured_slot_store()
        return self._store

    def use_store(self, store: Optional[SlotStore]) -> None:
        self._store = store

    def __load_data(self) -> list[TimeEntry]:
        try:
            raw_entries = self.store.read(ENTRIES_SLOT)
        except StorageReadError as e:
            logger.warning("Treating unreadable time entries as empty: %s", e)
            return []

        if raw_entries is None:
            return []
        if not isinstance(raw_entries, list):
            logger.warning(
                "Treating time entries as empty: expected a list, got %s",
                type(raw_entries).__name__,
            )
            return []

        try:
            return [
                self.__convert_entry_for_deserialization(raw_entry)
                for raw_entry in raw_entries
            ]
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Treating time entries as empty: malformed record %r", e)
            return []

    def __save_data(self, entries: list[TimeEntry]) -> None:
        self.store.write(
            ENTRIES_SLOT,
            [self.__convert_entry_for_serialization(entry) for entry in entries],
        )

    def __convert_entry_for_serialization(self, entry: TimeEntry) -> dict[str, Any]:
        return {
            "id": entry["id"],
            "project": entry["project"],
            "durationMinutes": entry["duration_minutes"],
            "date": entry["date"],
            "description": entry["description"],
            "timestamp": entry["timestamp"],
        }

    def __convert_entry_for_deserialization(self, raw_entry: dict[str, Any]) -> TimeEntry:
        return {
            "id": str(raw_entry["id"]),
            "project": str(raw_entry["project"]),
            "duration_minutes": int(raw_entry["durationMinutes"]),
            "date": str(raw_entry["date"]),
            "description": str(raw_entry.get("description") or ""),
            "timestamp": int(raw_entry.get("timestamp") or 0),
        }

    def list_entries(self) -> list[TimeEntry]:
        """All stored entries in the order they were appended."""
        return self.__load_data()

    def append_entry(
        self,
        project: str,
        duration_minutes: int,
        date: str,
        description: str,
        require_description: bool = True,
    ) -> TimeEntry:
        validate_project(project)
        validate_duration_minutes(duration_minutes)
        validate_date(date)
        if require_description:
            validate_description(description)

        entry = get_entry_template()
        entry["id"] = generate_entry_id()
        entry["project"] = project
        entry["duration_minutes"] = duration_minutes
        entry["date"] = date
        entry["description"] = description or ""

        entries = self.__load_data()
        entries.append(entry)
        self.__save_data(entries)

        logger.debug(
            "Appended entry %s: %s %dm on %s",
            entry["id"],
            entry["project"],
            entry["duration_minutes"],
            entry["date"],
        )
        return entry

    def clear_entries(self) -> None:
        self.store.remove(ENTRIES_SLOT)


ENTRY_REPO = EntryRepository()
