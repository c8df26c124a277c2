# SPDX-License-Identifier: MIT

import logging
from typing import Any, Optional

from termtrack import time
from termtrack.model.counter import ActiveCounter
from termtrack.repository.slot import (
    ACTIVE_COUNTER_SLOT,
    SlotStore,
    StorageReadError,
    open_configured_slot_store,
)

logger = logging.getLogger(__name__)


class CounterRepository:
    """The single optional active counter, persisted in its own slot."""

    def __init__(self, store: Optional[SlotStore] = None) -> None:
        self._store = store

    @property
    def store(self) -> SlotStore:
        if self._store is None:
            self._store = open_configured_slot_store()
        return self._store

    def use_store(self, store: Optional[SlotStore]) -> None:
        self._store = store

    def __convert_counter_for_serialization(
        self, counter: ActiveCounter
    ) -> dict[str, Any]:
        last_start_time = counter["last_start_time"]
        return {
            "project": counter["project"],
            "description": counter["description"],
            "startTime": time.datetime_to_epoch_ms(counter["start_time"]),
            "lastStartTime": (
                time.datetime_to_epoch_ms(last_start_time)
                if last_start_time is not None
                else None
            ),
            "accumulatedTime": counter["accumulated_ms"],
            "paused": counter["paused"],
        }

    def __convert_counter_for_deserialization(
        self, raw_counter: dict[str, Any]
    ) -> ActiveCounter:
        paused = bool(raw_counter["paused"])
        raw_last_start_time = raw_counter.get("lastStartTime")
        if not paused and raw_last_start_time is None:
            raise ValueError("running counter without lastStartTime")
        return {
            "project": str(raw_counter["project"]),
            "description": str(raw_counter.get("description") or ""),
            "start_time": time.datetime_from_epoch_ms(raw_counter["startTime"]),
            "last_start_time": (
                time.datetime_from_epoch_ms(raw_last_start_time)
                if raw_last_start_time is not None and not paused
                else None
            ),
            "accumulated_ms": int(raw_counter.get("accumulatedTime") or 0),
            "paused": paused,
        }

    def get_counter(self) -> Optional[ActiveCounter]:
        try:
            raw_counter = self.store.read(ACTIVE_COUNTER_SLOT)
        except StorageReadError as e:
            logger.warning("Treating unreadable active counter as absent: %s", e)
            return None

        if raw_counter is None:
            return None

        try:
            return self.__convert_counter_for_deserialization(raw_counter)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Treating malformed active counter as absent: %r", e)
            return None

    def save_counter(self, counter: ActiveCounter) -> None:
        self.store.write(
            ACTIVE_COUNTER_SLOT, self.__convert_counter_for_serialization(counter)
        )

    def delete_counter(self) -> None:
        self.store.remove(ACTIVE_COUNTER_SLOT)


COUNTER_REPO = CounterRepository()
