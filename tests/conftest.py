"""Shared test fixtures."""

from typing import Iterator

import pendulum
import pytest

from termtrack.repository.counter import COUNTER_REPO
from termtrack.repository.entry import ENTRY_REPO
from termtrack.repository.slot import MemorySlotStore
from termtrack.view import state as view_state

T0 = pendulum.datetime(2023, 1, 16, 9, 0, 0, tz="UTC")


class StubClock:
    """Returns the queued instants in order, then keeps returning the last one."""

    def __init__(self, *instants: pendulum.DateTime) -> None:
        self.instants = list(instants)
        self.calls = 0

    def __call__(self) -> pendulum.DateTime:
        index = min(self.calls, len(self.instants) - 1)
        self.calls += 1
        return self.instants[index]


@pytest.fixture(autouse=True)
def store() -> Iterator[MemorySlotStore]:
    """Point both repositories at a fresh in-memory store for each test."""
    memory_store = MemorySlotStore()
    ENTRY_REPO.use_store(memory_store)
    COUNTER_REPO.use_store(memory_store)
    yield memory_store
    ENTRY_REPO.use_store(None)
    COUNTER_REPO.use_store(None)
    view_state.set_show_header(True)


@pytest.fixture
def sample_entries(store):
    """Entries spread over two weeks of January 2023 plus one in February."""
    rows = [
        ("work", 90, "2023-01-15", "Bug fixing"),
        ("work", 30, "2023-01-16", "More fixing"),
        ("design", 45, "2023-01-16", "Wireframes"),
        ("work", 60, "2023-01-23", "Release"),
        ("design", 120, "2023-02-01", "Review"),
    ]
    return [ENTRY_REPO.append_entry(*row) for row in rows]
