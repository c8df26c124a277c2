# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from termtrack.model.counter import (
    ActiveCounter,
    CounterState,
    CounterStatus,
    StoppedCounter,
)
from termtrack.repository.counter import COUNTER_REPO
from termtrack.repository.entry import ENTRY_REPO
from termtrack.repository.slot import StorageWriteError
from termtrack.template.counter import get_counter_template
from termtrack.time import (
    Clock,
    datetime_to_local_date_str,
    milliseconds_between,
    milliseconds_to_minutes,
    now_utc,
)
from termtrack.validate import validate_description, validate_project

logger = logging.getLogger(__name__)


class CounterStateError(Exception):
    """Raised when an operation does not apply to the counter's current state."""

    pass


class CounterAlreadyActiveError(CounterStateError):
    def __init__(self, counter: ActiveCounter) -> None:
        self.counter = counter
        super().__init__(
            f'A counter is already running for project "{counter["project"]}". '
            "Stop it first."
        )


class NoActiveCounterError(CounterStateError):
    def __init__(self) -> None:
        super().__init__("No active counter found.")


class CounterAlreadyPausedError(CounterStateError):
    def __init__(self) -> None:
        super().__init__("Counter is already paused.")


class CounterAlreadyRunningError(CounterStateError):
    def __init__(self) -> None:
        super().__init__("Counter is already running.")


def get_counter_state(counter: Optional[ActiveCounter]) -> str:
    if counter is None:
        return CounterState.ABSENT
    if counter["paused"]:
        return CounterState.PAUSED
    return CounterState.RUNNING


def calculate_elapsed_ms(counter: ActiveCounter, now: pendulum.DateTime) -> int:
    """
    Total running time: the accumulated segments plus the current one, if any.
    """
    elapsed = counter["accumulated_ms"]
    if not counter["paused"] and counter["last_start_time"] is not None:
        elapsed += milliseconds_between(counter["last_start_time"], now)
    return elapsed


def apply_pause(counter: ActiveCounter, now: pendulum.DateTime) -> ActiveCounter:
    if counter["paused"]:
        raise CounterAlreadyPausedError()
    paused = counter.copy()
    paused["accumulated_ms"] = calculate_elapsed_ms(counter, now)
    paused["last_start_time"] = None
    paused["paused"] = True
    return paused


def apply_resume(counter: ActiveCounter, now: pendulum.DateTime) -> ActiveCounter:
    if not counter["paused"]:
        raise CounterAlreadyRunningError()
    resumed = counter.copy()
    resumed["last_start_time"] = now
    resumed["paused"] = False
    return resumed


def __require_counter() -> ActiveCounter:
    counter = COUNTER_REPO.get_counter()
    if counter is None:
        raise NoActiveCounterError()
    return counter


def start_counter(
    project: str, description: str, clock: Clock = now_utc
) -> ActiveCounter:
    validate_project(project)
    validate_description(description)

    active = COUNTER_REPO.get_counter()
    if active is not None:
        raise CounterAlreadyActiveError(active)

    counter = get_counter_template(clock())
    counter["project"] = project
    counter["description"] = description
    COUNTER_REPO.save_counter(counter)

    logger.debug("Started counter for %s", project)
    return counter


def pause_counter(clock: Clock = now_utc) -> ActiveCounter:
    counter = apply_pause(__require_counter(), clock())
    COUNTER_REPO.save_counter(counter)

    logger.debug("Paused counter at %dms", counter["accumulated_ms"])
    return counter


def resume_counter(clock: Clock = now_utc) -> ActiveCounter:
    counter = apply_resume(__require_counter(), clock())
    COUNTER_REPO.save_counter(counter)

    logger.debug("Resumed counter for %s", counter["project"])
    return counter


def stop_counter(clock: Clock = now_utc) -> StoppedCounter:
    counter = __require_counter()
    now = clock()

    elapsed_ms = calculate_elapsed_ms(counter, now)
    duration_minutes = milliseconds_to_minutes(elapsed_ms)

    # Append before deleting so a failed write never loses the counter
    entry = ENTRY_REPO.append_entry(
        counter["project"],
        duration_minutes,
        datetime_to_local_date_str(now),
        counter["description"],
        require_description=False,
    )
    try:
        COUNTER_REPO.delete_counter()
    except StorageWriteError as e:
        raise StorageWriteError(
            f"the entry was recorded but the active counter could not be removed "
            f"({e}); stopping it again records a second entry"
        ) from e

    logger.debug("Stopped counter after %dms", elapsed_ms)
    return {
        "entry": entry,
        "elapsed_ms": elapsed_ms,
        "duration_minutes": duration_minutes,
    }


def get_counter_status(clock: Clock = now_utc) -> CounterStatus:
    counter = __require_counter()
    elapsed_ms = calculate_elapsed_ms(counter, clock())
    return {
        "project": counter["project"],
        "description": counter["description"],
        "state": get_counter_state(counter),
        "start_time": counter["start_time"],
        "elapsed_ms": elapsed_ms,
        "elapsed_minutes": milliseconds_to_minutes(elapsed_ms),
    }
