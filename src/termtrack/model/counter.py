# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from termtrack.model.entry import TimeEntry


class CounterState:
    ABSENT = "absent"
    RUNNING = "running"
    PAUSED = "paused"


class ActiveCounter(TypedDict):
    project: str
    description: str
    start_time: pendulum.DateTime
    last_start_time: Optional[pendulum.DateTime]  # None while paused
    accumulated_ms: int  # frozen at each pause
    paused: bool


class CounterStatus(TypedDict):
    project: str
    description: str
    state: str
    start_time: pendulum.DateTime
    elapsed_ms: int
    elapsed_minutes: int


class StoppedCounter(TypedDict):
    entry: TimeEntry
    elapsed_ms: int
    duration_minutes: int
