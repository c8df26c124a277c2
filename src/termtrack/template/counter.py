# SPDX-License-Identifier: MIT

import pendulum

from termtrack.model.counter import ActiveCounter


def get_counter_template(now: pendulum.DateTime) -> ActiveCounter:
    return {
        "project": "",
        "description": "",
        "start_time": now,
        "last_start_time": now,
        "accumulated_ms": 0,
        "paused": False,
    }
