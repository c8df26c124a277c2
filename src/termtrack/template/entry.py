# SPDX-License-Identifier: MIT

from termtrack.model.entry import TimeEntry
from termtrack.time import datetime_to_epoch_ms, datetime_to_local_date_str, now_utc


def get_entry_template() -> TimeEntry:
    now = now_utc()
    return {
        "id": None,
        "project": "",
        "duration_minutes": 0,
        "date": datetime_to_local_date_str(now),
        "description": "",
        "timestamp": datetime_to_epoch_ms(now),
    }
