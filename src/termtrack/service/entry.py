# SPDX-License-Identifier: MIT

import math
from decimal import InvalidOperation
from typing import Optional

from termtrack.model.entry import TimeEntry
from termtrack.repository.entry import ENTRY_REPO
from termtrack.time import Clock, datetime_to_local_date_str, hours_to_minutes, now_utc
from termtrack.validate import EntryValidationError, is_date_str


def parse_hours(value: str) -> float:
    """Parse a decimal number of hours such as "1.5" or "3"."""
    try:
        hours = float(value)
    except ValueError:
        raise EntryValidationError("Duration must be a number (hours).")
    if not math.isfinite(hours):
        raise EntryValidationError("Duration must be a number (hours).")
    if hours < 0:
        raise EntryValidationError("Duration cannot be negative.")
    return hours


def split_date_and_description(words: list[str]) -> tuple[Optional[str], str]:
    """
    Split the trailing words of an add command into an optional date and the
    description.

    The first word is taken as the date only when it looks like YYYY-MM-DD;
    anything else is part of the description.
    """
    date: Optional[str] = None
    if len(words) > 0 and is_date_str(words[0]):
        date = words[0]
        words = words[1:]
    return date, " ".join(words)


def add_entry(
    project: str,
    hours: float,
    date: Optional[str],
    description: str,
    clock: Clock = now_utc,
) -> TimeEntry:
    if hours < 0:
        raise EntryValidationError("Duration cannot be negative.")
    try:
        minutes = hours_to_minutes(hours)
    except InvalidOperation:
        # Too large to express as a whole number of minutes
        raise EntryValidationError("Duration must be a number (hours).")
    entry_date = date if date is not None else datetime_to_local_date_str(clock())
    return ENTRY_REPO.append_entry(project, minutes, entry_date, description)


def list_entries() -> list[TimeEntry]:
    return ENTRY_REPO.list_entries()


def clear_entries() -> None:
    ENTRY_REPO.clear_entries()
