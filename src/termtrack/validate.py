# SPDX-License-Identifier: MIT

import re

from termtrack.time import date_from_str

DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")
MONTH_PATTERN = re.compile(r"^\d{4}-\d{2}$")


class EntryValidationError(Exception):
    """Raised when a time entry or counter argument is invalid."""

    pass


def is_date_str(value: str) -> bool:
    return DATE_PATTERN.match(value) is not None


def is_month_str(value: str) -> bool:
    return MONTH_PATTERN.match(value) is not None


def validate_project(project: str) -> str:
    if project is None or project.strip() == "":
        raise EntryValidationError("Project is mandatory.")
    return project


def validate_description(description: str) -> str:
    if description is None or description.strip() == "":
        raise EntryValidationError("Description is mandatory.")
    return description


def validate_duration_minutes(duration_minutes: int) -> int:
    if isinstance(duration_minutes, bool) or not isinstance(duration_minutes, int):
        raise EntryValidationError(
            f"Duration must be a whole number of minutes, got {duration_minutes!r}."
        )
    if duration_minutes < 0:
        raise EntryValidationError(
            f"Duration cannot be negative, got {duration_minutes}m."
        )
    return duration_minutes


def validate_date(date: str) -> str:
    if date is None or not is_date_str(date):
        raise EntryValidationError(f"Date must be in YYYY-MM-DD format, got {date!r}.")
    try:
        date_from_str(date)
    except ValueError:
        raise EntryValidationError(f"{date} is not a valid calendar date.")
    return date
