# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from termtrack.service.entry import (
    add_entry,
    clear_entries,
    parse_hours,
    split_date_and_description,
)
from termtrack.terminal.guard import reported_errors
from termtrack.view import message


def add(
    project: str,
    hours: Annotated[str, typer.Argument(help="decimal hours, e.g. 1.5")],
    words: Annotated[
        Optional[list[str]],
        typer.Argument(
            help="[YYYY-MM-DD] description... (date defaults to today)",
            show_default=False,
        ),
    ] = None,
) -> None:
    """
    add a time entry
    """
    with reported_errors():
        parsed_hours = parse_hours(hours)
        date, description = split_date_and_description(words or [])
        entry = add_entry(project, parsed_hours, date, description)

    print_hours = f"{parsed_hours:g}"
    message.success(
        f"Entry added: {entry['project']} - {print_hours}h "
        f"({entry['duration_minutes']}m) on {entry['date']} - \"{entry['description']}\""
    )


def clear(
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="skip the confirmation prompt")
    ] = False,
) -> None:
    """
    remove all stored time entries
    """
    if not yes:
        message.warning("WARNING: This will permanently delete all time entries.")
        confirm = typer.confirm("Are you sure you want to continue?")
        if not confirm:
            message.info("Operation cancelled.")
            return

    with reported_errors():
        clear_entries()

    message.success("All time entries cleared.")
