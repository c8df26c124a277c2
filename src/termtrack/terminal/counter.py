# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from termtrack.service import counter as counter_service
from termtrack.terminal.guard import reported_errors
from termtrack.view import message
from termtrack.view.counter import counter_status_view


def start(
    project: str,
    words: Annotated[
        list[str], typer.Argument(help="description of the work", show_default=False)
    ],
) -> None:
    """
    start a background counter
    """
    with reported_errors():
        counter = counter_service.start_counter(project, " ".join(words))

    message.success(f'Counter started for project "{counter["project"]}"')


def pause() -> None:
    """
    pause the active counter
    """
    with reported_errors():
        counter_service.pause_counter()

    message.warning("Counter paused.")


def resume() -> None:
    """
    resume the paused counter
    """
    with reported_errors():
        counter_service.resume_counter()

    message.success("Counter resumed.")


def stop() -> None:
    """
    stop the active counter and save the entry
    """
    with reported_errors():
        stopped = counter_service.stop_counter()

    message.success(
        f"Counter stopped. Recorded {stopped['duration_minutes']}m "
        f'for project "{stopped["entry"]["project"]}".'
    )


def status() -> None:
    """
    show the state of the active counter
    """
    try:
        counter_status = counter_service.get_counter_status()
    except counter_service.NoActiveCounterError:
        typer.echo("No active counter.")
        return

    counter_status_view(counter_status)
