# SPDX-License-Identifier: MIT

from contextlib import contextmanager
from typing import Iterator

import typer

from termtrack.repository.slot import StorageWriteError
from termtrack.service.counter import CounterStateError
from termtrack.validate import EntryValidationError
from termtrack.view import message


@contextmanager
def reported_errors() -> Iterator[None]:
    """
    Report validation, counter state and storage write failures to the user
    and end the command with exit code 1. Nothing has been mutated when
    either of the first two is raised.
    """
    try:
        yield
    except EntryValidationError as e:
        message.error(f"Error: {e}")
        raise typer.Exit(1)
    except CounterStateError as e:
        message.error(str(e))
        raise typer.Exit(1)
    except StorageWriteError as e:
        message.error(f"Error: could not save data: {e}")
        raise typer.Exit(1)
