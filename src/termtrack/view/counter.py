# SPDX-License-Identifier: MIT

from rich import print
from rich.markup import escape

from termtrack.model.counter import CounterState, CounterStatus
from termtrack.service.report import format_duration
from termtrack.time import datetime_to_display_local_time_str


def counter_status_view(status: CounterStatus) -> None:
    if status["state"] == CounterState.PAUSED:
        state = "[yellow]Paused[/yellow]"
    else:
        state = "[green]Running[/green]"

    print("[cyan]Active Counter:[/cyan]")
    print(f" - Project: {escape(status['project'])}")
    print(f" - Description: {escape(status['description'])}")
    print(f" - Status: {state}")
    print(f" - Started: {datetime_to_display_local_time_str(status['start_time'])}")
    print(f" - Elapsed: {format_duration(status['elapsed_minutes'])}")
