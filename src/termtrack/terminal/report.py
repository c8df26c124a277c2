# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from termtrack.repository.entry import ENTRY_REPO
from termtrack.service.report import aggregate_report, table_report
from termtrack.terminal.parse import parse_month
from termtrack.view.report import aggregate_report_view, table_report_view

MONTH_HELP = "valid input: YYYY-MM, omit for all time"


def report(
    month: Annotated[
        Optional[str],
        typer.Argument(parser=parse_month, help=MONTH_HELP, show_default=False),
    ] = None,
) -> None:
    """
    show time aggregated by project and by day
    """
    entries = ENTRY_REPO.list_entries()
    aggregate_report_view(aggregate_report(entries, month), month)


def table(
    month: Annotated[
        Optional[str],
        typer.Argument(parser=parse_month, help=MONTH_HELP, show_default=False),
    ] = None,
) -> None:
    """
    show hours and descriptions per day as tab-separated rows
    """
    entries = ENTRY_REPO.list_entries()
    table_report_view(table_report(entries, month))
