# SPDX-License-Identifier: MIT

from typing import Optional

import typer
from rich.console import Console

from termtrack.view.header import header


def aggregate_report_view(report: str, month: Optional[str] = None) -> None:
    header(f"report for {month}" if month else "total report")
    # Report text carries user descriptions, so it must not be read as markup
    Console().print(
        report.rstrip("\n"), markup=False, highlight=False, soft_wrap=True
    )


def table_report_view(table: str) -> None:
    # Plain output keeps the tabs intact for pasting into a spreadsheet
    typer.echo(table.rstrip("\n"))
