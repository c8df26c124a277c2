# SPDX-License-Identifier: MIT

from typing import Optional

import typer

from termtrack.validate import is_month_str


def parse_month(month_param: Optional[str]) -> Optional[str]:
    if month_param is None:
        return None

    month = str(month_param)
    if not is_month_str(month):
        raise typer.BadParameter(f"Month must be in YYYY-MM format, got '{month}'")

    month_number = int(month[5:7])
    if month_number < 1 or month_number > 12:
        raise typer.BadParameter(
            f"Month must be between 01 and 12, got {month[5:7]}"
        )
    return month
