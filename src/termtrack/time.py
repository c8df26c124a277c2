# SPDX-License-Identifier: MIT

from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, cast

import pendulum

Clock = Callable[[], pendulum.DateTime]

MILLISECONDS_PER_MINUTE = 60_000


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def datetime_to_epoch_ms(datetime: pendulum.DateTime) -> int:
    return datetime.int_timestamp * 1000 + datetime.microsecond // 1000


def datetime_from_epoch_ms(milliseconds: int) -> pendulum.DateTime:
    seconds, remainder = divmod(int(milliseconds), 1000)
    return pendulum.from_timestamp(seconds, tz="UTC").add(
        microseconds=remainder * 1000
    )


def milliseconds_between(start: pendulum.DateTime, end: pendulum.DateTime) -> int:
    """Milliseconds from start to end, clamped at zero if the clock went backwards."""
    return max(0, datetime_to_epoch_ms(end) - datetime_to_epoch_ms(start))


def round_half_away_from_zero(value: float | Decimal) -> int:
    quantized = Decimal(str(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return int(quantized)


def hours_to_minutes(hours: float) -> int:
    return round_half_away_from_zero(Decimal(str(hours)) * 60)


def milliseconds_to_minutes(milliseconds: int) -> int:
    return round_half_away_from_zero(
        Decimal(int(milliseconds)) / Decimal(MILLISECONDS_PER_MINUTE)
    )


def minutes_to_hours_str(minutes: int) -> str:
    return f"{minutes / 60:.2f}"


def datetime_to_local_date_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").to_date_string()


def datetime_to_display_local_time_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("HH:mm:ss")


def date_from_str(date: str) -> pendulum.Date:
    """Parse a naive YYYY-MM-DD calendar day; raises ValueError if it is not a real date."""
    return cast(pendulum.Date, pendulum.from_format(date, "YYYY-MM-DD").date())
