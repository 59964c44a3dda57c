from __future__ import annotations

from datetime import MAXYEAR
from typing import Any

from .core.coerce import coerce_int
from .core.errors import (
    DayOutOfRangeError,
    MonthOutOfRangeError,
    NonIntegerInputError,
    YearOutOfRangeError,
)
from .core.types import JalaliDate
from .engines.jalali import jalali_month_length

# Last Jalali year that ends before the host datetime range does.
MAX_JALALI_YEAR = MAXYEAR - 622


def _require_int(name: str, value: Any) -> int:
    c = coerce_int(value)
    if not c.ok:
        raise NonIntegerInputError(f"{name} must be an integer: {c.error}")
    return c.value


def validate_jalali(year: Any, month: Any, day: Any) -> JalaliDate:
    """
    Normalize and range-check a raw (year, month, day) triple.

    Accepts anything coerce_int() understands for each component. Raises
    NonIntegerInputError, YearOutOfRangeError, MonthOutOfRangeError or
    DayOutOfRangeError; on success returns a JalaliDate of plain ints.
    """
    y = _require_int("year", year)
    m = _require_int("month", month)
    d = _require_int("day", day)

    if y < 1:
        raise YearOutOfRangeError(f"year must be a positive Jalali year, got {y}")
    if y > MAX_JALALI_YEAR:
        raise YearOutOfRangeError(f"year must be <= {MAX_JALALI_YEAR}, got {y}")
    if not 1 <= m <= 12:
        raise MonthOutOfRangeError(f"month must be between 1 and 12, got {m}")

    max_day = jalali_month_length(y, m)
    if not 1 <= d <= max_day:
        raise DayOutOfRangeError(f"day {d} is out of range for month {m} of {y} (1..{max_day})")

    return JalaliDate(y, m, d)
