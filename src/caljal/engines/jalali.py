"""
caljal.engines.jalali
---------------------
Jalali side of the conversion: month lengths, day-of-year offsets and the
day count of Nowruz (1 Farvardin) relative to 1600-01-01.

Leap years follow the 33-year intercalation cycle. A single 33-year cycle
anchored at one year drifts by a day over a few centuries, so the cycle count
is restarted at each break year of the standard table (Borkowski), keeping
Nowruz on the correct Gregorian day from the epoch (622-03-22) onwards. Years
past the last break continue the final cycle.
"""

from __future__ import annotations

from typing import Tuple

from caljal.core.errors import MonthOutOfRangeError

from .gregorian import (
    GREGORIAN_REFERENCE_YEAR,
    days_before_march,
    days_before_year,
)

# Jalali year aligned with the Gregorian reference year (979 AP -> 1600 CE).
JALALI_EPOCH_OFFSET = 979

CYCLE_BREAKS: Tuple[int, ...] = (
    -61, 9, 38, 199, 426, 686, 756, 818, 1111, 1181, 1210,
    1635, 2060, 2097, 2192, 2262, 2324, 2394, 2456, 3178,
)


def jalali_month_base_length(month: int) -> int:
    """Month length ignoring the leap day: 31 x 6, 30 x 5, 29."""
    if month <= 6:
        return 31
    if month <= 11:
        return 30
    return 29


def jalali_day_of_year(month: int, day: int) -> int:
    """Zero-based day index within the Jalali year."""
    if month < 7:
        return (month - 1) * 31 + day - 1
    return (month - 7) * 30 + 186 + day - 1


def _leap_count(n: int) -> int:
    return (n // 33) * 8 + ((n % 33) + 3) // 4


def nowruz_march_day(year: int) -> int:
    """
    Day of March (Gregorian) on which Jalali `year` begins.

    Values above 31 spill into April; this only happens far beyond any
    historical use and is carried through unchanged by nowruz_day_count().
    """
    leap_j = -14
    jp = CYCLE_BREAKS[0]
    jump = 0
    for jm in CYCLE_BREAKS[1:]:
        jump = jm - jp
        if year < jm:
            break
        leap_j += (jump // 33) * 8 + (jump % 33) // 4
        jp = jm
    n = year - jp
    leap_j += _leap_count(n)
    if jump % 33 == 4 and jump - n == 4:
        leap_j += 1

    gy = year + (GREGORIAN_REFERENCE_YEAR - JALALI_EPOCH_OFFSET)
    leap_g = gy // 4 - ((gy // 100 + 1) * 3) // 4 - 150
    return 20 + leap_j - leap_g


def nowruz_day_count(year: int) -> int:
    """Days from 1600-01-01 (day 0) to 1 Farvardin of Jalali `year`."""
    shifted = year - JALALI_EPOCH_OFFSET
    gy = GREGORIAN_REFERENCE_YEAR + shifted
    return days_before_year(shifted) + days_before_march(gy) + nowruz_march_day(year) - 1


def jalali_year_length(year: int) -> int:
    return nowruz_day_count(year + 1) - nowruz_day_count(year)


def is_jalali_leap(year: int) -> bool:
    return jalali_year_length(year) == 366


def jalali_month_length(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise MonthOutOfRangeError(f"month must be between 1 and 12, got {month}")
    if month == 12 and is_jalali_leap(year):
        return 30
    return jalali_month_base_length(month)
