"""
caljal.engines.gregorian
------------------------
Proleptic Gregorian side of the conversion: leap rule, month lengths, and the
reduction of a day count (day 0 = 1600-01-01) to a civil (year, month, day).
"""

from __future__ import annotations

from typing import Tuple

GREGORIAN_REFERENCE_YEAR = 1600

DAYS_PER_400Y = 146097
DAYS_PER_100Y = 36524
DAYS_PER_4Y = 1461

GREGORIAN_MONTH_LENGTHS: Tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_gregorian_leap(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def gregorian_month_length(year: int, month: int) -> int:
    if month == 2 and is_gregorian_leap(year):
        return 29
    return GREGORIAN_MONTH_LENGTHS[month - 1]


def days_before_year(offset: int) -> int:
    """
    Days from 1 Jan of the reference year to 1 Jan of (reference + offset).

    Negative offsets give negative counts; floor division keeps the leap-day
    tally exact on both sides of the reference.
    """
    return (
        365 * offset
        + (offset + 3) // 4
        - (offset + 99) // 100
        + (offset + 399) // 400
    )


def days_before_march(year: int) -> int:
    return 59 + int(is_gregorian_leap(year))


def from_day_count(days: int) -> Tuple[int, int, int]:
    """
    Day count since 1600-01-01 (day 0) -> Gregorian (year, month, day).

    The reference year opens a 400-year cycle, so its first century carries
    one extra day (1600 is leap) and every later century starts on a
    non-leap year.
    """
    gy = GREGORIAN_REFERENCE_YEAR + 400 * (days // DAYS_PER_400Y)
    days %= DAYS_PER_400Y

    if days >= DAYS_PER_100Y + 1:
        days -= 1
        gy += 100 * (days // DAYS_PER_100Y)
        days %= DAYS_PER_100Y
        # first 4-year block of a later century is one day short; repay it
        # so the 1461-day reduction below lines up
        if days >= 365:
            days += 1

    gy += 4 * (days // DAYS_PER_4Y)
    days %= DAYS_PER_4Y

    if days >= 366:
        gy += (days - 1) // 365
        days = (days - 1) % 365

    gm = 1
    for gm in range(1, 13):
        ml = gregorian_month_length(gy, gm)
        if days < ml:
            break
        days -= ml

    return gy, gm, days + 1
