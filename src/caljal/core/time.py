from __future__ import annotations
from datetime import date, datetime, timezone


def date_to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn

def utc_midnight(year: int, month: int, day: int) -> datetime:
    """
    Instant at 00:00 UTC of a civil date.

    Pinned to UTC so the value does not drift with the host's local zone.
    """
    return datetime(year, month, day, tzinfo=timezone.utc)
