"""
caljal.engines.converter
------------------------
Validated Jalali date -> Gregorian result, by epoch-based day counting.

No validation happens here: feed it only what validate_jalali() returned.
"""

from __future__ import annotations

from caljal.core.time import utc_midnight
from caljal.core.types import GregorianResult, JalaliDate
from caljal.engines.gregorian import from_day_count
from caljal.engines.jalali import jalali_day_of_year, nowruz_day_count


def day_count(jd: JalaliDate) -> int:
    """Days since 1600-01-01 (day 0) of a Jalali date."""
    return nowruz_day_count(jd.year) + jalali_day_of_year(jd.month, jd.day)


def to_gregorian(jd: JalaliDate) -> GregorianResult:
    gy, gm, gd = from_day_count(day_count(jd))
    return GregorianResult(gy, gm, gd, utc_midnight(gy, gm, gd))
