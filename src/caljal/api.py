from __future__ import annotations

import logging
from typing import Any

from .adapters import JalaliInput, format_gregorian, raw_parts
from .core.types import GregorianResult
from .engines.converter import to_gregorian
from .validate import validate_jalali

log = logging.getLogger(__name__)


def jalali_to_gregorian(year: Any, month: Any, day: Any) -> GregorianResult:
    jd = validate_jalali(year, month, day)
    res = to_gregorian(jd)
    log.debug("jalali %d/%d/%d -> gregorian %s", jd.year, jd.month, jd.day, res.isoformat())
    return res

def convert(value: JalaliInput, separator: str = "/") -> GregorianResult:
    """Convert a Jalali date given as 'Y/M/D' text, [y, m, d] or {'jy', 'jm', 'jd'}."""
    return jalali_to_gregorian(*raw_parts(value, separator))

def nowruz(year: Any) -> GregorianResult:
    """Gregorian date of 1 Farvardin of a Jalali year."""
    return jalali_to_gregorian(year, 1, 1)

# short alias; shadows the builtin only inside this namespace
format = format_gregorian
