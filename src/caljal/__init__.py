"""caljal public API.

Jalali (Persian solar Hijri) -> proleptic Gregorian date conversion.
Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    jalali_to_gregorian,
    convert,
    nowruz,
    format,
)
from .adapters import format_gregorian
from .validate import validate_jalali, MAX_JALALI_YEAR
from .engines.jalali import is_jalali_leap, jalali_month_length
from .engines.gregorian import is_gregorian_leap
from .core.types import JalaliDate, GregorianResult
from .core.errors import (
    CaljalError,
    NonIntegerInputError,
    UnsupportedInputShapeError,
    RangeError,
    YearOutOfRangeError,
    MonthOutOfRangeError,
    DayOutOfRangeError,
    FormatError,
    WrongPartCountError,
    WrongElementCountError,
    MissingFieldError,
)

__all__ = [
    "jalali_to_gregorian",
    "convert",
    "nowruz",
    "format",
    "format_gregorian",
    "validate_jalali",
    "MAX_JALALI_YEAR",
    "is_jalali_leap",
    "jalali_month_length",
    "is_gregorian_leap",
    "JalaliDate",
    "GregorianResult",
    "CaljalError",
    "NonIntegerInputError",
    "UnsupportedInputShapeError",
    "RangeError",
    "YearOutOfRangeError",
    "MonthOutOfRangeError",
    "DayOutOfRangeError",
    "FormatError",
    "WrongPartCountError",
    "WrongElementCountError",
    "MissingFieldError",
]
