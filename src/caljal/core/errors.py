class CaljalError(Exception):
    """Base error."""

class NonIntegerInputError(CaljalError, TypeError):
    """Raised when a year/month/day does not coerce to a finite integer."""

class UnsupportedInputShapeError(CaljalError, TypeError):
    """Raised when convert() receives something other than a string, sequence or mapping."""

class RangeError(CaljalError, ValueError):
    """A date component failed its bound check."""

class YearOutOfRangeError(RangeError):
    pass

class MonthOutOfRangeError(RangeError):
    pass

class DayOutOfRangeError(RangeError):
    pass

class FormatError(CaljalError, ValueError):
    """Input had the right type but the wrong shape."""

class WrongPartCountError(FormatError):
    pass

class WrongElementCountError(FormatError):
    pass

class MissingFieldError(FormatError):
    pass
