"""
caljal.core.coerce
------------------
Total coercion of raw date components (strings, ints, floats) to integers.

Nothing here raises: every call returns a `Coerced` carrying either the
integer or a short reason, and the Validator decides what to do with it.
"""

from __future__ import annotations

import math
import numbers
from decimal import Decimal
from typing import Any

from .types import Coerced


def _from_real(x: Any) -> Coerced:
    if isinstance(x, numbers.Integral):
        return Coerced(value=int(x))
    try:
        f = float(x)
    except (OverflowError, ValueError):
        return Coerced(error=f"{x!r} is not a finite number")
    if not math.isfinite(f):
        return Coerced(error=f"{x!r} is not a finite number")
    if x != int(f):
        return Coerced(error=f"{x!r} is not an integer")
    return Coerced(value=int(f))


def _from_str(s: str) -> Coerced:
    text = s.strip()
    if not text:
        return Coerced(error="empty string")
    try:
        # int() also accepts Persian and Arabic-Indic digits
        return Coerced(value=int(text))
    except ValueError:
        pass
    try:
        f = float(text)
    except ValueError:
        return Coerced(error=f"{s!r} is not numeric")
    return _from_real(f)


def coerce_int(value: Any) -> Coerced:
    """Coerce one date component to an int."""
    if isinstance(value, bool):
        return Coerced(error=f"{value!r} is a boolean, not an integer")
    if isinstance(value, str):
        return _from_str(value)
    if isinstance(value, (numbers.Real, Decimal)):
        return _from_real(value)
    return Coerced(error=f"unsupported component type {type(value).__name__}")
