"""
caljal.adapters
---------------
Input shapes accepted by convert() and the output formatter.

Each shape is parsed into a raw (year, month, day) triple by its own branch;
all branches converge on jalali_to_gregorian(), which does the validation.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Tuple, Union

from .core.errors import (
    MissingFieldError,
    UnsupportedInputShapeError,
    WrongElementCountError,
    WrongPartCountError,
)
from .core.types import GregorianResult, JalaliDate

JalaliInput = Union[str, Sequence, Mapping, JalaliDate]

MAPPING_FIELDS = ("jy", "jm", "jd")


def parts_from_text(text: str, separator: str = "/") -> Tuple[str, str, str]:
    # an empty separator splits into single characters
    chunks = list(text) if separator == "" else text.split(separator)
    parts = [chunk.strip() for chunk in chunks]
    if len(parts) != 3:
        raise WrongPartCountError(
            f"expected 3 parts separated by {separator!r}, got {len(parts)} in {text!r}"
        )
    return parts[0], parts[1], parts[2]


def parts_from_sequence(seq: Sequence) -> Tuple[Any, Any, Any]:
    if len(seq) != 3:
        raise WrongElementCountError(f"expected [jy, jm, jd], got {len(seq)} elements")
    return seq[0], seq[1], seq[2]


def parts_from_mapping(obj: Mapping) -> Tuple[Any, Any, Any]:
    missing = [k for k in MAPPING_FIELDS if obj.get(k) is None]
    if missing:
        raise MissingFieldError(f"mapping input is missing field(s): {', '.join(missing)}")
    return obj["jy"], obj["jm"], obj["jd"]


def raw_parts(value: JalaliInput, separator: str = "/") -> Tuple[Any, Any, Any]:
    """Dispatch on input shape; returns the raw, unvalidated triple."""
    if isinstance(value, JalaliDate):
        return value.year, value.month, value.day
    if isinstance(value, str):
        return parts_from_text(value, separator)
    if isinstance(value, Mapping):
        return parts_from_mapping(value)
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return parts_from_sequence(value)
    raise UnsupportedInputShapeError(
        "input must be a string, a sequence [jy, jm, jd] or a mapping with jy/jm/jd, "
        f"got {type(value).__name__}"
    )


def format_gregorian(result: GregorianResult, separator: str = "-") -> str:
    """Render as YYYY{sep}MM{sep}DD; month and day zero-padded, year as is."""
    return result.isoformat(separator)
