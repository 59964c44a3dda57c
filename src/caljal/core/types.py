from __future__ import annotations
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from .time import date_to_jdn

@dataclass(frozen=True)
class JalaliDate:
    year: int
    month: int
    day: int

@dataclass(frozen=True)
class GregorianResult:
    year: int
    month: int
    day: int
    calendar_instant: datetime  # 00:00 UTC of the civil date

    def date(self) -> date:
        return date(self.year, self.month, self.day)

    @property
    def jdn(self) -> int:
        return date_to_jdn(self.date())

    def isoformat(self, sep: str = "-") -> str:
        return f"{self.year}{sep}{self.month:02d}{sep}{self.day:02d}"

@dataclass(frozen=True)
class Coerced:
    """Outcome of coercing one raw date component; exactly one field is set."""
    value: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
