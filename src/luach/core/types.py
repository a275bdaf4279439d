from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Literal, Optional

# Months, Nisan-first numbering
NISSAN = 1
IYAR = 2
SIVAN = 3
TAMMUZ = 4
AV = 5
ELUL = 6
TISHREI = 7
CHESHVAN = 8
KISLEV = 9
TEVES = 10
SHEVAT = 11
ADAR = 12
ADAR_II = 13

# Days of week, 1..7
SUNDAY = 1
MONDAY = 2
TUESDAY = 3
WEDNESDAY = 4
THURSDAY = 5
FRIDAY = 6
SATURDAY = 7

CHALAKIM_PER_MINUTE = 18
CHALAKIM_PER_HOUR = 1080
CHALAKIM_PER_DAY = 25920  # 24 * 1080

Kviah = Literal["deficient", "regular", "complete"]
Unit = Literal["day", "month", "year"]


@dataclass(frozen=True, order=True)
class GregorianDate:
    year: int
    month: int
    day: int

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)


@dataclass(frozen=True)
class MoladTime:
    hours: int = 0
    minutes: int = 0
    chalakim: int = 0

    @property
    def total_chalakim(self) -> int:
        return self.hours * CHALAKIM_PER_HOUR + self.minutes * CHALAKIM_PER_MINUTE + self.chalakim


@dataclass(frozen=True)
class JewishDate:
    year: int
    month: int
    day: int
    # time of conjunction when the date stands for a molad; not part of identity
    molad: Optional[MoladTime] = field(default=None, compare=False)


@dataclass(frozen=True)
class DayInfo:
    civil_date: date
    engine: str
    absolute: int
    jewish: JewishDate
    day_of_week: int
    attributes: Optional[Dict[str, Any]] = None
    debug: Optional[Dict[str, Any]] = None
