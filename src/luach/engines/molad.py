"""
luach.engines.molad
-------------------
Mean lunar conjunction (molad) arithmetic.

All lunar time is counted in chalakim (1080 per hour) from the molad of
Tishrei of year 1 (BaHaRaD: day 2, 5 hours, 204 parts), using exact integers.
The Metonic layout maps a (year, month) label to the number of lunations
elapsed since that epoch.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from luach.core.types import (
    CHALAKIM_PER_DAY,
    CHALAKIM_PER_HOUR,
    CHALAKIM_PER_MINUTE,
    TISHREI,
    MoladTime,
)


@dataclass(frozen=True)
class MoladParams:
    molad_tohu: int = 31524             # BaHaRaD, chalakim after the start of day 0
    month_chalakim: int = 765433        # 29d 12h 793p
    cycle_years: int = 19
    cycle_months: int = 235
    leap_count: int = 7                 # leap years per cycle, at positions 3,6,8,11,14,17,19

    def __post_init__(self) -> None:
        if self.month_chalakim <= 0:
            raise ValueError("month_chalakim must be positive")
        if not (0 <= self.leap_count < self.cycle_years):
            raise ValueError("leap_count must be in 0..cycle_years-1")
        if self.cycle_months != 12 * self.cycle_years + self.leap_count:
            raise ValueError("cycle_months must equal 12*cycle_years + leap_count")


def split_chalakim(chalakim: int) -> Tuple[int, MoladTime]:
    """Split a chalakim count into (whole days, time of day)."""
    day, parts = divmod(chalakim, CHALAKIM_PER_DAY)
    hours, parts = divmod(parts, CHALAKIM_PER_HOUR)
    minutes, parts = divmod(parts, CHALAKIM_PER_MINUTE)
    return day, MoladTime(hours, minutes, parts)


class MoladEngine:
    """
    Lunation counting on the fixed 19-year cycle.
    Month numbers are Nisan-first (1..13); conjunction arithmetic runs from Tishrei.
    """
    def __init__(self, params: MoladParams):
        self.p = params

    def is_leap_year(self, year: int) -> bool:
        # closed form of "cycle position in leap_positions" for the standard layout
        return (self.p.leap_count * year + 1) % self.p.cycle_years < self.p.leap_count

    def cycle_position(self, year: int) -> int:
        """Position of the year inside its cycle, 1..cycle_years."""
        return (year - 1) % self.p.cycle_years + 1

    def month_of_year(self, year: int, month: int) -> int:
        """Tishrei-relative month index: Tishrei=1 .. Elul=12 (13 in leap years)."""
        leap = self.is_leap_year(year)
        return (month + (6 if leap else 5)) % (13 if leap else 12) + 1

    def months_elapsed(self, year: int, month: int = TISHREI) -> int:
        """Lunations from the molad of Tishrei year 1 to the molad of (year, month)."""
        y = year - 1
        cycles, pos = divmod(y, self.p.cycle_years)
        return (
            self.p.cycle_months * cycles
            + 12 * pos
            + (self.p.leap_count * pos + 1) // self.p.cycle_years
            + self.month_of_year(year, month) - 1
        )

    def chalakim_since_molad_tohu(self, year: int, month: int = TISHREI) -> int:
        return self.p.molad_tohu + self.p.month_chalakim * self.months_elapsed(year, month)

    def molad_day_and_parts(self, year: int, month: int = TISHREI) -> Tuple[int, int]:
        """(conjunction day, chalakim into that day)."""
        return divmod(self.chalakim_since_molad_tohu(year, month), CHALAKIM_PER_DAY)

    def molad(self, year: int, month: int = TISHREI) -> Tuple[int, MoladTime]:
        return split_chalakim(self.chalakim_since_molad_tohu(year, month))
