"""
luach.engines.year
------------------
Year and month lengths derived from differences of Rosh Hashana day counts.
"""

from __future__ import annotations

from typing import List

from luach.core.types import (
    ADAR,
    ADAR_II,
    CHESHVAN,
    ELUL,
    IYAR,
    KISLEV,
    NISSAN,
    TAMMUZ,
    TEVES,
    TISHREI,
    Kviah,
)
from .dechiyos import DechiyosResolver
from .molad import MoladEngine

YEAR_LENGTHS = (353, 354, 355, 383, 384, 385)

# months that always have 29 days; Cheshvan, Kislev and Adar depend on the year
_SHORT_MONTHS = (IYAR, TAMMUZ, ELUL, TEVES, ADAR_II)


class YearEngine:
    def __init__(self, molad: MoladEngine, dechiyos: DechiyosResolver):
        self.molad = molad
        self.dechiyos = dechiyos

    def elapsed_days(self, year: int) -> int:
        """Days from the molad epoch to Rosh Hashana of the given year."""
        day, parts = self.molad.molad_day_and_parts(year, TISHREI)
        return self.dechiyos.resolve(year, day, parts)

    def days_in_year(self, year: int) -> int:
        return self.elapsed_days(year + 1) - self.elapsed_days(year)

    def is_leap_year(self, year: int) -> bool:
        return self.molad.is_leap_year(year)

    def last_month_of_year(self, year: int) -> int:
        return ADAR_II if self.is_leap_year(year) else ADAR

    def months_in_year(self, year: int) -> int:
        return 13 if self.is_leap_year(year) else 12

    def months_of_year(self, year: int) -> List[int]:
        """Month numbers in civil order, Tishrei first."""
        return list(range(TISHREI, self.last_month_of_year(year) + 1)) + list(range(NISSAN, TISHREI))

    def is_cheshvan_long(self, year: int) -> bool:
        return self.days_in_year(year) % 10 == 5

    def is_kislev_short(self, year: int) -> bool:
        return self.days_in_year(year) % 10 == 3

    def kviah(self, year: int) -> Kviah:
        length = self.days_in_year(year) % 10
        if length == 5:
            return "complete"
        if length == 3:
            return "deficient"
        return "regular"

    def days_in_month(self, month: int, year: int) -> int:
        if month in _SHORT_MONTHS:
            return 29
        if month == CHESHVAN:
            return 30 if self.is_cheshvan_long(year) else 29
        if month == KISLEV:
            return 29 if self.is_kislev_short(year) else 30
        if month == ADAR:
            return 30 if self.is_leap_year(year) else 29
        return 30

    def days_since_start_of_year(self, year: int, month: int, day: int) -> int:
        """1-based day of the year counted from 1 Tishrei."""
        elapsed = day
        if month < TISHREI:
            for m in range(TISHREI, self.last_month_of_year(year) + 1):
                elapsed += self.days_in_month(m, year)
            for m in range(NISSAN, month):
                elapsed += self.days_in_month(m, year)
        else:
            for m in range(TISHREI, month):
                elapsed += self.days_in_month(m, year)
        return elapsed
