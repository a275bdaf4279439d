"""
luach.engines.calendar
----------------------
The Orchestrator. Binds the molad, dechiyos and year engines together and
translates Jewish calendar labels to absolute day numbers and back.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from luach.core.errors import (
    DateBeforeEpochError,
    OutOfRangeDayError,
    OutOfRangeHourError,
    OutOfRangeMinuteError,
    OutOfRangeMonthError,
    OutOfRangePartError,
    OutOfRangeYearError,
)
from luach.core.time import absolute_to_gregorian
from luach.core.types import CHALAKIM_PER_DAY, NISSAN, TEVES, TISHREI, JewishDate, MoladTime
from .dechiyos import DechiyosResolver
from .molad import MoladEngine, split_chalakim
from .specs import JEWISH_EPOCH
from .year import YearEngine

# Earliest representable Jewish date: 18 Teves 3761 == 0001-01-01 Gregorian
FLOOR_YEAR = 3761
FLOOR_MONTH = TEVES
FLOOR_DAY = 18


class CalendarEngine:
    """
    Translates Jewish (year, month, day) labels to absolute day numbers and vice versa.
    """
    def __init__(self, id: str, molad: MoladEngine, dechiyos: DechiyosResolver, epoch: int = JEWISH_EPOCH):
        self.id = id
        self.molad = molad
        self.dechiyos = dechiyos
        self.year = YearEngine(molad, dechiyos)
        self.epoch = epoch

    # ---------------------------------------------------------
    # Validation
    # ---------------------------------------------------------

    def validate_jewish(
        self,
        year: int,
        month: int,
        day: int,
        hours: Optional[int] = None,
        minutes: Optional[int] = None,
        chalakim: Optional[int] = None,
    ) -> JewishDate:
        """
        Range-check a Jewish date and optional molad time. Returns the date with the day
        clamped to the month's length (e.g. 30 Iyar becomes 29 Iyar).

        The result carries a molad time only when at least one time field is given;
        an explicit 00:00 and 0 chalakim is kept as MoladTime(0, 0, 0).
        """
        has_time = (hours, minutes, chalakim) != (None, None, None)
        hours, minutes, chalakim = hours or 0, minutes or 0, chalakim or 0
        if year < 1:
            raise OutOfRangeYearError(f"Jewish years < 1 can't be calculated. {year} is invalid.")
        if month < NISSAN or month > self.year.last_month_of_year(year):
            raise OutOfRangeMonthError(
                f"The Jewish month has to be between 1 and 12 (or 13 on a leap year). "
                f"{month} is invalid for the year {year}."
            )
        if not (1 <= day <= 30):
            raise OutOfRangeDayError(f"The Jewish day of month can't be < 1 or > 30. {day} is invalid.")
        if self.is_before_floor(year, month, day):
            raise DateBeforeEpochError(
                f"A Jewish date earlier than 18 Teves, 3761 (1/1/1 Gregorian) can't be set. "
                f"{year}, {month}, {day} is invalid."
            )
        if not (0 <= hours <= 23):
            raise OutOfRangeHourError(f"Hours < 0 or > 23 can't be set. {hours} is invalid.")
        if not (0 <= minutes <= 59):
            raise OutOfRangeMinuteError(f"Minutes < 0 or > 59 can't be set. {minutes} is invalid.")
        if not (0 <= chalakim <= 17):
            raise OutOfRangePartError(
                f"Chalakim/parts < 0 or > 17 can't be set. {chalakim} is invalid. "
                "Larger values must be split into minutes (18 chalakim per minute)."
            )
        day = min(day, self.year.days_in_month(month, year))
        molad = MoladTime(hours, minutes, chalakim) if has_time else None
        return JewishDate(year, month, day, molad)

    @staticmethod
    def is_before_floor(year: int, month: int, day: int) -> bool:
        if year != FLOOR_YEAR:
            return year < FLOOR_YEAR
        # 3761 runs Tishrei..Adar then Nisan..Elul; only Tishrei..17 Teves precede the floor
        if TISHREI <= month < FLOOR_MONTH:
            return True
        return month == FLOOR_MONTH and day < FLOOR_DAY

    # ---------------------------------------------------------
    # Forward: Jewish label to absolute day
    # ---------------------------------------------------------

    def to_absolute(self, year: int, month: int, day: int) -> int:
        return self.year.days_since_start_of_year(year, month, day) + self.year.elapsed_days(year) + self.epoch

    def rosh_hashana(self, year: int) -> int:
        return self.year.elapsed_days(year) + self.epoch + 1

    # ---------------------------------------------------------
    # Inverse: absolute day to Jewish label
    # ---------------------------------------------------------

    def from_absolute(self, absolute: int) -> JewishDate:
        """
        First (year, month, day) whose absolute date is `absolute`.
        The year estimate (absolute - epoch) // 366 never overshoots, so a forward scan suffices.
        """
        year = (absolute - self.epoch) // 366
        while absolute >= self.rosh_hashana(year + 1):
            year += 1

        # Walk months from Tishrei or Nisan, whichever half of the year holds the date
        month = TISHREI
        start = self.rosh_hashana(year)
        nissan = self.to_absolute(year, NISSAN, 1)
        if absolute >= nissan:
            month, start = NISSAN, nissan
        while True:
            length = self.year.days_in_month(month, year)
            if absolute < start + length:
                break
            start += length
            month += 1
        return JewishDate(year, month, absolute - start + 1)

    # ---------------------------------------------------------
    # Molad helpers
    # ---------------------------------------------------------

    def molad_to_absolute(self, chalakim: int) -> int:
        return chalakim // CHALAKIM_PER_DAY + self.epoch

    def molad_date(self, chalakim: int) -> JewishDate:
        """Jewish date of a raw molad with its time of day attached."""
        _, t = split_chalakim(chalakim)
        d = self.from_absolute(self.molad_to_absolute(chalakim))
        return JewishDate(d.year, d.month, d.day, t)

    # ---------------------------------------------------------
    # Diagnostics
    # ---------------------------------------------------------

    def info(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "epoch": self.epoch,
            "molad": self.molad.p.__dict__,
            "dechiyos": self.dechiyos.p.__dict__,
        }

    def explain_year(self, year: int) -> Dict[str, Any]:
        chalakim = self.molad.chalakim_since_molad_tohu(year, TISHREI)
        day, t = split_chalakim(chalakim)
        parts = chalakim - day * CHALAKIM_PER_DAY
        rh = self.rosh_hashana(year)
        out: Dict[str, Any] = {
            "year": year,
            "is_leap_year": self.year.is_leap_year(year),
            "cycle_position": self.molad.cycle_position(year),
            "molad_chalakim": chalakim,
            "molad_day": day,
            "molad_weekday": day % 7 + 1,
            "molad_time": t,
            "dechiyos": self.dechiyos.applied(year, day, parts),
            "elapsed_days": self.year.elapsed_days(year),
            "days_in_year": self.year.days_in_year(year),
            "kviah": self.year.kviah(year),
        }
        if rh >= 1:
            out["rosh_hashana"] = absolute_to_gregorian(rh).to_date()
        return out
