"""
luach.state
-----------
A single-owner, mutable calendar position. Holds one absolute day together with
its Gregorian date, Jewish date and day of week, and keeps them in step through
set/forward/back operations.
"""

from __future__ import annotations

import functools
import logging
from datetime import date, datetime
from typing import Any, Dict, Optional, Union

from luach.core.errors import DateBeforeEpochError, UnsupportedUnitError
from luach.core.time import (
    absolute_to_gregorian,
    day_of_week,
    days_in_gregorian_month,
    gregorian_to_absolute,
    is_gregorian_leap_year,
    validate_gregorian,
)
from luach.core.types import (
    ADAR,
    ADAR_II,
    ELUL,
    NISSAN,
    TISHREI,
    GregorianDate,
    JewishDate,
    Kviah,
    MoladTime,
    Unit,
)
from luach.engines.calendar import CalendarEngine
from luach.engines.factory import default_engine
from luach.engines.molad import split_chalakim

_LOGGER = logging.getLogger(__name__)

_UNITS = ("day", "month", "year")


@functools.total_ordering
class CalendarState:
    """
    Equality and ordering use the absolute day only; molad and civil time fields
    are ignored. Use copy() before trial mutations.
    """

    def __init__(self, *, engine: Optional[CalendarEngine] = None):
        self._engine = engine if engine is not None else default_engine()
        self._hour = 0
        self._minute = 0
        self._second = 0
        self._molad_hours = 0
        self._molad_minutes = 0
        self._molad_chalakim = 0
        self._has_molad = False
        self.set_now()

    # ---------------------------------------------------------
    # Constructors
    # ---------------------------------------------------------

    @classmethod
    def _blank(cls, engine: Optional[CalendarEngine]) -> "CalendarState":
        obj = cls.__new__(cls)
        obj._engine = engine if engine is not None else default_engine()
        obj._hour = obj._minute = obj._second = 0
        obj._molad_hours = obj._molad_minutes = obj._molad_chalakim = 0
        obj._has_molad = False
        return obj

    @classmethod
    def now(cls, *, engine: Optional[CalendarEngine] = None) -> "CalendarState":
        return cls(engine=engine)

    @classmethod
    def from_gregorian(cls, year: int, month: int, day: int, *, engine: Optional[CalendarEngine] = None) -> "CalendarState":
        obj = cls._blank(engine)
        obj.set_gregorian(year, month, day)
        return obj

    @classmethod
    def from_date(cls, d: Union[date, datetime], *, engine: Optional[CalendarEngine] = None) -> "CalendarState":
        obj = cls._blank(engine)
        obj.set_date(d)
        return obj

    @classmethod
    def from_jewish(
        cls,
        year: int,
        month: int,
        day: int,
        hours: Optional[int] = None,
        minutes: Optional[int] = None,
        chalakim: Optional[int] = None,
        *,
        engine: Optional[CalendarEngine] = None,
    ) -> "CalendarState":
        obj = cls._blank(engine)
        obj.set_jewish(year, month, day, hours, minutes, chalakim)
        return obj

    @classmethod
    def from_molad(cls, chalakim: int, *, engine: Optional[CalendarEngine] = None) -> "CalendarState":
        obj = cls._blank(engine)
        obj.set_molad(chalakim)
        return obj

    @classmethod
    def from_absolute(cls, absolute: int, *, engine: Optional[CalendarEngine] = None) -> "CalendarState":
        obj = cls._blank(engine)
        obj.set_absolute(absolute)
        return obj

    # ---------------------------------------------------------
    # Setters (validate, then assign)
    # ---------------------------------------------------------

    def _assign(self, absolute: int, g: GregorianDate, j: JewishDate) -> None:
        self._absolute = absolute
        self._g_year, self._g_month, self._g_day = g.year, g.month, g.day
        self._j_year, self._j_month, self._j_day = j.year, j.month, j.day
        self._day_of_week = day_of_week(absolute)
        t = j.molad if j.molad is not None else MoladTime()
        self._has_molad = j.molad is not None
        self._molad_hours, self._molad_minutes, self._molad_chalakim = t.hours, t.minutes, t.chalakim
        _LOGGER.debug("calendar state set to absolute=%d gregorian=%s jewish=%s", absolute, g, j)

    def set_absolute(self, absolute: int) -> None:
        if absolute < 1:
            raise DateBeforeEpochError(f"Absolute date {absolute} is before 0001-01-01 (18 Teves 3761).")
        self._assign(absolute, absolute_to_gregorian(absolute), self._engine.from_absolute(absolute))

    def set_gregorian(self, year: int, month: int, day: int) -> None:
        """Set from a Gregorian date; a day past the month's end is clamped."""
        g = validate_gregorian(year, month, day)
        absolute = gregorian_to_absolute(g.year, g.month, g.day)
        self._assign(absolute, g, self._engine.from_absolute(absolute))

    def set_date(self, d: Union[date, datetime]) -> None:
        """Set from a civil date or naive date-time; the time of day is kept as given."""
        self.set_gregorian(d.year, d.month, d.day)
        if isinstance(d, datetime):
            self._hour, self._minute, self._second = d.hour, d.minute, d.second
        else:
            self._hour = self._minute = self._second = 0

    def set_now(self) -> None:
        self.set_date(datetime.now())

    def set_jewish(
        self,
        year: int,
        month: int,
        day: int,
        hours: Optional[int] = None,
        minutes: Optional[int] = None,
        chalakim: Optional[int] = None,
    ) -> None:
        """Set from a Jewish date; a day past the month's length is clamped."""
        j = self._engine.validate_jewish(year, month, day, hours, minutes, chalakim)
        absolute = self._engine.to_absolute(j.year, j.month, j.day)
        self._assign(absolute, absolute_to_gregorian(absolute), j)

    def set_molad(self, chalakim: int) -> None:
        """Set to the day of a raw molad (chalakim since the molad epoch), keeping its time."""
        absolute = self._engine.molad_to_absolute(chalakim)
        if absolute < 1:
            raise DateBeforeEpochError(f"Molad {chalakim} falls before 0001-01-01 (18 Teves 3761).")
        _, t = split_chalakim(chalakim)
        j = self._engine.from_absolute(absolute)
        self._assign(absolute, absolute_to_gregorian(absolute), JewishDate(j.year, j.month, j.day, t))

    def set_gregorian_year(self, year: int) -> None:
        self.set_gregorian(year, self._g_month, self._g_day)

    def set_gregorian_month(self, month: int) -> None:
        self.set_gregorian(self._g_year, month, self._g_day)

    def set_gregorian_day(self, day: int) -> None:
        self.set_gregorian(self._g_year, self._g_month, day)

    def set_jewish_year(self, year: int) -> None:
        self.set_jewish(year, self._j_month, self._j_day)

    def set_jewish_month(self, month: int) -> None:
        self.set_jewish(self._j_year, month, self._j_day)

    def set_jewish_day(self, day: int) -> None:
        self.set_jewish(self._j_year, self._j_month, day)

    # ---------------------------------------------------------
    # Mutators
    # ---------------------------------------------------------

    def forward(self, unit: Unit = "day", amount: int = 1) -> None:
        if unit not in _UNITS:
            raise UnsupportedUnitError(f"Unsupported unit {unit!r}. Only 'day', 'month' or 'year' are supported.")
        if amount < 1:
            raise UnsupportedUnitError(f"forward() does not support amounts less than 1 ({amount}). See back().")
        if unit == "day":
            for _ in range(amount):
                self._step_day()
        elif unit == "month":
            self._forward_months(amount)
        else:
            self._forward_years(amount)

    def _step_day(self) -> None:
        if self._g_day == days_in_gregorian_month(self._g_month, self._g_year):
            self._g_day = 1
            if self._g_month == 12:
                self._g_year += 1
                self._g_month = 1
            else:
                self._g_month += 1
        else:
            self._g_day += 1

        if self._j_day == self.days_in_month:
            if self._j_month == ELUL:
                self._j_year += 1
                self._j_month = TISHREI
            elif self._j_month == self._engine.year.last_month_of_year(self._j_year):
                self._j_month = NISSAN
            else:
                self._j_month += 1
            self._j_day = 1
        else:
            self._j_day += 1

        self._day_of_week = self._day_of_week % 7 + 1
        self._absolute += 1

    def _forward_months(self, amount: int) -> None:
        year, month = self._j_year, self._j_month
        for _ in range(amount):
            if month == ELUL:
                year, month = year + 1, TISHREI
            elif month == self._engine.year.last_month_of_year(year):
                month = NISSAN
            else:
                month += 1
        self.set_jewish(year, month, self._j_day)

    def _forward_years(self, amount: int) -> None:
        year, month = self._j_year + amount, self._j_month
        was_leap = self._engine.year.is_leap_year(self._j_year)
        is_leap = self._engine.year.is_leap_year(year)
        if month == ADAR_II and not is_leap:
            month = ADAR
        elif month == ADAR and is_leap and not was_leap:
            month = ADAR_II
        self.set_jewish(year, month, self._j_day)

    def back(self) -> None:
        """Step back exactly one day; the inverse of forward("day", 1)."""
        if self._absolute <= 1:
            raise DateBeforeEpochError("Can't step back before 0001-01-01 (18 Teves 3761).")
        if self._g_day == 1:
            if self._g_month == 1:
                self._g_month = 12
                self._g_year -= 1
            else:
                self._g_month -= 1
            self._g_day = days_in_gregorian_month(self._g_month, self._g_year)
        else:
            self._g_day -= 1

        if self._j_day == 1:
            if self._j_month == NISSAN:
                self._j_month = self._engine.year.last_month_of_year(self._j_year)
            elif self._j_month == TISHREI:
                self._j_year -= 1
                self._j_month = ELUL
            else:
                self._j_month -= 1
            self._j_day = self.days_in_month
        else:
            self._j_day -= 1

        self._day_of_week = (self._day_of_week - 2) % 7 + 1
        self._absolute -= 1

    # ---------------------------------------------------------
    # Molad
    # ---------------------------------------------------------

    def molad(self) -> "CalendarState":
        """
        The molad of this state's month as a new state. Molad hours count from 6 pm of the
        previous evening, so an hour >= 6 belongs to the next civil day; hours are then
        rebased to civil midnight.
        """
        m = CalendarState.from_molad(self.chalakim_since_molad_tohu, engine=self._engine)
        if m._molad_hours >= 6:
            m.forward("day", 1)
        m._molad_hours = (m._molad_hours + 18) % 24
        return m

    @property
    def chalakim_since_molad_tohu(self) -> int:
        return self._engine.molad.chalakim_since_molad_tohu(self._j_year, self._j_month)

    @property
    def molad_hours(self) -> int:
        return self._molad_hours

    @property
    def molad_minutes(self) -> int:
        return self._molad_minutes

    @property
    def molad_chalakim(self) -> int:
        return self._molad_chalakim

    @property
    def molad_time(self) -> MoladTime:
        return MoladTime(self._molad_hours, self._molad_minutes, self._molad_chalakim)

    # ---------------------------------------------------------
    # Queries
    # ---------------------------------------------------------

    @property
    def engine(self) -> CalendarEngine:
        return self._engine

    @property
    def absolute(self) -> int:
        return self._absolute

    @property
    def day_of_week(self) -> int:
        """1=Sunday .. 7=Saturday."""
        return self._day_of_week

    @property
    def gregorian(self) -> GregorianDate:
        return GregorianDate(self._g_year, self._g_month, self._g_day)

    @property
    def gregorian_year(self) -> int:
        return self._g_year

    @property
    def gregorian_month(self) -> int:
        return self._g_month

    @property
    def gregorian_day(self) -> int:
        return self._g_day

    @property
    def gregorian_days_in_month(self) -> int:
        return days_in_gregorian_month(self._g_month, self._g_year)

    @property
    def is_gregorian_leap_year(self) -> bool:
        return is_gregorian_leap_year(self._g_year)

    @property
    def jewish(self) -> JewishDate:
        return JewishDate(self._j_year, self._j_month, self._j_day, self.molad_time if self._has_molad else None)

    @property
    def jewish_year(self) -> int:
        return self._j_year

    @property
    def jewish_month(self) -> int:
        return self._j_month

    @property
    def jewish_day(self) -> int:
        return self._j_day

    @property
    def is_leap_year(self) -> bool:
        return self._engine.year.is_leap_year(self._j_year)

    @property
    def days_in_month(self) -> int:
        return self._engine.year.days_in_month(self._j_month, self._j_year)

    @property
    def days_in_year(self) -> int:
        return self._engine.year.days_in_year(self._j_year)

    @property
    def is_cheshvan_long(self) -> bool:
        return self._engine.year.is_cheshvan_long(self._j_year)

    @property
    def is_kislev_short(self) -> bool:
        return self._engine.year.is_kislev_short(self._j_year)

    @property
    def kviah(self) -> Kviah:
        return self._engine.year.kviah(self._j_year)

    @property
    def days_since_start_of_year(self) -> int:
        return self._engine.year.days_since_start_of_year(self._j_year, self._j_month, self._j_day)

    @property
    def hour(self) -> int:
        return self._hour

    @property
    def minute(self) -> int:
        return self._minute

    @property
    def second(self) -> int:
        return self._second

    def to_date(self) -> date:
        return date(self._g_year, self._g_month, self._g_day)

    def to_datetime(self) -> datetime:
        """Naive local date-time built from the Gregorian date and the stored time of day."""
        return datetime(self._g_year, self._g_month, self._g_day, self._hour, self._minute, self._second)

    def info(self) -> Dict[str, Any]:
        return {
            "absolute": self._absolute,
            "gregorian": self.gregorian,
            "jewish": self.jewish,
            "day_of_week": self._day_of_week,
            "is_leap_year": self.is_leap_year,
            "days_in_month": self.days_in_month,
            "days_in_year": self.days_in_year,
            "kviah": self.kviah,
            "chalakim_since_molad_tohu": self.chalakim_since_molad_tohu,
            "engine": self._engine.id,
        }

    # ---------------------------------------------------------
    # Copying and comparison
    # ---------------------------------------------------------

    def copy(self) -> "CalendarState":
        obj = type(self).__new__(type(self))
        obj.__dict__.update(self.__dict__)
        return obj

    def __copy__(self) -> "CalendarState":
        return self.copy()

    def __deepcopy__(self, memo: Dict[int, Any]) -> "CalendarState":
        # engines are immutable; every other field is an int
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarState):
            return NotImplemented
        return self._absolute == other._absolute

    def __hash__(self) -> int:
        # follows the absolute day, so don't mutate a state while it is a set member or dict key
        return hash(self._absolute)

    def __lt__(self, other: "CalendarState") -> bool:
        if not isinstance(other, CalendarState):
            return NotImplemented
        return self._absolute < other._absolute

    def __repr__(self) -> str:
        return (
            f"CalendarState(absolute={self._absolute}, "
            f"gregorian={self._g_year:04d}-{self._g_month:02d}-{self._g_day:02d}, "
            f"jewish={self._j_year}-{self._j_month:02d}-{self._j_day:02d}, "
            f"day_of_week={self._day_of_week})"
        )
