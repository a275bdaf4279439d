"""luach public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Register standard day attributes on import
from .attributes import standard as _standard_attributes  # noqa: F401

from .api import (
    list_engines,
    engine_info,
    jewish_to_absolute,
    absolute_to_jewish,
    to_jewish,
    to_gregorian,
    day_info,
    explain,
    is_leap_year,
    days_in_year,
    days_in_month,
    kviah,
    rosh_hashana,
    year_info,
    chalakim_since_molad_tohu,
    molad,
    month_bounds,
)
from .attributes.registry import register_attribute, list_attributes
from .core.errors import (
    LuachError,
    OutOfRangeError,
    OutOfRangeYearError,
    OutOfRangeMonthError,
    OutOfRangeDayError,
    OutOfRangeHourError,
    OutOfRangeMinuteError,
    OutOfRangePartError,
    DateBeforeEpochError,
    UnsupportedUnitError,
)
from .core.types import DayInfo, GregorianDate, JewishDate, MoladTime
from .state import CalendarState

__all__ = [
    "list_engines",
    "engine_info",
    "jewish_to_absolute",
    "absolute_to_jewish",
    "to_jewish",
    "to_gregorian",
    "day_info",
    "explain",
    "is_leap_year",
    "days_in_year",
    "days_in_month",
    "kviah",
    "rosh_hashana",
    "year_info",
    "chalakim_since_molad_tohu",
    "molad",
    "month_bounds",
    "register_attribute",
    "list_attributes",
    "CalendarState",
    "DayInfo",
    "GregorianDate",
    "JewishDate",
    "MoladTime",
    "LuachError",
    "OutOfRangeError",
    "OutOfRangeYearError",
    "OutOfRangeMonthError",
    "OutOfRangeDayError",
    "OutOfRangeHourError",
    "OutOfRangeMinuteError",
    "OutOfRangePartError",
    "DateBeforeEpochError",
    "UnsupportedUnitError",
]
