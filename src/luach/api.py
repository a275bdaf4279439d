from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Dict, List, Sequence

from .attributes.registry import compute_attributes
from .core.errors import DateBeforeEpochError
from .core.time import absolute_to_date, absolute_to_jdn, date_to_absolute, day_of_week
from .core.types import DayInfo, JewishDate, Kviah
from .engines.factory import get_engine, list_engines as _list_engines
from .engines.specs import ALL_SPECS
from .state import CalendarState

DEFAULT_ENGINE = "standard"


def list_engines() -> List[str]:
    return _list_engines()

def engine_info(engine: str) -> Dict[str, Any]:
    out = get_engine(engine).info()
    out["meta"] = dict(ALL_SPECS[engine].meta)
    return out

# ============================================================
# Conversions
# ============================================================

def jewish_to_absolute(year: int, month: int, day: int, *, engine: str = DEFAULT_ENGINE) -> int:
    eng = get_engine(engine)
    j = eng.validate_jewish(year, month, day)
    return eng.to_absolute(j.year, j.month, j.day)

def absolute_to_jewish(absolute: int, *, engine: str = DEFAULT_ENGINE) -> JewishDate:
    if absolute < 1:
        raise DateBeforeEpochError(f"Absolute date {absolute} is before 0001-01-01 (18 Teves 3761).")
    return get_engine(engine).from_absolute(absolute)

def to_jewish(d: date, *, engine: str = DEFAULT_ENGINE) -> JewishDate:
    """Gregorian date -> Jewish date (molad fields unset)."""
    return get_engine(engine).from_absolute(date_to_absolute(d))

def to_gregorian(year: int, month: int, day: int, *, engine: str = DEFAULT_ENGINE) -> date:
    """Jewish date -> Gregorian date. A day past the month's length is clamped."""
    return absolute_to_date(jewish_to_absolute(year, month, day, engine=engine))

def day_info(
    d: date,
    *,
    engine: str = DEFAULT_ENGINE,
    attributes: Sequence[str] = (),
    debug: bool = False,
) -> DayInfo:
    eng = get_engine(engine)
    absolute = date_to_absolute(d)
    j = eng.from_absolute(absolute)
    dbg = None
    if debug:
        rh = eng.rosh_hashana(j.year)
        dbg = {
            "jdn": absolute_to_jdn(absolute),
            # None for 3761, whose Rosh Hashana precedes 0001-01-01
            "rosh_hashana": absolute_to_date(rh) if rh >= 1 else None,
            "day_of_year": eng.year.days_since_start_of_year(j.year, j.month, j.day),
            "year": eng.explain_year(j.year),
            "engine": eng.info(),
        }
    info = DayInfo(
        civil_date=d,
        engine=engine,
        absolute=absolute,
        jewish=j,
        day_of_week=day_of_week(absolute),
        debug=dbg,
    )
    if attributes:
        info = replace(info, attributes=compute_attributes(info, attributes))
    return info

def explain(d: date, *, engine: str = DEFAULT_ENGINE) -> Dict[str, Any]:
    return day_info(d, engine=engine, debug=True).__dict__

# ============================================================
# Year and month queries
# ============================================================

def is_leap_year(year: int, *, engine: str = DEFAULT_ENGINE) -> bool:
    return get_engine(engine).year.is_leap_year(year)

def days_in_year(year: int, *, engine: str = DEFAULT_ENGINE) -> int:
    return get_engine(engine).year.days_in_year(year)

def days_in_month(month: int, year: int, *, engine: str = DEFAULT_ENGINE) -> int:
    return get_engine(engine).year.days_in_month(month, year)

def kviah(year: int, *, engine: str = DEFAULT_ENGINE) -> Kviah:
    return get_engine(engine).year.kviah(year)

def rosh_hashana(year: int, *, engine: str = DEFAULT_ENGINE) -> date:
    return absolute_to_date(get_engine(engine).rosh_hashana(year))

def year_info(year: int, *, engine: str = DEFAULT_ENGINE) -> Dict[str, Any]:
    return get_engine(engine).explain_year(year)

def chalakim_since_molad_tohu(year: int, month: int, *, engine: str = DEFAULT_ENGINE) -> int:
    return get_engine(engine).molad.chalakim_since_molad_tohu(year, month)

def molad(year: int, month: int, *, engine: str = DEFAULT_ENGINE) -> CalendarState:
    """Announced molad of (year, month): civil day and time of day after local midnight."""
    return CalendarState.from_jewish(year, month, 1, engine=get_engine(engine)).molad()

def month_bounds(year: int, month: int, *, engine: str = DEFAULT_ENGINE) -> Dict[str, Any]:
    eng = get_engine(engine)
    first = jewish_to_absolute(year, month, 1, engine=engine)
    length = eng.year.days_in_month(month, year)
    return {
        "year": year,
        "month": month,
        "days": length,
        "first_absolute": first,
        "last_absolute": first + length - 1,
        "first_date": absolute_to_date(first),
        "last_date": absolute_to_date(first + length - 1),
    }
