from __future__ import annotations
from typing import Any, Dict

from ..core.types import DayInfo
from ..engines.factory import get_engine
from .registry import register_attribute

@register_attribute("weekday")
def weekday(info: DayInfo) -> Dict[str, Any]:
    # Convention: 1=Sunday..7=Saturday, 7 is Shabbos
    return {"weekday": info.day_of_week, "is_shabbos": info.day_of_week == 7}

@register_attribute("year_type")
def year_type(info: DayInfo) -> Dict[str, Any]:
    ye = get_engine(info.engine).year
    y = info.jewish.year
    return {
        "days_in_year": ye.days_in_year(y),
        "is_leap_year": ye.is_leap_year(y),
        "kviah": ye.kviah(y),
    }

@register_attribute("day_of_year")
def day_of_year(info: DayInfo) -> Dict[str, Any]:
    j = info.jewish
    return {"day_of_year": get_engine(info.engine).year.days_since_start_of_year(j.year, j.month, j.day)}

@register_attribute("molad")
def molad(info: DayInfo) -> Dict[str, Any]:
    # Molad of the month the day belongs to, in the announced (civil-clock) form
    from ..state import CalendarState

    eng = get_engine(info.engine)
    j = info.jewish
    m = CalendarState.from_jewish(j.year, j.month, j.day, engine=eng).molad()
    return {"molad": {"date": m.to_date(), "weekday": m.day_of_week, "time": m.molad_time}}
