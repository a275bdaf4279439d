"""
luach.engines.dechiyos
----------------------
Postponement rules moving Rosh Hashana from the raw molad day to the day the
year actually begins. Days are counted from the molad epoch, so day % 7 == 0
is a Sunday, 1 a Monday, 2 a Tuesday.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Tuple

MOLAD_ZAKEN = "molad_zaken"
GATRAD = "gatrad"
BETUTAKFOT = "betutakfot"
LO_ADU_ROSH = "lo_adu_rosh"


@dataclass(frozen=True)
class DechiyosParams:
    zaken: int = 19440        # 18 hours: noon
    gatrad: int = 9924        # 9 hours 204 parts
    betutakfot: int = 16789   # 15 hours 589 parts
    lo_adu: Tuple[int, ...] = (0, 3, 5)  # Sunday, Wednesday, Friday

    def __post_init__(self) -> None:
        for name in ("zaken", "gatrad", "betutakfot"):
            v = getattr(self, name)
            if not (0 <= v <= 25920):
                raise ValueError(f"{name} must be in 0..25920 chalakim (25920 disables the rule)")
        if any(not (0 <= d < 7) for d in self.lo_adu):
            raise ValueError("lo_adu weekdays must be in 0..6")


class DechiyosResolver:
    """
    Applies the four dechiyos:

      1. Molad Zaken: molad at or after noon.
      2. GaTRaD: Tuesday molad at or after 9h 204p in a common year.
      3. BeTuTaKFoT: Monday molad at or after 15h 589p following a leap year.
      4. Lo ADU Rosh: the resulting day may not be Sunday, Wednesday or Friday.

    At most one of 1-3 fires (each defers one day); 4 is checked afterwards and
    may add a second day.
    """
    def __init__(self, params: DechiyosParams, is_leap_year: Callable[[int], bool]):
        self.p = params
        self.is_leap_year = is_leap_year

    def first_rule(self, year: int, molad_day: int, molad_parts: int) -> str | None:
        weekday = molad_day % 7
        if molad_parts >= self.p.zaken:
            return MOLAD_ZAKEN
        if weekday == 2 and molad_parts >= self.p.gatrad and not self.is_leap_year(year):
            return GATRAD
        if weekday == 1 and molad_parts >= self.p.betutakfot and self.is_leap_year(year - 1):
            return BETUTAKFOT
        return None

    def applied(self, year: int, molad_day: int, molad_parts: int) -> Tuple[str, ...]:
        """Names of the rules that fire, in order of application."""
        fired = []
        day = molad_day
        rule = self.first_rule(year, molad_day, molad_parts)
        if rule is not None:
            fired.append(rule)
            day += 1
        if day % 7 in self.p.lo_adu:
            fired.append(LO_ADU_ROSH)
        return tuple(fired)

    def resolve(self, year: int, molad_day: int, molad_parts: int) -> int:
        """Elapsed-day count of Rosh Hashana for the year whose Tishrei molad is given."""
        return molad_day + len(self.applied(year, molad_day, molad_parts))
