from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict

from .molad import MoladParams
from .dechiyos import DechiyosParams


# ============================================================
# CALENDAR CONSTANTS
# ============================================================

# Absolute date of day 0 of the molad count (the day before 1 Tishrei 1)
JEWISH_EPOCH = -1373429

STANDARD_MOLAD = MoladParams(
    molad_tohu=31524,
    month_chalakim=765433,
    cycle_years=19,
    cycle_months=235,
    leap_count=7,
)

STANDARD_DECHIYOS = DechiyosParams(
    zaken=19440,
    gatrad=9924,
    betutakfot=16789,
    lo_adu=(0, 3, 5),
)


@dataclass(frozen=True)
class CalendarSpec:
    """Pure data payload for constructing a CalendarEngine."""
    id: str
    molad: MoladParams
    dechiyos: DechiyosParams
    epoch: int = JEWISH_EPOCH
    meta: Dict[str, Any] = field(default_factory=dict)

    def tweak(self, **kwargs) -> "CalendarSpec":
        return replace(self, **kwargs)


STANDARD_SPEC = CalendarSpec(
    id="standard",
    molad=STANDARD_MOLAD,
    dechiyos=STANDARD_DECHIYOS,
    meta={"description": "Fixed arithmetic calendar with the four dechiyos"},
)

ALL_SPECS: Dict[str, CalendarSpec] = {
    STANDARD_SPEC.id: STANDARD_SPEC,
}
