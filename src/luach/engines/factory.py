"""
luach.engines.factory
---------------------
Turns pure-data CalendarSpec payloads into live, executable engine objects.
"""

from __future__ import annotations

from typing import Dict, List

from luach.engines.calendar import CalendarEngine
from luach.engines.dechiyos import DechiyosResolver
from luach.engines.molad import MoladEngine
from luach.engines.specs import ALL_SPECS, STANDARD_SPEC, CalendarSpec

# Engines are immutable, so one instance per spec name is shared
_ENGINES: Dict[str, CalendarEngine] = {}


def make_engine(spec: CalendarSpec) -> CalendarEngine:
    """Transforms a pure data CalendarSpec into a live CalendarEngine."""
    molad = MoladEngine(spec.molad)
    dechiyos = DechiyosResolver(spec.dechiyos, molad.is_leap_year)
    return CalendarEngine(id=spec.id, molad=molad, dechiyos=dechiyos, epoch=spec.epoch)


def get_engine(name: str) -> CalendarEngine:
    if name not in ALL_SPECS:
        raise KeyError(f"Unknown calendar '{name}'. Available: {sorted(ALL_SPECS)}")
    if name not in _ENGINES:
        _ENGINES[name] = make_engine(ALL_SPECS[name])
    return _ENGINES[name]


def default_engine() -> CalendarEngine:
    return get_engine(STANDARD_SPEC.id)


def list_engines() -> List[str]:
    return sorted(ALL_SPECS)
