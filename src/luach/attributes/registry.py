"""
Day attributes: named functions from a DayInfo to extra fields.
Holiday or zmanim layers plug in here without touching the engines.
"""

from __future__ import annotations
from typing import Any, Callable, Dict, Optional, Sequence

from ..core.types import DayInfo

AttrFunc = Callable[[DayInfo], Dict[str, Any]]
_ATTRIBUTES: Dict[str, AttrFunc] = {}


def register_attribute(name: str, fn: Optional[AttrFunc] = None, *, replace: bool = False):
    """
    Register `fn` under `name`. Without `fn`, returns a decorator:

        @register_attribute("omer")
        def omer(info): ...

    Re-registering a taken name raises ValueError unless replace=True.
    """
    def _add(f: AttrFunc) -> AttrFunc:
        if name in _ATTRIBUTES and not replace and _ATTRIBUTES[name] is not f:
            raise ValueError(f"Attribute '{name}' is already registered (pass replace=True to override).")
        _ATTRIBUTES[name] = f
        return f

    if fn is None:
        return _add
    return _add(fn)


def list_attributes() -> list[str]:
    return sorted(_ATTRIBUTES)


def compute_attributes(info: DayInfo, names: Sequence[str]) -> Dict[str, Any]:
    """Merge the fields of each named attribute, in order; later names win on key clashes."""
    unknown = [n for n in names if n not in _ATTRIBUTES]
    if unknown:
        raise KeyError(f"Unknown attribute(s) {unknown}. Available: {list_attributes()}")
    out: Dict[str, Any] = {}
    for name in names:
        out.update(_ATTRIBUTES[name](info))
    return out
