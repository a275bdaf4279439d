#!/usr/bin/env python3
"""
Frequencies of the year types (kviyos) over a range of Jewish years.

A year type is labelled by the weekday of Rosh Hashana, the kviah letter
(D/R/C for deficient/regular/complete) and C/L for common/leap, e.g. "2DC".
The standard calendar produces exactly 14 types.
"""
from __future__ import annotations

import argparse
from collections import Counter
from typing import Dict, List, Optional, Tuple

from luach.core.time import day_of_week
from luach.engines.factory import get_engine, list_engines


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "luach[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "luach[diagnostics]"') from e


def year_type(engine: str, year: int) -> str:
    eng = get_engine(engine)
    wd = day_of_week(eng.rosh_hashana(year))
    k = eng.year.kviah(year)[0].upper()
    return f"{wd}{k}{'L' if eng.year.is_leap_year(year) else 'C'}"


def count_types(engine: str, start_year: int, end_year: int) -> Dict[str, int]:
    return dict(Counter(year_type(engine, Y) for Y in range(start_year, end_year + 1)))


def _sort_key(code: str) -> Tuple[str, int, str]:
    return (code[2], int(code[0]), code[1])


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Bar chart of Jewish year-type frequencies.")
    p.add_argument("--engine", default="standard", choices=list_engines())
    p.add_argument("--from-year", type=int, default=5000)
    p.add_argument("--to-year", type=int, default=6000)
    p.add_argument("--outbase", default="year_types", help="Output base name (writes .png)")
    p.add_argument("--no-plot", action="store_true", help="Only print the table.")
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")

    counts = count_types(args.engine, args.from_year, args.to_year)
    codes = sorted(counts, key=_sort_key)
    total = sum(counts.values())

    print(f"{args.engine}: {len(codes)} year types in {args.from_year}..{args.to_year}")
    for c in codes:
        print(f"  {c}  {counts[c]:6d}  {100.0 * counts[c] / total:6.2f}%")

    if args.no_plot:
        return 0

    np = _need_numpy()
    plt = _need_matplotlib()

    freq = np.array([counts[c] for c in codes], dtype=float) / total
    colors = ["tab:blue" if c.endswith("C") else "tab:orange" for c in codes]

    fig, ax = plt.subplots(figsize=(9.2, 4.2), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, axis="y", color="0.88", linewidth=0.7)
    ax.bar(np.arange(len(codes)), freq, color=colors)
    ax.set_xticks(np.arange(len(codes)))
    ax.set_xticklabels(codes)
    ax.set_xlabel("Rosh Hashana weekday, kviah, common/leap")
    ax.set_ylabel("Relative frequency")
    ax.set_title(f"Year types, {args.engine}, {args.from_year}-{args.to_year}")

    fig.savefig(args.outbase + ".png", dpi=300)
    print(f"Saved: {args.outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
