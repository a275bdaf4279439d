#!/usr/bin/env python3
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional, Tuple

import argparse

import luach
from luach.core.types import NISSAN, TISHREI


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


def day_of_year(d: date) -> int:
    return (d - date(d.year, 1, 1)).days + 1


def rolling_median(np, y, win: int = 19):
    """Centered rolling median with edge padding."""
    if win < 3:
        return y.astype(float)
    if win % 2 == 0:
        win += 1
    k = win // 2
    ypad = np.pad(y, (k, k), mode="edge")
    out = np.empty_like(y, dtype=float)
    for i in range(len(y)):
        out[i] = float(np.median(ypad[i : i + win]))
    return out


@dataclass(frozen=True)
class Style:
    label: str
    color: str
    marker: str
    size: float = 14.0
    hollow: bool = False


# festival -> (month, day)
FESTIVALS: Dict[str, Tuple[int, int]] = {
    "rosh-hashana": (TISHREI, 1),
    "pesach": (NISSAN, 15),
}


def build_series(np, engine: str, start_year: int, end_year: int, *, festival: str) -> Tuple["np.ndarray", "np.ndarray"]:
    """Gregorian year and day-of-year of the festival, for Jewish years whose festival falls in [start, end]."""
    month, day = FESTIVALS[festival]
    offset = 3761 if month == TISHREI else 3760
    years = np.arange(start_year, end_year + 1, dtype=int)
    y = np.empty_like(years, dtype=float)

    for i, G in enumerate(years):
        d = luach.to_gregorian(int(G) + offset, month, day, engine=engine)
        y[i] = float(day_of_year(d))

    return years, y


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of Rosh Hashana and Pesach dates in the Gregorian year.")
    p.add_argument("--start-year", type=int, default=1600)
    p.add_argument("--end-year", type=int, default=2400)
    p.add_argument("--engine", default="standard")
    p.add_argument("--show-trend", action="store_true")
    p.add_argument("--trend-win", type=int, default=19, help="Rolling median window (odd recommended).")
    p.add_argument("--outbase", default="rosh_hashana_scatter", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    styles: Dict[str, Style] = {
        "rosh-hashana": Style("Rosh Hashana", "tab:blue", "o", size=12),
        "pesach":       Style("Pesach", "0.45", "o", size=18, hollow=True),
    }

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "legend.fontsize": 10,
    })

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)

    ax.set_xlabel("Gregorian year")
    ax.set_ylabel("Day-of-year (Jan 1 = 1)")
    ax.set_title(f"Rosh Hashana and Pesach across Gregorian years ({args.engine})")

    for festival, st in styles.items():
        x, y = build_series(np, args.engine, args.start_year, args.end_year, festival=festival)
        if st.hollow:
            ax.scatter(x, y, s=st.size, marker=st.marker, facecolors="none",
                       edgecolors=st.color, linewidths=1.0, alpha=0.6, label=st.label)
        else:
            ax.scatter(x, y, s=st.size, marker=st.marker, c=st.color,
                       linewidths=0.0, alpha=0.35, label=st.label)

        if args.show_trend:
            ax.plot(x, rolling_median(np, y, win=int(args.trend_win)),
                    color=st.color if not st.hollow else "0.30", linewidth=1.8)

    ax.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)

    fig.savefig(args.outbase + ".png", dpi=300)
    print(f"Saved: {args.outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
