from __future__ import annotations

from datetime import date, timedelta
import calendar as pycal
import argparse

import luach


def dow_header() -> str:
    return "Su     Mo     Tu     We     Th     Fr     Sa"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def to_weeks(days: list[tuple[date, str, str]]) -> list[list[tuple[str, str]]]:
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    pad = days[0][0].isoweekday() % 7  # Sunday=0
    for _ in range(pad):
        wk.append(cell("", ""))
    for _, top, bot in days:
        wk.append(cell(top, bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def jewish_month_calendar(engine: str, Y: int, M: int) -> None:
    b = luach.month_bounds(Y, M, engine=engine)
    d0 = b["first_date"]
    d1 = b["last_date"]

    days = []
    d = d0
    while d <= d1:
        j = luach.to_jewish(d, engine=engine)
        top = f"{j.day:2d}"
        bot = f"{d.month:02d}-{d.day:02d}"
        days.append((d, top, bot))
        d += timedelta(days=1)

    title = f"{engine} Jewish month  Y={Y}  M={M}   ({d0} .. {d1})"
    print_grid(title, to_weeks(days))


def gregorian_month_calendar(engine: str, gy: int, gm: int) -> None:
    first = date(gy, gm, 1)
    last_day = pycal.monthrange(gy, gm)[1]
    last = date(gy, gm, last_day)

    days = []
    d = first
    while d <= last:
        j = luach.to_jewish(d, engine=engine)
        top = f"{d.day:2d}"
        bot = f"{j.month:02d}-{j.day:02d}"
        days.append((d, top, bot))
        d += timedelta(days=1)

    title = f"{engine} Gregorian month  {gy}-{gm:02d}"
    print_grid(title, to_weeks(days))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Jewish-month calendar and/or a Gregorian-month calendar with paired labels."
    )
    p.add_argument("--engine", default="standard")

    p.add_argument("--jewish", nargs=2, type=int, metavar=("Y", "M"),
                   help="Jewish month to print: Y M (e.g. 5786 7 for Tishrei 5786)")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2025 9)")

    args = p.parse_args(argv)

    if not args.jewish and not args.greg:
        # sensible default demo
        jewish_month_calendar(args.engine, Y=5786, M=7)
        gregorian_month_calendar(args.engine, gy=2025, gm=9)
        return 0

    if args.jewish:
        Y, M = args.jewish
        jewish_month_calendar(args.engine, Y=Y, M=M)

    if args.greg:
        gy, gm = args.greg
        gregorian_month_calendar(args.engine, gy=gy, gm=gm)

    return 0

if __name__ == "__main__":
    raise SystemExit(main())
