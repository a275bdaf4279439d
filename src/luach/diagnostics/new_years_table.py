from __future__ import annotations

from datetime import date
import argparse
from typing import List

import luach


WEEKDAYS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def parse_engines(s: str) -> List[str]:
    return [x.strip() for x in s.split(",") if x.strip()]


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Rosh Hashana table: Gregorian date, weekday, year length and kviah."
    )
    p.add_argument("--from-year", type=int, default=5780)
    p.add_argument("--to-year", type=int, default=5800)
    p.add_argument(
        "--engines",
        type=str,
        default="standard",
        help='Comma list of registered calendar specs to compare.',
    )
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format in table columns (default: iso).",
    )
    args = p.parse_args(argv)

    engines = parse_engines(args.engines)
    for eng in engines:
        if eng not in luach.list_engines():
            raise SystemExit(f"Unknown engine '{eng}'. Known: {luach.list_engines()}")

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    # table header
    headers = ["Year", "Leap"] + [f"{eng}" for eng in engines]
    colw = [5, 4] + [max(26, len(h)) for h in headers[2:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y in range(Y0, Y1 + 1):
        row = [str(Y).ljust(colw[0]), ("L" if luach.is_leap_year(Y) else "").ljust(colw[1])]
        for eng, w in zip(engines, colw[2:]):
            info = luach.year_info(Y, engine=eng)
            d = luach.rosh_hashana(Y, engine=eng)
            wd = WEEKDAYS[(d.isoweekday() % 7)]
            cell = f"{fmt(d)} {wd} {info['days_in_year']} {info['kviah'][0].upper()}"
            row.append(cell.ljust(w))
        print("  ".join(row))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
