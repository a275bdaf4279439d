from __future__ import annotations

import argparse
from datetime import date
import importlib
import inspect
import logging
import re
import sys


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

_LOGGER = logging.getLogger(__name__)


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_day(argv: list[str]) -> int:
    import luach

    p = argparse.ArgumentParser(prog="luach day", description="Gregorian -> Jewish day label")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--engine", default="standard")
    p.add_argument("--debug", action="store_true")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    info = luach.day_info(_parse_ymd(args.date), engine=args.engine, attributes=tuple(args.attr), debug=args.debug)
    print(info)
    return 0


def cmd_jewish(argv: list[str]) -> int:
    import luach

    p = argparse.ArgumentParser(prog="luach jewish", description="Jewish date -> Gregorian date")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int, help="1=Nisan .. 7=Tishrei .. 12=Adar (Adar I), 13=Adar II")
    p.add_argument("day", type=int)
    p.add_argument("--engine", default="standard")
    args = p.parse_args(argv)

    try:
        d = luach.to_gregorian(args.year, args.month, args.day, engine=args.engine)
    except luach.LuachError as e:
        raise SystemExit(f"luach jewish: {e}") from e
    print(d.isoformat())
    return 0


def cmd_molad(argv: list[str]) -> int:
    import luach

    p = argparse.ArgumentParser(prog="luach molad", description="Announced molad of a Jewish month")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int, help="1=Nisan .. 7=Tishrei .. 13=Adar II")
    p.add_argument("--engine", default="standard")
    args = p.parse_args(argv)

    try:
        m = luach.molad(args.year, args.month, engine=args.engine)
    except luach.LuachError as e:
        raise SystemExit(f"luach molad: {e}") from e

    print(f"Molad of {args.year}-{args.month:02d}:")
    print(f"  Civil date   = {m.to_date().isoformat()}  (weekday {m.day_of_week}, 1=Sunday)")
    print(f"  Time         = {m.molad_hours:02d}:{m.molad_minutes:02d} and {m.molad_chalakim} chalakim")
    print(f"  Chalakim     = {luach.chalakim_since_molad_tohu(args.year, args.month, engine=args.engine)}")
    return 0


def cmd_year(argv: list[str]) -> int:
    import luach

    p = argparse.ArgumentParser(prog="luach year", description="Year length, kviah and postponements of a Jewish year")
    p.add_argument("year", type=int)
    p.add_argument("--engine", default="standard")
    args = p.parse_args(argv)

    info = luach.year_info(args.year, engine=args.engine)
    t = info["molad_time"]

    print(f"Year {info['year']}  (cycle position {info['cycle_position']}, {'leap' if info['is_leap_year'] else 'common'})")
    print(f"  Molad Tishrei  = day {info['molad_day']} (weekday {info['molad_weekday']}), "
          f"{t.hours:02d}h {t.minutes:02d}m {t.chalakim}p")
    print(f"  Dechiyos       = {', '.join(info['dechiyos']) or '(none)'}")
    print(f"  Elapsed days   = {info['elapsed_days']}")
    print(f"  Days in year   = {info['days_in_year']}  ({info['kviah']})")
    if "rosh_hashana" in info:
        print(f"  Rosh Hashana   = {info['rosh_hashana'].isoformat()}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `luach YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="luach", description="Jewish calendar toolkit CLI.")
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = p.add_subparsers(dest="cmd", required=True)

    # day
    p_day = sub.add_parser("day", help="Gregorian -> Jewish day label")
    p_day.add_argument("date", help="YYYY-MM-DD")
    p_day.add_argument("--engine", default="standard")
    p_day.add_argument("--debug", action="store_true")
    p_day.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")

    sub.add_parser("jewish", help="Jewish date -> Gregorian date")
    sub.add_parser("molad", help="Announced molad of a Jewish month")
    sub.add_parser("year", help="Year length, kviah and postponements")

    # diagnostics
    sub.add_parser("pretty-month", help="Print Jewish/Gregorian month calendars (diagnostics)")
    sub.add_parser("new-years", help="Print Rosh Hashana table (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "year-types", "rosh-hashana-scatter"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
    _LOGGER.debug("command %s, extra args %s", args.cmd, rest)

    if args.cmd == "day":
        day_argv = [args.date]
        if args.engine != "standard":
            day_argv += ["--engine", args.engine]
        if args.debug:
            day_argv += ["--debug"]
        for a in args.attr:
            day_argv += ["--attr", a]
        day_argv += rest
        return cmd_day(day_argv)

    if args.cmd == "jewish":
        return cmd_jewish(rest)

    if args.cmd == "molad":
        return cmd_molad(rest)

    if args.cmd == "year":
        return cmd_year(rest)

    if args.cmd == "pretty-month":
        return _run_module_main("luach.diagnostics.pretty_month", rest)

    if args.cmd == "new-years":
        return _run_module_main("luach.diagnostics.new_years_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "luach.diagnostics.round_trip",
            "year-types": "luach.diagnostics.year_types",
            "rosh-hashana-scatter": "luach.diagnostics.rosh_hashana_scatter",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
