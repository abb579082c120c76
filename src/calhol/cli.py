from __future__ import annotations

import argparse
from datetime import date
import importlib
import inspect
import logging
import os
import re
import sys


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
ENV_LOG_LEVEL = "CALHOL_LOG_LEVEL"


def _parse_ymd(s: str) -> date:
    if not _DATE_RE.match(s):
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {s!r}")
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


def _setup_logging(level: str | None) -> None:
    level = (level or os.environ.get(ENV_LOG_LEVEL, "") or "WARNING").upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def cmd_holidays(argv: list[str]) -> int:
    import calhol

    p = argparse.ArgumentParser(prog="calhol holidays", description="List the holidays of a region for one year")
    p.add_argument("region", help="region code (e.g. PH) or provider name")
    p.add_argument("year", type=int)
    p.add_argument("--locale", default=None, help="display locale (default: region default)")
    p.add_argument("--type", dest="classification", default=None,
                   choices=["national", "observance", "bank", "season", "other"],
                   help="only holidays of this classification")
    p.add_argument("--iso", action="store_true", help="print ISO dates only (no weekday)")
    args = p.parse_args(argv)

    coll = calhol.get_holidays(args.region, args.year, args.locale)
    items = coll.by_classification(args.classification) if args.classification else coll

    for h in items:
        when = h.date.isoformat() if args.iso else h.date.strftime("%Y-%m-%d %a")
        print(f"{when}  {h.key:<32}  {h.classification:<10}  {h.name}")
    return 0


def cmd_regions(argv: list[str]) -> int:
    import calhol

    p = argparse.ArgumentParser(prog="calhol regions", description="List supported regions")
    p.parse_args(argv)

    for code in calhol.list_regions():
        info = calhol.region_info(code)
        print(f"{code}  {info['name']:<16}  {info['timezone']:<18}  {info['default_locale']}")
    return 0


def cmd_locales(argv: list[str]) -> int:
    import calhol

    p = argparse.ArgumentParser(prog="calhol locales", description="List locales with translations")
    p.parse_args(argv)

    for loc in sorted(calhol.available_locales()):
        print(loc)
    return 0


def cmd_next_working_day(argv: list[str]) -> int:
    import calhol

    p = argparse.ArgumentParser(prog="calhol next-working-day", description="Step over weekends and holidays")
    p.add_argument("region")
    p.add_argument("date", type=_parse_ymd, help="YYYY-MM-DD")
    p.add_argument("--days", type=int, default=1)
    p.add_argument("--previous", action="store_true", help="step backwards")
    args = p.parse_args(argv)

    fn = calhol.previous_working_day if args.previous else calhol.next_working_day
    print(fn(args.region, args.date, days=args.days).isoformat())
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="calhol", description="Public holiday calculator CLI.")
    p.add_argument("--log-level", default=None, help=f"logging level (default: ${ENV_LOG_LEVEL} or WARNING)")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("holidays", help="List the holidays of a region for one year")
    sub.add_parser("regions", help="List supported regions")
    sub.add_parser("locales", help="List locales with translations")
    sub.add_parser("next-working-day", help="Next (or previous) working day of a region")

    # diagnostics
    sub.add_parser("table", help="Date of one holiday across a range of years (diagnostics)")
    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["feast-scatter"], help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)
    _setup_logging(args.log_level)

    from calhol.core.errors import CalholError

    try:
        if args.cmd == "holidays":
            return cmd_holidays(rest)

        if args.cmd == "regions":
            return cmd_regions(rest)

        if args.cmd == "locales":
            return cmd_locales(rest)

        if args.cmd == "next-working-day":
            return cmd_next_working_day(rest)

        if args.cmd == "table":
            return _run_module_main("calhol.diagnostics.holiday_table", rest)

        if args.cmd == "diag":
            tool_map = {
                "feast-scatter": "calhol.diagnostics.feast_scatter",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except CalholError as e:
        print(f"calhol: error: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
