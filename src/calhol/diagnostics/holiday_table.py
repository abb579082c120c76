#!/usr/bin/env python3
from __future__ import annotations

from datetime import date
import argparse
from typing import List, Optional

import calhol


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def parse_keys(arg: str) -> List[str]:
    """
    Parse holiday keys from CLI.
    Example:
      --keys "goodFriday,easter,pentecost"
    """
    return [x.strip() for x in arg.split(",") if x.strip()]


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the date of one or more holidays of a region across a range of years."
    )
    p.add_argument("region")
    p.add_argument("keys", help='Comma list of holiday keys, e.g. "maundyThursday,goodFriday"')
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument("--locale", default=None)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in table columns (default: mmdd).",
    )
    args = p.parse_args(argv)

    keys = parse_keys(args.keys)
    if not keys:
        raise SystemExit("at least one holiday key is required")

    def fmt(d: Optional[date]) -> str:
        if d is None:
            return "-"
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    # header uses the display names of the first year that has each key
    titles: dict = {}
    rows = []
    for Y in range(Y0, Y1 + 1):
        coll = calhol.get_holidays(args.region, Y, args.locale)
        row = []
        for k in keys:
            h = coll.get(k)
            if h is not None:
                titles.setdefault(k, h.name)
            row.append(h.date if h is not None else None)
        rows.append((Y, row))

    headers = ["Year"] + [titles.get(k, k) for k in keys]
    colw = [5] + [max(10, len(h)) for h in headers[1:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y, row in rows:
        print("  ".join([str(Y).ljust(colw[0])] + [fmt(d).ljust(w) for d, w in zip(row, colw[1:])]))

    missing = [k for k in keys if k not in titles]
    if missing:
        print(f"\nNever observed in {Y0}..{Y1}: {', '.join(missing)}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
