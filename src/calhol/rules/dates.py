"""
calhol.rules.dates
------------------
Pure Gregorian date rules. Every function maps (year, ...) -> datetime.date and
depends on nothing but its arguments.

Weekday convention: 0=Mon..6=Sun (same as date.weekday()).
"""

from __future__ import annotations

import calendar
from datetime import date, timedelta
from typing import Literal, Tuple

from ..core.errors import InvalidArgumentError, InvalidDateError

MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY, SUNDAY = range(7)

SubstitutionPolicy = Literal["none", "following_monday", "preceding_friday", "nearest_weekday"]
POLICIES: Tuple[str, ...] = ("none", "following_monday", "preceding_friday", "nearest_weekday")


def fixed_date(year: int, month: int, day: int) -> date:
    try:
        return date(year, month, day)
    except ValueError as e:
        raise InvalidDateError(f"{year:04d}-{month:02d}-{day:02d} is not a valid date") from e


def _check_month(year: int, month: int) -> None:
    if not 1 <= month <= 12:
        raise InvalidArgumentError(f"month must be in 1..12, got {month}")
    # year range is whatever datetime.date accepts
    fixed_date(year, month, 1)


def nth_weekday_of_month(year: int, month: int, weekday: int, n: int) -> date:
    """
    n-th `weekday` of the month; n < 0 counts from the end (-1 = last).

      first occurrence = 1 + (weekday - wd(1st)) mod 7
      last occurrence  = L - (wd(L) - weekday) mod 7,  L = days in month
    """
    _check_month(year, month)
    if not 0 <= weekday <= 6:
        raise InvalidArgumentError(f"weekday must be in 0..6 (Mon..Sun), got {weekday}")
    if n == 0:
        raise InvalidArgumentError("n must be non-zero (1 = first, -1 = last)")

    first_wd, length = calendar.monthrange(year, month)
    if n > 0:
        day = 1 + (weekday - first_wd) % 7 + 7 * (n - 1)
    else:
        last_wd = (first_wd + length - 1) % 7
        day = length - (last_wd - weekday) % 7 - 7 * (-n - 1)

    if not 1 <= day <= length:
        raise InvalidArgumentError(
            f"{year:04d}-{month:02d} has no occurrence n={n} of weekday {calendar.day_name[weekday]}"
        )
    return date(year, month, day)


def last_weekday_of_month(year: int, month: int, weekday: int) -> date:
    return nth_weekday_of_month(year, month, weekday, -1)


def weekend_substitute(d: date, policy: str) -> date:
    """Move a Saturday/Sunday date according to `policy`; weekdays pass through."""
    if policy not in POLICIES:
        raise InvalidArgumentError(f"Unknown substitution policy '{policy}'. Available: {list(POLICIES)}")
    wd = d.weekday()
    if wd < SATURDAY or policy == "none":
        return d
    if policy == "following_monday":
        return d + timedelta(days=7 - wd)
    if policy == "preceding_friday":
        return d - timedelta(days=wd - FRIDAY)
    # nearest_weekday
    return d - timedelta(days=1) if wd == SATURDAY else d + timedelta(days=1)


def is_weekend(d: date) -> bool:
    return d.weekday() >= SATURDAY
