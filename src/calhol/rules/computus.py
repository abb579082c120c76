"""
calhol.rules.computus
---------------------
Easter Sunday for the Western (Gregorian) and Orthodox (Julian) churches.

Both are the classical table-free algorithms as given by Meeus,
"Astronomical Algorithms", ch. 8.
"""

from __future__ import annotations

from datetime import date, timedelta

from ..core.errors import InvalidArgumentError
from ..core.time import MIN_YEAR, julian_to_gregorian


def easter(year: int) -> date:
    """Gregorian Easter Sunday (anonymous Gregorian algorithm), valid for year >= 1583."""
    if year < MIN_YEAR:
        raise InvalidArgumentError(f"Gregorian computus is undefined before {MIN_YEAR}, got {year}")
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month, day0 = divmod(h + l - 7 * m + 114, 31)
    return date(year, month, day0 + 1)


def orthodox_easter(year: int) -> date:
    """
    Orthodox Easter Sunday: Julian computus, returned as a Gregorian date.
    The Julian-Gregorian gap is handled by the JDN round-trip, not a fixed 13 days.
    """
    a = year % 4
    b = year % 7
    c = year % 19
    d = (19 * c + 15) % 30
    e = (2 * a + 4 * b - d + 34) % 7
    month, day0 = divmod(d + e + 114, 31)
    return julian_to_gregorian(year, month, day0 + 1)


def movable_feast_date(year: int, offset_days: int = 0) -> date:
    """Western Easter Sunday + offset (Maundy Thursday = -3, Good Friday = -2, ...)."""
    return easter(year) + timedelta(days=offset_days)


def orthodox_feast_date(year: int, offset_days: int = 0) -> date:
    return orthodox_easter(year) + timedelta(days=offset_days)
