from __future__ import annotations
from datetime import date

from .errors import InvalidDateError

MIN_YEAR = 1583  # first full year of the Gregorian computus
MAX_YEAR = 9999


def from_jdn(jdn: int) -> date:
    """Julian Day Number -> Gregorian date (Fliegel-Van Flandern)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    try:
        return date(year, month, day)
    except ValueError as e:
        raise InvalidDateError(f"JDN {jdn} is outside the supported date range") from e

def julian_to_jdn(year: int, month: int, day: int) -> int:
    """Convert a Julian calendar date to JDN (no range checks)."""
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - 32083

def julian_to_gregorian(year: int, month: int, day: int) -> date:
    """Julian calendar date -> proleptic Gregorian date."""
    return from_jdn(julian_to_jdn(year, month, day))

def day_of_year(d: date) -> int:
    return (d - date(d.year, 1, 1)).days + 1
