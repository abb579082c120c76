"""Civil holidays shared by many regions."""

from __future__ import annotations

from ..core.types import NATIONAL
from .ruleset import HolidayRule, RuleSet, fixed

COMMON = RuleSet(
    "common",
    (
        HolidayRule("newYearsDay", fixed(1, 1), NATIONAL),
        HolidayRule("internationalWomensDay", fixed(3, 8), NATIONAL),
        HolidayRule("internationalWorkersDay", fixed(5, 1), NATIONAL),
    ),
)
