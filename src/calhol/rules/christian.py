"""
Christian calendar holidays.

WESTERN is keyed on Gregorian Easter; ORTHODOX on the Julian computus, with
Christmas on the civil date 7 January (25 December Julian in 1900..2099).
Both use the same holiday keys so a region composes one or the other.
"""

from __future__ import annotations

from ..core.types import NATIONAL, OBSERVANCE
from .ruleset import HolidayRule, RuleSet, easter_offset, fixed, orthodox_offset

WESTERN = RuleSet(
    "christian",
    (
        HolidayRule("maundyThursday", easter_offset(-3), NATIONAL),
        HolidayRule("goodFriday", easter_offset(-2), NATIONAL),
        HolidayRule("easter", easter_offset(0), NATIONAL),
        HolidayRule("easterMonday", easter_offset(1), NATIONAL),
        HolidayRule("ascensionDay", easter_offset(39), NATIONAL),
        HolidayRule("pentecost", easter_offset(49), NATIONAL),
        HolidayRule("pentecostMonday", easter_offset(50), NATIONAL),
        HolidayRule("allSaintsDay", fixed(11, 1), NATIONAL),
        HolidayRule("christmasEve", fixed(12, 24), OBSERVANCE),
        HolidayRule("christmasDay", fixed(12, 25), NATIONAL),
    ),
)

ORTHODOX = RuleSet(
    "orthodox",
    (
        HolidayRule("christmasDay", fixed(1, 7), NATIONAL),
        HolidayRule("easter", orthodox_offset(0), NATIONAL),
        HolidayRule("easterMonday", orthodox_offset(1), NATIONAL),
        HolidayRule("pentecost", orthodox_offset(49), NATIONAL),
    ),
)
