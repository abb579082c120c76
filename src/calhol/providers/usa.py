"""
United States (US): federal holidays, 5 U.S.C. 6103.

Several holidays changed rule over time (Uniform Monday Holiday Act, effective
1971); each rule is gated to its own years so exactly one applies. A holiday on
a Saturday is observed the Friday before, on a Sunday the Monday after.
"""

from __future__ import annotations

from ..core.types import NATIONAL, ProviderSpec, ValidityRange
from ..rules.christian import WESTERN
from ..rules.common import COMMON
from ..rules.dates import MONDAY, THURSDAY
from ..rules.ruleset import HolidayRule, RuleSet, SubstituteRule, fixed, last_weekday, nth_weekday

_WASHINGTON = {"en_US": "Washington's Birthday"}
_MEMORIAL = {"en_US": "Memorial Day"}
_COLUMBUS = {"en_US": "Columbus Day"}
_VETERANS = {"en_US": "Veterans Day"}
_THANKSGIVING = {"en_US": "Thanksgiving Day"}

US_RULES = RuleSet(
    "usa",
    (
        HolidayRule(
            "martinLutherKingDay", nth_weekday(1, MONDAY, 3), NATIONAL, ValidityRange(1986),
            names={"en_US": "Dr. Martin Luther King Jr's Birthday"},
        ),
        HolidayRule("washingtonsBirthday", fixed(2, 22), NATIONAL, ValidityRange(1879, 1970), names=_WASHINGTON),
        HolidayRule("washingtonsBirthday", nth_weekday(2, MONDAY, 3), NATIONAL, ValidityRange(1971), names=_WASHINGTON),
        HolidayRule("memorialDay", fixed(5, 30), NATIONAL, ValidityRange(1865, 1967), names=_MEMORIAL),
        HolidayRule("memorialDay", last_weekday(5, MONDAY), NATIONAL, ValidityRange(1968), names=_MEMORIAL),
        HolidayRule(
            "juneteenth", fixed(6, 19), NATIONAL, ValidityRange(2021),
            names={"en_US": "Juneteenth National Independence Day"},
        ),
        HolidayRule(
            "independenceDay", fixed(7, 4), NATIONAL, ValidityRange(1776),
            names={"en_US": "Independence Day"},
        ),
        HolidayRule(
            "labourDay", nth_weekday(9, MONDAY, 1), NATIONAL, ValidityRange(1887),
            names={"en_US": "Labor Day"},
        ),
        HolidayRule("columbusDay", fixed(10, 12), NATIONAL, ValidityRange(1937, 1969), names=_COLUMBUS),
        HolidayRule("columbusDay", nth_weekday(10, MONDAY, 2), NATIONAL, ValidityRange(1970), names=_COLUMBUS),
        HolidayRule("veteransDay", fixed(11, 11), NATIONAL, ValidityRange(1919, 1953), names={"en_US": "Armistice Day"}),
        HolidayRule("veteransDay", fixed(11, 11), NATIONAL, ValidityRange(1954, 1970), names=_VETERANS),
        HolidayRule("veteransDay", nth_weekday(10, MONDAY, 4), NATIONAL, ValidityRange(1971, 1977), names=_VETERANS),
        HolidayRule("veteransDay", fixed(11, 11), NATIONAL, ValidityRange(1978), names=_VETERANS),
        HolidayRule("thanksgivingDay", last_weekday(11, THURSDAY), NATIONAL, ValidityRange(1863, 1941), names=_THANKSGIVING),
        HolidayRule("thanksgivingDay", nth_weekday(11, THURSDAY, 4), NATIONAL, ValidityRange(1942), names=_THANKSGIVING),
    ),
)

UNITED_STATES = ProviderSpec(
    id="US",
    name="United States",
    timezone="America/New_York",
    default_locale="en_US",
    rule_sets=(
        COMMON.select("newYearsDay"),
        US_RULES,
        WESTERN.select("christmasDay"),
    ),
    substitutes=(SubstituteRule("nearest_weekday"),),
    meta={"source": "5 U.S.C. 6103"},
)
