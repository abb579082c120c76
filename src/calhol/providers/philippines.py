"""
Philippines (PH).

Regular holidays per the Revised Administrative Code, with the dates on which
each was introduced. Names in English and Filipino.
"""

from __future__ import annotations

from ..core.types import NATIONAL, OBSERVANCE, ProviderSpec, ValidityRange
from ..rules.christian import WESTERN
from ..rules.common import COMMON
from ..rules.dates import MONDAY
from ..rules.ruleset import HolidayRule, RuleSet, fixed, last_weekday

PH_RULES = RuleSet(
    "philippines",
    (
        # Araw ng Kagitingan (fall of Bataan, 1942)
        HolidayRule(
            "valorDay", fixed(4, 9), NATIONAL, ValidityRange(1961),
            names={"en_US": "Valor Day", "fil_PH": "Araw ng Kagitingan"},
        ),
        # Republic Act No. 4166 moved Independence Day from 4 July to 12 June
        HolidayRule(
            "independenceDay", fixed(6, 12), NATIONAL, ValidityRange(1965),
            names={"en_US": "Independence Day", "fil_PH": "Araw ng Kalayaan"},
        ),
        # Cry of Pugad Lawin, 1896
        HolidayRule(
            "nationalHeroesDay", last_weekday(8, MONDAY), NATIONAL, ValidityRange(1932),
            names={"en_US": "National Heroes Day", "fil_PH": "Araw ng mga Bayani"},
        ),
        HolidayRule(
            "allSoulsDay", fixed(11, 2), NATIONAL, ValidityRange(1565),
            names={"en_US": "All Souls' Day", "fil_PH": "Araw ng mga Patay"},
        ),
        HolidayRule(
            "bonifacioDay", fixed(11, 30), NATIONAL, ValidityRange(1921),
            names={"en_US": "Bonifacio Day", "fil_PH": "Araw ni Bonifacio"},
        ),
        # execution of José Rizal at Bagumbayan, 1896
        HolidayRule(
            "rizalDay", fixed(12, 30), NATIONAL, ValidityRange(1898),
            names={"en_US": "Rizal Day", "fil_PH": "Araw ni Rizal"},
        ),
    ),
)

PHILIPPINES = ProviderSpec(
    id="PH",
    name="Philippines",
    timezone="Asia/Manila",
    default_locale="fil_PH",
    rule_sets=(
        COMMON.select("newYearsDay", "internationalWorkersDay"),
        WESTERN.select(
            "maundyThursday", "goodFriday", "allSaintsDay", "christmasEve", "christmasDay",
            christmasEve=OBSERVANCE,
        ),
        PH_RULES,
    ),
    meta={"source": "Revised Administrative Code, Book I, sec. 26"},
)
