"""
Ukraine (UA).

Holidays of the Labour Code, art. 73. Christmas, Easter and Trinity follow the
Orthodox calendar; a holiday that falls on a weekend moves the day off to the
next working day (art. 67).
"""

from __future__ import annotations

from ..core.types import NATIONAL, ProviderSpec, ValidityRange
from ..rules.christian import ORTHODOX
from ..rules.common import COMMON
from ..rules.ruleset import HolidayRule, RuleSet, SubstituteRule, fixed

UA_RULES = RuleSet(
    "ukraine",
    (
        # May 2 stopped being a day off in 2018
        HolidayRule(
            "secondInternationalWorkersDay", fixed(5, 2), NATIONAL, ValidityRange(None, 2017),
            names={
                "en_US": "International Workers' Day",
                "uk_UA": "День міжнародної солідарності трудящих",
                "ru_UA": "День международной солидарности трудящихся",
            },
        ),
        HolidayRule(
            "victoryDay", fixed(5, 9), NATIONAL,
            names={"en_US": "Victory Day", "uk_UA": "День перемоги", "ru_UA": "День Победы"},
        ),
        HolidayRule(
            "constitutionDay", fixed(6, 28), NATIONAL, ValidityRange(1996),
            names={"en_US": "Constitution Day", "uk_UA": "День Конституції", "ru_UA": "День Конституции"},
        ),
        HolidayRule(
            "independenceDay", fixed(8, 24), NATIONAL, ValidityRange(1991),
            names={"en_US": "Independence Day", "uk_UA": "День Незалежності", "ru_UA": "День Независимости"},
        ),
        HolidayRule(
            "defenderOfUkraineDay", fixed(10, 14), NATIONAL, ValidityRange(2015),
            names={
                "en_US": "Defender of Ukraine Day",
                "uk_UA": "День захисника України",
                "ru_UA": "День защитника Украины",
            },
        ),
        HolidayRule(
            "catholicChristmasDay", fixed(12, 25), NATIONAL, ValidityRange(2017),
            names={
                "en_US": "Catholic Christmas Day",
                "uk_UA": "Католицьке Різдво",
                "ru_UA": "Католическое Рождество",
            },
        ),
    ),
)

UKRAINE = ProviderSpec(
    id="UA",
    name="Ukraine",
    timezone="Europe/Kyiv",
    default_locale="uk_UA",
    rule_sets=(
        COMMON.select("newYearsDay", "internationalWomensDay", "internationalWorkersDay"),
        ORTHODOX.select("christmasDay", "easter", "pentecost"),
        UA_RULES,
    ),
    substitutes=(SubstituteRule("following_monday", skip_occupied=True),),
    meta={"source": "Labour Code of Ukraine, arts. 67 and 73"},
)
