"""
United Kingdom (GB): bank holidays of England and Wales.

Banking and Financial Dealings Act 1971 plus royal proclamations. One-off days
(jubilees, state occasions) are rules gated to a single year. New Year's Day,
Christmas Day and Boxing Day falling on a weekend get a substitute day on the
next free weekday.
"""

from __future__ import annotations

from datetime import date

from ..core.types import BANK, ProviderSpec, ValidityRange
from ..rules.christian import WESTERN
from ..rules.dates import MONDAY, fixed_date, last_weekday_of_month, nth_weekday_of_month
from ..rules.ruleset import HolidayRule, RuleSet, SubstituteRule, easter_offset, fixed, last_weekday, nth_weekday

# years in which a bank holiday was moved by proclamation
_EARLY_MAY_MOVED = {1995: (5, 8), 2020: (5, 8)}
_SPRING_MOVED = {2002: (6, 4), 2012: (6, 4), 2022: (6, 2)}


def early_may_bank_holiday(year: int) -> date:
    if year in _EARLY_MAY_MOVED:
        return fixed_date(year, *_EARLY_MAY_MOVED[year])
    return nth_weekday_of_month(year, 5, MONDAY, 1)


def spring_bank_holiday(year: int) -> date:
    if year in _SPRING_MOVED:
        return fixed_date(year, *_SPRING_MOVED[year])
    return last_weekday_of_month(year, 5, MONDAY)


def _once(key: str, year: int, month: int, day: int, name: str) -> HolidayRule:
    return HolidayRule(
        key, fixed(month, day), BANK, ValidityRange(year, year),
        names={"en_US": name, "en_GB": name},
    )


def _names(name: str) -> dict:
    return {"en_US": name, "en_GB": name}


GB_RULES = RuleSet(
    "united_kingdom",
    (
        HolidayRule("newYearsDay", fixed(1, 1), BANK, ValidityRange(1974)),
        HolidayRule("pentecostMonday", easter_offset(50), BANK, ValidityRange(1871, 1970), names=_names("Whit Monday")),
        HolidayRule("mayDayBankHoliday", early_may_bank_holiday, BANK, ValidityRange(1978), names=_names("May Day Bank Holiday")),
        HolidayRule("springBankHoliday", spring_bank_holiday, BANK, ValidityRange(1971), names=_names("Spring Bank Holiday")),
        HolidayRule("summerBankHoliday", nth_weekday(8, MONDAY, 1), BANK, ValidityRange(1871, 1964), names=_names("August Bank Holiday")),
        HolidayRule("summerBankHoliday", last_weekday(8, MONDAY), BANK, ValidityRange(1965), names=_names("August Bank Holiday")),
        HolidayRule("boxingDay", fixed(12, 26), BANK, ValidityRange(1871), names=_names("Boxing Day")),
        _once("royalWeddingCharlesDiana", 1981, 7, 29, "Royal Wedding of Prince Charles and Lady Diana Spencer"),
        _once("millenniumCelebrations", 1999, 12, 31, "Millennium Celebrations"),
        _once("goldenJubilee", 2002, 6, 3, "Queen's Golden Jubilee"),
        _once("royalWeddingWilliamCatherine", 2011, 4, 29, "Royal Wedding of Prince William and Catherine Middleton"),
        _once("diamondJubilee", 2012, 6, 5, "Queen's Diamond Jubilee"),
        _once("platinumJubilee", 2022, 6, 3, "Queen's Platinum Jubilee"),
        _once("stateFuneralElizabeth", 2022, 9, 19, "State Funeral of Queen Elizabeth II"),
        _once("coronationCharles", 2023, 5, 8, "Coronation of King Charles III"),
    ),
)

UNITED_KINGDOM = ProviderSpec(
    id="GB",
    name="United Kingdom",
    timezone="Europe/London",
    default_locale="en_GB",
    rule_sets=(
        WESTERN.select("goodFriday", "easterMonday", easterMonday=BANK),
        GB_RULES,
        WESTERN.select("christmasDay"),
    ),
    substitutes=(
        SubstituteRule("following_monday", keys=("newYearsDay", "christmasDay", "boxingDay"), skip_occupied=True),
    ),
    meta={"source": "Banking and Financial Dealings Act 1971, Sch. 1"},
)
