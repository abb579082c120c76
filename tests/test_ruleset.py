# tests/test_ruleset.py

from datetime import date

import logging
import pytest

from calhol.core.errors import DuplicateKeyError, InvalidArgumentError
from calhol.core.types import BANK, NATIONAL, OBSERVANCE, ProviderSpec, ValidityRange
from calhol.providers.factory import make_provider
from calhol.rules.christian import WESTERN
from calhol.rules.common import COMMON
from calhol.rules.dates import MONDAY
from calhol.rules.ruleset import HolidayRule, RuleSet, SubstituteRule, easter_offset, fixed, last_weekday


def test_validity_range():
    r = ValidityRange(1961)
    assert not r.contains(1960)
    assert r.contains(1961)
    assert r.contains(9999)
    r = ValidityRange(None, 2017)
    assert r.contains(1583) and r.contains(2017) and not r.contains(2018)
    assert ValidityRange(2002, 2002).contains(2002)
    with pytest.raises(InvalidArgumentError):
        ValidityRange(2000, 1999)

def test_rule_gate_is_not_an_error(caplog):
    rule = HolidayRule("valorDay", fixed(4, 9), NATIONAL, ValidityRange(1961), names={"en_US": "Valor Day"})
    with caplog.at_level(logging.DEBUG, logger="calhol.rules.ruleset"):
        assert rule.holiday(1960, "UTC") is None
    assert "valorDay" in caplog.text
    h = rule.holiday(1961, "UTC")
    assert h.date == date(1961, 4, 9)

def test_rule_merges_table_and_inline_names():
    rule = HolidayRule("christmasDay", fixed(12, 25), names={"en_US": "Christmas Day"})
    h = rule.holiday(2024, "UTC", "de_DE")
    assert h.translations["en_US"] == "Christmas Day"       # inline wins
    assert h.translations["de"] == "1. Weihnachtsfeiertag"  # from table
    assert h.name == "1. Weihnachtsfeiertag"

def test_rule_in_place_shift():
    rule = HolidayRule("waitangiDay", fixed(2, 6), shift="following_monday", names={"en_US": "Waitangi Day"})
    # 6 Feb 2021 was a Saturday
    assert rule.holiday(2021, "UTC").date == date(2021, 2, 8)
    assert rule.holiday(2024, "UTC").date == date(2024, 2, 6)

def test_rule_missing_default_locale_name():
    rule = HolidayRule("myDay", fixed(3, 3), names={"en_US": "My Day"})
    with pytest.raises(InvalidArgumentError, match="fil_PH"):
        rule.holiday(2024, "UTC", default_locale="fil_PH")

def test_select_preserves_order_and_overrides():
    rs = WESTERN.select("christmasDay", "goodFriday", christmasDay=BANK)
    assert rs.keys() == ["christmasDay", "goodFriday"]
    assert [r.classification for r in rs] == [BANK, NATIONAL]
    # the shared set itself is untouched
    assert [r.classification for r in WESTERN if r.key == "christmasDay"] == [NATIONAL]

def test_select_unknown_key():
    with pytest.raises(InvalidArgumentError, match="boxingDay"):
        WESTERN.select("boxingDay")
    with pytest.raises(InvalidArgumentError):
        WESTERN.select("goodFriday", christmasDay=BANK)

def test_select_keeps_every_rule_of_a_key():
    rs = RuleSet("x", (
        HolidayRule("d", fixed(1, 2), validity=ValidityRange(None, 1999), names={"en_US": "D"}),
        HolidayRule("d", fixed(1, 3), validity=ValidityRange(2000), names={"en_US": "D"}),
    ))
    picked = rs.select("d")
    assert len(picked.rules) == 2
    assert [h.date for h in picked.holidays(1999, "UTC")] == [date(1999, 1, 2)]
    assert [h.date for h in picked.holidays(2000, "UTC")] == [date(2000, 1, 3)]


def _spec(rule_sets, substitutes=()):
    return ProviderSpec(
        id="XX", name="Testland", timezone="UTC", default_locale="en_US",
        rule_sets=tuple(rule_sets), substitutes=tuple(substitutes),
    )

def test_provider_runs_rule_sets_in_order():
    spec = _spec([
        COMMON.select("newYearsDay"),
        WESTERN.select("goodFriday", "christmasDay"),
        RuleSet("x", (HolidayRule("lastMonday", last_weekday(8, MONDAY), OBSERVANCE, names={"en_US": "Last Monday"}),)),
    ])
    coll = make_provider(spec, 2024).initialize()
    assert coll.keys() == ["newYearsDay", "goodFriday", "lastMonday", "christmasDay"]
    assert coll.get("lastMonday").date == date(2024, 8, 26)
    assert coll.frozen

def test_provider_duplicate_key_is_fatal():
    spec = _spec([
        COMMON.select("newYearsDay"),
        RuleSet("x", (HolidayRule("newYearsDay", fixed(1, 2)),)),
    ])
    with pytest.raises(DuplicateKeyError, match="newYearsDay"):
        make_provider(spec, 2024).initialize()

def test_overlapping_validity_ranges_are_duplicates():
    spec = _spec([RuleSet("x", (
        HolidayRule("d", fixed(1, 2), validity=ValidityRange(None, 2000), names={"en_US": "D"}),
        HolidayRule("d", fixed(1, 3), validity=ValidityRange(2000), names={"en_US": "D"}),
    ))])
    assert len(make_provider(spec, 2001).initialize()) == 1
    with pytest.raises(DuplicateKeyError):
        make_provider(spec, 2000).initialize()

def test_provider_is_single_use():
    p = make_provider(_spec([COMMON.select("newYearsDay")]), 2024)
    p.initialize()
    with pytest.raises(RuntimeError):
        p.initialize()

@pytest.mark.parametrize("year", [1582, 10000, "2024", 2024.0, True])
def test_provider_rejects_bad_year(year):
    with pytest.raises(InvalidArgumentError):
        make_provider(_spec([]), year)

def test_provider_rejects_bad_timezone():
    with pytest.raises(InvalidArgumentError, match="Mars/Olympus"):
        make_provider(_spec([]), 2024, timezone="Mars/Olympus")

def test_substitutes_skip_occupied():
    spec = _spec(
        [RuleSet("x", (
            HolidayRule("christmasDay", fixed(12, 25), names={"en_US": "Christmas Day"}),
            HolidayRule("boxingDay", fixed(12, 26), BANK, names={"en_US": "Boxing Day"}),
        ))],
        [SubstituteRule("following_monday", keys=("christmasDay", "boxingDay"), skip_occupied=True)],
    )
    # 2021: Sat 25, Sun 26
    coll = make_provider(spec, 2021).initialize()
    assert coll.get("substituteHoliday:christmasDay").date == date(2021, 12, 27)
    assert coll.get("substituteHoliday:boxingDay").date == date(2021, 12, 28)
    assert coll.get("substituteHoliday:boxingDay").classification == BANK
    assert coll.get("substituteHoliday:christmasDay").name == "Christmas Day observed"
    # 2022: Sun 25, Mon 26
    coll = make_provider(spec, 2022).initialize()
    assert coll.get("substituteHoliday:christmasDay").date == date(2022, 12, 27)
    assert coll.get("substituteHoliday:boxingDay") is None

def test_substitute_counts_in_the_year_it_falls_in():
    spec = _spec(
        [COMMON.select("newYearsDay")],
        [SubstituteRule("nearest_weekday")],
    )
    # 1 Jan 2022 was a Saturday -> 31 Dec 2021
    coll = make_provider(spec, 2022).initialize()
    assert "substituteHoliday:newYearsDay" not in coll
    coll = make_provider(spec, 2021).initialize()
    assert coll.get("substituteHoliday:newYearsDay").date == date(2021, 12, 31)
    assert coll.get("newYearsDay").date == date(2021, 1, 1)
    assert all(h.date.year == 2021 for h in coll)
    coll = make_provider(spec, 2023).initialize()
    assert coll.get("substituteHoliday:newYearsDay").date == date(2023, 1, 2)

def test_substitute_validity_gate():
    sub = SubstituteRule("following_monday", validity=ValidityRange(2030))
    spec = _spec([COMMON.select("newYearsDay")], [sub])
    # 1 Jan 2023 was a Sunday
    assert "substituteHoliday:newYearsDay" not in make_provider(spec, 2023).initialize()

def test_easter_offset_rule():
    rule = HolidayRule("goodFriday", easter_offset(-2))
    assert rule.holiday(2009, "UTC").date == date(2009, 4, 10)
