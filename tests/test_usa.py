# tests/test_usa.py

from datetime import date

import pytest

import calhol


def _get(key, year):
    return calhol.get_holiday("US", key, year)


def test_federal_holidays_2024():
    coll = calhol.get_holidays("US", 2024)
    assert {h.key: h.date for h in coll} == {
        "newYearsDay": date(2024, 1, 1),
        "martinLutherKingDay": date(2024, 1, 15),
        "washingtonsBirthday": date(2024, 2, 19),
        "memorialDay": date(2024, 5, 27),
        "juneteenth": date(2024, 6, 19),
        "independenceDay": date(2024, 7, 4),
        "labourDay": date(2024, 9, 2),
        "columbusDay": date(2024, 10, 14),
        "veteransDay": date(2024, 11, 11),
        "thanksgivingDay": date(2024, 11, 28),
        "christmasDay": date(2024, 12, 25),
    }
    assert coll.get("labourDay").name == "Labor Day"
    assert coll.get("christmasDay").name == "Christmas"

def test_saturday_observed_on_friday():
    coll = calhol.get_holidays("US", 2026)
    sub = coll.get("substituteHoliday:independenceDay")
    assert sub.date == date(2026, 7, 3)
    assert sub.name == "Independence Day observed"
    assert coll.get("independenceDay").date == date(2026, 7, 4)

def test_sunday_observed_on_monday():
    coll = calhol.get_holidays("US", 2021)
    assert coll.get("substituteHoliday:independenceDay").date == date(2021, 7, 5)
    assert coll.get("substituteHoliday:juneteenth").date == date(2021, 6, 18)
    assert coll.get("substituteHoliday:christmasDay").date == date(2021, 12, 24)

def test_new_year_observed_in_previous_year():
    assert "substituteHoliday:newYearsDay" not in calhol.get_holidays("US", 2022)
    coll = calhol.get_holidays("US", 2021)
    observed = coll.get("substituteHoliday:newYearsDay")
    assert observed.date == date(2021, 12, 31)
    assert observed.name.endswith(" observed")
    assert coll.is_holiday(date(2021, 12, 31))

def test_working_day_skips_new_year_observed_in_december():
    # 31 Dec 2021 observed, 1-2 Jan 2022 weekend
    assert calhol.next_working_day("US", date(2021, 12, 30)) == date(2022, 1, 3)
    assert calhol.previous_working_day("US", date(2022, 1, 3)) == date(2021, 12, 30)

def test_uniform_monday_holiday_act():
    assert _get("washingtonsBirthday", 1970).date == date(1970, 2, 22)
    assert _get("washingtonsBirthday", 1971).date == date(1971, 2, 15)
    assert _get("memorialDay", 1967).date == date(1967, 5, 30)
    assert _get("memorialDay", 1968).date == date(1968, 5, 27)
    assert _get("columbusDay", 1969).date == date(1969, 10, 12)
    assert _get("columbusDay", 1936) is None

def test_veterans_day_history():
    assert _get("veteransDay", 1918) is None
    assert _get("veteransDay", 1950).name == "Armistice Day"
    assert _get("veteransDay", 1960).name == "Veterans Day"
    assert _get("veteransDay", 1975).date == date(1975, 10, 27)
    assert _get("veteransDay", 1978).date == date(1978, 11, 11)

def test_thanksgiving_last_then_fourth_thursday():
    assert _get("thanksgivingDay", 1939).date == date(1939, 11, 30)
    assert _get("thanksgivingDay", 1942).date == date(1942, 11, 26)

@pytest.mark.parametrize("year,present", [(1985, False), (1986, True), (2020, False), (2021, True)])
def test_late_additions(year, present):
    key = "martinLutherKingDay" if year < 2000 else "juneteenth"
    assert (_get(key, year) is not None) is present
