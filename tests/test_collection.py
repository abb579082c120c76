# tests/test_collection.py

from datetime import date, datetime
from types import MappingProxyType

import pytest

from calhol.core.collection import HolidayCollection
from calhol.core.errors import DuplicateKeyError, InvalidArgumentError, InvalidDateError
from calhol.core.types import BANK, NATIONAL, OBSERVANCE, Holiday


def _h(key, d, classification=NATIONAL, **names):
    translations = {"en_US": key.title()}
    translations.update(names)
    return Holiday.create(key, translations, d, classification)


@pytest.fixture
def coll():
    c = HolidayCollection("XX", 2024)
    c.add(_h("zeta", date(2024, 12, 25)))
    c.add(_h("alpha", date(2024, 1, 1)))
    c.add(_h("eve", date(2024, 12, 24), OBSERVANCE))
    c.add(_h("beta", date(2024, 1, 1), BANK))
    return c


def test_iteration_sorted_by_date_then_key(coll):
    assert coll.keys() == ["alpha", "beta", "eve", "zeta"]
    assert coll.dates() == sorted(coll.dates())
    assert len(coll) == 4

def test_duplicate_key_rejected(coll):
    with pytest.raises(DuplicateKeyError, match="zeta"):
        coll.add(_h("zeta", date(2024, 6, 1)))
    assert coll.get("zeta").date == date(2024, 12, 25)

def test_duplicate_key_is_key_error(coll):
    with pytest.raises(KeyError):
        coll.add(_h("alpha", date(2024, 1, 1)))

def test_get_and_contains(coll):
    assert coll.get("eve").classification == OBSERVANCE
    assert coll.get("missing") is None
    assert "eve" in coll
    assert "missing" not in coll

def test_by_classification_is_restartable(coll):
    view = coll.by_classification(NATIONAL)
    first = [h.key for h in view]
    second = [h.key for h in view]
    assert first == second == ["alpha", "zeta"]
    assert len(view) == 2
    assert list(coll.by_classification("season")) == []

def test_queries(coll):
    assert [h.key for h in coll.on(date(2024, 1, 1))] == ["alpha", "beta"]
    assert [h.key for h in coll.between(date(2024, 12, 24), date(2024, 12, 25))] == ["eve", "zeta"]
    assert coll.between(date(2024, 12, 24), date(2024, 12, 25), inclusive=False) == []
    with pytest.raises(InvalidArgumentError):
        coll.between(date(2024, 12, 25), date(2024, 1, 1))
    assert coll.is_holiday(date(2024, 12, 25))
    assert not coll.is_holiday(date(2024, 12, 26))
    # Thursday 26 Dec 2024
    assert coll.is_working_day(date(2024, 12, 26))
    assert not coll.is_working_day(date(2024, 12, 25))
    assert not coll.is_working_day(date(2024, 12, 28))

def test_frozen_collection_is_read_only(coll):
    coll.freeze()
    assert coll.frozen
    with pytest.raises(TypeError):
        coll.add(_h("late", date(2024, 3, 1)))

def test_holiday_is_immutable():
    h = _h("alpha", date(2024, 1, 1))
    with pytest.raises(AttributeError):
        h.date = date(2024, 1, 2)
    with pytest.raises(TypeError):
        h.translations["en_US"] = "Changed"

def test_holiday_create_validation():
    with pytest.raises(InvalidArgumentError, match="en_US"):
        Holiday.create("x", {"fil_PH": "X"}, date(2024, 1, 1))
    with pytest.raises(InvalidArgumentError, match="fil_PH"):
        Holiday.create("x", {"en_US": "X"}, date(2024, 1, 1), default_locale="fil_PH")
    with pytest.raises(InvalidArgumentError):
        Holiday.create("x", {"en_US": "X"}, date(2024, 1, 1), "public")
    with pytest.raises(InvalidArgumentError):
        Holiday.create("", {"en_US": "X"}, date(2024, 1, 1))
    with pytest.raises(InvalidDateError):
        Holiday.create("x", {"en_US": "X"}, "2024-01-01")
    with pytest.raises(InvalidDateError):
        Holiday.create("x", {"en_US": "X"}, datetime(2024, 1, 1, 12))

def test_holiday_constructor_validates():
    with pytest.raises(InvalidArgumentError, match="classification"):
        Holiday("x", date(2024, 1, 1), "bogus", {"en_US": "X"})
    with pytest.raises(InvalidArgumentError, match="en_US"):
        Holiday("x", date(2024, 1, 1), NATIONAL, {})
    with pytest.raises(InvalidArgumentError, match="fil_PH"):
        Holiday("x", date(2024, 1, 1), NATIONAL, {"en_US": "X"}, default_locale="fil_PH")
    with pytest.raises(InvalidDateError):
        Holiday("x", "2024-01-01", NATIONAL, {"en_US": "X"})
    h = Holiday("x", date(2024, 1, 1), NATIONAL, {"en_US": "X"})
    assert isinstance(h.translations, MappingProxyType)
    assert h.name == "X"

def test_resolve_raises_without_any_name():
    h = Holiday.create("x", {"en_US": "X"}, date(2024, 1, 1))
    object.__setattr__(h, "translations", MappingProxyType({}))
    with pytest.raises(InvalidArgumentError, match="en_US"):
        h.name

def test_holiday_start_in_timezone():
    h = Holiday.create("x", {"en_US": "X"}, date(2024, 6, 12), timezone="Asia/Manila")
    start = h.start()
    assert start.date() == date(2024, 6, 12)
    assert start.hour == 0
    assert start.utcoffset().total_seconds() == 8 * 3600

def test_holiday_as_dict():
    h = Holiday.create("x", {"en_US": "X", "de": "Ix"}, date(2024, 6, 12), locale="de_AT")
    assert h.as_dict() == {"key": "x", "date": date(2024, 6, 12), "classification": NATIONAL, "name": "Ix"}
