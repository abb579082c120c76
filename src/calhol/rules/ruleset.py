"""
calhol.rules.ruleset
--------------------
Declarative building blocks of a region provider.

A HolidayRule is one computed holiday: a validity gate, a date function built
from the toolkit, an optional in-place weekend shift, a classification and
inline names. A RuleSet is a named, ordered group of rules that several regions
can share; `select` derives the subset a region actually observes.

A SubstituteRule adds separate `substituteHoliday:<key>` entries for holidays
that fall on a weekend.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import date, timedelta
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Set, Tuple

from ..core.collection import HolidayCollection
from ..core.errors import InvalidArgumentError
from ..core.types import ALWAYS, NATIONAL, Holiday, ValidityRange
from ..i18n.resolver import GLOBAL_DEFAULT_LOCALE, base_language
from ..i18n.translations import SUBSTITUTE_KEY, translations_for
from .computus import movable_feast_date, orthodox_feast_date
from .dates import fixed_date, is_weekend, last_weekday_of_month, nth_weekday_of_month, weekend_substitute

logger = logging.getLogger(__name__)

DateRule = Callable[[int], date]


# ============================================================
# DATE RULE BUILDERS
# ============================================================

def fixed(month: int, day: int) -> DateRule:
    def rule(year: int) -> date:
        return fixed_date(year, month, day)
    rule.__qualname__ = f"fixed({month}, {day})"
    return rule

def easter_offset(days: int) -> DateRule:
    def rule(year: int) -> date:
        return movable_feast_date(year, days)
    rule.__qualname__ = f"easter_offset({days})"
    return rule

def orthodox_offset(days: int) -> DateRule:
    def rule(year: int) -> date:
        return orthodox_feast_date(year, days)
    rule.__qualname__ = f"orthodox_offset({days})"
    return rule

def nth_weekday(month: int, weekday: int, n: int) -> DateRule:
    def rule(year: int) -> date:
        return nth_weekday_of_month(year, month, weekday, n)
    rule.__qualname__ = f"nth_weekday({month}, {weekday}, {n})"
    return rule

def last_weekday(month: int, weekday: int) -> DateRule:
    def rule(year: int) -> date:
        return last_weekday_of_month(year, month, weekday)
    rule.__qualname__ = f"last_weekday({month}, {weekday})"
    return rule


# ============================================================
# RULES
# ============================================================

@dataclass(frozen=True)
class HolidayRule:
    key: str
    compute: DateRule
    classification: str = NATIONAL
    validity: ValidityRange = ALWAYS
    shift: str = "none"
    names: Mapping[str, str] = field(default_factory=dict, hash=False)

    def applies(self, year: int) -> bool:
        return self.validity.contains(year)

    def date_for(self, year: int) -> date:
        return weekend_substitute(self.compute(year), self.shift)

    def holiday(
        self,
        year: int,
        timezone: str,
        locale: Optional[str] = None,
        *,
        default_locale: str = GLOBAL_DEFAULT_LOCALE,
    ) -> Optional[Holiday]:
        if not self.applies(year):
            logger.debug("%s: not observed in %d (valid %s..%s)", self.key, year, self.validity.start, self.validity.end)
            return None
        translations = translations_for(self.key)
        translations.update(self.names)
        return Holiday.create(
            self.key,
            translations,
            self.date_for(year),
            self.classification,
            timezone=timezone,
            locale=locale,
            default_locale=default_locale,
        )


@dataclass(frozen=True)
class RuleSet:
    name: str
    rules: Tuple[HolidayRule, ...]

    def __iter__(self):
        return iter(self.rules)

    def keys(self) -> List[str]:
        return [r.key for r in self.rules]

    def select(self, *keys: str, **classifications: str) -> "RuleSet":
        """
        Subset in the order given. Keyword arguments override the
        classification of a selected rule, e.g. select("easterMonday", easterMonday="bank").
        """
        by_key: Dict[str, HolidayRule] = {}
        for r in self.rules:
            by_key.setdefault(r.key, r)
        missing = [k for k in keys if k not in by_key]
        if missing:
            raise InvalidArgumentError(f"Rule set '{self.name}' has no rules {missing}. Available: {self.keys()}")
        unknown = [k for k in classifications if k not in keys]
        if unknown:
            raise InvalidArgumentError(f"Classification overrides for unselected rules {unknown}")
        picked = []
        for k in keys:
            # a key may have several rules with disjoint validity ranges
            for r in self.rules:
                if r.key == k:
                    picked.append(replace(r, classification=classifications[k]) if k in classifications else r)
        return RuleSet(self.name, tuple(picked))

    def holidays(
        self,
        year: int,
        timezone: str,
        locale: Optional[str] = None,
        *,
        default_locale: str = GLOBAL_DEFAULT_LOCALE,
    ) -> List[Holiday]:
        out = []
        for r in self.rules:
            h = r.holiday(year, timezone, locale, default_locale=default_locale)
            if h is not None:
                out.append(h)
        return out


# ============================================================
# SUBSTITUTE DAYS
# ============================================================

def _substitute_names(original: Holiday) -> Dict[str, str]:
    templates = translations_for(SUBSTITUTE_KEY)
    out: Dict[str, str] = {}
    for loc, name in original.translations.items():
        tpl = templates.get(loc) or templates.get(base_language(loc)) or templates.get(GLOBAL_DEFAULT_LOCALE, "{0}")
        out[loc] = tpl.format(name)
    return out


@dataclass(frozen=True)
class SubstituteRule:
    """
    For each qualifying holiday on a weekend, add `substituteHoliday:<key>` on
    weekend_substitute(date, policy). With `skip_occupied` the substitute moves
    on to the next weekday not already taken by a holiday or earlier substitute.
    A substitute belongs to the calendar year it falls in: holidays of the
    neighbouring years may be passed in and contribute only the substitutes
    that cross into `year`.
    """
    policy: str
    keys: Optional[Tuple[str, ...]] = None
    classifications: Tuple[str, ...] = (NATIONAL,)
    validity: ValidityRange = ALWAYS
    skip_occupied: bool = False

    def qualifies(self, h: Holiday) -> bool:
        if self.keys is not None:
            return h.key in self.keys
        return h.classification in self.classifications

    def substitutes(self, holidays: Iterable[Holiday], year: int) -> List[Holiday]:
        if not self.validity.contains(year):
            return []
        holidays = sorted(holidays, key=lambda h: (h.date, h.key))
        occupied: Set[date] = {h.date for h in holidays}
        out: List[Holiday] = []
        for h in holidays:
            if not self.qualifies(h) or not is_weekend(h.date):
                continue
            d = weekend_substitute(h.date, self.policy)
            if d == h.date:
                continue
            if self.skip_occupied:
                while is_weekend(d) or d in occupied:
                    d += timedelta(days=1)
            occupied.add(d)
            if d.year != year:
                if h.date.year == year:
                    logger.debug("%s: substitute %s belongs to %d", h.key, d.isoformat(), d.year)
                continue
            out.append(
                Holiday.create(
                    f"{SUBSTITUTE_KEY}:{h.key}",
                    _substitute_names(h),
                    d,
                    h.classification,
                    timezone=h.timezone,
                    locale=h.locale,
                    default_locale=h.default_locale,
                )
            )
        return out

    def apply(self, collection: HolidayCollection, neighbours: Iterable[Holiday] = ()) -> int:
        subs = self.substitutes(list(collection) + list(neighbours), collection.year)
        for s in subs:
            collection.add(s)
        return len(subs)
