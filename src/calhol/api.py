from __future__ import annotations

from datetime import date, timedelta
from typing import Any, Dict, FrozenSet, List, Optional, Set

from .core.collection import HolidayCollection
from .core.engine import ProviderRegistry
from .core.errors import InvalidArgumentError, UnknownLocaleError
from .core.types import Holiday, ProviderSpec
from .i18n import translations as _translations
from .i18n.resolver import resolve
from .providers.factory import make_provider
from .providers.provider import check_year

_registry: Optional[ProviderRegistry] = None

def set_registry(reg: ProviderRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> ProviderRegistry:
    if _registry is None:
        raise RuntimeError("Provider registry not initialized")
    return _registry

def _spec_locales(spec: ProviderSpec) -> Set[str]:
    out = {spec.default_locale}
    for rs in spec.rule_sets:
        for rule in rs.rules:
            out.update(rule.names)
    return out

def _check_locale(spec: ProviderSpec, locale: Optional[str]) -> Optional[str]:
    if locale is None:
        return None
    if not _translations.is_supported_locale(locale, extra=_spec_locales(spec)):
        raise UnknownLocaleError(f"Unknown locale '{locale}'. Available: {sorted(available_locales())}")
    return locale

# ============================================================
# Query surface
# ============================================================

def list_supported_regions() -> FrozenSet[str]:
    return _reg().codes()

def list_regions() -> List[str]:
    return _reg().list()

def region_info(region: str) -> Dict[str, Any]:
    spec = _reg().get(region)
    return {
        "id": spec.id,
        "name": spec.name,
        "timezone": spec.timezone,
        "default_locale": spec.default_locale,
        "rule_sets": [rs.name for rs in spec.rule_sets],
        "locales": sorted(_spec_locales(spec)),
        **spec.meta,
    }

def available_locales() -> FrozenSet[str]:
    out = set(_translations.available_locales())
    for code in _reg().list():
        out.update(_spec_locales(_reg().get(code)))
    return frozenset(out)

def get_holidays(
    region: str,
    year: int,
    locale: Optional[str] = None,
    *,
    timezone: Optional[str] = None,
) -> HolidayCollection:
    spec = _reg().get(region)
    locale = _check_locale(spec, locale)
    check_year(year)
    return make_provider(spec, year, locale=locale, timezone=timezone).initialize()

def get_holiday(region: str, key: str, year: int, locale: Optional[str] = None) -> Optional[Holiday]:
    return get_holidays(region, year, locale).get(key)

def resolve_name(holiday: Holiday, locale: Optional[str] = None) -> str:
    return resolve(holiday, locale)

# ============================================================
# Working days
# ============================================================

def _step_working_day(region: str, start: date, days: int, step: int) -> date:
    if days < 1:
        raise InvalidArgumentError("days must be >= 1")
    cache: Dict[int, HolidayCollection] = {}
    d = start
    left = days
    while left:
        d += timedelta(days=step)
        if d.year not in cache:
            cache[d.year] = get_holidays(region, d.year)
        if cache[d.year].is_working_day(d):
            left -= 1
    return d

def next_working_day(region: str, start: date, days: int = 1) -> date:
    """The `days`-th working day after `start` (Mon..Fri, not a holiday)."""
    return _step_working_day(region, start, days, +1)

def previous_working_day(region: str, start: date, days: int = 1) -> date:
    return _step_working_day(region, start, days, -1)
