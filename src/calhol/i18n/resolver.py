"""
calhol.i18n.resolver
--------------------
Display-name resolution for holidays.

Fallback chain, first hit wins:
  requested locale -> its base language -> region default -> global default
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Mapping, Optional

from ..core.errors import InvalidArgumentError

if TYPE_CHECKING:
    from ..core.types import Holiday

GLOBAL_DEFAULT_LOCALE = "en_US"


def base_language(locale: str) -> str:
    """'fil_PH' -> 'fil', 'de' -> 'de'."""
    return locale.split("_", 1)[0]


def fallback_chain(locale: Optional[str], default_locale: str = GLOBAL_DEFAULT_LOCALE) -> List[str]:
    chain: List[str] = []
    candidates = []
    if locale:
        candidates += [locale, base_language(locale)]
    candidates += [default_locale, GLOBAL_DEFAULT_LOCALE]
    for c in candidates:
        if c not in chain:
            chain.append(c)
    return chain


def resolve_from(translations: Mapping[str, str], locale: Optional[str], default_locale: str = GLOBAL_DEFAULT_LOCALE) -> Optional[str]:
    for loc in fallback_chain(locale, default_locale):
        name = translations.get(loc)
        if name:
            return name
    return None


def resolve(holiday: "Holiday", locale: Optional[str] = None) -> str:
    """Display name of `holiday` in `locale` (the holiday's own display locale if omitted)."""
    if locale is None:
        locale = holiday.locale
    name = resolve_from(holiday.translations, locale, holiday.default_locale)
    if name is None:
        raise InvalidArgumentError(f"holiday {holiday.key!r} has no {GLOBAL_DEFAULT_LOCALE} name")
    return name
