"""
calhol.i18n.translations

Shared translation table: holiday key -> {locale -> display name}.

The table ships as CSV (columns: key, locale, name) in calhol/i18n/data and is
read once per process on first access. Region rules may carry inline names
that take precedence over these entries.

Search order:
  1) packaged data (calhol/i18n/data/translations.csv)
  2) CALHOL_TRANSLATIONS environment variable (path to CSV), merged on top
"""

from __future__ import annotations

import csv
import importlib.resources
import logging
import os
import re
import threading
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping

from .resolver import GLOBAL_DEFAULT_LOCALE, base_language

logger = logging.getLogger(__name__)

ENV_TRANSLATIONS = "CALHOL_TRANSLATIONS"
SUBSTITUTE_KEY = "substituteHoliday"

_LOCALE_RE = re.compile(r"^[a-z]{2,3}(_[A-Z]{2})?$")
_LOCK = threading.Lock()

TranslationTable = Mapping[str, Mapping[str, str]]


def _merge_rows(table: Dict[str, Dict[str, str]], rows: Iterable[dict], *, source: str) -> int:
    n = 0
    for r in rows:
        key = (r.get("key") or "").strip()
        loc = (r.get("locale") or "").strip()
        name = (r.get("name") or "").strip()
        if not key or not loc or not name:
            raise ValueError(f"{source}: incomplete translation row {r!r}")
        if not _LOCALE_RE.match(loc):
            raise ValueError(f"{source}: malformed locale {loc!r} for key {key!r}")
        table.setdefault(key, {})[loc] = name
        n += 1
    return n


@lru_cache(maxsize=1)
def _load_table() -> TranslationTable:
    table: Dict[str, Dict[str, str]] = {}

    path = importlib.resources.files("calhol.i18n").joinpath("data").joinpath("translations.csv")
    with path.open("r", encoding="utf-8", newline="") as f:
        n = _merge_rows(table, csv.DictReader(f), source="translations.csv")
    logger.debug("loaded %d packaged translations for %d keys", n, len(table))

    override = os.environ.get(ENV_TRANSLATIONS, "").strip()
    if override:
        extra = Path(override).expanduser()
        with extra.open("r", encoding="utf-8", newline="") as f:
            n = _merge_rows(table, csv.DictReader(f), source=str(extra))
        logger.debug("merged %d translations from %s", n, extra)

    return MappingProxyType({k: MappingProxyType(v) for k, v in table.items()})


def translation_table() -> TranslationTable:
    with _LOCK:
        return _load_table()


def reset_cache() -> None:
    """Drop the memoised table (next access re-reads it)."""
    with _LOCK:
        _load_table.cache_clear()


def translations_for(key: str) -> Dict[str, str]:
    return dict(translation_table().get(key, {}))


def available_locales() -> FrozenSet[str]:
    """Every locale that has at least one entry in the shared table."""
    out = {GLOBAL_DEFAULT_LOCALE}
    for names in translation_table().values():
        out.update(names)
    return frozenset(out)


def is_supported_locale(locale: str, extra: Iterable[str] = ()) -> bool:
    """
    A locale is supported when it is well formed and its base language has
    translations (shared table, or `extra` locales such as a region's inline names).
    """
    if not isinstance(locale, str) or not _LOCALE_RE.match(locale):
        return False
    languages = {base_language(loc) for loc in available_locales()}
    languages.update(base_language(loc) for loc in extra)
    return base_language(locale) in languages
