"""Locale data and display-name resolution."""

from .resolver import GLOBAL_DEFAULT_LOCALE, fallback_chain, resolve
from .translations import available_locales, is_supported_locale, translations_for

__all__ = [
    "GLOBAL_DEFAULT_LOCALE",
    "fallback_chain",
    "resolve",
    "available_locales",
    "is_supported_locale",
    "translations_for",
]
