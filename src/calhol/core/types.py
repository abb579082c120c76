from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date, datetime, time
from types import MappingProxyType
from typing import Any, Literal, Mapping, Optional, Tuple
from zoneinfo import ZoneInfo

from .errors import InvalidArgumentError, InvalidDateError
from ..i18n.resolver import GLOBAL_DEFAULT_LOCALE, resolve

Classification = Literal["national", "observance", "bank", "season", "other"]

NATIONAL: Classification = "national"
OBSERVANCE: Classification = "observance"
BANK: Classification = "bank"
SEASON: Classification = "season"
OTHER: Classification = "other"

CLASSIFICATIONS: Tuple[str, ...] = (NATIONAL, OBSERVANCE, BANK, SEASON, OTHER)


@dataclass(frozen=True)
class ValidityRange:
    """Inclusive [start, end] year range; None means open-ended."""
    start: Optional[int] = None
    end: Optional[int] = None

    def __post_init__(self) -> None:
        if self.start is not None and self.end is not None and self.end < self.start:
            raise InvalidArgumentError(f"validity range ends ({self.end}) before it starts ({self.start})")

    def contains(self, year: int) -> bool:
        if self.start is not None and year < self.start:
            return False
        if self.end is not None and year > self.end:
            return False
        return True

ALWAYS = ValidityRange()


@dataclass(frozen=True)
class Holiday:
    key: str
    date: date
    classification: Classification
    translations: Mapping[str, str] = field(hash=False)
    timezone: str = "UTC"
    locale: str = GLOBAL_DEFAULT_LOCALE          # display locale
    default_locale: str = GLOBAL_DEFAULT_LOCALE  # region default

    def __post_init__(self) -> None:
        key = self.key
        if not isinstance(key, str) or not key:
            raise InvalidArgumentError("holiday key must be a non-empty string")
        if isinstance(self.date, datetime) or not isinstance(self.date, date):
            raise InvalidDateError(f"holiday {key!r}: expected a calendar date, got {self.date!r}")
        if self.classification not in CLASSIFICATIONS:
            raise InvalidArgumentError(
                f"holiday {key!r}: unknown classification {self.classification!r}. Available: {list(CLASSIFICATIONS)}"
            )
        if not isinstance(self.translations, Mapping):
            raise InvalidArgumentError(f"holiday {key!r}: translations must be a mapping of locale -> name")
        for required in (self.default_locale, GLOBAL_DEFAULT_LOCALE):
            if not self.translations.get(required):
                raise InvalidArgumentError(f"holiday {key!r} has no translation for locale {required!r}")
        if not isinstance(self.translations, MappingProxyType):
            object.__setattr__(self, "translations", MappingProxyType(dict(self.translations)))

    @classmethod
    def create(
        cls,
        key: str,
        translations: Mapping[str, str],
        d: date,
        classification: str = NATIONAL,
        *,
        timezone: str = "UTC",
        locale: Optional[str] = None,
        default_locale: str = GLOBAL_DEFAULT_LOCALE,
    ) -> "Holiday":
        """Build a holiday; the display locale defaults to the region default."""
        return cls(
            key=key,
            date=d,
            classification=classification,  # type: ignore[arg-type]
            translations=MappingProxyType(dict(translations)),
            timezone=timezone,
            locale=locale or default_locale,
            default_locale=default_locale,
        )

    @property
    def name(self) -> str:
        return resolve(self)

    def start(self) -> datetime:
        """Midnight of the holiday in its time zone."""
        return datetime.combine(self.date, time(0), tzinfo=ZoneInfo(self.timezone))

    def as_dict(self) -> dict:
        return {
            "key": self.key,
            "date": self.date,
            "classification": self.classification,
            "name": self.name,
        }


@dataclass(frozen=True)
class ProviderSpec:
    """Pure data payload describing one region's holiday set."""
    id: str
    name: str
    timezone: str
    default_locale: str
    rule_sets: Tuple[Any, ...]            # RuleSet, applied in order
    substitutes: Tuple[Any, ...] = ()     # SubstituteRule, applied after rule_sets
    meta: dict = field(default_factory=dict, hash=False, compare=False)
