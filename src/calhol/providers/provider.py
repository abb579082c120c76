"""
calhol.providers.provider
-------------------------
The orchestrator. Runs a region's rule-sets and substitute rules, in declared
order, for one (year, locale) and collects the result.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.collection import HolidayCollection
from ..core.errors import InvalidArgumentError
from ..core.time import MAX_YEAR, MIN_YEAR
from ..core.types import Holiday, ProviderSpec

logger = logging.getLogger(__name__)


def check_year(year: int) -> int:
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidArgumentError(f"year must be an integer, got {year!r}")
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidArgumentError(f"year must be in {MIN_YEAR}..{MAX_YEAR}, got {year}")
    return year


def check_timezone(name: str) -> str:
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise InvalidArgumentError(f"Unknown time zone '{name}'") from e
    return name


class RegionProvider:
    """
    Single-use: one instance computes one region for one year and locale.
    """
    def __init__(
        self,
        spec: ProviderSpec,
        year: int,
        *,
        locale: Optional[str] = None,
        timezone: Optional[str] = None,
    ):
        self.spec = spec
        self.year = check_year(year)
        self.timezone = check_timezone(timezone or spec.timezone)
        self.locale = locale or spec.default_locale
        self.holidays = HolidayCollection(spec.id, self.year)
        self._initialized = False

    @property
    def id(self) -> str:
        return self.spec.id

    def info(self) -> dict:
        return {
            "id": self.spec.id,
            "name": self.spec.name,
            "year": self.year,
            "timezone": self.timezone,
            "locale": self.locale,
            "default_locale": self.spec.default_locale,
            "rule_sets": [rs.name for rs in self.spec.rule_sets],
        }

    def _neighbour_holidays(self, window: int = 7) -> List[Holiday]:
        """Holidays of the adjacent years within `window` days of this year's edges."""
        out: List[Holiday] = []
        for y in (self.year - 1, self.year + 1):
            if not MIN_YEAR <= y <= MAX_YEAR:
                continue
            edge = date(max(y, self.year), 1, 1)
            for rule_set in self.spec.rule_sets:
                for h in rule_set.holidays(y, self.timezone, self.locale, default_locale=self.spec.default_locale):
                    if abs((h.date - edge).days) <= window:
                        out.append(h)
        return out

    def initialize(self) -> HolidayCollection:
        if self._initialized:
            raise RuntimeError(f"Provider {self.spec.id}/{self.year} already initialized")
        self._initialized = True

        for rule_set in self.spec.rule_sets:
            for h in rule_set.holidays(self.year, self.timezone, self.locale, default_locale=self.spec.default_locale):
                self.holidays.add(h)

        neighbours = self._neighbour_holidays() if self.spec.substitutes else []
        for sub in self.spec.substitutes:
            n = sub.apply(self.holidays, neighbours)
            if n:
                logger.debug("%s/%d: %d substitute day(s)", self.spec.id, self.year, n)

        logger.debug("%s/%d: %d holidays", self.spec.id, self.year, len(self.holidays))
        return self.holidays.freeze()
