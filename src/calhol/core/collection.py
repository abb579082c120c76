from __future__ import annotations
from datetime import date
from typing import Dict, Iterator, List, Optional

from .errors import DuplicateKeyError, InvalidArgumentError
from .types import Holiday


class ClassificationView:
    """Lazy, restartable view over the holidays of one classification."""

    def __init__(self, collection: "HolidayCollection", classification: str):
        self._collection = collection
        self.classification = classification

    def __iter__(self) -> Iterator[Holiday]:
        return (h for h in self._collection if h.classification == self.classification)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"ClassificationView({self.classification!r}, n={len(self)})"


class HolidayCollection:
    """
    Holidays of one region for one year, keyed by holiday key.
    Iteration is ordered by date (key breaks ties).
    """

    def __init__(self, region: str, year: int):
        self.region = region
        self.year = year
        self._by_key: Dict[str, Holiday] = {}
        self._ordered: List[Holiday] = []
        self._frozen = False

    # ---------------------------------------------------------
    # Population (owning provider only)
    # ---------------------------------------------------------

    def add(self, holiday: Holiday) -> None:
        if self._frozen:
            raise TypeError(f"Holiday collection for {self.region}/{self.year} is read-only")
        if holiday.key in self._by_key:
            other = self._by_key[holiday.key]
            raise DuplicateKeyError(
                f"Duplicate holiday key '{holiday.key}' for {self.region}/{self.year} "
                f"({other.date.isoformat()} and {holiday.date.isoformat()})"
            )
        self._by_key[holiday.key] = holiday
        self._ordered.append(holiday)
        self._ordered.sort(key=lambda h: (h.date, h.key))

    def freeze(self) -> "HolidayCollection":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ---------------------------------------------------------
    # Queries
    # ---------------------------------------------------------

    def __iter__(self) -> Iterator[Holiday]:
        return iter(tuple(self._ordered))

    def __len__(self) -> int:
        return len(self._ordered)

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def __repr__(self) -> str:
        return f"HolidayCollection(region={self.region!r}, year={self.year}, n={len(self)})"

    def get(self, key: str) -> Optional[Holiday]:
        return self._by_key.get(key)

    def keys(self) -> List[str]:
        return [h.key for h in self._ordered]

    def dates(self) -> List[date]:
        return [h.date for h in self._ordered]

    def by_classification(self, classification: str) -> ClassificationView:
        return ClassificationView(self, classification)

    def on(self, d: date) -> List[Holiday]:
        return [h for h in self._ordered if h.date == d]

    def between(self, start: date, end: date, *, inclusive: bool = True) -> List[Holiday]:
        if end < start:
            raise InvalidArgumentError("end must be >= start")
        if inclusive:
            return [h for h in self._ordered if start <= h.date <= end]
        return [h for h in self._ordered if start < h.date < end]

    def is_holiday(self, d: date) -> bool:
        return any(h.date == d for h in self._ordered)

    def is_working_day(self, d: date) -> bool:
        """Weekdays (Mon..Fri) that carry no holiday."""
        return d.weekday() < 5 and not self.is_holiday(d)
