"""calhol public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    get_holidays,
    get_holiday,
    list_supported_regions,
    list_regions,
    region_info,
    available_locales,
    resolve_name,
    next_working_day,
    previous_working_day,
)
from .core.collection import HolidayCollection
from .core.errors import (
    CalholError,
    DuplicateKeyError,
    InvalidArgumentError,
    InvalidDateError,
    UnknownLocaleError,
    UnknownRegionError,
)
from .core.types import Holiday, ValidityRange

__all__ = [
    "get_holidays",
    "get_holiday",
    "list_supported_regions",
    "list_regions",
    "region_info",
    "available_locales",
    "resolve_name",
    "next_working_day",
    "previous_working_day",
    "Holiday",
    "HolidayCollection",
    "ValidityRange",
    "CalholError",
    "DuplicateKeyError",
    "InvalidArgumentError",
    "InvalidDateError",
    "UnknownLocaleError",
    "UnknownRegionError",
]
