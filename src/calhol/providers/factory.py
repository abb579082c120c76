"""
calhol.providers.factory
------------------------
Transforms pure ProviderSpec data into live, single-use RegionProvider objects.
"""

from __future__ import annotations

from typing import Optional

from ..core.types import ProviderSpec
from .provider import RegionProvider


def make_provider(
    spec: ProviderSpec,
    year: int,
    *,
    locale: Optional[str] = None,
    timezone: Optional[str] = None,
) -> RegionProvider:
    """The universal entry point."""
    return RegionProvider(spec, year, locale=locale, timezone=timezone)
