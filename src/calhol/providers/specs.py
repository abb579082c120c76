from __future__ import annotations

from typing import Dict

from ..core.types import ProviderSpec
from .philippines import PHILIPPINES
from .ukraine import UKRAINE
from .united_kingdom import UNITED_KINGDOM
from .usa import UNITED_STATES

ALL_PROVIDERS: Dict[str, ProviderSpec] = {
    spec.id: spec
    for spec in (PHILIPPINES, UKRAINE, UNITED_KINGDOM, UNITED_STATES)
}
