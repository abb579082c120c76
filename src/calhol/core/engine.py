from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping

from .errors import UnknownRegionError
from .types import ProviderSpec


@dataclass(frozen=True)
class ProviderRegistry:
    """Read-only region -> ProviderSpec mapping, built once at import."""
    _specs: Mapping[str, ProviderSpec]
    _aliases: Mapping[str, str] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        specs = MappingProxyType({k.upper(): v for k, v in self._specs.items()})
        aliases: Dict[str, str] = {}
        for code, spec in specs.items():
            aliases[spec.name.casefold()] = code
        object.__setattr__(self, "_specs", specs)
        object.__setattr__(self, "_aliases", MappingProxyType(aliases))

    def resolve(self, region: str) -> str:
        """Canonical region code for an ISO id (any case) or a provider name."""
        if isinstance(region, str):
            if region.upper() in self._specs:
                return region.upper()
            if region.casefold() in self._aliases:
                return self._aliases[region.casefold()]
        raise UnknownRegionError(f"Unknown region '{region}'. Available: {self.list()}")

    def get(self, region: str) -> ProviderSpec:
        return self._specs[self.resolve(region)]

    def list(self) -> List[str]:
        return sorted(self._specs.keys())

    def codes(self) -> FrozenSet[str]:
        return frozenset(self._specs)
