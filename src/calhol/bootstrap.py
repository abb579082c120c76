from __future__ import annotations
from calhol.core.engine import ProviderRegistry
from calhol.providers.specs import ALL_PROVIDERS

def build_registry() -> ProviderRegistry:
    return ProviderRegistry(dict(ALL_PROVIDERS))
