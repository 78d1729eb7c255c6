from stratum.registry.registry import BreakpointRegistry
from stratum.registry.presets import default_registry

__all__ = ["BreakpointRegistry", "default_registry"]
