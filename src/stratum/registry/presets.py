"""Built-in breakpoint scale for the mobile-first responsive convention.

Scale:
    mobile   max-width 767px   (always on, lowest rank)
    320up .. 1382up            progressive min-width tiers
    all2x                      hi-dpi on any width
    320up2x .. 1382up2x        hi-dpi combined with each width tier

Legacy browsers get everything up to and including ``992up``, which is the
fixed "desktop" layout.
"""

from __future__ import annotations

from stratum.model.breakpoint import Breakpoint
from stratum.registry.registry import BreakpointRegistry

__all__ = ["MOBILE_CEILING", "WIDTH_TIERS", "LEGACY_CUTOFF", "default_registry"]

MOBILE_CEILING = 767
WIDTH_TIERS: tuple[int, ...] = (320, 480, 600, 768, 992, 1382)
LEGACY_CUTOFF = "992up"


def default_registry(freeze: bool = True) -> BreakpointRegistry:
    """Build the default registry (frozen unless *freeze* is False)."""
    registry = BreakpointRegistry()
    rank = 0
    registry.register(Breakpoint.max_width("mobile", rank, MOBILE_CEILING))
    for width in WIDTH_TIERS:
        rank += 1
        registry.register(Breakpoint.min_width(f"{width}up", rank, width))
    rank += 1
    registry.register(Breakpoint.hidpi("all2x", rank))
    for width in WIDTH_TIERS:
        rank += 1
        registry.register(Breakpoint.paired(f"{width}up2x", rank, f"{width}up"))
    registry.set_cutoff(registry.resolve(LEGACY_CUTOFF).rank)
    if freeze:
        registry.freeze()
    return registry
