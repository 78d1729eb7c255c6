from __future__ import annotations

import pytest

from stratum.model.breakpoint import Breakpoint
from stratum.registry.registry import BreakpointRegistry


def make_registry(cutoff_rank: int | None = 768, freeze: bool = True) -> BreakpointRegistry:
    """Two width tiers (320up, 768up) plus all2x and 768up2x."""
    registry = BreakpointRegistry(cutoff_rank=cutoff_rank)
    registry.register(Breakpoint.min_width("320up", 1, 320))
    registry.register(Breakpoint.min_width("768up", 2, 768))
    registry.register(Breakpoint.hidpi("all2x", 3))
    registry.register(Breakpoint.paired("768up2x", 4, "768up"))
    if freeze:
        registry.freeze()
    return registry


@pytest.fixture
def registry() -> BreakpointRegistry:
    return make_registry()


DPI_768 = (
    "only screen and (min-device-pixel-ratio: 1.3) and (min-width: 768px), "
    "only screen and (-webkit-min-device-pixel-ratio: 1.3) and (min-width: 768px), "
    "only screen and (-o-min-device-pixel-ratio: 13/10) and (min-width: 768px), "
    "only screen and (min-resolution: 120dpi) and (min-width: 768px)"
)

DPI_ALL = (
    "only screen and (min-device-pixel-ratio: 1.3), "
    "only screen and (-webkit-min-device-pixel-ratio: 1.3), "
    "only screen and (-o-min-device-pixel-ratio: 13/10), "
    "only screen and (min-resolution: 120dpi)"
)
