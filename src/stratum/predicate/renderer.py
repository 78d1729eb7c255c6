"""Media-query predicate rendering.

Output examples:
    only screen and (min-width: 320px)
    only screen and (max-width: 767px)
    only screen and (min-device-pixel-ratio: 1.3), only screen and (...), ...
    only screen and (min-device-pixel-ratio: 1.3) and (min-width: 768px), ...
"""

from __future__ import annotations

from stratum.model.breakpoint import Breakpoint, BreakpointKind
from stratum.registry.registry import BreakpointRegistry

__all__ = ["DPI_FEATURES", "PredicateRenderer", "render_predicate"]

# Vendor order is fixed: standard, webkit, presto, resolution.
DPI_FEATURES: tuple[str, ...] = (
    "min-device-pixel-ratio: 1.3",
    "-webkit-min-device-pixel-ratio: 1.3",
    "-o-min-device-pixel-ratio: 13/10",
    "min-resolution: 120dpi",
)

_SCOPE = "only screen"
_CLAUSE_SEPARATOR = ", "


def _width_feature(bp: Breakpoint) -> str:
    return f"{bp.bound.value}: {bp.width}px"


def _dpi_clauses(suffix: str = "") -> str:
    return _CLAUSE_SEPARATOR.join(
        f"{_SCOPE} and ({feature}){suffix}" for feature in DPI_FEATURES
    )


def render_predicate(breakpoint: Breakpoint, registry: BreakpointRegistry) -> str:
    """Return the literal media-query predicate for *breakpoint*.

    *registry* is only consulted to look up the base of a width+hi-dpi pair.
    """
    if breakpoint.kind is BreakpointKind.BASE_WIDTH:
        return f"{_SCOPE} and ({_width_feature(breakpoint)})"
    if breakpoint.kind is BreakpointKind.HIDPI:
        return _dpi_clauses()
    base = registry.resolve(breakpoint.paired_with or "")
    return _dpi_clauses(f" and ({_width_feature(base)})")


class PredicateRenderer:
    """Renders predicates against one registry, caching results by name."""

    def __init__(self, registry: BreakpointRegistry) -> None:
        self._registry = registry
        self._cache: dict[str, str] = {}

    def render(self, breakpoint: Breakpoint) -> str:
        cached = self._cache.get(breakpoint.name)
        if cached is None:
            cached = render_predicate(breakpoint, self._registry)
            self._cache[breakpoint.name] = cached
        return cached
