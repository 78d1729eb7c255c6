"""Breakpoint model: named, ranked viewport or density conditions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class BreakpointKind(Enum):
    """What a breakpoint's media predicate tests."""

    BASE_WIDTH = "base-width"
    HIDPI = "hi-dpi-only"
    WIDTH_HIDPI = "width+hi-dpi"


class WidthBound(Enum):
    """Which side of the width a base-width breakpoint bounds."""

    MIN = "min-width"
    MAX = "max-width"


@dataclass(frozen=True)
class Breakpoint:
    """A named breakpoint with a unique rank.

    Attributes:
        name: Unique identifier, e.g. ``"320up"`` or ``"768up2x"``.
        rank: Unique integer defining emission order (ascending).
        kind: Base width, hi-dpi only, or a width+hi-dpi pair.
        width: Pixel width for base-width breakpoints.
        bound: ``min-width`` for progressive tiers, ``max-width`` for the
            mobile ceiling.
        paired_with: Name of the base-width breakpoint a width+hi-dpi
            breakpoint borrows its width predicate from.
    """

    name: str
    rank: int
    kind: BreakpointKind = BreakpointKind.BASE_WIDTH
    width: int | None = None
    bound: WidthBound = WidthBound.MIN
    paired_with: str | None = None

    @property
    def is_hidpi(self) -> bool:
        return self.kind is not BreakpointKind.BASE_WIDTH

    @classmethod
    def min_width(cls, name: str, rank: int, width: int) -> Breakpoint:
        return cls(name=name, rank=rank, width=width)

    @classmethod
    def max_width(cls, name: str, rank: int, width: int) -> Breakpoint:
        return cls(name=name, rank=rank, width=width, bound=WidthBound.MAX)

    @classmethod
    def hidpi(cls, name: str, rank: int) -> Breakpoint:
        return cls(name=name, rank=rank, kind=BreakpointKind.HIDPI)

    @classmethod
    def paired(cls, name: str, rank: int, base: str) -> Breakpoint:
        return cls(name=name, rank=rank, kind=BreakpointKind.WIDTH_HIDPI, paired_with=base)
