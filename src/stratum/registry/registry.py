"""Breakpoint registry: the ordered, named set of breakpoints for a project."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from stratum.errors import (
    DanglingPairError,
    DuplicateIdentityError,
    InvalidBreakpointError,
    RegistryFrozenError,
    UnknownBreakpointError,
)
from stratum.model.breakpoint import Breakpoint, BreakpointKind, WidthBound

log = logging.getLogger("stratum.registry")


def _check_definition(bp: Breakpoint) -> None:
    """Reject breakpoint definitions whose attributes contradict their kind."""
    if not bp.name:
        raise InvalidBreakpointError("Breakpoint name must not be empty")
    if bp.kind is BreakpointKind.BASE_WIDTH:
        if bp.width is None or bp.width <= 0:
            raise InvalidBreakpointError(
                f"Base-width breakpoint '{bp.name}' needs a positive width", name=bp.name
            )
        if bp.paired_with is not None:
            raise InvalidBreakpointError(
                f"Base-width breakpoint '{bp.name}' cannot pair with another breakpoint",
                name=bp.name,
            )
    elif bp.kind is BreakpointKind.HIDPI:
        if bp.paired_with is not None:
            raise InvalidBreakpointError(
                f"Hi-dpi breakpoint '{bp.name}' cannot pair with another breakpoint; "
                "use kind width+hi-dpi",
                name=bp.name,
            )
    elif bp.kind is BreakpointKind.WIDTH_HIDPI and not bp.paired_with:
        raise DanglingPairError(
            bp.name, None, f"Breakpoint '{bp.name}' is width+hi-dpi but names no pair"
        )


class BreakpointRegistry:
    """Holds registered breakpoints keyed by name, ordered by rank.

    The registry is configuration: populate it once, then :meth:`freeze` it
    before any compilation reads it.  A frozen registry is never mutated and
    may be shared by any number of concurrent compilations.
    """

    def __init__(self, cutoff_rank: int | None = None) -> None:
        self._by_name: dict[str, Breakpoint] = {}
        self._by_rank: dict[int, Breakpoint] = {}
        self._cutoff_rank = cutoff_rank
        self._frozen = False

    # --- configuration --------------------------------------------------------

    def register(self, breakpoint: Breakpoint) -> Breakpoint:
        """Add *breakpoint*; fails on reused identity or a dangling pair."""
        if self._frozen:
            raise RegistryFrozenError(breakpoint.name)
        _check_definition(breakpoint)
        if breakpoint.name in self._by_name:
            raise DuplicateIdentityError(breakpoint.name, breakpoint.rank, field="name")
        if breakpoint.rank in self._by_rank:
            raise DuplicateIdentityError(breakpoint.name, breakpoint.rank, field="rank")
        if breakpoint.kind is BreakpointKind.WIDTH_HIDPI:
            base = self._by_name.get(breakpoint.paired_with or "")
            if base is None:
                raise DanglingPairError(breakpoint.name, breakpoint.paired_with)
            if base.kind is not BreakpointKind.BASE_WIDTH:
                raise DanglingPairError(
                    breakpoint.name,
                    breakpoint.paired_with,
                    f"Breakpoint '{breakpoint.name}' must pair with a base-width "
                    f"breakpoint, not '{base.name}' ({base.kind.value})",
                )
        self._by_name[breakpoint.name] = breakpoint
        self._by_rank[breakpoint.rank] = breakpoint
        log.debug(
            "registered breakpoint name=%s rank=%d kind=%s",
            breakpoint.name,
            breakpoint.rank,
            breakpoint.kind.value,
        )
        return breakpoint

    def set_cutoff(self, rank: int | None) -> None:
        """Set the highest rank folded into legacy output (``None``: no limit)."""
        if self._frozen:
            raise RegistryFrozenError("cutoff")
        self._cutoff_rank = rank

    def freeze(self) -> BreakpointRegistry:
        """Finalise the registry; later registrations fail."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def cutoff_rank(self) -> int | None:
        return self._cutoff_rank

    # --- queries --------------------------------------------------------------

    def resolve(self, name: str) -> Breakpoint:
        """Return the breakpoint called *name*."""
        try:
            return self._by_name[name]
        except KeyError:
            raise UnknownBreakpointError(name) from None

    def ordered_all(self) -> list[Breakpoint]:
        """All breakpoints in ascending rank order."""
        return [self._by_rank[rank] for rank in sorted(self._by_rank)]

    def legacy_eligible(self) -> list[Breakpoint]:
        """Base-width breakpoints with rank at or below the cutoff, rank ordered.

        Hi-dpi kinds are excluded categorically, whatever their rank.  A
        ``max-width`` ceiling (the mobile block) is always included.
        """
        return [bp for bp in self.ordered_all() if self.is_legacy_eligible(bp)]

    def is_legacy_eligible(self, breakpoint: Breakpoint) -> bool:
        if breakpoint.kind is not BreakpointKind.BASE_WIDTH:
            return False
        if breakpoint.bound is WidthBound.MAX:
            return True
        return self._cutoff_rank is None or breakpoint.rank <= self._cutoff_rank

    # --- dunder helpers -------------------------------------------------------

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __len__(self) -> int:
        return len(self._by_name)

    def __iter__(self) -> Iterator[Breakpoint]:
        return iter(self.ordered_all())

    def __repr__(self) -> str:
        names = [bp.name for bp in self.ordered_all()]
        return f"BreakpointRegistry(breakpoints={names}, cutoff_rank={self._cutoff_rank})"
