"""Rule fragment and output block models."""

from __future__ import annotations

from dataclasses import dataclass

from stratum.model.breakpoint import Breakpoint


@dataclass(frozen=True)
class RuleFragment:
    """A block of opaque rule text contributed by a component.

    ``breakpoint_name`` of ``None`` means the fragment is universal and is
    emitted unconditionally in both modes.
    """

    text: str
    breakpoint_name: str | None = None
    component_id: str = ""
    sequence: int = -1  # assigned by the collector

    @property
    def is_universal(self) -> bool:
        return self.breakpoint_name is None


@dataclass(frozen=True)
class OutputBlock:
    """One collated unit of output: universal rules or one breakpoint's rules."""

    breakpoint: Breakpoint | None
    fragments: tuple[RuleFragment, ...]

    @property
    def is_universal(self) -> bool:
        return self.breakpoint is None

    @property
    def name(self) -> str | None:
        return self.breakpoint.name if self.breakpoint else None

    @property
    def text(self) -> str:
        """Fragment text concatenated in submission order."""
        return "\n".join(f.text for f in self.fragments)
