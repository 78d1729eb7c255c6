"""Collation engine: turns registry + collector state into ordered output blocks."""

from __future__ import annotations

from enum import StrEnum

from stratum.collector.collector import RuleCollector
from stratum.model.fragment import OutputBlock
from stratum.registry.registry import BreakpointRegistry


class Mode(StrEnum):
    """Output mode of a compilation."""

    MODERN = "modern"
    LEGACY = "legacy"


def collate(
    registry: BreakpointRegistry, collector: RuleCollector, mode: Mode = Mode.MODERN
) -> list[OutputBlock]:
    """Build the ordered list of non-empty blocks for *mode*.

    The universal block always leads.  Breakpoint blocks follow in rank
    order, never in the order fragments were submitted across buckets; inside
    a block, fragments keep their submission order.  Legacy mode only walks
    the legacy-eligible breakpoints.
    """
    blocks: list[OutputBlock] = []
    universal = collector.bucket_for(None)
    if universal:
        blocks.append(OutputBlock(breakpoint=None, fragments=universal))

    candidates = (
        registry.legacy_eligible() if mode is Mode.LEGACY else registry.ordered_all()
    )
    for bp in candidates:
        fragments = collector.bucket_for(bp.name)
        if fragments:
            blocks.append(OutputBlock(breakpoint=bp, fragments=fragments))
    return blocks
