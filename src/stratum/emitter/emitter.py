"""Serialises collated blocks into legacy and modern stylesheet text."""

from __future__ import annotations

from collections.abc import Sequence

from stratum.model.fragment import OutputBlock
from stratum.predicate.renderer import PredicateRenderer

__all__ = ["emit_modern", "emit_legacy"]

_MODERN_SEPARATOR = "\n\n"
_LEGACY_SEPARATOR = "\n"


def _wrap(predicate: str, body: str) -> str:
    return f"@media {predicate} {{\n{body}\n}}"


def emit_modern(blocks: Sequence[OutputBlock], renderer: PredicateRenderer) -> str:
    """Render blocks as grouped ``@media`` rules separated by blank lines.

    The universal block is written bare; every other block is wrapped in its
    breakpoint's predicate.
    """
    parts: list[str] = []
    for block in blocks:
        if block.breakpoint is None:
            parts.append(block.text)
        else:
            parts.append(_wrap(renderer.render(block.breakpoint), block.text))
    return _MODERN_SEPARATOR.join(parts)


def emit_legacy(blocks: Sequence[OutputBlock]) -> str:
    """Render every block as bare rule text, one after another."""
    return _LEGACY_SEPARATOR.join(block.text for block in blocks)
