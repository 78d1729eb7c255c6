"""Compiler facade: one compilation unit from fragment submission to text."""

from __future__ import annotations

from collections.abc import Iterable

from stratum.collation.engine import Mode, collate
from stratum.collector.collector import RuleCollector
from stratum.emitter.emitter import emit_legacy, emit_modern
from stratum.errors import StratumError
from stratum.events import types as events
from stratum.events.bus import EventBus
from stratum.model.fragment import OutputBlock, RuleFragment
from stratum.predicate.renderer import PredicateRenderer
from stratum.registry.registry import BreakpointRegistry


class Compiler:
    """Collects fragments for one compilation unit and renders both outputs.

    The registry is frozen on binding so it can be shared with other
    compilers.  A failed submission poisons the unit: later ``compile_*``
    calls re-raise the original error rather than emit a partial stylesheet.
    """

    def __init__(
        self, registry: BreakpointRegistry, event_bus: EventBus | None = None
    ) -> None:
        self._registry = registry.freeze()
        self._collector = RuleCollector(self._registry)
        self._renderer = PredicateRenderer(self._registry)
        self._event_bus = event_bus or EventBus()
        self._error: StratumError | None = None

    @classmethod
    def from_fragments(
        cls,
        registry: BreakpointRegistry,
        fragments: Iterable[RuleFragment],
        event_bus: EventBus | None = None,
    ) -> Compiler:
        compiler = cls(registry, event_bus=event_bus)
        for fragment in fragments:
            compiler.submit(fragment)
        return compiler

    # --- accessors ------------------------------------------------------------

    @property
    def registry(self) -> BreakpointRegistry:
        return self._registry

    @property
    def collector(self) -> RuleCollector:
        return self._collector

    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    # --- collection -----------------------------------------------------------

    def submit(self, fragment: RuleFragment) -> RuleFragment:
        """Submit a fragment; unknown breakpoints fail the whole unit."""
        try:
            stored = self._collector.submit(fragment)
        except StratumError as exc:
            self._error = exc
            self._event_bus.emit(
                events.CompilationFailed(error=str(exc), breakpoint=fragment.breakpoint_name)
            )
            raise
        self._event_bus.emit(
            events.FragmentSubmitted(
                breakpoint=stored.breakpoint_name,
                component=stored.component_id,
                sequence=stored.sequence,
            )
        )
        return stored

    def add(
        self, text: str, breakpoint: str | None = None, component: str = ""
    ) -> RuleFragment:
        return self.submit(
            RuleFragment(text=text, breakpoint_name=breakpoint, component_id=component)
        )

    # --- compilation ----------------------------------------------------------

    def blocks(self, mode: Mode = Mode.MODERN) -> list[OutputBlock]:
        """Collated, non-empty blocks for *mode*."""
        if self._error is not None:
            raise self._error
        return collate(self._registry, self._collector, Mode(mode))

    def compile(self, mode: Mode = Mode.MODERN) -> str:
        mode = Mode(mode)
        blocks = self.blocks(mode)
        self._event_bus.emit(
            events.CompilationStarted(mode=mode.value, fragment_count=len(self._collector))
        )
        for block in blocks:
            self._event_bus.emit(
                events.BlockCollated(
                    mode=mode.value, breakpoint=block.name, fragment_count=len(block.fragments)
                )
            )
        if mode is Mode.LEGACY:
            text = emit_legacy(blocks)
        else:
            text = emit_modern(blocks, self._renderer)
        self._event_bus.emit(
            events.CompilationCompleted(mode=mode.value, block_count=len(blocks), length=len(text))
        )
        return text

    def compile_modern(self) -> str:
        """Grouped ``@media`` stylesheet for browsers with media-query support."""
        return self.compile(Mode.MODERN)

    def compile_legacy(self) -> str:
        """Flattened desktop stylesheet for browsers without media queries."""
        return self.compile(Mode.LEGACY)
