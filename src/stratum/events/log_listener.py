"""Bridges compilation events to the standard ``logging`` module."""
from __future__ import annotations

import logging
from typing import Any, Callable

from stratum.events import types as events


def logging_listener(logger: logging.Logger | None = None) -> Callable[[Any], None]:
    """Create an :class:`EventBus` callback that logs every compilation event."""
    log = logger or logging.getLogger("stratum")

    def listener(event: Any) -> None:
        if isinstance(event, events.FragmentSubmitted):
            log.debug(
                "fragment submitted: breakpoint=%s component=%s sequence=%d",
                event.breakpoint or "*",
                event.component or "-",
                event.sequence,
            )
        elif isinstance(event, events.CompilationStarted):
            log.info(
                "compiling %s stylesheet from %d fragment(s)",
                event.mode,
                event.fragment_count,
            )
        elif isinstance(event, events.BlockCollated):
            log.debug(
                "collated %s block: breakpoint=%s fragments=%d",
                event.mode,
                event.breakpoint or "*",
                event.fragment_count,
            )
        elif isinstance(event, events.CompilationCompleted):
            log.info(
                "compiled %s stylesheet: blocks=%d chars=%d",
                event.mode,
                event.block_count,
                event.length,
            )
        elif isinstance(event, events.CompilationFailed):
            log.error("compilation failed: %s", event.error)

    return listener
