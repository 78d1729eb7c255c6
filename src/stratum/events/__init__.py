from stratum.events.bus import EventBus
from stratum.events.log_listener import logging_listener
from stratum.events.types import (
    BlockCollated,
    CompilationCompleted,
    CompilationFailed,
    CompilationStarted,
    FragmentSubmitted,
)

__all__ = [
    "EventBus",
    "logging_listener",
    "FragmentSubmitted",
    "CompilationStarted",
    "BlockCollated",
    "CompilationCompleted",
    "CompilationFailed",
]
