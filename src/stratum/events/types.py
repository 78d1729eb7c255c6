"""Event types emitted while collecting and compiling a stylesheet."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FragmentSubmitted:
    breakpoint: str | None
    component: str
    sequence: int


@dataclass(frozen=True)
class CompilationStarted:
    mode: str
    fragment_count: int


@dataclass(frozen=True)
class BlockCollated:
    mode: str
    breakpoint: str | None
    fragment_count: int


@dataclass(frozen=True)
class CompilationCompleted:
    mode: str
    block_count: int
    length: int


@dataclass(frozen=True)
class CompilationFailed:
    error: str
    breakpoint: str | None = None
