"""Error hierarchy for the breakpoint collation compiler."""
from __future__ import annotations


class StratumError(Exception):
    """Base error for all stratum errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Configuration-time errors
# ---------------------------------------------------------------------------


class ConfigurationError(StratumError):
    """The breakpoint registry could not be configured."""


class DuplicateIdentityError(ConfigurationError):
    """A breakpoint name or rank was registered twice."""

    def __init__(self, name: str, rank: int, *, field: str) -> None:
        if field == "rank":
            message = f"Breakpoint '{name}' reuses rank {rank}"
        else:
            message = f"Breakpoint '{name}' is already registered"
        super().__init__(message)
        self.name = name
        self.rank = rank
        self.field = field


class DanglingPairError(ConfigurationError):
    """A width+hi-dpi breakpoint references a base that is not registered."""

    def __init__(self, name: str, paired_with: str | None, reason: str = "") -> None:
        message = reason or (
            f"Breakpoint '{name}' pairs with unregistered breakpoint '{paired_with}'"
        )
        super().__init__(message)
        self.name = name
        self.paired_with = paired_with


class RegistryFrozenError(ConfigurationError):
    """A breakpoint was registered after the registry was frozen."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Cannot register '{name}': registry is frozen")
        self.name = name


class InvalidBreakpointError(ConfigurationError):
    """A breakpoint definition is malformed."""

    def __init__(self, message: str, *, name: str | None = None) -> None:
        super().__init__(message)
        self.name = name


# ---------------------------------------------------------------------------
# Collection-time errors
# ---------------------------------------------------------------------------


class UnknownBreakpointError(StratumError):
    """A breakpoint name is not present in the bound registry."""

    def __init__(self, name: str, *, component: str = "") -> None:
        if component:
            message = f"Unknown breakpoint '{name}' (component '{component}')"
        else:
            message = f"Unknown breakpoint '{name}'"
        super().__init__(message)
        self.name = name
        self.component = component


class ManifestError(StratumError):
    """A fragment manifest is malformed."""
