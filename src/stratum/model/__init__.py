"""Stratum model layer -- public type re-exports."""

from stratum.model.breakpoint import Breakpoint, BreakpointKind, WidthBound
from stratum.model.diagnostic import Diagnostic, Severity
from stratum.model.fragment import OutputBlock, RuleFragment

__all__ = [
    # breakpoint
    "Breakpoint",
    "BreakpointKind",
    "WidthBound",
    # fragment
    "RuleFragment",
    "OutputBlock",
    # diagnostic
    "Severity",
    "Diagnostic",
]
