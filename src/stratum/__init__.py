"""Stratum - breakpoint collation compiler for responsive stylesheets."""

from stratum.collation import Mode, collate
from stratum.collector import RuleCollector
from stratum.compiler import Compiler
from stratum.errors import (
    ConfigurationError,
    DanglingPairError,
    DuplicateIdentityError,
    InvalidBreakpointError,
    ManifestError,
    RegistryFrozenError,
    StratumError,
    UnknownBreakpointError,
)
from stratum.model import Breakpoint, BreakpointKind, OutputBlock, RuleFragment, WidthBound
from stratum.predicate import PredicateRenderer, render_predicate
from stratum.registry import BreakpointRegistry, default_registry

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # model
    "Breakpoint",
    "BreakpointKind",
    "WidthBound",
    "RuleFragment",
    "OutputBlock",
    # pipeline
    "BreakpointRegistry",
    "default_registry",
    "PredicateRenderer",
    "render_predicate",
    "RuleCollector",
    "Mode",
    "collate",
    "Compiler",
    # errors
    "StratumError",
    "ConfigurationError",
    "DuplicateIdentityError",
    "DanglingPairError",
    "RegistryFrozenError",
    "InvalidBreakpointError",
    "ManifestError",
    "UnknownBreakpointError",
]
