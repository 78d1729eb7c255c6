"""Helpers shared by the CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from stratum.compiler import Compiler
from stratum.config import load_fragments, load_registry
from stratum.errors import StratumError
from stratum.events import logging_listener
from stratum.registry import BreakpointRegistry, default_registry


def registry_from(config_path: str | None) -> BreakpointRegistry:
    """Load the registry at *config_path*, or the preset scale when absent."""
    try:
        if config_path:
            return load_registry(Path(config_path))
        return default_registry()
    except StratumError as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(1)


def compiler_from(fragments_path: str, registry: BreakpointRegistry) -> Compiler:
    """Build a compiler with every fragment in the manifest submitted."""
    compiler = Compiler(registry)
    compiler.event_bus.on_all(logging_listener())
    try:
        for fragment in load_fragments(Path(fragments_path)):
            compiler.submit(fragment)
    except (StratumError, OSError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    return compiler
