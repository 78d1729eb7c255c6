"""CLI command: stratum validate -- check a fragment manifest against the registry."""

from __future__ import annotations

import sys

import click

from stratum.cli.common import compiler_from, registry_from
from stratum.model.diagnostic import Severity
from stratum.validation import validate as run_validate


@click.command()
@click.argument("fragments", type=click.Path(exists=True))
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True),
    default=None,
    help="Breakpoint registry JSON (defaults to the built-in scale)",
)
def validate(fragments: str, config_path: str | None) -> None:
    """Submit every fragment and report authoring diagnostics.

    Unknown breakpoints fail immediately.  Otherwise prints diagnostics and
    exits with code 1 only if any are errors.
    """
    registry = registry_from(config_path)
    compiler = compiler_from(fragments, registry)

    diagnostics = run_validate(compiler.collector)

    if not diagnostics:
        click.echo(f"OK: {len(compiler.collector)} fragment(s), 0 diagnostics")
        sys.exit(0)

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]
    infos = [d for d in diagnostics if d.severity is Severity.INFO]

    for diag in diagnostics:
        click.echo(str(diag))

    click.echo()
    click.echo(
        f"Summary: {len(errors)} error(s), {len(warnings)} warning(s), {len(infos)} info"
    )

    if errors:
        sys.exit(1)
    sys.exit(0)
