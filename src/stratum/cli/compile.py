"""CLI command: stratum compile -- collate fragments into legacy/modern stylesheets."""

from __future__ import annotations

from pathlib import Path

import click

from stratum.cli.common import compiler_from, registry_from
from stratum.collation import Mode
from stratum.config import CompilerConfig


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text + "\n", encoding="utf-8")


@click.command("compile")
@click.argument("fragments", type=click.Path(exists=True))
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True),
    default=None,
    help="Breakpoint registry JSON (defaults to the built-in scale)",
)
@click.option(
    "--mode",
    type=click.Choice(["modern", "legacy", "both"]),
    default="modern",
    show_default=True,
    help="Which stylesheet to produce",
)
@click.option("-o", "--output", default=None, help="Output file (single mode only)")
@click.option(
    "--output-dir", default=".", help="Directory for legacy.css and modern.css (mode=both)"
)
def compile_(
    fragments: str,
    config_path: str | None,
    mode: str,
    output: str | None,
    output_dir: str,
) -> None:
    """Compile a fragment manifest into grouped stylesheet output.

    Universal rules lead; breakpoint blocks follow in rank order.  Legacy
    output is flattened with no @media wrappers.
    """
    config = CompilerConfig(
        registry_path=config_path, mode=mode, output=output, output_dir=output_dir
    )
    if config.mode == "both" and config.output:
        raise click.UsageError("--output cannot be combined with --mode both; use --output-dir")

    registry = registry_from(config.registry_path)
    compiler = compiler_from(fragments, registry)

    if config.mode == "both":
        out_dir = Path(config.output_dir)
        legacy_path = out_dir / config.legacy_filename
        modern_path = out_dir / config.modern_filename
        _write(legacy_path, compiler.compile(Mode.LEGACY))
        _write(modern_path, compiler.compile(Mode.MODERN))
        click.echo(f"Wrote {legacy_path}")
        click.echo(f"Wrote {modern_path}")
        return

    text = compiler.compile(Mode(config.mode))
    if config.output:
        _write(Path(config.output), text)
        click.echo(f"Wrote {config.output}")
    else:
        click.echo(text)
