"""CLI command: stratum inspect -- display the breakpoint registry."""

from __future__ import annotations

import click

from stratum.cli.common import registry_from
from stratum.predicate import PredicateRenderer


@click.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True),
    default=None,
    help="Breakpoint registry JSON (defaults to the built-in scale)",
)
@click.option("--predicates/--no-predicates", default=True, help="Show media predicates")
def inspect(config_path: str | None, predicates: bool) -> None:
    """Display breakpoints in rank order with legacy eligibility."""
    registry = registry_from(config_path)
    renderer = PredicateRenderer(registry)

    cutoff = registry.cutoff_rank
    click.echo(f"Breakpoints: {len(registry)}")
    click.echo(f"Legacy cutoff: {'none' if cutoff is None else cutoff}")
    click.echo()

    for bp in registry.ordered_all():
        parts = [f"  {bp.rank:>3}  {bp.name}", f"kind={bp.kind.value}"]
        if bp.paired_with:
            parts.append(f"pair={bp.paired_with}")
        parts.append("legacy" if registry.is_legacy_eligible(bp) else "modern-only")
        click.echo("  ".join(parts))
        if predicates:
            click.echo(f"       @media {renderer.render(bp)}")
