"""Stratum CLI entry point: Click group with subcommands."""

import logging

import click

from stratum import __version__


@click.group()
@click.version_option(version=__version__, prog_name="stratum")
@click.option("-v", "--verbose", count=True, help="Log progress (-vv for debug detail)")
def cli(verbose: int) -> None:
    """Stratum - collate breakpoint-tagged rules into legacy and modern stylesheets."""
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from stratum.cli.compile import compile_  # noqa: E402
from stratum.cli.validate import validate  # noqa: E402
from stratum.cli.inspect import inspect  # noqa: E402

cli.add_command(compile_)
cli.add_command(validate)
cli.add_command(inspect)
