"""boxplay CLI entry point: Click group with subcommands."""

import logging

import click

from boxplay import __version__


@click.group()
@click.version_option(version=__version__, prog_name="boxplay")
@click.option("-v", "--verbose", is_flag=True, help="Log engine activity to stderr.")
def cli(verbose: bool) -> None:
    """boxplay - editing engine for the box-layout playground."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Import and register subcommands
from boxplay.cli.inspect import inspect  # noqa: E402
from boxplay.cli.validate import validate  # noqa: E402

cli.add_command(inspect)
cli.add_command(validate)
