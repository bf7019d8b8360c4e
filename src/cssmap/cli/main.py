"""cssmap CLI entry point: Click group with subcommands."""

import logging

import click

from cssmap import __version__


@click.group()
@click.version_option(version=__version__, prog_name="cssmap")
@click.option("-v", "--verbose", is_flag=True, help="Log parser activity to stderr.")
def cli(verbose: bool) -> None:
    """cssmap - parse stylesheets into selector/declaration maps."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


# Import and register subcommands
from cssmap.cli.parse import parse  # noqa: E402
from cssmap.cli.validate import validate  # noqa: E402
from cssmap.cli.inspect import inspect  # noqa: E402
from cssmap.cli.extract import comments, tokens  # noqa: E402

cli.add_command(parse)
cli.add_command(validate)
cli.add_command(inspect)
cli.add_command(comments)
cli.add_command(tokens)
