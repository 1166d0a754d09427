# ABOUTME: CLI package for comicshelf, built on Click.
# ABOUTME: Defines the root command group, logging setup, and registers subcommands.

import logging

import click
from rich.logging import RichHandler

from comicshelf.cli.commands import cover_cmd, inspect_cmd, scan_cmd


def _configure_logging(verbose: bool) -> None:
    """Route library logging through rich; warnings by default, debug with -v."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
    )


@click.group()
@click.version_option(package_name="comicshelf")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """comicshelf - inspect comic archives and pull their covers."""
    _configure_logging(verbose)


cli.add_command(inspect_cmd.inspect)
cli.add_command(cover_cmd.cover)
cli.add_command(scan_cmd.scan)
