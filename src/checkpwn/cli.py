"""
checkpwn CLI - Main entry point for the command-line interface.
"""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from checkpwn import __version__

console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__, prog_name="checkpwn")
@click.option("--verbose", "-v", is_flag=True, help="Log requests and decisions")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """checkpwn - Have I Been Pwned lookups from the terminal

    Check accounts against breaches and pastes, and passwords against
    Pwned Passwords using k-anonymity.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )
    ctx.ensure_object(dict)
    ctx.obj["console"] = console


# Import and register subcommands
from checkpwn.hibp.cli import add_hibp_commands

add_hibp_commands(main)


if __name__ == "__main__":
    main()
