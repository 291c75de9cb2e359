"""tabfluid command-line interface.

Entry point for the ``tabfluid`` CLI tool.
"""

from __future__ import annotations

import logging

import click
from rich.console import Console

from tabfluid import __app_name__, __version__

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name=__app_name__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """tabfluid — real-fluid states from a tabulated (rho, e) model."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["console"] = console


# Import and register sub-commands
from tabfluid.cli.info_cmd import info  # noqa: E402
from tabfluid.cli.state_cmd import state  # noqa: E402

cli.add_command(info)
cli.add_command(state)


def main() -> None:
    """Convenience wrapper for entry-point scripts."""
    cli()
