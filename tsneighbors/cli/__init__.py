"""
Command-line interface for tsneighbors.

This module provides the main entry point for the tsneighbors CLI.
"""

import click
import importlib
import logging
import pkgutil
from pathlib import Path


# Create the main Click group
@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="tsneighbors")
@click.option("-v", "--verbose", is_flag=True, help="Log debug messages to stderr")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Nearest-neighbour distances for multivariate time series."""
    ctx.ensure_object(dict)
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Dynamically load all command modules
def register_commands() -> None:
    """Dynamically discover and register all command modules."""
    commands_pkg = Path(__file__).parent / "commands"

    for _, module_name, _ in pkgutil.iter_modules([str(commands_pkg)]):
        module = importlib.import_module(f"tsneighbors.cli.commands.{module_name}")

        # Look for register_*_commands functions and call them
        for name, func in module.__dict__.items():
            if name.startswith("register_") and name.endswith("_commands"):
                func(cli)


register_commands()


def main() -> None:
    """Main entry point for the CLI."""
    cli(obj={})
