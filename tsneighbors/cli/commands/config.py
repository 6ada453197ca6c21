"""Configuration CLI commands."""

import sys
from pathlib import Path
from typing import Optional

import click
import yaml

from ..options import build_config, config_options


def register_config_commands(cli: click.Group) -> None:
    """Register configuration commands."""
    @cli.command("show-config", help="Print the resolved distance configuration as YAML")
    @config_options
    def show_config(config_path: Optional[Path], norm_name: Optional[str],
                    threshold: Optional[int]):
        try:
            config = build_config(config_path, norm_name, threshold)
        except (ValueError, OSError) as e:
            click.echo(f"Configuration error: {e}", err=True)
            sys.exit(1)

        click.echo(yaml.safe_dump({"distances": config.to_dict()}, sort_keys=False).rstrip())
