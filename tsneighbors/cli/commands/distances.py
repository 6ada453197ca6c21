"""Distance computation CLI commands."""

import sys
from pathlib import Path
from typing import Optional, Tuple

import click

from ...engine import DistanceEngine
from ..options import build_config, config_options, format_value, load_matrix

_ALGORITHMS = ("auto", "naive", "fast")


def register_distances_commands(cli: click.Group) -> None:
    """Register distance-related commands."""
    @cli.command("min-distances", help="Distance from each time step to its nearest neighbour")
    @click.argument("data", type=click.Path(exists=True, dir_okay=False, path_type=Path))
    @click.option(
        "--algorithm",
        type=click.Choice(_ALGORITHMS),
        default="auto",
        show_default=True,
        help="Force the naive or fast algorithm",
    )
    @click.option("--delimiter", default=None, help="Column delimiter (default: whitespace)")
    @config_options
    def min_distances_cmd(data: Path, algorithm: str, delimiter: Optional[str],
                          config_path: Optional[Path], norm_name: Optional[str],
                          threshold: Optional[int]):
        """Print one nearest-neighbour distance per input row.

        Examples:

        \b
            tsneighbors min-distances embedding.txt
            tsneighbors min-distances embedding.csv --delimiter , --norm max_norm
        """
        try:
            engine = DistanceEngine(build_config(config_path, norm_name, threshold))
            X = load_matrix(data, delimiter)
            compute = {
                "auto": engine.min_distances,
                "naive": engine.min_distances_naive,
                "fast": engine.min_distances_fast,
            }[algorithm]
            distances = compute(X)
        except (ValueError, OSError) as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

        for value in distances:
            click.echo(format_value(value))

    @cli.command("norm-matrix", help="Norms from one time step to every other time step")
    @click.argument("data", nargs=-1, required=True,
                    type=click.Path(exists=True, dir_okay=False, path_type=Path))
    @click.option("--index", "-t", "t", type=int, required=True, help="Reference time step")
    @click.option("--delimiter", default=None, help="Column delimiter (default: whitespace)")
    @config_options
    def norm_matrix_cmd(data: Tuple[Path, ...], t: int, delimiter: Optional[str],
                        config_path: Optional[Path], norm_name: Optional[str],
                        threshold: Optional[int]):
        """Print the norm matrix for reference time step T.

        With one file each column is compared on its own (absolute
        differences); with two or three files there is one column per file.

        \b
            tsneighbors norm-matrix series.txt -t 10
            tsneighbors norm-matrix source.txt target.txt -t 10 --norm MAX_NORM
        """
        if len(data) > 3:
            click.echo("Error: at most three series can be compared", err=True)
            sys.exit(1)

        try:
            engine = DistanceEngine(build_config(config_path, norm_name, threshold))
            series = [load_matrix(path, delimiter) for path in data]
            if len(series) == 1:
                norms = engine.norm_matrix_per_variable(series[0], t)
            else:
                norms = engine.norm_matrix(*series, t=t)
        except (ValueError, OSError) as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

        for row in norms:
            click.echo("\t".join(format_value(v) for v in row))
