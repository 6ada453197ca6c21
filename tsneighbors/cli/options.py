"""Options shared by several CLI commands."""

from pathlib import Path
from typing import Optional

import click
import numpy as np

from ..config import DistanceConfig


def config_options(func):
    """Attach --config, --norm and --threshold options to a command."""
    func = click.option(
        "--threshold",
        type=int,
        default=None,
        help="Largest series length handled by the fast algorithm",
    )(func)
    func = click.option(
        "--norm",
        "norm_name",
        default=None,
        help="EUCLIDEAN, EUCLIDEAN_NORMALISED or MAX_NORM (unknown names mean EUCLIDEAN)",
    )(func)
    func = click.option(
        "--config",
        "config_path",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="YAML file with norm / max_timesteps_for_fast settings",
    )(func)
    return func


def build_config(config_path: Optional[Path], norm_name: Optional[str],
                 threshold: Optional[int]) -> DistanceConfig:
    """Load a config file (if any) and apply command-line overrides."""
    data = {}
    if config_path is not None:
        data = DistanceConfig.from_yaml(config_path).to_dict()
    if norm_name is not None:
        data["norm"] = norm_name
    if threshold is not None:
        data["max_timesteps_for_fast"] = threshold
    return DistanceConfig.from_dict(data)


def load_matrix(path: Path, delimiter: Optional[str]) -> np.ndarray:
    """Read a text matrix with one time step per line."""
    return np.loadtxt(path, delimiter=delimiter, ndmin=2)


def format_value(value: float) -> str:
    return repr(float(value))
