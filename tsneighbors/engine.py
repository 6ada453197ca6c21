"""Distance engine bound to a fixed configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from .config import DistanceConfig
from .distances.nearest_neighbour import min_distances, min_distances_fast, min_distances_naive
from .distances.norm_matrix import norm_matrix, norm_matrix_per_variable
from .norms.core import joint_norm, norm
from .validation import ArrayLike


class DistanceEngine:
    """
    Stateless front-end that always uses the norm and threshold of its config.

    Unlike the module-level functions, an engine never reads the process-wide
    registry, so engines with different norms can be used side by side,
    including from several threads.

    Examples
    --------
    >>> engine = DistanceEngine(DistanceConfig(norm="MAX_NORM"))
    >>> engine.min_distances([[0, 0], [1, 5]])
    array([5., 5.])
    """

    def __init__(self, config: Optional[DistanceConfig] = None):
        self._config = config if config is not None else DistanceConfig()

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> DistanceEngine:
        return cls(DistanceConfig.from_yaml(yaml_path))

    @property
    def config(self) -> DistanceConfig:
        return self._config

    def __repr__(self) -> str:
        return f"DistanceEngine(config={self._config!r})"

    def norm(self, x1: ArrayLike, x2: ArrayLike) -> float:
        return norm(x1, x2, self._config.norm)

    def joint_norm(self, x1: ArrayLike, y1: ArrayLike, x2: ArrayLike, y2: ArrayLike) -> float:
        return joint_norm(x1, y1, x2, y2, self._config.norm)

    def min_distances(self, observations: ArrayLike) -> NDArray[np.float64]:
        return min_distances(observations, self._config.norm,
                             self._config.max_timesteps_for_fast)

    def min_distances_naive(self, observations: ArrayLike) -> NDArray[np.float64]:
        return min_distances_naive(observations, self._config.norm)

    def min_distances_fast(self, observations: ArrayLike) -> NDArray[np.float64]:
        return min_distances_fast(observations, self._config.norm)

    def norm_matrix(self, series_a: ArrayLike, series_b: ArrayLike,
                    series_c: Optional[ArrayLike] = None, *, t: int) -> NDArray[np.float64]:
        return norm_matrix(series_a, series_b, series_c, t=t, mode=self._config.norm)

    def norm_matrix_per_variable(self, series: ArrayLike, t: int) -> NDArray[np.float64]:
        return norm_matrix_per_variable(series, t)
