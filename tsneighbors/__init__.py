"""
tsneighbors: nearest-neighbour distances for multivariate time series

Building blocks for nearest-neighbour entropy and mutual-information
estimators: configurable norms, minimum distance to the nearest other
observation, and per-reference-step norm matrices.
"""

from .errors import InvalidInputError, ShapeMismatchError
from .norms import (
    NormMode,
    norm,
    joint_norm,
    max_joint_space_norm,
    euclidean_norm,
    euclidean_normalised_norm,
    max_norm,
    set_norm_mode,
    get_norm_mode,
    set_norm_to_use,
    get_norm_in_use,
)
from .distances import (
    min_distances,
    min_distances_naive,
    min_distances_fast,
    norm_matrix,
    norm_matrix_per_variable,
)
from .config import (
    DistanceConfig,
    DEFAULT_MAX_TIMESTEPS_FOR_FAST_DISTANCE,
    get_max_timesteps_for_fast_distance,
    set_max_timesteps_for_fast_distance,
)
from .engine import DistanceEngine

__version__ = "0.1.0"

__all__ = [
    'InvalidInputError',
    'ShapeMismatchError',
    'NormMode',
    'norm',
    'joint_norm',
    'max_joint_space_norm',
    'euclidean_norm',
    'euclidean_normalised_norm',
    'max_norm',
    'set_norm_mode',
    'get_norm_mode',
    'set_norm_to_use',
    'get_norm_in_use',
    'min_distances',
    'min_distances_naive',
    'min_distances_fast',
    'norm_matrix',
    'norm_matrix_per_variable',
    'DistanceConfig',
    'DEFAULT_MAX_TIMESTEPS_FOR_FAST_DISTANCE',
    'get_max_timesteps_for_fast_distance',
    'set_max_timesteps_for_fast_distance',
    'DistanceEngine',
]
