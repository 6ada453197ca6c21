"""
Nearest-neighbour distances and reference-row norm matrices.

Examples
--------
>>> import numpy as np
>>> from tsneighbors.distances import min_distances, norm_matrix
>>> X = np.random.randn(500, 3)
>>> eps = min_distances(X, mode="MAX_NORM")
>>> N = norm_matrix(X[:, :2], X[:, 2:], t=0)
"""

from .nearest_neighbour import min_distances, min_distances_naive, min_distances_fast
from .norm_matrix import norm_matrix, norm_matrix_per_variable

__all__ = [
    'min_distances',
    'min_distances_naive',
    'min_distances_fast',
    'norm_matrix',
    'norm_matrix_per_variable',
]
