"""
Distances from one reference time step to every other time step.

Used by neighbour-counting estimators: the reference row itself is set to
+inf so that counting "points closer than epsilon" never counts the point
itself.
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from ..norms.core import NormLike, NormMode, current_norm_mode
from ..validation import ArrayLike, as_observations, check_reference_index, check_same_timesteps


def _norms_from_row(X: NDArray[np.float64], t: int, mode: NormMode) -> NDArray[np.float64]:
    """Norm from row t of X to every row of X, with +inf at t."""
    diff = X - X[t]
    if mode is NormMode.MAX_NORM:
        norms = np.max(np.abs(diff), axis=1)
    else:
        norms = np.sqrt(np.einsum("ij,ij->i", diff, diff))
        if mode is NormMode.EUCLIDEAN_NORMALISED:
            norms /= math.sqrt(X.shape[1])
    norms[t] = np.inf
    return norms


def norm_matrix(series_a: ArrayLike, series_b: ArrayLike,
                series_c: Optional[ArrayLike] = None, *, t: int,
                mode: Optional[NormLike] = None) -> NDArray[np.float64]:
    """
    Norms from time step ``t`` to every time step, one column per series.

    Parameters
    ----------
    series_a, series_b : array (n, d_a), (n, d_b)
        Parallel multivariate series sharing the same time steps
    series_c : array (n, d_c), optional
        Third parallel series
    t : int
        Reference time step
    mode : NormMode or str, optional
        Norm to use. Defaults to the registry's current mode.

    Returns
    -------
    norms : array (n, 2) or (n, 3)
        norms[r, k] is the norm in series k between rows t and r;
        row t is +inf in every column

    Raises
    ------
    ShapeMismatchError
        If the series have different numbers of time steps
    InvalidInputError
        If ``t`` is out of range or a series is empty

    Examples
    --------
    >>> norm_matrix([[0.0], [1.0], [3.0]], [[0.0], [2.0], [2.0]], t=0)
    array([[inf, inf],
           [ 1.,  2.],
           [ 3.,  2.]])
    """
    series = [as_observations(series_a, "series_a"), as_observations(series_b, "series_b")]
    if series_c is not None:
        series.append(as_observations(series_c, "series_c"))

    check_same_timesteps(*series)
    t = check_reference_index(t, series[0].shape[0])
    resolved = current_norm_mode(mode)

    return np.column_stack([_norms_from_row(X, t, resolved) for X in series])


def norm_matrix_per_variable(series: ArrayLike, t: int) -> NDArray[np.float64]:
    """
    Per-variable absolute differences from time step ``t``.

    Each column is treated as its own one-dimensional space, so the result
    holds marginal distances ``|series[t, v] - series[r, v]|`` rather than a
    norm over the whole row. Independent of the norm mode.

    Returns
    -------
    norms : array (n, d)
        Row t is +inf in every column
    """
    X = as_observations(series, "series")
    t = check_reference_index(t, X.shape[0])

    norms = np.abs(X - X[t])
    norms[t, :] = np.inf
    return norms
