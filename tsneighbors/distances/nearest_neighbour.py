"""
Distance from every observation to its nearest neighbour.

Two algorithms give identical results:

- naive: for each row scan every other row, abandoning a pair as soon as its
  partial distance reaches the best found so far. O(n) extra memory.
- fast: keeps the partial distance of every unordered pair together with how
  many dimensions it covers, so a pair abandoned while scanning one row can
  be resumed (or reused once complete) when scanning the other. O(n^2) memory.

:func:`min_distances` picks fast for series of up to
``get_max_timesteps_for_fast_distance()`` rows and naive above that.

All norms are reduced dimension by dimension into a non-decreasing
accumulator (sum of squares, or running max of absolute differences), which
is what makes early abandonment exact.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np
from numpy.typing import NDArray
from numba import njit

from ..config import get_max_timesteps_for_fast_distance, validate_fast_threshold
from ..errors import InvalidInputError
from ..norms.core import NormLike, NormMode, current_norm_mode
from ..validation import ArrayLike, as_observations

logger = logging.getLogger(__name__)

_EUCLIDEAN = NormMode.EUCLIDEAN.code
_EUCLIDEAN_NORMALISED = NormMode.EUCLIDEAN_NORMALISED.code
_MAX_NORM = NormMode.MAX_NORM.code


# ============================================================================
# Kernels
# ============================================================================

@njit(cache=True)
def _accumulate(acc: float, diff: float, mode: int) -> float:
    """Fold one component difference into a partial distance."""
    if mode == _MAX_NORM:
        a = abs(diff)
        # NaN must win so it propagates
        if not a <= acc:
            return a
        return acc
    return acc + diff * diff


@njit(cache=True)
def _finalise(acc: float, dimensions: int, mode: int) -> float:
    """Turn a complete accumulator into a distance."""
    if mode == _MAX_NORM:
        return acc
    if mode == _EUCLIDEAN_NORMALISED:
        return np.sqrt(acc) / np.sqrt(dimensions)
    return np.sqrt(acc)


@njit(cache=True)
def _pair_key(lo: int, hi: int) -> int:
    """Index of the unordered pair (lo, hi), lo < hi, in a packed triangle."""
    return hi * (hi - 1) // 2 + lo


@njit(cache=True)
def _min_distances_naive(X: np.ndarray, mode: int) -> np.ndarray:
    n, d = X.shape
    out = np.empty(n)

    for t in range(n):
        best = np.inf
        for t2 in range(n):
            if t == t2:
                continue
            acc = 0.0
            k = 0
            while k < d and acc < best:
                acc = _accumulate(acc, X[t, k] - X[t2, k], mode)
                k += 1
            if acc < best:
                best = acc
        out[t] = _finalise(best, d, mode)

    return out


@njit(cache=True)
def _min_distances_fast(X: np.ndarray, mode: int) -> np.ndarray:
    n, d = X.shape
    n_pairs = n * (n - 1) // 2
    # partial[key] covers the first progress[key] dimensions of the pair
    partial = np.zeros(n_pairs)
    progress = np.zeros(n_pairs, dtype=np.int32)
    out = np.empty(n)

    for t1 in range(n):
        best = np.inf

        # Earlier rows whose distance to t1 was already completed
        for t2 in range(t1):
            key = _pair_key(t2, t1)
            if progress[key] == d and partial[key] < best:
                best = partial[key]

        # Earlier rows that gave up on t1 part way; pick up where they stopped
        for t2 in range(t1):
            key = _pair_key(t2, t1)
            k = progress[key]
            if k == d:
                continue
            acc = partial[key]
            while k < d and acc < best:
                acc = _accumulate(acc, X[t1, k] - X[t2, k], mode)
                k += 1
            partial[key] = acc
            progress[key] = k
            if acc < best:
                best = acc

        # Later rows, never visited yet
        for t2 in range(t1 + 1, n):
            key = _pair_key(t1, t2)
            acc = 0.0
            k = 0
            while k < d and acc < best:
                acc = _accumulate(acc, X[t1, k] - X[t2, k], mode)
                k += 1
            partial[key] = acc
            progress[key] = k
            if acc < best:
                best = acc

        out[t1] = _finalise(best, d, mode)

    return out


# ============================================================================
# Public API
# ============================================================================

def _prepare(observations: ArrayLike) -> NDArray[np.float64]:
    X = as_observations(observations)
    if X.shape[0] < 2:
        raise InvalidInputError(
            f"At least 2 observations are needed to find a nearest neighbour, got {X.shape[0]}"
        )
    return X


def min_distances_naive(observations: ArrayLike,
                        mode: Optional[NormLike] = None) -> NDArray[np.float64]:
    """
    Nearest-neighbour distance of every row, without a pairwise cache.

    Parameters
    ----------
    observations : array (n, d)
        One row per time step
    mode : NormMode or str, optional
        Norm to use. Defaults to the registry's current mode.

    Returns
    -------
    distances : array (n,)
        distances[t] is the smallest distance from row t to any other row

    Raises
    ------
    InvalidInputError
        If there are fewer than 2 rows or no columns
    ShapeMismatchError
        If rows have unequal lengths
    """
    X = _prepare(observations)
    resolved = current_norm_mode(mode)
    return _min_distances_naive(X, resolved.code)


def min_distances_fast(observations: ArrayLike,
                       mode: Optional[NormLike] = None) -> NDArray[np.float64]:
    """
    Nearest-neighbour distance of every row, reusing partial pair distances.

    Same contract as :func:`min_distances_naive`, but allocates
    n(n-1)/2 cached partial sums for the duration of the call.
    """
    X = _prepare(observations)
    resolved = current_norm_mode(mode)
    return _min_distances_fast(X, resolved.code)


def min_distances(observations: ArrayLike, mode: Optional[NormLike] = None,
                  max_timesteps_for_fast: Optional[int] = None) -> NDArray[np.float64]:
    """
    Nearest-neighbour distance of every row, choosing the algorithm by size.

    Parameters
    ----------
    observations : array (n, d)
        One row per time step
    mode : NormMode or str, optional
        Norm to use. Defaults to the registry's current mode.
    max_timesteps_for_fast : int, optional
        Use the fast algorithm when n is at most this. Defaults to
        ``get_max_timesteps_for_fast_distance()``.

    Returns
    -------
    distances : array (n,)

    Examples
    --------
    >>> min_distances([[0, 0], [3, 4], [6, 8]])
    array([5., 5., 5.])
    """
    X = _prepare(observations)
    resolved = current_norm_mode(mode)
    if max_timesteps_for_fast is None:
        threshold = get_max_timesteps_for_fast_distance()
    else:
        threshold = validate_fast_threshold(max_timesteps_for_fast)

    n, d = X.shape
    if n <= threshold:
        logger.debug(f"Fast min distances for {n} time steps x {d} dims ({resolved})")
        return _min_distances_fast(X, resolved.code)

    logger.debug(f"Naive min distances for {n} time steps x {d} dims ({resolved}), "
                 f"above fast threshold {threshold}")
    return _min_distances_naive(X, resolved.code)
