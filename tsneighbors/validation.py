"""
Input checks applied at the boundary of every public operation.

Arrays are coerced to float64 here so the compiled kernels never see
ragged or wrongly-typed data.
"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np
from numpy.typing import NDArray

from .errors import InvalidInputError, ShapeMismatchError

ArrayLike = Union[NDArray[np.float64], Sequence[Sequence[float]], Sequence[float]]


def as_vector(x: ArrayLike, name: str = "x") -> NDArray[np.float64]:
    """Coerce ``x`` to a 1-D float64 array."""
    arr = np.asarray(x, dtype=np.float64)
    if arr.ndim != 1:
        raise ShapeMismatchError(f"{name} must be 1D, got shape {arr.shape}")
    return arr


def check_same_length(x1: NDArray[np.float64], x2: NDArray[np.float64],
                      names: tuple = ("x1", "x2")) -> None:
    """Raise ShapeMismatchError if two vectors differ in length."""
    if x1.shape[0] != x2.shape[0]:
        raise ShapeMismatchError(
            f"{names[0]} and {names[1]} must have same length, "
            f"got {x1.shape[0]} and {x2.shape[0]}"
        )


def as_observations(observations: ArrayLike, name: str = "observations") -> NDArray[np.float64]:
    """
    Coerce an observation matrix to a C-contiguous float64 array of shape (n, d).

    Nested sequences are accepted; every row must have the same length.
    A 1-D input is treated as a single-variable series of shape (n, 1).

    Raises
    ------
    InvalidInputError
        If the matrix has no rows or no columns.
    ShapeMismatchError
        If rows have unequal length, mix scalars with rows, or the input has
        more than 2 dimensions.
    """
    if not isinstance(observations, np.ndarray) or observations.dtype == object:
        rows = list(observations)
        if rows and all(np.ndim(row) == 1 for row in rows):
            lengths = {len(row) for row in rows}
            if len(lengths) > 1:
                raise ShapeMismatchError(
                    f"All rows of {name} must have the same length, got lengths {sorted(lengths)}"
                )
        observations = rows

    try:
        arr = np.asarray(observations, dtype=np.float64)
    except ValueError as e:
        raise ShapeMismatchError(f"{name} must be a rectangular numeric array: {e}") from e
    if arr.ndim == 1:
        arr = arr.reshape(-1, 1)
    elif arr.ndim != 2:
        raise ShapeMismatchError(f"{name} must be 2D array, got shape {arr.shape}")

    n, d = arr.shape
    if n == 0:
        raise InvalidInputError(f"{name} is empty")
    if d == 0:
        raise InvalidInputError(f"{name} has rows with no dimensions")

    return np.ascontiguousarray(arr)


def check_reference_index(t: int, n: int) -> int:
    """Validate a reference time index against a series of length ``n``."""
    if isinstance(t, (bool, np.bool_)) or not isinstance(t, (int, np.integer)):
        raise TypeError(f"Reference index must be an integer, got {type(t).__name__}")
    if t < 0 or t >= n:
        raise InvalidInputError(f"Reference index {t} out of range for {n} time steps")
    return int(t)


def check_same_timesteps(*series: NDArray[np.float64]) -> None:
    """Raise ShapeMismatchError unless all series have the same number of rows."""
    lengths = [s.shape[0] for s in series]
    if len(set(lengths)) > 1:
        raise ShapeMismatchError(
            f"Series must have the same number of time steps, got {lengths}"
        )
