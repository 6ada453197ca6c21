"""
Norm functions and the process-wide norm-mode registry.

Three norms are supported:

- ``EUCLIDEAN``: square root of the sum of squared differences
- ``EUCLIDEAN_NORMALISED``: Euclidean norm divided by sqrt(dimensions)
- ``MAX_NORM``: maximum absolute difference (Chebyshev distance)

Functions taking ``mode=None`` read the registry once per call. The registry
is not locked; callers changing it from several threads must serialise
those changes themselves, or bind a mode explicitly with
:class:`tsneighbors.engine.DistanceEngine`.
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Optional, Union

import numpy as np

from ..validation import ArrayLike, as_vector, check_same_length

logger = logging.getLogger(__name__)


class NormMode(Enum):
    """Norm selector. The value is the canonical string token."""

    EUCLIDEAN = "EUCLIDEAN"
    EUCLIDEAN_NORMALISED = "EUCLIDEAN_NORMALISED"
    MAX_NORM = "MAX_NORM"

    @property
    def code(self) -> int:
        """Integer code understood by the compiled kernels."""
        return _MODE_CODES[self]

    def __str__(self) -> str:
        return self.value


_MODE_CODES = {
    NormMode.EUCLIDEAN: 0,
    NormMode.EUCLIDEAN_NORMALISED: 1,
    NormMode.MAX_NORM: 2,
}
_CODE_MODES = {code: mode for mode, code in _MODE_CODES.items()}

NormLike = Union[NormMode, str, int]

_norm_in_use: NormMode = NormMode.EUCLIDEAN


def resolve_norm_mode(mode: NormLike) -> NormMode:
    """
    Turn a mode token or string into a :class:`NormMode`.

    String matching is case-insensitive but otherwise exact, so surrounding
    whitespace is not ignored. Integer codes (see :attr:`NormMode.code`) are
    accepted too. Unrecognised strings and codes fall back to ``EUCLIDEAN``
    without raising, so a misspelt name silently selects the Euclidean norm.
    """
    if isinstance(mode, NormMode):
        return mode
    if isinstance(mode, (int, np.integer)) and not isinstance(mode, (bool, np.bool_)):
        resolved = _CODE_MODES.get(int(mode))
        if resolved is None:
            logger.debug(f"Unrecognised norm code {mode!r}, using {NormMode.EUCLIDEAN}")
            return NormMode.EUCLIDEAN
        return resolved
    if not isinstance(mode, str):
        raise TypeError(f"Norm mode must be a NormMode, str or int code, got {type(mode).__name__}")

    try:
        return NormMode(mode.upper())
    except ValueError:
        logger.debug(f"Unrecognised norm mode {mode!r}, using {NormMode.EUCLIDEAN}")
        return NormMode.EUCLIDEAN


def set_norm_mode(mode: NormLike) -> None:
    """Set the norm used by calls that do not pass ``mode`` explicitly."""
    global _norm_in_use
    _norm_in_use = resolve_norm_mode(mode)
    logger.debug(f"Norm in use set to {_norm_in_use}")


def get_norm_mode() -> str:
    """Return the canonical token of the norm currently in use."""
    return _norm_in_use.value


def current_norm_mode(mode: Optional[NormLike] = None) -> NormMode:
    """Resolve ``mode``, reading the registry when it is None."""
    if mode is None:
        return _norm_in_use
    return resolve_norm_mode(mode)


# Names kept for callers used to the setNormToUse / getNormInUse vocabulary
set_norm_to_use = set_norm_mode
get_norm_in_use = get_norm_mode


def euclidean_norm(x1: ArrayLike, x2: ArrayLike) -> float:
    """Euclidean distance between two equal-length vectors."""
    a, b = as_vector(x1, "x1"), as_vector(x2, "x2")
    check_same_length(a, b)
    diff = a - b
    return float(np.sqrt(np.dot(diff, diff)))


def euclidean_normalised_norm(x1: ArrayLike, x2: ArrayLike) -> float:
    """Euclidean distance divided by the square root of the dimensionality."""
    a = as_vector(x1, "x1")
    distance = euclidean_norm(a, x2)
    if a.shape[0] == 0:
        return distance
    return distance / math.sqrt(a.shape[0])


def max_norm(x1: ArrayLike, x2: ArrayLike) -> float:
    """Maximum absolute per-dimension difference (Chebyshev distance)."""
    a, b = as_vector(x1, "x1"), as_vector(x2, "x2")
    check_same_length(a, b)
    if a.shape[0] == 0:
        return 0.0
    return float(np.max(np.abs(a - b)))


_NORM_FUNCTIONS = {
    NormMode.EUCLIDEAN: euclidean_norm,
    NormMode.EUCLIDEAN_NORMALISED: euclidean_normalised_norm,
    NormMode.MAX_NORM: max_norm,
}


def norm(x1: ArrayLike, x2: ArrayLike, mode: Optional[NormLike] = None) -> float:
    """
    Distance between ``x1`` and ``x2`` under ``mode``.

    Parameters
    ----------
    x1, x2 : array (d,)
        Vectors to compare
    mode : NormMode or str, optional
        Norm to use. Defaults to the registry's current mode.

    Returns
    -------
    float
        Non-negative distance

    Raises
    ------
    ShapeMismatchError
        If the vectors have different lengths
    """
    return _NORM_FUNCTIONS[current_norm_mode(mode)](x1, x2)


def joint_norm(x1: ArrayLike, y1: ArrayLike, x2: ArrayLike, y2: ArrayLike,
               mode: Optional[NormLike] = None) -> float:
    """
    Norm in the joint space of two paired vector spaces.

    Taken as the larger of ``norm(x1, x2)`` and ``norm(y1, y2)``, so a point
    is within epsilon in the joint space only if it is within epsilon in both.
    """
    resolved = current_norm_mode(mode)
    return max(norm(x1, x2, resolved), norm(y1, y2, resolved))


max_joint_space_norm = joint_norm
