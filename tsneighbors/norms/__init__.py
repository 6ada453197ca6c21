"""
Norms between vectors and the norm-mode registry.
"""

from .core import (
    NormMode,
    resolve_norm_mode,
    set_norm_mode,
    get_norm_mode,
    current_norm_mode,
    set_norm_to_use,
    get_norm_in_use,
    euclidean_norm,
    euclidean_normalised_norm,
    max_norm,
    norm,
    joint_norm,
    max_joint_space_norm,
)

__all__ = [
    "NormMode",
    "resolve_norm_mode",
    "set_norm_mode",
    "get_norm_mode",
    "current_norm_mode",
    "set_norm_to_use",
    "get_norm_in_use",
    "euclidean_norm",
    "euclidean_normalised_norm",
    "max_norm",
    "norm",
    "joint_norm",
    "max_joint_space_norm",
]
