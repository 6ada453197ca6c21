"""
Configuration for tsneighbors.

Holds the process-wide fast/naive crossover threshold and the immutable
:class:`DistanceConfig` used to bind a norm and threshold to an engine.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np
import yaml

from .norms.core import NormMode, NormLike, resolve_norm_mode

logger = logging.getLogger(__name__)

# The fast min-distance path holds O(n^2) partial sums; above this many
# time steps the naive path is used instead.
DEFAULT_MAX_TIMESTEPS_FOR_FAST_DISTANCE = 2000

_max_timesteps_for_fast_distance = DEFAULT_MAX_TIMESTEPS_FOR_FAST_DISTANCE


def validate_fast_threshold(value: Any) -> int:
    """Check a fast/naive crossover value, returning it as an int."""
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValueError(f"max_timesteps_for_fast must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"max_timesteps_for_fast must be >= 0, got {value}")
    return int(value)


def get_max_timesteps_for_fast_distance() -> int:
    """Largest series length for which the fast min-distance path is used."""
    return _max_timesteps_for_fast_distance


def set_max_timesteps_for_fast_distance(value: int) -> None:
    """Change the fast/naive crossover for every caller in this process."""
    global _max_timesteps_for_fast_distance
    _max_timesteps_for_fast_distance = validate_fast_threshold(value)
    logger.debug(f"Fast min-distance threshold set to {value} time steps")


@dataclass(frozen=True)
class DistanceConfig:
    """Norm and algorithm settings bound to a :class:`DistanceEngine`."""
    norm: NormMode = NormMode.EUCLIDEAN
    max_timesteps_for_fast: int = DEFAULT_MAX_TIMESTEPS_FOR_FAST_DISTANCE

    def __post_init__(self):
        """Validate and normalise fields."""
        object.__setattr__(self, "norm", resolve_norm_mode(self.norm))
        object.__setattr__(
            self, "max_timesteps_for_fast", validate_fast_threshold(self.max_timesteps_for_fast)
        )

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> DistanceConfig:
        """Create DistanceConfig from a dictionary (e.g., from YAML).

        Keys may sit at the top level or under a ``distances`` section.
        """
        data = dict(data or {})
        if isinstance(data.get("distances"), dict):
            data = data["distances"]

        unknown = set(data) - {"norm", "max_timesteps_for_fast"}
        if unknown:
            raise ValueError(f"Unknown configuration keys: {sorted(unknown)}")

        return cls(
            norm=data.get("norm", NormMode.EUCLIDEAN),
            max_timesteps_for_fast=data.get(
                "max_timesteps_for_fast", DEFAULT_MAX_TIMESTEPS_FOR_FAST_DISTANCE
            ),
        )

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> DistanceConfig:
        """Load configuration from YAML file."""
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        with open(yaml_path, 'r') as f:
            data = yaml.safe_load(f)

        if data is not None and not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {yaml_path}")

        return cls.from_dict(data)

    def with_norm(self, norm: NormLike) -> DistanceConfig:
        """Copy of this configuration using another norm."""
        return DistanceConfig(norm=norm, max_timesteps_for_fast=self.max_timesteps_for_fast)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        data = asdict(self)
        data["norm"] = self.norm.value
        return data
