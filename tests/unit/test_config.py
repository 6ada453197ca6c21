"""Unit tests for configuration loading and the fast-path threshold."""
import pytest

from tsneighbors.config import (
    DEFAULT_MAX_TIMESTEPS_FOR_FAST_DISTANCE,
    DistanceConfig,
    get_max_timesteps_for_fast_distance,
    set_max_timesteps_for_fast_distance,
)
from tsneighbors.norms import NormMode


class TestThreshold:
    """Process-wide fast/naive crossover."""

    def test_default(self):
        assert DEFAULT_MAX_TIMESTEPS_FOR_FAST_DISTANCE == 2000
        assert get_max_timesteps_for_fast_distance() == 2000

    def test_set(self):
        set_max_timesteps_for_fast_distance(50)
        assert get_max_timesteps_for_fast_distance() == 50

    @pytest.mark.parametrize("value", [-1, 2.5, "100", True])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            set_max_timesteps_for_fast_distance(value)
        assert get_max_timesteps_for_fast_distance() == 2000


class TestDistanceConfig:
    """Immutable configuration object."""

    def test_defaults(self):
        config = DistanceConfig()
        assert config.norm is NormMode.EUCLIDEAN
        assert config.max_timesteps_for_fast == 2000

    def test_string_norm_resolved(self):
        assert DistanceConfig(norm="max_norm").norm is NormMode.MAX_NORM

    def test_unknown_norm_falls_back(self):
        assert DistanceConfig(norm="manhattan").norm is NormMode.EUCLIDEAN

    def test_frozen(self):
        config = DistanceConfig()
        with pytest.raises(AttributeError):
            config.norm = NormMode.MAX_NORM

    def test_invalid_threshold(self):
        with pytest.raises(ValueError):
            DistanceConfig(max_timesteps_for_fast=-5)

    def test_with_norm(self):
        config = DistanceConfig(max_timesteps_for_fast=10).with_norm("EUCLIDEAN_NORMALISED")
        assert config.norm is NormMode.EUCLIDEAN_NORMALISED
        assert config.max_timesteps_for_fast == 10

    def test_dict_roundtrip(self):
        config = DistanceConfig(norm=NormMode.MAX_NORM, max_timesteps_for_fast=300)
        assert config.to_dict() == {"norm": "MAX_NORM", "max_timesteps_for_fast": 300}
        assert DistanceConfig.from_dict(config.to_dict()) == config

    def test_from_dict_section(self):
        config = DistanceConfig.from_dict({"distances": {"norm": "max_norm"}})
        assert config.norm is NormMode.MAX_NORM
        assert config.max_timesteps_for_fast == 2000

    def test_from_dict_unknown_key(self):
        with pytest.raises(ValueError, match="Unknown configuration keys"):
            DistanceConfig.from_dict({"norm": "EUCLIDEAN", "metric": "cosine"})

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "distances.yaml"
        path.write_text("distances:\n  norm: euclidean_normalised\n  max_timesteps_for_fast: 750\n")
        config = DistanceConfig.from_yaml(path)
        assert config.norm is NormMode.EUCLIDEAN_NORMALISED
        assert config.max_timesteps_for_fast == 750

    def test_from_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert DistanceConfig.from_yaml(path) == DistanceConfig()

    def test_from_yaml_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- EUCLIDEAN\n")
        with pytest.raises(ValueError):
            DistanceConfig.from_yaml(path)

    def test_missing_yaml(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            DistanceConfig.from_yaml(tmp_path / "nope.yaml")
