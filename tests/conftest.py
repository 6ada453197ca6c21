"""
Test configuration and fixtures for pytest.

This file contains fixtures and configuration that will be available to all tests.
"""
import numpy as np
import pytest

from tsneighbors.config import (
    DEFAULT_MAX_TIMESTEPS_FOR_FAST_DISTANCE,
    set_max_timesteps_for_fast_distance,
)
from tsneighbors.norms import NormMode, set_norm_mode

ALL_MODES = list(NormMode)


@pytest.fixture(autouse=True)
def reset_registries():
    """Restore the process-wide norm and fast-path threshold after each test."""
    set_norm_mode(NormMode.EUCLIDEAN)
    set_max_timesteps_for_fast_distance(DEFAULT_MAX_TIMESTEPS_FOR_FAST_DISTANCE)
    yield
    set_norm_mode(NormMode.EUCLIDEAN)
    set_max_timesteps_for_fast_distance(DEFAULT_MAX_TIMESTEPS_FOR_FAST_DISTANCE)


@pytest.fixture
def rng():
    """Seeded random generator."""
    return np.random.default_rng(42)


@pytest.fixture
def observations(rng):
    """A 3-dimensional embedding with 120 time steps."""
    return rng.standard_normal((120, 3))


@pytest.fixture
def three_points():
    """Points on a line, 5 apart under the Euclidean norm."""
    return np.array([[0.0, 0.0], [3.0, 4.0], [6.0, 8.0]])


@pytest.fixture(params=ALL_MODES, ids=lambda m: m.value)
def mode(request):
    """Every supported norm mode."""
    return request.param
