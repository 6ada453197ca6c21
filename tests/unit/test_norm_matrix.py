"""Unit tests for reference-row norm matrices."""
import numpy as np
import pytest

from tsneighbors.distances import norm_matrix, norm_matrix_per_variable
from tsneighbors.errors import InvalidInputError, ShapeMismatchError
from tsneighbors.norms import NormMode, norm, set_norm_mode


@pytest.fixture
def paired_series(rng):
    """Source, target and conditional series sharing 40 time steps."""
    return (
        rng.standard_normal((40, 3)),
        rng.standard_normal((40, 2)),
        rng.standard_normal((40, 1)),
    )


class TestNormMatrix:
    """Two and three series."""

    def test_two_series_shape_and_sentinel(self, paired_series):
        a, b, _ = paired_series
        N = norm_matrix(a, b, t=7)
        assert N.shape == (40, 2)
        assert np.all(np.isinf(N[7]))
        others = np.delete(N, 7, axis=0)
        assert np.all(np.isfinite(others))
        assert np.all(others >= 0)

    def test_three_series_shape_and_sentinel(self, paired_series):
        N = norm_matrix(*paired_series, t=0)
        assert N.shape == (40, 3)
        assert np.all(N[0] == np.inf)
        assert np.all(np.isfinite(N[1:]))

    def test_columns_match_norm(self, paired_series, mode):
        a, b, c = paired_series
        t = 12
        N = norm_matrix(a, b, c, t=t, mode=mode)
        for r in (0, 5, 39):
            assert np.isclose(N[r, 0], norm(a[t], a[r], mode))
            assert np.isclose(N[r, 1], norm(b[t], b[r], mode))
            assert np.isclose(N[r, 2], norm(c[t], c[r], mode))

    def test_small_example(self):
        N = norm_matrix([[0.0], [1.0], [3.0]], [[0.0, 0.0], [3.0, 4.0], [1.0, 5.0]], t=0)
        assert np.array_equal(N, [[np.inf, np.inf], [1.0, 5.0], [3.0, np.sqrt(26.0)]])

    def test_follows_registry(self):
        set_norm_mode("MAX_NORM")
        N = norm_matrix([[0.0, 0.0], [1.0, 5.0]], [[0.0], [2.0]], t=1)
        assert np.array_equal(N, [[5.0, 2.0], [np.inf, np.inf]])

    def test_mismatched_lengths(self, paired_series):
        a, b, _ = paired_series
        with pytest.raises(ShapeMismatchError):
            norm_matrix(a, b[:-1], t=0)

    def test_mismatched_third_series(self, paired_series):
        a, b, c = paired_series
        with pytest.raises(ShapeMismatchError):
            norm_matrix(a, b, c[:10], t=0)

    @pytest.mark.parametrize("t", [-1, 40, 100])
    def test_index_out_of_range(self, paired_series, t):
        a, b, _ = paired_series
        with pytest.raises(InvalidInputError):
            norm_matrix(a, b, t=t)

    def test_index_must_be_integer(self, paired_series):
        a, b, _ = paired_series
        with pytest.raises(TypeError):
            norm_matrix(a, b, t=1.5)


class TestNormMatrixPerVariable:
    """Marginal distances of a single multivariate series."""

    def test_marginal_differences(self):
        X = np.array([[0.0, 10.0], [1.0, 7.0], [-2.0, 10.5]])
        N = norm_matrix_per_variable(X, 0)
        assert np.array_equal(N, [[np.inf, np.inf], [1.0, 3.0], [2.0, 0.5]])

    def test_is_not_a_joint_norm(self):
        X = np.array([[0.0, 0.0], [3.0, 4.0]])
        N = norm_matrix_per_variable(X, 1)
        assert np.array_equal(N[0], [3.0, 4.0])

    def test_ignores_norm_mode(self, rng):
        X = rng.standard_normal((20, 4))
        expected = norm_matrix_per_variable(X, 3)
        set_norm_mode(NormMode.EUCLIDEAN_NORMALISED)
        assert np.array_equal(norm_matrix_per_variable(X, 3), expected)

    def test_sentinel(self, rng):
        X = rng.standard_normal((15, 3))
        N = norm_matrix_per_variable(X, 14)
        assert N.shape == (15, 3)
        assert np.all(np.isinf(N[14]))
        assert np.all(N[:14] >= 0)

    def test_univariate_input(self):
        N = norm_matrix_per_variable([1.0, 4.0, 2.0], 2)
        assert N.shape == (3, 1)
        assert np.array_equal(N[:, 0], [1.0, 2.0, np.inf])

    def test_index_out_of_range(self):
        with pytest.raises(InvalidInputError):
            norm_matrix_per_variable([[1.0, 2.0]], 1)

    def test_ragged_rows(self):
        with pytest.raises(ShapeMismatchError):
            norm_matrix_per_variable([[1.0, 2.0], [3.0]], 0)
