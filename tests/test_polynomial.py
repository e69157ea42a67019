"""Tests for Polynomial construction, coefficients and evaluation."""

from __future__ import annotations

import pickle

import numpy as np
import pytest

from polytraj import K_MAX_N, Polynomial


def _naive_derivative_value(coefficients, t, derivative):
    """Differentiate term by term with numpy.polynomial as an independent reference."""
    from numpy.polynomial import polynomial as P

    coeffs = np.asarray(coefficients, dtype=float)
    if derivative > 0:
        coeffs = P.polyder(coeffs, derivative)
    return float(P.polyval(t, coeffs))


class TestConstruction:
    """Tests for Polynomial.__init__ validation and properties."""

    def test_properties(self, cubic):
        assert cubic.N == 4
        assert cubic.degree == 3
        np.testing.assert_array_equal(cubic.coefficients, [0.0, 0.0, 0.0, 1.0])

    def test_coefficients_copied(self):
        data = np.array([1.0, 2.0, 3.0])
        p = Polynomial(data)
        data[0] = 100.0
        assert p.coefficients[0] == 1.0

    def test_coefficients_read_only(self, cubic):
        with pytest.raises(ValueError):
            cubic.coefficients[0] = 1.0

    def test_max_size_accepted(self):
        p = Polynomial(np.ones(K_MAX_N))
        assert p.N == K_MAX_N

    def test_too_many_coefficients_raises(self):
        with pytest.raises(ValueError, match="Number of coefficients"):
            Polynomial(np.ones(K_MAX_N + 1))

    def test_empty_raises(self):
        with pytest.raises(ValueError):
            Polynomial([])

    def test_2d_raises(self):
        with pytest.raises(ValueError):
            Polynomial([[1.0, 2.0], [3.0, 4.0]])

    def test_non_finite_raises(self):
        with pytest.raises(ValueError):
            Polynomial([1.0, float("nan")])
        with pytest.raises(ValueError):
            Polynomial([float("inf"), 1.0])


class TestGetCoefficients:
    """Tests for Polynomial.get_coefficients()."""

    def test_derivative_zero_is_identity(self, snap_segment):
        np.testing.assert_array_equal(snap_segment.get_coefficients(0), snap_segment.coefficients)

    def test_derivative_zero_returns_copy(self, cubic):
        coeffs = cubic.get_coefficients(0)
        coeffs[0] = 7.0
        assert cubic.coefficients[0] == 0.0

    def test_cubic_derivatives(self, cubic):
        np.testing.assert_array_equal(cubic.get_coefficients(1), [0.0, 0.0, 3.0, 0.0])
        np.testing.assert_array_equal(cubic.get_coefficients(2), [0.0, 6.0, 0.0, 0.0])
        np.testing.assert_array_equal(cubic.get_coefficients(3), [6.0, 0.0, 0.0, 0.0])

    @pytest.mark.parametrize("derivative", [1, 2, 3, 5, 8])
    def test_matches_polyder(self, snap_segment, derivative):
        from numpy.polynomial import polynomial as P

        result = snap_segment.get_coefficients(derivative)
        expected = P.polyder(snap_segment.coefficients, derivative)
        assert result.shape == (snap_segment.N,)
        np.testing.assert_allclose(result[: len(expected)], expected, rtol=1e-14)
        np.testing.assert_array_equal(result[snap_segment.N - derivative:], np.zeros(derivative))

    @pytest.mark.parametrize("derivative", [4, 5, 20])
    def test_beyond_degree_is_zero(self, cubic, derivative):
        np.testing.assert_array_equal(cubic.get_coefficients(derivative), np.zeros(4))

    def test_negative_derivative_raises(self, cubic):
        with pytest.raises(ValueError):
            cubic.get_coefficients(-1)

    def test_non_integer_derivative_raises(self, cubic):
        with pytest.raises(TypeError):
            cubic.get_coefficients(1.5)


class TestEvaluate:
    """Tests for Polynomial.evaluate() and friends."""

    def test_cubic_values(self, cubic):
        assert cubic.evaluate(2.0) == 8.0
        assert cubic.evaluate(2.0, 1) == 12.0
        assert cubic.evaluate(2.0, 2) == 12.0
        assert cubic.evaluate(2.0, 3) == 6.0
        assert cubic.evaluate(-1.0, 1) == 3.0

    def test_beyond_degree_is_zero(self, cubic):
        assert cubic.evaluate(3.0, 4) == 0.0
        assert cubic.evaluate(3.0, 11) == 0.0

    def test_integer_time(self, cubic):
        assert cubic.evaluate(3, 0) == 27.0

    def test_returns_python_float(self, cubic):
        assert isinstance(cubic.evaluate(0.5, 1), float)

    @pytest.mark.parametrize("derivative", [0, 1, 2, 3, 4, 6, 9])
    @pytest.mark.parametrize("t", [-2.0, -0.5, 0.0, 0.7, 1.9])
    def test_matches_reference(self, snap_segment, derivative, t):
        value = snap_segment.evaluate(t, derivative)
        expected = _naive_derivative_value(snap_segment.coefficients, t, derivative)
        assert abs(value - expected) < 1e-10 * max(1.0, abs(expected)), (
            f"d={derivative}, t={t}: {value} vs {expected}"
        )

    def test_negative_derivative_raises(self, cubic):
        with pytest.raises(ValueError):
            cubic.evaluate(1.0, -2)

    def test_evaluate_derivatives(self, cubic):
        np.testing.assert_array_equal(
            cubic.evaluate_derivatives(2.0, 6), [8.0, 12.0, 12.0, 6.0, 0.0, 0.0]
        )

    def test_evaluate_derivatives_empty(self, cubic):
        assert cubic.evaluate_derivatives(1.0, 0).shape == (0,)

    def test_evaluate_derivatives_negative_raises(self, cubic):
        with pytest.raises(ValueError):
            cubic.evaluate_derivatives(1.0, -1)

    @pytest.mark.parametrize("derivative", [0, 1, 2, 4])
    def test_evaluate_batch_matches_scalar(self, snap_segment, derivative):
        ts = np.linspace(-1.0, 2.0, 13)
        batch = snap_segment.evaluate_batch(ts, derivative)
        assert batch.shape == ts.shape
        for t, v in zip(ts, batch):
            expected = snap_segment.evaluate(float(t), derivative)
            assert abs(v - expected) < 1e-10 * max(1.0, abs(expected)), f"t={t}: {v} vs {expected}"

    def test_evaluate_batch_2d_shape(self, cubic):
        ts = np.arange(6.0).reshape(2, 3)
        np.testing.assert_array_equal(cubic.evaluate_batch(ts), ts ** 3)

    def test_derivative_polynomial(self, cubic):
        velocity = cubic.derivative()
        assert velocity.N == cubic.N
        assert velocity.evaluate(2.0) == cubic.evaluate(2.0, 1)
        assert cubic.derivative(2) == Polynomial([0.0, 6.0])


class TestCoefficientManipulation:
    """Tests for with_appended_coefficients() and scale_in_time()."""

    def test_append_preserves_values(self, cubic):
        longer = cubic.with_appended_coefficients(8)
        assert longer.N == 8
        for t in [-1.0, 0.5, 2.0]:
            for d in range(4):
                assert longer.evaluate(t, d) == cubic.evaluate(t, d)

    def test_append_same_size(self, cubic):
        assert cubic.with_appended_coefficients(4) == cubic

    def test_append_smaller_raises(self, cubic):
        with pytest.raises(ValueError):
            cubic.with_appended_coefficients(3)

    def test_append_too_large_raises(self, cubic):
        with pytest.raises(ValueError):
            cubic.with_appended_coefficients(K_MAX_N + 1)

    def test_scale_in_time(self, snap_segment):
        scaled = snap_segment.scale_in_time(0.5)
        for t in [-1.0, 0.0, 0.8, 3.0]:
            expected = snap_segment.evaluate(0.5 * t)
            assert abs(scaled.evaluate(t) - expected) < 1e-12 * max(1.0, abs(expected))

    def test_scale_in_time_derivative_chain_rule(self, cubic):
        """d/dt p(k t) = k p'(k t)."""
        k = 3.0
        scaled = cubic.scale_in_time(k)
        assert abs(scaled.evaluate(0.4, 1) - k * cubic.evaluate(k * 0.4, 1)) < 1e-12


class TestPrintingAndPickle:
    """Tests for __repr__, __str__ and pickling."""

    def test_repr(self, cubic):
        assert repr(cubic) == "Polynomial([0.0, 0.0, 0.0, 1.0])"

    def test_str(self):
        assert str(Polynomial([1.0, 0.0, -2.0])) == "Polynomial (degree 2): 1 + -2*t^2"

    def test_str_zero(self):
        assert str(Polynomial([0.0, 0.0])) == "Polynomial (degree 1): 0"

    def test_pickle_round_trip(self, snap_segment):
        restored = pickle.loads(pickle.dumps(snap_segment))
        assert restored == snap_segment
        assert not restored.coefficients.flags.writeable
        assert restored.evaluate(0.7, 2) == snap_segment.evaluate(0.7, 2)

    def test_pickle_version_mismatch_warns(self, cubic):
        state = cubic.__getstate__()
        state["_polytraj_version"] = "0.0.0-old"
        obj = Polynomial.__new__(Polynomial)
        with pytest.warns(UserWarning, match="0.0.0-old"):
            obj.__setstate__(state)
        assert obj == cubic
