"""Property-based tests for the approximations using Hypothesis.

Properties covered:
- Range reduction lands in [-1, 1] for every finite input
- Sine and cosine stay within the documented error of the reference
- Newton-Raphson refinement converges for every positive normal input
"""

import math

import jax.numpy as jnp
import numpy as np
from hypothesis import given, settings, strategies as st

from approxax import approx_cos, approx_inv_sqrt, approx_sin, approx_sqrt
from approxax.approximations.range_reduction import reduce_range
from approxax.approximations.seeds import inv_sqrt_seed
from approxax.core.constants import AccuracyTargets

TAU = 2.0 * math.pi

finite_doubles = st.floats(allow_nan=False, allow_infinity=False)
finite_singles = st.floats(allow_nan=False, allow_infinity=False, width=32)
trig_domain = st.floats(min_value=-2.0 * TAU, max_value=2.0 * TAU)
positive_normals = st.floats(min_value=1e-300, max_value=1e300)


class TestRangeReductionProperties:
    @given(x=finite_doubles)
    @settings(max_examples=300, deadline=None)
    def test_float64_folds_into_unit_interval(self, x):
        w = float(reduce_range(jnp.float64(x)))
        assert -1.0 <= w <= 1.0

    @given(x=finite_singles)
    @settings(max_examples=300, deadline=None)
    def test_float32_folds_into_unit_interval(self, x):
        w = reduce_range(jnp.float32(x))
        assert w.dtype == jnp.float32
        assert -1.0 <= float(w) <= 1.0

    @given(x=finite_doubles, quarter_turns=st.sampled_from([0.0, 1.0]))
    @settings(max_examples=100, deadline=None)
    def test_phase_offset_stays_in_unit_interval(self, x, quarter_turns):
        assert -1.0 <= float(reduce_range(jnp.float64(x), quarter_turns)) <= 1.0


class TestTrigProperties:
    @given(x=trig_domain)
    @settings(max_examples=200, deadline=None)
    def test_sin_within_target(self, x):
        assert abs(float(approx_sin(x)) - math.sin(x)) < AccuracyTargets.TRIG_ABS_ERROR

    @given(x=trig_domain)
    @settings(max_examples=200, deadline=None)
    def test_cos_within_target(self, x):
        assert abs(float(approx_cos(x)) - math.cos(x)) < AccuracyTargets.TRIG_ABS_ERROR

    @given(x=trig_domain)
    @settings(max_examples=100, deadline=None)
    def test_sin_is_odd(self, x):
        np.testing.assert_allclose(float(approx_sin(-x)), -float(approx_sin(x)), atol=1e-12)

    @given(x=st.floats(min_value=-1e4, max_value=1e4, width=32))
    @settings(max_examples=100, deadline=None)
    def test_float32_bounded(self, x):
        """Results stay (up to rounding) inside [-1, 1]."""
        s = float(approx_sin(jnp.float32(x)))
        c = float(approx_cos(jnp.float32(x)))
        assert abs(s) <= 1.0 + 1e-6
        assert abs(c) <= 1.0 + 1e-6


class TestNewtonRaphsonProperties:
    @given(x=positive_normals)
    @settings(max_examples=200, deadline=None)
    def test_sqrt_converges(self, x):
        np.testing.assert_allclose(float(approx_sqrt(x, 6)), math.sqrt(x), rtol=AccuracyTargets.CONVERGED_REL_ERROR)

    @given(x=positive_normals)
    @settings(max_examples=200, deadline=None)
    def test_inv_sqrt_converges(self, x):
        np.testing.assert_allclose(
            float(approx_inv_sqrt(x, 5)), 1.0 / math.sqrt(x), rtol=AccuracyTargets.CONVERGED_REL_ERROR
        )

    @given(x=st.floats(min_value=2.0**-100, max_value=2.0**100, width=32))
    @settings(max_examples=200, deadline=None)
    def test_inv_sqrt_seed_error_bound(self, x):
        seed = float(inv_sqrt_seed(jnp.float32(x)))
        assert abs(seed * math.sqrt(x) - 1.0) < AccuracyTargets.INV_SQRT_SEED_REL_ERROR

    @given(x=st.floats(max_value=0.0))
    @settings(max_examples=100, deadline=None)
    def test_inv_sqrt_non_positive_is_nan(self, x):
        assert math.isnan(float(approx_inv_sqrt(x, 2)))
