"""Tests for the fixed-step Newton-Raphson refiner."""

import jax
import jax.numpy as jnp
import numpy as np

from approxax.approximations.newton_raphson import inv_sqrt_step, newton_refine, sqrt_step


class TestNewtonSteps:
    def test_sqrt_step_formula(self):
        """One Heron step from 1.5 toward sqrt(2)."""
        y = sqrt_step(jnp.float64(1.5), jnp.float64(2.0))
        np.testing.assert_allclose(y, (1.5 + 2.0 / 1.5) / 2.0, rtol=0, atol=0)

    def test_sqrt_step_uses_input(self):
        """The update converges toward sqrt(x), not sqrt(2)."""
        y = newton_refine(sqrt_step, jnp.float64(3.0), jnp.float64(9.0), 1)
        assert float(y) == 3.0

    def test_inv_sqrt_step_formula(self):
        y = inv_sqrt_step(jnp.float64(0.5), jnp.float64(2.0))
        np.testing.assert_allclose(y, 0.5 * (1.5 - 0.5 * 2.0 * 0.5 * 0.5), rtol=1e-15)

    def test_fixed_points(self):
        """Exact roots are fixed points of both updates."""
        assert float(sqrt_step(jnp.float64(4.0), jnp.float64(16.0))) == 4.0
        assert float(inv_sqrt_step(jnp.float64(0.25), jnp.float64(16.0))) == 0.25


class TestNewtonRefine:
    def test_zero_iterations_returns_seed(self):
        seed = jnp.array([1.25, 2.5])
        result = newton_refine(sqrt_step, seed, jnp.array([2.0, 7.0]), 0)
        np.testing.assert_array_equal(result, seed)

    def test_iterations_are_applied_exactly(self):
        """K iterations equal K manual applications of the step."""
        x = jnp.float64(5.0)
        y = jnp.float64(2.0)
        manual = y
        for _ in range(3):
            manual = sqrt_step(manual, x)
        assert float(newton_refine(sqrt_step, y, x, 3)) == float(manual)

    def test_error_shrinks_quadratically(self):
        """Each step roughly squares the relative error."""
        x = jnp.float64(10.0)
        errors = [
            abs(float(newton_refine(inv_sqrt_step, jnp.float64(0.3), x, k)) * np.sqrt(10.0) - 1.0) for k in range(4)
        ]
        for before, after in zip(errors, errors[1:]):
            assert after < before
            assert after <= 2.0 * before**2 + 1e-15

    def test_static_count_unrolls_under_jit(self):
        """The loop count is a static argument under jax.jit."""
        refine = jax.jit(lambda y, x, k: newton_refine(sqrt_step, y, x, k), static_argnums=(2,))
        assert float(refine(jnp.float64(1.0), jnp.float64(4.0), 6)) == 2.0
