"""Configuration constants for approxax.

This module defines the numerical constants that drive every approximation in
the library, together with the empirical accuracy targets they are tested
against. Keeping them here eliminates magic numbers from the algorithms.
"""

import math


class ApproximationConstants:
    """Constants shared by the seed generators, Newton-Raphson and trig engines.

    All values are fixed for the lifetime of the process and are consumed at
    trace time, so they fold into compiled XLA programs as literals.
    """

    INV_SQRT_SIGMA: float = 0.0450466
    """Empirical correction term used to derive the inverse square root magic constant."""

    INV_SQRT_MAGIC_SCALE: float = 1.5
    """Scale applied to the biased exponent when deriving the magic constant."""

    CHEBYSHEV_COEFFICIENTS: tuple[float, ...] = (
        1.276278962,
        -0.285261569,
        0.009118016,
        -0.000136587,
        0.000001185,
        -0.000000007,
    )
    """Minimax weights of T_0..T_5 for sin(pi*w/2)/w on the transformed domain z = 2w^2 - 1."""

    FRAC_2_PI: float = 2.0 / math.pi
    """Scale that maps radians onto quarter turns."""

    FOLD_STEPS: int = 4
    """Number of subtract/reflect/modulo steps performed during range reduction."""

    FOLD_PERIOD: float = 4.0
    """Period, in quarter turns, of the folded trigonometric argument."""

    DEFAULT_SQRT_ITERATIONS: int = 3
    """Newton-Raphson steps applied by approx_sqrt when none are requested."""

    DEFAULT_INV_SQRT_ITERATIONS: int = 4
    """Newton-Raphson steps applied by approx_inv_sqrt when none are requested."""


class AccuracyTargets:
    """Empirical accuracy targets used by the test-suite and the benchmark harness.

    Note: These are characterisations of observed behaviour, not proven bounds.
    """

    TRIG_ABS_ERROR: float = 5e-7
    """Maximum absolute error of approx_sin/approx_cos on [-2*tau, 2*tau]."""

    TRIG_FLOAT32_SWEEP_ABS_ERROR: float = 2e-6
    """Absolute error budget for dense float32 sweeps, where folding rounds the scaled argument."""

    INV_SQRT_SEED_REL_ERROR: float = 0.0345
    """Maximum relative error of the float32 inverse square root seed before refinement."""

    SQRT_SEED_REL_ERROR: float = 0.0615
    """Maximum relative error of the square root seed before refinement."""

    CONVERGED_REL_ERROR: float = 2e-15
    """Relative error of a fully converged float64 Newton-Raphson result."""
