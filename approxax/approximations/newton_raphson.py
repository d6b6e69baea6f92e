"""Fixed-step Newton-Raphson refinement.

The iteration count is a Python ``int`` consumed while tracing, so the loop is
unrolled into straight-line code and each count compiles to its own program.
"""

from collections.abc import Callable

from jaxtyping import Array, Float

NewtonStep = Callable[[Float[Array, "..."], Float[Array, "..."]], Float[Array, "..."]]


def inv_sqrt_step(y: Float[Array, "..."], x: Float[Array, "..."]) -> Float[Array, "..."]:
    """One Newton step for ``f(y) = 1/y**2 - x``: ``y * (1.5 - 0.5*x*y*y)``."""
    half_x = x * 0.5
    return y * (1.5 - half_x * y * y)


def sqrt_step(y: Float[Array, "..."], x: Float[Array, "..."]) -> Float[Array, "..."]:
    """One Heron step for ``f(y) = y**2 - x``: ``(y + x/y) / 2``."""
    return (y + x / y) / 2.0


def newton_refine(step: NewtonStep, seed: Float[Array, "..."], x: Float[Array, "..."], iterations: int) -> Float[Array, "..."]:
    """Apply ``step`` exactly ``iterations`` times starting from ``seed``.

    Args:
        step: Update rule taking the current estimate and the original input.
        seed: Initial estimate, usually from a bit-seed generator.
        x: Original input of the function being approximated.
        iterations: Number of refinement steps; ``0`` returns the seed unchanged.

    Returns:
        Refined estimate. No clamping or overflow checks are performed.
    """
    y = seed
    for _ in range(iterations):
        y = step(y, x)
    return y
