"""Sine and cosine from a fixed-degree Chebyshev minimax polynomial.

After range reduction to ``w`` in ``[-1, 1]``, ``sin(pi*w/2) / w`` is an even
function of ``w``, so it is approximated as a polynomial in ``z = 2w**2 - 1``,
which maps ``[-1, 1]`` onto the Chebyshev domain. Multiplying the polynomial by
``w`` restores the odd symmetry.

The coefficients are those of the ZX Spectrum ROM series. On ``[-2*tau, 2*tau]``
the absolute error stays below 5e-7.
"""

from typing import Any

from jaxtyping import Array, ArrayLike, Float

from ..core.jit_decorator import jit_optimized
from ..core.type_system import FoldedArgument, as_float_array
from .chebyshev import horner, trig_polynomial
from .range_reduction import reduce_range


def evaluate_folded(w: FoldedArgument) -> Float[Array, "..."]:
    """Evaluate ``sin(pi*w/2)`` for an already folded argument ``w`` in ``[-1, 1]``."""
    z = 2.0 * w * w - 1.0
    return horner(trig_polynomial(w.dtype), z) * w


@jit_optimized()
def _approx_sin(x: Float[Array, "..."]) -> Float[Array, "..."]:
    return evaluate_folded(reduce_range(x))


@jit_optimized()
def _approx_cos(x: Float[Array, "..."]) -> Float[Array, "..."]:
    return evaluate_folded(reduce_range(x, quarter_turns=1.0))


def approx_sin(x: ArrayLike, *, dtype: Any = None) -> Float[Array, "..."]:
    """Approximate ``sin(x)`` elementwise.

    This is slower than ``jnp.sin`` but made only of arithmetic, comparisons and
    ``fmod``, so it traces and constant-folds like any other jax.numpy code.

    Args:
        x: Angle(s) in radians. Integers are promoted to the default float dtype.
        dtype: Optional float32/float64 override of the evaluation width.

    Returns:
        Array of sine approximations with the shape of ``x``.

    Example:
        >>> import jax.numpy as jnp
        >>> x = jnp.float32(2.0)
        >>> bool(jnp.abs(approx_sin(x) - jnp.sin(x)) < 5e-7)
        True
    """
    return _approx_sin(as_float_array(x, dtype))


def approx_cos(x: ArrayLike, *, dtype: Any = None) -> Float[Array, "..."]:
    """Approximate ``cos(x)`` elementwise via the sine path shifted by a quarter turn.

    Args:
        x: Angle(s) in radians. Integers are promoted to the default float dtype.
        dtype: Optional float32/float64 override of the evaluation width.

    Returns:
        Array of cosine approximations with the shape of ``x``.

    Example:
        >>> import jax.numpy as jnp
        >>> x = jnp.float32(2.0)
        >>> bool(jnp.abs(approx_cos(x) - jnp.cos(x)) < 5e-7)
        True
    """
    return _approx_cos(as_float_array(x, dtype))
