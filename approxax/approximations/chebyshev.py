"""Chebyshev polynomial tables and Horner evaluation.

Tables are built with NumPy in float64 and cached per size, so inside a traced
function they are ordinary constants. Only :func:`horner` touches traced values.
"""

from collections.abc import Sequence
from functools import lru_cache
from typing import Any

import jax.numpy as jnp
import numpy as np
from jaxtyping import Array, Float

from ..core.constants import ApproximationConstants


@lru_cache(maxsize=None)
def _chebyshev_table(size: int) -> np.ndarray:
    table = np.zeros((size, size), dtype=np.float64)
    table[0, 0] = 1.0
    if size > 1:
        table[1, 1] = 1.0
    for n in range(2, size):
        # T_n = 2z*T_{n-1} - T_{n-2}, as coefficient vectors in ascending powers
        table[n, 1:] = 2.0 * table[n - 1, :-1]
        table[n] -= table[n - 2]
    table.setflags(write=False)
    return table


def chebyshev_table(size: int) -> np.ndarray:
    """Coefficients of the Chebyshev polynomials of the first kind ``T_0 .. T_{size-1}``.

    Row ``n`` holds the coefficients of ``T_n`` in ascending powers of ``z``,
    zero-padded to ``size`` columns.

    Args:
        size: Number of polynomials (and columns). Must be positive.

    Returns:
        Read-only ``(size, size)`` float64 array.

    Raises:
        ValueError: If ``size`` is not positive.

    Examples:
        >>> chebyshev_table(3)
        array([[ 1.,  0.,  0.],
               [ 0.,  1.,  0.],
               [-1.,  0.,  2.]])
    """
    if size < 1:
        raise ValueError(f"Chebyshev table size must be positive, got {size}")
    return _chebyshev_table(size)


def combine_chebyshev(coefficients: Sequence[float]) -> np.ndarray:
    """Collapse a Chebyshev series ``sum(c[n] * T_n)`` into power-basis coefficients.

    Args:
        coefficients: Series weights ``c[0] .. c[N-1]``.

    Returns:
        Float64 vector ``p`` of length ``N`` with ``p[k]`` the coefficient of ``z**k``.
    """
    weights = np.asarray(coefficients, dtype=np.float64)
    return weights @ chebyshev_table(len(weights))


@lru_cache(maxsize=None)
def _trig_polynomial(dtype_name: str) -> tuple[Any, ...]:
    combined = combine_chebyshev(ApproximationConstants.CHEBYSHEV_COEFFICIENTS)
    return tuple(combined.astype(dtype_name))


def trig_polynomial(dtype: Any) -> tuple[Any, ...]:
    """Power-basis minimax polynomial used by the sine/cosine approximations.

    Args:
        dtype: Float dtype the coefficients are rounded to.

    Returns:
        Tuple of NumPy scalars of ``dtype`` in ascending powers of ``z``.
    """
    return _trig_polynomial(np.dtype(dtype).name)


def horner(coefficients: Sequence[Any], z: Float[Array, "..."]) -> Float[Array, "..."]:
    """Evaluate ``sum(coefficients[k] * z**k)`` with Horner's scheme.

    The loop runs over a fixed-length Python sequence and unrolls while tracing.
    """
    result = jnp.full_like(z, coefficients[-1])
    for c in reversed(coefficients[:-1]):
        result = result * z + c
    return result
