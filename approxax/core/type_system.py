"""Type system for approxax with JAX array validation.

This module provides type aliases for the arrays flowing through the
approximations and the coercion rules that pick a float layout for an input.
"""

from typing import Any

import jax.numpy as jnp
import numpy as np
from jaxtyping import Array, ArrayLike, Float

from .errors import UnsupportedDtypeError
from .layout import FLOAT64, SUPPORTED_LAYOUTS, layout_for, require_x64

# Type aliases for approximation inputs and outputs
FloatArray = Float[Array, "..."]
"""Type alias for elementwise float inputs and results of any shape."""

Seed = Float[Array, "..."]
"""Type alias for an unrefined initial guess produced by a bit-seed generator."""

FoldedArgument = Float[Array, "..."]
"""Type alias for a range-reduced trigonometric argument in [-1, 1]."""


def default_float_dtype() -> np.dtype[Any]:
    """Return the float dtype JAX assigns to Python floats in the current mode."""
    return np.dtype(jnp.result_type(float))


def as_float_array(x: ArrayLike, dtype: Any = None) -> FloatArray:
    """Convert an input to a float32 or float64 JAX array.

    Integer and boolean inputs are promoted to the default float dtype. An
    explicit ``dtype`` always wins over the input's own dtype.

    Args:
        x: Scalar, NumPy array, JAX array or tracer.
        dtype: Optional target dtype (float32 or float64).

    Returns:
        JAX array whose dtype has a supported layout.

    Raises:
        UnsupportedDtypeError: For complex or non-IEEE-754-layout float inputs (float16, bfloat16).
        PrecisionUnavailableError: If a float64 result is requested while x64 mode is off.

    Examples:
        >>> as_float_array(3).dtype == default_float_dtype()
        True
        >>> as_float_array([1.0, 2.0], dtype=jnp.float32).dtype
        dtype('float32')
    """
    if dtype is not None:
        target = layout_for(dtype).float_dtype
        return jnp.asarray(x, dtype=target)

    source_dtype = getattr(x, "dtype", None)
    if source_dtype is not None and np.dtype(source_dtype) == FLOAT64.float_dtype:
        # Refuse silent truncation of float64 data
        require_x64()

    array = jnp.asarray(x)
    if jnp.issubdtype(array.dtype, jnp.complexfloating):
        raise UnsupportedDtypeError(
            "Complex inputs are not supported", expected=tuple(SUPPORTED_LAYOUTS), actual=array.dtype.name
        )
    if not jnp.issubdtype(array.dtype, jnp.floating):
        return array.astype(default_float_dtype())

    layout_for(array.dtype)
    return array

