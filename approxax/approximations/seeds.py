"""Bit-pattern seed generators for square root and reciprocal square root.

Both seeds exploit the logarithmic structure of the IEEE-754 encoding: read as
an unsigned integer, a positive float is roughly a scaled and shifted
``log2(x)``. Halving that integer halves the logarithm, which is a square root
up to an exponent bias that each seed restores with an integer constant.

The seeds are O(1), branch-free and made only of bit casts, shifts and integer
adds, so they trace into a handful of XLA ops.
"""

import jax.numpy as jnp

from ..core.layout import layout_for
from ..core.type_system import FloatArray, Seed


def inv_sqrt_seed(x: FloatArray) -> Seed:
    """Initial guess for ``1/sqrt(x)`` via the magic-constant subtraction.

    Computes ``from_bits(MAGIC - (to_bits(x) >> 1))``. For positive finite float32
    inputs the relative error stays below about 3.4%.

    Args:
        x: Float32 or float64 array. Only ``x > 0`` gives a meaningful result;
            for zero, negative or non-finite inputs the result is whatever float
            the integer arithmetic happens to produce.

    Returns:
        Seed array with the dtype and shape of ``x``.
    """
    layout = layout_for(x.dtype)
    bits = layout.to_bits(x)
    return layout.from_bits(jnp.subtract(layout.uint(layout.magic_constant), bits >> 1))


def sqrt_seed(x: FloatArray) -> Seed:
    """Initial guess for ``sqrt(x)`` by halving the biased exponent.

    Computes ``from_bits((to_bits(x) >> 1) + bias * 2**(mantissa_bits - 1))``. The
    added term puts back the half of the exponent bias lost by the shift. No
    empirical correction is applied, so ``sqrt_seed(2.0) == 1.5`` exactly.

    Args:
        x: Non-negative float32 or float64 array. Negative and non-finite inputs
            produce an unspecified bit pattern.

    Returns:
        Seed array with the dtype and shape of ``x``.
    """
    layout = layout_for(x.dtype)
    bits = layout.to_bits(x)
    return layout.from_bits((bits >> 1) + layout.uint(layout.sqrt_bias_correction))
