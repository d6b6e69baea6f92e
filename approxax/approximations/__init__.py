"""Closed-form approximations of sqrt, 1/sqrt, sin and cos."""

from .chebyshev import chebyshev_table, combine_chebyshev, horner, trig_polynomial
from .newton_raphson import inv_sqrt_step, newton_refine, sqrt_step
from .range_reduction import reduce_range
from .roots import approx_inv_sqrt, approx_inv_sqrt_unchecked, approx_sqrt
from .seeds import inv_sqrt_seed, sqrt_seed
from .trig import approx_cos, approx_sin, evaluate_folded

__all__ = [
    "approx_cos",
    "approx_inv_sqrt",
    "approx_inv_sqrt_unchecked",
    "approx_sin",
    "approx_sqrt",
    "chebyshev_table",
    "combine_chebyshev",
    "evaluate_folded",
    "horner",
    "inv_sqrt_seed",
    "inv_sqrt_step",
    "newton_refine",
    "reduce_range",
    "sqrt_seed",
    "sqrt_step",
    "trig_polynomial",
]
