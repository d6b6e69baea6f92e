"""approxax: JAX-native closed-form float approximations.

Fast, bounded-error approximations of four elementary functions, written so the
whole call chain (bit reinterpretation, table construction and polynomial
evaluation) traces under ``jax.jit``:

- ``approx_sqrt(x, iterations)``: exponent-halving seed + Newton-Raphson
- ``approx_inv_sqrt(x, iterations)``: magic-constant seed + Newton-Raphson
- ``approx_sin(x)`` / ``approx_cos(x)``: Chebyshev minimax polynomial

Every function works on float32 and float64 arrays of any shape; float64 needs
``jax_enable_x64``.

Quick Start:
    >>> import approxax as ax
    >>> ax.enable_x64()
    >>> float(ax.approx_sqrt(2.0, 3))
    1.4142135623746899
    >>> import jax
    >>> jax.jit(lambda: ax.approx_inv_sqrt(2.0, 4))()  # evaluated at compile time
    Array(0.70710678, dtype=float64)
"""

__version__ = "0.1.9"
__author__ = "approxax Contributors"

from typing import Any

import jax

from .approximations import (
    approx_cos,
    approx_inv_sqrt,
    approx_inv_sqrt_unchecked,
    approx_sin,
    approx_sqrt,
)
from .core.constants import AccuracyTargets, ApproximationConstants
from .core.errors import (
    ApproximationError,
    InvalidIterationCountError,
    LayoutError,
    PrecisionUnavailableError,
    UnsupportedDtypeError,
)
from .core.jit_manager import JITManager
from .core.layout import FLOAT32, FLOAT64, FloatLayout, layout_for, x64_enabled


def enable_jit(cache_size: int = 128, fallback_on_error: bool = True, debug_mode: bool = False) -> None:
    """Enable JIT compilation of the approximations.

    Args:
        cache_size: Maximum number of compiled functions to cache
        fallback_on_error: Whether to fall back to eager execution on compilation errors
        debug_mode: Log every compilation request

    Example:
        >>> import approxax as ax
        >>> ax.enable_jit(cache_size=32, debug_mode=True)
    """
    JITManager.configure(
        enable_jit=True, cache_size=cache_size, fallback_on_error=fallback_on_error, debug_mode=debug_mode
    )


def disable_jit() -> None:
    """Run the approximations eagerly, op by op (useful for debugging)."""
    JITManager.configure(enable_jit=False)


def get_jit_config() -> dict[str, Any]:
    """Get current JIT configuration.

    Returns:
        Dictionary containing JIT configuration settings
    """
    return JITManager.get_config()


def clear_jit_cache() -> None:
    """Clear all cached compiled approximations."""
    JITManager.clear_cache()


def enable_x64() -> None:
    """Turn on 64-bit mode in JAX so float64 layouts become available.

    Must be called before creating the arrays that should be float64.
    """
    jax.config.update("jax_enable_x64", True)


__all__ = [
    "FLOAT32",
    "FLOAT64",
    "AccuracyTargets",
    "ApproximationConstants",
    "ApproximationError",
    "FloatLayout",
    "InvalidIterationCountError",
    "JITManager",
    "LayoutError",
    "PrecisionUnavailableError",
    "UnsupportedDtypeError",
    "__author__",
    "__version__",
    "approx_cos",
    "approx_inv_sqrt",
    "approx_inv_sqrt_unchecked",
    "approx_sin",
    "approx_sqrt",
    "clear_jit_cache",
    "disable_jit",
    "enable_jit",
    "enable_x64",
    "get_jit_config",
    "layout_for",
    "x64_enabled",
]
