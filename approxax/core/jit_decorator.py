"""JIT optimization decorator separating compilation concerns from the numerics.

The approximation kernels are written as plain ``jax.numpy`` functions. The
:func:`jit_optimized` decorator routes each call through :class:`JITManager`,
which decides whether to compile, which arguments are static, and whether to
fall back to eager execution when compilation fails.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any

from .jit_manager import JITManager

logger = logging.getLogger(__name__)


def jit_optimized(static_args: tuple[int, ...] = ()) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator for JIT compilation with caching and eager fallback.

    Args:
        static_args: Tuple of argument positions to treat as static during compilation.
            Static arguments must be hashable; each distinct value triggers one
            compilation, which is how iteration counts become compile-time loops.

    Returns:
        Decorator function that applies JIT optimization

    Examples:
        >>> @jit_optimized(static_args=(1,))
        ... def refine(x: Array, steps: int) -> Array:
        ...     for _ in range(steps):
        ...         x = 0.5 * (x + 1.0 / x)
        ...     return x
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            if not JITManager.is_enabled():
                return func(*args, **kwargs)

            compiled_func = JITManager.compile(func, static_args)
            try:
                return compiled_func(*args, **kwargs)
            except Exception as e:
                if not JITManager.get_config()["fallback_on_error"]:
                    raise
                logger.warning(f"JIT execution of {func.__name__} failed ({type(e).__name__}: {e}); running eagerly")
                return func(*args, **kwargs)

        # Store original function and static args for potential inspection
        wrapper._original_func = func  # type: ignore[attr-defined]
        wrapper._static_args = static_args  # type: ignore[attr-defined]
        return wrapper

    return decorator
