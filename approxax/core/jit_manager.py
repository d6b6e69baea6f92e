"""JIT Management System for approxax."""

import logging
from collections import OrderedDict
from collections.abc import Callable
from typing import Any, ClassVar

import jax

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG: dict[str, Any] = {
    "enable_jit": True,
    "cache_size": 128,
    "fallback_on_error": True,
    "debug_mode": False,
}


class JITManager:
    """Central management system for JIT compilation of the approximations."""

    # Manage configuration and cache through class variables
    _config: ClassVar[dict[str, Any]] = dict(_DEFAULT_CONFIG)

    _cache: ClassVar[OrderedDict[tuple[str, tuple[int, ...]], Callable[..., Any]]] = OrderedDict()

    @staticmethod
    def _get_cache_key(func: Callable[..., Any], static_argnums: tuple[int, ...]) -> tuple[str, tuple[int, ...]]:
        """Generate unique cache key for a function and its static argument positions.

        Args:
            func: Function being compiled
            static_argnums: Indices of static arguments

        Returns:
            Cache key made of the qualified function name and the static positions
        """
        qualified_name = f"{func.__module__}.{getattr(func, '__qualname__', func.__name__)}"
        return (qualified_name, tuple(static_argnums))

    @classmethod
    def _enforce_cache_limit(cls) -> None:
        """Evict least recently used entries until the cache fits its limit."""
        cache_limit = max(int(cls._config["cache_size"]), 1)
        while len(cls._cache) > cache_limit:
            evicted, _ = cls._cache.popitem(last=False)
            logger.debug(f"Evicted compiled function {evicted[0]} from JIT cache")

    @classmethod
    def configure(cls, **kwargs: Any) -> None:
        """Update JIT configuration.

        Args:
            **kwargs: Configuration parameters
                - enable_jit: Enable/disable JIT compilation of the public functions
                - cache_size: Maximum number of compiled callables kept
                - fallback_on_error: Run eagerly if compilation fails
                - debug_mode: Log every compilation request

        Raises:
            KeyError: If an unknown configuration key is given.
        """
        unknown = set(kwargs) - set(_DEFAULT_CONFIG)
        if unknown:
            raise KeyError(f"Unknown JIT configuration keys: {sorted(unknown)}")
        cls._config.update(kwargs)
        cls._enforce_cache_limit()

    @classmethod
    def is_enabled(cls) -> bool:
        """Return whether JIT compilation is globally enabled."""
        return bool(cls._config["enable_jit"])

    @classmethod
    def compile(cls, func: Callable[..., Any], static_argnums: tuple[int, ...] = ()) -> Callable[..., Any]:
        """Return a cached ``jax.jit`` version of ``func``.

        Args:
            func: Function to be JIT-compiled
            static_argnums: Indices of arguments treated as compile-time constants

        Returns:
            JIT-compiled function (cached if previously compiled)
        """
        cache_key = cls._get_cache_key(func, static_argnums)

        if cache_key in cls._cache:
            cls._cache.move_to_end(cache_key)
            return cls._cache[cache_key]

        if cls._config["debug_mode"]:
            logger.debug(f"Compiling {cache_key[0]} with static_argnums={static_argnums}")

        compiled = jax.jit(func, static_argnums=static_argnums) if static_argnums else jax.jit(func)
        cls._cache[cache_key] = compiled
        cls._enforce_cache_limit()
        return compiled

    @classmethod
    def clear_cache(cls) -> None:
        """Clear JIT cache."""
        cls._cache.clear()

    @classmethod
    def get_config(cls) -> dict[str, Any]:
        """Get current configuration.

        Returns:
            Current configuration dictionary
        """
        return cls._config.copy()

    @classmethod
    def get_cache_info(cls) -> dict[str, Any]:
        """Get information about the current JIT cache state.

        Returns:
            Dictionary with cache size, capacity and cached function names
        """
        return {
            "cache_size": len(cls._cache),
            "cache_capacity": cls._config["cache_size"],
            "cached_functions": [name for name, _ in cls._cache],
        }

    @classmethod
    def reset_config(cls) -> None:
        """Reset configuration to default."""
        cls._config = dict(_DEFAULT_CONFIG)
