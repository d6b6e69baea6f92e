"""JIT manager unit tests."""

import jax.numpy as jnp
import numpy as np
import pytest

from approxax.core.jit_manager import JITManager


def _double(x):
    return x * 2


def _scale(x, factor):
    return x * factor


class TestJITManager:
    """Unit tests for JIT management system."""

    def setup_method(self):
        """Setup before each test execution."""
        JITManager.reset_config()
        JITManager.clear_cache()

    def test_config_initialization(self):
        """Test configuration defaults."""
        expected_defaults = {"enable_jit": True, "cache_size": 128, "fallback_on_error": True, "debug_mode": False}
        assert JITManager.get_config() == expected_defaults

    def test_configure_basic_settings(self):
        """Test basic configuration updates."""
        JITManager.configure(enable_jit=False, cache_size=8)

        assert JITManager.get_config()["enable_jit"] is False
        assert JITManager.get_config()["cache_size"] == 8
        assert not JITManager.is_enabled()

    def test_configure_rejects_unknown_keys(self):
        """Typos in configuration keys are reported."""
        with pytest.raises(KeyError):
            JITManager.configure(enable_jti=True)

    def test_get_config_returns_copy(self):
        """Mutating the returned dict does not change the configuration."""
        config = JITManager.get_config()
        config["enable_jit"] = False
        assert JITManager.is_enabled()

    def test_compile_and_execute(self):
        """Compiled functions give the eager result."""
        compiled = JITManager.compile(_double)
        np.testing.assert_array_equal(compiled(jnp.array([1.0, 2.0])), [2.0, 4.0])

    def test_compile_with_static_args(self):
        """Static arguments are passed through to jax.jit."""
        compiled = JITManager.compile(_scale, static_argnums=(1,))
        np.testing.assert_array_equal(compiled(jnp.array([1.0, 2.0]), 3), [3.0, 6.0])

    def test_compile_is_cached(self):
        """Repeated requests return the same compiled callable."""
        first = JITManager.compile(_double)
        second = JITManager.compile(_double)
        assert first is second
        assert JITManager.get_cache_info()["cache_size"] == 1

    def test_static_args_are_part_of_key(self):
        """Different static positions compile separately."""
        JITManager.compile(_scale)
        JITManager.compile(_scale, static_argnums=(1,))
        assert JITManager.get_cache_info()["cache_size"] == 2

    def test_cache_limit_evicts_least_recently_used(self):
        """The cache never grows past cache_size."""
        JITManager.configure(cache_size=1)
        JITManager.compile(_double)
        JITManager.compile(_scale, static_argnums=(1,))

        info = JITManager.get_cache_info()
        assert info["cache_size"] == 1
        assert info["cached_functions"][0].endswith("_scale")

    def test_shrinking_cache_size_evicts(self):
        """Lowering cache_size trims existing entries."""
        JITManager.compile(_double)
        JITManager.compile(_scale)
        JITManager.configure(cache_size=1)
        assert JITManager.get_cache_info()["cache_size"] == 1

    def test_clear_cache(self):
        """Test JIT cache clearing functionality."""
        JITManager.compile(_double)
        JITManager.clear_cache()
        assert JITManager.get_cache_info()["cache_size"] == 0

    def test_reset_config(self):
        """Reset restores defaults."""
        JITManager.configure(enable_jit=False, debug_mode=True)
        JITManager.reset_config()
        assert JITManager.is_enabled()
        assert JITManager.get_config()["debug_mode"] is False
