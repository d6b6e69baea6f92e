"""End-to-end run in JAX's default 32-bit mode.

The test session enables ``jax_enable_x64`` globally, so the default mode is
exercised in a fresh interpreter where x64 was never turned on.
"""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent

SCRIPT = """
import json

import jax.numpy as jnp
import numpy as np

import approxax as ax
from approxax.core.errors import PrecisionUnavailableError

report = {"x64": ax.x64_enabled()}
report["sqrt_dtype"] = str(ax.approx_sqrt(2.0).dtype)
report["int_dtype"] = str(ax.approx_sin(3).dtype)
report["sqrt_exact"] = bool(ax.approx_sqrt(2.0, 3) == jnp.sqrt(jnp.float32(2.0)))
report["sin_error"] = abs(float(ax.approx_sin(2.0)) - float(np.sin(np.float32(2.0))))
report["inv_sqrt_nan"] = bool(np.isnan(ax.approx_inv_sqrt(-1.0)))

try:
    ax.approx_sqrt(np.array([2.0, 3.0], dtype=np.float64))
    report["float64_input"] = "accepted"
except PrecisionUnavailableError:
    report["float64_input"] = "rejected"

try:
    ax.approx_cos(1.0, dtype=jnp.float64)
    report["float64_dtype"] = "accepted"
except PrecisionUnavailableError:
    report["float64_dtype"] = "rejected"

report["float32_input"] = str(ax.approx_cos(np.array([1.0], dtype=np.float32)).dtype)
print(json.dumps(report))
"""


@pytest.fixture(scope="module")
def default_mode_report():
    env = dict(os.environ)
    env["JAX_ENABLE_X64"] = "0"
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(PROJECT_ROOT), env.get("PYTHONPATH")]))
    result = subprocess.run(
        [sys.executable, "-c", SCRIPT],
        cwd=PROJECT_ROOT,
        env=env,
        capture_output=True,
        text=True,
        timeout=300,
    )
    assert result.returncode == 0, result.stderr
    return json.loads(result.stdout.strip().splitlines()[-1])


class TestDefaultPrecisionMode:
    def test_x64_is_off(self, default_mode_report):
        assert default_mode_report["x64"] is False

    def test_python_scalars_become_float32(self, default_mode_report):
        assert default_mode_report["sqrt_dtype"] == "float32"
        assert default_mode_report["int_dtype"] == "float32"

    def test_float32_results(self, default_mode_report):
        assert default_mode_report["sqrt_exact"] is True
        assert default_mode_report["sin_error"] < 5e-7
        assert default_mode_report["inv_sqrt_nan"] is True
        assert default_mode_report["float32_input"] == "float32"

    def test_float64_requests_are_rejected(self, default_mode_report):
        """float64 data and dtype requests raise instead of silently truncating."""
        assert default_mode_report["float64_input"] == "rejected"
        assert default_mode_report["float64_dtype"] == "rejected"
