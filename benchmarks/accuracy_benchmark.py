"""Accuracy and speed characterisation of the approxax approximations."""

import json
import math
import time
from collections.abc import Callable
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

import jax
import jax.numpy as jnp
import numpy as np

import approxax as ax
from approxax.core.layout import layout_for
from approxax.core.performance import PerformanceMonitor


@dataclass
class AccuracyResult:
    """Error statistics of one approximation against its reference."""

    function: str
    dtype: str
    domain: tuple[float, float]
    samples: int
    max_abs_error: float
    max_rel_error: float
    mean_abs_error: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)


@dataclass
class SpeedResult:
    """Timing of one approximation against its ``jax.numpy`` reference."""

    function: str
    dtype: str
    samples: int
    approx_time_ms: float
    reference_time_ms: float
    speedup: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)


@dataclass
class BenchmarkCase:
    """One approximation, its exact reference and the domain it is sampled on."""

    name: str
    approx: Callable[[jax.Array], jax.Array]
    reference: Callable[[jax.Array], jax.Array]
    domain: tuple[float, float]
    family: str = field(default="")


def _iteration_cases(
    family: str, approx: Callable[..., jax.Array], reference: Callable[[jax.Array], jax.Array], max_iterations: int
) -> list[BenchmarkCase]:
    return [
        BenchmarkCase(
            name=f"{family}_{k}",
            approx=lambda x, k=k: approx(x, k),
            reference=reference,
            domain=(0.1, 256.0),
            family=family,
        )
        for k in range(max_iterations + 1)
    ]


def default_cases(max_iterations: int = 4) -> list[BenchmarkCase]:
    """Build the standard benchmark suite.

    Args:
        max_iterations: Highest Newton-Raphson count benchmarked for the root functions.

    Returns:
        Cases for sqrt and inv_sqrt at every iteration count, plus sin and cos.
    """
    tau = 2.0 * math.pi
    cases = _iteration_cases("sqrt", ax.approx_sqrt, jnp.sqrt, max_iterations)
    cases += _iteration_cases("inv_sqrt", ax.approx_inv_sqrt, lambda x: 1.0 / jnp.sqrt(x), max_iterations)
    cases.append(BenchmarkCase("sin", ax.approx_sin, jnp.sin, (-2.0 * tau, 2.0 * tau), family="sin"))
    cases.append(BenchmarkCase("cos", ax.approx_cos, jnp.cos, (-2.0 * tau, 2.0 * tau), family="cos"))
    return cases


def measure_accuracy(case: BenchmarkCase, samples: int = 4096, dtype: Any = jnp.float32) -> AccuracyResult:
    """Compare an approximation against its reference on a dense linear grid.

    The reference is evaluated in the widest available precision so that its own
    rounding does not dominate the reported error.

    Args:
        case: Benchmark case to evaluate.
        samples: Number of grid points.
        dtype: Float dtype the approximation is evaluated in.

    Returns:
        Error statistics for the case.
    """
    layout = layout_for(dtype)
    x = jnp.linspace(case.domain[0], case.domain[1], samples, dtype=layout.float_dtype)
    approx = np.asarray(case.approx(x), dtype=np.float64)
    exact = np.asarray(case.reference(x.astype(jnp.result_type(float))), dtype=np.float64)

    abs_error = np.abs(approx - exact)
    rel_error = abs_error / np.maximum(np.abs(exact), np.finfo(np.float64).tiny)
    return AccuracyResult(
        function=case.name,
        dtype=layout.name,
        domain=case.domain,
        samples=samples,
        max_abs_error=float(np.max(abs_error)),
        max_rel_error=float(np.max(rel_error)),
        mean_abs_error=float(np.mean(abs_error)),
    )


def measure_speed(case: BenchmarkCase, samples: int = 100_000, repeats: int = 20, dtype: Any = jnp.float32) -> SpeedResult:
    """Time an approximation and its reference after JIT warm-up.

    Args:
        case: Benchmark case to time.
        samples: Length of the input vector.
        repeats: Number of timed calls for each function.
        dtype: Float dtype of the input vector.

    Returns:
        Mean per-call timings and the reference/approximation ratio.
    """
    layout = layout_for(dtype)
    x = jnp.linspace(case.domain[0], case.domain[1], samples, dtype=layout.float_dtype)
    approx_fn = jax.jit(case.approx)
    reference_fn = jax.jit(case.reference)

    approx_key = f"{case.name}[{layout.name}]"
    reference_key = f"{case.name}_reference[{layout.name}]"

    # Warm up: the first call includes tracing and XLA compilation
    start = time.perf_counter()
    approx_fn(x).block_until_ready()
    PerformanceMonitor.compilation_time(approx_key, time.perf_counter() - start)
    start = time.perf_counter()
    reference_fn(x).block_until_ready()
    PerformanceMonitor.compilation_time(reference_key, time.perf_counter() - start)

    for _ in range(repeats):
        with PerformanceMonitor.measure(approx_key):
            approx_fn(x).block_until_ready()
        with PerformanceMonitor.measure(reference_key):
            reference_fn(x).block_until_ready()

    approx_stats = PerformanceMonitor.get_performance_statistics(approx_key)
    reference_stats = PerformanceMonitor.get_performance_statistics(reference_key)
    return SpeedResult(
        function=case.name,
        dtype=layout.name,
        samples=samples,
        approx_time_ms=approx_stats["mean"] * 1000,
        reference_time_ms=reference_stats["mean"] * 1000,
        speedup=PerformanceMonitor.calculate_speedup(reference_key, approx_key),
    )


class AccuracyBenchmark:
    """Runs a set of benchmark cases and reports, saves or plots the results."""

    def __init__(self, cases: list[BenchmarkCase] | None = None, output_dir: str | None = None):
        """Initialize benchmark system.

        Args:
            cases: Cases to run (defaults to :func:`default_cases`)
            output_dir: Directory to save benchmark results
        """
        self.cases = cases if cases is not None else default_cases()
        self.accuracy_results: list[AccuracyResult] = []
        self.speed_results: list[SpeedResult] = []

        if output_dir:
            self.output_dir: Path | None = Path(output_dir)
            self.output_dir.mkdir(parents=True, exist_ok=True)
        else:
            self.output_dir = None

    def select(self, functions: list[str] | None) -> list[BenchmarkCase]:
        """Filter cases by family (``sqrt``) or exact name (``sqrt_2``)."""
        if not functions:
            return list(self.cases)
        return [case for case in self.cases if case.family in functions or case.name in functions]

    def run(
        self,
        functions: list[str] | None = None,
        samples: int = 4096,
        dtype: Any = jnp.float32,
        include_speed: bool = True,
    ) -> list[AccuracyResult]:
        """Run accuracy (and optionally speed) measurements for the selected cases."""
        for case in self.select(functions):
            self.accuracy_results.append(measure_accuracy(case, samples=samples, dtype=dtype))
            if include_speed:
                self.speed_results.append(measure_speed(case, samples=samples, dtype=dtype))
        return self.accuracy_results

    def generate_report(self) -> str:
        """Format the collected results as a plain-text table."""
        lines = ["approxax accuracy report", "=" * 72]
        lines.append(f"{'function':<12} {'dtype':<8} {'max abs':>12} {'max rel':>12} {'mean abs':>12}")
        for result in self.accuracy_results:
            lines.append(
                f"{result.function:<12} {result.dtype:<8} {result.max_abs_error:>12.3e} "
                f"{result.max_rel_error:>12.3e} {result.mean_abs_error:>12.3e}"
            )

        if self.speed_results:
            lines += ["", f"{'function':<12} {'dtype':<8} {'approx ms':>12} {'ref ms':>12} {'speedup':>9}"]
            for speed in self.speed_results:
                lines.append(
                    f"{speed.function:<12} {speed.dtype:<8} {speed.approx_time_ms:>12.4f} "
                    f"{speed.reference_time_ms:>12.4f} {speed.speedup:>8.2f}x"
                )
        return "\n".join(lines)

    def save_results(self, filename: str = "accuracy_results.json") -> Path:
        """Save results as JSON.

        Raises:
            ValueError: If the benchmark was created without an output directory.
        """
        if self.output_dir is None:
            raise ValueError("No output directory configured")

        path = self.output_dir / filename
        payload = {
            "accuracy": [result.to_dict() for result in self.accuracy_results],
            "speed": [result.to_dict() for result in self.speed_results],
        }
        with open(path, "w") as f:
            json.dump(payload, f, indent=2)
        return path

    def plot_errors(self, plot_dir: str, samples: int = 1024, dtype: Any = jnp.float32) -> list[Path]:
        """Plot approximation and absolute error curves, one PNG per function family."""
        import matplotlib

        matplotlib.use("Agg")
        import matplotlib.pyplot as plt

        target = Path(plot_dir)
        target.mkdir(parents=True, exist_ok=True)
        layout = layout_for(dtype)

        families: dict[str, list[BenchmarkCase]] = {}
        for case in self.cases:
            families.setdefault(case.family or case.name, []).append(case)

        written = []
        for family, cases in families.items():
            fig, (ax_value, ax_error) = plt.subplots(2, 1, figsize=(8, 6), sharex=True)
            x = jnp.linspace(cases[0].domain[0], cases[0].domain[1], samples, dtype=layout.float_dtype)
            x_host = np.asarray(x)
            exact = np.asarray(cases[0].reference(x))
            ax_value.plot(x_host, exact, label="reference", color="black", linewidth=2)
            for case in cases:
                approx = np.asarray(case.approx(x))
                ax_value.plot(x_host, approx, label=case.name, alpha=0.7)
                ax_error.semilogy(x_host, np.abs(approx - exact) + np.finfo(np.float64).tiny, label=case.name)

            ax_value.set_title(f"{family} ({layout.name})")
            ax_value.legend()
            ax_error.set_ylabel("absolute error")
            ax_error.set_xlabel("x")
            fig.tight_layout()

            path = target / f"{family}.png"
            fig.savefig(path)
            plt.close(fig)
            written.append(path)
        return written


def run_quick_benchmark(functions: list[str] | None = None, samples: int = 1024) -> str:
    """Run a small accuracy-only benchmark and return the text report."""
    benchmark = AccuracyBenchmark()
    benchmark.run(functions=functions, samples=samples, include_speed=False)
    return benchmark.generate_report()
