"""Timing collection for approximation benchmarks."""

import statistics
import time
from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, ClassVar


@dataclass
class OperationMetrics:
    """Metrics information for individual operations."""

    execution_times: list[float] = field(default_factory=list)
    compilation_time: float | None = None


class PerformanceMonitor:
    """Records wall-clock timings of approximations and their references."""

    # Manage metrics information with class variables
    _metrics: ClassVar[dict[str, OperationMetrics]] = {}

    @classmethod
    @contextmanager
    def measure(cls, operation_name: str) -> Generator[None, None, None]:
        """Operation time measurement context manager.

        Args:
            operation_name: Name of the operation to be measured.

        Yields:
            Measurement execution context.
        """
        start_time = time.perf_counter()
        try:
            yield
        finally:
            cls._record_execution_time(operation_name, time.perf_counter() - start_time)

    @classmethod
    def _record_execution_time(cls, operation_name: str, execution_time: float) -> None:
        if operation_name not in cls._metrics:
            cls._metrics[operation_name] = OperationMetrics()

        cls._metrics[operation_name].execution_times.append(execution_time)

    @classmethod
    def compilation_time(cls, func_name: str, compile_time: float) -> None:
        """Record compilation time.

        Args:
            func_name: Name of the function.
            compile_time: Compilation time in seconds.
        """
        if func_name not in cls._metrics:
            cls._metrics[func_name] = OperationMetrics()

        cls._metrics[func_name].compilation_time = compile_time

    @classmethod
    def calculate_speedup(cls, baseline_operation: str, optimized_operation: str) -> float:
        """Calculate speedup ratio.

        Args:
            baseline_operation: Name of the baseline operation.
            optimized_operation: Name of the optimized operation.

        Returns:
            Speedup ratio as a multiplier.

        Raises:
            ValueError: If either operation has no recorded execution times.
        """
        baseline_metrics = cls._metrics.get(baseline_operation)
        optimized_metrics = cls._metrics.get(optimized_operation)

        if not baseline_metrics or not baseline_metrics.execution_times:
            raise ValueError(f"No execution times found for baseline operation: {baseline_operation}")

        if not optimized_metrics or not optimized_metrics.execution_times:
            raise ValueError(f"No execution times found for optimized operation: {optimized_operation}")

        baseline_avg = statistics.mean(baseline_metrics.execution_times)
        optimized_avg = statistics.mean(optimized_metrics.execution_times)

        if optimized_avg == 0:
            return float("inf")

        return baseline_avg / optimized_avg

    @classmethod
    def get_performance_statistics(cls, operation_name: str) -> dict[str, Any]:
        """Get performance statistics information.

        Args:
            operation_name: Name of the operation.

        Returns:
            Dictionary containing statistical information, empty if nothing was measured.
        """
        metrics = cls._metrics.get(operation_name)
        if not metrics or not metrics.execution_times:
            return {}

        times = metrics.execution_times
        return {
            "count": len(times),
            "mean": statistics.mean(times),
            "median": statistics.median(times),
            "min": min(times),
            "max": max(times),
            "std": statistics.stdev(times) if len(times) > 1 else 0.0,
            "compilation_time": metrics.compilation_time,
        }

    @classmethod
    def get_stats(cls) -> dict[str, dict[str, Any]]:
        """Get statistics for every measured operation."""
        return {name: cls.get_performance_statistics(name) for name in cls._metrics}

    @classmethod
    def clear_stats(cls) -> None:
        """Clear all recorded metrics."""
        cls._metrics.clear()
