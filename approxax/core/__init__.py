"""approxax core module: constants, float layouts, errors and JIT management."""

from .constants import AccuracyTargets, ApproximationConstants
from .errors import (
    ApproximationError,
    InvalidIterationCountError,
    LayoutError,
    PrecisionUnavailableError,
    UnsupportedDtypeError,
)
from .jit_manager import JITManager
from .layout import FLOAT32, FLOAT64, FloatLayout, layout_for
from .performance import PerformanceMonitor

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
    "PerformanceMonitor",
    "PrecisionUnavailableError",
    "UnsupportedDtypeError",
    "layout_for",
]
