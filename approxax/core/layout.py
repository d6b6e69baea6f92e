"""IEEE-754 bit-field geometry for the supported float widths.

Each :class:`FloatLayout` describes one binary interchange format and derives
the integer constants the bit-seed generators need. The constants are computed
in Python at import time and enter traced programs as literals, so they are
fixed for every compilation.

Bit reinterpretation goes through ``jax.lax.bitcast_convert_type``, which is a
type-safe same-width cast that lowers to an XLA no-op.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import jax
import jax.numpy as jnp
import numpy as np
from jaxtyping import Array, Float, UInt

from .constants import ApproximationConstants
from .errors import LayoutError, PrecisionUnavailableError, UnsupportedDtypeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FloatLayout:
    """Bit-field description of an IEEE-754 binary float.

    Attributes:
        name: Short name of the format (``"float32"``/``"float64"``).
        total_bits: Width of the encoding, sign bit included.
        mantissa_bits: Number of explicitly stored fraction bits.
        exponent_bits: Width of the biased exponent field.
        float_dtype: NumPy dtype of the floating-point type.
        uint_dtype: NumPy dtype of the unsigned integer of equal width.
    """

    name: str
    total_bits: int
    mantissa_bits: int
    exponent_bits: int
    float_dtype: np.dtype[Any]
    uint_dtype: np.dtype[Any]

    def __post_init__(self) -> None:
        if self.mantissa_bits + self.exponent_bits + 1 != self.total_bits:
            raise LayoutError(
                f"{self.name}: mantissa ({self.mantissa_bits}) + exponent ({self.exponent_bits}) + sign "
                f"must equal total width {self.total_bits}",
                layout_name=self.name,
            )
        for dtype in (self.float_dtype, self.uint_dtype):
            if dtype.itemsize * 8 != self.total_bits:
                raise LayoutError(
                    f"{self.name}: dtype {dtype} is not {self.total_bits} bits wide", layout_name=self.name
                )

    @property
    def bias(self) -> int:
        """Exponent bias, ``2**(exponent_bits - 1) - 1``."""
        return (1 << (self.exponent_bits - 1)) - 1

    @property
    def magic_constant(self) -> int:
        """Integer subtrahend of the inverse square root seed.

        Computed as ``round(1.5 * 2**mantissa_bits * (bias - sigma))`` in double
        precision, rounding half up. For float32 this is ``0x5f3759df``.
        """
        scale = ApproximationConstants.INV_SQRT_MAGIC_SCALE * float(1 << self.mantissa_bits)
        return int(scale * (self.bias - ApproximationConstants.INV_SQRT_SIGMA) + 0.5)

    @property
    def sqrt_bias_correction(self) -> int:
        """Addend that re-biases the halved exponent in the square root seed."""
        half_step = 1 << (self.mantissa_bits - 1)
        return (self.bias + 1) * half_step - half_step

    def to_bits(self, x: Float[Array, "..."]) -> UInt[Array, "..."]:
        """Reinterpret a float array as unsigned integers of the same width."""
        return jax.lax.bitcast_convert_type(x, self.uint_dtype)

    def from_bits(self, bits: UInt[Array, "..."]) -> Float[Array, "..."]:
        """Reinterpret unsigned integers as floats of the same width."""
        return jax.lax.bitcast_convert_type(bits, self.float_dtype)

    def uint(self, value: int) -> np.generic:
        """Wrap a Python integer constant in this layout's unsigned scalar type."""
        return self.uint_dtype.type(value)


FLOAT32 = FloatLayout(
    name="float32",
    total_bits=32,
    mantissa_bits=23,
    exponent_bits=8,
    float_dtype=np.dtype(np.float32),
    uint_dtype=np.dtype(np.uint32),
)
"""Layout of IEEE-754 binary32."""

FLOAT64 = FloatLayout(
    name="float64",
    total_bits=64,
    mantissa_bits=52,
    exponent_bits=11,
    float_dtype=np.dtype(np.float64),
    uint_dtype=np.dtype(np.uint64),
)
"""Layout of IEEE-754 binary64."""

SUPPORTED_LAYOUTS: dict[str, FloatLayout] = {layout.name: layout for layout in (FLOAT32, FLOAT64)}


def x64_enabled() -> bool:
    """Return True when JAX keeps 64-bit dtypes instead of truncating them."""
    return bool(jax.dtypes.canonicalize_dtype(jnp.float64) == jnp.float64)


def require_x64() -> None:
    """Raise if float64 arrays cannot be represented in the current JAX mode.

    Raises:
        PrecisionUnavailableError: If ``jax_enable_x64`` is off.
    """
    if not x64_enabled():
        raise PrecisionUnavailableError(
            "float64 layout requested while JAX runs in 32-bit mode",
            recommended_action="Call approxax.enable_x64() before creating arrays",
        )


def layout_for(dtype: Any) -> FloatLayout:
    """Look up the layout matching a floating-point dtype.

    Args:
        dtype: Anything accepted by ``numpy.dtype`` (``jnp.float32``, ``"float64"``, ...).

    Returns:
        The matching :class:`FloatLayout`.

    Raises:
        UnsupportedDtypeError: For dtypes other than float32 and float64.
        PrecisionUnavailableError: For float64 when x64 mode is disabled.
    """
    try:
        name = np.dtype(dtype).name
    except TypeError as e:
        raise UnsupportedDtypeError(
            f"Cannot interpret {dtype!r} as a dtype", expected=tuple(SUPPORTED_LAYOUTS), actual=repr(dtype)
        ) from e

    layout = SUPPORTED_LAYOUTS.get(name)
    if layout is None:
        raise UnsupportedDtypeError("No IEEE-754 layout for dtype", expected=tuple(SUPPORTED_LAYOUTS), actual=name)
    if layout is FLOAT64:
        require_x64()
    return layout


logger.debug(
    f"Derived layout constants: float32 magic={FLOAT32.magic_constant:#x}, "
    f"float64 magic={FLOAT64.magic_constant:#x}"
)
