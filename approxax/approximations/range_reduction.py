"""Argument folding for the sine/cosine approximations.

The input is measured in quarter turns, ``w = x * 2/pi``, so that one period of
sine is ``w`` in ``[0, 4)``. A fixed sequence of subtract/reflect/modulo steps
then folds ``w`` into ``[-1, 1]``, where ``sin(pi*w/2)`` is an odd function that
the minimax polynomial covers.
"""

import jax.numpy as jnp

from ..core.constants import ApproximationConstants
from ..core.type_system import FloatArray, FoldedArgument


def reduce_range(x: FloatArray, quarter_turns: float = 0.0) -> FoldedArgument:
    """Fold a radian argument into ``[-1, 1]`` quarter turns.

    Args:
        x: Angle in radians, float32 or float64.
        quarter_turns: Phase offset added after scaling. ``1.0`` turns the sine
            fold into a cosine fold since ``cos(x) = sin(x + pi/2)``.

    Returns:
        Folded argument ``w`` with ``sin(pi*w/2)`` equal to ``sin(x + quarter_turns*pi/2)``.
        ``w`` lies in ``[-1, 1]`` for every finite ``x``; NaN and infinities give NaN.
    """
    w = x * ApproximationConstants.FRAC_2_PI
    if quarter_turns:
        w = w + quarter_turns

    for step in range(ApproximationConstants.FOLD_STEPS):
        w = w - 1.0
        if step % 2 == 0:
            w = jnp.where(w < 0.0, -w, w)
        # fmod keeps the sign of the dividend
        w = jnp.fmod(w, ApproximationConstants.FOLD_PERIOD)

    return jnp.where(w > 1.0, 2.0 - w, jnp.where(w < -1.0, -2.0 - w, w))
