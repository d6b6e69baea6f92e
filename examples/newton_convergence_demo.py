#!/usr/bin/env python

"""
Newton-Raphson Convergence Demo - approxax

This script shows how each refinement step roughly doubles the number of correct
digits of the bit-seeded square root and reciprocal square root.
"""

import os

import jax
import jax.numpy as jnp
import matplotlib.pyplot as plt
import numpy as np

import approxax as ax


def plot_relative_errors(x, errors_by_family):
    """Plot the relative error of every iteration count on a log scale."""
    fig, axes = plt.subplots(1, len(errors_by_family), figsize=(14, 5), sharey=True)

    for axis, (family, errors) in zip(axes, errors_by_family.items()):
        for iterations, error in enumerate(errors):
            # Exact zeros would vanish from a log plot
            axis.semilogy(x, error + 1e-18, label=f"{iterations} iterations")
        axis.set_xscale("log")
        axis.set_title(family)
        axis.set_xlabel("x")
        axis.legend()

    axes[0].set_ylabel("relative error")
    plt.tight_layout()
    return fig


def main():
    # 1. Enable float64 so that the later iterations are not hidden by float32 rounding
    ax.enable_x64()

    # 2. The documented table for sqrt(2)
    print("approx_sqrt(2.0, iterations):")
    for iterations in range(4):
        value = float(ax.approx_sqrt(2.0, iterations))
        print(f"  {iterations}: {value!r:<20} error={abs(value - np.sqrt(2.0)):.3e}")

    # 3. Relative errors over a wide input range
    x = jnp.logspace(-3, 3, 2000)
    x_host = np.asarray(x)
    errors = {
        "sqrt": [np.abs(np.asarray(ax.approx_sqrt(x, k)) / np.sqrt(x_host) - 1) for k in range(5)],
        "inv_sqrt": [np.abs(np.asarray(ax.approx_inv_sqrt(x, k)) * np.sqrt(x_host) - 1) for k in range(5)],
    }

    # 4. The iteration count is static, so a jitted function bakes it in
    normalize = jax.jit(lambda v: v * ax.approx_inv_sqrt(jnp.sum(v * v), 4))
    print(f"Normalized [3, 4]: {normalize(jnp.array([3.0, 4.0]))}")

    # 5. Visualization
    plot_relative_errors(x_host, errors)
    os.makedirs("output", exist_ok=True)
    plt.savefig("output/newton_convergence.png")
    plt.show()


if __name__ == "__main__":
    main()
