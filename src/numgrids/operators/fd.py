from __future__ import annotations

import jax.numpy as jnp


def d1_open(f: jnp.ndarray, dx: float, axis: int = 0) -> jnp.ndarray:
    """Second-order finite difference along `axis` of an *open* (non-periodic) grid.

    Uses:
      - centered stencil in the interior
      - 2nd-order one-sided stencils at the first and last nodes

    On a structured grid this gives the reference-space partials (∂/∂ξ along axis 0,
    ∂/∂η along axis 1) of coordinates and field values alike.
    """
    f = jnp.moveaxis(jnp.asarray(f), axis, 0)
    n = int(f.shape[0])
    if n < 3:
        raise ValueError("d1_open requires at least 3 points along the differentiated axis.")

    # Interior: centered
    df = jnp.zeros_like(f)
    df = df.at[1:-1].set((f[2:] - f[:-2]) / (2.0 * dx))

    # Boundaries: one-sided 2nd order
    df0 = (-3.0 * f[0] + 4.0 * f[1] - f[2]) / (2.0 * dx)
    dfN = (3.0 * f[-1] - 4.0 * f[-2] + f[-3]) / (2.0 * dx)
    df = df.at[0].set(df0)
    df = df.at[-1].set(dfN)
    return jnp.moveaxis(df, 0, axis)


def d1_open_at(f: jnp.ndarray, k: int, dx: float) -> jnp.ndarray:
    """The `d1_open` stencil evaluated at the single node `k` of a 1D line `f`."""
    f = jnp.asarray(f)
    n = int(f.shape[0])
    if n < 3:
        raise ValueError("d1_open_at requires at least 3 points.")
    if not 0 <= k < n:
        raise IndexError(f"node {k} outside a line of {n} points.")

    if k == 0:
        return (-3.0 * f[0] + 4.0 * f[1] - f[2]) / (2.0 * dx)
    if k == n - 1:
        return (3.0 * f[-1] - 4.0 * f[-2] + f[-3]) / (2.0 * dx)
    return (f[k + 1] - f[k - 1]) / (2.0 * dx)
