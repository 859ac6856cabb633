from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

import equinox as eqx
import jax.numpy as jnp
import numpy as np

from numgrids.errors import GeometryInconsistencyError
from numgrids.geometry.point import Point
from numgrids.params import ArcLengthParams

if TYPE_CHECKING:
    from numgrids.curves.base import Curve

logger = logging.getLogger(__name__)


def consistency_check(
    boundary: Sequence["Curve"],
    eps: float = 1e-5,
    params: ArcLengthParams | None = None,
) -> tuple[bool, bool, bool, bool]:
    """Infer the traversal direction of each boundary curve around the loop.

    Curve i is *forward* (True) when its end at t=1 touches an endpoint of curve
    i+1 (mod 4), and *reversed* (False) when its end at t=0 does. After the
    directions are fixed, the oriented loop must close: the end of each oriented
    curve must coincide with the start of the next one.

    Raises
    ------
    GeometryInconsistencyError
        If some curve touches none of the next curve's endpoints, or the oriented
        curves do not chain into a closed loop.
    """

    ends = [(c.xy(0.0, params), c.xy(1.0, params)) for c in boundary]

    directions = []
    for i in range(4):
        start, end = ends[i]
        nxt = ends[(i + 1) % 4]
        if any(end.approx_equal(q, eps) for q in nxt):
            directions.append(True)
        elif any(start.approx_equal(q, eps) for q in nxt):
            directions.append(False)
        else:
            raise GeometryInconsistencyError(
                f"Boundary curve {i} shares no endpoint with curve {(i + 1) % 4} "
                f"(eps={eps}).",
                curve_index=i,
            )

    for i in range(4):
        j = (i + 1) % 4
        loop_end = ends[i][1] if directions[i] else ends[i][0]
        loop_start = ends[j][0] if directions[j] else ends[j][1]
        if not loop_end.approx_equal(loop_start, eps):
            raise GeometryInconsistencyError(
                f"Boundary curve {i} ends at {loop_end} but curve {j} starts at "
                f"{loop_start} when walked around the loop.",
                curve_index=i,
            )

    return tuple(directions)  # type: ignore[return-value]


def transfinite_interpolation(
    g0: jnp.ndarray,
    g1: jnp.ndarray,
    g2: jnp.ndarray,
    g3: jnp.ndarray,
) -> jnp.ndarray:
    """Coons-patch blend of four sampled boundaries.

    `g0`/`g2` have shape (n, 2) and run along ξ (bottom/top); `g1`/`g3` have shape
    (m, 2) and run along η (right/left). All four must start at the ξ=0 or η=0 end.
    Returns the (n, m, 2) grid, which reproduces the four boundaries on its edges.
    """

    n = g0.shape[0]
    m = g1.shape[0]
    xi = jnp.linspace(0.0, 1.0, n)[:, None, None]
    eta = jnp.linspace(0.0, 1.0, m)[None, :, None]

    edge = (
        (1.0 - xi) * g3[None, :, :]
        + xi * g1[None, :, :]
        + (1.0 - eta) * g0[:, None, :]
        + eta * g2[:, None, :]
    )
    corner = (
        (1.0 - xi) * (1.0 - eta) * g0[0]
        + (1.0 - xi) * eta * g2[0]
        + xi * (1.0 - eta) * g0[-1]
        + xi * eta * g2[-1]
    )
    return edge - corner


class Domain(eqx.Module):
    """Structured n x m grid bounded by four curves.

    Notes
    -----
    - Curves 0 and 2 are the ξ-boundaries (sampled with n points), curves 1 and 3 the
      η-boundaries (sampled with m points). They must form a closed loop in the order
      0, 1, 2, 3, each one in either direction.
    - Boundaries are sampled at uniform arc-length fractions, then blended by
      transfinite interpolation.
    - Node (i, j) sits at reference coordinates ξ = i/(n-1), η = j/(m-1).
    """

    boundary: tuple["Curve", "Curve", "Curve", "Curve"]
    boundary_directions: tuple[bool, bool, bool, bool] = eqx.field(static=True)
    n: int = eqx.field(static=True)
    m: int = eqx.field(static=True)

    x: jnp.ndarray
    y: jnp.ndarray

    @classmethod
    def make(
        cls,
        boundary: Sequence["Curve"],
        n: int,
        m: int,
        *,
        eps: float = 1e-5,
        params: ArcLengthParams | None = None,
    ) -> "Domain":
        boundary = tuple(boundary)
        if len(boundary) != 4:
            raise ValueError(f"A domain needs exactly four boundary curves, got {len(boundary)}.")
        if n < 2 or m < 2:
            raise ValueError(f"Grid resolution must be at least 2 x 2, got {n} x {m}.")

        directions = consistency_check(boundary, eps=eps, params=params)
        logger.debug("Boundary directions: %s", directions)

        g0, g1, g2, g3 = _sample_boundaries(boundary, directions, n, m, params)
        grid = transfinite_interpolation(g0, g1, g2, g3)
        logger.debug("Generated %d x %d transfinite grid.", n, m)

        return cls(
            boundary=boundary,
            boundary_directions=directions,
            n=int(n),
            m=int(m),
            x=grid[:, :, 0],
            y=grid[:, :, 1],
        )

    def get_n(self) -> int:
        return self.n

    def get_m(self) -> int:
        return self.m

    def get_xy(self, i: int, j: int) -> Point:
        return Point(float(self.x[i, j]), float(self.y[i, j]))

    def coordinates(self) -> tuple[jnp.ndarray, jnp.ndarray]:
        return self.x, self.y

    def boundary_points(
        self, precision: int, params: ArcLengthParams | None = None
    ) -> np.ndarray:
        """Each boundary curve sampled at `precision + 1` fractions, walked around the loop.

        Returns an array of shape (4, precision + 1, 2).
        """
        if precision < 1:
            raise ValueError("precision must be >= 1.")
        ts = np.linspace(0.0, 1.0, precision + 1)
        return np.stack(
            [
                curve.sample(ts if forward else 1.0 - ts, params)
                for curve, forward in zip(self.boundary, self.boundary_directions, strict=True)
            ]
        )


def _sample_boundaries(boundary, directions, n, m, params):
    # g0/g1 follow the loop; g2/g3 run against it so all four start at ξ=0 / η=0.
    xi = np.linspace(0.0, 1.0, n)
    eta = np.linspace(0.0, 1.0, m)

    def along(ts, forward):
        return ts if forward else 1.0 - ts

    g0 = boundary[0].sample(along(xi, directions[0]), params)
    g1 = boundary[1].sample(along(eta, directions[1]), params)
    g2 = boundary[2].sample(along(xi, not directions[2]), params)
    g3 = boundary[3].sample(along(eta, not directions[3]), params)
    return tuple(jnp.asarray(g) for g in (g0, g1, g2, g3))
