from __future__ import annotations

import logging
import math
from abc import abstractmethod
from typing import Any, Sequence

import equinox as eqx
import numpy as np

from numgrids.duals import diff
from numgrids.geometry.point import Point
from numgrids.numerics.newton import newton
from numgrids.numerics.quadrature import QuadratureResult, adaptive_simpson
from numgrids.params import DEFAULT_ARC_LENGTH_PARAMS, ArcLengthParams

logger = logging.getLogger(__name__)


class Curve(eqx.Module):
    """Planar curve given in a native parametrization s in [s_min, s_max].

    Variants only provide the native domain and the position maps ``xs``/``ys``.
    Both must accept a `DualNumber` (and return one) as well as plain floats, so the
    speed ``(dxs, dys)`` is obtained by forward differentiation. Everything else is
    derived here:

      - ``integrate(s)``: arc length from s_min to s (adaptive Simpson),
      - ``find_s(t)``: native parameter at normalized arc-length fraction t (Newton),
      - ``xy(t)``: the point at arc-length fraction t.

    Sampling ``xy`` at evenly spaced t therefore gives (approximately) evenly spaced
    points along the curve however unevenly the native parametrization moves.
    """

    def __check_init__(self):
        if not self.get_smin() < self.get_smax():
            raise ValueError(
                f"{type(self).__name__} requires s_min < s_max, got "
                f"[{self.get_smin()}, {self.get_smax()}]."
            )

    @abstractmethod
    def get_smin(self) -> float:
        """Start of the native parametrization."""

    @abstractmethod
    def get_smax(self) -> float:
        """End of the native parametrization."""

    @abstractmethod
    def xs(self, s: Any) -> Any:
        """x-coordinate at native parameter s."""

    @abstractmethod
    def ys(self, s: Any) -> Any:
        """y-coordinate at native parameter s."""

    def dxs(self, s: float) -> float:
        return diff(self.xs, s)

    def dys(self, s: float) -> float:
        return diff(self.ys, s)

    def integrand(self, s: float) -> float:
        """Arc-length speed |(dxs, dys)| at s."""
        return math.hypot(float(self.dxs(s)), float(self.dys(s)))

    def _arc(self, a: float, b: float, params: ArcLengthParams) -> QuadratureResult:
        return adaptive_simpson(
            self.integrand,
            a,
            b,
            tol=params.quad_tol,
            max_depth=params.quad_max_depth,
        )

    def arc_length(self, s: float, params: ArcLengthParams | None = None) -> QuadratureResult:
        """Arc length from s_min to s with the quadrature diagnostics.

        ``converged`` is False when some sub-interval hit ``params.quad_max_depth``.
        """
        if params is None:
            params = DEFAULT_ARC_LENGTH_PARAMS
        return self._arc(self.get_smin(), s, params)

    def integrate(self, s: float, params: ArcLengthParams | None = None) -> float:
        """Arc length from s_min to s (value of `arc_length`)."""
        return self.arc_length(s, params).value

    def length(self, params: ArcLengthParams | None = None) -> float:
        return self.integrate(self.get_smax(), params)

    def _anchor(self, params: ArcLengthParams) -> tuple[float, float]:
        # Arc length up to the Newton seed, shared by every inversion.
        seed = float(params.newton_seed)
        return seed, self.integrate(seed, params)

    def _find_s(
        self,
        t: float,
        total: float,
        params: ArcLengthParams,
        anchor: tuple[float, float] | None = None,
    ) -> float:
        if t == 0.0:
            return self.get_smin()
        if t == 1.0:
            return self.get_smax()
        if anchor is None:
            anchor = self._anchor(params)

        target = t * total
        # Running (s, arc length) pair: each residual only integrates from the
        # previous iterate.
        last_s, last_arc = anchor

        def residual(s: float) -> float:
            nonlocal last_s, last_arc
            last_arc = last_arc + self._arc(last_s, s, params).value
            last_s = s
            return last_arc - target

        result = newton(
            residual,
            self.integrand,
            params.newton_seed,
            tol=params.newton_tol,
            max_iter=params.newton_max_iter,
        )
        if not result.converged:
            logger.warning(
                "%s: arc-length inversion at t=%g did not converge; using s=%g.",
                type(self).__name__,
                t,
                result.root,
            )
        return result.root

    def find_s(self, t: float, params: ArcLengthParams | None = None) -> float:
        """Native parameter s with integrate(s) = t * length(), for t in [0, 1]."""
        if params is None:
            params = DEFAULT_ARC_LENGTH_PARAMS
        if t in (0.0, 1.0):
            return self._find_s(t, 0.0, params)
        return self._find_s(t, self.length(params), params)

    def _point(self, s: float) -> Point:
        return Point(float(self.xs(s)), float(self.ys(s)))

    def xy(self, t: float, params: ArcLengthParams | None = None) -> Point:
        """Point at normalized arc-length fraction t."""
        return self._point(self.find_s(t, params))

    def sample(self, ts: Sequence[float], params: ArcLengthParams | None = None) -> np.ndarray:
        """Points at the arc-length fractions `ts`, as an array of shape (len(ts), 2)."""
        if params is None:
            params = DEFAULT_ARC_LENGTH_PARAMS
        total = self.length(params)
        anchor = self._anchor(params)
        out = np.empty((len(ts), 2), dtype=np.float64)
        for k, t in enumerate(ts):
            p = self._point(self._find_s(float(t), total, params, anchor))
            out[k] = (p.x, p.y)
        return out
