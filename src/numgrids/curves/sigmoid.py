from __future__ import annotations

from typing import Any

from numgrids.curves.base import Curve
from numgrids.duals import exp


class SigmoidCurve(Curve):
    """Graph of a smooth bump y(x) built from two logistic sigmoids, with x = s.

    For s below the midpoint between `rise_at` and `fall_at` the curve follows a
    logistic rise centred at `rise_at`; above it, a logistic fall centred at
    `fall_at`:

      y(s) = height / (1 + exp(-k (s - rise_at)))   (rising half)
      y(s) = height / (1 + exp( k (s - fall_at)))   (falling half)

    The native speed varies strongly along the curve, which makes it a useful stress
    case for arc-length sampling.
    """

    s_min: float
    s_max: float
    height: float = 0.5
    steepness: float = 3.0
    rise_at: float = -6.0
    fall_at: float = 0.0

    @classmethod
    def special(cls) -> "SigmoidCurve":
        """Bump on s in [-10, 5] rising around -6 and falling around 0."""
        return cls(s_min=-10.0, s_max=5.0)

    def get_smin(self) -> float:
        return self.s_min

    def get_smax(self) -> float:
        return self.s_max

    def xs(self, s: Any) -> Any:
        return 1.0 * s

    def ys(self, s: Any) -> Any:
        if s < 0.5 * (self.rise_at + self.fall_at):
            return self.height / (1.0 + exp(-self.steepness * (s - self.rise_at)))
        return self.height / (1.0 + exp(self.steepness * (s - self.fall_at)))
