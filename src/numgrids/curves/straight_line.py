from __future__ import annotations

from typing import Any

from numgrids.curves.base import Curve
from numgrids.geometry.point import Point


class StraightLine(Curve):
    """Straight segment x = vx*s + x0, y = vy*s + y0 for s in [s_min, s_max]."""

    vx: float
    vy: float
    x0: float
    y0: float
    s_min: float = 0.0
    s_max: float = 1.0

    @classmethod
    def make(
        cls,
        vx: float,
        vy: float,
        x0: float,
        y0: float,
        s_min: float = 0.0,
        s_max: float = 1.0,
    ) -> "StraightLine":
        return cls(
            vx=float(vx),
            vy=float(vy),
            x0=float(x0),
            y0=float(y0),
            s_min=float(s_min),
            s_max=float(s_max),
        )

    @classmethod
    def from_points(cls, start: Point, end: Point) -> "StraightLine":
        """Segment from `start` (s=0) to `end` (s=1)."""
        return cls.make(end.x - start.x, end.y - start.y, start.x, start.y)

    @classmethod
    def unit(cls, side: int) -> "StraightLine":
        """One side of the unit square, walked counter-clockwise.

        0: y=0, 1: x=1, 2: y=1 (right to left), 3: x=0 (top to bottom).
        """
        sides = {
            0: (1.0, 0.0, 0.0, 0.0),
            1: (0.0, 1.0, 1.0, 0.0),
            2: (-1.0, 0.0, 1.0, 1.0),
            3: (0.0, -1.0, 0.0, 1.0),
        }
        if side not in sides:
            raise ValueError(f"StraightLine.unit expects a side in 0..3, got {side}.")
        return cls.make(*sides[side])

    def get_smin(self) -> float:
        return self.s_min

    def get_smax(self) -> float:
        return self.s_max

    def xs(self, s: Any) -> Any:
        return s * self.vx + self.x0

    def ys(self, s: Any) -> Any:
        return s * self.vy + self.y0

    # Constant speed: skip the dual evaluation.
    def dxs(self, s: float) -> float:
        return self.vx

    def dys(self, s: float) -> float:
        return self.vy
