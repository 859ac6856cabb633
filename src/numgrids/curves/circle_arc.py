from __future__ import annotations

import math
from typing import Any

from numgrids.curves.base import Curve
from numgrids.duals import cos, sin
from numgrids.geometry.point import Point


class CircleArc(Curve):
    """Circular arc of radius r around `center`, native parameter = angle (radians).

    The arc runs counter-clockwise from `start_angle` to `end_angle`.
    """

    radius: float
    center: Point
    start_angle: float
    end_angle: float

    @classmethod
    def make(
        cls,
        radius: float,
        center: Point,
        start_angle: float,
        end_angle: float,
    ) -> "CircleArc":
        return cls(
            radius=float(radius),
            center=center,
            start_angle=float(start_angle),
            end_angle=float(end_angle),
        )

    @classmethod
    def unit(cls) -> "CircleArc":
        """The full unit circle."""
        return cls.scaled_unit(1.0)

    @classmethod
    def scaled_unit(cls, radius: float) -> "CircleArc":
        """Full circle of the given radius centred at the origin."""
        return cls.make(radius, Point(0.0, 0.0), 0.0, 2.0 * math.pi)

    @classmethod
    def unit_quadrant(cls, quadrant: int) -> "CircleArc":
        """Quarter of the unit circle; quadrant 0 spans angles [0, pi/2]."""
        if quadrant not in (0, 1, 2, 3):
            raise ValueError(f"unit_quadrant expects a quadrant in 0..3, got {quadrant}.")
        return cls.make(
            1.0,
            Point(0.0, 0.0),
            quadrant * math.pi / 2.0,
            (quadrant + 1) * math.pi / 2.0,
        )

    def get_smin(self) -> float:
        return self.start_angle

    def get_smax(self) -> float:
        return self.end_angle

    def xs(self, s: Any) -> Any:
        return cos(s) * self.radius + self.center.x

    def ys(self, s: Any) -> Any:
        return sin(s) * self.radius + self.center.y
