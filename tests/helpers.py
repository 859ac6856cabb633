from __future__ import annotations

import math

from numgrids.curves import CircleArc, SigmoidCurve, StraightLine
from numgrids.geometry import Domain, Point


def unit_square_boundary() -> list[StraightLine]:
    return [StraightLine.unit(side) for side in range(4)]


def unit_square_domain(n: int = 5, m: int = 5) -> Domain:
    return Domain.make(unit_square_boundary(), n, m)


def annulus_sector_boundary(r_in: float = 1.0, r_out: float = 2.0) -> list:
    """Quarter annulus in the first quadrant; the inner arc is stored reversed."""

    return [
        StraightLine.from_points(Point(r_in, 0.0), Point(r_out, 0.0)),
        CircleArc.make(r_out, Point(0.0, 0.0), 0.0, 0.5 * math.pi),
        StraightLine.from_points(Point(0.0, r_out), Point(0.0, r_in)),
        CircleArc.make(r_in, Point(0.0, 0.0), 0.0, 0.5 * math.pi),
    ]


def annulus_sector_domain(n: int = 9, m: int = 7) -> Domain:
    return Domain.make(annulus_sector_boundary(), n, m)


def special_boundary() -> list:
    """Sigmoid bump at the bottom, straight sides and top (reference test geometry)."""

    return [
        SigmoidCurve.special(),
        StraightLine.make(0.0, 1.0, 5.0, 0.0, 0.0, 3.0),
        StraightLine.make(1.0, 0.0, 0.0, 3.0, -10.0, 5.0),
        StraightLine.make(0.0, 1.0, -10.0, 0.0, 0.0, 3.0),
    ]
