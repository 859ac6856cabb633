from .base import Curve
from .circle_arc import CircleArc
from .sigmoid import SigmoidCurve
from .straight_line import StraightLine

__all__ = [
    "Curve",
    "CircleArc",
    "SigmoidCurve",
    "StraightLine",
]
