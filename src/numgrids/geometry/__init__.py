from .point import Point
from .domain import Domain, consistency_check, transfinite_interpolation

__all__ = [
    "Point",
    "Domain",
    "consistency_check",
    "transfinite_interpolation",
]
