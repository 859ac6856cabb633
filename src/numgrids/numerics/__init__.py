"""Scalar numerical primitives: adaptive quadrature and Newton root finding."""

from .newton import NewtonResult, newton
from .quadrature import QuadratureResult, adaptive_simpson, integrate, simpson

__all__ = [
    "NewtonResult",
    "newton",
    "QuadratureResult",
    "adaptive_simpson",
    "integrate",
    "simpson",
]
