from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """A point (x, y) in physical space."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Point":
        return Point(-self.x, -self.y)

    def __mul__(self, scale: float) -> "Point":
        return Point(self.x * scale, self.y * scale)

    __rmul__ = __mul__

    def approx_equal(self, other: "Point", eps: float = 1e-6) -> bool:
        """Component-wise comparison within `eps`."""
        return abs(self.x - other.x) < eps and abs(self.y - other.y) < eps

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def __str__(self) -> str:
        return f"({self.x},{self.y})"
