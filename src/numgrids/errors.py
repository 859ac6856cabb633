from __future__ import annotations


class NumGridsError(Exception):
    """Base class for errors raised by numgrids."""


class GeometryInconsistencyError(NumGridsError, ValueError):
    """The four boundary curves do not close into a quadrilateral loop."""

    def __init__(self, message: str, curve_index: int | None = None):
        super().__init__(message)
        self.curve_index = curve_index


class DomainMismatchError(NumGridsError, ValueError):
    """Grid functions defined on different Domain instances were combined."""
