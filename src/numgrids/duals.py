"""Forward-mode automatic differentiation with dual numbers.

A dual number ``a + b ε`` with ``ε² = 0`` carries a value and its derivative
through every arithmetic operation. Writing a function once against
:class:`DualNumber` (or the module-level ``sin``/``cos``/``exp``/... helpers, which
also accept plain scalars) gives its exact derivative in a single evaluation:

    >>> diff(lambda x: x**5 + x**2, 2.0)
    84.0

The scalar parts may be Python floats, NumPy scalars/arrays or JAX arrays.
Transcendental functions dispatch to ``jax.numpy`` for JAX inputs and to ``numpy``
otherwise, so derivatives of array inputs are taken elementwise.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

import jax
import jax.numpy as jnp
import numpy as np


def _lib(a: Any):
    return jnp if isinstance(a, jax.Array) else np


def _one_like(a: Any):
    if getattr(a, "shape", ()) == ():
        return 1.0
    return _lib(a).ones_like(a)


@dataclass(frozen=True)
class DualNumber:
    """Truncated first-order Taylor expansion ``primal + tangent ε``."""

    primal: Any
    tangent: Any = 0.0

    @classmethod
    def real(cls, a: Any) -> "DualNumber":
        """A constant (zero tangent)."""
        return cls(a, 0.0)

    @classmethod
    def variable(cls, a: Any) -> "DualNumber":
        """The independent variable (unit tangent)."""
        return cls(a, _one_like(a))

    # Arithmetic

    def __add__(self, other: Any) -> "DualNumber":
        if isinstance(other, DualNumber):
            return DualNumber(self.primal + other.primal, self.tangent + other.tangent)
        return DualNumber(self.primal + other, self.tangent)

    __radd__ = __add__

    def __sub__(self, other: Any) -> "DualNumber":
        if isinstance(other, DualNumber):
            return DualNumber(self.primal - other.primal, self.tangent - other.tangent)
        return DualNumber(self.primal - other, self.tangent)

    def __rsub__(self, other: Any) -> "DualNumber":
        return DualNumber(other - self.primal, -self.tangent)

    def __neg__(self) -> "DualNumber":
        return DualNumber(-self.primal, -self.tangent)

    def __mul__(self, other: Any) -> "DualNumber":
        if isinstance(other, DualNumber):
            return DualNumber(
                self.primal * other.primal,
                self.primal * other.tangent + self.tangent * other.primal,
            )
        return DualNumber(self.primal * other, self.tangent * other)

    __rmul__ = __mul__

    def inverse(self) -> "DualNumber":
        """Reciprocal ``1/a`` with tangent ``-b/a²``."""
        return DualNumber(1.0 / self.primal, -self.tangent / (self.primal * self.primal))

    def __truediv__(self, other: Any) -> "DualNumber":
        if isinstance(other, DualNumber):
            return DualNumber(
                self.primal / other.primal,
                (self.tangent * other.primal - self.primal * other.tangent)
                / (other.primal * other.primal),
            )
        return DualNumber(self.primal / other, self.tangent / other)

    def __rtruediv__(self, other: Any) -> "DualNumber":
        return self.inverse() * other

    def __pow__(self, p: Any) -> "DualNumber":
        if isinstance(p, DualNumber):
            raise TypeError("DualNumber exponents are not supported; use exp(p * log(x)).")
        if p == 0:
            return DualNumber(self.primal**0, 0.0 * self.tangent)
        return DualNumber(self.primal**p, p * self.primal ** (p - 1) * self.tangent)

    # Ordering compares the primal part so piecewise definitions can branch on duals.

    def __lt__(self, other: Any) -> Any:
        return self.primal < _primal(other)

    def __le__(self, other: Any) -> Any:
        return self.primal <= _primal(other)

    def __gt__(self, other: Any) -> Any:
        return self.primal > _primal(other)

    def __ge__(self, other: Any) -> Any:
        return self.primal >= _primal(other)

    # Transcendental functions

    def sin(self) -> "DualNumber":
        lib = _lib(self.primal)
        return DualNumber(lib.sin(self.primal), self.tangent * lib.cos(self.primal))

    def cos(self) -> "DualNumber":
        lib = _lib(self.primal)
        return DualNumber(lib.cos(self.primal), -self.tangent * lib.sin(self.primal))

    def exp(self) -> "DualNumber":
        e = _lib(self.primal).exp(self.primal)
        return DualNumber(e, self.tangent * e)

    def sqrt(self) -> "DualNumber":
        r = _lib(self.primal).sqrt(self.primal)
        return DualNumber(r, self.tangent / (2.0 * r))

    def log(self) -> "DualNumber":
        return DualNumber(_lib(self.primal).log(self.primal), self.tangent / self.primal)

    def __str__(self) -> str:
        return f"{self.primal}+{self.tangent}ε"


def _primal(x: Any) -> Any:
    return x.primal if isinstance(x, DualNumber) else x


def primal(x: Any) -> Any:
    """Value part of ``x`` (identity for plain scalars)."""
    return _primal(x)


def sin(x: Any) -> Any:
    return x.sin() if isinstance(x, DualNumber) else _lib(x).sin(x)


def cos(x: Any) -> Any:
    return x.cos() if isinstance(x, DualNumber) else _lib(x).cos(x)


def exp(x: Any) -> Any:
    return x.exp() if isinstance(x, DualNumber) else _lib(x).exp(x)


def sqrt(x: Any) -> Any:
    return x.sqrt() if isinstance(x, DualNumber) else _lib(x).sqrt(x)


def log(x: Any) -> Any:
    return x.log() if isinstance(x, DualNumber) else _lib(x).log(x)


def diff(f: Callable[[DualNumber], Any], x: Any) -> Any:
    """Derivative of ``f`` at ``x`` from one forward evaluation.

    ``f`` must be written against :class:`DualNumber` arithmetic (or the helpers in
    this module). A plain-scalar return value is treated as a constant.
    """

    out = f(DualNumber.variable(x))
    if isinstance(out, DualNumber):
        return out.tangent
    return 0.0 * out
