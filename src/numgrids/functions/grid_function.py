from __future__ import annotations

from typing import Any, Callable

import equinox as eqx
import jax.numpy as jnp

from numgrids.errors import DomainMismatchError
from numgrids.geometry.domain import Domain
from numgrids.operators.fd import d1_open, d1_open_at


def jacobian(domain: Domain) -> tuple[jnp.ndarray, jnp.ndarray, jnp.ndarray, jnp.ndarray]:
    """Geometry Jacobian entries (x_ξ, x_η, y_ξ, y_η) at every node of `domain`."""

    h_xi, h_eta = _spacing(domain)
    x, y = domain.coordinates()
    return (
        d1_open(x, h_xi, axis=0),
        d1_open(x, h_eta, axis=1),
        d1_open(y, h_xi, axis=0),
        d1_open(y, h_eta, axis=1),
    )


def physical_gradient(u_xi, u_eta, x_xi, x_eta, y_xi, y_eta):
    """Map reference-space partials to (∂u/∂x, ∂u/∂y) by inverting the 2x2 Jacobian.

    Cramer's rule on [[x_ξ, y_ξ], [x_η, y_η]] (u_x, u_y)^T = (u_ξ, u_η)^T.
    """

    det_j = x_xi * y_eta - x_eta * y_xi
    u_x = (u_xi * y_eta - u_eta * y_xi) / det_j
    u_y = (u_eta * x_xi - u_xi * x_eta) / det_j
    return u_x, u_y


def _spacing(domain: Domain) -> tuple[float, float]:
    return 1.0 / (domain.get_n() - 1), 1.0 / (domain.get_m() - 1)


class GridFunction(eqx.Module):
    """Scalar field sampled at the nodes of a `Domain`.

    Notes
    -----
    - ``values[i, j]`` is the field at node (i, j), i.e. at ``domain.get_xy(i, j)``.
    - Derivatives use second-order finite differences in reference space (centered in
      the interior, one-sided on the edges) on the coordinates and the values alike,
      then the inverse Jacobian. Differentiation needs at least 3 x 3 nodes.
    - Grid functions can only be combined when they reference the *same* Domain
      instance; geometrically identical but separately built domains are rejected.
    """

    domain: Domain
    values: jnp.ndarray
    h_xi: float = eqx.field(static=True)
    h_eta: float = eqx.field(static=True)

    def __check_init__(self):
        expected = (self.domain.get_n(), self.domain.get_m())
        if tuple(self.values.shape) != expected:
            raise ValueError(
                f"GridFunction values have shape {tuple(self.values.shape)}, "
                f"domain expects {expected}."
            )

    @classmethod
    def from_values(cls, domain: Domain, values: Any) -> "GridFunction":
        h_xi, h_eta = _spacing(domain)
        return cls(
            domain=domain,
            values=jnp.asarray(values, dtype=domain.x.dtype),
            h_xi=h_xi,
            h_eta=h_eta,
        )

    @classmethod
    def zeros(cls, domain: Domain) -> "GridFunction":
        return cls.from_values(domain, jnp.zeros_like(domain.x))

    @classmethod
    def from_function(cls, domain: Domain, fnc: Callable[[Any, Any], Any]) -> "GridFunction":
        """Sample ``fnc(x, y)`` at every node.

        `fnc` is called once with the full (n, m) coordinate arrays, so it should be
        written with array operations (``jnp.sin``, ``**``, ...). A scalar result is
        broadcast to every node.
        """
        x, y = domain.coordinates()
        values = jnp.broadcast_to(jnp.asarray(fnc(x, y), dtype=x.dtype), x.shape)
        return cls.from_values(domain, values)

    def with_function(self, fnc: Callable[[Any, Any], Any]) -> "GridFunction":
        """Regenerate all values from `fnc` on the same domain."""
        return GridFunction.from_function(self.domain, fnc)

    def get_value(self, i: int, j: int) -> float:
        return float(self.values[i, j])

    # Differentiation

    def partial_derivative(self, i: int, j: int) -> tuple[float, float]:
        """(∂u/∂x, ∂u/∂y) at node (i, j)."""
        x, y = self.domain.coordinates()

        def d_xi(f):
            return d1_open_at(f[:, j], i, self.h_xi)

        def d_eta(f):
            return d1_open_at(f[i, :], j, self.h_eta)

        u_x, u_y = physical_gradient(
            d_xi(self.values),
            d_eta(self.values),
            d_xi(x),
            d_eta(x),
            d_xi(y),
            d_eta(y),
        )
        return float(u_x), float(u_y)

    def pd_xy(self) -> tuple["GridFunction", "GridFunction"]:
        """Gradient (∂u/∂x, ∂u/∂y) at every node."""
        x_xi, x_eta, y_xi, y_eta = jacobian(self.domain)
        u_xi = d1_open(self.values, self.h_xi, axis=0)
        u_eta = d1_open(self.values, self.h_eta, axis=1)
        u_x, u_y = physical_gradient(u_xi, u_eta, x_xi, x_eta, y_xi, y_eta)
        return self._like(u_x), self._like(u_y)

    def pdx(self) -> "GridFunction":
        return self.pd_xy()[0]

    def pdy(self) -> "GridFunction":
        return self.pd_xy()[1]

    def laplace(self) -> "GridFunction":
        """∂²u/∂x² + ∂²u/∂y² by applying the gradient twice."""
        u_x, u_y = self.pd_xy()
        return u_x.pdx() + u_y.pdy()

    # Arithmetic

    def _like(self, values: jnp.ndarray) -> "GridFunction":
        return GridFunction(domain=self.domain, values=values, h_xi=self.h_xi, h_eta=self.h_eta)

    def _operand(self, other: Any, op: str) -> Any:
        if isinstance(other, GridFunction):
            if other.domain is not self.domain:
                raise DomainMismatchError(f"Can't {op} functions defined on different domains.")
            return other.values
        return other

    def __add__(self, other: Any) -> "GridFunction":
        return self._like(self.values + self._operand(other, "add"))

    __radd__ = __add__

    def __sub__(self, other: Any) -> "GridFunction":
        return self._like(self.values - self._operand(other, "subtract"))

    def __rsub__(self, other: Any) -> "GridFunction":
        return self._like(other - self.values)

    def __mul__(self, other: Any) -> "GridFunction":
        return self._like(self.values * self._operand(other, "multiply"))

    __rmul__ = __mul__

    def __neg__(self) -> "GridFunction":
        return self._like(-self.values)
