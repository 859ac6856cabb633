from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NewtonResult:
    root: float
    iterations: int
    step: float  # size of the last Newton step
    converged: bool


def newton(
    f: Callable[[float], float],
    df: Callable[[float], float],
    x0: float,
    *,
    tol: float = 1e-7,
    max_iter: int = 1000,
) -> NewtonResult:
    """Solve f(x) = 0 with Newton's method starting from `x0`.

    Iterates x <- x - f(x)/df(x) until the step size drops below `tol`.

    Non-convergence (iteration cap reached, or a vanishing derivative) is reported
    through ``converged=False`` and a logged warning; the last iterate is returned as
    the best available estimate.
    """

    x = float(x0)
    step = float("inf")
    for it in range(1, max_iter + 1):
        slope = df(x)
        if slope == 0.0:
            logger.warning("Newton's method hit a zero derivative at x=%g after %d steps.", x, it - 1)
            return NewtonResult(root=x, iterations=it - 1, step=step, converged=False)
        x_new = float(x - f(x) / slope)
        step = abs(x_new - x)
        x = x_new
        if step < tol:
            return NewtonResult(root=x, iterations=it, step=step, converged=True)

    logger.warning(
        "No convergence in Newton's method after %d iterations (last step %g, x=%g).",
        max_iter,
        step,
        x,
    )
    return NewtonResult(root=x, iterations=max_iter, step=step, converged=False)
