from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuadratureResult:
    value: float
    evaluations: int
    converged: bool  # False if some sub-interval hit `max_depth`


def simpson(f: Callable[[float], float], a: float, b: float) -> float:
    """Simpson's rule on a single interval."""

    return (b - a) / 6.0 * (f(a) + 4.0 * f(0.5 * (a + b)) + f(b))


def adaptive_simpson(
    f: Callable[[float], float],
    a: float,
    b: float,
    *,
    tol: float = 1e-8,
    max_depth: int = 50,
) -> QuadratureResult:
    """Adaptive ("asymptotic") Simpson integration of `f` over [a, b].

    On each interval the whole-interval Simpson estimate I1 is compared with the sum of
    the two half-interval estimates I2. If |I1 - I2| < tol the refined value I2 is
    accepted; otherwise both halves are integrated with tol/2 each, so the error
    budget is split rather than repeated.

    Notes
    -----
    - Recursion stops at `max_depth` levels. The refined estimate is then accepted for
      that sub-interval and the result is flagged ``converged=False``.
    - ``a > b`` integrates with negative orientation; ``a == b`` returns 0.
    """

    if max_depth < 0:
        raise ValueError("max_depth must be >= 0.")

    evaluations = 0
    capped = False

    def g(x: float) -> float:
        nonlocal evaluations
        evaluations += 1
        return f(x)

    def recurse(a, b, fa, fm, fb, whole, tol, depth):
        nonlocal capped
        m = 0.5 * (a + b)
        lm = 0.5 * (a + m)
        rm = 0.5 * (m + b)
        flm = g(lm)
        frm = g(rm)
        left = (m - a) / 6.0 * (fa + 4.0 * flm + fm)
        right = (b - m) / 6.0 * (fm + 4.0 * frm + fb)
        refined = left + right
        if abs(whole - refined) < tol:
            return refined
        if depth >= max_depth:
            capped = True
            return refined
        return recurse(a, m, fa, flm, fm, left, 0.5 * tol, depth + 1) + recurse(
            m, b, fm, frm, fb, right, 0.5 * tol, depth + 1
        )

    if a == b:
        return QuadratureResult(value=0.0, evaluations=0, converged=True)

    fa = g(a)
    fm = g(0.5 * (a + b))
    fb = g(b)
    whole = (b - a) / 6.0 * (fa + 4.0 * fm + fb)
    value = float(recurse(a, b, fa, fm, fb, whole, tol, 0))

    if capped:
        logger.warning(
            "Adaptive Simpson on [%g, %g] reached max_depth=%d before meeting tol=%g; "
            "returning best estimate %g.",
            a,
            b,
            max_depth,
            tol,
            value,
        )
    return QuadratureResult(value=value, evaluations=evaluations, converged=not capped)


def integrate(
    f: Callable[[float], float],
    a: float,
    b: float,
    *,
    tol: float = 1e-8,
    max_depth: int = 50,
) -> float:
    """Definite integral of `f` over [a, b] (see `adaptive_simpson`)."""

    return adaptive_simpson(f, a, b, tol=tol, max_depth=max_depth).value
