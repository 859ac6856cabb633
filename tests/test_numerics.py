from __future__ import annotations

import logging
import math

from numgrids.numerics import adaptive_simpson, integrate, newton, simpson


def test_simpson_is_exact_for_cubics() -> None:
    assert math.isclose(simpson(lambda x: x**3 - x, 0.0, 2.0), 2.0, abs_tol=1e-14)


def test_adaptive_simpson_polynomials() -> None:
    assert abs(integrate(lambda t: t, 0.0, 1.0) - 0.5) < 1e-12
    assert abs(integrate(lambda t: t**2, -1.0, 1.0) - 2.0 / 3.0) < 1e-12


def test_adaptive_simpson_smooth_integrand() -> None:
    result = adaptive_simpson(math.exp, 0.0, 3.0, tol=1e-10)
    assert result.converged
    assert abs(result.value - (math.exp(3.0) - 1.0)) < 1e-9


def test_adaptive_simpson_refines_where_needed() -> None:
    # A sharp peak needs many more evaluations than a flat integrand.
    flat = adaptive_simpson(lambda t: 1.0, -1.0, 1.0)
    peak = adaptive_simpson(lambda t: 1.0 / (1e-3 + t * t), -1.0, 1.0)
    assert flat.evaluations < peak.evaluations
    exact = 2.0 / math.sqrt(1e-3) * math.atan(1.0 / math.sqrt(1e-3))
    assert abs(peak.value - exact) < 1e-6


def test_adaptive_simpson_orientation_and_empty_interval() -> None:
    assert abs(integrate(math.cos, 1.0, 0.0, tol=1e-12) + math.sin(1.0)) < 1e-10
    result = adaptive_simpson(math.cos, 2.0, 2.0)
    assert result.value == 0.0
    assert result.evaluations == 0


def test_adaptive_simpson_depth_cap_terminates_on_singular_integrand(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="numgrids"):
        result = adaptive_simpson(lambda t: 1.0 / math.sqrt(t) if t > 0 else 0.0, 0.0, 1.0, max_depth=12)
    assert not result.converged
    assert math.isfinite(result.value)
    assert any("max_depth" in r.getMessage() for r in caplog.records)


def test_newton_converges() -> None:
    dottie = 0.7390851332151607
    r1 = newton(lambda x: x - math.cos(x), lambda x: 1.0 + math.sin(x), 0.5)
    assert r1.converged
    assert abs(r1.root - dottie) < 1e-8

    r2 = newton(lambda x: x * x - 16.0, lambda x: 2.0 * x, 1.0)
    assert r2.converged
    assert abs(r2.root - 4.0) < 1e-8


def test_newton_reports_non_convergence_with_best_estimate(caplog) -> None:
    # x^2 + 1 has no real root; the iteration wanders but must not raise.
    with caplog.at_level(logging.WARNING, logger="numgrids"):
        result = newton(lambda x: x * x + 1.0, lambda x: 2.0 * x, 0.5, max_iter=25)
    assert not result.converged
    assert result.iterations == 25
    assert math.isfinite(result.root)
    assert any("No convergence" in r.getMessage() for r in caplog.records)


def test_newton_zero_derivative_is_reported() -> None:
    result = newton(lambda x: x * x - 1.0, lambda x: 2.0 * x, 0.0)
    assert not result.converged
    assert result.root == 0.0
    assert result.iterations == 0
