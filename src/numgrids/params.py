from __future__ import annotations

import equinox as eqx


class ArcLengthParams(eqx.Module):
    # Adaptive Simpson quadrature of the arc-length integrand
    quad_tol: float = 1e-8
    quad_max_depth: int = 50  # recursion cap (guarantees termination)

    # Newton inversion of s -> arc length
    newton_tol: float = 1e-10
    newton_max_iter: int = 1000
    newton_seed: float = 0.0  # native parameter the iteration starts from


DEFAULT_ARC_LENGTH_PARAMS = ArcLengthParams()
