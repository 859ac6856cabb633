from __future__ import annotations

from jax import config as _jax_config

_jax_config.update("jax_enable_x64", True)

from .curves import CircleArc, Curve, SigmoidCurve, StraightLine  # noqa: E402
from .duals import DualNumber, diff  # noqa: E402
from .errors import DomainMismatchError, GeometryInconsistencyError, NumGridsError  # noqa: E402
from .functions import GridFunction  # noqa: E402
from .geometry import Domain, Point  # noqa: E402
from .params import ArcLengthParams  # noqa: E402

__all__ = [
    "__version__",
    "ArcLengthParams",
    "CircleArc",
    "Curve",
    "Domain",
    "DomainMismatchError",
    "DualNumber",
    "GeometryInconsistencyError",
    "GridFunction",
    "NumGridsError",
    "Point",
    "SigmoidCurve",
    "StraightLine",
    "diff",
]

__version__ = "0.1.0"
