"""Successive parabolic interpolation in fixed-precision decimal arithmetic.

Example
-------
>>> from decimal import Decimal
>>> from quadmin.optimize import find_minimum_bounded
>>> from quadmin.functions import as_evaluable
>>> square = as_evaluable(lambda x: x * x)
>>> res = find_minimum_bounded(square, -2, 3, Decimal("1e-5"), Decimal("1e-5"))
>>> res.converged, float(res.x_min)
(True, 0.0)
"""

from .core import (
    DegenerateFitError,
    DomainViolationError,
    EvaluableFunction,
    InvalidInputError,
    IterationCallback,
    NonConvergenceError,
    OptimizationResult,
    QuadminError,
    Sample,
    Status,
)
from .numeric import (
    argmin,
    is_bracket_shaped,
    quadratic_fit_minimum,
    relative_difference,
    surrounding_window,
)
from .bounded import BOUNDED_MAX_ITER
from .bounded import find_minimum as find_minimum_bounded
from .unbounded import UNBOUNDED_MAX_ITER
from .unbounded import find_minimum as find_minimum_unbounded
from .minimize import minimize_scalar

__all__ = [
    "BOUNDED_MAX_ITER",
    "DegenerateFitError",
    "DomainViolationError",
    "EvaluableFunction",
    "InvalidInputError",
    "IterationCallback",
    "NonConvergenceError",
    "OptimizationResult",
    "QuadminError",
    "Sample",
    "Status",
    "UNBOUNDED_MAX_ITER",
    "argmin",
    "find_minimum_bounded",
    "find_minimum_unbounded",
    "is_bracket_shaped",
    "minimize_scalar",
    "quadratic_fit_minimum",
    "relative_difference",
    "surrounding_window",
]
