"""quadmin - one-dimensional minimization by successive parabolic interpolation
in fixed-precision decimal arithmetic."""

__version__ = "0.1.0"

# Precision
from .precision import DECIMAL128, make_context, to_decimal

# Optimizers (imported before the function catalog, which depends on them)
from .optimize import (
    BOUNDED_MAX_ITER,
    UNBOUNDED_MAX_ITER,
    DegenerateFitError,
    DomainViolationError,
    EvaluableFunction,
    InvalidInputError,
    NonConvergenceError,
    OptimizationResult,
    QuadminError,
    Sample,
    Status,
    find_minimum_bounded,
    find_minimum_unbounded,
    minimize_scalar,
)

# Function catalog
from .functions import CATALOG, DecimalFunction, as_evaluable, get_function

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "BOUNDED_MAX_ITER",
    "CATALOG",
    "DECIMAL128",
    "DecimalFunction",
    "DegenerateFitError",
    "DomainViolationError",
    "EvaluableFunction",
    "InvalidInputError",
    "NonConvergenceError",
    "OptimizationResult",
    "QuadminError",
    "Sample",
    "Status",
    "UNBOUNDED_MAX_ITER",
    "__version__",
    "as_evaluable",
    "configure_logging",
    "find_minimum_bounded",
    "find_minimum_unbounded",
    "get_function",
    "get_logger",
    "make_context",
    "minimize_scalar",
    "set_log_level",
    "to_decimal",
]
