"""Evaluable functions: adapters, elementary functions and the built-in catalog."""

from .base import Calculation, DecimalFunction, as_evaluable
from .catalog import (
    CATALOG,
    HALF_SQUARE_MINUS_SIN,
    LOG_ONE_PLUS_SQUARE_MINUS_SIN,
    QUARTIC,
    SQUARE_MINUS_THREE_X_PLUS_X_LOG_X,
    get_function,
)
from .grid import coarse_minimum, sample_grid
from .special import ln, pi, sin

__all__ = [
    "CATALOG",
    "Calculation",
    "DecimalFunction",
    "HALF_SQUARE_MINUS_SIN",
    "LOG_ONE_PLUS_SQUARE_MINUS_SIN",
    "QUARTIC",
    "SQUARE_MINUS_THREE_X_PLUS_X_LOG_X",
    "as_evaluable",
    "coarse_minimum",
    "get_function",
    "ln",
    "pi",
    "sample_grid",
    "sin",
]
