"""Built-in test functions for the parabolic-interpolation optimizers.

Each entry is a :class:`~quadmin.functions.base.DecimalFunction` evaluated
entirely in decimal arithmetic under its context.
"""

from __future__ import annotations

from decimal import Context, Decimal

from ..optimize.core import DomainViolationError
from ..precision import DECIMAL128
from .base import DecimalFunction
from .special import ln, sin

_HALF = Decimal("0.5")
_QUARTER = Decimal("0.25")


def _half_square_minus_sin(x: Decimal, ctx: Context) -> Decimal:
    return ctx.subtract(ctx.multiply(_HALF, ctx.multiply(x, x)), sin(x, ctx))


def _log_one_plus_square_minus_sin(x: Decimal, ctx: Context) -> Decimal:
    return ctx.subtract(ln(ctx.add(1, ctx.multiply(x, x)), ctx), sin(x, ctx))


def _square_minus_three_x_plus_x_log_x(x: Decimal, ctx: Context) -> Decimal:
    if x <= 0:
        raise DomainViolationError(
            f"Argument for logarithm must be positive. x must be > 0. Got x={x}", x
        )
    square = ctx.multiply(x, x)
    three_x = ctx.multiply(3, x)
    return ctx.add(ctx.subtract(square, three_x), ctx.multiply(x, ln(x, ctx)))


def _quartic(x: Decimal, ctx: Context) -> Decimal:
    square = ctx.multiply(x, x)
    fourth = ctx.multiply(square, square)
    result = ctx.subtract(ctx.multiply(_QUARTER, fourth), square)
    result = ctx.subtract(result, ctx.multiply(8, x))
    return ctx.add(result, 12)


HALF_SQUARE_MINUS_SIN = DecimalFunction("f(x)=1/2*x^2 - sin(x)", _half_square_minus_sin)
LOG_ONE_PLUS_SQUARE_MINUS_SIN = DecimalFunction("f(x)=ln(1+x^2) - sin(x)", _log_one_plus_square_minus_sin)
SQUARE_MINUS_THREE_X_PLUS_X_LOG_X = DecimalFunction(
    "f(x)=x^2 - 3x + x*ln(x)", _square_minus_three_x_plus_x_log_x
)
QUARTIC = DecimalFunction("f(x)=1/4*x^4 - x^2 - 8x + 12", _quartic)

CATALOG: tuple[DecimalFunction, ...] = (
    HALF_SQUARE_MINUS_SIN,
    LOG_ONE_PLUS_SQUARE_MINUS_SIN,
    SQUARE_MINUS_THREE_X_PLUS_X_LOG_X,
    QUARTIC,
)


def get_function(key: int | str, context: Context = DECIMAL128) -> DecimalFunction:
    """Look up a catalog function by 1-based position or by its description.

    A ``context`` other than the default returns a copy bound to it. The
    entries in :data:`CATALOG` always evaluate at :data:`DECIMAL128`
    precision, whatever context an optimizer is given, so use this to run a
    catalog function at another precision.
    """
    if isinstance(key, bool):
        raise KeyError(key)
    if isinstance(key, int):
        if not 1 <= key <= len(CATALOG):
            raise KeyError(f"catalog index must be between 1 and {len(CATALOG)}, got {key}")
        function = CATALOG[key - 1]
    else:
        matches = [f for f in CATALOG if f.description == key.strip()]
        if not matches:
            raise KeyError(f"no catalog function described as {key!r}")
        function = matches[0]
    if context is not function.context:
        function = DecimalFunction(function.description, function.calculation, context)
    return function


__all__ = [
    "CATALOG",
    "HALF_SQUARE_MINUS_SIN",
    "LOG_ONE_PLUS_SQUARE_MINUS_SIN",
    "QUARTIC",
    "SQUARE_MINUS_THREE_X_PLUS_X_LOG_X",
    "get_function",
]
