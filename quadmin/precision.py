"""Decimal precision contexts shared by the optimizers and the function catalog.

All arithmetic in quadmin goes through an explicit :class:`decimal.Context`
rather than the thread-local one returned by :func:`decimal.getcontext`, so a
run is reproducible regardless of what the caller did to its own context.
"""

from __future__ import annotations

import decimal
from decimal import Context, Decimal
from typing import Union

DecimalLike = Union[Decimal, int, str, float]

DECIMAL128_PRECISION = 34

DECIMAL128 = Context(
    prec=DECIMAL128_PRECISION,
    rounding=decimal.ROUND_HALF_EVEN,
    Emin=-6143,
    Emax=6144,
    flags=[],
    traps=[decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow],
)
# Shared template. Treat it as read-only: the optimizers and catalog functions
# compute in private copies obtained from working_context().


def working_context(context: Context = DECIMAL128) -> Context:
    """Return a private copy of ``context`` with its signal flags cleared.

    Arithmetic records ``Inexact`` and ``Rounded`` flags on the context it
    runs under; working in a copy keeps the caller's context untouched.
    """
    ctx = context.copy()
    ctx.clear_flags()
    return ctx


def make_context(precision: int = DECIMAL128_PRECISION) -> Context:
    """Return a fresh context with ``precision`` significant digits.

    Rounding and exponent limits follow :data:`DECIMAL128`.
    """
    if isinstance(precision, bool) or not isinstance(precision, int) or precision < 1:
        raise ValueError(f"precision must be a positive integer, got {precision!r}")
    ctx = working_context(DECIMAL128)
    ctx.prec = precision
    return ctx


def to_decimal(value: DecimalLike, context: Context = DECIMAL128) -> Decimal:
    """Coerce ``value`` to a finite :class:`~decimal.Decimal` rounded under ``context``.

    Floats are converted through their shortest ``repr`` so that ``1e-5``
    becomes ``Decimal('0.00001')`` rather than its binary expansion.
    """
    if isinstance(value, bool):
        raise ValueError("booleans are not numeric inputs")
    if isinstance(value, float):
        value = repr(float(value))
    elif isinstance(value, str):
        value = value.strip()
    elif not isinstance(value, (Decimal, int)):
        raise ValueError(f"cannot convert {type(value).__name__} to Decimal")
    try:
        result = context.create_decimal(value)
    except decimal.InvalidOperation as exc:
        raise ValueError(f"invalid decimal value {value!r}") from exc
    if not result.is_finite():
        raise ValueError(f"decimal value must be finite, got {value!r}")
    return result


__all__ = [
    "DECIMAL128",
    "DECIMAL128_PRECISION",
    "DecimalLike",
    "make_context",
    "to_decimal",
    "working_context",
]
