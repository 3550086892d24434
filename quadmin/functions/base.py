"""Adapters turning plain callables into evaluable functions."""

from __future__ import annotations

import decimal
import inspect
from dataclasses import dataclass, field
from decimal import Context, Decimal
from typing import Any, Callable

from ..optimize.core import DomainViolationError, EvaluableFunction
from ..precision import DECIMAL128, DecimalLike, to_decimal, working_context

Calculation = Callable[[Decimal, Context], DecimalLike]


@dataclass(frozen=True)
class DecimalFunction:
    """A named scalar function evaluated under a fixed decimal context.

    ``calculation`` receives the abscissa and the context and may return any
    value accepted by :func:`quadmin.precision.to_decimal`. It signals inputs
    outside the domain by raising :class:`DomainViolationError`.
    """

    description: str
    calculation: Calculation = field(repr=False)
    context: Context = field(default=DECIMAL128, repr=False, compare=False)

    def evaluate(self, x: Decimal) -> Decimal:
        ctx = working_context(self.context)
        value = self.calculation(x, ctx)
        try:
            return to_decimal(value, ctx)
        except ValueError as exc:
            raise DomainViolationError(f"f({x}) is not a finite number: {exc}", x) from exc

    __call__ = evaluate

    def __str__(self) -> str:
        return self.description


def _takes_context(func: Callable[..., Any]) -> bool:
    """True when ``func`` needs a second positional argument.

    Parameters with defaults are not counted, so ``f(x, k=2)`` is called
    with ``x`` alone.
    """
    try:
        params = list(inspect.signature(func).parameters.values())
    except (TypeError, ValueError):
        return False
    required = [
        p
        for p in params
        if p.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
        and p.default is inspect.Parameter.empty
    ]
    return len(required) >= 2 or (
        len(required) == 1 and any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in params)
    )


def as_evaluable(obj: Any, context: Context = DECIMAL128, description: str | None = None) -> EvaluableFunction:
    """Return ``obj`` as an :class:`EvaluableFunction`.

    Objects that already expose ``evaluate`` are returned unchanged. Callables
    of one argument ``f(x)`` or two required arguments ``f(x, context)`` are
    wrapped in a :class:`DecimalFunction`. ``ValueError`` raised by a wrapped one-argument
    callable, as well as invalid decimal operations such as ``Decimal(-1).ln()``,
    are reported as :class:`DomainViolationError`.
    """
    if isinstance(obj, EvaluableFunction):
        return obj
    if not callable(obj):
        raise TypeError(f"expected a callable or an object with evaluate(), got {type(obj).__name__}")

    name = description or getattr(obj, "__name__", repr(obj))
    if _takes_context(obj):
        return DecimalFunction(name, obj, context)

    def calculation(x: Decimal, _context: Context) -> DecimalLike:
        try:
            return obj(x)
        except DomainViolationError:
            raise
        except (ValueError, decimal.InvalidOperation) as exc:
            raise DomainViolationError(str(exc) or type(exc).__name__, x) from exc

    return DecimalFunction(name, calculation, context)


__all__ = ["Calculation", "DecimalFunction", "as_evaluable"]
