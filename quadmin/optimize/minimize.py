"""Single entry point selecting the bounded or unbounded optimizer."""

from __future__ import annotations

from decimal import Context
from typing import Any, Optional

from ..functions.base import as_evaluable
from ..precision import DECIMAL128, DecimalLike
from . import bounded, unbounded
from .core import InvalidInputError, OptimizationResult


def minimize_scalar(
    function: Any,
    *,
    bounds: Optional[tuple[DecimalLike, DecimalLike]] = None,
    x0: Optional[DecimalLike] = None,
    step: Optional[DecimalLike] = None,
    epsilon1: DecimalLike,
    epsilon2: DecimalLike,
    context: Context = DECIMAL128,
    **options: Any,
) -> OptimizationResult:
    """Minimize a scalar function by successive parabolic interpolation.

    ``bounds=(a, b)`` runs :func:`quadmin.optimize.bounded.find_minimum`;
    ``x0`` together with ``step`` runs
    :func:`quadmin.optimize.unbounded.find_minimum`. Remaining keyword
    options are forwarded to the selected optimizer.

    Example
    -------
    >>> from quadmin.optimize import minimize_scalar
    >>> res = minimize_scalar(lambda x: (x - 5) ** 2 + 1, x0=0, step=1,
    ...                       epsilon1="1e-5", epsilon2="1e-5")
    >>> float(res.x_min), float(res.f_min)
    (5.0, 1.0)
    """
    evaluable = as_evaluable(function, context)
    if bounds is not None:
        if x0 is not None or step is not None:
            raise InvalidInputError("pass either bounds or x0/step, not both")
        try:
            a, b = bounds
        except (TypeError, ValueError) as exc:
            raise InvalidInputError(f"bounds must be a pair (a, b), got {bounds!r}") from exc
        return bounded.find_minimum(evaluable, a, b, epsilon1, epsilon2, context=context, **options)
    if x0 is None or step is None:
        raise InvalidInputError("pass bounds=(a, b) or both x0 and step")
    return unbounded.find_minimum(evaluable, x0, step, epsilon1, epsilon2, context=context, **options)


__all__ = ["minimize_scalar"]
