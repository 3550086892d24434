"""Successive parabolic interpolation on a closed interval ``[a, b]``.

The interval ends and the midpoint seed the first triple. Each iteration fits
a parabola, evaluates its vertex and keeps the three points that surround the
best of the four known samples, so the window always contains the incumbent
minimum. Early stops (degenerate fit, vertex outside the function's domain,
iteration cap) are not errors: the incumbent is returned with a warning.
"""

from __future__ import annotations

from decimal import Context, Decimal
from typing import Optional

from ..logging import get_logger
from ..precision import DECIMAL128, DecimalLike, working_context
from .core import (
    DegenerateFitError,
    EvaluableFunction,
    InvalidInputError,
    IterationCallback,
    OptimizationResult,
    Sample,
    Status,
)
from .numeric import (
    argmin,
    coerce_argument,
    evaluate,
    quadratic_fit_minimum,
    relative_difference,
    surrounding_window,
)

logger = get_logger(__name__)

BOUNDED_MAX_ITER = 100

_TWO = Decimal(2)


def _seed(function: EvaluableFunction, x: Decimal, context: Context, label: str) -> Sample:
    try:
        return evaluate(function, x, context)
    except (ValueError, ArithmeticError) as exc:
        raise InvalidInputError(
            f"function cannot be evaluated at the {label} x={x}: {exc}"
        ) from exc


def find_minimum(
    function: EvaluableFunction,
    a: DecimalLike,
    b: DecimalLike,
    epsilon1: DecimalLike,
    epsilon2: DecimalLike,
    *,
    max_iter: int = BOUNDED_MAX_ITER,
    context: Context = DECIMAL128,
    callback: Optional[IterationCallback] = None,
) -> OptimizationResult:
    """Minimize ``function`` on ``[a, b]`` by successive parabolic interpolation.

    Parameters
    ----------
    function:
        Object exposing ``evaluate(x: Decimal) -> Decimal``. Any ``ValueError``
        or ``ArithmeticError`` it raises for a candidate, or a non-finite
        value it returns, rejects that candidate and ends the run with
        ``Status.DOMAIN_REJECTED``.
    a, b:
        Interval ends, ``a < b``. The function must be defined at both.
    epsilon1, epsilon2:
        Positive tolerances on the relative change of the function value and
        of the abscissa between successive best estimates.
    max_iter:
        Iteration cap. Reaching it returns the best estimate with
        ``Status.MAX_ITER``.
    context:
        Decimal context for the optimizer arithmetic. The run works in a
        private copy, so the flags of ``context`` are left untouched. The
        function evaluates under its own context; rebind a catalog entry
        with :func:`quadmin.functions.get_function` to change its precision.
    callback:
        Called as ``callback(iteration, best)`` after each window update.

    Raises
    ------
    InvalidInputError
        If ``a >= b``, a tolerance is not positive, ``max_iter < 1`` or the
        function is undefined at a seed point.
    """
    context = working_context(context)
    a = coerce_argument("a", a, context)
    b = coerce_argument("b", b, context)
    epsilon1 = coerce_argument("epsilon1", epsilon1, context)
    epsilon2 = coerce_argument("epsilon2", epsilon2, context)
    if a >= b:
        raise InvalidInputError(f"Invalid interval: a must be less than b. a={a}, b={b}")
    if epsilon1 <= 0 or epsilon2 <= 0:
        raise InvalidInputError(
            f"Epsilon values must be positive. epsilon1={epsilon1}, epsilon2={epsilon2}"
        )
    if max_iter < 1:
        raise InvalidInputError(f"max_iter must be >= 1, got {max_iter}")

    s1 = _seed(function, a, context, "left boundary")
    s3 = _seed(function, b, context, "right boundary")
    s2 = _seed(function, context.divide(context.add(a, b), _TWO), context, "midpoint")
    best = argmin(s1, s2, s3)

    iteration = 0
    status = Status.MAX_ITER
    message = f"Reached maximum number of iterations ({max_iter})."

    while iteration < max_iter:
        iteration += 1

        try:
            x_bar = quadratic_fit_minimum(s1, s2, s3, context)
        except DegenerateFitError as exc:
            status = Status.DEGENERATE_FIT
            message = f"Quadratic approximation failed ({exc}). Returning current best estimate."
            logger.warning(message)
            break

        try:
            candidate = evaluate(function, x_bar, context)
        except (ValueError, ArithmeticError) as exc:
            status = Status.DOMAIN_REJECTED
            message = (
                f"Candidate point x={x_bar} is outside function domain ({exc}). "
                "Returning current best estimate."
            )
            logger.warning(message)
            break

        rel_f = relative_difference(best.f, candidate.f, context)
        rel_x = relative_difference(best.x, candidate.x, context)
        logger.debug(
            "iteration %d: x_bar=%s f_bar=%s rel_f=%s rel_x=%s", iteration, x_bar, candidate.f, rel_f, rel_x
        )
        if rel_f < epsilon1 and rel_x < epsilon2:
            best = candidate
            status = Status.CONVERGED
            message = "Relative tolerances satisfied."
            break

        best = argmin(s1, s2, s3, candidate)
        s1, s2, s3 = surrounding_window((s1, s2, s3, candidate), best)
        if callback is not None:
            callback(iteration, best)

    if status is Status.MAX_ITER:
        logger.warning("%s Result may not be fully converged.", message)

    return OptimizationResult(
        x_min=best.x,
        f_min=best.f,
        iterations=iteration,
        status=status,
        message=message,
    )


__all__ = ["BOUNDED_MAX_ITER", "find_minimum"]
