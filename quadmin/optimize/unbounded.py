"""Successive parabolic interpolation from a starting point, without an interval.

A triple is bracketed by stepping ``delta_x`` in the downhill direction from
the leftmost anchor ``x1``. The parabola vertex either re-centres the triple
(when it falls inside the current span) or becomes the new anchor from which
bracketing restarts.
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
    NonConvergenceError,
    OptimizationResult,
    Sample,
    Status,
)
from .numeric import (
    argmin,
    coerce_argument,
    evaluate,
    is_bracket_shaped,
    quadratic_fit_minimum,
    relative_difference,
    surrounding_window,
)

logger = get_logger(__name__)

UNBOUNDED_MAX_ITER = 1000

_TWO = Decimal(2)


def _bracket(
    function: EvaluableFunction, anchor: Sample, delta_x: Decimal, context: Context
) -> tuple[Sample, Sample]:
    """Second and third points of a triple anchored at ``anchor``.

    The third point goes one step left of the anchor when the function rises
    to the right, otherwise two steps right.
    """
    s2 = evaluate(function, context.add(anchor.x, delta_x), context)
    if anchor.f < s2.f:
        x3 = context.subtract(anchor.x, delta_x)
    else:
        x3 = context.add(anchor.x, context.multiply(_TWO, delta_x))
    return s2, evaluate(function, x3, context)


def find_minimum(
    function: EvaluableFunction,
    initial_x: DecimalLike,
    delta_x: DecimalLike,
    epsilon1: DecimalLike,
    epsilon2: DecimalLike,
    *,
    max_iter: int = UNBOUNDED_MAX_ITER,
    context: Context = DECIMAL128,
    raise_on_failure: bool = True,
    callback: Optional[IterationCallback] = None,
) -> OptimizationResult:
    """Minimize ``function`` starting at ``initial_x`` with bracketing step ``delta_x``.

    Parameters
    ----------
    function:
        Object exposing ``evaluate(x: Decimal) -> Decimal``. Domain violations
        are not caught and propagate to the caller.
    initial_x:
        Starting abscissa.
    delta_x:
        Positive bracketing step.
    epsilon1, epsilon2:
        Positive tolerances on the relative change of the function value and
        of the abscissa.
    max_iter:
        Iteration cap.
    context:
        Decimal context for the optimizer arithmetic. The run works in a
        private copy, so the flags of ``context`` are left untouched. The
        function evaluates under its own context; rebind a catalog entry
        with :func:`quadmin.functions.get_function` to change its precision.
    raise_on_failure:
        When True (default) an exhausted cap raises
        :class:`NonConvergenceError`; when False the best sample seen is
        returned with ``Status.MAX_ITER``.
    callback:
        Called as ``callback(iteration, best)`` after each iteration that did
        not terminate the run. ``best`` is the lowest sample evaluated so far.
    """
    context = working_context(context)
    x1 = coerce_argument("initial_x", initial_x, context)
    delta_x = coerce_argument("delta_x", delta_x, context)
    epsilon1 = coerce_argument("epsilon1", epsilon1, context)
    epsilon2 = coerce_argument("epsilon2", epsilon2, context)
    if delta_x <= 0:
        raise InvalidInputError(f"delta_x must be positive, got {delta_x}")
    if epsilon1 <= 0 or epsilon2 <= 0:
        raise InvalidInputError(
            f"Epsilon values must be positive. epsilon1={epsilon1}, epsilon2={epsilon2}"
        )
    if max_iter < 1:
        raise InvalidInputError(f"max_iter must be >= 1, got {max_iter}")

    s1 = evaluate(function, x1, context)
    s2, s3 = _bracket(function, s1, delta_x, context)
    best = argmin(s1, s2, s3)

    iteration = 0
    while iteration < max_iter:
        iteration += 1

        if not is_bracket_shaped(s1.x, s2.x, s3.x, context):
            s2, s3 = _bracket(function, s1, delta_x, context)

        incumbent = argmin(s1, s2, s3)
        best = argmin(best, incumbent)

        try:
            x_bar = quadratic_fit_minimum(s1, s2, s3, context)
        except DegenerateFitError:
            logger.debug("iteration %d: degenerate fit, shifting window right from x=%s", iteration, s1.x)
            s1 = s2
            s2 = evaluate(function, context.add(s1.x, delta_x), context)
            best = argmin(best, s2)
            continue

        candidate = evaluate(function, x_bar, context)
        # relative to the incumbent, unlike the bounded loop
        rel_f = relative_difference(candidate.f, incumbent.f, context)
        rel_x = relative_difference(candidate.x, incumbent.x, context)
        logger.debug(
            "iteration %d: x_bar=%s f=%s rel_f=%s rel_x=%s", iteration, x_bar, candidate.f, rel_f, rel_x
        )
        if rel_f < epsilon1 and rel_x < epsilon2:
            return OptimizationResult(
                x_min=candidate.x,
                f_min=candidate.f,
                iterations=iteration,
                status=Status.CONVERGED,
                message="Relative tolerances satisfied.",
            )

        left = min(s1.x, s2.x, s3.x)
        right = max(s1.x, s2.x, s3.x)
        if left <= x_bar <= right:
            reference = candidate if candidate.f < incumbent.f else incumbent
            s1, s2, s3 = surrounding_window((s1, s2, s3, candidate), reference)
        else:
            s1 = candidate
            s2, s3 = _bracket(function, s1, delta_x, context)

        best = argmin(best, candidate, s1, s2, s3)
        if callback is not None:
            callback(iteration, best)

    message = f"No convergence after {max_iter} iterations; best x={best.x}, f={best.f}."
    if raise_on_failure:
        raise NonConvergenceError(message, iterations=max_iter, best=best)
    logger.warning(message)
    return OptimizationResult(
        x_min=best.x,
        f_min=best.f,
        iterations=max_iter,
        status=Status.MAX_ITER,
        message=message,
    )


__all__ = ["UNBOUNDED_MAX_ITER", "find_minimum"]
