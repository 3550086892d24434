"""Numeric helpers shared by both parabolic-interpolation optimizers.

Every operation takes the decimal context explicitly; nothing here reads or
modifies the thread-local decimal context.
"""

from __future__ import annotations

from decimal import Context, Decimal
from typing import Sequence

from ..precision import DECIMAL128, DecimalLike, to_decimal
from .core import DegenerateFitError, DomainViolationError, EvaluableFunction, InvalidInputError, Sample

HALF = Decimal("0.5")


def coerce_argument(name: str, value: DecimalLike, context: Context) -> Decimal:
    """Convert an optimizer argument, reporting bad values as :class:`InvalidInputError`."""
    try:
        return to_decimal(value, context)
    except ValueError as exc:
        raise InvalidInputError(f"{name}: {exc}") from exc


def evaluate(function: EvaluableFunction, x: Decimal, context: Context = DECIMAL128) -> Sample:
    """Evaluate ``function`` at ``x`` and return the sample rounded under ``context``.

    A value that is not a finite number (NaN, infinity, a non-numeric object)
    is reported as :class:`DomainViolationError`.
    """
    value = function.evaluate(x)
    try:
        return Sample(x, to_decimal(value, context))
    except ValueError as exc:
        raise DomainViolationError(f"f({x}) is not a finite number: {exc}", x) from exc


def relative_difference(a: Decimal, b: Decimal, context: Context = DECIMAL128) -> Decimal:
    """Return ``|a - b| / |b|``, or ``|a - b|`` when ``b`` is zero."""
    diff = context.abs(context.subtract(a, b))
    if b.is_zero():
        return diff
    return context.divide(diff, context.abs(b))


def argmin(*samples: Sample) -> Sample:
    """Return the sample with the smallest value; the earliest one wins ties."""
    if len(samples) < 2:
        raise ValueError("argmin needs at least two samples")
    best = samples[0]
    for sample in samples[1:]:
        if sample.f < best.f:
            best = sample
    return best


def quadratic_fit_minimum(s1: Sample, s2: Sample, s3: Sample, context: Context = DECIMAL128) -> Decimal:
    """Vertex of the parabola through three samples.

    Uses the centred form

        x2 - 1/2 * [(x2-x1)^2 (f2-f3) - (x2-x3)^2 (f2-f1)]
                 / [(x2-x1)   (f2-f3) - (x2-x3)   (f2-f1)]

    Raises:
        DegenerateFitError: if the denominator is exactly zero (collinear
            samples or coincident abscissae).
    """
    d21 = context.subtract(s2.x, s1.x)
    d23 = context.subtract(s2.x, s3.x)
    g23 = context.subtract(s2.f, s3.f)
    g21 = context.subtract(s2.f, s1.f)

    numerator = context.subtract(
        context.multiply(context.multiply(d21, d21), g23),
        context.multiply(context.multiply(d23, d23), g21),
    )
    denominator = context.subtract(context.multiply(d21, g23), context.multiply(d23, g21))
    if denominator.is_zero():
        raise DegenerateFitError(
            f"degenerate parabola through x=({s1.x}, {s2.x}, {s3.x}), f=({s1.f}, {s2.f}, {s3.f})"
        )
    step = context.multiply(HALF, context.divide(numerator, denominator))
    return context.subtract(s2.x, step)


def surrounding_window(samples: Sequence[Sample], reference: Sample) -> tuple[Sample, Sample, Sample]:
    """Three samples around ``reference`` in ascending ``x`` order.

    The reference is located by abscissa (first match after a stable sort). If
    it sits at either end of the sorted order the window is clamped so that
    three samples are still returned.
    """
    if len(samples) < 3:
        raise ValueError("surrounding_window needs at least three samples")
    ordered = sorted(samples, key=lambda s: s.x)
    index = next((i for i, s in enumerate(ordered) if s.x == reference.x), None)
    if index is None:
        raise ValueError(f"reference x={reference.x} is not among the samples")
    start = min(max(index - 1, 0), len(ordered) - 3)
    return ordered[start], ordered[start + 1], ordered[start + 2]


def is_bracket_shaped(x1: Decimal, x2: Decimal, x3: Decimal, context: Context = DECIMAL128) -> bool:
    """True when ``x2`` does not lie outside the pair ``(x1, x3)`` in walking order."""
    product = context.multiply(context.subtract(x2, x1), context.subtract(x3, x2))
    return not product < 0


__all__ = [
    "argmin",
    "coerce_argument",
    "evaluate",
    "is_bracket_shaped",
    "quadratic_fit_minimum",
    "relative_difference",
    "surrounding_window",
]
