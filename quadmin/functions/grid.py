"""Coarse floating-point views of an evaluable function.

These helpers are for inspection and sanity checks (choosing a starting
interval, cross-checking an optimizer result); the optimizers themselves never
use them.
"""

from __future__ import annotations

import numpy as np

from ..optimize.core import DomainViolationError, EvaluableFunction
from ..precision import DECIMAL128, DecimalLike, to_decimal


def sample_grid(
    function: EvaluableFunction, a: DecimalLike, b: DecimalLike, num: int = 101
) -> tuple[np.ndarray, np.ndarray]:
    """Evaluate ``function`` on ``num`` evenly spaced points of ``[a, b]``.

    Returns float arrays ``(xs, fs)``; points where the function signals a
    domain violation hold ``nan`` in ``fs``.
    """
    if num < 2:
        raise ValueError("num must be at least 2")
    lo = float(to_decimal(a))
    hi = float(to_decimal(b))
    if not lo < hi:
        raise ValueError(f"require a < b, got a={a}, b={b}")
    xs = np.linspace(lo, hi, num)
    fs = np.full(num, np.nan, dtype=float)
    for i, x in enumerate(xs):
        try:
            fs[i] = float(function.evaluate(to_decimal(float(x), DECIMAL128)))
        except DomainViolationError:
            continue
    return xs, fs


def coarse_minimum(
    function: EvaluableFunction, a: DecimalLike, b: DecimalLike, num: int = 101
) -> tuple[float, float]:
    """Grid point with the smallest finite value, as ``(x, f)``."""
    xs, fs = sample_grid(function, a, b, num)
    if not np.isfinite(fs).any():
        raise DomainViolationError(f"function is undefined on every grid point of [{a}, {b}]")
    idx = int(np.nanargmin(fs))
    return float(xs[idx]), float(fs[idx])


__all__ = ["coarse_minimum", "sample_grid"]
