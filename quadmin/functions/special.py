"""Elementary functions evaluated to the full precision of a decimal context.

The series follow the recipes in the :mod:`decimal` documentation, run with
two guard digits and rounded back to the caller's context at the end.
"""

from __future__ import annotations

from decimal import Context, Decimal, localcontext
from functools import lru_cache

from ..optimize.core import DomainViolationError
from ..precision import DECIMAL128, make_context

_GUARD_DIGITS = 2


@lru_cache(maxsize=None)
def _pi(precision: int) -> Decimal:
    with localcontext(make_context(precision + _GUARD_DIGITS)):
        three = Decimal(3)
        lasts, t, s, n, na, d, da = 0, three, 3, 1, 0, 0, 24
        while s != lasts:
            lasts = s
            n, na = n + na, na + 8
            d, da = d + da, da + 32
            t = (t * n) / d
            s += t
    return make_context(precision).plus(s)


def pi(context: Context = DECIMAL128) -> Decimal:
    """Return pi rounded to ``context.prec`` digits."""
    return _pi(context.prec)


def sin(x: Decimal, context: Context = DECIMAL128) -> Decimal:
    """Sine of ``x`` (radians).

    The argument is first reduced into ``[-pi, pi]``; large arguments get
    extra working digits so the reduction does not eat into the result.
    """
    if not x.is_finite():
        raise DomainViolationError(f"sin is undefined for x={x}", x)
    extra = max(0, x.adjusted() + 1)
    precision = context.prec + _GUARD_DIGITS + extra
    with localcontext(make_context(precision)):
        two_pi = 2 * _pi(precision)
        r = x.remainder_near(two_pi) if abs(x) > two_pi / 2 else +x
        i, lasts, s, fact, num, sign = 1, 0, r, 1, r, 1
        while s != lasts:
            lasts = s
            i += 2
            fact *= i * (i - 1)
            num *= r * r
            sign *= -1
            s += num / fact * sign
    return context.plus(s)


def ln(x: Decimal, context: Context = DECIMAL128) -> Decimal:
    """Natural logarithm; raises :class:`DomainViolationError` for ``x <= 0``."""
    if not x.is_finite() or x <= 0:
        raise DomainViolationError(f"Argument for logarithm must be positive. Got x={x}", x)
    return context.ln(x)


__all__ = ["ln", "pi", "sin"]
