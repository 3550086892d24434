from decimal import Decimal

import pytest

from quadmin.optimize import InvalidInputError, Status, minimize_scalar
from quadmin.precision import make_context

EPS = "1e-5"


def test_bounds_select_bounded_optimizer():
    res = minimize_scalar(lambda x: x * x, bounds=(-2, 3), epsilon1=EPS, epsilon2=EPS)
    assert res.converged
    assert res.x_min == 0


def test_start_and_step_select_unbounded_optimizer():
    res = minimize_scalar(lambda x: (x - 5) ** 2 + 1, x0=0, step=1, epsilon1=EPS, epsilon2=EPS)
    assert res.converged
    assert res.x_min == 5
    assert res.f_min == 1


def test_options_are_forwarded():
    res = minimize_scalar(lambda x: x * x, bounds=(-2, 3), epsilon1=EPS, epsilon2=EPS, max_iter=1)
    assert res.status is Status.MAX_ITER


def test_two_argument_callable_receives_context():
    seen = []

    def fun(x, ctx):
        seen.append(ctx.prec)
        return ctx.multiply(x, x)

    minimize_scalar(fun, bounds=(-1, 1), epsilon1=EPS, epsilon2=EPS)
    assert seen and set(seen) == {34}


@pytest.mark.parametrize(
    "kwargs",
    [
        {},
        {"x0": 0},
        {"step": 1},
        {"bounds": (0, 1), "x0": 0, "step": 1},
        {"bounds": (0, 1, 2)},
    ],
)
def test_ambiguous_or_missing_mode_rejected(kwargs):
    with pytest.raises(InvalidInputError):
        minimize_scalar(lambda x: x, epsilon1=EPS, epsilon2=EPS, **kwargs)


def test_precision_is_configurable():
    ctx = make_context(12)
    third = Decimal(1) / 3
    res = minimize_scalar(
        lambda x: (x - third) ** 2, bounds=(-1, 1), epsilon1=EPS, epsilon2=EPS, context=ctx
    )
    assert len(res.x_min.as_tuple().digits) <= 12
