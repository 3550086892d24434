from decimal import Decimal

import pytest

from quadmin.optimize import (
    DegenerateFitError,
    DomainViolationError,
    InvalidInputError,
    Sample,
    argmin,
    is_bracket_shaped,
    quadratic_fit_minimum,
    relative_difference,
    surrounding_window,
)
from quadmin.optimize.numeric import coerce_argument, evaluate
from quadmin.precision import DECIMAL128, make_context


def S(x, f) -> Sample:
    return Sample(Decimal(x), Decimal(f))


def test_relative_difference_uses_reference_magnitude():
    assert relative_difference(Decimal(1), Decimal(4)) == Decimal("0.75")
    assert relative_difference(Decimal(-2), Decimal(-4)) == Decimal("0.5")


def test_relative_difference_falls_back_to_absolute_at_zero():
    assert relative_difference(Decimal(3), Decimal(0)) == Decimal(3)
    assert relative_difference(Decimal(-3), Decimal("0.0")) == Decimal(3)


def test_relative_difference_rounds_under_given_context():
    ctx = make_context(5)
    assert relative_difference(Decimal(1), Decimal(3), ctx) == Decimal("0.66667")


def test_argmin_prefers_first_on_ties():
    a, b, c = S(1, 2), S(2, 2), S(3, 5)
    assert argmin(a, b, c) is a
    assert argmin(c, b, a) is b


def test_argmin_requires_two_samples():
    with pytest.raises(ValueError):
        argmin(S(0, 0))


def test_quadratic_fit_recovers_parabola_vertex():
    # f(x) = (x - 2)^2 sampled at unequal spacing
    x_bar = quadratic_fit_minimum(S(0, 4), S(1, 1), S(5, 9))
    assert x_bar == Decimal(2)


def test_quadratic_fit_is_order_independent_for_exact_parabola():
    # f(x) = x^2 - 4x + 5
    pts = [S(-1, 10), S(0, 5), S(3, 2)]
    expected = Decimal(2)
    assert quadratic_fit_minimum(*pts) == expected
    assert quadratic_fit_minimum(pts[2], pts[0], pts[1]) == expected


def test_quadratic_fit_collinear_samples_are_degenerate():
    with pytest.raises(DegenerateFitError):
        quadratic_fit_minimum(S(0, 0), S(1, 1), S(2, 2))


def test_quadratic_fit_coincident_abscissae_are_degenerate():
    with pytest.raises(DegenerateFitError):
        quadratic_fit_minimum(S(1, 9), S(2, 8), S(2, 8))


def test_degenerate_fit_is_an_arithmetic_error():
    assert issubclass(DegenerateFitError, ArithmeticError)


@pytest.mark.parametrize(
    "best_x, expected",
    [
        (0, (0, 1, 2)),
        (1, (0, 1, 2)),
        (2, (1, 2, 3)),
        (3, (1, 2, 3)),
    ],
)
def test_surrounding_window_clamps_at_ends(best_x, expected):
    samples = [S(2, 0), S(0, 0), S(3, 0), S(1, 0)]
    window = surrounding_window(samples, S(best_x, 0))
    assert tuple(s.x for s in window) == tuple(Decimal(x) for x in expected)


def test_surrounding_window_rejects_unknown_reference():
    with pytest.raises(ValueError):
        surrounding_window([S(0, 0), S(1, 0), S(2, 0)], S(7, 0))


def test_is_bracket_shaped():
    assert is_bracket_shaped(Decimal(0), Decimal(1), Decimal(2))
    assert is_bracket_shaped(Decimal(2), Decimal(1), Decimal(0))
    assert is_bracket_shaped(Decimal(1), Decimal(2), Decimal(2))
    assert not is_bracket_shaped(Decimal(0), Decimal(1), Decimal(-1))


class Returning:
    def __init__(self, value):
        self.value = value

    def evaluate(self, x):
        return self.value


def test_evaluate_rounds_under_context():
    sample = evaluate(Returning(Decimal("1.23456789")), Decimal(2), make_context(4))
    assert sample == S(2, "1.235")


@pytest.mark.parametrize("value", [Decimal("NaN"), Decimal("-Infinity"), float("nan"), None])
def test_evaluate_reports_non_finite_values_as_domain_violations(value):
    with pytest.raises(DomainViolationError) as excinfo:
        evaluate(Returning(value), Decimal(2), DECIMAL128)
    assert excinfo.value.x == 2


def test_coerce_argument_names_the_argument():
    assert coerce_argument("a", "0.5", DECIMAL128) == Decimal("0.5")
    with pytest.raises(InvalidInputError, match="epsilon1"):
        coerce_argument("epsilon1", "nan", DECIMAL128)
