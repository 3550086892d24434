import numpy as np
import pytest

from quadmin.functions import QUARTIC, SQUARE_MINUS_THREE_X_PLUS_X_LOG_X, coarse_minimum, sample_grid
from quadmin.optimize import DomainViolationError


def test_sample_grid_shapes_and_values():
    xs, fs = sample_grid(QUARTIC, 0, 4, num=5)
    assert np.allclose(xs, [0.0, 1.0, 2.0, 3.0, 4.0])
    assert np.allclose(fs, [12.0, 3.25, -4.0, -0.75, 28.0])


def test_sample_grid_marks_domain_violations_as_nan():
    xs, fs = sample_grid(SQUARE_MINUS_THREE_X_PLUS_X_LOG_X, -1, 1, num=5)
    assert np.isnan(fs[:3]).all()
    assert np.isfinite(fs[3:]).all()


def test_coarse_minimum_skips_nan():
    x, f = coarse_minimum(SQUARE_MINUS_THREE_X_PLUS_X_LOG_X, -1, 3, num=41)
    assert x == pytest.approx(1.0)
    assert f == pytest.approx(-2.0)


def test_coarse_minimum_all_undefined():
    with pytest.raises(DomainViolationError):
        coarse_minimum(SQUARE_MINUS_THREE_X_PLUS_X_LOG_X, -2, -1, num=5)


@pytest.mark.parametrize("a, b, num", [(1, 0, 5), (0, 1, 1)])
def test_sample_grid_invalid_arguments(a, b, num):
    with pytest.raises(ValueError):
        sample_grid(QUARTIC, a, b, num=num)
