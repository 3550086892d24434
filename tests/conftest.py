"""Pytest configuration and shared fixtures for quadmin tests.

This module provides:
- Small evaluable functions with known minima
- A call-counting wrapper for checking when a function is evaluated
- Capture of the package's (non-propagating) warning loggers
"""

import logging
from decimal import Decimal
from typing import Iterator, List

import pytest

from quadmin.functions import DecimalFunction, as_evaluable
from quadmin.logging import get_logger
from quadmin.precision import DECIMAL128


class CountingFunction:
    """Evaluable wrapper recording every abscissa it is called with."""

    def __init__(self, inner):
        self.inner = inner
        self.calls: List[Decimal] = []

    def evaluate(self, x: Decimal) -> Decimal:
        self.calls.append(x)
        return self.inner.evaluate(x)


@pytest.fixture
def square() -> DecimalFunction:
    """f(x) = x^2, minimum at 0."""
    return as_evaluable(lambda x: DECIMAL128.multiply(x, x), description="x^2")


@pytest.fixture
def shifted_parabola() -> DecimalFunction:
    """f(x) = (x - 5)^2 + 1, minimum 1 at x = 5."""

    def fun(x: Decimal, ctx) -> Decimal:
        d = ctx.subtract(x, 5)
        return ctx.add(ctx.multiply(d, d), 1)

    return DecimalFunction("(x-5)^2 + 1", fun)


@pytest.fixture
def counting():
    """Factory wrapping an evaluable so its calls can be inspected."""
    return CountingFunction


@pytest.fixture
def optimizer_warnings(caplog: pytest.LogCaptureFixture) -> Iterator[pytest.LogCaptureFixture]:
    """Route optimizer log records into caplog.

    quadmin loggers do not propagate to the root logger, so the caplog
    handler is attached to them directly for the duration of the test.
    """
    loggers = [
        get_logger("quadmin.optimize.bounded"),
        get_logger("quadmin.optimize.unbounded"),
    ]
    for logger in loggers:
        logger.addHandler(caplog.handler)
    caplog.set_level(logging.WARNING)
    try:
        yield caplog
    finally:
        for logger in loggers:
            logger.removeHandler(caplog.handler)
