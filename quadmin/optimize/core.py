"""Core interfaces shared by the bounded and unbounded optimizers."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Callable, Optional, Protocol, runtime_checkable


@runtime_checkable
class EvaluableFunction(Protocol):
    """A pure mapping from a decimal abscissa to a decimal value.

    Implementations raise :class:`DomainViolationError` for inputs outside the
    function's mathematical domain and must be safe to call reentrantly.
    """

    def evaluate(self, x: Decimal) -> Decimal:
        ...


class Status(Enum):
    """Exit status of an optimizer run."""

    CONVERGED = "converged"
    DEGENERATE_FIT = "degenerate_fit"
    DOMAIN_REJECTED = "domain_rejected"
    MAX_ITER = "max_iter"


@dataclass(frozen=True)
class Sample:
    """A single evaluation ``(x, f(x))``."""

    x: Decimal
    f: Decimal


@dataclass(frozen=True)
class OptimizationResult:
    """Outcome of a single ``find_minimum`` call.

    Attributes:
        x_min: Abscissa of the best point found.
        f_min: Function value at ``x_min``.
        iterations: Number of main-loop iterations performed.
        status: Why the run stopped.
        message: Human-readable explanation of ``status``.
    """

    x_min: Decimal
    f_min: Decimal
    iterations: int
    status: Status = Status.CONVERGED
    message: str = ""

    @property
    def converged(self) -> bool:
        return self.status is Status.CONVERGED

    def as_tuple(self) -> tuple[Decimal, Decimal, int]:
        return self.x_min, self.f_min, self.iterations


IterationCallback = Callable[[int, Sample], None]


class QuadminError(Exception):
    """Base class for all errors raised by quadmin."""


class InvalidInputError(QuadminError, ValueError):
    """A precondition of an optimizer was violated before iterating."""


class DomainViolationError(QuadminError, ValueError):
    """A function was evaluated outside its mathematical domain."""

    def __init__(self, reason: str, x: Optional[Decimal] = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.x = x


class DegenerateFitError(QuadminError, ArithmeticError):
    """The parabola through three samples has no unique vertex."""


class NonConvergenceError(QuadminError, RuntimeError):
    """The iteration cap was exhausted without meeting the tolerances."""

    def __init__(self, message: str, iterations: int, best: Optional[Sample] = None) -> None:
        super().__init__(message)
        self.iterations = iterations
        self.best = best


__all__ = [
    "DegenerateFitError",
    "DomainViolationError",
    "EvaluableFunction",
    "InvalidInputError",
    "IterationCallback",
    "NonConvergenceError",
    "OptimizationResult",
    "QuadminError",
    "Sample",
    "Status",
]
