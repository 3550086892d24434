"""
Example: minimizing the built-in catalog functions

Each catalog function is minimized twice: once on a fixed interval with the
bounded optimizer and once from a starting point with the unbounded
optimizer. A coarse NumPy grid scan is printed alongside as a sanity check.
"""

from decimal import Decimal

from quadmin import (
    CATALOG,
    DomainViolationError,
    NonConvergenceError,
    find_minimum_bounded,
    find_minimum_unbounded,
)
from quadmin.functions import coarse_minimum

EPSILON = Decimal("1e-8")

# (interval, starting point, step) per catalog entry
SETTINGS = [
    (("-1", "2"), "2", "0.1"),
    (("0", "2"), "1.5", "0.1"),
    (("0.5", "3"), "2", "0.25"),
    (("0", "4"), "-3", "0.5"),
]


def main() -> None:
    for function, ((a, b), x0, step) in zip(CATALOG, SETTINGS):
        print("=" * 60)
        print(function)
        print("=" * 60)

        grid_x, grid_f = coarse_minimum(function, a, b, num=201)
        print(f"Grid scan on [{a}, {b}]: x ~ {grid_x:.4f}, f ~ {grid_f:.6f}")

        res = find_minimum_bounded(function, a, b, EPSILON, EPSILON)
        print(f"Bounded   [{a}, {b}]: status={res.status.value} iterations={res.iterations}")
        print(f"    x = {res.x_min}")
        print(f"    f = {res.f_min}")

        try:
            res = find_minimum_unbounded(function, x0, step, EPSILON, EPSILON)
        except NonConvergenceError as exc:
            print(f"Unbounded from {x0}: failed after {exc.iterations} iterations")
        except DomainViolationError as exc:
            print(f"Unbounded from {x0}: left the domain ({exc})")
        else:
            print(f"Unbounded from {x0} (step {step}): iterations={res.iterations}")
            print(f"    x = {res.x_min}")
            print(f"    f = {res.f_min}")
        print()

    print("Catalog minimization complete")


if __name__ == "__main__":
    main()
