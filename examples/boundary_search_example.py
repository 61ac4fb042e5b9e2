"""
Binary search on the answer.

The classic "minimum capacity" problem: given package weights that must ship
in order, what is the smallest ship capacity that gets everything across in
``days`` days? Feasibility is monotonic in the capacity, so the answer is the
boundary of a false-then-true predicate.
"""

from typing import List

import numpy as np
from ordsearch import (
    Searcher,
    search_monotonic_boundary,
    search_monotonic_boundary_float,
    search_unbounded_boundary,
)


def days_needed(weights: List[int], capacity: int) -> int:
    days, load = 1, 0
    for w in weights:
        if load + w > capacity:
            days += 1
            load = 0
        load += w
    return days


def example_ship_capacity():
    print("=" * 60)
    print("EXAMPLE 1: Minimum Ship Capacity")
    print("=" * 60)

    weights = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]
    days = 5

    searcher = Searcher(verbose=True)
    capacity = searcher.find_boundary(
        max(weights), sum(weights), lambda c: days_needed(weights, c) <= days
    )
    print(f"Minimum capacity to ship in {days} days: {capacity}")


def example_square_root():
    print("\n" + "=" * 60)
    print("EXAMPLE 2: Real-valued Threshold")
    print("=" * 60)

    root = search_monotonic_boundary_float(0.0, 2.0, lambda x: x * x >= 2.0)
    print(f"sqrt(2) ~= {root:.9f} (numpy: {np.sqrt(2.0):.9f})")


def example_unbounded():
    print("\n" + "=" * 60)
    print("EXAMPLE 3: Unbounded Domain")
    print("=" * 60)

    # first n with n! > 10**30, without knowing an upper bound in advance
    def factorial_exceeds(n: int) -> bool:
        value = 1
        for k in range(2, n + 1):
            value *= k
        return value > 10**30

    n = search_unbounded_boundary(factorial_exceeds, lo=1)
    print(f"Smallest n with n! > 10**30: {n}")

    last_small = search_monotonic_boundary(
        0, 100, lambda x: x * x <= 500, increasing=False
    )
    print(f"Largest x in [0, 100] with x*x <= 500: {last_small}")


if __name__ == "__main__":
    example_ship_capacity()
    example_square_root()
    example_unbounded()
