"""
Basic usage example for the ordsearch library.

Runs every one-dimensional strategy over the same sorted data, shows the
first/last occurrence variants on duplicates, and compares how many elements
each strategy reads.
"""

import numpy as np
from ordsearch import Searcher, Strategy, first_occurrence, last_occurrence, search


def example_strategies_agree():
    """Example 1: Every strategy returns the same answer."""
    print("=" * 60)
    print("EXAMPLE 1: Strategies Agree")
    print("=" * 60)

    data = [1, 3, 3, 3, 5, 7]
    for target in [3, 4, 7, 0, 9]:
        results = {s.value: search(data, target, s) for s in Strategy}
        print(f"\ntarget={target}")
        for name, result in results.items():
            print(f"  {name:<14} {result}")


def example_duplicates():
    """Example 2: Boundaries of a run of equal elements."""
    print("\n" + "=" * 60)
    print("EXAMPLE 2: First and Last Occurrence")
    print("=" * 60)

    data = [1, 2, 2, 2, 3, 4, 4, 5, 6, 6, 6, 6, 7]
    for target in [2, 4, 6]:
        first = first_occurrence(data, target)
        last = last_occurrence(data, target)
        print(f"- {target}: first={first.index} last={last.index}")


def example_probe_counts():
    """Example 3: Cost of each strategy on uniform data."""
    print("\n" + "=" * 60)
    print("EXAMPLE 3: Probe Counts on 1,000,000 Uniform Integers")
    print("=" * 60)

    rng = np.random.RandomState(42)
    data = np.sort(rng.randint(0, 10_000_000, size=1_000_000))
    targets = rng.choice(data, size=20)

    for strategy in Strategy:
        if strategy is Strategy.LINEAR:
            continue
        probes = [search(data, t, strategy).probes for t in targets]
        print(f"- {strategy.value:<14} mean probes: {np.mean(probes):8.1f}")


def example_verbose_searcher():
    """Example 4: Debug checks and trace output."""
    print("\n" + "=" * 60)
    print("EXAMPLE 4: Verbose Searcher with Precondition Checks")
    print("=" * 60)

    searcher = Searcher(strategy="jump", check_preconditions=True, verbose=True)
    searcher.search([2, 4, 6, 8, 10], 9)
    searcher.first_occurrence([1, 3, 3, 3, 5, 7], 3)

    try:
        searcher.search([5, 1, 3], 3)
    except ValueError as exc:
        print(f"Rejected unsorted input: {exc}")


if __name__ == "__main__":
    print("ordsearch - Basic Usage Examples")

    example_strategies_agree()
    example_duplicates()
    example_probe_counts()
    example_verbose_searcher()

    print("\n" + "=" * 60)
    print("Examples completed successfully!")
    print("=" * 60)
