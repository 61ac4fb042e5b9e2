from typing import Any, List

import numpy as np

from ordsearch import SearchResult, Strategy

ORDERED_STRATEGIES: List[Strategy] = [s for s in Strategy if s is not Strategy.LINEAR]


def make_sorted_ints(
    rng: np.random.RandomState, size: int, low: int = 0, high: int = 1000
) -> np.ndarray:
    """Sorted random integers; a narrow [low, high) range produces duplicates."""
    return np.sort(rng.randint(low, high, size=size))


def reference_result(data: Any, target: Any) -> SearchResult:
    """
    Expected result for an ordered search, computed with numpy.

    The leftmost index on a hit, the lower-bound insertion point on a miss.
    """
    arr = np.asarray(data)
    insertion = int(np.searchsorted(arr, target, side="left"))
    if insertion < len(arr) and arr[insertion] == target:
        return SearchResult.found_at(insertion)
    return SearchResult.not_found(insertion)


def probe_targets(data: np.ndarray) -> List[Any]:
    """Every distinct value plus values just outside and between them."""
    values = sorted(set(data.tolist()))
    targets = list(values)
    if values:
        targets += [values[0] - 1, values[-1] + 1]
        targets += [(a + b) / 2 for a, b in zip(values, values[1:]) if b - a > 1]
    return targets
