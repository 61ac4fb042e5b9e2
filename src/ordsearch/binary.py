"""
Binary search over non-decreasing sequences.

Three entry points share one contract:

- ``exact_search``: classic three-way comparison with closed bounds.
- ``first_occurrence``: lower bound, the leftmost index with ``view[i] >= target``.
- ``last_occurrence``: upper bound minus one, the rightmost ``view[i] <= target``.

All loops are iterative and compute the midpoint as ``lo + (hi - lo) // 2``.
Python integers do not overflow, but the form keeps the midpoint inside the
current window for any integer-like bound type, including numpy integers.

Each function accepts optional ``lo``/``hi`` bounds in the style of the
``bisect`` module: only ``view[lo:hi]`` is examined and returned indices are
absolute.
"""

from typing import Any, Optional, Tuple

from ordsearch.types import SearchResult, SequenceView


def _resolve_bounds(view: SequenceView, lo: int, hi: Optional[int]) -> Tuple[int, int]:
    n = len(view)
    if lo < 0:
        raise ValueError(f"lo must be non-negative, got lo={lo}")
    if hi is None:
        hi = n
    elif hi > n:
        raise ValueError(f"hi={hi} exceeds sequence length {n}")
    if lo > hi:
        raise ValueError(f"Invalid bounds: lo={lo} > hi={hi}")
    return lo, hi


def exact_search(
    view: SequenceView, target: Any, lo: int = 0, hi: Optional[int] = None
) -> SearchResult:
    """Locate ``target`` with a three-way comparison binary search.

    On a match the search keeps narrowing to the left, so among duplicates the
    leftmost index is reported. This keeps the answer identical to every other
    strategy in the library. On a miss the final ``lo`` is the insertion point.

    Args:
        view: Non-decreasing sequence
        target: Value to locate
        lo: First index of the window (inclusive)
        hi: End of the window (exclusive); defaults to ``len(view)``

    Returns:
        SearchResult
    """
    lo, hi = _resolve_bounds(view, lo, hi)
    hi -= 1  # closed bounds [lo, hi]
    match: Optional[int] = None
    probes = 0

    while lo <= hi:
        mid = lo + (hi - lo) // 2
        value = view[mid]
        probes += 1
        if value == target:
            match = mid
            hi = mid - 1
        elif value < target:
            lo = mid + 1
        else:
            hi = mid - 1

    if match is not None:
        return SearchResult.found_at(match, probes=probes)
    return SearchResult.not_found(lo, probes=probes)


def lower_bound(
    view: SequenceView, target: Any, lo: int = 0, hi: Optional[int] = None
) -> Tuple[int, int]:
    """Return ``(index, probes)`` for the leftmost ``view[i] >= target`` in the window."""
    lo, hi = _resolve_bounds(view, lo, hi)
    probes = 0
    while lo < hi:
        mid = lo + (hi - lo) // 2
        probes += 1
        if view[mid] < target:
            lo = mid + 1
        else:
            hi = mid
    return lo, probes


def upper_bound(
    view: SequenceView, target: Any, lo: int = 0, hi: Optional[int] = None
) -> Tuple[int, int]:
    """Return ``(index, probes)`` for the leftmost ``view[i] > target`` in the window."""
    lo, hi = _resolve_bounds(view, lo, hi)
    probes = 0
    while lo < hi:
        mid = lo + (hi - lo) // 2
        probes += 1
        if target < view[mid]:
            hi = mid
        else:
            lo = mid + 1
    return lo, probes


def first_occurrence(
    view: SequenceView, target: Any, lo: int = 0, hi: Optional[int] = None
) -> SearchResult:
    """Find the leftmost occurrence of ``target``.

    The right bound moves to ``mid`` (not ``mid - 1``) whenever
    ``view[mid] >= target``, so the window converges on the smallest
    qualifying index. That index is the insertion point on a miss.
    """
    start, end = _resolve_bounds(view, lo, hi)
    candidate, probes = lower_bound(view, target, start, end)
    if candidate < end:
        probes += 1
        if view[candidate] == target:
            return SearchResult.found_at(candidate, probes=probes)
    return SearchResult.not_found(candidate, probes=probes)


def last_occurrence(
    view: SequenceView, target: Any, lo: int = 0, hi: Optional[int] = None
) -> SearchResult:
    """Find the rightmost occurrence of ``target``.

    The left bound moves to ``mid + 1`` whenever ``view[mid] <= target``, so
    the loop ends on the exclusive upper bound of the run of equal elements.
    The element just before it is the candidate.
    """
    start, end = _resolve_bounds(view, lo, hi)
    candidate, probes = upper_bound(view, target, start, end)
    if candidate > start:
        probes += 1
        if view[candidate - 1] == target:
            return SearchResult.found_at(candidate - 1, probes=probes)
    return SearchResult.not_found(candidate, probes=probes)


def equal_range(
    view: SequenceView, target: Any, lo: int = 0, hi: Optional[int] = None
) -> Tuple[int, int]:
    """Return the half-open range ``[start, stop)`` of elements equal to ``target``.

    When ``target`` is absent the range is empty and both ends sit at the
    insertion point.
    """
    start, _ = lower_bound(view, target, lo, hi)
    stop, _ = upper_bound(view, target, start, hi)
    return start, stop


def count_occurrences(
    view: SequenceView, target: Any, lo: int = 0, hi: Optional[int] = None
) -> int:
    """Number of elements equal to ``target``, in O(log N)."""
    start, stop = equal_range(view, target, lo, hi)
    return stop - start
