"""
Probe-position strategies over sorted sequences.

Interpolation, exponential, jump and Fibonacci search differ only in how they
pick the next element to read. They are alternate-cost implementations of one
contract: on the same non-decreasing input each returns exactly the
``SearchResult`` that ``first_occurrence`` returns (leftmost match on a hit,
lower-bound insertion point on a miss).

All four work on the same invariant: every index before ``lo`` holds a value
below the target, and the answer lies in a window that strictly shrinks on
each probe.
"""

import math
from dataclasses import replace
from typing import Any, Optional

from ordsearch.binary import first_occurrence
from ordsearch.types import SearchResult, SequenceView


def _result_at(view: SequenceView, index: int, target: Any, probes: int) -> SearchResult:
    """Turn a lower-bound index into a result; one extra read decides the hit."""
    if index < len(view):
        probes += 1
        if view[index] == target:
            return SearchResult.found_at(index, probes=probes)
    return SearchResult.not_found(index, probes=probes)


# ---------------------
# Interpolation search
# ---------------------


def _interpolate(lo: int, hi: int, v_lo: Any, v_hi: Any, target: Any) -> int:
    midpoint = lo + (hi - lo) // 2
    if v_hi == v_lo:
        return midpoint
    try:
        t, a, b = float(target), float(v_lo), float(v_hi)
    except (TypeError, ValueError) as exc:
        raise ValueError(
            "interpolation_search requires numeric values, got "
            f"{type(v_lo).__name__} elements and a {type(target).__name__} target"
        ) from exc
    try:
        fraction = (t - a) / (b - a)
    except (OverflowError, ZeroDivisionError):
        return midpoint
    if not math.isfinite(fraction):
        return midpoint
    pos = lo + int(fraction * (hi - lo))
    return min(max(pos, lo), hi)


def interpolation_search(view: SequenceView, target: Any) -> SearchResult:
    """
    Search numeric, roughly uniformly distributed values by interpolation.

    The probe is placed at the target's proportional distance between
    ``view[lo]`` and ``view[hi]``. Equal boundary values (which would divide
    by zero) fall back to the midpoint. Values and target must convert with
    ``float()``; anything else raises ``ValueError``.

    Expected O(log log N) reads on uniform data. Skewed distributions degrade
    it to O(N); that is the known cost of the strategy, not a defect.
    """
    n = len(view)
    lo, hi = 0, n - 1
    probes = 0

    while lo <= hi:
        v_lo = view[lo]
        probes += 1
        if not v_lo < target:
            break
        v_hi = view[hi]
        probes += 1
        if v_hi < target:
            lo = hi + 1
            break

        pos = _interpolate(lo, hi, v_lo, v_hi, target)
        probes += 1
        if view[pos] < target:
            lo = pos + 1
        else:
            hi = pos - 1

    return _result_at(view, lo, target, probes)


# ---------------------
# Exponential search
# ---------------------


def exponential_search(view: SequenceView, target: Any) -> SearchResult:
    """
    Gallop to a window containing the target, then binary search it.

    Reads indices 1, 2, 4, 8, ... until one is not below the target or the
    end is passed; the last gap is handed to ``first_occurrence``. Cost is
    O(log i) for an answer at index i, which suits very large sequences
    where the target sits near the front.
    """
    n = len(view)
    if n == 0:
        return SearchResult.not_found(0)

    head = view[0]
    probes = 1
    if not head < target:
        if head == target:
            return SearchResult.found_at(0, probes=probes)
        return SearchResult.not_found(0, probes=probes)

    bound = 1
    while bound < n:
        probes += 1
        if not view[bound] < target:
            break
        bound *= 2

    # view[bound // 2] < target is known; view[bound] >= target if bound < n
    result = first_occurrence(view, target, bound // 2 + 1, min(bound + 1, n))
    return replace(result, probes=result.probes + probes)


# ---------------------
# Jump search
# ---------------------


def jump_search(
    view: SequenceView, target: Any, step: Optional[int] = None
) -> SearchResult:
    """
    Skip ahead block by block, then scan the block that overshoots.

    Args:
        view: Non-decreasing sequence
        target: Value to locate
        step: Block size; defaults to floor(sqrt(N)), the size that minimises
            worst-case reads at O(sqrt(N))

    Returns:
        SearchResult
    """
    n = len(view)
    if step is None:
        step = max(1, math.isqrt(n))
    elif step < 1:
        raise ValueError(f"step must be at least 1, got {step}")

    start = 0
    probes = 0
    while start < n:
        # the last block may be short; clamp its end to the final element
        block_last = min(start + step, n) - 1
        probes += 1
        if not view[block_last] < target:
            break
        start += step

    if start >= n:
        return SearchResult.not_found(n, probes=probes)

    # view[block_last] >= target, so the scan stops inside this block
    i = start
    while True:
        value = view[i]
        probes += 1
        if not value < target:
            break
        i += 1

    if value == target:
        return SearchResult.found_at(i, probes=probes)
    return SearchResult.not_found(i, probes=probes)


# ---------------------
# Fibonacci search
# ---------------------


def fibonacci_search(view: SequenceView, target: Any) -> SearchResult:
    """
    Split the window at Fibonacci offsets instead of the midpoint.

    Keeps a triple of consecutive Fibonacci numbers ``(a, b, c)`` with
    ``c = a + b``. The answer lies in ``[lo, lo + c]``; each probe at
    ``lo + a - 1`` either discards the first ``a`` positions (window becomes
    ``b``) or keeps only them (window becomes ``a``). The smallest Fibonacci
    number >= N is computed once before the loop. The loop stops at a window
    of one, so the last boundary element is checked explicitly afterwards.

    Uses only addition and subtraction for index arithmetic; O(log N) reads.
    """
    n = len(view)
    if n == 0:
        return SearchResult.not_found(0)

    a, b, c = 0, 1, 1
    while c < n:
        a, b, c = b, c, b + c

    lo = 0
    probes = 0
    while c > 1:
        i = min(lo + a - 1, n - 1)
        probes += 1
        if view[i] < target:
            lo += a
            if lo >= n:
                lo = n
                break
            a, b, c = b - a, a, b
        else:
            a, b, c = 2 * a - b, b - a, a

    if lo < n:
        probes += 1
        if view[lo] < target:
            lo += 1

    return _result_at(view, lo, target, probes)
