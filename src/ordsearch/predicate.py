"""
Binary search on the answer.

Given a monotonic predicate over an ordered numeric domain, find where it
flips. The predicate is typically a feasibility check supplied by the caller
("can everything be shipped in D days with capacity c?"); only the search
shell lives here.

Every function evaluates the predicate O(log width) times and terminates
within that bound even if the predicate is not actually monotonic, in which
case the returned boundary is deterministic but unspecified.
"""

import sys
from typing import Callable, Optional

import numpy as np

# enough halvings to shrink the full double range down to one subnormal step
_MAX_BISECTIONS = 2100


def _first_true(lo: int, hi: int, predicate: Callable[[int], bool]) -> int:
    """Smallest x in [lo, hi] with predicate(x), or ``hi + 1`` if none.

    ``hi + 1`` acts as a virtual true sentinel and is never evaluated.
    """
    left, right = lo, hi + 1
    while left < right:
        mid = left + (right - left) // 2
        if predicate(mid):
            right = mid
        else:
            left = mid + 1
    return left


def search_monotonic_boundary(
    lo: int,
    hi: int,
    predicate: Callable[[int], bool],
    *,
    increasing: bool = True,
) -> Optional[int]:
    """
    Find the transition point of a monotonic predicate over ``[lo, hi]``.

    With ``increasing=True`` the predicate is false below some threshold and
    true from it on; the smallest value where it holds is returned. With
    ``increasing=False`` the predicate is true up to some threshold and false
    after it; the largest value where it holds is returned.

    The predicate is evaluated at most ceil(log2(hi - lo + 2)) times.

    Args:
        lo: Smallest candidate value (inclusive)
        hi: Largest candidate value (inclusive)
        predicate: Pure function from candidate to bool
        increasing: Orientation of the predicate, see above

    Returns:
        The boundary value, or None if the predicate holds nowhere in range
    """
    if lo > hi:
        raise ValueError(f"Invalid domain: lo={lo} > hi={hi}")

    if increasing:
        boundary = _first_true(lo, hi, lambda x: bool(predicate(x)))
        return boundary if boundary <= hi else None

    first_false = _first_true(lo, hi, lambda x: not predicate(x))
    if first_false == lo:
        return None
    return first_false - 1


def search_monotonic_boundary_float(
    lo: float,
    hi: float,
    predicate: Callable[[float], bool],
    *,
    tolerance: float = 1e-9,
) -> Optional[float]:
    """
    Bisect a real interval for the point where a false-then-true predicate flips.

    The number of bisection steps is fixed up front from the interval width
    and ``tolerance``, so the loop terminates for any predicate. Bounds may
    span the whole finite double range; the step count never exceeds the
    number of halvings that range allows. Where ``tolerance`` is finer than
    the float spacing at the threshold, the result is within a few ulps.

    Args:
        lo: Left end of the interval
        hi: Right end of the interval
        predicate: Pure function from value to bool
        tolerance: Maximum distance between the returned value and the threshold

    Returns:
        A value where the predicate holds that lies within ``tolerance`` of the
        threshold, or None if the predicate does not hold at ``hi``
    """
    if tolerance <= 0:
        raise ValueError(f"tolerance must be positive, got {tolerance}")
    if not (np.isfinite(lo) and np.isfinite(hi)):
        raise ValueError(f"Interval bounds must be finite: lo={lo} hi={hi}")
    if lo > hi:
        raise ValueError(f"Invalid interval: lo={lo} > hi={hi}")

    if not predicate(hi):
        return None
    if predicate(lo):
        return lo
    # halved so that bounds near the float limits cannot overflow
    half_width = hi / 2 - lo / 2
    if half_width <= tolerance / 2:
        return hi

    steps = np.log2(half_width) - np.log2(tolerance) + 1
    iterations = min(int(np.ceil(steps)), _MAX_BISECTIONS)
    for _ in range(iterations):
        mid = lo / 2 + hi / 2
        if predicate(mid):
            hi = mid
        else:
            lo = mid
    return hi


def search_unbounded_boundary(
    predicate: Callable[[int], bool],
    lo: int = 0,
    *,
    limit: Optional[int] = None,
) -> Optional[int]:
    """
    Find the smallest ``x >= lo`` where a false-then-true predicate holds.

    Gallops through ``lo, lo + 1, lo + 2, lo + 4, ...`` until the predicate
    holds, then binary searches the last gap. Cost is O(log(t - lo)) for a
    threshold ``t``. ``limit`` (default ``sys.maxsize``) caps the gallop; if
    the predicate never holds up to ``limit`` the result is None.
    """
    if limit is None:
        limit = sys.maxsize
    if lo > limit:
        raise ValueError(f"Invalid domain: lo={lo} > limit={limit}")

    if predicate(lo):
        return lo

    known_false = lo
    step = 1
    while True:
        probe = lo + step
        if probe >= limit:
            boundary = _first_true(known_false + 1, limit, predicate)
            return boundary if boundary <= limit else None
        if predicate(probe):
            # probe itself is the sentinel, no need to re-evaluate it
            return _first_true(known_false + 1, probe - 1, predicate)
        known_false = probe
        step *= 2
