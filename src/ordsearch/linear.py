"""
Sequential scan, the baseline every ordered strategy is checked against.
"""

from typing import Any

from ordsearch.types import SearchResult, SequenceView


def linear_scan(view: SequenceView, target: Any) -> SearchResult:
    """Return the first index whose element equals ``target``.

    No ordering is assumed, so a miss reports ``len(view)`` as the insertion
    point (append position).
    """
    n = len(view)
    for i in range(n):
        if view[i] == target:
            return SearchResult.found_at(i, probes=i + 1)
    return SearchResult.not_found(n, probes=n)
