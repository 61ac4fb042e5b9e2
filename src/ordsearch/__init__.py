"""
ordsearch - Search algorithms over ordered collections

Linear, binary (exact, first and last occurrence), interpolation, exponential,
jump and Fibonacci search over sorted sequences; binary search on the answer
for monotonic predicates; staircase search over row- and column-sorted
matrices. Every one-dimensional routine returns a ``SearchResult``.
"""

from .binary import (
    count_occurrences,
    equal_range,
    exact_search,
    first_occurrence,
    last_occurrence,
)
from .dispatch import Searcher, Strategy, search
from .errors import PreconditionError
from .linear import linear_scan
from .matrix import search_matrix, search_row_major
from .predicate import (
    search_monotonic_boundary,
    search_monotonic_boundary_float,
    search_unbounded_boundary,
)
from .probe import (
    exponential_search,
    fibonacci_search,
    interpolation_search,
    jump_search,
)
from .types import MatrixView, SearchResult, SequenceView
from .validation import is_sorted
from .views import GridView, RowMajorView, as_matrix, as_sequence

__version__ = "0.1.0"
__all__ = [
    "search",
    "Searcher",
    "Strategy",
    "SearchResult",
    "SequenceView",
    "MatrixView",
    "PreconditionError",
    "linear_scan",
    "exact_search",
    "first_occurrence",
    "last_occurrence",
    "equal_range",
    "count_occurrences",
    "interpolation_search",
    "exponential_search",
    "jump_search",
    "fibonacci_search",
    "search_monotonic_boundary",
    "search_monotonic_boundary_float",
    "search_unbounded_boundary",
    "search_matrix",
    "search_row_major",
    "is_sorted",
    "as_sequence",
    "as_matrix",
    "GridView",
    "RowMajorView",
]
