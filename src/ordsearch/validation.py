"""
Opt-in precondition checks.

The search routines never call these themselves: checking order costs O(N)
and would erase the point of an O(log N) search. ``Searcher`` runs them when
constructed with ``check_preconditions=True``.
"""

from typing import Any, Optional, Tuple

import numpy as np

from ordsearch.errors import PreconditionError
from ordsearch.types import MatrixView, SequenceView
from ordsearch.views import as_matrix


def first_descent(view: SequenceView) -> Optional[int]:
    """Index ``i`` of the first pair with ``view[i] > view[i + 1]``, or None."""
    if isinstance(view, np.ndarray):
        bad = np.flatnonzero(view[1:] < view[:-1])
        return int(bad[0]) if bad.size else None
    for i in range(len(view) - 1):
        if view[i + 1] < view[i]:
            return i
    return None


def is_sorted(view: SequenceView) -> bool:
    """True if the sequence is non-decreasing."""
    return first_descent(view) is None


def first_matrix_violation(matrix: MatrixView) -> Optional[Tuple[str, int, int]]:
    """Locate the first cell breaking row or column order.

    Returns ``("row", r, c)`` when ``matrix[r, c + 1] < matrix[r, c]``,
    ``("column", r, c)`` when ``matrix[r + 1, c] < matrix[r, c]``, else None.
    """
    if isinstance(matrix, np.ndarray):
        row_bad = np.argwhere(matrix[:, 1:] < matrix[:, :-1])
        if row_bad.size:
            r, c = row_bad[0]
            return "row", int(r), int(c)
        col_bad = np.argwhere(matrix[1:, :] < matrix[:-1, :])
        if col_bad.size:
            r, c = col_bad[0]
            return "column", int(r), int(c)
        return None

    rows, cols = matrix.shape
    for r in range(rows):
        for c in range(cols - 1):
            if matrix[r, c + 1] < matrix[r, c]:
                return "row", r, c
    for c in range(cols):
        for r in range(rows - 1):
            if matrix[r + 1, c] < matrix[r, c]:
                return "column", r, c
    return None


def require_sorted(view: SequenceView) -> None:
    """Raise PreconditionError if the sequence is not non-decreasing."""
    i = first_descent(view)
    if i is not None:
        raise PreconditionError(
            f"Sequence is not sorted: element {i + 1} ({view[i + 1]!r}) "
            f"is less than element {i} ({view[i]!r})",
            position=i,
        )


def require_sorted_matrix(matrix: Any) -> None:
    """Raise PreconditionError if any row or column of the grid descends."""
    grid = as_matrix(matrix)
    violation = first_matrix_violation(grid)
    if violation is not None:
        axis, r, c = violation
        raise PreconditionError(
            f"Matrix {axis} order violated at ({r}, {c})", position=(r, c)
        )
