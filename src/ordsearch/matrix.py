"""
Search over two-dimensional sorted grids.

``search_matrix`` handles grids where each row and each column is sorted
independently (a Young tableau); the grid as a whole need not be sorted.
``search_row_major`` handles the stricter case of a grid sorted end to end in
row-major order, where plain binary search applies.
"""

from typing import Any, Optional, Tuple

from ordsearch.binary import first_occurrence
from ordsearch.views import RowMajorView, as_matrix


def search_matrix(matrix: Any, target: Any) -> Optional[Tuple[int, int]]:
    """
    Staircase search from the top-right corner in O(R + C).

    At each cell: a match returns its coordinates; a larger value rules out
    the rest of its column (everything below is larger still), so the cursor
    moves left; a smaller value rules out the rest of its row (everything to
    the left is smaller still), so the cursor moves down. The search ends
    when the cursor leaves the grid.

    This elimination is only sound because rows and columns are each sorted.

    Args:
        matrix: 2-D numpy array, MatrixView, or rectangular list of rows
        target: Value to locate

    Returns:
        (row, col) of a matching cell, or None if the target is absent
    """
    grid = as_matrix(matrix)
    rows, cols = grid.shape
    row, col = 0, cols - 1

    while row < rows and col >= 0:
        value = grid[row, col]
        if value == target:
            return row, col
        if target < value:
            col -= 1
        else:
            row += 1

    return None


def search_row_major(matrix: Any, target: Any) -> Optional[Tuple[int, int]]:
    """Binary search a grid that is sorted in row-major order, O(log(R * C)).

    Returns the leftmost match in reading order, or None.
    """
    flat = RowMajorView(as_matrix(matrix))
    result = first_occurrence(flat, target)
    if not result.found:
        return None
    return flat.position(result.index)
