"""
Adapters that present caller data through the SequenceView and MatrixView
protocols.

Nothing here copies element data except ``GridView`` validating row lengths.
Views hold a reference to the caller's container and must not outlive the
search call that uses them.
"""

from collections.abc import Mapping
from typing import Any, Sequence, Tuple

import numpy as np

from ordsearch.types import MatrixView, SequenceView


def as_sequence(data: Any) -> SequenceView:
    """Return ``data`` as a SequenceView.

    Numpy arrays must be one-dimensional. Mappings are rejected since their
    keys are not positions. Anything else with ``__len__`` and ``__getitem__``
    is returned unchanged.
    """
    if isinstance(data, np.ndarray):
        if data.ndim != 1:
            raise ValueError(
                f"Expected a 1-D array for a sequence view, got ndim={data.ndim}"
            )
        return data
    if isinstance(data, Mapping):
        raise ValueError(
            f"Mapping of type {type(data).__name__} is not a positional sequence"
        )
    if not (hasattr(data, "__len__") and hasattr(data, "__getitem__")):
        raise ValueError(
            f"Object of type {type(data).__name__} does not support len() and indexing"
        )
    return data


def as_matrix(data: Any) -> MatrixView:
    """Return ``data`` as a MatrixView.

    2-D numpy arrays and objects already exposing ``shape`` are returned
    unchanged. A sequence of equal-length rows is wrapped in a ``GridView``.
    """
    if isinstance(data, np.ndarray):
        if data.ndim != 2:
            raise ValueError(
                f"Expected a 2-D array for a matrix view, got ndim={data.ndim}"
            )
        return data
    if hasattr(data, "shape"):
        return data
    return GridView(data)


class GridView:
    """MatrixView over a rectangular sequence of rows."""

    def __init__(self, rows: Sequence[Sequence[Any]]):
        n_rows = len(rows)
        n_cols = len(rows[0]) if n_rows else 0
        for r, row in enumerate(rows):
            if len(row) != n_cols:
                raise ValueError(
                    f"Ragged matrix: row {r} has {len(row)} columns, expected {n_cols}"
                )
        self._rows = rows
        self._shape = (n_rows, n_cols)

    @property
    def shape(self) -> Tuple[int, int]:
        return self._shape

    def __getitem__(self, position: Tuple[int, int]) -> Any:
        row, col = position
        return self._rows[row][col]


class RowMajorView:
    """Flat SequenceView over a matrix read in row-major order.

    Index ``i`` maps to cell ``(i // cols, i % cols)``.
    """

    def __init__(self, matrix: MatrixView):
        self._matrix = matrix
        self._rows, self._cols = matrix.shape

    def __len__(self) -> int:
        return self._rows * self._cols

    def __getitem__(self, index: int) -> Any:
        if not 0 <= index < len(self):
            raise IndexError(f"Row-major index {index} out of range")
        return self._matrix[divmod(index, self._cols)]

    def position(self, index: int) -> Tuple[int, int]:
        """Translate a flat index back to ``(row, col)``."""
        return divmod(index, self._cols)
