"""
Type definitions for the ordsearch library.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, Tuple


# -----------------------------
# Read-only input abstractions
# -----------------------------


class SequenceView(Protocol):
    """Random-access, read-only view over N comparable elements.

    Lists, tuples, ``range`` objects and 1-D numpy arrays all qualify.
    Every routine except ``linear_scan`` assumes the elements are
    non-decreasing.
    """

    def __len__(self) -> int: ...

    def __getitem__(self, index: int) -> Any: ...


class MatrixView(Protocol):
    """Read-only R x C grid whose rows and columns are each non-decreasing.

    A 2-D numpy array satisfies this protocol as-is.
    """

    @property
    def shape(self) -> Tuple[int, int]: ...

    def __getitem__(self, position: Tuple[int, int]) -> Any: ...


# -----------------------------
# Public result data structures
# -----------------------------


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a one-dimensional search.

    Either a hit at ``index`` or a miss carrying the ``insertion_point`` that
    keeps the sequence ordered. On a hit the insertion point equals the index.

    ``probes`` is the number of element reads the routine performed. It does
    not take part in equality, so two strategies that agree on the answer
    compare equal regardless of cost.
    """

    found: bool
    index: Optional[int]
    insertion_point: int
    probes: int = field(default=0, compare=False)

    @classmethod
    def found_at(cls, index: int, probes: int = 0) -> "SearchResult":
        return cls(found=True, index=index, insertion_point=index, probes=probes)

    @classmethod
    def not_found(cls, insertion_point: int, probes: int = 0) -> "SearchResult":
        return cls(
            found=False, index=None, insertion_point=insertion_point, probes=probes
        )

    def __bool__(self) -> bool:
        return self.found

    def __repr__(self) -> str:
        if self.found:
            return f"Found({self.index})"
        return f"NotFound(insertion_point={self.insertion_point})"
