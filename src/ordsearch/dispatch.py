"""
Strategy selection and the configurable ``Searcher`` facade.

The one-dimensional strategies form a closed set of interchangeable plain
functions sharing the signature ``(view, target) -> SearchResult``.
``search`` picks one by name; ``Searcher`` bundles a default strategy with the
optional debug checks and verbose output.
"""

from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple, Union

from ordsearch.binary import exact_search, first_occurrence, last_occurrence
from ordsearch.linear import linear_scan
from ordsearch.matrix import search_matrix
from ordsearch.predicate import search_monotonic_boundary
from ordsearch.probe import (
    exponential_search,
    fibonacci_search,
    interpolation_search,
    jump_search,
)
from ordsearch.types import SearchResult, SequenceView
from ordsearch.validation import require_sorted, require_sorted_matrix
from ordsearch.views import as_sequence


class Strategy(str, Enum):
    LINEAR = "linear"
    BINARY = "binary"
    INTERPOLATION = "interpolation"
    EXPONENTIAL = "exponential"
    JUMP = "jump"
    FIBONACCI = "fibonacci"


_STRATEGIES: Dict[Strategy, Callable[[SequenceView, Any], SearchResult]] = {
    Strategy.LINEAR: linear_scan,
    Strategy.BINARY: exact_search,
    Strategy.INTERPOLATION: interpolation_search,
    Strategy.EXPONENTIAL: exponential_search,
    Strategy.JUMP: jump_search,
    Strategy.FIBONACCI: fibonacci_search,
}


def resolve_strategy(strategy: Union[str, Strategy]) -> Strategy:
    """Map a strategy name or enum member to a ``Strategy``."""
    try:
        return Strategy(strategy)
    except ValueError:
        known = ", ".join(s.value for s in Strategy)
        raise ValueError(
            f"Unknown search strategy {strategy!r}; expected one of: {known}"
        ) from None


def search(
    view: SequenceView,
    target: Any,
    strategy: Union[str, Strategy] = Strategy.BINARY,
) -> SearchResult:
    """Search ``view`` for ``target`` with the named strategy.

    Every strategy except ``linear`` requires ``view`` to be non-decreasing.
    All ordered strategies return the same result on the same input.
    """
    return _STRATEGIES[resolve_strategy(strategy)](view, target)


class Searcher:
    """
    Configured entry point to the library.

    The plain functions assume their preconditions. A Searcher can verify
    them first (``check_preconditions=True``), at O(N) cost per call, which is
    meant for debugging and tests rather than production lookups. With
    ``verbose=True`` every call prints a one-line trace.

    A Searcher holds only its configuration, so one instance can be shared
    freely across threads.
    """

    def __init__(
        self,
        *,
        strategy: Union[str, Strategy] = Strategy.BINARY,
        check_preconditions: bool = False,
        verbose: bool = False,
        jump_step: Optional[int] = None,
    ) -> None:
        """
        Args:
            strategy: Default one-dimensional strategy for ``search``
            check_preconditions: Verify ordering before each search and raise
                PreconditionError on violation
            verbose: Print a trace line per call
            jump_step: Block size for the jump strategy (default sqrt(N))
        """
        if jump_step is not None and jump_step < 1:
            raise ValueError(f"jump_step must be at least 1, got {jump_step}")

        self.strategy = resolve_strategy(strategy)
        self.check_preconditions = check_preconditions
        self.verbose = verbose
        self.jump_step = jump_step

    # -----------------
    # One-dimensional
    # -----------------

    def search(
        self,
        view: Any,
        target: Any,
        strategy: Optional[Union[str, Strategy]] = None,
    ) -> SearchResult:
        """Search with the configured strategy, or ``strategy`` if given."""
        chosen = self.strategy if strategy is None else resolve_strategy(strategy)
        seq = as_sequence(view)
        if chosen is not Strategy.LINEAR:
            self._check_sequence(seq)

        if chosen is Strategy.JUMP:
            result = jump_search(seq, target, step=self.jump_step)
        else:
            result = _STRATEGIES[chosen](seq, target)

        self._trace(chosen.value, target, result)
        return result

    def first_occurrence(self, view: Any, target: Any) -> SearchResult:
        seq = as_sequence(view)
        self._check_sequence(seq)
        result = first_occurrence(seq, target)
        self._trace("first_occurrence", target, result)
        return result

    def last_occurrence(self, view: Any, target: Any) -> SearchResult:
        seq = as_sequence(view)
        self._check_sequence(seq)
        result = last_occurrence(seq, target)
        self._trace("last_occurrence", target, result)
        return result

    # -----------------
    # Other shapes
    # -----------------

    def find_boundary(
        self,
        lo: int,
        hi: int,
        predicate: Callable[[int], bool],
        *,
        increasing: bool = True,
    ) -> Optional[int]:
        """Boundary of a monotonic predicate over ``[lo, hi]``."""
        evaluations = 0

        def counted(x: int) -> bool:
            nonlocal evaluations
            evaluations += 1
            return predicate(x)

        boundary = search_monotonic_boundary(lo, hi, counted, increasing=increasing)
        if self.verbose:
            print(
                f"[boundary] domain=[{lo}, {hi}] -> {boundary} "
                f"({evaluations} evaluations)"
            )
        return boundary

    def search_matrix(self, matrix: Any, target: Any) -> Optional[Tuple[int, int]]:
        if self.check_preconditions:
            if self.verbose:
                print("Checking matrix row/column order...")
            require_sorted_matrix(matrix)
        position = search_matrix(matrix, target)
        if self.verbose:
            print(f"[matrix] target={target!r} -> {position}")
        return position

    # -----------------
    # Internals
    # -----------------

    def _check_sequence(self, seq: SequenceView) -> None:
        if not self.check_preconditions:
            return
        if self.verbose:
            print(f"Checking order of {len(seq)} elements...")
        require_sorted(seq)

    def _trace(self, operation: str, target: Any, result: SearchResult) -> None:
        if self.verbose:
            print(f"[{operation}] target={target!r} -> {result} ({result.probes} probes)")
