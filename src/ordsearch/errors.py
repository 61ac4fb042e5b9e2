"""
Exceptions raised by ordsearch.

Missing targets are never errors; they are reported through ``SearchResult``
or ``None``. The only library-specific exception is raised by the opt-in
precondition checks.
"""


class PreconditionError(ValueError):
    """Input violates the ordering a search routine relies on."""

    def __init__(self, message: str, position=None):
        super().__init__(message)
        self.position = position
