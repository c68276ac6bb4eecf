"""Per-render parameter sequence."""
from __future__ import annotations


class ParameterSequence:
    """Monotonic counter that seeds generated parameter names.

    A fresh sequence is created for every render and threaded through every
    nested render (WHERE clause, sub-selects) so names stay unique across the
    whole statement.  It is the only mutable state in the rendering pipeline
    and must never be shared between concurrent renders.

    Args:
        start: First value returned by :meth:`next_value`.
    """

    __slots__ = ("_next",)

    def __init__(self, start: int = 1) -> None:
        self._next = start

    def next_value(self) -> int:
        """Return the current value and advance the counter."""
        value = self._next
        self._next += 1
        return value

    def peek(self) -> int:
        """Return the value the next call to :meth:`next_value` will return."""
        return self._next

    def __repr__(self) -> str:
        return f"ParameterSequence(next={self._next})"
