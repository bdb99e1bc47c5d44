"""Incremental ancestry tracking over a depth-first sorted record stream."""

from __future__ import annotations

from flatsplit.errors import UnsortedInputError
from flatsplit.models import Record


class AncestryTracker:
    """Keeps the chain of ancestor categories for the current record.

    Input must be sorted in pre-order depth-first order: a parent is
    immediately followed by its first child. Under that precondition the
    stack entry at index `i` after `update()` is the category of the
    record's ancestor at depth `i + 1`, and the top is the record's own.

    With `strict=True` the tracker also remembers ancestor path segments and
    raises `UnsortedInputError` when a record does not attach to the current
    chain. With `strict=False` violations go undetected.
    """

    def __init__(self, strict: bool = True) -> None:
        self._strict = strict
        self._categories: list[str] = []
        self._segments: list[str] = []

    @property
    def categories(self) -> tuple[str, ...]:
        """Categories from the outermost ancestor to the current record."""
        return tuple(self._categories)

    @property
    def depth(self) -> int:
        return len(self._categories)

    def update(self, record: Record) -> None:
        """Move the chain to `record`."""
        segments = record.segments
        depth = len(segments)

        # The root record sits above every stack slot
        if depth == 0:
            self._categories.clear()
            self._segments.clear()
            return

        current = len(self._categories)
        if depth <= current:
            # Pop back to the parent: handles siblings and shallower records
            del self._categories[depth - 1 :]
            del self._segments[depth - 1 :]

        if self._strict and segments[:-1] != self._segments:
            raise UnsortedInputError(record.path, "/" + "/".join(self._segments))

        self._categories.append(record.category)
        self._segments.append(segments[-1])
