"""Read-only cursors over a view's cluster table."""
from __future__ import annotations

from typing import Generic, Sequence, Tuple, TypeVar

from .models import ClusterRecord

T = TypeVar("T")


class TableCursor(Generic[T]):
    """Forward-only iterator over a shared cluster table.

    Subclasses decide what a record looks like to the caller through
    :meth:`_project`. Once the position reaches the end of the table the
    cursor stays exhausted.
    """

    __slots__ = ("_text", "_table", "_position")

    def __init__(self, text: str, table: Sequence[ClusterRecord]) -> None:
        self._text = text
        self._table = table
        self._position = 0

    def __iter__(self) -> "TableCursor[T]":
        return self

    def __next__(self) -> T:
        if self._position >= len(self._table):
            raise StopIteration
        record = self._table[self._position]
        self._position += 1
        return self._project(record)

    def __length_hint__(self) -> int:
        return self.remaining()

    def remaining(self) -> int:
        return max(len(self._table) - self._position, 0)

    def _project(self, record: ClusterRecord) -> T:  # pragma: no cover - abstract
        raise NotImplementedError


class PairCursor(TableCursor[Tuple[int, str]]):
    """Yields ``(byte_offset, cluster)`` pairs."""

    __slots__ = ()

    def _project(self, record: ClusterRecord) -> Tuple[int, str]:
        return record.offset, self._text[record.start : record.end]


class ClusterCursor(TableCursor[str]):
    """Yields the clusters alone."""

    __slots__ = ()

    def _project(self, record: ClusterRecord) -> str:
        return self._text[record.start : record.end]


__all__ = ["TableCursor", "PairCursor", "ClusterCursor"]
