"""Shared data models used across opstring."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Span:
    start: int
    end: int

    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True, slots=True)
class ClusterRecord:
    """One row of the cluster table.

    ``offset`` and ``length`` are measured in UTF-8 bytes of the source text,
    ``start`` and ``end`` are code point indices into the decoded text so the
    cluster itself can be sliced out on demand.
    """

    offset: int
    length: int
    start: int
    end: int

    @property
    def byte_end(self) -> int:
        return self.offset + self.length

    def contains(self, byte_offset: int) -> bool:
        return self.offset <= byte_offset < self.byte_end

    def span(self) -> Span:
        return Span(start=self.offset, end=self.byte_end)


__all__ = ["Span", "ClusterRecord"]
