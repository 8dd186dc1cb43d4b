"""Grapheme-aware view over a text string."""
from __future__ import annotations

import operator
from bisect import bisect_right
from typing import TYPE_CHECKING, Tuple

from .cursor import ClusterCursor, PairCursor
from .models import ClusterRecord, Span
from .segmenter import Segmenter, build_table
from .utils.text import to_text, utf8_length

if TYPE_CHECKING:
    from .config import AppConfig

SEARCH_STRATEGIES = ("bisect", "linear")


class ClusterIndexError(IndexError):
    """Raised when a view is indexed outside ``range(len(view))``."""


class GraphemeView:
    """Index a text by grapheme clusters instead of code points.

    The view keeps a reference to ``source`` and a table with one record per
    cluster: its UTF-8 byte offset and length plus its code point bounds in the
    decoded text. Clusters are sliced out of the text on access.

    Direct indexing (:meth:`at`, ``view[i]``) treats an out-of-range index as a
    caller bug and raises :class:`ClusterIndexError`. The translation methods
    are total and answer out-of-range input with a past-the-end value instead.
    """

    __slots__ = ("_source", "_text", "_table", "_offsets", "_byte_length", "_search")

    def __init__(
        self,
        source: str | bytes,
        *,
        segmenter: Segmenter | None = None,
        search: str = "bisect",
        validate: bool = True,
    ) -> None:
        if search not in SEARCH_STRATEGIES:
            raise ValueError(f"Unknown search strategy: {search!r} (expected one of {', '.join(SEARCH_STRATEGIES)})")
        self._source = source
        self._text = to_text(source)
        self._table: Tuple[ClusterRecord, ...] = build_table(self._text, segmenter, validate=validate)
        self._offsets: Tuple[int, ...] = tuple(record.offset for record in self._table)
        self._byte_length = utf8_length(self._text)
        self._search = search

    @classmethod
    def from_config(
        cls,
        source: str | bytes,
        config: "AppConfig",
        *,
        segmenter: Segmenter | None = None,
    ) -> "GraphemeView":
        return cls(
            source,
            segmenter=segmenter,
            search=config.translation.search,
            validate=config.segmentation.validate_partition,
        )

    def source(self) -> str | bytes:
        """The object the view was built from, unchanged."""
        return self._source

    def text(self) -> str:
        return self._text

    def search(self) -> str:
        return self._search

    def first(self) -> str:
        """Return the first cluster, or ``""`` for an empty view."""
        if not self._table:
            return ""
        return self._slice(self._table[0])

    def last(self) -> str:
        """Return the last cluster, or ``""`` for an empty view."""
        if not self._table:
            return ""
        return self._slice(self._table[-1])

    def length(self) -> int:
        """Number of grapheme clusters (not bytes, not code points)."""
        return len(self._table)

    def byte_length(self) -> int:
        return self._byte_length

    def at(self, index: int) -> str:
        """Return the cluster at ``index``.

        Raises
        ------
        ClusterIndexError
            If ``index`` is negative or not smaller than :meth:`length`.
            Callers are expected to check the bounds first.
        """

        position = operator.index(index)
        if position < 0 or position >= len(self._table):
            raise ClusterIndexError(
                f"Index {position} is out of bounds for GraphemeView of size {len(self._table)}."
            )
        return self._slice(self._table[position])

    def span(self, index: int) -> Span:
        """Byte span of the cluster at ``index``.

        Out-of-range indices give the empty span at the end of the source.
        """

        position = operator.index(index)
        if position < 0 or position >= len(self._table):
            return Span(start=self._byte_length, end=self._byte_length)
        return self._table[position].span()

    def translate_to_byte(self, cluster_index: int) -> int:
        """Translate a cluster index to the byte offset where that cluster starts.

        Out-of-range indices return the byte length of the source so the result
        is always usable as a slice bound.
        """

        position = operator.index(cluster_index)
        if position < 0 or position >= len(self._table):
            return self._byte_length
        return self._table[position].offset

    def translate_to_cluster(self, byte_offset: int) -> int:
        """Translate a byte offset to the index of the cluster containing it.

        Offsets inside a multi-byte cluster resolve to that cluster. Offsets
        outside the source (negative or past the last byte) return
        :meth:`length`.
        """

        position = operator.index(byte_offset)
        if position < 0 or position >= self._byte_length:
            return len(self._table)
        if self._search == "linear":
            return self._linear_lookup(position)
        return self._bisect_lookup(position)

    def pairs(self) -> PairCursor:
        """Fresh cursor over ``(byte_offset, cluster)`` pairs."""
        return PairCursor(self._text, self._table)

    def clusters(self) -> ClusterCursor:
        """Fresh cursor over the clusters alone."""
        return ClusterCursor(self._text, self._table)

    # OpString-style names
    iter = pairs
    chars = clusters

    def _linear_lookup(self, position: int) -> int:
        for index, record in enumerate(self._table):
            if record.contains(position):
                return index
        return len(self._table)

    def _bisect_lookup(self, position: int) -> int:
        index = bisect_right(self._offsets, position) - 1
        if index < 0 or not self._table[index].contains(position):
            return len(self._table)
        return index

    def _slice(self, record: ClusterRecord) -> str:
        return self._text[record.start : record.end]

    def __len__(self) -> int:
        return len(self._table)

    def __getitem__(self, index: int) -> str:
        return self.at(index)

    def __iter__(self) -> ClusterCursor:
        return self.clusters()

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"<GraphemeView clusters={len(self._table)} text={self._text!r}>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GraphemeView):
            return NotImplemented
        return self._text == other._text

    def __hash__(self) -> int:
        return hash(self._text)


__all__ = ["GraphemeView", "ClusterIndexError", "SEARCH_STRATEGIES"]
