"""Grapheme cluster segmentation and cluster table construction."""
from __future__ import annotations

from typing import Callable, Iterable, Iterator, List, Tuple

import regex
import structlog

from .models import ClusterRecord
from .utils.text import utf8_length

logger = structlog.get_logger(__name__)

Segmenter = Callable[[str], Iterable[str]]

# \X matches one extended grapheme cluster (UAX #29).
_CLUSTER_PATTERN = regex.compile(r"\X", regex.UNICODE)


class SegmentationError(ValueError):
    """Raised when a segmenter does not partition its input losslessly."""


def segment(text: str) -> Iterator[str]:
    """Yield the extended grapheme clusters of ``text`` from left to right."""
    for match in _CLUSTER_PATTERN.finditer(text):
        yield match.group()


def build_table(
    text: str,
    segmenter: Segmenter | None = None,
    *,
    validate: bool = True,
) -> Tuple[ClusterRecord, ...]:
    """Run ``segmenter`` over ``text`` and record where every cluster lives.

    Each record carries the cluster's UTF-8 byte offset and length together
    with its code point bounds in ``text``. With ``validate`` enabled the
    clusters must concatenate back to ``text`` exactly, otherwise a
    :class:`SegmentationError` is raised. Without it only the cluster lengths
    are used; bounds and byte sizes are always measured on ``text`` and
    clusters past its end are dropped.
    """

    split = segmenter or segment
    records: List[ClusterRecord] = []
    offset = 0
    start = 0
    for cluster in split(text):
        if not cluster:
            _mismatch("empty cluster", index=len(records), position=start)
        end = start + len(cluster)
        if validate and text[start:end] != cluster:
            _mismatch("cluster does not match source text", index=len(records), position=start)
        if start >= len(text):
            break
        end = min(end, len(text))
        size = utf8_length(text[start:end])
        records.append(ClusterRecord(offset=offset, length=size, start=start, end=end))
        offset += size
        start = end
    if validate and start != len(text):
        _mismatch("clusters do not cover the source text", index=len(records), position=start)
    return tuple(records)


def _mismatch(reason: str, *, index: int, position: int) -> None:
    logger.error("segment.partition_mismatch", reason=reason, cluster=index, position=position)
    raise SegmentationError(f"Segmenter output invalid at cluster {index} (position {position}): {reason}")


__all__ = ["Segmenter", "SegmentationError", "segment", "build_table"]
