"""Grapheme-cluster views over text with byte offset translation."""
from .cursor import ClusterCursor, PairCursor
from .models import ClusterRecord, Span
from .segmenter import SegmentationError, segment
from .version import __version__
from .view import ClusterIndexError, GraphemeView

__all__ = [
    "GraphemeView",
    "ClusterIndexError",
    "ClusterCursor",
    "PairCursor",
    "ClusterRecord",
    "Span",
    "SegmentationError",
    "segment",
    "__version__",
]
