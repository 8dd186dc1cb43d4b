"""Utility exports."""
from .text import to_text, utf8_length

__all__ = ["to_text", "utf8_length"]
