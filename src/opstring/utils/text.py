"""Text normalization helpers shared across modules."""
from __future__ import annotations


def to_text(data: str | bytes) -> str:
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="surrogatepass")
    return data


def utf8_length(text: str) -> int:
    """Return the number of bytes ``text`` occupies once encoded as UTF-8."""
    return len(text.encode("utf-8", errors="surrogatepass"))


__all__ = ["to_text", "utf8_length"]
