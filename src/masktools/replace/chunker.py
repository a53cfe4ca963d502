"""Fixed-width chunking of literal strings."""

from __future__ import annotations

__all__ = ["chunk"]


def chunk(text: str, size: int) -> list[str]:
    """Split ``text`` into consecutive pieces of ``size`` characters.

    The final piece may be shorter.  ``size <= 0`` or empty ``text`` yields an
    empty list and ``size >= len(text)`` yields ``[text]``.
    """

    if size <= 0 or not text:
        return []
    if size >= len(text):
        return [text]
    return [text[i : i + size] for i in range(0, len(text), size)]
