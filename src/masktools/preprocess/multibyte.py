"""Multi-byte normalization for masks.

Hashcat masks describe bytes, so a non-ASCII character left literal in a mask
cannot be used directly.  The helpers here replace every non-ASCII code point
with one ``?b`` token per byte it stands for.  ASCII input, including existing
tokens, is returned unchanged.

Undecodable input bytes read with the ``surrogateescape`` error handler arrive
as lone surrogates ``U+DC80..U+DCFF``; each of those stands for the single raw
byte it escapes.

Example
-------

>>> ensure_valid_mask("?l?lé")
'?l?l?b?b'
"""

from __future__ import annotations

from ..utils.constants import BYTE_TOKEN

__all__ = ["byte_length", "byte_width", "convert_multibyte", "ensure_valid_mask"]


def byte_width(ch: str) -> int:
    """Return the number of input bytes the character ``ch`` stands for."""

    if "\udc80" <= ch <= "\udcff":
        return 1
    return len(ch.encode("utf-8", "surrogatepass"))


def byte_length(text: str) -> int:
    """Return the byte length of ``text`` as it appeared in the input."""

    if text.isascii():
        return len(text)
    return sum(byte_width(ch) for ch in text)


def convert_multibyte(text: str) -> str:
    """Return ``text`` with each non-ASCII character expanded to ``?b`` tokens."""

    if text.isascii():
        return text
    out: list[str] = []
    for ch in text:
        if ch.isascii():
            out.append(ch)
        else:
            out.append(BYTE_TOKEN * byte_width(ch))
    return "".join(out)


def ensure_valid_mask(mask: str) -> str:
    """Normalize a full mask so that it contains only ASCII characters."""

    return convert_multibyte(mask)
