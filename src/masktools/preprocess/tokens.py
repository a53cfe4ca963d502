"""Alpha-only token extraction used by the ``tokens`` command."""

from __future__ import annotations

import re

__all__ = ["ANY_LENGTH", "accept_token", "extract_alpha_token"]

# Lengths at or above this value accept tokens of any length.
ANY_LENGTH = 98

_NON_ALPHA_RE = re.compile(r"[^a-zA-Z]+")


def extract_alpha_token(text: str) -> str:
    """Return ``text`` with every character outside ``[A-Za-z]`` removed."""

    return _NON_ALPHA_RE.sub("", text)


def accept_token(token: str, length: int) -> bool:
    """Return ``True`` if ``token`` should be emitted for ``length``."""

    if not token:
        return False
    return length >= ANY_LENGTH or len(token) == length
