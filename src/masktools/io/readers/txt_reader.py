"""Plain-text line reader.

Lines are yielded without their terminator.  A single trailing ``\r`` is
dropped as well so that CRLF wordlists produce the same lines as LF ones;
any other whitespace is part of the line and is preserved.  UTF-8 byte-order
marks are consumed by the default ``"utf-8-sig"`` codec, and the default
``"surrogateescape"`` handler keeps undecodable bytes as lone surrogates.
``FileNotFoundError`` and other I/O errors propagate to the caller.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator

PathLikeStr = os.PathLike[str]

__all__ = ["iter_lines", "read_lines"]


def iter_lines(stream: Iterable[str]) -> Iterator[str]:
    """Yield the lines of ``stream`` stripped of ``\n`` / ``\r\n``."""

    for raw in stream:
        if raw.endswith("\n"):
            raw = raw[:-1]
        if raw.endswith("\r"):
            raw = raw[:-1]
        yield raw


def read_lines(
    path: str | PathLikeStr,
    *,
    encoding: str = "utf-8-sig",
    errors: str = "surrogateescape",
) -> list[str]:
    """Read every line of ``path`` into memory.

    Parameters
    ----------
    path:
        Path to the file on disk.
    encoding:
        Text encoding; defaults to ``"utf-8-sig"`` so a BOM is consumed.
    errors:
        Error handling strategy passed to :func:`open`.
    """

    with open(path, "r", encoding=encoding, errors=errors, newline="") as f:
        return list(iter_lines(f))
