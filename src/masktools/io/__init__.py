"""Loaders for mask and token files.

Mask files hold one mask per line.  Lines that are not well formed masks are
collected in :attr:`MaskFile.skipped` instead of aborting the load, so the
caller can report each one and carry on.  Token files hold one literal token
per line; blank lines are ignored and duplicates collapse while keeping first
seen order.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from ..mask.validator import is_valid_mask
from ..utils.logging import get_logger
from .readers.txt_reader import iter_lines, read_lines

__all__ = ["MaskFile", "iter_lines", "load_masks", "load_tokens", "read_lines"]

log = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class MaskFile:
    """Result of :func:`load_masks`.

    Attributes
    ----------
    masks:
        Valid masks in file order, duplicates removed.
    skipped:
        Raw lines rejected by :func:`~masktools.mask.validator.is_valid_mask`.
    """

    masks: tuple[str, ...]
    skipped: tuple[str, ...]


def load_masks(
    path: str | os.PathLike[str],
    *,
    allow_bytes: bool = False,
    encoding: str = "utf-8-sig",
    errors: str = "surrogateescape",
) -> MaskFile:
    """Load and validate masks from ``path``."""

    masks: dict[str, None] = {}
    skipped: list[str] = []
    for line in read_lines(path, encoding=encoding, errors=errors):
        if is_valid_mask(line, allow_bytes=allow_bytes):
            masks.setdefault(line, None)
        else:
            skipped.append(line)
    log.debug("loaded %d masks from %s (%d skipped)", len(masks), path, len(skipped))
    return MaskFile(masks=tuple(masks), skipped=tuple(skipped))


def load_tokens(
    path: str | os.PathLike[str],
    *,
    encoding: str = "utf-8-sig",
    errors: str = "surrogateescape",
) -> tuple[str, ...]:
    """Load unique, non-blank tokens from ``path`` in first seen order."""

    tokens: dict[str, None] = {}
    for line in read_lines(path, encoding=encoding, errors=errors):
        if line:
            tokens.setdefault(line, None)
    log.debug("loaded %d tokens from %s", len(tokens), path)
    return tuple(tokens)
