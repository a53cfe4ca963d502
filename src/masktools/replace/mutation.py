"""Streaming mutation over a self-grown token pool.

Every processed line contributes its fixed-length chunks to a
:class:`TokenPool`; the whole pool, including the chunks just added, is then
substituted back into that line.  Lines are handled strictly in order and all
output for one line is produced before the next line is consumed.

Scaling limit
-------------
The pool is never pruned.  Memory grows with the number of distinct chunks in
the input, so very large or unbounded streams will keep growing the process.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..mask.canonicalizer import ReplacementTable, canonicalize
from ..preprocess.multibyte import ensure_valid_mask
from ..utils.errors import ChunkSizeError
from ..utils.logging import get_logger
from .chunker import chunk
from .substitutor import substitute

__all__ = ["MutationEngine", "TokenPool", "parse_chunk_size"]

log = get_logger(__name__)


def parse_chunk_size(value: str | int, *, label: str = "chunk size") -> int:
    """Return ``value`` as a positive ``int`` or raise :class:`ChunkSizeError`."""

    if isinstance(value, bool):
        raise ChunkSizeError(f"Invalid {label}: {value!r}")
    if isinstance(value, int):
        size = value
    else:
        text = value.strip()
        if not (text.isascii() and text.isdigit()):
            raise ChunkSizeError(f"Invalid {label}: {value!r}")
        size = int(text)
    if size <= 0:
        raise ChunkSizeError(f"Invalid {label}: {value!r}")
    return size


class TokenPool:
    """Set of literal chunks, unique by value, that only ever grows."""

    def __init__(self, tokens: Iterable[str] = ()) -> None:
        self._tokens: dict[str, None] = {}
        self.update(tokens)

    def add(self, token: str) -> bool:
        """Insert ``token``; return ``True`` if it was not already present."""

        if token in self._tokens:
            return False
        self._tokens[token] = None
        return True

    def update(self, tokens: Iterable[str]) -> int:
        return sum(1 for t in tokens if self.add(t))

    def __contains__(self, token: object) -> bool:
        return token in self._tokens

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._tokens))

    def __len__(self) -> int:
        return len(self._tokens)


class MutationEngine:
    """Apply pooled chunks to each successive line.

    Parameters
    ----------
    chunk_size:
        Length of the chunks harvested from each line.  Must be positive.
    table:
        Replacement table used for every mask in the run.
    max_replacements:
        Forwarded to :func:`~masktools.replace.substitutor.substitute`.
    multibyte:
        Normalize line masks with the multi-byte pass.
    pool:
        Existing pool to grow; a fresh one is created when omitted.
    """

    def __init__(
        self,
        chunk_size: int,
        table: ReplacementTable,
        *,
        max_replacements: int = 1,
        multibyte: bool = False,
        pool: TokenPool | None = None,
    ) -> None:
        self.chunk_size = parse_chunk_size(chunk_size)
        self.table = table
        self.max_replacements = max_replacements
        self.multibyte = multibyte
        self.pool = pool if pool is not None else TokenPool()

    def harvest(self, line: str) -> int:
        """Add the full-length chunks of ``line`` to the pool."""

        size = self.chunk_size
        added = self.pool.update(c for c in chunk(line, size) if len(c) == size)
        if added:
            log.debug("pool grew by %d to %d tokens", added, len(self.pool))
        return added

    def mask_for(self, line: str) -> str:
        mask = canonicalize(line, self.table)
        if self.multibyte:
            mask = ensure_valid_mask(mask)
        return mask

    def process_line(self, line: str) -> Iterator[str]:
        """Harvest ``line`` and return an iterator over its hybrids.

        The pool is grown before this method returns; results are produced
        lazily against the pool as it stood at that point.
        """

        self.harvest(line)
        return self._hybrids(line, self.mask_for(line), list(self.pool))

    def _hybrids(self, line: str, mask: str, tokens: list[str]) -> Iterator[str]:
        for token in tokens:
            result = substitute(line, mask, token, self.table, self.max_replacements)
            if result is not None:
                yield result

    def run(self, lines: Iterable[str]) -> Iterator[str]:
        for line in lines:
            yield from self.process_line(line)
