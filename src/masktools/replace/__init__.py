"""Chunking and pattern-aligned token substitution."""

from .chunker import chunk
from .mutation import MutationEngine, TokenPool, parse_chunk_size
from .substitutor import find_occurrences, substitute

__all__ = [
    "chunk",
    "MutationEngine",
    "TokenPool",
    "parse_chunk_size",
    "find_occurrences",
    "substitute",
]
