"""Line pipelines behind each CLI command.

Every function takes an iterable of input lines and yields output lines; the
caller owns reading and printing.  Work is done one input line at a time and
all output for a line is yielded before the next line is pulled.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Iterator

from .mask.canonicalizer import (
    ReplacementTable,
    canonicalize,
    partial_canonicalize,
    remove_mask_tokens,
)
from .mask.scorer import score_mask
from .preprocess.multibyte import byte_length, convert_multibyte, ensure_valid_mask
from .preprocess.tokens import accept_token, extract_alpha_token
from .replace.mutation import MutationEngine, TokenPool
from .replace.substitutor import substitute
from .utils.constants import BYTE_FLAG

__all__ = [
    "generate_masks",
    "match_masks",
    "substitute_tokens",
    "mutate_lines",
    "generate_tokens",
    "generate_partial_masks",
    "remove_partial_masks",
]


def _mask(line: str, table: ReplacementTable, multibyte: bool) -> str:
    mask = canonicalize(line, table)
    return ensure_valid_mask(mask) if multibyte else mask


def generate_masks(
    lines: Iterable[str],
    table: ReplacementTable,
    *,
    multibyte: bool = False,
    verbose: bool = False,
) -> Iterator[str]:
    """Yield the mask of each line, with scores appended when ``verbose``.

    The reported length is the line's length in input bytes, which equals the
    number of mask positions once the multi-byte pass has run.
    """

    for line in lines:
        mask = _mask(line, table, multibyte)
        yield score_mask(mask, byte_length(line)).format() if verbose else mask


def match_masks(
    lines: Iterable[str],
    masks: Collection[str],
    table: ReplacementTable,
    *,
    multibyte: bool = False,
) -> Iterator[str]:
    """Yield lines whose mask is one of ``masks``."""

    wanted = frozenset(masks)
    for line in lines:
        if _mask(line, table, multibyte) in wanted:
            yield line


def substitute_tokens(
    lines: Iterable[str],
    tokens: Iterable[str],
    table: ReplacementTable,
    *,
    max_replacements: int = 1,
    multibyte: bool = False,
) -> Iterator[str]:
    """Yield every hybrid of each line with each token from a fixed set."""

    pool = tuple(TokenPool(tokens))
    for line in lines:
        mask = _mask(line, table, multibyte)
        for token in pool:
            result = substitute(line, mask, token, table, max_replacements)
            if result is not None:
                yield result


def mutate_lines(
    lines: Iterable[str],
    chunk_size: int,
    table: ReplacementTable,
    *,
    max_replacements: int = 1,
    multibyte: bool = False,
    pool: TokenPool | None = None,
) -> Iterator[str]:
    """Return an iterator of hybrids from a pool grown out of the input's own chunks.

    The chunk size is validated here, before any line is read.
    """

    engine = MutationEngine(
        chunk_size,
        table,
        max_replacements=max_replacements,
        multibyte=multibyte,
        pool=pool,
    )
    return engine.run(lines)


def generate_tokens(lines: Iterable[str], length: int) -> Iterator[str]:
    """Yield the alpha-only token of each line when its length is accepted."""

    for line in lines:
        token = extract_alpha_token(line)
        if accept_token(token, length):
            yield token


def _partial(line: str, class_spec: str) -> str:
    partial = partial_canonicalize(line, class_spec)
    if BYTE_FLAG in class_spec:
        partial = convert_multibyte(partial)
    return partial


def generate_partial_masks(lines: Iterable[str], class_spec: str) -> Iterator[str]:
    """Yield each line with only the classes in ``class_spec`` masked."""

    for line in lines:
        yield _partial(line, class_spec)


def remove_partial_masks(lines: Iterable[str], class_spec: str) -> Iterator[str]:
    """Yield each line with the characters of the ``class_spec`` classes removed."""

    for line in lines:
        yield remove_mask_tokens(_partial(line, class_spec))
