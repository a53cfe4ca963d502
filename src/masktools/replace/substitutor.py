"""Pattern-aligned token substitution.

Given a literal *subject*, its mask and a candidate *token*, the token's own
mask is searched for inside the subject mask.  Matching runs are replaced by
the literal token and every other placeholder is restored from the subject at
the same position, producing a hybrid that keeps the subject's literal context
around the substituted token.

Example
-------

>>> table = build_replacement_table("ulds")
>>> substitute("Hello Jello", "?u?l?l?l?l?s?u?l?l?l?l", "Hello", table,
...            max_replacements=2)
'Hello Hello'

Alignment
---------
Mask units are derived from the subject itself, one unit per character looked
up in the table, never by re-parsing the mask text.  A literal ``?`` followed
by a flag letter therefore stays two units even when the table leaves ``?``
unmasked.  When the mask went through the multi-byte pass, each non-ASCII
literal contributes one ``?b`` unit per byte.  Every unit records the subject
character it came from, so the hybrid always has one character per subject
character outside the substituted runs.

No-match is not an error: :func:`substitute` returns ``None``.  A mask that was
not built from ``subject`` with ``table`` (with or without the multi-byte
pass) fails closed and also returns ``None``.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..mask.canonicalizer import ReplacementTable
from ..preprocess.multibyte import byte_width
from ..utils.constants import BYTE_TOKEN

__all__ = ["find_occurrences", "substitute"]


def find_occurrences(haystack: Sequence[str], needle: Sequence[str], limit: int = -1) -> list[int]:
    """Return start indices of non-overlapping ``needle`` runs in ``haystack``.

    Matches are located left to right.  At most ``limit`` starts are returned;
    a negative ``limit`` returns every occurrence and ``0`` returns none.
    """

    size = len(needle)
    if size == 0 or limit == 0:
        return []
    needle = list(needle)
    starts: list[int] = []
    i = 0
    last = len(haystack) - size
    while i <= last:
        if list(haystack[i : i + size]) == needle:
            starts.append(i)
            if 0 < limit <= len(starts):
                break
            i += size
        else:
            i += 1
    return starts


def _align(
    subject: str, table: ReplacementTable, *, multibyte: bool
) -> tuple[list[str], list[int]]:
    units: list[str] = []
    owners: list[int] = []
    for idx, ch in enumerate(subject):
        unit = table.get(ch, ch)
        if multibyte and unit == ch and not ch.isascii():
            width = byte_width(ch)
            units.extend([BYTE_TOKEN] * width)
            owners.extend([idx] * width)
        else:
            units.append(unit)
            owners.append(idx)
    return units, owners


def substitute(
    subject: str,
    subject_mask: str,
    token: str,
    table: ReplacementTable,
    max_replacements: int = 1,
) -> str | None:
    """Return the hybrid of ``subject`` and ``token`` or ``None``.

    Parameters
    ----------
    subject:
        Literal source line.
    subject_mask:
        Mask of ``subject`` built with ``table`` (optionally passed through the
        multi-byte normalizer).
    token:
        Literal candidate to splice in.
    table:
        Replacement table used to build ``subject_mask``.
    max_replacements:
        Upper bound on replaced occurrences, leftmost first.  Negative values
        replace every occurrence.

    Returns
    -------
    str | None
        The hybrid string when it contains ``token`` and is not ``token``
        itself, otherwise ``None``.
    """

    if not token:
        return None
    token_units = [table.get(ch, ch) for ch in token]
    token_mask = "".join(token_units)
    if not token_mask or token_mask not in subject_mask:
        return None

    units, owners = _align(subject, table, multibyte=False)
    if "".join(units) != subject_mask:
        units, owners = _align(subject, table, multibyte=True)
        if "".join(units) != subject_mask:
            return None

    starts = find_occurrences(units, token_units, max_replacements)
    if not starts:
        return None

    # Token units never produce ``?b``, so a matched run covers whole characters.
    parts: list[str] = []
    copied = 0
    for start in starts:
        first = owners[start]
        parts.append(subject[copied:first])
        parts.append(token)
        copied = owners[start + len(token_units) - 1] + 1
    parts.append(subject[copied:])

    result = "".join(parts)
    if token in result and result != token:
        return result
    return None
