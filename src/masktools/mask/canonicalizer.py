"""Literal text to mask conversion.

A *replacement table* maps single literal characters to the placeholder token
of their class.  Tables are derived from the class predicates in
:mod:`masktools.utils.constants` for the classes selected by a class spec such
as ``"ulds"`` or ``"ud"``.  Characters outside the selected classes, including
every non-ASCII code point, are absent from the table and pass through
unchanged.

Example
-------

>>> canonicalize("Hello, World1!", build_replacement_table("ulds"))
'?u?l?l?l?l?s?s?u?l?l?l?l?d?s'

All functions are pure and operate on code points, never on encoded bytes.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from ..utils.constants import ALL_TOKENS, CHAR_CLASSES, SPECIAL

__all__ = [
    "ReplacementTable",
    "build_replacement_table",
    "canonicalize",
    "partial_canonicalize",
    "remove_mask_tokens",
    "split_mask",
]

ReplacementTable = Mapping[str, str]


def build_replacement_table(class_spec: str) -> ReplacementTable:
    """Return a read-only table covering the classes flagged in ``class_spec``.

    Flags may appear in any order and may repeat; unknown characters are
    ignored.  An empty spec produces an empty (identity) table.  Entries are
    ordered by class (upper, lower, digit, special) and then by code point.
    """

    table: dict[str, str] = {}
    for cls in CHAR_CLASSES:
        if cls.flag in class_spec:
            for ch in cls.members:
                table[ch] = cls.token
    return MappingProxyType(table)


def canonicalize(text: str, table: ReplacementTable) -> str:
    """Replace every character of ``text`` found in ``table`` with its token."""

    return "".join(table.get(ch, ch) for ch in text)


def partial_canonicalize(text: str, class_spec: str) -> str:
    """Mask only the classes flagged in ``class_spec``.

    Combining the special flag ``s`` with any of ``u``, ``l`` or ``d`` is not
    allowed for partial masks and yields an empty string.  ``s`` on its own
    masks special characters and leaves letters and digits literal.
    """

    if SPECIAL.flag in class_spec and any(f in class_spec for f in "uld"):
        return ""
    return canonicalize(text, build_replacement_table(class_spec))


def split_mask(mask: str) -> list[str]:
    """Split ``mask`` into placeholder tokens and literal characters.

    A unit is either a two character token (``?u``, ``?l``, ``?d``, ``?s`` or
    ``?b``) or a single literal character.
    """

    units: list[str] = []
    i = 0
    while i < len(mask):
        pair = mask[i : i + 2]
        if pair in ALL_TOKENS:
            units.append(pair)
            i += 2
        else:
            units.append(mask[i])
            i += 1
    return units


def remove_mask_tokens(text: str) -> str:
    """Drop every placeholder token from ``text`` keeping the literals."""

    return "".join(u for u in split_mask(text) if u not in ALL_TOKENS)
