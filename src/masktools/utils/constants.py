"""Character classes and mask token vocabulary.

Four ASCII classes are recognised, each with a two character placeholder
token made of the ``?`` sentinel and a one letter flag:

=======  ====  =====  ===========
class    flag  token  cardinality
=======  ====  =====  ===========
upper    u     ?u     26
lower    l     ?l     26
digit    d     ?d     10
special  s     ?s     33
=======  ====  =====  ===========

``special`` covers the space character plus ASCII punctuation, matching the
hashcat ``?s`` charset.  Membership is expressed as predicates; the literal
member strings are derived from them over the ASCII range.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Callable

__all__ = [
    "SENTINEL",
    "BYTE_FLAG",
    "BYTE_TOKEN",
    "CharClass",
    "UPPER",
    "LOWER",
    "DIGIT",
    "SPECIAL",
    "CHAR_CLASSES",
    "CLASS_FLAGS",
    "MASK_TOKENS",
    "ALL_TOKENS",
    "class_for_flag",
    "class_of",
]

SENTINEL: str = "?"
BYTE_FLAG: str = "b"
BYTE_TOKEN: str = SENTINEL + BYTE_FLAG

_SPECIAL_CHARS: str = " " + string.punctuation


@dataclass(slots=True, frozen=True)
class CharClass:
    """A character class with its mask token and search-space weight."""

    name: str
    flag: str
    cardinality: int
    predicate: Callable[[str], bool]

    @property
    def token(self) -> str:
        return SENTINEL + self.flag

    @property
    def members(self) -> str:
        """ASCII characters accepted by :attr:`predicate`, in code point order."""

        return "".join(ch for ch in map(chr, range(128)) if self.predicate(ch))

    def contains(self, ch: str) -> bool:
        return len(ch) == 1 and self.predicate(ch)


UPPER = CharClass("upper", "u", 26, lambda ch: ch in string.ascii_uppercase)
LOWER = CharClass("lower", "l", 26, lambda ch: ch in string.ascii_lowercase)
DIGIT = CharClass("digit", "d", 10, lambda ch: ch in string.digits)
SPECIAL = CharClass("special", "s", 33, lambda ch: ch in _SPECIAL_CHARS)

CHAR_CLASSES: tuple[CharClass, ...] = (UPPER, LOWER, DIGIT, SPECIAL)
CLASS_FLAGS: str = "".join(c.flag for c in CHAR_CLASSES)
MASK_TOKENS: tuple[str, ...] = tuple(c.token for c in CHAR_CLASSES)
ALL_TOKENS: frozenset[str] = frozenset(MASK_TOKENS) | {BYTE_TOKEN}

_BY_FLAG = {c.flag: c for c in CHAR_CLASSES}


def class_for_flag(flag: str) -> CharClass | None:
    """Return the class selected by ``flag`` or ``None`` when unknown."""

    return _BY_FLAG.get(flag)


def class_of(ch: str) -> CharClass | None:
    """Return the class containing ``ch``; non-ASCII input yields ``None``."""

    for cls in CHAR_CLASSES:
        if cls.contains(ch):
            return cls
    return None
