"""Mask scoring.

``complexity`` counts how many of the four class tokens appear in a mask.
``entropy`` is a coarse search-space proxy: each token occurrence contributes
the cardinality of its class (26, 26, 10, 33).  It is *not* an
information-theoretic entropy, just a weighted token count that orders masks
by how expensive they are to brute force.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..utils.constants import CHAR_CLASSES

__all__ = ["MaskStats", "complexity", "entropy", "score_mask"]


def complexity(mask: str) -> int:
    """Return the number of distinct class tokens present in ``mask`` (0-4)."""

    return sum(1 for cls in CHAR_CLASSES if cls.token in mask)


def entropy(mask: str) -> int:
    """Return the weighted token count of ``mask``."""

    return sum(mask.count(cls.token) * cls.cardinality for cls in CHAR_CLASSES)


@dataclass(slots=True, frozen=True)
class MaskStats:
    """Scores reported for a mask in verbose mode.

    Attributes
    ----------
    mask:
        The mask string.
    length:
        Length of the literal text the mask was built from.
    complexity, entropy:
        See :func:`complexity` and :func:`entropy`.
    """

    mask: str
    length: int
    complexity: int
    entropy: int

    def format(self) -> str:
        """Render as ``mask:length:complexity:entropy``."""

        return f"{self.mask}:{self.length}:{self.complexity}:{self.entropy}"


def score_mask(mask: str, length: int) -> MaskStats:
    return MaskStats(mask=mask, length=length, complexity=complexity(mask), entropy=entropy(mask))
