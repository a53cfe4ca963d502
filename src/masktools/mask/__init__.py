"""Mask construction, validation and scoring."""

from .canonicalizer import (
    ReplacementTable,
    build_replacement_table,
    canonicalize,
    partial_canonicalize,
    remove_mask_tokens,
    split_mask,
)
from .scorer import MaskStats, complexity, entropy, score_mask
from .validator import is_valid_mask, validate_class_spec

__all__ = [
    "ReplacementTable",
    "build_replacement_table",
    "canonicalize",
    "partial_canonicalize",
    "remove_mask_tokens",
    "split_mask",
    "MaskStats",
    "complexity",
    "entropy",
    "score_mask",
    "is_valid_mask",
    "validate_class_spec",
]
