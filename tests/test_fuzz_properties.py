"""Seeded property checks over synthetic candidate lines.

Lines come from :mod:`evaluation.fuzz` and include literal ``?`` sentinels,
non-ASCII letters and repeated chunks.  The invariants cover canonicalization,
scoring, chunking and the substitution acceptance rule.
"""

from __future__ import annotations

import pytest

from evaluation.fuzz import FuzzOptions, candidate_line, variants
from masktools.mask.canonicalizer import build_replacement_table, canonicalize, split_mask
from masktools.mask.scorer import complexity, entropy
from masktools.mask.validator import is_valid_mask
from masktools.preprocess.multibyte import ensure_valid_mask
from masktools.replace.chunker import chunk
from masktools.replace.substitutor import substitute

TABLE = build_replacement_table("ulds")
OPTS = FuzzOptions(max_variants=200)
LINES = list(variants(base_seed=1234, opts=OPTS))


def test_fuzz_is_deterministic() -> None:
    assert candidate_line(seed=7, opts=OPTS) == candidate_line(seed=7, opts=OPTS)
    assert LINES == list(variants(base_seed=1234, opts=OPTS))


@pytest.mark.parametrize("spec", ["ulds", "ud", "s", "l"])
def test_canonicalize_length_and_units(spec: str) -> None:
    table = build_replacement_table(spec)
    for line in LINES:
        mask = canonicalize(line, table)
        assert mask == canonicalize(line, table)
        replaced = sum(1 for ch in line if ch in table)
        assert len(mask) == len(line) + replaced
        if spec == "ulds":
            assert len(split_mask(mask)) == len(line)


def test_full_masks_are_valid() -> None:
    for line in LINES:
        mask = canonicalize(line, TABLE)
        assert is_valid_mask(mask)
        normalized = ensure_valid_mask(mask)
        assert normalized.isascii()
        assert is_valid_mask(normalized, allow_bytes=True)


def test_scores_are_bounded_and_additive() -> None:
    masks = [canonicalize(line, TABLE) for line in LINES]
    for a, b in zip(masks, masks[1:]):
        assert 0 <= complexity(a) <= 4
        assert entropy(a + b) == entropy(a) + entropy(b)


def test_chunks_concatenate_back() -> None:
    for line in LINES:
        for size in (1, 2, 3, 5):
            parts = chunk(line, size)
            assert "".join(parts) == line
            assert all(len(p) == size for p in parts[:-1])


def test_substitution_acceptance_rule() -> None:
    for line in LINES:
        if not line:
            continue
        mask = canonicalize(line, TABLE)
        assert substitute(line, mask, line, TABLE) is None
        for token in chunk(line, 3):
            result = substitute(line, mask, token, TABLE, -1)
            if result is None:
                continue
            assert token in result
            assert result != token
            assert len(result) == len(line)


@pytest.mark.parametrize("spec", ["ulds", "ud", "l", "d"])
def test_substitution_keeps_subject_length_for_any_table(spec: str) -> None:
    table = build_replacement_table(spec)
    for line in LINES:
        for mask in (canonicalize(line, table), ensure_valid_mask(canonicalize(line, table))):
            for token in chunk(line, 2):
                result = substitute(line, mask, token, table, -1)
                if result is not None:
                    assert len(result) == len(line)
