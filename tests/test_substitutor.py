"""Tests for pattern-aligned token substitution."""

from __future__ import annotations

import pytest

from masktools.mask.canonicalizer import build_replacement_table, canonicalize
from masktools.preprocess.multibyte import ensure_valid_mask
from masktools.replace.substitutor import find_occurrences, substitute

TABLE = build_replacement_table("ulds")


def _sub(subject: str, token: str, n: int = 1) -> str | None:
    return substitute(subject, canonicalize(subject, TABLE), token, TABLE, n)


def test_hello_jello_all_occurrences() -> None:
    result = substitute("Hello Jello", "?u?l?l?l?l?s?u?l?l?l?l", "Hello", TABLE, -1)
    assert result == "Hello Hello"


def test_max_replacements_limits_leftmost_first() -> None:
    assert _sub("Hello Jello", "Hello", 2) == "Hello Hello"
    assert _sub("Hello Jello", "Hello", 1) == "Hello Jello"
    assert _sub("Hello Jello", "Jumbo", 1) == "Jumbo Jello"
    assert _sub("Hello Jello", "Jumbo", -1) == "Jumbo Jumbo"


def test_default_is_single_replacement() -> None:
    mask = canonicalize("1a2b3c", TABLE)
    assert substitute("1a2b3c", mask, "9z", TABLE) == "9z2b3c"


def test_digits_replaced_in_context() -> None:
    assert _sub("pass123", "99") == "pass993"
    assert _sub("pass123", "ab") == "abss123"


def test_no_match_returns_none() -> None:
    assert _sub("hello", "A") is None
    assert _sub("hello", "hello!") is None


def test_token_equal_to_subject_is_rejected() -> None:
    assert _sub("Hello", "Hello") is None
    assert _sub("Summer2024!", "Summer2024!") is None


@pytest.mark.parametrize("token", ["", "é"])
def test_empty_token_or_unmatched_literal(token: str) -> None:
    assert _sub("hello", token) is None


def test_empty_token_mask_is_no_match() -> None:
    empty = build_replacement_table("")
    assert substitute("abc", "abc", "", empty) is None


def test_zero_replacements_yields_nothing() -> None:
    assert _sub("pass123", "99", 0) is None


def test_literal_question_mark_in_token_survives() -> None:
    assert _sub("ab#!", "?!") == "ab?!"


def test_literal_question_mark_in_subject_is_restored() -> None:
    assert _sub("a?1", "7") == "a?7"


def test_non_ascii_literals_realign() -> None:
    assert _sub("héllo1", "7") == "héllo7"


def test_multibyte_mask_realigns() -> None:
    subject = "héllo1"
    mask = ensure_valid_mask(canonicalize(subject, TABLE))
    assert mask == "?l?b?b?l?l?l?d"
    assert substitute(subject, mask, "7", TABLE) == "héllo7"


def test_partial_table_keeps_literals() -> None:
    digits = build_replacement_table("d")
    assert substitute("pass12", "pass?d?d", "34", digits) == "pass34"
    assert substitute("pass12", "pass?d?d", "x1", digits) is None


def test_mask_not_built_from_subject_fails_closed() -> None:
    assert substitute("a", "?l?l?d", "1", TABLE) is None
    assert substitute("a1", "?d?l?l", "1", TABLE) is None
    assert substitute("a1", "?l?d", "1", build_replacement_table("d")) is None


@pytest.mark.parametrize(
    ("subject", "token", "expected"),
    [
        ("x?d1", "7", "x?d7"),
        ("?u?l9", "3", "?u?l3"),
        ("A?b1", "Z", "Z?b1"),
    ],
)
def test_literal_flag_pairs_without_special_class(
    subject: str, token: str, expected: str
) -> None:
    table = build_replacement_table("ud")
    mask = canonicalize(subject, table)
    result = substitute(subject, mask, token, table)
    assert result == expected
    assert len(result) == len(subject)


def test_surrogate_escaped_bytes_pass_through() -> None:
    subject = "caf\udce91"
    mask = ensure_valid_mask(canonicalize(subject, TABLE))
    assert mask == "?l?l?l?b?d"
    assert substitute(subject, mask, "7", TABLE) == "caf\udce97"
    assert _sub(subject, "7") == "caf\udce97"


def test_result_keeps_subject_length() -> None:
    for subject, token in [("Summer2024!", "Winter"), ("abc123", "42"), ("x!y", "?")]:
        result = _sub(subject, token)
        assert result is not None
        assert len(result) == len(subject)


def test_find_occurrences_non_overlapping() -> None:
    assert find_occurrences("aaaa", "aa") == [0, 2]
    assert find_occurrences("aaa", "aa") == [0]
    assert find_occurrences("aaaa", "aa", 1) == [0]
    assert find_occurrences("aaaa", "aa", 0) == []
    assert find_occurrences("abc", "") == []
    assert find_occurrences(["?l", "?d", "?l", "?d"], ["?l", "?d"]) == [0, 2]
    assert find_occurrences(["?l"], ["?l", "?d"]) == []
