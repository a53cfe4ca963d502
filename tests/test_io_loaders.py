"""Tests for mask/token file loading and the line reader."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from masktools.io import load_masks, load_tokens
from masktools.io.readers.txt_reader import iter_lines, read_lines


def test_iter_lines_strips_terminators_only() -> None:
    stream = io.StringIO("a\nb\r\n c \n\nlast")
    assert list(iter_lines(stream)) == ["a", "b", " c ", "", "last"]


def test_read_lines_handles_utf8_bom(tmp_path: Path) -> None:
    path = tmp_path / "bom.txt"
    with open(path, "w", encoding="utf-8-sig", newline="") as f:
        f.write("?u?l\n")
    assert read_lines(path) == ["?u?l"]


def test_load_masks_skips_invalid_lines(tmp_path: Path) -> None:
    path = tmp_path / "masks.hcmask"
    path.write_text("?u?l?d\n?x?y\n?u?l?d\r\nabc?\n?d?d\n", encoding="utf-8")
    loaded = load_masks(path)
    assert loaded.masks == ("?u?l?d", "?d?d")
    assert loaded.skipped == ("?x?y", "abc?")


def test_load_masks_byte_tokens(tmp_path: Path) -> None:
    path = tmp_path / "masks.txt"
    path.write_text("?l?b?b\n", encoding="utf-8")
    assert load_masks(path).skipped == ("?l?b?b",)
    assert load_masks(path, allow_bytes=True).masks == ("?l?b?b",)


def test_load_tokens_dedupes_and_skips_blank(tmp_path: Path) -> None:
    path = tmp_path / "tokens.txt"
    path.write_text("pass\n\nword\npass\n\n123\n", encoding="utf-8")
    assert load_tokens(path) == ("pass", "word", "123")


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_tokens(tmp_path / "missing.txt")


def test_undecodable_bytes_are_escaped(tmp_path: Path) -> None:
    path = tmp_path / "tokens.txt"
    path.write_bytes(b"caf\xe9\nabc\n")
    assert load_tokens(path) == ("caf\udce9", "abc")
    assert read_lines(path) == ["caf\udce9", "abc"]
