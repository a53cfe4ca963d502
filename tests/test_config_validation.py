from pathlib import Path

import pytest
from pydantic import ValidationError

from masktools.config import load_config


def test_unknown_class_flag(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text('masking:\n  class_spec: "ulx"\n')
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_empty_class_spec(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text('masking:\n  class_spec: ""\n')
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_unknown_key(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("unknown:\n  foo: 1\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_bad_errors_policy(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("io:\n  errors: explode\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})


def test_unknown_encoding(tmp_path: Path) -> None:
    cfg_file = tmp_path / "bad.yml"
    cfg_file.write_text("io:\n  encoding: no-such-codec\n")
    with pytest.raises(ValidationError):
        load_config(cfg_file, env={})
