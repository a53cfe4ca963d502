"""Smoke tests for package import and version."""

import masktools


def test_import_package() -> None:
    assert isinstance(masktools, object)


def test_version() -> None:
    assert masktools.__version__ == "0.1.0"
