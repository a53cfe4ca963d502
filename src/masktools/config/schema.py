"""Typed configuration schema and loader for the masktools package."""

from __future__ import annotations

import codecs
import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, conint, field_validator

from ..utils.constants import CLASS_FLAGS

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class MaskingSettings(BaseModel):
    """Which classes are masked and how non-ASCII text is handled."""

    class_spec: str
    multibyte: bool

    model_config = ConfigDict(extra="forbid")

    @field_validator("class_spec")
    @classmethod
    def _known_flags(cls, value: str) -> str:
        if not value:
            raise ValueError("class_spec must not be empty")
        unknown = sorted(set(value) - set(CLASS_FLAGS))
        if unknown:
            raise ValueError(f"class_spec may only contain {CLASS_FLAGS!r}; got {unknown}")
        return value


class SubstitutionSettings(BaseModel):
    """Pattern substitution limits."""

    max_replacements: int

    model_config = ConfigDict(extra="forbid")


class OutputSettings(BaseModel):
    """Output formatting options."""

    verbose: bool

    model_config = ConfigDict(extra="forbid")


class IOSettings(BaseModel):
    """Codec used for input, output, mask and token files."""

    encoding: str
    errors: Literal["strict", "replace", "ignore", "surrogateescape"]

    model_config = ConfigDict(extra="forbid")

    @field_validator("encoding")
    @classmethod
    def _known_codec(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"unknown encoding {value!r}") from exc
        return value


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)  # type: ignore[valid-type]
    masking: MaskingSettings
    substitution: SubstitutionSettings
    output: OutputSettings
    io: IOSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------

ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "MASKTOOLS_CLASS_SPEC": ("masking", "class_spec"),
    "MASKTOOLS_MULTIBYTE": ("masking", "multibyte"),
    "MASKTOOLS_MAX_REPLACEMENTS": ("substitution", "max_replacements"),
}


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def _env_overrides(environ: Mapping[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for var, (section, key) in ENV_OVERRIDES.items():
        if var in environ:
            overrides.setdefault(section, {})[key] = environ[var]
    return overrides


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    ``MASKTOOLS_*`` environment variables.  Environment values are strings and
    are coerced by pydantic (``"true"`` -> ``True``, ``"3"`` -> ``3``).
    """

    with (
        importlib_resources.files("masktools.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    environ = env if env is not None else os.environ
    merged = deep_merge_dicts(merged, _env_overrides(environ))

    return ConfigModel.model_validate(merged)


__all__ = [
    "ConfigModel",
    "MaskingSettings",
    "SubstitutionSettings",
    "OutputSettings",
    "IOSettings",
    "ENV_OVERRIDES",
    "deep_merge_dicts",
    "load_config",
]
