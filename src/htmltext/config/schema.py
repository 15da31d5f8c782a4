"""Typed configuration schema and loader for the htmltext package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ConfigDict, conint

from ..utils.constants import MAX_CODE_POINT

CONFIG_ENV_VAR = "HTMLTEXT_CONFIG"

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class EntityOptions(BaseModel):
    """Which character references are decoded."""

    decode_named: bool
    decode_numeric: bool
    max_numeric: conint(ge=0, le=MAX_CODE_POINT) = 511

    model_config = ConfigDict(extra="forbid")


class ConvertOptions(BaseModel):
    """Options for the HTML to text conversion."""

    preserve_entity_codes: bool

    model_config = ConfigDict(extra="forbid")


class ExcerptOptions(BaseModel):
    """Excerpt length and ellipsis marker."""

    length: Optional[conint(ge=0)] = None
    ellipsis: str

    model_config = ConfigDict(extra="forbid")


class OutputOptions(BaseModel):
    """How converted text is written to disk."""

    encoding: str
    newline: str

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    entities: EntityOptions
    convert: ConvertOptions
    excerpt: ExcerptOptions
    output: OutputOptions

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def _read_yaml(path: str | os.PathLike[str]) -> dict[str, Any]:
    with Path(path).open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < YAML named by the
    ``HTMLTEXT_CONFIG`` environment variable < YAML passed as ``path``.
    """

    with (
        importlib_resources.files("htmltext.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        merged = yaml.safe_load(f) or {}

    environ = env if env is not None else os.environ
    env_path = environ.get(CONFIG_ENV_VAR)
    if env_path:
        merged = deep_merge_dicts(merged, _read_yaml(env_path))

    if path is not None:
        merged = deep_merge_dicts(merged, _read_yaml(path))

    return ConfigModel.model_validate(merged)


__all__ = [
    "CONFIG_ENV_VAR",
    "ConfigModel",
    "EntityOptions",
    "ConvertOptions",
    "ExcerptOptions",
    "OutputOptions",
    "deep_merge_dicts",
    "load_config",
]
