"""Typed configuration schema and loader for the sentence splitter."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, conint, field_validator

from sentsplitter.utils.logging import get_logger

MODE_ENV = "SENTSPLITTER_MODE"

logger = get_logger(__name__)

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class LexiconSettings(BaseModel):
    """Abbreviation and lowercase-term registry contents."""

    include_defaults: bool = True
    abbreviations: list[str] = []
    lowercase_terms: list[str] = []

    model_config = ConfigDict(extra="forbid")

    @field_validator("abbreviations", "lowercase_terms")
    @classmethod
    def _no_blank_terms(cls, terms: list[str]) -> list[str]:
        if any(not term for term in terms):
            raise ValueError("terms must be non-empty strings")
        return terms


class SplitterConfig(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)  # type: ignore[valid-type]
    mode: Literal["legacy", "corrected"]
    lexicon: LexiconSettings

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


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> SplitterConfig:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    the ``SENTSPLITTER_MODE`` environment variable.
    """

    with (
        importlib_resources.files("sentsplitter.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = yaml.safe_load(f) or {}

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = yaml.safe_load(f) or {}
        merged = deep_merge_dicts(defaults, overrides)
        logger.debug("merged configuration overrides from %s", path)
    else:
        merged = defaults

    environ = env if env is not None else os.environ
    if environ.get(MODE_ENV):
        merged = deep_merge_dicts(merged, {"mode": environ[MODE_ENV].strip().lower()})

    return SplitterConfig.model_validate(merged)


__all__ = [
    "LexiconSettings",
    "MODE_ENV",
    "SplitterConfig",
    "deep_merge_dicts",
    "load_config",
]
