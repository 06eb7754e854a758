"""Configuration loading utilities.

Precedence of configuration sources:
    1. Package defaults (``defaults.yml``)
    2. Optional user-provided YAML passed to :func:`load_config`
    3. The ``SENTSPLITTER_MODE`` environment variable
"""

from .schema import LexiconSettings, SplitterConfig, deep_merge_dicts, load_config

__all__ = ["LexiconSettings", "SplitterConfig", "deep_merge_dicts", "load_config"]
