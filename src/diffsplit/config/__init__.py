"""Configuration loading, schema, and defaults."""

from diffsplit.config.loader import ConfigError, load_config
from diffsplit.config.schema import DiffSplitConfig, FilterConfig, OutputConfig

__all__ = [
    "ConfigError",
    "DiffSplitConfig",
    "FilterConfig",
    "OutputConfig",
    "load_config",
]
