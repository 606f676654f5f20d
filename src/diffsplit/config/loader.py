"""Load and merge configuration from .diffsplit.toml and env vars."""

from __future__ import annotations

import dataclasses
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from diffsplit.config.defaults import CONFIG_FILENAME
from diffsplit.config.schema import (
    LOG_LEVELS,
    OPERATION_NAMES,
    OUTPUT_FORMATS,
    DiffSplitConfig,
    FilterConfig,
    LogConfig,
    OutputConfig,
)

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(base_dir: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = base_dir / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _merge_env_overrides(cfg: DiffSplitConfig) -> None:
    """Apply DIFFSPLIT_* environment variable overrides."""
    if val := os.environ.get("DIFFSPLIT_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("DIFFSPLIT_SKIP_BINARY"):
        cfg.filter.skip_binary = val.lower() in ("1", "true", "yes")
    if val := os.environ.get("DIFFSPLIT_EXCLUDE"):
        cfg.filter.exclude.extend(p.strip() for p in val.split(os.pathsep) if p.strip())
    if val := os.environ.get("DIFFSPLIT_LOG_LEVEL"):
        if val.lower() in LOG_LEVELS:
            cfg.log.level = val.lower()  # type: ignore[assignment]


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table, got {type(raw).__name__}")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _validate_filter(cfg: FilterConfig) -> None:
    """Reject glob and operation lists that are not lists of strings."""
    for name in ("include", "exclude", "operations"):
        value = getattr(cfg, name)
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ConfigError(f"[filter] {name} must be a list of strings, got {value!r}")
    unknown = [op for op in cfg.operations if op not in OPERATION_NAMES]
    if unknown:
        raise ConfigError(
            f"[filter] operations has unknown value(s) {unknown}; "
            f"expected any of {', '.join(OPERATION_NAMES)}"
        )


def load_config(
    base_dir: Path,
    config_override: Optional[str] = None,
) -> DiffSplitConfig:
    """Load, validate, and return a DiffSplitConfig."""
    config_path = find_config_file(base_dir, config_override)

    if config_path is None:
        cfg = DiffSplitConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = DiffSplitConfig(
            version=str(raw.get("version", "1.0")),
            output=_build_section(raw, OutputConfig, "output"),
            filter=_build_section(raw, FilterConfig, "filter"),
            log=_build_section(raw, LogConfig, "log"),
        )
        logger.info("Loaded config from %s", config_path)

    if cfg.output.format not in OUTPUT_FORMATS:
        raise ConfigError(f"Invalid output format: {cfg.output.format!r}")
    if cfg.log.level not in LOG_LEVELS:
        raise ConfigError(f"Invalid log level: {cfg.log.level!r}")
    _validate_filter(cfg.filter)

    _merge_env_overrides(cfg)
    return cfg
