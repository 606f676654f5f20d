"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal

OutputFormat = Literal["terminal", "json"]
LogLevel = Literal["debug", "info", "warning", "error"]

OUTPUT_FORMATS = ("terminal", "json")
LOG_LEVELS = ("debug", "info", "warning", "error")
OPERATION_NAMES = ("new", "deleted", "renamed", "copied", "modified")


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"
    show_summary: bool = True
    include_diff: bool = False  # json only: embed each segment's text


@dataclass
class FilterConfig:
    skip_binary: bool = False
    include: List[str] = field(default_factory=list)  # empty = every file
    exclude: List[str] = field(default_factory=list)
    operations: List[str] = field(default_factory=list)  # empty = every operation


@dataclass
class LogConfig:
    level: LogLevel = "warning"


@dataclass
class DiffSplitConfig:
    version: str = "1.0"
    output: OutputConfig = field(default_factory=OutputConfig)
    filter: FilterConfig = field(default_factory=FilterConfig)
    log: LogConfig = field(default_factory=LogConfig)
