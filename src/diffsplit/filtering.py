"""Record selection and per-operation counts."""

from __future__ import annotations

from collections import Counter
from fnmatch import fnmatch
from typing import Dict, List

from diffsplit.config.schema import OPERATION_NAMES, FilterConfig
from diffsplit.git.models import FileChangeRecord


def _matches_any(name: str, globs: List[str]) -> bool:
    return any(fnmatch(name, g) for g in globs)


def filter_records(records: List[FileChangeRecord], cfg: FilterConfig) -> List[FileChangeRecord]:
    """Return the records selected by *cfg*, keeping input order."""
    selected: List[FileChangeRecord] = []
    for record in records:
        if cfg.skip_binary and record.is_binary:
            continue
        if cfg.include and not _matches_any(record.file_name, cfg.include):
            continue
        if cfg.exclude and _matches_any(record.file_name, cfg.exclude):
            continue
        if cfg.operations and record.effective_operation.value not in cfg.operations:
            continue
        selected.append(record)
    return selected


def summarize(records: List[FileChangeRecord]) -> Dict[str, int]:
    """Count records per effective operation, plus binary files."""
    counts = Counter(r.effective_operation.value for r in records)
    summary = {name: counts.get(name, 0) for name in OPERATION_NAMES}
    summary["binary"] = sum(1 for r in records if r.is_binary)
    return summary
