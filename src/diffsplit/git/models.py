"""Data models for diff parsing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

UNKNOWN_FILE = "unknown"


class Operation(str, Enum):
    NEW = "new"
    DELETED = "deleted"
    RENAMED = "renamed"
    COPIED = "copied"
    MODIFIED = "modified"


@dataclass
class FileChangeRecord:
    """One file's segment of a unified diff.

    ``operation`` stays ``None`` for plain modifications (no marker line);
    use :attr:`effective_operation` when a total classification is needed.
    """

    file_name: str = UNKNOWN_FILE
    operation: Optional[Operation] = None
    old_file_name: Optional[str] = None  # from '--- ', 'rename from', 'copy from'
    diff: str = ""
    is_binary: bool = False

    @property
    def effective_operation(self) -> Operation:
        return self.operation or Operation.MODIFIED

    @property
    def line_count(self) -> int:
        # A trailing separator ends the last line; it does not start a new one
        if not self.diff:
            return 0
        return self.diff.count("\n") + (0 if self.diff.endswith("\n") else 1)

    def to_dict(self, *, include_diff: bool = False) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "file_name": self.file_name,
            "old_file_name": self.old_file_name,
            "operation": self.operation.value if self.operation else None,
            "is_binary": self.is_binary,
            "lines": self.line_count,
        }
        if include_diff:
            data["diff"] = self.diff
        return data
