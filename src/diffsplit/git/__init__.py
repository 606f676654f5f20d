"""Git interface layer — adapter, diff parsing, models."""

from diffsplit.git.adapter import DiffSource, GitError, diff_args, get_diff, get_repo_root
from diffsplit.git.diff_parser import DiffParser, parse_diff
from diffsplit.git.models import UNKNOWN_FILE, FileChangeRecord, Operation

__all__ = [
    "DiffParser",
    "DiffSource",
    "FileChangeRecord",
    "GitError",
    "Operation",
    "UNKNOWN_FILE",
    "diff_args",
    "get_diff",
    "get_repo_root",
    "parse_diff",
]
