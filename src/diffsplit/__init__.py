"""diffsplit — split unified git diffs into per-file change records."""

from diffsplit.git.diff_parser import DiffParser, parse_diff
from diffsplit.git.models import FileChangeRecord, Operation

__version__ = "0.1.0"

__all__ = ["DiffParser", "FileChangeRecord", "Operation", "__version__", "parse_diff"]
