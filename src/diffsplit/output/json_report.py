"""JSON reporter for pipelines and downstream tools."""

from __future__ import annotations

import json
from typing import Any, Dict, List

from diffsplit.filtering import summarize
from diffsplit.git.models import FileChangeRecord


def to_dict(records: List[FileChangeRecord], *, include_diff: bool = False) -> Dict[str, Any]:
    """Convert parsed records to a JSON-serialisable dict."""
    return {
        "version": "1.0",
        "total_files": len(records),
        "summary": summarize(records),
        "files": [r.to_dict(include_diff=include_diff) for r in records],
    }


def render(records: List[FileChangeRecord], *, include_diff: bool = False) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(records, include_diff=include_diff), indent=2)
