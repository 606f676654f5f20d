"""Unified diff parser — splits ``diff --git`` text into per-file records.

Each record keeps the verbatim text of its segment, so joining every
record's ``diff`` with ``"\\n"`` gives back the input. Malformed headers
never raise; they degrade to the ``"unknown"`` file name, an absent
operation or an absent old name.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from diffsplit.git.models import UNKNOWN_FILE, FileChangeRecord, Operation

logger = logging.getLogger(__name__)

# --- Line prefixes, in dispatch order ---

_DIFF_HEADER = "diff --git "
_NEW_FILE = "new file"
_DELETED_FILE = "deleted file"
_RENAME_FROM = "rename from "
_COPY_FROM = "copy from "
_OLD_FILE_HEADER = "--- "
_NEW_FILE_HEADER = "+++ "
_BINARY = "Binary"

_DIFF_HEADER_RE = re.compile(r"^diff --git a/(.+?) b/(.+)")

DEV_NULL = "/dev/null"


def _strip_prefix(path: str, prefix: str) -> str:
    return path[len(prefix):] if path.startswith(prefix) else path


def _file_name_from_header(line: str) -> str:
    """Return the post-change path of a ``diff --git a/X b/Y`` line."""
    m = _DIFF_HEADER_RE.match(line)
    if m is None:
        logger.debug("Unparseable diff header: %r", line)
        return UNKNOWN_FILE
    return m.group(2)


class DiffParser:
    """Parse unified diff text into a list of FileChangeRecord objects.

    Usage::

        records = DiffParser(diff_text).parse()
        for record in records:
            print(record.effective_operation, record.file_name)
    """

    def __init__(self, diff_text: str) -> None:
        # Split on LF only: CR and blank lines are part of the segment text.
        self._lines = diff_text.split("\n") if diff_text else []

    def parse(self) -> List[FileChangeRecord]:
        """Return one record per ``diff --git`` segment, in input order."""
        records: List[FileChangeRecord] = []
        current: Optional[FileChangeRecord] = None
        buffer: List[str] = []
        preamble = 0

        for line in self._lines:
            # --- diff --git header → new segment ---
            if line.startswith(_DIFF_HEADER):
                if current is not None:
                    self._seal(current, buffer, records)
                current = FileChangeRecord(file_name=_file_name_from_header(line))
                buffer = [line]
                continue

            # Text before the first header belongs to no segment
            if current is None:
                preamble += 1
                continue

            buffer.append(line)

            if line.startswith(_NEW_FILE):
                current.operation = Operation.NEW
            elif line.startswith(_DELETED_FILE):
                current.operation = Operation.DELETED
            elif line.startswith(_RENAME_FROM):
                current.operation = Operation.RENAMED
                current.old_file_name = line[len(_RENAME_FROM):] or None
            elif line.startswith(_COPY_FROM):
                current.operation = Operation.COPIED
                current.old_file_name = line[len(_COPY_FROM):] or None
            elif line.startswith(_OLD_FILE_HEADER):
                old_path = line[len(_OLD_FILE_HEADER):]
                # /dev/null on the old side → creation, no old name
                if old_path != DEV_NULL:
                    current.old_file_name = _strip_prefix(old_path, "a/") or None
            elif line.startswith(_NEW_FILE_HEADER):
                new_path = line[len(_NEW_FILE_HEADER):]
                # /dev/null on the new side → deletion, keep the header name
                if new_path != DEV_NULL:
                    current.file_name = _strip_prefix(new_path, "b/") or current.file_name
            elif line.startswith(_BINARY):
                current.is_binary = True

        if current is not None:
            self._seal(current, buffer, records)

        if preamble:
            logger.debug("Dropped %d line(s) before the first diff header", preamble)
        return records

    @staticmethod
    def _seal(
        record: FileChangeRecord,
        buffer: List[str],
        records: List[FileChangeRecord],
    ) -> None:
        record.diff = "\n".join(buffer)
        records.append(record)
        logger.debug(
            "Parsed segment %d: %s (%s, %d lines%s)",
            len(records),
            record.file_name,
            record.effective_operation.value,
            len(buffer),
            ", binary" if record.is_binary else "",
        )


def parse_diff(diff_text: str) -> List[FileChangeRecord]:
    """Parse *diff_text* and return its per-file change records."""
    return DiffParser(diff_text).parse()
