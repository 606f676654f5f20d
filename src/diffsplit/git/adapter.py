"""Produce diff text from a local repository for the parser."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List, Literal, Optional

logger = logging.getLogger(__name__)

DiffSource = Literal["staged", "worktree", "range"]

GIT_TIMEOUT = 30


class GitError(Exception):
    """Raised when git is missing or cannot produce the requested output."""


def diff_args(source: DiffSource, base: Optional[str] = None, head: str = "HEAD") -> List[str]:
    """Build the ``git diff`` argument list for *source*.

    Rename and copy detection are forced on, whatever the user's git config
    says, so those segments carry ``rename from`` / ``copy from`` markers.
    Color and external diff drivers are forced off so the text stays parseable.
    """
    args = ["diff", "--no-color", "--no-ext-diff", "--find-renames", "--find-copies"]
    if source == "staged":
        args.append("--cached")
    elif source == "range":
        if not base:
            raise GitError("a range diff needs a base commit")
        args.append(f"{base}..{head}")
    elif source != "worktree":
        raise GitError(f"unknown diff source: {source}")
    return args


def _git(args: List[str], cwd: Path, what: str) -> str:
    """Run git with *args* in *cwd*; *what* names the request in errors."""
    logger.debug("%s: git %s (in %s)", what, " ".join(args), cwd)
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=GIT_TIMEOUT,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError as exc:
        raise GitError("git is not installed or not on PATH") from exc
    except subprocess.TimeoutExpired as exc:
        raise GitError(f"{what} timed out after {GIT_TIMEOUT}s") from exc

    if result.returncode != 0:
        detail = result.stderr.strip() or f"exit status {result.returncode}"
        raise GitError(f"{what} failed: {detail}")
    return result.stdout


def get_repo_root(cwd: Optional[Path] = None) -> Path:
    """Return the top-level directory of the repository containing *cwd*."""
    out = _git(["rev-parse", "--show-toplevel"], cwd or Path.cwd(), "locating repository")
    return Path(out.strip())


def get_diff(
    repo_root: Path,
    source: DiffSource,
    base: Optional[str] = None,
    head: str = "HEAD",
) -> str:
    """Return the full-context unified diff for *source* in *repo_root*."""
    what = f"{base}..{head} diff" if source == "range" else f"{source} diff"
    return _git(diff_args(source, base, head), repo_root, what)
