"""Shared test fixtures — sample diffs and temp git repos."""

from __future__ import annotations

import subprocess
import textwrap
from pathlib import Path

import pytest


@pytest.fixture
def sample_diff_modified() -> str:
    """An ordinary modification with no operation marker."""
    return textwrap.dedent("""\
        diff --git a/src/main.py b/src/main.py
        index 4291e7f..f664044 100644
        --- a/src/main.py
        +++ b/src/main.py
        @@ -5,4 +5,4 @@ def run():
             engine = Engine()

        -    engine.process()
        +    await engine.process()
    """)


@pytest.fixture
def sample_diff_new() -> str:
    """A newly created text file."""
    return textwrap.dedent("""\
        diff --git a/newfile.txt b/newfile.txt
        new file mode 100644
        index 0000000..1234567
        --- /dev/null
        +++ b/newfile.txt
        @@ -0,0 +1 @@
        +This is a new file
    """)


@pytest.fixture
def sample_diff_deleted() -> str:
    """A deleted text file."""
    return textwrap.dedent("""\
        diff --git a/deleted.txt b/deleted.txt
        deleted file mode 100644
        index 1234567..0000000
        --- a/deleted.txt
        +++ /dev/null
        @@ -1 +0,0 @@
        -Deleted content
    """)


@pytest.fixture
def sample_diff_rename() -> str:
    """A renamed file with a content change."""
    return textwrap.dedent("""\
        diff --git a/old.txt b/new.txt
        similarity index 97%
        rename from old.txt
        rename to new.txt
        index 1234567..89abcde 100644
        --- a/old.txt
        +++ b/new.txt
        @@ -1 +1 @@
        -Old content
        +New content
    """)


@pytest.fixture
def sample_diff_copy() -> str:
    """A copied file with a content change."""
    return textwrap.dedent("""\
        diff --git a/original.txt b/copy.txt
        similarity index 90%
        copy from original.txt
        copy to copy.txt
        index 1234567..89abcde 100644
        --- a/original.txt
        +++ b/copy.txt
        @@ -1 +1 @@
        -Original content
        +Copied content
    """)


@pytest.fixture
def sample_diff_binary_deleted() -> str:
    """A deleted binary file (no trailing newline)."""
    return (
        "diff --git a/doc/renegade-diff.png b/doc/renegade-diff.png\n"
        "deleted file mode 100644\n"
        "index a4efcdd..0000000\n"
        "Binary files a/doc/renegade-diff.png and /dev/null differ"
    )


@pytest.fixture
def sample_diff_mixed() -> str:
    """A binary deletion, a new text file and a plain modification."""
    return textwrap.dedent("""\
        diff --git a/doc/renegade-diff.png b/doc/renegade-diff.png
        deleted file mode 100644
        index a4efcdd..0000000
        Binary files a/doc/renegade-diff.png and /dev/null differ
        diff --git a/src/tools/diff.py b/src/tools/diff.py
        new file mode 100644
        index 0000000..1066309
        --- /dev/null
        +++ b/src/tools/diff.py
        @@ -0,0 +1,2 @@
        +class Diff:
        +    pass
        diff --git a/src/main.py b/src/main.py
        index 4291e7f..f664044 100644
        --- a/src/main.py
        +++ b/src/main.py
        @@ -5,4 +5,4 @@ def run():
             engine = Engine()

        -    engine.process()
        +    await engine.process()
    """)


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository for integration tests."""
    subprocess.run(["git", "init", str(tmp_path)], capture_output=True, check=True)
    subprocess.run(
        ["git", "config", "user.email", "test@test.com"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    subprocess.run(
        ["git", "config", "user.name", "Test"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    # Initial commit
    readme = tmp_path / "README.md"
    readme.write_text("# Test\n")
    subprocess.run(["git", "add", "."], cwd=tmp_path, capture_output=True, check=True)
    subprocess.run(
        ["git", "commit", "-m", "init"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    return tmp_path
