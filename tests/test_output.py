"""Tests for the terminal and JSON reporters."""

import json

from rich.console import Console

from diffsplit.git.diff_parser import parse_diff
from diffsplit.git.models import FileChangeRecord, Operation
from diffsplit.output import json_report, terminal


class TestRecordDict:
    def test_absent_operation_is_null(self, sample_diff_modified):
        data = parse_diff(sample_diff_modified)[0].to_dict()
        assert data["operation"] is None
        assert data["file_name"] == "src/main.py"
        assert "diff" not in data

    def test_include_diff(self):
        record = FileChangeRecord(file_name="a.txt", operation=Operation.NEW, diff="x\ny")
        data = record.to_dict(include_diff=True)
        assert data["operation"] == "new"
        assert data["diff"] == "x\ny"
        assert data["lines"] == 2

    def test_line_count_ignores_trailing_separator(self, sample_diff_mixed):
        records = parse_diff(sample_diff_mixed)
        assert [r.line_count for r in records] == [4, 8, 9]
        assert FileChangeRecord(diff="").line_count == 0
        assert FileChangeRecord(diff="a\n\n").line_count == 2


class TestJsonReport:
    def test_structure(self, sample_diff_mixed):
        records = parse_diff(sample_diff_mixed)
        data = json.loads(json_report.render(records))
        assert data["version"] == "1.0"
        assert data["total_files"] == 3
        assert data["summary"]["binary"] == 1
        assert [f["operation"] for f in data["files"]] == ["deleted", "new", None]
        assert [f["is_binary"] for f in data["files"]] == [True, False, False]

    def test_diff_text_round_trips(self, sample_diff_mixed):
        records = parse_diff(sample_diff_mixed)
        data = json_report.to_dict(records, include_diff=True)
        assert "\n".join(f["diff"] for f in data["files"]) == sample_diff_mixed

    def test_empty(self):
        data = json_report.to_dict([])
        assert data["total_files"] == 0
        assert data["files"] == []


class TestTerminal:
    def _console(self):
        return Console(record=True, width=200, force_terminal=False)

    def test_table_lists_files(self, sample_diff_mixed, sample_diff_rename):
        console = self._console()
        terminal.render(parse_diff(sample_diff_mixed + sample_diff_rename), console=console)
        text = console.export_text()
        assert "doc/renegade-diff.png" in text
        assert "src/main.py" in text
        assert "old.txt" in text
        assert "renamed" in text
        assert "Files:" in text

    def test_no_summary(self, sample_diff_new):
        console = self._console()
        terminal.render(parse_diff(sample_diff_new), show_summary=False, console=console)
        assert "Files:" not in console.export_text()

    def test_empty(self):
        console = self._console()
        terminal.render([], console=console)
        assert "No file changes" in console.export_text()
