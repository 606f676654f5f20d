"""Rich terminal reporter — one table row per file."""

from __future__ import annotations

from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from diffsplit.filtering import summarize
from diffsplit.git.models import FileChangeRecord, Operation

_OPERATION_STYLE = {
    Operation.NEW: "bold green",
    Operation.DELETED: "bold red",
    Operation.RENAMED: "bold cyan",
    Operation.COPIED: "bold blue",
    Operation.MODIFIED: "yellow",
}


def _operation_cell(record: FileChangeRecord) -> Text:
    op = record.effective_operation
    # Dim when no marker line was present in the segment
    style = _OPERATION_STYLE[op] if record.operation else "dim yellow"
    return Text(op.value, style=style)


def render(
    records: List[FileChangeRecord],
    *,
    show_summary: bool = True,
    console: Optional[Console] = None,
) -> None:
    """Print parsed records to the terminal using Rich."""
    console = console or Console(stderr=True)

    if not records:
        console.print("[dim]No file changes found in diff.[/dim]")
        return

    table = Table(
        title="Diff Files",
        title_style="bold",
        border_style="dim",
    )
    table.add_column("#", justify="right", style="dim")
    table.add_column("Operation", justify="center")
    table.add_column("File", style="magenta")
    table.add_column("Old name", style="cyan")
    table.add_column("Binary", justify="center")
    table.add_column("Lines", justify="right", style="green")

    for idx, record in enumerate(records, start=1):
        old_name = record.old_file_name if record.old_file_name != record.file_name else None
        table.add_row(
            str(idx),
            _operation_cell(record),
            record.file_name,
            old_name or "-",
            "yes" if record.is_binary else "",
            str(record.line_count),
        )

    console.print(table)

    if show_summary:
        _print_summary(console, records)


def _print_summary(console: Console, records: List[FileChangeRecord]) -> None:
    summary = summarize(records)
    console.print()
    console.print(f"[dim]Files:[/dim]     {len(records)}")
    for name, count in summary.items():
        if count:
            console.print(f"[dim]{name.capitalize() + ':':<10}[/dim] {count}")
