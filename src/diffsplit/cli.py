"""diffsplit CLI — Typer application with parse and init commands."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from diffsplit import __version__

app = typer.Typer(
    name="diffsplit",
    help="Split unified git diffs into per-file change records.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)


class InputError(Exception):
    """Raised when diff text cannot be read from the requested source."""


def _read_diff_file(path: str) -> str:
    """Read diff text from *path*, or from stdin when *path* is '-'."""
    if path == "-":
        if sys.stdin.isatty():
            raise InputError("no diff on stdin (pipe one in or pass a file)")
        return sys.stdin.read()
    p = Path(path)
    if not p.is_file():
        raise InputError(f"Diff file not found: {path}")
    try:
        return p.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise InputError(f"Cannot read {path}: {exc}") from exc


def _git_source(staged: bool, worktree: bool, from_ref: Optional[str], to_ref: Optional[str]) -> Optional[str]:
    """Resolve the git flags to one diff source, or None when none was given."""
    flags = (("staged", staged), ("worktree", worktree), ("range", from_ref is not None))
    chosen = [name for name, on in flags if on]
    if to_ref is not None and from_ref is None:
        raise InputError("--to needs --from")
    if len(chosen) > 1:
        raise InputError("choose one of --staged, --worktree or --from")
    return chosen[0] if chosen else None


def _read_git_diff(source: str, from_ref: Optional[str], to_ref: Optional[str]) -> str:
    from diffsplit.git.adapter import get_diff, get_repo_root

    return get_diff(get_repo_root(), source, from_ref, to_ref or "HEAD")  # type: ignore[arg-type]


def _fail(label: str, exc: Exception) -> typer.Exit:
    console.print(f"[bold red]{label}:[/bold red] {escape(str(exc))}")
    return typer.Exit(code=2)


# ── parse ─────────────────────────────────────────────────────────────────────


@app.command()
def parse(
    path: Optional[str] = typer.Argument(None, help="Diff file to parse ('-' or omitted: stdin)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .diffsplit.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="Write JSON report to file"),
    include_diff: bool = typer.Option(False, "--include-diff", help="Embed each file's diff text in JSON output"),
    skip_binary: bool = typer.Option(False, "--skip-binary", help="Leave binary files out of the report"),
    include: Optional[List[str]] = typer.Option(None, "--include", help="Only report files matching this glob"),
    exclude: Optional[List[str]] = typer.Option(None, "--exclude", help="Leave out files matching this glob"),
    staged: bool = typer.Option(False, "--staged", help="Parse staged changes of the current repository"),
    worktree: bool = typer.Option(False, "--worktree", help="Parse unstaged changes of the current repository"),
    from_ref: Optional[str] = typer.Option(None, "--from", help="Base commit of a commit range"),
    to_ref: Optional[str] = typer.Option(None, "--to", help="Head commit of a commit range (default HEAD)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
    debug: bool = typer.Option(False, "--debug", help="Debug logging"),
) -> None:
    """Parse a unified diff and report one record per file."""
    from diffsplit.config.loader import ConfigError, load_config
    from diffsplit.filtering import filter_records
    from diffsplit.git.adapter import GitError
    from diffsplit.git.diff_parser import parse_diff
    from diffsplit.log import setup_logging
    from diffsplit.output import json_report, terminal

    flag_level = "debug" if debug else "info" if verbose else None
    setup_logging(flag_level or "warning")

    # --- Load config ---
    try:
        cfg = load_config(Path.cwd(), config)
    except ConfigError as exc:
        raise _fail("Config error", exc) from exc

    if flag_level is None:
        setup_logging(cfg.log.level)

    # --- CLI overrides ---
    if format:
        if format not in ("terminal", "json"):
            console.print(f"[bold red]Invalid format:[/bold red] {format}")
            raise typer.Exit(code=2)
        cfg.output.format = format  # type: ignore[assignment]
    if include_diff:
        cfg.output.include_diff = True
    if skip_binary:
        cfg.filter.skip_binary = True
    if include:
        cfg.filter.include.extend(include)
    if exclude:
        cfg.filter.exclude.extend(exclude)

    try:
        source = _git_source(staged, worktree, from_ref, to_ref)
    except InputError as exc:
        raise _fail("Input error", exc) from exc
    if source is not None and path is not None:
        console.print("[bold red]Error:[/bold red] pass either a diff file or a git source, not both")
        raise typer.Exit(code=2)

    # --- Get diff ---
    try:
        if source is not None:
            diff_text = _read_git_diff(source, from_ref, to_ref)
        else:
            diff_text = _read_diff_file(path or "-")
    except GitError as exc:
        raise _fail("Git error", exc) from exc
    except InputError as exc:
        raise _fail("Input error", exc) from exc

    records = filter_records(parse_diff(diff_text), cfg.filter)

    # --- Output ---
    report_text: Optional[str] = None
    if cfg.output.format == "terminal":
        terminal.render(records, show_summary=cfg.output.show_summary, console=console)
    else:
        report_text = json_report.render(records, include_diff=cfg.output.include_diff)
        print(report_text)

    # --- Write to file ---
    if output:
        if report_text is None:
            report_text = json_report.render(records, include_diff=cfg.output.include_diff)
        Path(output).write_text(report_text, encoding="utf-8")
        if verbose:
            console.print(f"[dim]Report written to {output}[/dim]")


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init(
    force: bool = typer.Option(False, "--force", help="Overwrite an existing .diffsplit.toml"),
) -> None:
    """Generate a starter .diffsplit.toml in the current directory."""
    from diffsplit.config.defaults import CONFIG_FILENAME, DEFAULT_TOML

    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists() and not force:
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"diffsplit {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """diffsplit — split unified git diffs into per-file change records."""
