"""``python -m devprep doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the runtime environment satisfies both tools' requirements.

This module lives in the CLI layer — it may import from ``infra``
and ``core``, and it renders via Rich.  No business logic resides
here; it purely collects and displays diagnostic data.
"""

from __future__ import annotations

import importlib.util
import platform
import sys

from devprep.cli import exit_codes
from devprep.cli.console import console, err_console
from devprep.exceptions import MissingDependencyError
from devprep.infra.filetype import detect_file_command
from devprep.infra.runtime import locate_runtime
from devprep.version import __version__

Check = tuple[str, str, str]


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _devprep_version_check() -> Check:
    return "devprep", __version__, "[green]OK[/green]"


def _python_version_check() -> Check:
    """Return (label, value, status) for the running interpreter."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _runtime_check() -> Check:
    """Return the row for the interpreter ``prep-venv`` would use."""
    try:
        path = locate_runtime()
    except MissingDependencyError:
        return "venv runtime", "not found", "[red]FAIL[/red]"
    return "venv runtime", str(path), "[green]OK[/green]"


def _file_command_check() -> Check:
    status = detect_file_command()
    if status.found:
        return "file", str(status.path) if status.path else "found", "[green]OK[/green]"
    return "file", "not found", "[yellow]WARN[/yellow]"


def _module_check(label: str, module: str) -> Check:
    """Return the row for an optional UI library."""
    try:
        found = importlib.util.find_spec(module) is not None
    except (ImportError, ValueError):
        found = False
    if found:
        return label, "installed", "[green]OK[/green]"
    return label, "NOT INSTALLED", "[yellow]WARN[/yellow]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[Check]) -> None:
    """Render doctor output without Rich."""
    print("\ndevprep doctor", file=sys.stderr)
    print("=" * 64, file=sys.stderr)
    print(f"{'Component':<14} {'Value':<40} {'Status':<8}", file=sys.stderr)
    print("-" * 64, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<14} {value:<40} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor() -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check fails,
        :data:`exit_codes.GENERAL_ERROR` otherwise.  Warnings do not fail.
    """
    checks = [
        _devprep_version_check(),
        _python_version_check(),
        _runtime_check(),
        _file_command_check(),
        _module_check("rich", "rich"),
        _module_check("questionary", "questionary"),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_doctor_table(checks)
    else:
        table = Table(
            title="devprep doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=14)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, value, status)
        err_console.print()
        err_console.print(table)
        err_console.print()

    file_status = detect_file_command()
    if not file_status.found and file_status.install_commands:
        err_console.print("'file' is not installed; catfiles needs it.", style="yellow")
        err_console.print("Install using one of the following commands:")
        for cmd in file_status.install_commands:
            err_console.print(f"  {cmd}")
        err_console.print()

    if has_failure:
        err_console.print("Some checks failed.", style="bold red")
        return exit_codes.GENERAL_ERROR

    console.print("All checks passed.", style="bold green")
    return exit_codes.SUCCESS
