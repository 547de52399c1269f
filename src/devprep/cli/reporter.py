"""Console-backed :class:`~devprep.core.protocols.Reporter`.

Normal progress goes to stdout; notices and warnings go to stderr so
that piping a tool's output never mixes in diagnostics.
"""

from __future__ import annotations

from devprep.cli.console import console, err_console

RULE: str = "---"


class ConsoleReporter:
    """Route service messages to the stdout/stderr console proxies."""

    def info(self, message: str) -> None:
        console.print(message)

    def notice(self, message: str) -> None:
        err_console.print(message, style="yellow")

    def warning(self, message: str) -> None:
        err_console.print(f"Warning: {message}", style="yellow")

    def rule(self) -> None:
        console.print(RULE, style="dim")
