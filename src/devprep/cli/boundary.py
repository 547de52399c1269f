"""Script-level error boundary shared by every console-script entry point.

This module is the only place that translates between the domain world
and the OS process exit code.  It catches
:class:`~devprep.exceptions.DevprepError`, ``KeyboardInterrupt``, and any
unexpected ``Exception``, renders a user-friendly message on stderr, and
exits with a well-defined code.
"""

from __future__ import annotations

import sys
from collections.abc import Callable

from devprep.cli import exit_codes
from devprep.cli.console import err_console
from devprep.exceptions import DevprepError


def run_cli(main: Callable[[], int]) -> None:
    """Run *main* and exit the process with its code.

    Guarantees the process never exits with a raw stack trace during
    normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except DevprepError as exc:
        err_console.print(f"Error: {exc}", style="bold red")
        if exc.hint:
            err_console.print(f"Hint: {exc.hint}", style="yellow")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        err_console.print("\nAborted by user.", style="yellow")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        err_console.print(
            "Unexpected error. Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}",
            style="bold red",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
