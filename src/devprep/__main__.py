"""Allow ``python -m devprep <tool> [args...]`` invocation.

``<tool>`` is ``venv`` (same as ``prep-venv``), ``catfiles`` (same as
``catfiles``) or ``doctor``.  Remaining arguments are passed through
unchanged, so both forms behave identically.
"""

from __future__ import annotations

import sys

from devprep.cli import exit_codes
from devprep.cli.boundary import run_cli
from devprep.cli.console import err_console

USAGE: str = "usage: python -m devprep {venv,catfiles,doctor} [args...]"


def main(argv: list[str] | None = None) -> int:
    """Route to the requested tool and return its exit code."""
    args = sys.argv[1:] if argv is None else argv
    if not args or args[0] in ("-h", "--help"):
        err_console.print(USAGE)
        return exit_codes.SUCCESS if args else exit_codes.GENERAL_ERROR

    tool, rest = args[0], args[1:]
    if tool == "venv":
        from devprep.cli.venv_app import main as venv_main

        return venv_main(rest)
    if tool == "catfiles":
        from devprep.cli.catalog_app import main as catalog_main

        return catalog_main(rest)
    if tool == "doctor":
        from devprep.cli.doctor import run_doctor

        return run_doctor()

    err_console.print(f"Unknown tool: '{tool}'")
    err_console.print(USAGE)
    return exit_codes.GENERAL_ERROR


if __name__ == "__main__":
    run_cli(main)
