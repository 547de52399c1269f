"""``prep-venv`` — create a virtual environment with a curated package set.

Architecture notes
------------------
* No business logic lives here — validation and orchestration are
  delegated to :mod:`devprep.core`, external programs to
  :mod:`devprep.infra`.
* All output goes through the console proxies; nothing is printed
  directly.
* :func:`main` returns an exit code; :func:`cli` is the console-script
  error boundary.
"""

from __future__ import annotations

import argparse

from devprep.cli import exit_codes
from devprep.cli.boundary import run_cli
from devprep.cli.console import console
from devprep.cli.prompts import confirm
from devprep.cli.reporter import ConsoleReporter
from devprep.core.models import (
    PurposeTable,
    SetupOutcome,
    VenvConfig,
    default_purposes,
    format_purpose_keys,
)
from devprep.core.packages import build_package_list
from devprep.core.protocols import Confirm
from devprep.core.validation import validate_env_name, validate_purpose
from devprep.core.venv_service import VenvSetupService
from devprep.exceptions import InvalidConfigError
from devprep.infra.filesystem import LocalWorkspace
from devprep.infra.runtime import (
    PipInstaller,
    VenvCreator,
    env_layout,
    locate_runtime,
    runtime_version,
)
from devprep.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser(purposes: PurposeTable) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prep-venv",
        description=(
            "Creates or prepares a Python virtual environment in the "
            "current directory."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-e",
        "--env-name",
        metavar="NAME",
        default=".venv",
        help="Set environment directory name (default: .venv).",
    )
    parser.add_argument(
        "-p",
        "--purpose",
        metavar="TYPE",
        default=None,
        help=(
            "Specify purpose for predefined packages & requirements.txt. "
            f"Valid types: {format_purpose_keys(purposes)}"
        ),
    )
    parser.add_argument(
        "-i",
        "--install",
        metavar="PACKAGES",
        default="",
        help="Specify space-separated packages to install & add to reqs.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show verbose output from 'pip install'. Default is quiet.",
    )
    return parser


def parse_config(
    argv: list[str] | None,
    purposes: PurposeTable,
) -> VenvConfig:
    """Parse and validate *argv* into an immutable :class:`VenvConfig`.

    Raises
    ------
    InvalidConfigError
        With the usage line attached as hint.
    """
    parser = _build_parser(purposes)
    args = parser.parse_args(argv)
    try:
        env_name = validate_env_name(args.env_name)
        purpose = validate_purpose(args.purpose, purposes)
    except InvalidConfigError as exc:
        exc.hint = exc.hint or parser.format_usage().strip()
        raise
    return VenvConfig(
        env_name=env_name,
        purpose=purpose,
        custom_packages=args.install,
        verbose=args.verbose,
    )


# ---------------------------------------------------------------------------
# Reporting helpers
# ---------------------------------------------------------------------------

def _print_plan(config: VenvConfig, packages: tuple[str, ...]) -> None:
    console.print("---")
    console.print(f"Target environment path: '{config.env_path}'")
    if config.purpose:
        console.print(f"Selected purpose:       '{config.purpose}'")
    if config.custom_packages:
        console.print(f"Custom packages:        '{config.custom_packages}'")
    if packages:
        console.print(f"Packages to install:    '{' '.join(packages)}'")
        console.print(f"Requirements file:      '{config.manifest_path}'")
    console.print("---")


def _print_activation(config: VenvConfig) -> None:
    layout = env_layout(config.env_path)
    console.print()
    console.print(
        "Environment setup complete. To activate it in your current shell, run:",
        style="bold green",
    )
    console.print(f"  {layout.activate_command}")
    console.print()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    confirm_fn: Confirm = confirm,
) -> int:
    """Run the ``prep-venv`` tool.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    confirm_fn:
        Yes/no prompt used before replacing an existing environment.

    Returns
    -------
    int
        OS process exit code.
    """
    purposes = default_purposes()
    config = parse_config(argv, purposes)
    packages = build_package_list(config.purpose, config.custom_packages, purposes)

    python = locate_runtime()
    console.print(f"Using Python executable: {runtime_version(python)}")
    _print_plan(config, packages)

    service = VenvSetupService(
        creator=VenvCreator(),
        installer=PipInstaller(),
        workspace=LocalWorkspace(),
        reporter=ConsoleReporter(),
        confirm=confirm_fn,
    )
    outcome = service.run(config, python, packages)
    if outcome is SetupOutcome.ABORTED_BY_USER:
        return exit_codes.SUCCESS

    _print_activation(config)
    return exit_codes.SUCCESS


def cli() -> None:
    """Console-script entry point for ``prep-venv``."""
    run_cli(main)
