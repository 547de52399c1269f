"""Infrastructure: Python runtime discovery, ``venv`` creation and ``pip``.

This module is the **only** place in the codebase that launches the
Python interpreter or the environment's installer.  Launch failures are
caught here and re-raised as typed
:class:`~devprep.exceptions.DevprepError` subclasses; a non-zero exit
status is returned as a :class:`~devprep.core.models.CommandResult` for
the core layer to judge.

Rules
-----
* Detection via :func:`shutil.which` only.
* No ``print()`` — installer output streams straight to the terminal.
"""

from __future__ import annotations

import platform
import shutil
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from devprep.core.models import CommandResult
from devprep.exceptions import (
    EnvironmentCreationError,
    InstallFailedError,
    MissingDependencyError,
)

PRIMARY_RUNTIME: str = "python3"
FALLBACK_RUNTIME: str = "python"


# ---------------------------------------------------------------------------
# Runtime discovery
# ---------------------------------------------------------------------------

def locate_runtime() -> Path:
    """Return the first of ``python3`` / ``python`` found on PATH.

    Raises
    ------
    MissingDependencyError
        When neither executable is available.
    """
    for name in (PRIMARY_RUNTIME, FALLBACK_RUNTIME):
        found = shutil.which(name)
        if found is not None:
            return Path(found)
    raise MissingDependencyError(
        f"Cannot find '{PRIMARY_RUNTIME}' or '{FALLBACK_RUNTIME}' "
        "executable in your PATH.",
        hint="Install Python 3 and make sure it is on your PATH.",
    )


def runtime_version(python: Path) -> str:
    """Return ``<python> --version`` output, or ``"unknown"``."""
    try:
        proc = subprocess.run(
            [str(python), "--version"],
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError:
        return "unknown"
    # Python 2 printed its version on stderr.
    return (proc.stdout or proc.stderr).strip() or "unknown"


# ---------------------------------------------------------------------------
# Environment layout
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class EnvLayout:
    """Platform-specific locations inside a virtual environment."""

    pip: Path
    activate: Path

    @property
    def activate_command(self) -> str:
        """Shell command that activates the environment."""
        if self.activate.suffix == ".bat":
            return str(self.activate)
        return f'source "{self.activate}"'


def env_layout(env_path: Path) -> EnvLayout:
    """Describe *env_path* for the current operating system."""
    if platform.system().lower() == "windows":
        scripts = env_path / "Scripts"
        return EnvLayout(
            pip=scripts / "pip.exe",
            activate=scripts / "activate.bat",
        )
    scripts = env_path / "bin"
    return EnvLayout(
        pip=scripts / "pip",
        activate=scripts / "activate",
    )


# ---------------------------------------------------------------------------
# Protocol implementations
# ---------------------------------------------------------------------------

class VenvCreator:
    """Concrete :class:`EnvironmentCreator` running ``python -m venv``."""

    def create(self, python: Path, env_path: Path) -> CommandResult:
        try:
            proc = subprocess.run(
                [str(python), "-m", "venv", str(env_path)],
                stderr=subprocess.PIPE,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise EnvironmentCreationError(
                f"Failed to create Python environment at '{env_path}'.",
                hint=str(exc),
            ) from exc
        return CommandResult(returncode=proc.returncode, output=(proc.stderr or "").strip())


class PipInstaller:
    """Concrete :class:`PackageInstaller` running the environment's ``pip``.

    Installer output is not captured; ``-qq`` silences it unless
    *verbose* is requested.
    """

    @staticmethod
    def build_command(pip: Path, packages: Sequence[str], *, verbose: bool) -> list[str]:
        command = [str(pip), "install"]
        if not verbose:
            command.append("-qq")
        command.extend(packages)
        return command

    def install(
        self,
        env_path: Path,
        packages: Sequence[str],
        *,
        verbose: bool = False,
    ) -> CommandResult:
        pip = env_layout(env_path).pip
        if not pip.is_file():
            raise InstallFailedError(
                f"Cannot find pip executable at '{pip}'. Installation skipped.",
                hint="Recreate the environment; it may be incomplete.",
            )
        try:
            proc = subprocess.run(
                self.build_command(pip, packages, verbose=verbose),
                check=False,
            )
        except OSError as exc:
            raise InstallFailedError(
                f"Failed to launch '{pip}': {exc}",
            ) from exc
        return CommandResult(returncode=proc.returncode)
