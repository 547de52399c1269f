"""Infrastructure: MIME-type probing through the ``file`` program.

Rules
-----
* Detection of the program via :func:`shutil.which` only.
* One ``file -b --mime-type`` call per probed path.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

from devprep.exceptions import ClassificationError, MissingDependencyError

FILE_COMMAND: str = "file"


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FileCommandStatus:
    """Result of a ``file`` program detection probe.

    Attributes
    ----------
    found : bool
        Whether ``file`` was located on PATH.
    path : Path | None
        Absolute path to the binary, or ``None``.
    install_commands : tuple[str, ...]
        Suggested shell commands for installing ``file`` on the current
        platform.  Empty when it is already present.
    """

    found: bool
    path: Path | None
    install_commands: tuple[str, ...]


def detect_file_command() -> FileCommandStatus:
    """Probe the system for the ``file`` program."""
    result = shutil.which(FILE_COMMAND)
    if result is not None:
        return FileCommandStatus(
            found=True,
            path=Path(result).resolve(),
            install_commands=(),
        )
    return FileCommandStatus(
        found=False,
        path=None,
        install_commands=_platform_install_commands(),
    )


def require_file_command() -> Path:
    """Locate ``file`` or raise :class:`MissingDependencyError`."""
    status = detect_file_command()
    if not status.found or status.path is None:
        hint_lines: list[str] = []
        if status.install_commands:
            hint_lines.append("Install it using one of:")
            hint_lines.extend(f"  {cmd}" for cmd in status.install_commands)
        raise MissingDependencyError(
            "'file' command is required but not found in PATH.",
            hint="\n".join(hint_lines) if hint_lines else None,
        )
    return status.path


def _platform_install_commands() -> tuple[str, ...]:
    """Return install commands appropriate for the current OS."""
    system = platform.system().lower()
    if system == "linux":
        return (
            "sudo apt install file",
            "sudo dnf install file",
            "sudo pacman -S file",
        )
    if system == "darwin":
        return ("brew install libmagic",)
    if system == "windows":
        return ("choco install file",)
    return ("Please install 'file' from https://www.darwinsys.com/file/",)


# ---------------------------------------------------------------------------
# Protocol implementation
# ---------------------------------------------------------------------------

class FileCommandProbe:
    """Concrete :class:`FileTypeProbe` backed by ``file -b --mime-type``."""

    def __init__(self, executable: Path | str = FILE_COMMAND) -> None:
        self._executable: str = str(executable)

    def probe(self, path: str) -> str:
        """Return the MIME type ``file`` reports for *path*.

        Raises
        ------
        ClassificationError
            When ``file`` cannot be launched, fails, or prints nothing.
        """
        try:
            proc = subprocess.run(
                [self._executable, "-b", "--mime-type", "--", path],
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise ClassificationError(
                path,
                f"Cannot determine type of '{path}': {exc}.",
            ) from exc

        mime_type = proc.stdout.strip()
        if proc.returncode != 0 or not mime_type:
            raise ClassificationError(
                path,
                f"Cannot determine type of '{path}'.",
                hint=proc.stderr.strip() or None,
            )
        return mime_type
