"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters and the CLI must
satisfy.  Core code depends ONLY on these protocols — never on concrete
implementations — so every external program can be replaced by a fake in
tests.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from pathlib import Path
from typing import Protocol

from devprep.core.models import CommandResult

Confirm = Callable[[str], bool]
"""Ask the operator a yes/no question; ``True`` means yes."""


# ---------------------------------------------------------------------------
# Reporting
# ---------------------------------------------------------------------------

class Reporter(Protocol):
    """Sink for user-facing progress messages.

    Implementations decide where each kind of message goes; the core
    layer only chooses the kind.
    """

    def info(self, message: str) -> None:
        """Normal progress, written to the standard output stream."""
        ...  # pragma: no cover

    def notice(self, message: str) -> None:
        """Unprefixed diagnostic, written to the diagnostic stream."""
        ...  # pragma: no cover

    def warning(self, message: str) -> None:
        """Recoverable problem, written to the diagnostic stream."""
        ...  # pragma: no cover

    def rule(self) -> None:
        """Section separator."""
        ...  # pragma: no cover


# ---------------------------------------------------------------------------
# Environment tool
# ---------------------------------------------------------------------------

class EnvironmentCreator(Protocol):
    """Contract for creating an isolated package environment."""

    def create(self, python: Path, env_path: Path) -> CommandResult:
        """Create a fresh environment at *env_path* using *python*.

        Raises
        ------
        EnvironmentCreationError
            When the creation command cannot be launched at all.
        """
        ...  # pragma: no cover


class PackageInstaller(Protocol):
    """Contract for installing packages into an existing environment."""

    def install(
        self,
        env_path: Path,
        packages: Sequence[str],
        *,
        verbose: bool = False,
    ) -> CommandResult:
        """Install every name in *packages* with a single installer call.

        Raises
        ------
        InstallFailedError
            When the environment has no installer or it cannot be launched.
        """
        ...  # pragma: no cover


class Workspace(Protocol):
    """Filesystem operations needed by the environment tool."""

    def is_dir(self, path: Path) -> bool:
        ...  # pragma: no cover

    def remove_tree(self, path: Path) -> None:
        """Delete *path* recursively.

        Raises
        ------
        EnvironmentCreationError
            When the tree cannot be removed.
        """
        ...  # pragma: no cover

    def write_lines(self, path: Path, lines: Sequence[str]) -> None:
        """Truncate *path* and write one entry per line.

        Raises
        ------
        ManifestWriteError
            When the file cannot be written.
        """
        ...  # pragma: no cover


# ---------------------------------------------------------------------------
# Catalog tool
# ---------------------------------------------------------------------------

class FileFinder(Protocol):
    """Contract for enumerating candidate files under a directory."""

    def find(
        self,
        root: Path,
        extension: str,
        *,
        ignore_pattern: str | None = None,
        max_depth: int | None = None,
    ) -> Iterator[str]:
        """Yield matching regular-file paths, single pass, unsorted."""
        ...  # pragma: no cover


class FileTypeProbe(Protocol):
    """Contract for best-effort content-type detection."""

    def probe(self, path: str) -> str:
        """Return a MIME type label such as ``text/x-python``.

        Raises
        ------
        ClassificationError
            When the type cannot be determined.
        """
        ...  # pragma: no cover


class FileReader(Protocol):
    """Contract for reading candidate files."""

    def ensure_readable(self, path: str) -> None:
        """Raise :class:`UnreadableFileError` unless *path* can be read."""
        ...  # pragma: no cover

    def read_bytes(self, path: str) -> bytes:
        """Return the raw content of *path*.

        Raises
        ------
        UnreadableFileError
            When the file cannot be read.
        """
        ...  # pragma: no cover


class CatalogSink(Protocol):
    """Append-only destination for rendered catalog entries."""

    def append(self, chunk: bytes) -> None:
        ...  # pragma: no cover
