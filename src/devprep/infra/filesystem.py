"""Infrastructure: local filesystem adapters.

Every ``OSError`` raised here is re-raised as a typed
:class:`~devprep.exceptions.DevprepError` subclass naming the path.
"""

from __future__ import annotations

import os
import shutil
from collections.abc import Sequence
from pathlib import Path
from typing import BinaryIO

from devprep.exceptions import (
    EnvironmentCreationError,
    ManifestWriteError,
    OutputWriteError,
    UnreadableFileError,
)


class LocalWorkspace:
    """Concrete :class:`Workspace` operating on the real filesystem."""

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def remove_tree(self, path: Path) -> None:
        """Remove *path*; a symlink is unlinked, its target left alone."""
        try:
            if path.is_symlink():
                path.unlink()
            else:
                shutil.rmtree(path)
        except OSError as exc:
            raise EnvironmentCreationError(
                f"Failed to remove existing environment at '{path}'. "
                "Check permissions.",
                hint=str(exc),
            ) from exc

    def write_lines(self, path: Path, lines: Sequence[str]) -> None:
        try:
            with path.open("w", encoding="utf-8") as handle:
                handle.writelines(f"{line}\n" for line in lines)
        except OSError as exc:
            raise ManifestWriteError(
                f"Failed to create/update '{path}': {exc.strerror or exc}.",
            ) from exc


class LocalFileReader:
    """Concrete :class:`FileReader` for catalog candidates."""

    def ensure_readable(self, path: str) -> None:
        if not os.access(path, os.R_OK):
            raise UnreadableFileError(path, f"Cannot read file '{path}'.")

    def read_bytes(self, path: str) -> bytes:
        try:
            with open(path, "rb") as handle:
                return handle.read()
        except OSError as exc:
            raise UnreadableFileError(
                path,
                f"Cannot read file '{path}'.",
                hint=exc.strerror,
            ) from exc


class CatalogWriter:
    """Append-only catalog document, truncated when opened.

    Usage::

        with CatalogWriter(Path("project.md")) as sink:
            service.run(config, sink)
    """

    def __init__(self, path: Path) -> None:
        self._path: Path = path
        self._handle: BinaryIO | None = None

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> CatalogWriter:
        self.open()
        return self

    def __exit__(self, *_args: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def open(self) -> None:
        """Create or truncate the document.

        Raises
        ------
        OutputWriteError
            When the file cannot be opened for writing.
        """
        if self._handle is not None:
            return
        try:
            self._handle = self._path.open("wb")
        except OSError as exc:
            raise OutputWriteError(
                f"Cannot write to output file '{self._path}'. "
                "Check permissions or path.",
                hint=exc.strerror,
            ) from exc

    def close(self) -> None:
        """Close the document (idempotent)."""
        if self._handle is not None:
            self._handle.close()
            self._handle = None

    def append(self, chunk: bytes) -> None:
        if self._handle is None:
            raise OutputWriteError(f"Output file '{self._path}' is not open.")
        try:
            self._handle.write(chunk)
        except OSError as exc:
            raise OutputWriteError(
                f"Cannot write to output file '{self._path}'.",
                hint=exc.strerror,
            ) from exc
