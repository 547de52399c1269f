"""Domain models for devprep.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O, zero dependencies on
external packages, and are constructed once by the CLI layer.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType


# ---------------------------------------------------------------------------
# Purpose table
# ---------------------------------------------------------------------------

PurposeTable = Mapping[str, tuple[str, ...]]
"""Read-only mapping of purpose key → ordered package names."""


def default_purposes() -> PurposeTable:
    """Return the built-in purpose table.

    The mapping is wrapped in :class:`~types.MappingProxyType` so callers
    cannot mutate it.
    """
    return MappingProxyType(
        {
            "data": ("jupyterlab", "pandas", "numpy", "matplotlib", "seaborn"),
            "bs4": ("requests", "beautifulsoup4", "lxml"),
        }
    )


def format_purpose_keys(purposes: PurposeTable) -> str:
    """Render valid keys as ``'data' 'bs4'`` for messages and help text."""
    return " ".join(f"'{key}'" for key in purposes)


# ---------------------------------------------------------------------------
# Environment tool
# ---------------------------------------------------------------------------

MANIFEST_PATH: Path = Path("requirements.txt")
"""Fixed location of the generated manifest, relative to the working directory."""


@dataclass(frozen=True, slots=True)
class VenvConfig:
    """Validated settings for a single ``prep-venv`` run."""

    env_name: str = ".venv"
    """Directory name of the environment, relative to the working directory."""

    purpose: str | None = None
    """Selected purpose key, or ``None``."""

    custom_packages: str = ""
    """Raw space-separated package list given with ``--install``."""

    verbose: bool = False
    """Show the installer's full output."""

    manifest_path: Path = MANIFEST_PATH

    @property
    def env_path(self) -> Path:
        return Path(self.env_name)


class SetupOutcome(enum.Enum):
    """Terminal state of an environment preparation run."""

    ABORTED_BY_USER = "aborted_by_user"
    ENVIRONMENT_READY = "environment_ready"
    MANIFEST_WRITTEN = "manifest_written"
    MANIFEST_WARNING = "manifest_warning"


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of one external command invocation.

    *output* holds whatever diagnostics the command left behind (stderr),
    surfaced as the error hint on failure.
    """

    returncode: int
    output: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


# ---------------------------------------------------------------------------
# Catalog tool
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CatalogConfig:
    """Validated settings for a single ``catfiles`` run."""

    directory: Path
    """Root directory to search."""

    extension: str
    """File extension without the leading dot (e.g. ``py``)."""

    output: Path
    """Destination Markdown document."""

    ignore_pattern: str | None = None
    """Glob of file names to exclude, or ``None``."""

    max_depth: int | None = None
    """Maximum recursion depth, ``None`` for unlimited."""


@dataclass(frozen=True, slots=True)
class CatalogSummary:
    """Counters collected while building a catalog document."""

    found: int
    """Files matching the traversal criteria."""

    written: int
    """Files classified as text and emitted to the document."""
