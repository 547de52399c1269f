"""Argument validation for both tools.

Every function here is pure: it inspects a value, returns the normalized
form, or raises :class:`~devprep.exceptions.InvalidConfigError`.  The one
exception is :func:`validate_directory`, which asks the filesystem whether
a path is a directory before anything is written.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

from devprep.core.models import PurposeTable, format_purpose_keys
from devprep.exceptions import InvalidConfigError

_SEPARATORS: str = "/" + os.sep + (os.altsep or "")
_DEPTH_RE = re.compile(r"[0-9]+")

DOCUMENT_SUFFIX: str = ".md"
FALLBACK_DOCUMENT_NAME: str = "output"


# ---------------------------------------------------------------------------
# Environment tool
# ---------------------------------------------------------------------------

def validate_env_name(name: str) -> str:
    """Reject names that would not denote a fresh subdirectory."""
    if not name or not name.strip(_SEPARATORS) or name in (".", ".."):
        raise InvalidConfigError(
            f"Invalid environment directory name specified: '{name}'.",
        )
    return name


def validate_purpose(purpose: str | None, purposes: PurposeTable) -> str | None:
    """Accept ``None``/empty or a key of *purposes*."""
    if purpose and purpose not in purposes:
        raise InvalidConfigError(
            f"Invalid purpose specified: '{purpose}'. "
            f"Valid options are: {format_purpose_keys(purposes)}",
        )
    return purpose or None


# ---------------------------------------------------------------------------
# Catalog tool
# ---------------------------------------------------------------------------

def validate_directory(path: str) -> Path:
    directory = Path(path)
    if not directory.is_dir():
        raise InvalidConfigError(
            f"Directory '{path}' not found or is not a directory.",
        )
    return directory


def normalize_extension(extension: str) -> str:
    """Strip one leading dot; ``.py`` and ``py`` are equivalent."""
    normalized = extension[1:] if extension.startswith(".") else extension
    if not normalized:
        raise InvalidConfigError(
            "File extension cannot be empty after normalization.",
        )
    return normalized


def parse_depth(raw: str | None) -> int | None:
    """Parse ``--depth``; only plain non-negative decimal integers pass."""
    if raw is None:
        return None
    if not _DEPTH_RE.fullmatch(raw):
        raise InvalidConfigError(
            f"Invalid depth specified: '{raw}'. Must be a non-negative integer.",
        )
    return int(raw)


def default_output_name(directory: str) -> str:
    """Derive ``<basename>.md`` from *directory*.

    ``.`` and ``..`` resolve against the working directory first.  Falls
    back to ``output.md`` for an empty argument or the filesystem root.
    """
    basename = os.path.basename(os.path.abspath(directory)) if directory else ""
    if not basename:
        basename = FALLBACK_DOCUMENT_NAME
    return f"{basename}{DOCUMENT_SUFFIX}"
