"""Custom exception hierarchy for devprep.

All exceptions that cross layer boundaries must inherit from
:class:`DevprepError`.  Raw ``OSError`` and ``subprocess`` failures must
NEVER propagate beyond the infrastructure layer — they must be caught and
re-raised as a typed subclass defined here.

Hierarchy
---------
DevprepError
├── InvalidConfigError
├── MissingDependencyError
├── EnvironmentCreationError
├── InstallFailedError
├── OutputWriteError
│   └── ManifestWriteError
└── FileProcessingError
    ├── UnreadableFileError
    └── ClassificationError
"""

from __future__ import annotations


class DevprepError(Exception):
    """Base exception for all devprep errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Argument validation ---------------------------------------------------

class InvalidConfigError(DevprepError):
    """Raised when a flag or positional argument fails validation."""


# --- Tooling ---------------------------------------------------------------

class MissingDependencyError(DevprepError):
    """Raised when a required external program or library is not available."""


# --- Environment tool ------------------------------------------------------

class EnvironmentCreationError(DevprepError):
    """Raised when the virtual environment cannot be (re)created."""


class InstallFailedError(DevprepError):
    """Raised when the package installer reports failure.

    Always fatal for the run; the environment created so far is left
    in place.
    """


# --- Output files ----------------------------------------------------------

class OutputWriteError(DevprepError):
    """Raised when an output file cannot be created or written."""


class ManifestWriteError(OutputWriteError):
    """Raised when the requirements manifest cannot be written."""


# --- Per-file catalog problems ---------------------------------------------

class FileProcessingError(DevprepError):
    """Raised for a single catalog candidate; never aborts a traversal."""

    def __init__(self, path: str, message: str, *, hint: str | None = None) -> None:
        super().__init__(message, hint=hint)
        self.path: str = path


class UnreadableFileError(FileProcessingError):
    """Raised when a discovered file cannot be read."""


class ClassificationError(FileProcessingError):
    """Raised when the content type of a file cannot be determined."""
