"""Infrastructure layer — external program and filesystem integration.

This layer wraps every interaction with the Python runtime, ``pip``, the
``file`` program, and the local filesystem.  Every raw ``OSError`` must be
caught here and re-raised as a :class:`~devprep.exceptions.DevprepError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed adapters satisfying :mod:`devprep.core.protocols`.
"""

from devprep.infra.filesystem import CatalogWriter, LocalFileReader, LocalWorkspace
from devprep.infra.filetype import (
    FileCommandProbe,
    FileCommandStatus,
    detect_file_command,
    require_file_command,
)
from devprep.infra.finder import WalkFileFinder
from devprep.infra.runtime import (
    PipInstaller,
    VenvCreator,
    env_layout,
    locate_runtime,
    runtime_version,
)

__all__: list[str] = [
    "CatalogWriter",
    "FileCommandProbe",
    "FileCommandStatus",
    "LocalFileReader",
    "LocalWorkspace",
    "PipInstaller",
    "VenvCreator",
    "WalkFileFinder",
    "detect_file_command",
    "env_layout",
    "locate_runtime",
    "require_file_command",
    "runtime_version",
]
