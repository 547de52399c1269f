"""Shared pytest fixtures and configuration for the devprep test suite.

Guidelines
----------
* No test creates a real virtual environment or runs pip.
* ``subprocess.run`` and ``shutil.which`` are mocked at the infra boundary.
* Catalog tests work inside ``tmp_path`` only.
* Core tests use in-memory fakes for every protocol.
"""

from __future__ import annotations

import pytest


class RecordingReporter:
    """In-memory :class:`~devprep.core.protocols.Reporter`."""

    def __init__(self) -> None:
        self.infos: list[str] = []
        self.notices: list[str] = []
        self.warnings: list[str] = []
        self.rules: int = 0

    def info(self, message: str) -> None:
        self.infos.append(message)

    def notice(self, message: str) -> None:
        self.notices.append(message)

    def warning(self, message: str) -> None:
        self.warnings.append(message)

    def rule(self) -> None:
        self.rules += 1


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()
