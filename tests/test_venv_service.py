"""Tests for the environment preparation pipeline (core/venv_service.py).

Every collaborator is an in-memory fake — no directories are created and
no process is launched.

Coverage:
* Fresh environment creation.
* Existing directory: decline (no changes) and accept (remove + recreate).
* Creation failure → EnvironmentCreationError.
* Installation: no-op when empty, single batch call, fatal failure.
* Manifest: sorted/deduplicated content, write failure → warning.
* Outcome mapping for every terminal state.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from devprep.core.models import CommandResult, SetupOutcome, VenvConfig
from devprep.core.venv_service import RECREATE_PROMPT, VenvSetupService
from devprep.exceptions import (
    EnvironmentCreationError,
    InstallFailedError,
    ManifestWriteError,
)
from tests.conftest import RecordingReporter

PYTHON = Path("/usr/bin/python3")


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------

class FakeCreator:
    def __init__(self, returncode: int = 0, output: str = "") -> None:
        self.returncode = returncode
        self.output = output
        self.calls: list[tuple[Path, Path]] = []

    def create(self, python: Path, env_path: Path) -> CommandResult:
        self.calls.append((python, env_path))
        return CommandResult(returncode=self.returncode, output=self.output)


class FakeInstaller:
    def __init__(self, returncode: int = 0) -> None:
        self.returncode = returncode
        self.calls: list[tuple[Path, tuple[str, ...], bool]] = []

    def install(
        self,
        env_path: Path,
        packages: Sequence[str],
        *,
        verbose: bool = False,
    ) -> CommandResult:
        self.calls.append((env_path, tuple(packages), verbose))
        return CommandResult(returncode=self.returncode)


class FakeWorkspace:
    def __init__(self, existing: set[Path] | None = None, *, writable: bool = True) -> None:
        self.existing: set[Path] = set(existing or ())
        self.writable = writable
        self.removed: list[Path] = []
        self.files: dict[Path, tuple[str, ...]] = {}

    def is_dir(self, path: Path) -> bool:
        return path in self.existing

    def remove_tree(self, path: Path) -> None:
        self.removed.append(path)
        self.existing.discard(path)

    def write_lines(self, path: Path, lines: Sequence[str]) -> None:
        if not self.writable:
            raise ManifestWriteError(f"Failed to create/update '{path}': denied.")
        self.files[path] = tuple(lines)


class FakeConfirm:
    def __init__(self, answer: bool) -> None:
        self.answer = answer
        self.questions: list[str] = []

    def __call__(self, question: str) -> bool:
        self.questions.append(question)
        return self.answer


def _service(
    reporter: RecordingReporter,
    *,
    creator: FakeCreator | None = None,
    installer: FakeInstaller | None = None,
    workspace: FakeWorkspace | None = None,
    confirm: FakeConfirm | None = None,
) -> VenvSetupService:
    return VenvSetupService(
        creator=creator or FakeCreator(),
        installer=installer or FakeInstaller(),
        workspace=workspace or FakeWorkspace(),
        reporter=reporter,
        confirm=confirm or FakeConfirm(False),
    )


# ---------------------------------------------------------------------------
# prepare_environment
# ---------------------------------------------------------------------------

class TestPrepareEnvironment:
    def test_creates_fresh_environment(self, reporter: RecordingReporter) -> None:
        creator = FakeCreator()
        confirm = FakeConfirm(False)
        service = _service(reporter, creator=creator, confirm=confirm)

        assert service.prepare_environment(PYTHON, Path(".venv")) is True
        assert creator.calls == [(PYTHON, Path(".venv"))]
        assert confirm.questions == []

    def test_decline_leaves_existing_directory(self, reporter: RecordingReporter) -> None:
        creator = FakeCreator()
        workspace = FakeWorkspace({Path(".venv")})
        confirm = FakeConfirm(False)
        service = _service(reporter, creator=creator, workspace=workspace, confirm=confirm)

        assert service.prepare_environment(PYTHON, Path(".venv")) is False
        assert confirm.questions == [RECREATE_PROMPT]
        assert workspace.removed == []
        assert creator.calls == []
        assert any("without making changes" in msg for msg in reporter.infos)

    def test_accept_removes_then_recreates(self, reporter: RecordingReporter) -> None:
        creator = FakeCreator()
        workspace = FakeWorkspace({Path(".venv")})
        service = _service(
            reporter, creator=creator, workspace=workspace, confirm=FakeConfirm(True),
        )

        assert service.prepare_environment(PYTHON, Path(".venv")) is True
        assert workspace.removed == [Path(".venv")]
        assert creator.calls == [(PYTHON, Path(".venv"))]

    def test_creation_failure_raises(self, reporter: RecordingReporter) -> None:
        service = _service(reporter, creator=FakeCreator(returncode=1))
        with pytest.raises(EnvironmentCreationError, match="Failed to create"):
            service.prepare_environment(PYTHON, Path(".venv"))

    def test_creation_diagnostics_become_hint(self, reporter: RecordingReporter) -> None:
        creator = FakeCreator(returncode=1, output="ensurepip is not available")
        service = _service(reporter, creator=creator)
        with pytest.raises(EnvironmentCreationError) as excinfo:
            service.prepare_environment(PYTHON, Path(".venv"))
        assert excinfo.value.hint == "ensurepip is not available"


# ---------------------------------------------------------------------------
# install_packages
# ---------------------------------------------------------------------------

class TestInstallPackages:
    def test_empty_list_is_noop(self, reporter: RecordingReporter) -> None:
        installer = FakeInstaller()
        _service(reporter, installer=installer).install_packages(Path(".venv"), ())
        assert installer.calls == []

    def test_single_batch_call(self, reporter: RecordingReporter) -> None:
        installer = FakeInstaller()
        service = _service(reporter, installer=installer)
        service.install_packages(Path("env"), ("a", "b", "a"), verbose=True)
        assert installer.calls == [(Path("env"), ("a", "b", "a"), True)]

    def test_failure_is_fatal(self, reporter: RecordingReporter) -> None:
        service = _service(reporter, installer=FakeInstaller(returncode=1))
        with pytest.raises(InstallFailedError, match="package installation failed"):
            service.install_packages(Path("env"), ("a",))


# ---------------------------------------------------------------------------
# write_manifest
# ---------------------------------------------------------------------------

class TestWriteManifest:
    def test_writes_sorted_unique_entries(self, reporter: RecordingReporter) -> None:
        workspace = FakeWorkspace()
        service = _service(reporter, workspace=workspace)

        assert service.write_manifest(Path("requirements.txt"), ("A", "B", "B", "C"))
        assert workspace.files[Path("requirements.txt")] == ("A", "B", "C")

    def test_failure_becomes_warning(self, reporter: RecordingReporter) -> None:
        service = _service(reporter, workspace=FakeWorkspace(writable=False))

        assert service.write_manifest(Path("requirements.txt"), ("A",)) is False
        assert any("failed to generate requirements" in w for w in reporter.warnings)


# ---------------------------------------------------------------------------
# run
# ---------------------------------------------------------------------------

class TestRun:
    def test_no_packages(self, reporter: RecordingReporter) -> None:
        installer = FakeInstaller()
        workspace = FakeWorkspace()
        service = _service(reporter, installer=installer, workspace=workspace)

        outcome = service.run(VenvConfig(), PYTHON, ())
        assert outcome is SetupOutcome.ENVIRONMENT_READY
        assert installer.calls == []
        assert workspace.files == {}

    def test_purpose_and_custom_packages(self, reporter: RecordingReporter) -> None:
        installer = FakeInstaller()
        workspace = FakeWorkspace()
        service = _service(reporter, installer=installer, workspace=workspace)
        config = VenvConfig(env_name="env", custom_packages="B C", verbose=False)

        outcome = service.run(config, PYTHON, ("A", "B", "B", "C"))
        assert outcome is SetupOutcome.MANIFEST_WRITTEN
        assert installer.calls == [(Path("env"), ("A", "B", "B", "C"), False)]
        assert workspace.files[config.manifest_path] == ("A", "B", "C")

    def test_declined(self, reporter: RecordingReporter) -> None:
        installer = FakeInstaller()
        workspace = FakeWorkspace({Path(".venv")})
        service = _service(reporter, installer=installer, workspace=workspace)

        outcome = service.run(VenvConfig(), PYTHON, ("A",))
        assert outcome is SetupOutcome.ABORTED_BY_USER
        assert installer.calls == []
        assert workspace.files == {}
        assert Path(".venv") in workspace.existing

    def test_manifest_warning(self, reporter: RecordingReporter) -> None:
        service = _service(reporter, workspace=FakeWorkspace(writable=False))
        outcome = service.run(VenvConfig(), PYTHON, ("A",))
        assert outcome is SetupOutcome.MANIFEST_WARNING

    def test_install_failure_skips_manifest(self, reporter: RecordingReporter) -> None:
        workspace = FakeWorkspace()
        service = _service(
            reporter, installer=FakeInstaller(returncode=2), workspace=workspace,
        )
        with pytest.raises(InstallFailedError):
            service.run(VenvConfig(), PYTHON, ("A",))
        assert workspace.files == {}
