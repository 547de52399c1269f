"""Core environment service — orchestrates the ``prep-venv`` pipeline.

This service delegates every side effect to collaborators injected at
construction time:

* :class:`~devprep.core.protocols.EnvironmentCreator` — builds the env.
* :class:`~devprep.core.protocols.PackageInstaller` — installs packages.
* :class:`~devprep.core.protocols.Workspace` — directory removal and
  manifest writes.
* :data:`~devprep.core.protocols.Confirm` — operator confirmation.
* :class:`~devprep.core.protocols.Reporter` — progress messages.

Guarantees
----------
* Pure orchestration — no ``print()``, no direct filesystem access.
* Each step runs at most once; a failed step stops the run without
  undoing earlier steps.
* Only :class:`~devprep.exceptions.DevprepError` subclasses escape.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from devprep.core.models import SetupOutcome, VenvConfig
from devprep.core.packages import manifest_entries
from devprep.core.protocols import (
    Confirm,
    EnvironmentCreator,
    PackageInstaller,
    Reporter,
    Workspace,
)
from devprep.exceptions import (
    EnvironmentCreationError,
    InstallFailedError,
    ManifestWriteError,
)

RECREATE_PROMPT: str = "Remove existing environment and recreate?"


class VenvSetupService:
    """Stateless service that drives environment preparation.

    Parameters
    ----------
    creator:
        Any object satisfying the :class:`EnvironmentCreator` protocol.
    installer:
        Any object satisfying the :class:`PackageInstaller` protocol.
    workspace:
        Any object satisfying the :class:`Workspace` protocol.
    reporter:
        Destination for progress messages.
    confirm:
        Yes/no prompt used before deleting an existing environment.
    """

    def __init__(
        self,
        creator: EnvironmentCreator,
        installer: PackageInstaller,
        workspace: Workspace,
        reporter: Reporter,
        confirm: Confirm,
    ) -> None:
        self._creator: EnvironmentCreator = creator
        self._installer: PackageInstaller = installer
        self._workspace: Workspace = workspace
        self._reporter: Reporter = reporter
        self._confirm: Confirm = confirm

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def prepare_environment(self, python: Path, env_path: Path) -> bool:
        """Ensure a fresh environment exists at *env_path*.

        Returns
        -------
        bool
            ``False`` when the operator declined to replace an existing
            directory; nothing was changed in that case.

        Raises
        ------
        EnvironmentCreationError
            When the old tree cannot be removed or creation fails.
        """
        if self._workspace.is_dir(env_path):
            self._reporter.info(f"Environment directory '{env_path}' already exists.")
            if not self._confirm(RECREATE_PROMPT):
                self._reporter.info(
                    "Exiting without making changes to the existing environment."
                )
                return False
            self._reporter.info(f"Removing existing environment '{env_path}'...")
            self._workspace.remove_tree(env_path)
            self._reporter.info("Existing environment removed successfully.")

        self._reporter.info(f"Creating new environment at '{env_path}'...")
        result = self._creator.create(python, env_path)
        if not result.ok:
            raise EnvironmentCreationError(
                f"Failed to create Python environment at '{env_path}'.",
                hint=result.output or None,
            )
        self._reporter.info(f"Environment created successfully at '{env_path}'.")
        return True

    def install_packages(
        self,
        env_path: Path,
        packages: Sequence[str],
        *,
        verbose: bool = False,
    ) -> None:
        """Install *packages* in one batch; no-op when empty.

        Raises
        ------
        InstallFailedError
            When the installer is missing or reports failure.  Always fatal.
        """
        if not packages:
            return

        self._reporter.rule()
        self._reporter.info("Installing specified packages...")
        result = self._installer.install(env_path, packages, verbose=verbose)
        if not result.ok:
            raise InstallFailedError(
                "Environment created, but package installation failed.",
                hint="Re-run with --verbose to see the installer output.",
            )
        self._reporter.info("Packages installed successfully.")

    def write_manifest(self, path: Path, packages: Sequence[str]) -> bool:
        """Write the sorted, deduplicated package list to *path*.

        Returns ``False`` (after a warning) when the file cannot be
        written; the environment and its packages stay intact.
        """
        self._reporter.rule()
        self._reporter.info(f"Generating '{path}' with specified packages...")
        try:
            self._workspace.write_lines(path, manifest_entries(packages))
        except ManifestWriteError as exc:
            self._reporter.warning(str(exc))
            self._reporter.warning(
                "Packages installed, but failed to generate requirements file."
            )
            return False
        self._reporter.info(f"'{path}' created/updated successfully.")
        return True

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(
        self,
        config: VenvConfig,
        python: Path,
        packages: Sequence[str],
    ) -> SetupOutcome:
        """Execute the whole pipeline for an already validated *config*."""
        if not self.prepare_environment(python, config.env_path):
            return SetupOutcome.ABORTED_BY_USER

        if not packages:
            return SetupOutcome.ENVIRONMENT_READY

        self._reporter.info(
            "Proceeding with package installation and requirements generation..."
        )
        self.install_packages(config.env_path, packages, verbose=config.verbose)
        if not self.write_manifest(config.manifest_path, packages):
            return SetupOutcome.MANIFEST_WARNING

        self._reporter.rule()
        self._reporter.info("Package setup completed successfully.")
        return SetupOutcome.MANIFEST_WRITTEN
