"""Core / service layer — validation, data transformations, orchestration.

Rules
-----
* No ``print()`` calls.
* No subprocess calls and no direct file writes.
* No imports from ``cli`` or ``infra``.
* Every side effect goes through a protocol from :mod:`devprep.core.protocols`.
"""

from devprep.core.catalog_service import CatalogService
from devprep.core.models import (
    CatalogConfig,
    CatalogSummary,
    CommandResult,
    SetupOutcome,
    VenvConfig,
    default_purposes,
)
from devprep.core.venv_service import VenvSetupService

__all__: list[str] = [
    "CatalogConfig",
    "CatalogService",
    "CatalogSummary",
    "CommandResult",
    "SetupOutcome",
    "VenvConfig",
    "VenvSetupService",
    "default_purposes",
]
