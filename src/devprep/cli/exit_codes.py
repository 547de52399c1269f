"""Process exit statuses shared by ``prep-venv``, ``catfiles`` and ``doctor``.

``argparse`` exits with 2 on its own for malformed command lines, before
any of these apply.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Run finished, including a declined recreate or a catalog with no matches."""

GENERAL_ERROR: int = 1
"""A DevprepError stopped the run; its message and hint were printed."""

UNEXPECTED_ERROR: int = 2
"""Any other exception reached :func:`devprep.cli.boundary.run_cli`."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""
