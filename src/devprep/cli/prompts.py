"""Interactive confirmation for the CLI layer.

:func:`confirm` satisfies :data:`~devprep.core.protocols.Confirm`.  On a
terminal it asks with questionary; otherwise it reads a single line from
stdin so scripted runs (``yes | prep-venv``) keep working.
"""

from __future__ import annotations

import sys
from typing import Any

from devprep.exceptions import MissingDependencyError

_YES_ANSWERS: frozenset[str] = frozenset({"y", "yes"})


def _import_questionary() -> Any:
    """Import questionary lazily for interactive confirmation."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise MissingDependencyError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def _confirm_from_stream(question: str) -> bool:
    """Read one ``y``/``N`` answer from a non-interactive stdin."""
    try:
        answer = input(f"{question} [y/N]: ")
    except EOFError:
        return False
    return answer.strip().lower() in _YES_ANSWERS


def confirm(question: str) -> bool:
    """Ask *question*; the default answer is no.

    Returns
    -------
    bool
        ``True`` only on an explicit yes.  Esc / Ctrl+C inside the
        questionary prompt counts as no.
    """
    if not sys.stdin.isatty():
        return _confirm_from_stream(question)

    questionary = _import_questionary()
    answer: bool | None = questionary.confirm(question, default=False).ask()
    return bool(answer)
