"""Package list construction for the environment tool (pure)."""

from __future__ import annotations

from collections.abc import Iterable

from devprep.core.models import PurposeTable


def build_package_list(
    purpose: str | None,
    custom: str,
    purposes: PurposeTable,
) -> tuple[str, ...]:
    """Merge the purpose preset with user-supplied packages.

    Purpose packages come first, in table order, followed by the custom
    names.  Runs of whitespace in *custom* separate names; duplicates are
    kept because the installer receives exactly this list.  The result
    may be empty.
    """
    preset: tuple[str, ...] = purposes.get(purpose, ()) if purpose else ()
    return (*preset, *custom.split())


def manifest_entries(packages: Iterable[str]) -> tuple[str, ...]:
    """Return *packages* deduplicated and sorted lexicographically."""
    return tuple(sorted(set(packages)))
