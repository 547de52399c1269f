"""Infrastructure: recursive file enumeration for the catalog tool.

Matching rules mirror ``find <root> -maxdepth N -type f -name '*.<ext>'
-not -name <ignore>``:

* Only regular files; symbolic links are neither followed nor reported.
* Patterns apply to the base name, case-sensitively.
* Files directly inside *root* are at depth 1; depth 0 yields nothing.
* Yielded paths are *root* joined with the relative path, exactly as
  given, in directory-walk order.
"""

from __future__ import annotations

import fnmatch
import os
from collections.abc import Callable, Iterator
from pathlib import Path


class WalkFileFinder:
    """Concrete :class:`FileFinder` built on :func:`os.walk`.

    Parameters
    ----------
    on_error:
        Called with the ``OSError`` of every directory that cannot be
        listed; the walk then continues.
    exclude:
        Paths never reported (typically the output document).
    """

    def __init__(
        self,
        *,
        on_error: Callable[[OSError], None] | None = None,
        exclude: tuple[Path, ...] = (),
    ) -> None:
        self._on_error = on_error
        self._exclude: frozenset[str] = frozenset(
            os.path.realpath(path) for path in exclude
        )

    def find(
        self,
        root: Path,
        extension: str,
        *,
        ignore_pattern: str | None = None,
        max_depth: int | None = None,
    ) -> Iterator[str]:
        if max_depth == 0:
            return

        name_pattern = f"*.{extension}"
        top = str(root)
        for dirpath, dirnames, filenames in os.walk(top, onerror=self._on_error):
            rel = os.path.relpath(dirpath, top)
            depth = 1 if rel == os.curdir else rel.count(os.sep) + 2
            if max_depth is not None and depth >= max_depth:
                # Files in subdirectories would exceed the bound.
                dirnames.clear()

            for name in filenames:
                if not fnmatch.fnmatchcase(name, name_pattern):
                    continue
                if ignore_pattern and fnmatch.fnmatchcase(name, ignore_pattern):
                    continue
                path = os.path.join(dirpath, name)
                if os.path.islink(path) or not os.path.isfile(path):
                    continue
                if self._exclude and os.path.realpath(path) in self._exclude:
                    continue
                yield path
