"""Catalog document format and text classification rules.

The entry layout produced by :func:`render_entry` is the one bit-exact
contract that consumers of a catalog document may depend on::

    ### File: `<display path>`

    ```<extension>
    <raw file bytes>
    ```

Each entry is followed by a blank line.  The file content is copied
verbatim and always followed by one newline before the closing fence.
"""

from __future__ import annotations

import os

TEXTUAL_MIME_TYPES: frozenset[str] = frozenset(
    {
        "application/json",
        "application/xml",
        "application/javascript",
    }
)
"""Structured-text types accepted in addition to ``text/*``."""


def is_textual(mime_type: str) -> bool:
    """Return ``True`` when *mime_type* denotes human-readable text."""
    return mime_type.startswith("text/") or mime_type in TEXTUAL_MIME_TYPES


def display_path(path: str) -> str:
    """Strip a leading ``./`` from a traversal path for headings."""
    return path[2:] if path.startswith("./") else path


def render_entry(display: str, extension: str, content: bytes) -> bytes:
    """Render one catalog entry as raw bytes.

    Names are encoded with :func:`os.fsencode` so undecodable file names
    round-trip to the bytes the filesystem reported.
    """
    return (
        b"### File: `" + os.fsencode(display) + b"`\n\n"
        + b"```" + os.fsencode(extension) + b"\n"
        + content
        + b"\n```\n\n"
    )
