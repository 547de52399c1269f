"""devprep — developer workspace helpers.

Two independent command-line tools built on a strict layered architecture:

* ``prep-venv`` — create a Python virtual environment and install a
  curated package set.
* ``catfiles`` — collect text files under a directory into a single
  Markdown document.
"""

from devprep.version import __version__

__all__: list[str] = ["__version__"]
