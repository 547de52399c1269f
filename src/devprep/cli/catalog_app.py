"""``catfiles`` — save text files under a directory as one Markdown document.

Architecture notes
------------------
* No business logic lives here — validation and orchestration are
  delegated to :mod:`devprep.core`, external programs to
  :mod:`devprep.infra`.
* :func:`main` returns an exit code; :func:`cli` is the console-script
  error boundary.  A run that finds nothing still exits 0.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from devprep.cli import exit_codes
from devprep.cli.boundary import run_cli
from devprep.cli.console import console
from devprep.cli.reporter import ConsoleReporter
from devprep.core.catalog_service import CatalogService
from devprep.core.models import CatalogConfig
from devprep.core.protocols import FileTypeProbe
from devprep.core.validation import (
    default_output_name,
    normalize_extension,
    parse_depth,
    validate_directory,
)
from devprep.exceptions import InvalidConfigError
from devprep.infra.filesystem import CatalogWriter, LocalFileReader
from devprep.infra.filetype import FileCommandProbe, require_file_command
from devprep.infra.finder import WalkFileFinder
from devprep.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="catfiles",
        description=(
            "Finds text files in a directory and saves their contents "
            "formatted as Markdown into an output file."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "directory",
        help="Directory to search.",
    )
    parser.add_argument(
        "-e",
        "--extension",
        metavar="EXT",
        default="py",
        help="File extension of files to search for (default: 'py').",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        metavar="PATTERN",
        default=None,
        help="Glob pattern of file names to ignore (e.g., 'temp*').",
    )
    parser.add_argument(
        "-d",
        "--depth",
        metavar="NUM",
        default=None,
        help="Maximum recursion depth (default: unlimited).",
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="FILENAME",
        default=None,
        help="Output file path (default: <directory_name>.md).",
    )
    return parser


def parse_config(argv: list[str] | None) -> CatalogConfig:
    """Parse and validate *argv* into an immutable :class:`CatalogConfig`.

    Raises
    ------
    InvalidConfigError
        With the usage line attached as hint.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        directory = validate_directory(args.directory)
        extension = normalize_extension(args.extension)
        max_depth = parse_depth(args.depth)
    except InvalidConfigError as exc:
        exc.hint = exc.hint or parser.format_usage().strip()
        raise

    output: str | None = args.output
    if not output:
        output = default_output_name(args.directory)
        console.print(f"Info: Output filename not specified, using default: '{output}'")

    return CatalogConfig(
        directory=directory,
        extension=extension,
        output=Path(output),
        ignore_pattern=args.ignore or None,
        max_depth=max_depth,
    )


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    probe: FileTypeProbe | None = None,
) -> int:
    """Run the ``catfiles`` tool.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    probe:
        Content-type probe; defaults to the ``file`` program, which must
        then be installed.

    Returns
    -------
    int
        OS process exit code.
    """
    config = parse_config(argv)
    if probe is None:
        probe = FileCommandProbe(require_file_command())

    reporter = ConsoleReporter()

    def _walk_error(exc: OSError) -> None:
        reporter.warning(f"Cannot search '{exc.filename}': {exc.strerror}.")

    finder = WalkFileFinder(
        on_error=_walk_error,
        exclude=(config.output,),
    )
    service = CatalogService(
        finder=finder,
        probe=probe,
        reader=LocalFileReader(),
        reporter=reporter,
    )

    with CatalogWriter(config.output) as sink:
        console.print(f"Info: Output will be saved to '{config.output}'")
        service.run(config, sink)
    return exit_codes.SUCCESS


def cli() -> None:
    """Console-script entry point for ``catfiles``."""
    run_cli(main)
