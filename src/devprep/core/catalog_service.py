"""Core catalog service — orchestrates the ``catfiles`` pipeline.

Candidates come from a :class:`~devprep.core.protocols.FileFinder`, are
classified through a :class:`~devprep.core.protocols.FileTypeProbe`, read
through a :class:`~devprep.core.protocols.FileReader`, and rendered into a
:class:`~devprep.core.protocols.CatalogSink`.

Every candidate is handled independently: per-file problems become
warnings and never stop the traversal.
"""

from __future__ import annotations

from devprep.core.catalog_format import display_path, is_textual, render_entry
from devprep.core.models import CatalogConfig, CatalogSummary
from devprep.core.protocols import (
    CatalogSink,
    FileFinder,
    FileReader,
    FileTypeProbe,
    Reporter,
)
from devprep.exceptions import FileProcessingError


class CatalogService:
    """Stateless service that builds a catalog document.

    Parameters
    ----------
    finder:
        Enumerates candidate files.
    probe:
        Determines each candidate's MIME type.
    reader:
        Loads each candidate's raw bytes.
    reporter:
        Destination for progress messages.
    """

    def __init__(
        self,
        finder: FileFinder,
        probe: FileTypeProbe,
        reader: FileReader,
        reporter: Reporter,
    ) -> None:
        self._finder: FileFinder = finder
        self._probe: FileTypeProbe = probe
        self._reader: FileReader = reader
        self._reporter: Reporter = reporter

    def classify(self, path: str) -> bool:
        """Return ``True`` when *path* should be included as text.

        Raises
        ------
        UnreadableFileError
            When the file cannot be read.
        ClassificationError
            When the probe cannot determine a type.
        """
        self._reader.ensure_readable(path)
        mime_type = self._probe.probe(path)
        if is_textual(mime_type):
            return True
        self._reporter.notice(
            f"Info: Skipping non-text file '{path}' (MIME type: {mime_type})."
        )
        return False

    def emit(self, path: str, extension: str, sink: CatalogSink) -> None:
        """Append the entry for *path* to *sink*.

        Raises
        ------
        UnreadableFileError
            When the file content cannot be read.
        """
        content = self._reader.read_bytes(path)
        sink.append(render_entry(display_path(path), extension, content))

    def run(self, config: CatalogConfig, sink: CatalogSink) -> CatalogSummary:
        """Catalog every matching text file under ``config.directory``."""
        self._report_criteria(config)

        found = 0
        written = 0
        candidates = self._finder.find(
            config.directory,
            config.extension,
            ignore_pattern=config.ignore_pattern,
            max_depth=config.max_depth,
        )
        for path in candidates:
            found += 1
            try:
                if not self.classify(path):
                    continue
                self.emit(path, config.extension, sink)
            except FileProcessingError as exc:
                self._reporter.warning(f"{exc} Skipping.")
                continue
            written += 1

        summary = CatalogSummary(found=found, written=written)
        self._report_summary(summary, config)
        return summary

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def _report_criteria(self, config: CatalogConfig) -> None:
        depth = "unlimited" if config.max_depth is None else str(config.max_depth)
        self._reporter.rule()
        self._reporter.info(f"Searching in directory: '{config.directory}'")
        self._reporter.info(f"Looking for extension: '.{config.extension}'")
        if config.ignore_pattern:
            self._reporter.info(f"Ignoring pattern:      '{config.ignore_pattern}'")
        self._reporter.info(f"Maximum depth:         '{depth}'")
        self._reporter.rule()

    def _report_summary(self, summary: CatalogSummary, config: CatalogConfig) -> None:
        self._reporter.rule()
        if summary.found == 0:
            self._reporter.notice("No files found matching the criteria.")
        elif summary.written == 0:
            self._reporter.notice(
                f"Found {summary.found} file(s), but none were identified "
                "as text files."
            )
            self._reporter.info(f"Output file '{config.output}' created but is empty.")
        else:
            self._reporter.info(
                f"Processing complete. Saved content from {summary.written} "
                f"out of {summary.found} found file(s) to '{config.output}'."
            )
        self._reporter.rule()
