"""Extraction pipeline for motion spec documents.

This module provides the main interface for turning a host composition into
a versioned motion spec document. The pipeline is host-agnostic and only
talks to a Source implementation.
"""

import sys
from collections.abc import Iterator
from datetime import datetime, timezone

from .core.types import Composition, Document, ExportInfo
from .extractors.composition import ProgressCallback, extract_composition
from .extractors.context import ExtractionContext, ExtractionOptions
from .sources.base import HostComposition, Source

# Version of the document layout, bumped on breaking changes
DOCUMENT_VERSION = "1.0.0"
EXTRACTOR_VERSION = "0.1.0"
UNSAVED_PROJECT = "Untitled"


class NoActiveCompositionError(ValueError):
    """Raised when there is no composition to extract."""


class ExtractionPipeline:
    """Main interface for document assembly.

    This class is host-agnostic. It works with any Source implementation:
    the source supplies host compositions, the extractors turn them into
    document parts, and the pipeline adds the version and export envelope.

    Sources register themselves via SourceRegistry and can be instantiated
    through factory functions.

    Example:
        >>> # Via registry (recommended)
        >>> from motion_spec_extractor import SourceRegistry
        >>> pipeline = SourceRegistry.create_pipeline('snapshot', path=Path('scene.json'))
        >>> document = pipeline.extract_document()
        >>>
        >>> # Direct instantiation (advanced)
        >>> from motion_spec_extractor.platforms.snapshot import SnapshotSource
        >>> pipeline = ExtractionPipeline(SnapshotSource(Path('scene.json')))
    """

    def __init__(self, source: Source, options: ExtractionOptions | None = None):
        """Initialize the pipeline.

        Args:
            source: Source instance supplying host compositions
            options: Extraction options (defaults apply when omitted)
        """
        self.source = source
        self.options = options or ExtractionOptions()

    def extract_document(
        self,
        composition_name: str | None = None,
        progress: ProgressCallback | None = None,
    ) -> Document:
        """Extract a complete document for one composition.

        Args:
            composition_name: Composition to extract; the active composition
                when omitted
            progress: Optional callback ``progress(current, total, layer_name)``

        Returns:
            Document with version, export info and the extracted composition

        Raises:
            NoActiveCompositionError: If no composition name is given and the
                source has no active composition
            KeyError: If the named composition does not exist
        """
        if composition_name is None:
            comp = self.source.get_active_composition()
            if comp is None:
                raise NoActiveCompositionError(
                    "No active composition. Open or select a composition first."
                )
        else:
            comp = self.source.get_composition(composition_name)

        return self.extract_document_for_composition(comp, progress=progress)

    def extract_documents(self, progress: ProgressCallback | None = None) -> Iterator[Document]:
        """Extract one document per composition of the host project.

        Args:
            progress: Optional progress callback, reset for each composition

        Yields:
            Documents in host project order
        """
        for comp in self.source.list_compositions():
            yield self.extract_document_for_composition(comp, progress=progress)

    def extract_document_for_composition(
        self,
        comp: HostComposition,
        progress: ProgressCallback | None = None,
    ) -> Document:
        """Assemble the document for a specific host composition."""
        composition = self.extract_composition(comp, progress=progress)

        return Document(
            version=DOCUMENT_VERSION,
            exportInfo=self.build_export_info(),
            composition=composition,
        )

    def extract_composition(
        self,
        comp: HostComposition,
        progress: ProgressCallback | None = None,
    ) -> Composition:
        """Extract a composition, skipping layers whose extraction fails."""
        context = ExtractionContext(options=self.options)

        return extract_composition(
            comp,
            context,
            progress=progress,
            on_layer_error=self._warn_layer_skipped,
        )

    def build_export_info(self) -> ExportInfo:
        """Build the export envelope from the source's host description."""
        host = self.source.get_host_info()

        return ExportInfo(
            exportedAt=datetime.now(timezone.utc).isoformat(),
            hostName=host.name,
            hostVersion=host.version,
            extractorVersion=EXTRACTOR_VERSION,
            sourceFile=host.project_file or UNSAVED_PROJECT,
        )

    @staticmethod
    def _warn_layer_skipped(index: int, name: str, error: Exception) -> None:
        print(f"Warning: Skipping layer {index} ({name}): {error}", file=sys.stderr)
