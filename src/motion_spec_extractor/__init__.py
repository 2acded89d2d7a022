"""Motion Spec Extractor.

This package walks a motion-graphics host's live property graph and produces
a portable JSON document describing a composition: layers, properties,
keyframes and normalized cubic-bezier easing.
"""

# Core library interface
from .pipeline import DOCUMENT_VERSION, EXTRACTOR_VERSION, ExtractionPipeline, NoActiveCompositionError
from .registry import SourceRegistry
from .sources.base import HostInfo, PropertyValueType, Source

# Core utilities
from .core import Document, to_json, default_output_name
from .core import collect_warnings, validate_document, validate_document_with_error_details
from .extractors import ExtractionContext, ExtractionOptions

# CLI interface
from .cli import generate_document, main

__version__ = EXTRACTOR_VERSION

# Auto-discover and register all platforms
SourceRegistry.discover_platforms()

__all__ = [
    # Primary library interface
    "ExtractionPipeline",
    "ExtractionOptions",
    "ExtractionContext",
    "NoActiveCompositionError",
    "SourceRegistry",
    "Source",
    "HostInfo",
    "PropertyValueType",
    "DOCUMENT_VERSION",
    # Core utilities
    "Document",
    "to_json",
    "default_output_name",
    "validate_document",
    "validate_document_with_error_details",
    "collect_warnings",
    # CLI
    "generate_document",
    "main",
]
