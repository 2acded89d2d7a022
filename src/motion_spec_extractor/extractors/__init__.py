"""Extractors that turn host objects into motion spec document parts."""

from .composition import extract_composition, extract_markers, read_frame_rate
from .context import ExtractionContext, ExtractionOptions
from .keyframes import extract_animated_property, extract_keyframes
from .layers import detect_layer_type, extract_layer
from .summary import compute_animation_summary

__all__ = [
    "ExtractionContext",
    "ExtractionOptions",
    "compute_animation_summary",
    "detect_layer_type",
    "extract_animated_property",
    "extract_composition",
    "extract_keyframes",
    "extract_layer",
    "extract_markers",
    "read_frame_rate",
]
