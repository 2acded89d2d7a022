"""Core utilities for motion spec extraction.

This package contains the document types, the fault-tolerant host accessors,
value normalization, easing math, serialization and schema validation used
by every extractor and platform.
"""

from .bezier import bezier_y_for_x, generate_curve_points, get_y_range, has_overshoot
from .easing import (
    EASING_PRESETS,
    InterpolationKind,
    classify_easing_preset,
    convert_easing,
    convert_easing_approx,
)
from .serializer import default_output_name, to_json
from .types import AnimatedProperty, Composition, Document, Keyframe, Layer
from .validator import collect_warnings, validate_document, validate_document_with_error_details
from .walker import get_animated_properties, is_property_animated, walk_property_group

__all__ = [
    "AnimatedProperty",
    "Composition",
    "Document",
    "EASING_PRESETS",
    "InterpolationKind",
    "Keyframe",
    "Layer",
    "bezier_y_for_x",
    "classify_easing_preset",
    "collect_warnings",
    "convert_easing",
    "convert_easing_approx",
    "default_output_name",
    "generate_curve_points",
    "get_animated_properties",
    "get_y_range",
    "has_overshoot",
    "is_property_animated",
    "to_json",
    "validate_document",
    "validate_document_with_error_details",
    "walk_property_group",
]
