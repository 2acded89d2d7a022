"""Shape layer content extraction.

Shape layers hold a recursive tree of groups, paths, fills, strokes and
modifiers. Groups recurse into their contents and report their own
transform; every other item reports its value-bearing sub-properties.
"""

from typing import Any

from ..core.types import AnimatedProperty, ShapeGroupData
from ..core.values import read_value_type
from ..core.walker import MAX_WALK_DEPTH, iter_children, try_attr, try_property
from ..sources.base import PropertyValueType
from .context import ExtractionContext
from .keyframes import extract_animated_property

ROOT_VECTORS_GROUP = "ADBE Root Vectors Group"
VECTOR_GROUP = "ADBE Vector Group"
VECTOR_GROUP_CONTENTS = "ADBE Vectors Group"
VECTOR_TRANSFORM_GROUP = "ADBE Vector Transform Group"

# Host match name -> shape item type
SHAPE_TYPES = {
    VECTOR_GROUP: "group",
    "ADBE Vector Shape - Group": "path",
    "ADBE Vector Graphic - Fill": "fill",
    "ADBE Vector Graphic - Stroke": "stroke",
    "ADBE Vector Graphic - G-Fill": "gradientFill",
    "ADBE Vector Graphic - G-Stroke": "gradientStroke",
    "ADBE Vector Filter - Trim": "trim",
    VECTOR_TRANSFORM_GROUP: "transform",
    "ADBE Vector Shape - Rect": "rectangle",
    "ADBE Vector Shape - Ellipse": "ellipse",
    "ADBE Vector Shape - Star": "polystar",
    "ADBE Vector Filter - Merge": "merge",
    "ADBE Vector Filter - Repeater": "repeater",
    "ADBE Vector Filter - RC": "roundCorners",
    "ADBE Vector Filter - Offset": "offset",
    "ADBE Vector Filter - PB": "pucker",
    "ADBE Vector Filter - Twist": "twist",
    "ADBE Vector Filter - Zigzag": "zigzag",
    "ADBE Vector Filter - Roughen": "wiggle",
}

UNKNOWN_SHAPE_TYPE = "unknown"

# Value types that carry no extractable data
SKIPPED_VALUE_TYPES = (PropertyValueType.NO_VALUE, PropertyValueType.CUSTOM_VALUE)


def get_shape_type(match_name: Any) -> str:
    """Map a shape match name to its item type ('unknown' when unrecognized)."""
    if not isinstance(match_name, str):
        return UNKNOWN_SHAPE_TYPE
    return SHAPE_TYPES.get(match_name, UNKNOWN_SHAPE_TYPE)


def extract_element_properties(element: Any, context: ExtractionContext) -> list[AnimatedProperty]:
    """Extract the value-bearing direct sub-properties of a shape element.

    Args:
        element: Shape element or transform group
        context: Extraction context

    Returns:
        AnimatedProperty list; unreadable and value-less children are skipped
    """
    results: list[AnimatedProperty] = []
    for _, child in iter_children(element):
        value_type = read_value_type(child)
        if value_type is None or value_type in SKIPPED_VALUE_TYPES:
            continue
        prop = extract_animated_property(child, context)
        if prop is not None:
            results.append(prop)
    return results


def extract_shape_group(group: Any, context: ExtractionContext, depth: int = 0) -> list[ShapeGroupData]:
    """Recursively extract the items of a shape contents group.

    Args:
        group: Host shape contents group
        context: Extraction context
        depth: Nesting depth of ``group``

    Returns:
        One ShapeGroupData per readable child
    """
    if depth > MAX_WALK_DEPTH:
        return []

    items: list[ShapeGroupData] = []
    for _, child in iter_children(group):
        match_name = try_attr(child, "match_name")
        item = ShapeGroupData(
            name=try_attr(child, "name"),
            matchName=match_name,
            type=get_shape_type(match_name),
        )

        if item["type"] == "group":
            contents = try_property(child, VECTOR_GROUP_CONTENTS)
            item["contents"] = extract_shape_group(contents, context, depth + 1) if contents is not None else []

            transform = try_property(child, VECTOR_TRANSFORM_GROUP)
            item["properties"] = extract_element_properties(transform, context) if transform is not None else []
        else:
            item["properties"] = extract_element_properties(child, context)

        items.append(item)

    return items


def extract_shape_data(layer: Any, context: ExtractionContext) -> list[ShapeGroupData]:
    """Extract the full shape content tree of a shape layer.

    Returns:
        Top-level shape items, or an empty list when the layer has no contents
    """
    contents = try_property(layer, ROOT_VECTORS_GROUP)
    if contents is None:
        return []
    return extract_shape_group(contents, context)
