"""Text layer extraction: source text, styling and text animators."""

from typing import Any

from ..core.types import AnimatedProperty, TextAnimatorData, TextLayerData, TextSelector
from ..core.values import enum_name, is_finite_number, trim_color
from ..core.walker import count_children, is_property_animated, iter_children, try_attr, try_property
from .context import ExtractionContext
from .keyframes import extract_animated_property

TEXT_PROPERTIES = "ADBE Text Properties"
TEXT_DOCUMENT = "ADBE Text Document"
TEXT_ANIMATORS = "ADBE Text Animators"
ANIMATOR_PROPERTIES = "ADBE Text Animator Properties"
TEXT_SELECTORS = "ADBE Text Selectors"


def _number(value: Any) -> float | None:
    return value if is_finite_number(value) else None


def _is_relevant_animator_property(prop: Any) -> bool:
    return (
        try_attr(prop, "can_set_expression") is True
        or is_property_animated(prop)
        or try_attr(prop, "is_modified") is True
    )


def extract_text_animator(animator: Any, context: ExtractionContext) -> TextAnimatorData:
    """Extract one text animator with its properties and first selector."""
    properties: list[AnimatedProperty] = []
    for _, prop in iter_children(try_property(animator, ANIMATOR_PROPERTIES)):
        if not _is_relevant_animator_property(prop):
            continue
        extracted = extract_animated_property(prop, context)
        if extracted is not None:
            properties.append(extracted)

    selector: TextSelector | None = None
    selectors = try_property(animator, TEXT_SELECTORS)
    if count_children(selectors) > 0:
        first = try_property(selectors, 1)
        if first is not None:
            selector = TextSelector(
                start=extract_animated_property(try_property(first, "ADBE Text Selector Start"), context),
                end=extract_animated_property(try_property(first, "ADBE Text Selector End"), context),
                offset=extract_animated_property(try_property(first, "ADBE Text Selector Offset"), context),
                type=try_attr(first, "match_name"),
            )

    return TextAnimatorData(
        name=try_attr(animator, "name"),
        properties=properties,
        selector=selector,
    )


def extract_text_data(layer: Any, context: ExtractionContext) -> TextLayerData:
    """Extract the text payload of a text layer.

    Args:
        layer: Host text layer
        context: Extraction context

    Returns:
        TextLayerData; empty when the layer has no text properties
    """
    text_properties = try_property(layer, TEXT_PROPERTIES)
    if text_properties is None:
        return TextLayerData()

    source_text = try_property(text_properties, TEXT_DOCUMENT)
    document = try_attr(source_text, "value")

    result = TextLayerData(
        sourceText=extract_animated_property(source_text, context),
        font=try_attr(document, "font"),
        fontSize=_number(try_attr(document, "font_size")),
        fillColor=trim_color(try_attr(document, "fill_color")),
        tracking=_number(try_attr(document, "tracking")),
        leading=_number(try_attr(document, "leading")),
        justification=enum_name(try_attr(document, "justification")),
    )

    if try_attr(document, "apply_stroke") is True:
        stroke_color = trim_color(try_attr(document, "stroke_color"))
        if stroke_color is not None:
            result["strokeColor"] = stroke_color
        stroke_width = _number(try_attr(document, "stroke_width"))
        if stroke_width is not None:
            result["strokeWidth"] = stroke_width

    result["animators"] = [
        extract_text_animator(animator, context)
        for _, animator in iter_children(try_property(text_properties, TEXT_ANIMATORS))
    ]

    return result
