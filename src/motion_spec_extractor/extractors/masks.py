"""Mask extraction."""

from typing import Any

from ..core.types import MaskData
from ..core.values import enum_name
from ..core.walker import iter_children, try_attr, try_property
from .context import ExtractionContext
from .keyframes import extract_animated_property

MASK_PARADE = "ADBE Mask Parade"

# Output key -> host match name
MASK_PROPERTIES = {
    "path": "ADBE Mask Shape",
    "feather": "ADBE Mask Feather",
    "opacity": "ADBE Mask Opacity",
    "expansion": "ADBE Mask Offset",
}


def extract_masks(layer: Any, context: ExtractionContext) -> list[MaskData]:
    """Extract every mask applied to a layer.

    Args:
        layer: Host layer
        context: Extraction context

    Returns:
        One MaskData per readable mask, in host order
    """
    parade = try_property(layer, MASK_PARADE)
    masks: list[MaskData] = []

    for _, mask in iter_children(parade):
        data = MaskData(
            name=try_attr(mask, "name"),
            mode=enum_name(try_attr(mask, "mask_mode")),
            inverted=try_attr(mask, "inverted"),
            path=None,
            feather=None,
            opacity=None,
            expansion=None,
        )
        for key, match_name in MASK_PROPERTIES.items():
            data[key] = extract_animated_property(try_property(mask, match_name), context)  # type: ignore[literal-required]
        masks.append(data)

    return masks
