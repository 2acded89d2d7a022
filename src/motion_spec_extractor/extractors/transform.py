"""Layer transform extraction.

Handles standard 2D transforms, separated position dimensions (X / Y / Z)
and the extra rotation axes of 3D layers.
"""

from typing import Any

from ..core.types import PositionSeparated, TransformProperties
from ..core.walker import try_attr, try_property
from .context import ExtractionContext
from .keyframes import extract_animated_property

TRANSFORM_GROUP = "ADBE Transform Group"

# Output key -> host match name
COMMON_TRANSFORM = {
    "anchorPoint": "ADBE Anchor Point",
    "scale": "ADBE Scale",
    "opacity": "ADBE Opacity",
}
SEPARATED_POSITION = {
    "x": "ADBE Position_0",
    "y": "ADBE Position_1",
    "z": "ADBE Position_2",
}
ROTATION_2D = {"rotation": "ADBE Rotate Z"}
ROTATION_3D = {
    "rotationX": "ADBE Rotate X",
    "rotationY": "ADBE Rotate Y",
    "rotationZ": "ADBE Rotate Z",
    "orientation": "ADBE Orientation",
}


def get_transform_group(layer: Any) -> Any:
    """Return the layer's transform group, or None."""
    group = try_attr(layer, "transform")
    if group is None:
        group = try_property(layer, TRANSFORM_GROUP)
    return group


def extract_transform(layer: Any, context: ExtractionContext) -> TransformProperties:
    """Extract all transform properties of a layer.

    Position is reported either combined (``position``) or separated
    (``positionSeparated``), never both. 3D layers report rotationX/Y/Z and
    orientation instead of a single rotation.

    Args:
        layer: Host layer
        context: Extraction context

    Returns:
        TransformProperties with every readable slot filled
    """
    result = TransformProperties()
    group = get_transform_group(layer)
    if group is None:
        return result

    def read(match_name: str) -> Any:
        return extract_animated_property(try_property(group, match_name), context)

    anchor = read(COMMON_TRANSFORM["anchorPoint"])
    if anchor is not None:
        result["anchorPoint"] = anchor

    is_3d = try_attr(layer, "three_d_layer") is True

    position = try_property(group, "ADBE Position")
    if try_attr(position, "dimensions_separated") is True:
        separated = PositionSeparated()
        for axis, match_name in SEPARATED_POSITION.items():
            if axis == "z" and not is_3d:
                continue
            component = read(match_name)
            if component is not None:
                separated[axis] = component  # type: ignore[literal-required]
        result["positionSeparated"] = separated
    else:
        combined = extract_animated_property(position, context)
        if combined is not None:
            result["position"] = combined

    scale = read(COMMON_TRANSFORM["scale"])
    if scale is not None:
        result["scale"] = scale

    rotations = ROTATION_3D if is_3d else ROTATION_2D
    for key, match_name in rotations.items():
        rotation = read(match_name)
        if rotation is not None:
            result[key] = rotation  # type: ignore[literal-required]

    opacity = read(COMMON_TRANSFORM["opacity"])
    if opacity is not None:
        result["opacity"] = opacity

    return result
