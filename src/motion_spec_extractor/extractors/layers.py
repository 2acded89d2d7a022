"""Layer extraction.

A layer descriptor is built from a fixed sequence of independent reads:
identity, timing, flags, hierarchy, then the transform, masks, effects and
the payload for the detected layer type. Each read is isolated, so a broken
facet leaves a None in its slot and the rest of the layer intact.
"""

from pathlib import PurePath
from typing import Any

from ..core.types import (
    CameraData,
    FootageData,
    Layer,
    LayerType,
    LightData,
    PrecompData,
    SolidData,
)
from ..core.values import enum_name, is_finite_number, read_property_value, trim_color
from ..core.walker import try_attr, try_property
from .context import ExtractionContext
from .effects import extract_effects
from .keyframes import extract_animated_property
from .masks import extract_masks
from .shapes import extract_shape_data
from .summary import compute_animation_summary
from .text import extract_text_data
from .transform import extract_transform

# Extensions of still-image footage; any other file footage is video
IMAGE_EXTENSIONS = frozenset({
    ".png", ".jpg", ".jpeg", ".gif", ".bmp", ".tif", ".tiff",
    ".psd", ".ai", ".eps", ".svg", ".webp", ".ico", ".exr",
    ".hdr", ".tga", ".dpx", ".cin",
})

# Layer match name -> type, checked in this order
MATCH_NAME_TYPES: tuple[tuple[str, LayerType], ...] = (
    ("ADBE Vector Layer", "shape"),
    ("ADBE Text Layer", "text"),
    ("ADBE Camera Layer", "camera"),
    ("ADBE Light Layer", "light"),
)

CAMERA_OPTIONS = "ADBE Camera Options Group"
LIGHT_OPTIONS = "ADBE Light Options Group"
TIME_REMAP = "ADBE Time Remapping"

# Optional camera/light properties: output key -> host match name
CAMERA_DOF_PROPERTIES = {
    "focusDistance": "ADBE Camera Focus Distance",
    "aperture": "ADBE Camera Aperture",
    "blurLevel": "ADBE Camera Blur Level",
}
LIGHT_OPTIONAL_PROPERTIES = {
    "coneAngle": "ADBE Light Cone Angle",
    "coneFeather": "ADBE Light Cone Feather 2",
    "shadowDarkness": "ADBE Light Shadow Darkness",
    "shadowDiffusion": "ADBE Light Shadow Diffusion",
}

# Simple layer fields: output key -> host attribute
TIMING_FIELDS = {
    "inPoint": "in_point",
    "outPoint": "out_point",
    "startTime": "start_time",
    "stretch": "stretch",
}
FLAG_FIELDS = {
    "enabled": "enabled",
    "solo": "solo",
    "shy": "shy",
    "locked": "locked",
}


def is_image_file(file_name: str) -> bool:
    """Check whether a file name has a still-image extension."""
    return PurePath(file_name.lower()).suffix in IMAGE_EXTENSIONS


def _type_name(item: Any) -> str:
    name = try_attr(item, "type_name")
    return name.lower() if isinstance(name, str) else ""


def _number(value: Any) -> float | None:
    return value if is_finite_number(value) else None


def _bool(value: Any) -> bool | None:
    return value if isinstance(value, bool) else None


def detect_layer_type(layer: Any) -> LayerType:
    """Detect the semantic type of a host layer.

    Structural markers are checked in priority order: vector shape, text,
    camera, light, the adjustment flag, the null flag, then the source item
    (nested composition, solid footage, file footage). File footage is split
    into image and video by file extension.

    Args:
        layer: Host layer

    Returns:
        One of the LayerType values; "null" when nothing else matches
    """
    match_name = try_attr(layer, "match_name")
    for marker, layer_type in MATCH_NAME_TYPES:
        if match_name == marker:
            return layer_type

    if try_attr(layer, "adjustment_layer") is True:
        return "adjustment"
    if try_attr(layer, "null_layer") is True:
        return "null"

    source = try_attr(layer, "source")
    if source is None:
        return "null"

    kind = _type_name(source)
    if kind == "composition":
        return "precomp"
    if kind != "footage":
        return "null"

    main_source = try_attr(source, "main_source")
    if _type_name(main_source) == "solid":
        return "solid"

    file = try_attr(main_source, "file")
    file_name = try_attr(file, "name")
    if isinstance(file_name, str) and try_attr(file, "exists") is True:
        return "image" if is_image_file(file_name) else "video"

    # Footage without a file (placeholder) renders like a solid
    return "solid"


def _layer_index(layer: Any) -> int | None:
    index = try_attr(layer, "index")
    return index if isinstance(index, int) and not isinstance(index, bool) else None


def extract_solid_data(layer: Any) -> SolidData:
    source = try_attr(layer, "source")
    return SolidData(
        color=trim_color(try_attr(try_attr(source, "main_source"), "color")),
        width=_number(try_attr(source, "width")),  # type: ignore[typeddict-item]
        height=_number(try_attr(source, "height")),  # type: ignore[typeddict-item]
    )


def extract_footage_data(layer: Any) -> FootageData:
    file = try_attr(try_attr(try_attr(layer, "source"), "main_source"), "file")
    return FootageData(
        sourceFile=try_attr(file, "fs_name"),
        sourceFileName=try_attr(file, "name"),
    )


def extract_camera_data(layer: Any, context: ExtractionContext) -> CameraData:
    """Extract camera zoom and depth-of-field settings."""
    options = try_property(layer, CAMERA_OPTIONS)
    dof = read_property_value(try_property(options, "ADBE Camera Depth of Field"))

    result = CameraData(
        zoom=extract_animated_property(try_property(options, "ADBE Camera Zoom"), context),
        depthOfField=bool(dof) if dof is not None else None,
    )
    for key, match_name in CAMERA_DOF_PROPERTIES.items():
        prop = extract_animated_property(try_property(options, match_name), context)
        if prop is not None:
            result[key] = prop  # type: ignore[literal-required]
    return result


def extract_light_data(layer: Any, context: ExtractionContext) -> LightData:
    """Extract light type, intensity, color and the optional cone/shadow settings."""
    options = try_property(layer, LIGHT_OPTIONS)
    light_type = try_attr(try_property(options, "ADBE Light Type"), "value")

    result = LightData(
        lightType=enum_name(light_type),
        intensity=extract_animated_property(try_property(options, "ADBE Light Intensity"), context),
        color=extract_animated_property(try_property(options, "ADBE Light Color"), context),
    )
    for key, match_name in LIGHT_OPTIONAL_PROPERTIES.items():
        prop = extract_animated_property(try_property(options, match_name), context)
        if prop is not None:
            result[key] = prop  # type: ignore[literal-required]
    return result


def extract_precomp_data(layer: Any, context: ExtractionContext) -> PrecompData:
    """Describe a precomp layer, expanding the nested composition when allowed."""
    # Import here to avoid circular dependency
    from .composition import extract_composition

    source = try_attr(layer, "source")
    result = PrecompData(compositionName=try_attr(source, "name"))

    if source is not None and context.can_expand_precomps:
        result["composition"] = extract_composition(source, context, nested=True)

    if try_attr(layer, "time_remap_enabled") is True:
        time_remap = extract_animated_property(try_property(layer, TIME_REMAP), context)
        if time_remap is not None:
            result["timeRemap"] = time_remap

    return result


def extract_layer(layer: Any, context: ExtractionContext) -> Layer:
    """Extract everything relevant from a single host layer.

    Args:
        layer: Host layer
        context: Extraction context

    Returns:
        Layer descriptor, including its animation summary
    """
    layer_type = detect_layer_type(layer)

    result = Layer(
        index=_layer_index(layer),
        name=try_attr(layer, "name"),
        type=layer_type,
    )

    for key, attr in TIMING_FIELDS.items():
        result[key] = _number(try_attr(layer, attr))  # type: ignore[literal-required]
    for key, attr in FLAG_FIELDS.items():
        result[key] = _bool(try_attr(layer, attr))  # type: ignore[literal-required]

    result["blendMode"] = enum_name(try_attr(layer, "blending_mode"))
    result["is3D"] = try_attr(layer, "three_d_layer") is True

    # Hierarchy is recorded by index only
    result["parentIndex"] = _layer_index(try_attr(layer, "parent"))
    matte_type = enum_name(try_attr(layer, "track_matte_type"))
    result["trackMatteType"] = matte_type
    result["trackMatteLayer"] = _layer_index(try_attr(layer, "track_matte_layer"))

    result["transform"] = extract_transform(layer, context)
    result["masks"] = extract_masks(layer, context)
    result["effects"] = extract_effects(layer, context)

    if layer_type == "shape":
        result["shapeData"] = extract_shape_data(layer, context)
    elif layer_type == "text":
        result["textData"] = extract_text_data(layer, context)
    elif layer_type == "precomp":
        result["precompData"] = extract_precomp_data(layer, context)
    elif layer_type == "solid":
        result["solidData"] = extract_solid_data(layer)
    elif layer_type in ("image", "video"):
        result["footageData"] = extract_footage_data(layer)
    elif layer_type == "camera":
        result["cameraData"] = extract_camera_data(layer, context)
    elif layer_type == "light":
        result["lightData"] = extract_light_data(layer, context)

    result["animationSummary"] = compute_animation_summary(result)

    return result
