"""Animation summary aggregation.

The summary is a pure reduction over already-extracted layer data: it never
touches the host and cannot fail.
"""

from collections.abc import Iterator

from ..core.types import AnimatedProperty, AnimationSummary, Layer, PropertySummary

# Transform slots scanned for the summary, in report order
SUMMARY_TRANSFORM_KEYS = (
    "anchorPoint",
    "position",
    "scale",
    "rotation",
    "opacity",
    "rotationX",
    "rotationY",
    "rotationZ",
    "orientation",
)
SEPARATED_AXES = ("x", "y", "z")


def iter_transform_properties(layer_data: Layer) -> Iterator[AnimatedProperty]:
    """Yield every present transform property, separated axes included."""
    transform = layer_data.get("transform") or {}
    for key in SUMMARY_TRANSFORM_KEYS:
        prop = transform.get(key)
        if prop:
            yield prop  # type: ignore[misc]

    separated = transform.get("positionSeparated") or {}
    for axis in SEPARATED_AXES:
        prop = separated.get(axis)
        if prop:
            yield prop  # type: ignore[misc]


def summarize_property(prop: AnimatedProperty) -> PropertySummary | None:
    """Digest one property.

    Returns:
        PropertySummary, or None unless the property has two or more keyframes
    """
    keyframes = prop.get("keyframes") or []
    if not prop.get("isAnimated") or len(keyframes) < 2:
        return None

    first, last = keyframes[0], keyframes[-1]
    easing = (first.get("temporalEasing") or {}).get("cubicBezier")

    return PropertySummary(
        name=prop.get("name"),
        keyframeCount=len(keyframes),
        startValue=first.get("value"),
        endValue=last.get("value"),
        duration=last["time"] - first["time"],
        delay=first["time"],
        easing=easing,
    )


def compute_animation_summary(layer_data: Layer) -> AnimationSummary:
    """Reduce a layer's transform animation to a summary.

    Args:
        layer_data: Layer descriptor with its transform already extracted

    Returns:
        AnimationSummary; isAnimated is True iff at least one property has
        two or more keyframes
    """
    properties = []
    for prop in iter_transform_properties(layer_data):
        summary = summarize_property(prop)
        if summary is not None:
            properties.append(summary)

    return AnimationSummary(
        isAnimated=bool(properties),
        animatedPropertyCount=len(properties),
        totalKeyframes=sum(p["keyframeCount"] for p in properties),
        properties=properties,
    )
