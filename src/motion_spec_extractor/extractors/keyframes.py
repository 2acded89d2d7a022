"""Keyframe and animated-property extraction.

Keyframes are read one facet at a time. Losing a facet (a spatial tangent,
an interpolation code) never loses the keyframe; only an unreadable time
drops a keyframe, because it cannot be placed.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from ..core.easing import InterpolationKind, convert_easing, convert_easing_approx
from ..core.types import (
    AnimatedProperty,
    CubicBezier,
    InterpolationType,
    Keyframe,
    PropertyValue,
    SpatialEasing,
    TemporalEasing,
)
from ..core.values import (
    dimensions_for,
    is_finite_number,
    normalize_value,
    read_property_value,
    read_value_type,
    shape_value,
)
from ..core.walker import is_property_animated, try_attr, try_call
from ..sources.base import PropertyValueType
from .context import ExtractionContext

# Optional per-keyframe flags: output key -> host method
KEYFRAME_FLAGS = {
    "roving": "key_roving",
    "temporalAutoBezier": "key_temporal_auto_bezier",
    "temporalContinuous": "key_temporal_continuous",
    "spatialAutoBezier": "key_spatial_auto_bezier",
    "spatialContinuous": "key_spatial_continuous",
}


@dataclass(frozen=True)
class EaseHandle:
    """One dimension of a temporal ease, detached from the host."""

    speed: float
    influence: float


@dataclass
class _KeyframeRecord:
    """Raw facets of one keyframe, read before segments are built."""

    time: float
    value: PropertyValue | None
    interpolation: InterpolationType | None
    in_ease: list[EaseHandle] | None
    out_ease: list[EaseHandle] | None
    spatial: SpatialEasing | None
    flags: dict[str, bool]


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def read_ease(raw: Any) -> list[EaseHandle] | None:
    """Copy a host ease list into EaseHandles.

    Returns:
        One handle per dimension, or None if any entry is unreadable
    """
    if raw is None or isinstance(raw, str):
        return None
    try:
        entries = list(raw)
    except TypeError:
        return None

    handles = []
    for entry in entries:
        speed = try_attr(entry, "speed")
        influence = try_attr(entry, "influence")
        if not (is_finite_number(speed) and is_finite_number(influence)):
            return None
        handles.append(EaseHandle(float(speed), float(influence)))
    return handles or None


def _read_tangent(raw: Any) -> list[float] | None:
    if not isinstance(raw, Sequence) or isinstance(raw, str):
        return None
    values = list(raw)
    if not all(is_finite_number(v) for v in values):
        return None
    return [float(v) for v in values]


def read_interpolation(prop: Any, index: int) -> InterpolationType | None:
    """Read both interpolation kinds of a keyframe.

    Returns:
        InterpolationType, or None when either side cannot be read
    """
    raw_in = try_call(try_attr(prop, "key_in_interpolation_type"), index)
    raw_out = try_call(try_attr(prop, "key_out_interpolation_type"), index)
    if raw_in is None or raw_out is None:
        return None

    in_kind = InterpolationKind.from_host(raw_in)
    out_kind = InterpolationKind.from_host(raw_out)
    result = InterpolationType(inType=in_kind.value, outType=out_kind.value)
    if in_kind is InterpolationKind.UNRECOGNIZED:
        result["rawInType"] = str(raw_in)
    if out_kind is InterpolationKind.UNRECOGNIZED:
        result["rawOutType"] = str(raw_out)
    return result


def _read_record(prop: Any, index: int, value_type: PropertyValueType | None) -> _KeyframeRecord | None:
    time = try_call(try_attr(prop, "key_time"), index)
    if not is_finite_number(time):
        return None

    raw_value = try_call(try_attr(prop, "key_value"), index)
    value = shape_value(normalize_value(raw_value), value_type)

    spatial = None
    in_tangent = _read_tangent(try_call(try_attr(prop, "key_in_spatial_tangent"), index))
    out_tangent = _read_tangent(try_call(try_attr(prop, "key_out_spatial_tangent"), index))
    if in_tangent is not None and out_tangent is not None:
        spatial = SpatialEasing(inTangent=in_tangent, outTangent=out_tangent)

    flags = {}
    for key, method in KEYFRAME_FLAGS.items():
        flag = try_call(try_attr(prop, method), index)
        if isinstance(flag, bool):
            flags[key] = flag

    return _KeyframeRecord(
        time=float(time),
        value=value,
        interpolation=read_interpolation(prop, index),
        in_ease=read_ease(try_call(try_attr(prop, "key_in_temporal_ease"), index)),
        out_ease=read_ease(try_call(try_attr(prop, "key_out_temporal_ease"), index)),
        spatial=spatial,
        flags=flags,
    )


def segment_bezier(current: _KeyframeRecord, following: _KeyframeRecord) -> CubicBezier | None:
    """Curve of the segment leaving ``current`` towards ``following``.

    Uses the value-aware conversion when both endpoint values are known and
    the speed-only approximation otherwise.

    Returns:
        CubicBezier, or None when the ease handles are unavailable
    """
    if current.out_ease is None or following.in_ease is None:
        return None

    duration = following.time - current.time
    if current.value is not None and following.value is not None:
        try:
            return convert_easing(current.out_ease, following.in_ease, duration, current.value, following.value)
        except (IndexError, TypeError, ValueError):
            pass

    try:
        return convert_easing_approx(current.out_ease, following.in_ease)
    except (IndexError, TypeError, ValueError):
        return None


def extract_keyframes(prop: Any, context: ExtractionContext) -> list[Keyframe]:
    """Extract the ordered keyframes of an animated host property.

    Args:
        prop: Host property with keyframes
        context: Extraction context (frame rate)

    Returns:
        Keyframes with contiguous 1-based indices and non-decreasing times
    """
    num_keys = try_attr(prop, "num_keys")
    if not isinstance(num_keys, int) or isinstance(num_keys, bool) or num_keys <= 0:
        return []

    value_type = read_value_type(prop)
    records = []
    for index in range(1, num_keys + 1):
        record = _read_record(prop, index, value_type)
        if record is not None:
            records.append(record)

    # Hosts report keys in time order; keep that guarantee even when they don't
    records.sort(key=lambda r: r.time)

    keyframes: list[Keyframe] = []
    for position, record in enumerate(records):
        keyframe = Keyframe(
            index=position + 1,
            time=record.time,
            frame=round_half_up(record.time * context.frame_rate),
            value=record.value,
            interpolationType=record.interpolation,
        )

        if record.in_ease is not None or record.out_ease is not None:
            # An unreadable side is reported empty; the other side still counts
            in_ease = record.in_ease or []
            out_ease = record.out_ease or []
            following = records[position + 1] if position + 1 < len(records) else None
            keyframe["temporalEasing"] = TemporalEasing(
                inSpeed=[h.speed for h in in_ease],
                inInfluence=[h.influence for h in in_ease],
                outSpeed=[h.speed for h in out_ease],
                outInfluence=[h.influence for h in out_ease],
                cubicBezier=segment_bezier(record, following) if following else None,
            )
        else:
            keyframe["temporalEasing"] = None

        if record.spatial is not None:
            keyframe["spatialEasing"] = record.spatial
        keyframe.update(record.flags)  # type: ignore[typeddict-item]

        keyframes.append(keyframe)

    return keyframes


def extract_expression(prop: Any) -> str | None:
    """Return the property's expression source when one is active."""
    if try_attr(prop, "can_set_expression") is False:
        return None
    if try_attr(prop, "expression_enabled") is not True:
        return None
    expression = try_attr(prop, "expression")
    if isinstance(expression, str) and expression != "":
        return expression
    return None


def extract_animated_property(prop: Any, context: ExtractionContext) -> AnimatedProperty | None:
    """Extract a single host property into a portable descriptor.

    The descriptor carries either keyframes (isAnimated True) or the static
    value (isAnimated False), plus the expression when one is active.

    Args:
        prop: Host property
        context: Extraction context

    Returns:
        AnimatedProperty, or None if the property is missing or holds no value
    """
    if prop is None:
        return None

    value_type = read_value_type(prop)
    if value_type == PropertyValueType.NO_VALUE:
        return None

    keyframes = extract_keyframes(prop, context) if is_property_animated(prop) else []
    # No readable keyframes: report the current value instead
    static_value = None if keyframes else read_property_value(prop)
    sample = keyframes[0]["value"] if keyframes else static_value

    result = AnimatedProperty(
        name=try_attr(prop, "name"),
        matchName=try_attr(prop, "match_name"),
        dimensions=dimensions_for(value_type, sample),
    )

    if keyframes:
        result["isAnimated"] = True
        result["keyframes"] = keyframes
    else:
        result["isAnimated"] = False
        result["staticValue"] = static_value

    expression = extract_expression(prop)
    if expression is not None:
        result["expression"] = expression

    return result
