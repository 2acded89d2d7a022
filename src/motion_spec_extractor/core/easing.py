"""Conversion of speed/influence easing into normalized cubic Beziers.

Hosts describe the timing of a segment between two keyframes with
per-dimension ease handles:

    outInfluence  % of the segment duration for the first control point
    outSpeed      value units per second leaving the first keyframe
    inInfluence   % of the segment duration for the second control point
    inSpeed       value units per second entering the second keyframe

A normalized cubic Bezier runs from (0, 0) to (1, 1) with control points
(x1, y1) and (x2, y2). With linearSpeed = |valueChange| / duration:

    x1 = outInfluence
    y1 = x1 * |outSpeed| / linearSpeed
    x2 = 1 - inInfluence
    y2 = 1 - inInfluence * |inSpeed| / linearSpeed

Easy Ease (speed 0, influence 33.33%) gives (0.3333, 0, 0.6667, 1). A handle
speed equal to linearSpeed reproduces the straight line (y = x).
"""

from collections.abc import Sequence
from enum import Enum
from typing import Any

from .types import CubicBezier, PropertyValue
from .values import is_finite_number

# Below these thresholds a segment has no meaningful curve
VALUE_EPSILON = 0.0001
DURATION_EPSILON = 0.0001

PRECISION = 4

PRESET_EPSILON = 0.02

# Well-known curves, checked in order
EASING_PRESETS: list[tuple[str, tuple[float, float, float, float]]] = [
    ("linear", (0.0, 0.0, 1.0, 1.0)),
    ("ease", (0.25, 0.1, 0.25, 1.0)),
    ("ease-in", (0.42, 0.0, 1.0, 1.0)),
    ("ease-out", (0.0, 0.0, 0.58, 1.0)),
    ("ease-in-out", (0.42, 0.0, 0.58, 1.0)),
    ("easy-ease", (0.3333, 0.0, 0.6667, 1.0)),
]


class InterpolationKind(str, Enum):
    """Closed set of keyframe interpolation kinds."""

    LINEAR = "LINEAR"
    BEZIER = "BEZIER"
    HOLD = "HOLD"
    UNRECOGNIZED = "UNRECOGNIZED"

    @classmethod
    def from_host(cls, raw: Any) -> "InterpolationKind":
        """Map a host interpolation enumerant to a kind.

        Hosts report either the raw integer code (6612, 6613, 6614) or an
        enum member whose name or string form is LINEAR, BEZIER or HOLD.
        Anything else maps to UNRECOGNIZED.
        """
        if isinstance(raw, cls):
            return raw
        code = _as_int(raw)
        if code is not None:
            return HOST_INTERPOLATION_CODES.get(code, cls.UNRECOGNIZED)

        name = getattr(raw, "name", None) or str(raw)
        name = name.rsplit(".", 1)[-1].upper()
        if name in (cls.LINEAR.value, cls.BEZIER.value, cls.HOLD.value):
            return cls(name)
        return cls.UNRECOGNIZED


HOST_INTERPOLATION_CODES = {
    6612: InterpolationKind.LINEAR,
    6613: InterpolationKind.BEZIER,
    6614: InterpolationKind.HOLD,
}


def _as_int(raw: Any) -> int | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    if isinstance(raw, str) and raw.strip().isdigit():
        return int(raw.strip())
    return None


def format_number(value: float) -> str:
    """Format a coordinate without trailing zeros ("0.5", "1", "-0.25")."""
    text = f"{value:.{PRECISION}f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def make_bezier(x1: float, y1: float, x2: float, y2: float) -> CubicBezier:
    """Build a CubicBezier, clamping x to [0, 1] and rounding all coordinates.

    y coordinates are left unclamped; values outside [0, 1] encode
    overshoot or anticipation.
    """
    x1 = round(max(0.0, min(1.0, x1)), PRECISION)
    x2 = round(max(0.0, min(1.0, x2)), PRECISION)
    y1 = round(y1, PRECISION)
    y2 = round(y2, PRECISION)

    # Normalize -0.0 so that output compares and prints cleanly
    x1, y1, x2, y2 = (coord + 0.0 for coord in (x1, y1, x2, y2))

    bezier = CubicBezier(
        x1=x1,
        y1=y1,
        x2=x2,
        y2=y2,
        css=f"cubic-bezier({format_number(x1)}, {format_number(y1)}, "
        f"{format_number(x2)}, {format_number(y2)})",
    )
    preset = classify_easing_preset(x1, y1, x2, y2)
    if preset:
        bezier["preset"] = preset
    return bezier


def linear_bezier() -> CubicBezier:
    """The identity curve used for degenerate segments."""
    return make_bezier(0.0, 0.0, 1.0, 1.0)


def _handle(ease: Sequence[Any], dimension: int) -> tuple[float, float]:
    """Return (speed, influence) of an ease list for one dimension.

    Spatial properties carry a single handle for all dimensions, so a list
    shorter than the requested dimension falls back to its first entry.
    """
    entry = ease[dimension] if dimension < len(ease) else ease[0]
    return float(entry.speed), float(entry.influence)


def dominant_dimension(start_value: PropertyValue | None, end_value: PropertyValue | None) -> tuple[int, float]:
    """Find the dimension with the largest change across a segment.

    A near-constant axis can carry handles that look linear while the
    moving axis is heavily eased, so the moving axis decides.

    Args:
        start_value: Value at the first keyframe
        end_value: Value at the second keyframe

    Returns:
        Tuple of (dimension index, absolute delta). Scalars report dimension
        0. Values that are not numeric report a delta of 0.
    """
    if is_finite_number(start_value) and is_finite_number(end_value):
        return 0, abs(end_value - start_value)  # type: ignore[operator]

    if isinstance(start_value, list) and isinstance(end_value, list):
        best_index, best_delta = 0, 0.0
        for index, (start, end) in enumerate(zip(start_value, end_value)):
            if not (is_finite_number(start) and is_finite_number(end)):
                continue
            delta = abs(end - start)
            if delta > best_delta:
                best_index, best_delta = index, delta
        return best_index, best_delta

    return 0, 0.0


def convert_easing(
    out_ease: Sequence[Any],
    in_ease_next: Sequence[Any],
    segment_duration: float,
    start_value: PropertyValue | None,
    end_value: PropertyValue | None,
) -> CubicBezier:
    """Convert a segment's ease handles into a normalized cubic Bezier.

    Args:
        out_ease: Outgoing ease handles of the first keyframe (per dimension)
        in_ease_next: Incoming ease handles of the second keyframe
        segment_duration: Seconds between the two keyframes
        start_value: Value at the first keyframe
        end_value: Value at the second keyframe

    Returns:
        CubicBezier for the segment. Degenerate segments (no value change or
        no duration) return the identity curve.
    """
    dimension, delta = dominant_dimension(start_value, end_value)

    if delta < VALUE_EPSILON or segment_duration < DURATION_EPSILON:
        return linear_bezier()

    linear_speed = delta / segment_duration

    out_speed, out_influence = _handle(out_ease, dimension)
    in_speed, in_influence = _handle(in_ease_next, dimension)
    out_influence /= 100
    in_influence /= 100

    x1 = out_influence
    x2 = 1 - in_influence
    y1 = x1 * abs(out_speed) / linear_speed
    y2 = 1 - in_influence * abs(in_speed) / linear_speed

    return make_bezier(x1, y1, x2, y2)


def convert_easing_approx(out_ease: Sequence[Any], in_ease_next: Sequence[Any]) -> CubicBezier:
    """Approximate a segment's curve when the value change is unknown.

    Zero speed means a flat tangent; any other speed is treated as linear.
    Less accurate than convert_easing, which should be used whenever both
    endpoint values are known.
    """
    out_speed, out_influence = _handle(out_ease, 0)
    in_speed, in_influence = _handle(in_ease_next, 0)

    x1 = out_influence / 100
    x2 = 1 - in_influence / 100
    y1 = 0.0 if out_speed == 0 else x1
    y2 = 1.0 if in_speed == 0 else x2

    return make_bezier(x1, y1, x2, y2)


def classify_easing_preset(x1: float, y1: float, x2: float, y2: float) -> str | None:
    """Name the well-known preset a curve matches, if any.

    Returns:
        Preset name such as "ease-in-out" or "easy-ease", or None
    """
    for name, preset in EASING_PRESETS:
        if all(abs(a - b) < PRESET_EPSILON for a, b in zip((x1, y1, x2, y2), preset)):
            return name
    return None
