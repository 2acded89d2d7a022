"""Normalization of host property values into portable values.

A portable value is a number, a list of numbers, a string or a boolean.
Anything else the host hands back (shape paths, text documents, ...) is
coerced to its string form. Non-finite numbers are left alone; the
serializer deals with them.
"""

import math
from collections.abc import Sequence
from numbers import Real
from typing import Any

from ..sources.base import PropertyValueType
from .types import PropertyValue
from .walker import try_attr

# Number of value dimensions per host value type. Anything missing is 1-D.
DIMENSIONS_BY_VALUE_TYPE = {
    PropertyValueType.TWO_D: 2,
    PropertyValueType.TWO_D_SPATIAL: 2,
    PropertyValueType.THREE_D: 3,
    PropertyValueType.THREE_D_SPATIAL: 3,
    PropertyValueType.COLOR: 3,
}

COLOR_PRECISION = 4


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def normalize_value(raw: Any) -> PropertyValue | None:
    """Convert a raw host value into a portable value.

    Args:
        raw: Value as returned by the host

    Returns:
        A number, list of numbers, string or boolean. None when the value
        is missing or cannot even be stringified.
    """
    if raw is None:
        return None
    # bool before numbers: bool is an int subclass
    if isinstance(raw, bool) or isinstance(raw, str):
        return raw
    if _is_number(raw):
        return raw  # type: ignore[return-value]

    if isinstance(raw, Sequence) and not isinstance(raw, (bytes, bytearray)):
        if all(_is_number(item) for item in raw):
            return list(raw)

    # Last resort for exotic host types
    try:
        return str(raw)
    except Exception:
        return None


def read_value_type(prop: Any) -> PropertyValueType | None:
    """Read a property's value type, tolerating raw strings from the host.

    Returns:
        The value type, or None when it cannot be read or is unknown
    """
    raw = try_attr(prop, "value_type")
    if raw is None:
        return None
    if isinstance(raw, PropertyValueType):
        return raw
    try:
        return PropertyValueType(str(raw).upper())
    except ValueError:
        return None


def dimensions_for(value_type: PropertyValueType | None, value: Any = None) -> int:
    """Map a value type to its number of dimensions (1, 2 or 3).

    When the value type is unknown the shape of ``value`` decides, so an
    untyped [x, y] still reports 2 dimensions.
    """
    if value_type is None:
        if isinstance(value, list) and len(value) in (2, 3):
            return len(value)
        return 1
    return DIMENSIONS_BY_VALUE_TYPE.get(value_type, 1)


def trim_color(color: Any) -> list[float] | None:
    """Reduce a host color to rounded RGB, dropping any alpha channel.

    Args:
        color: Host color, usually [r, g, b] or [r, g, b, a] in 0-1

    Returns:
        [r, g, b] rounded to four decimals, or None when unreadable
    """
    if not isinstance(color, Sequence) or isinstance(color, str):
        return None
    channels = list(color)[:3]
    if not channels or not all(_is_number(c) for c in channels):
        return None
    return [round(float(c), COLOR_PRECISION) for c in channels]


def shape_value(value: PropertyValue | None, value_type: PropertyValueType | None) -> PropertyValue | None:
    """Make array data agree with the dimension count of its value type.

    Colors lose their alpha channel so that they are reported as 3-D.
    """
    if value_type == PropertyValueType.COLOR and isinstance(value, list):
        return trim_color(value)
    return value


def read_property_value(prop: Any) -> PropertyValue | None:
    """Safely read and normalize the current value of a host property.

    Returns:
        The normalized value, or None when the property holds no value or
        the read fails. None means "unavailable", never zero or empty.
    """
    if prop is None:
        return None
    value_type = read_value_type(prop)
    if value_type == PropertyValueType.NO_VALUE:
        return None

    try:
        raw = prop.value
    except Exception:
        return None

    return shape_value(normalize_value(raw), value_type)


def is_finite_number(value: Any) -> bool:
    """True for real, finite, non-boolean numbers."""
    return _is_number(value) and math.isfinite(value)


def enum_name(raw: Any) -> str | None:
    """Render a host enumerant as its bare name ("ADD", "MULTIPLY", ...)."""
    if raw is None:
        return None
    name = getattr(raw, "name", None)
    if isinstance(name, str):
        return name
    return str(raw).rsplit(".", 1)[-1]
