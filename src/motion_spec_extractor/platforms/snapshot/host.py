"""Host objects backed by a recorded project snapshot.

A snapshot is a JSON recording of a host project. Keys use the host's
scripting names (``matchName``, ``frameDuration``, ...); these classes expose
them under the attribute names of the host protocols in ``sources.base``.

Like a live host, a snapshot object raises when asked for a facet that was
not recorded, so the extractors see the same failure modes they see in
production.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from ...sources.base import PropertyValueType

if TYPE_CHECKING:
    from .source import SnapshotProject


def _field(key: str, convert: Callable[[Any], Any] | None = None) -> property:
    """Attribute backed by a snapshot key; raises AttributeError when absent."""

    def getter(self: "SnapshotObject") -> Any:
        try:
            value = self._data[key]
        except KeyError:
            raise AttributeError(f"{type(self).__name__} has no recorded '{key}'") from None
        return convert(value) if convert else value

    return property(getter)


class SnapshotObject:
    """Base class for objects wrapping one snapshot dictionary."""

    def __init__(self, data: dict[str, Any]):
        if not isinstance(data, dict):
            raise TypeError(f"{type(self).__name__} expects a mapping, got {type(data).__name__}")
        self._data = data

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._data.get('name', '?')!r}>"


class SnapshotEase(SnapshotObject):
    """One dimension of a temporal ease handle."""

    speed = _field("speed")
    influence = _field("influence")


class SnapshotTextDocument(SnapshotObject):
    """Value of a source text property."""

    text = _field("text")
    font = _field("font")
    font_size = _field("fontSize")
    fill_color = _field("fillColor")
    apply_stroke = _field("applyStroke")
    stroke_color = _field("strokeColor")
    stroke_width = _field("strokeWidth")
    tracking = _field("tracking")
    leading = _field("leading")
    justification = _field("justification")

    def __str__(self) -> str:
        return str(self._data.get("text", ""))


class SnapshotMarkerValue(SnapshotObject):
    comment = _field("comment")
    duration = _field("duration")


def _to_value_type(raw: Any) -> PropertyValueType:
    return PropertyValueType(str(raw).upper())


class SnapshotProperty(SnapshotObject):
    """A property or property group.

    Groups are recorded with a ``properties`` list, leaves with a
    ``valueType`` and either a ``value`` or a ``keyframes`` list.
    """

    name = _field("name")
    match_name = _field("matchName")
    value_type = _field("valueType", _to_value_type)
    expression = _field("expression")
    expression_enabled = _field("expressionEnabled")
    can_set_expression = _field("canSetExpression")
    is_modified = _field("isModified")
    dimensions_separated = _field("dimensionsSeparated")
    enabled = _field("enabled")
    mask_mode = _field("maskMode")
    inverted = _field("inverted")

    def __init__(self, data: dict[str, Any]):
        super().__init__(data)
        children = data.get("properties")
        self._children = [SnapshotProperty(child) for child in children] if children is not None else None

    @property
    def num_properties(self) -> int:
        if self._children is None:
            raise AttributeError(f"{self!r} is not a property group")
        return len(self._children)

    @property
    def value(self) -> Any:
        if "value" not in self._data:
            raise AttributeError(f"{self!r} has no recorded value")
        return self._convert(self._data["value"])

    @property
    def num_keys(self) -> int:
        if self._children is not None:
            raise AttributeError(f"{self!r} is a property group")
        return len(self._data.get("keyframes", []))

    def _convert(self, raw: Any) -> Any:
        if isinstance(raw, dict) and str(self._data.get("valueType", "")).upper() == PropertyValueType.TEXT_DOCUMENT.value:
            return SnapshotTextDocument(raw)
        return raw

    def _key(self, index: int) -> dict[str, Any]:
        keyframes = self._data.get("keyframes", [])
        if not 1 <= index <= len(keyframes):
            raise IndexError(f"Keyframe index {index} out of range for {self!r}")
        return keyframes[index - 1]

    def _key_field(self, index: int, key: str) -> Any:
        return self._key(index)[key]

    def key_time(self, index: int) -> float:
        return self._key_field(index, "time")

    def key_value(self, index: int) -> Any:
        return self._convert(self._key_field(index, "value"))

    def key_in_interpolation_type(self, index: int) -> Any:
        return self._key_field(index, "inInterpolation")

    def key_out_interpolation_type(self, index: int) -> Any:
        return self._key_field(index, "outInterpolation")

    def key_in_temporal_ease(self, index: int) -> list[SnapshotEase]:
        return [SnapshotEase(ease) for ease in self._key_field(index, "inEase")]

    def key_out_temporal_ease(self, index: int) -> list[SnapshotEase]:
        return [SnapshotEase(ease) for ease in self._key_field(index, "outEase")]

    def key_in_spatial_tangent(self, index: int) -> list[float]:
        return self._key_field(index, "inTangent")

    def key_out_spatial_tangent(self, index: int) -> list[float]:
        return self._key_field(index, "outTangent")

    def key_roving(self, index: int) -> bool:
        return self._key_field(index, "roving")

    def key_temporal_auto_bezier(self, index: int) -> bool:
        return self._key_field(index, "temporalAutoBezier")

    def key_temporal_continuous(self, index: int) -> bool:
        return self._key_field(index, "temporalContinuous")

    def key_spatial_auto_bezier(self, index: int) -> bool:
        return self._key_field(index, "spatialAutoBezier")

    def key_spatial_continuous(self, index: int) -> bool:
        return self._key_field(index, "spatialContinuous")

    # Keep after every @property in this class
    def property(self, index_or_name: int | str) -> "SnapshotProperty":
        """Look up a child by 1-based index, match name or display name.

        Raises:
            AttributeError: If this is not a group
            IndexError: If the index is out of range
            KeyError: If no child has that name
        """
        if self._children is None:
            raise AttributeError(f"{self!r} is not a property group")
        return _lookup(self._children, index_or_name)


def _lookup(children: list[Any], index_or_name: int | str) -> Any:
    if isinstance(index_or_name, int):
        if not 1 <= index_or_name <= len(children):
            raise IndexError(f"Property index {index_or_name} out of range")
        return children[index_or_name - 1]

    for child in children:
        if child._data.get("matchName") == index_or_name:
            return child
    for child in children:
        if child._data.get("name") == index_or_name:
            return child
    raise KeyError(index_or_name)


class SnapshotFile(SnapshotObject):
    name = _field("name")
    fs_name = _field("fsName")

    @property
    def exists(self) -> bool:
        # Recorded paths are assumed present unless marked otherwise
        return bool(self._data.get("exists", True))


class SnapshotFootageSource(SnapshotObject):
    """Main source of a footage item: solid, file or placeholder."""

    type_name = _field("typeName")
    color = _field("color")

    @property
    def file(self) -> SnapshotFile:
        if "file" not in self._data:
            raise AttributeError(f"{self!r} has no file")
        return SnapshotFile(self._data["file"])


class SnapshotFootageItem(SnapshotObject):
    name = _field("name")
    width = _field("width")
    height = _field("height")

    @property
    def type_name(self) -> str:
        return "Footage"

    @property
    def main_source(self) -> SnapshotFootageSource:
        return SnapshotFootageSource(self._data["mainSource"])


class SnapshotMarkers:
    """Marker track of a composition, exposed as a keyed property."""

    def __init__(self, markers: list[dict[str, Any]]):
        self._markers = markers

    @property
    def num_keys(self) -> int:
        return len(self._markers)

    def key_time(self, index: int) -> float:
        return self._markers[index - 1]["time"]

    def key_value(self, index: int) -> SnapshotMarkerValue:
        return SnapshotMarkerValue(self._markers[index - 1])


class SnapshotLayer(SnapshotObject):
    """A composition layer.

    ``parent`` and ``trackMatteLayer`` are recorded as layer indices and
    resolved against the owning composition. A precomp layer's source is
    recorded as ``{"composition": name}`` and resolved against the project.
    """

    name = _field("name")
    match_name = _field("matchName")
    in_point = _field("inPoint")
    out_point = _field("outPoint")
    start_time = _field("startTime")
    stretch = _field("stretch")
    enabled = _field("enabled")
    solo = _field("solo")
    shy = _field("shy")
    locked = _field("locked")
    blending_mode = _field("blendingMode")
    three_d_layer = _field("threeDLayer")
    adjustment_layer = _field("adjustmentLayer")
    null_layer = _field("nullLayer")
    track_matte_type = _field("trackMatteType")
    time_remap_enabled = _field("timeRemapEnabled")

    def __init__(self, data: dict[str, Any], index: int, composition: "SnapshotComposition"):
        super().__init__(data)
        self._index = index
        self._composition = composition
        self._children = [SnapshotProperty(child) for child in data.get("properties", [])]

    @property
    def index(self) -> int:
        return self._index

    @property
    def parent(self) -> "SnapshotLayer | None":
        return self._resolve_layer("parent")

    @property
    def track_matte_layer(self) -> "SnapshotLayer | None":
        return self._resolve_layer("trackMatteLayer")

    def _resolve_layer(self, key: str) -> "SnapshotLayer | None":
        index = self._data.get(key)
        if index is None:
            return None
        return self._composition.layer(index)

    @property
    def source(self) -> Any:
        source = self._data.get("source")
        if source is None:
            return None
        if "composition" in source:
            return self._composition.project.get_composition(source["composition"])
        return SnapshotFootageItem(source)

    def property(self, index_or_name: int | str) -> SnapshotProperty:
        return _lookup(self._children, index_or_name)


class SnapshotComposition(SnapshotObject):
    """A recorded composition with 1-based layer access."""

    name = _field("name")
    width = _field("width")
    height = _field("height")
    duration = _field("duration")
    bg_color = _field("bgColor")

    def __init__(self, data: dict[str, Any], project: "SnapshotProject"):
        super().__init__(data)
        self.project = project
        self._layers = [
            SnapshotLayer(layer, position, self)
            for position, layer in enumerate(data.get("layers", []), start=1)
        ]

    @property
    def type_name(self) -> str:
        return "Composition"

    @property
    def frame_duration(self) -> float:
        if "frameDuration" in self._data:
            return self._data["frameDuration"]
        return 1.0 / self._data["frameRate"]

    @property
    def num_layers(self) -> int:
        return len(self._layers)

    def layer(self, index: int) -> SnapshotLayer:
        if not 1 <= index <= len(self._layers):
            raise IndexError(f"Layer index {index} out of range for {self!r}")
        return self._layers[index - 1]

    @property
    def marker_property(self) -> SnapshotMarkers:
        return SnapshotMarkers(self._data.get("markers", []))
