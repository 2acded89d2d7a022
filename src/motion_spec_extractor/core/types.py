"""Type definitions for motion spec documents.

This module defines TypedDict classes that mirror the JSON schema structure
defined in core/motion_spec.schema.json. Keys are camelCase because they
are the wire format shared with downstream consumers.
"""

from typing import Literal, TypedDict, Union

# A normalized property value: number, list of numbers, string or boolean
PropertyValue = Union[float, int, list[float], str, bool]

LayerType = Literal[
    "shape",
    "text",
    "image",
    "video",
    "precomp",
    "null",
    "solid",
    "camera",
    "light",
    "adjustment",
]


class CubicBezier(TypedDict, total=False):
    """Normalized easing curve from (0, 0) to (1, 1)."""

    x1: float  # Always within [0, 1]
    y1: float  # Unclamped, values outside [0, 1] mean overshoot
    x2: float  # Always within [0, 1]
    y2: float  # Unclamped
    css: str  # e.g. "cubic-bezier(0.3333, 0, 0.6667, 1)"
    preset: str  # Well-known preset name, only when one matches


class TemporalEasing(TypedDict):
    """Speed/influence handles per dimension plus the outgoing curve."""

    inSpeed: list[float]
    inInfluence: list[float]
    outSpeed: list[float]
    outInfluence: list[float]
    cubicBezier: CubicBezier | None  # None on the last keyframe


class SpatialEasing(TypedDict):
    """Motion path tangents of a keyframe."""

    inTangent: list[float]
    outTangent: list[float]


class InterpolationType(TypedDict, total=False):
    """Interpolation kind on both sides of a keyframe."""

    inType: str  # LINEAR, BEZIER, HOLD or UNRECOGNIZED
    outType: str
    rawInType: str  # Host code, only for UNRECOGNIZED
    rawOutType: str


class Keyframe(TypedDict, total=False):
    """A single keyframe on an animated property."""

    index: int  # 1-based, contiguous
    time: float  # Seconds
    frame: int
    value: PropertyValue | None
    interpolationType: InterpolationType | None
    temporalEasing: TemporalEasing | None
    spatialEasing: SpatialEasing
    roving: bool
    temporalAutoBezier: bool
    temporalContinuous: bool
    spatialAutoBezier: bool
    spatialContinuous: bool


class AnimatedProperty(TypedDict, total=False):
    """A property that is either static or keyframed.

    Exactly one of staticValue (isAnimated False) or keyframes
    (isAnimated True) is present.
    """

    name: str | None
    matchName: str | None
    isAnimated: bool
    dimensions: int  # 1, 2 or 3
    expression: str
    staticValue: PropertyValue | None
    keyframes: list[Keyframe]


class PositionSeparated(TypedDict, total=False):
    """Separated position dimensions."""

    x: AnimatedProperty
    y: AnimatedProperty
    z: AnimatedProperty


class TransformProperties(TypedDict, total=False):
    """Layer transform group.

    Either position or positionSeparated is present, never both.
    """

    anchorPoint: AnimatedProperty
    position: AnimatedProperty
    positionSeparated: PositionSeparated
    scale: AnimatedProperty
    rotation: AnimatedProperty
    rotationX: AnimatedProperty
    rotationY: AnimatedProperty
    rotationZ: AnimatedProperty
    orientation: AnimatedProperty
    opacity: AnimatedProperty


class PropertySummary(TypedDict):
    """Digest of one property with at least two keyframes."""

    name: str | None
    keyframeCount: int
    startValue: PropertyValue | None
    endValue: PropertyValue | None
    duration: float  # Last keyframe time minus first
    delay: float  # First keyframe time
    easing: CubicBezier | None  # First segment's curve


class AnimationSummary(TypedDict):
    """Digest of a layer's transform animation."""

    isAnimated: bool
    animatedPropertyCount: int
    totalKeyframes: int
    properties: list[PropertySummary]


class ShapeGroupData(TypedDict, total=False):
    """Node of the vector shape content tree."""

    name: str | None
    matchName: str | None
    type: str
    contents: list["ShapeGroupData"]  # Only for type 'group'
    properties: list[AnimatedProperty]


class TextSelector(TypedDict):
    start: AnimatedProperty | None
    end: AnimatedProperty | None
    offset: AnimatedProperty | None
    type: str | None


class TextAnimatorData(TypedDict):
    name: str | None
    properties: list[AnimatedProperty]
    selector: TextSelector | None


class TextLayerData(TypedDict, total=False):
    """Source text, styling and animators of a text layer."""

    sourceText: AnimatedProperty | None
    font: str | None
    fontSize: float | None
    fillColor: list[float] | None
    strokeColor: list[float]
    strokeWidth: float
    tracking: float | None
    leading: float | None
    justification: str | None
    animators: list[TextAnimatorData]


class SolidData(TypedDict):
    color: list[float] | None
    width: int | None
    height: int | None


class FootageData(TypedDict):
    sourceFile: str | None  # Full path on the host machine
    sourceFileName: str | None


class PrecompData(TypedDict, total=False):
    compositionName: str | None
    composition: "Composition"  # Only when expanded
    timeRemap: AnimatedProperty


class CameraData(TypedDict, total=False):
    zoom: AnimatedProperty | None
    depthOfField: bool | None
    focusDistance: AnimatedProperty
    aperture: AnimatedProperty
    blurLevel: AnimatedProperty


class LightData(TypedDict, total=False):
    lightType: str | None
    intensity: AnimatedProperty | None
    color: AnimatedProperty | None
    coneAngle: AnimatedProperty
    coneFeather: AnimatedProperty
    shadowDarkness: AnimatedProperty
    shadowDiffusion: AnimatedProperty


class MaskData(TypedDict):
    name: str | None
    mode: str | None
    inverted: bool | None
    path: AnimatedProperty | None
    feather: AnimatedProperty | None
    opacity: AnimatedProperty | None
    expansion: AnimatedProperty | None


class EffectData(TypedDict):
    name: str | None
    matchName: str | None
    enabled: bool | None
    properties: list[AnimatedProperty]


class Layer(TypedDict, total=False):
    """A single layer of a composition.

    At most one type-specific payload (shapeData, textData, ...) is
    present, and it matches the layer type.
    """

    index: int | None
    name: str | None
    type: LayerType
    inPoint: float | None
    outPoint: float | None
    startTime: float | None
    stretch: float | None
    enabled: bool | None
    solo: bool | None
    shy: bool | None
    locked: bool | None
    blendMode: str | None
    is3D: bool
    parentIndex: int | None
    trackMatteType: str | None
    trackMatteLayer: int | None
    transform: TransformProperties
    masks: list[MaskData]
    effects: list[EffectData]
    shapeData: list[ShapeGroupData]
    textData: TextLayerData
    precompData: PrecompData
    solidData: SolidData
    footageData: FootageData
    cameraData: CameraData
    lightData: LightData
    animationSummary: AnimationSummary


class Marker(TypedDict):
    time: float | None
    duration: float | None
    comment: str | None


class Composition(TypedDict):
    """Composition settings, markers and the ordered layer stack."""

    name: str | None
    width: int | None
    height: int | None
    frameRate: float | None
    duration: float | None
    backgroundColor: list[float] | None
    markers: list[Marker]
    layers: list[Layer]  # Host stacking order


class ExportInfo(TypedDict):
    exportedAt: str  # ISO 8601, UTC
    hostName: str | None
    hostVersion: str | None
    extractorVersion: str
    sourceFile: str


class Document(TypedDict):
    """Root of a motion spec export."""

    version: str  # Schema generation, e.g. "1.0.0"
    exportInfo: ExportInfo
    composition: Composition
